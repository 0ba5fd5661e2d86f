from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional
import httpx
from .exceptions import (
    FacebookAPIError,
    FacebookAuthError,
    FacebookTimeoutError,
    FacebookTransportError,
    parse_api_error,
)
from .utils import validate_ad_account_id
logger = logging.getLogger("facebook.client")
API_BASE = "https://graph.facebook.com"
API_VERSION = "v19.0"
DEFAULT_TIMEOUT = 30.0
class FacebookAdsClient:
    """
    Graph API client holding the single access token the bot runs with.
    One request per call: no retries, no backoff, the only time limit is the
    transport timeout.
    """
    def __init__(
        self,
        access_token: str = "",
        ad_account_id: str = "",
        currency: str = "JPY",
        api_version: str = API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._access_token = (access_token or "").strip()
        self._ad_account_id = ""
        if ad_account_id and str(ad_account_id).strip():
            self._ad_account_id = validate_ad_account_id(ad_account_id)
        self.currency = currency
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport
    @property
    def ad_account_id(self) -> str:
        return self._ad_account_id
    @property
    def access_token(self) -> str:
        return self._access_token
    @property
    def missing_credentials(self) -> List[str]:
        missing = []
        if not self._access_token:
            missing.append("META_ACCESS_TOKEN")
        if not self._ad_account_id:
            missing.append("META_AD_ACCOUNT_ID")
        return missing
    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.request("GET", endpoint, params=params)
    async def post(self, endpoint: str, form_data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.request("POST", endpoint, form_data=form_data)
    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        form_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        if not self._access_token:
            raise FacebookAuthError()
        url = f"{API_BASE}/{self.api_version}/{endpoint}"
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                if method == "GET":
                    query = dict(params or {})
                    query["access_token"] = self._access_token
                    response = await client.get(url, params=query)
                elif method == "POST":
                    body = dict(form_data or {})
                    body["access_token"] = self._access_token
                    response = await client.post(url, data=body)
                else:
                    raise ValueError(f"Unsupported HTTP method: {method}")
        except httpx.TimeoutException as e:
            raise FacebookTimeoutError(e, self.timeout) from e
        except httpx.HTTPError as e:
            raise FacebookTransportError(e) from e
        if response.status_code != 200:
            raise await parse_api_error(response)
        try:
            payload = response.json()
        except ValueError:
            raise FacebookAPIError(response.status_code, f"Response is not JSON: {response.text[:200]}")
        if not isinstance(payload, dict):
            raise FacebookAPIError(response.status_code, f"Unexpected response shape: {type(payload).__name__}")
        if "error" in payload:
            raise FacebookAPIError.from_payload(payload, response.status_code)
        logger.debug("%s %s -> %d", method, endpoint, response.status_code)
        return payload
