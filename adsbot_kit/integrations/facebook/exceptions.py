from __future__ import annotations
import logging
from typing import Any, Dict, Optional
import httpx
logger = logging.getLogger("facebook.exceptions")
class FacebookError(Exception):
    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)
    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n{self.details}"
        return self.message
class FacebookAPIError(FacebookError):
    CODE_INVALID_PARAMS = 100
    CODE_AUTH_EXPIRED = 190
    CODE_PERMISSION_DENIED = 200
    CODE_INSUFFICIENT_PERMISSIONS = 80004
    CODE_AD_ACCOUNT_DISABLED = 2635
    RATE_LIMIT_CODES = {4, 17, 32, 613}
    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "",
        user_msg: Optional[str] = None,
        fbtrace_id: Optional[str] = None,
    ):
        self.code = code
        self.error_type = error_type
        self.user_msg = user_msg
        self.fbtrace_id = fbtrace_id
        super().__init__(message, user_msg)
    @classmethod
    def from_payload(cls, payload: Dict[str, Any], http_status: int) -> "FacebookAPIError":
        err = payload.get("error") or {}
        if not isinstance(err, dict):
            err = {"message": str(err)}
        return cls(
            code=int(err.get("code") or http_status),
            message=err.get("message") or "Unknown error",
            error_type=err.get("type", ""),
            user_msg=err.get("error_user_msg"),
            fbtrace_id=err.get("fbtrace_id"),
        )
    @property
    def is_rate_limit(self) -> bool:
        return self.code in self.RATE_LIMIT_CODES
    @property
    def is_auth_error(self) -> bool:
        return self.code == self.CODE_AUTH_EXPIRED
    def format_for_user(self) -> str:
        if self.is_auth_error:
            return f"Access token rejected, generate a new META_ACCESS_TOKEN ({self.message})"
        if self.is_rate_limit:
            return f"Rate limit reached, try again in a few minutes ({self.message})"
        if self.code in (self.CODE_PERMISSION_DENIED, self.CODE_INSUFFICIENT_PERMISSIONS):
            return f"Insufficient permissions, the token needs ads_management ({self.message})"
        if self.code == self.CODE_AD_ACCOUNT_DISABLED:
            return f"Ad account is disabled ({self.message})"
        return f"Facebook API error {self.code}: {self.message}"
class FacebookAuthError(FacebookError):
    def __init__(self, message: str = "META_ACCESS_TOKEN is not configured"):
        super().__init__(message)
class FacebookValidationError(FacebookError):
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error for '{field}': {message}")
class FacebookTransportError(FacebookError):
    def __init__(self, cause: httpx.HTTPError):
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")
class FacebookTimeoutError(FacebookTransportError):
    def __init__(self, cause: httpx.TimeoutException, timeout: float):
        super().__init__(cause)
        self.message = f"Request timed out after {timeout} seconds"
        self.args = (self.message,)
async def parse_api_error(response: httpx.Response) -> FacebookAPIError:
    try:
        error_data = response.json()
    except ValueError:
        error_data = None
    if isinstance(error_data, dict) and "error" in error_data:
        return FacebookAPIError.from_payload(error_data, response.status_code)
    logger.info("Graph API answered %d without an error payload", response.status_code)
    return FacebookAPIError(
        code=response.status_code,
        message=f"HTTP {response.status_code}: {response.text[:500]}",
    )
