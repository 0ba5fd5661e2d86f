"""
Facebook Ads API Integration

The part of the Marketing API the ads bot needs:
- Pydantic models for ad sets, account info and toggle outcomes
- Async HTTP client with a single access token, one attempt per call
- Read operations that return None instead of raising
- Status update returning an outcome per ad set

Usage:
    from adsbot_kit.integrations.facebook import FacebookAdsClient, operations

    client = FacebookAdsClient(access_token, "act_123456")
    adsets = await operations.fetch_adsets(client)
    if adsets is None:
        ...  # network or API problem, already logged
"""

from __future__ import annotations

from .client import FacebookAdsClient
from .models import (
    AdSet,
    AdSetStatus,
    AccountInfo,
    AccountStatus,
    Insights,
    ToggleOutcome,
)
from .exceptions import (
    FacebookError,
    FacebookAPIError,
    FacebookAuthError,
    FacebookValidationError,
    FacebookTransportError,
    FacebookTimeoutError,
)
from .utils import (
    validate_ad_account_id,
    format_currency,
    format_minor_units,
    format_account_status,
)
from . import operations

__all__ = [
    # Client
    "FacebookAdsClient",
    # Models
    "AdSet",
    "AdSetStatus",
    "AccountInfo",
    "AccountStatus",
    "Insights",
    "ToggleOutcome",
    # Exceptions
    "FacebookError",
    "FacebookAPIError",
    "FacebookAuthError",
    "FacebookValidationError",
    "FacebookTransportError",
    "FacebookTimeoutError",
    # Utils
    "validate_ad_account_id",
    "format_currency",
    "format_minor_units",
    "format_account_status",
    # Operations module
    "operations",
]
