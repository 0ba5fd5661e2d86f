"""
Facebook Ad Account Operations

Balance, status and one day of spend for the configured ad account.
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from ..exceptions import FacebookAPIError, FacebookError
from ..models import AccountInfo
from ..utils import normalize_account_info
from .adsets import DATE_PRESETS, INSIGHT_FIELDS

if TYPE_CHECKING:
    from ..client import FacebookAdsClient

logger = logging.getLogger("facebook.operations.accounts")

AD_ACCOUNT_FIELDS = "id,name,balance,account_status,currency"


def account_info_fields(date_preset: str = "today") -> str:
    if date_preset not in DATE_PRESETS:
        raise ValueError(f"date_preset must be one of {DATE_PRESETS}, got {date_preset!r}")
    return f"{AD_ACCOUNT_FIELDS},insights.date_preset({date_preset}){{{INSIGHT_FIELDS}}}"


async def fetch_account_info(
    client: "FacebookAdsClient",
    date_preset: str = "today",
) -> Optional[AccountInfo]:
    """
    Read the ad account with the insights of one day.

    Returns:
        AccountInfo, or None if the call failed for any reason
    """
    try:
        data = await client.get(
            client.ad_account_id,
            params={"fields": account_info_fields(date_preset)},
        )
        info = normalize_account_info(data, date_preset)
    except FacebookAPIError as e:
        logger.warning("Account info failed, code=%s: %s", e.code, e.message)
        return None
    except FacebookError as e:
        logger.warning("Account info failed: %s", e.message)
        return None
    except Exception as e:
        logger.warning("Account info failed unexpectedly: %s", e, exc_info=e)
        return None
    logger.info("Fetched account info for %s (%s)", client.ad_account_id, date_preset)
    return info
