"""
Facebook Ad Set Operations

Reading the ad set list of the configured account and switching a single
ad set between ACTIVE and PAUSED.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, TYPE_CHECKING

from ..exceptions import FacebookAPIError, FacebookError
from ..models import AdSet, AdSetStatus, ToggleOutcome
from ..utils import normalize_adsets

if TYPE_CHECKING:
    from ..client import FacebookAdsClient

logger = logging.getLogger("facebook.operations.adsets")

ADSET_FIELDS = "id,name,status,daily_budget,lifetime_budget,created_time,updated_time"
INSIGHT_FIELDS = "spend,impressions,clicks,reach,ctr"
DATE_PRESETS = ("today", "yesterday")
# One page, one request: accounts with more ad sets than this show the first page only
ADSET_LIST_LIMIT = 200
# Graph node ids are digits only, the id becomes the request path
ADSET_ID_RE = re.compile(r"[0-9]+")
NOT_AN_ADSET_ID = "not an ad set id"


def adset_list_fields(date_preset: Optional[str] = None) -> str:
    if date_preset:
        if date_preset not in DATE_PRESETS:
            raise ValueError(f"date_preset must be one of {DATE_PRESETS}, got {date_preset!r}")
        return f"{ADSET_FIELDS},insights.date_preset({date_preset}){{{INSIGHT_FIELDS}}}"
    return f"{ADSET_FIELDS},insights{{{INSIGHT_FIELDS}}}"


async def fetch_adsets(
    client: "FacebookAdsClient",
    date_preset: Optional[str] = None,
) -> Optional[List[AdSet]]:
    """
    List the ad sets of the client's ad account with their insights.

    Args:
        client: Facebook client with token and ad account
        date_preset: None for lifetime insights, or "today" / "yesterday"

    Returns:
        Normalized ad sets, or None if the call failed for any reason
    """
    try:
        data = await client.get(
            f"{client.ad_account_id}/adsets",
            params={"fields": adset_list_fields(date_preset), "limit": ADSET_LIST_LIMIT},
        )
        adsets = normalize_adsets(data.get("data", []), client.currency)
    except FacebookAPIError as e:
        logger.warning("Ad set list failed, code=%s: %s", e.code, e.message)
        return None
    except FacebookError as e:
        logger.warning("Ad set list failed: %s", e.message)
        return None
    except Exception as e:
        logger.warning("Ad set list failed unexpectedly: %s", e, exc_info=e)
        return None
    logger.info("Fetched %d ad sets from %s", len(adsets), client.ad_account_id)
    return adsets


async def update_adset_status(
    client: "FacebookAdsClient",
    adset_id: str,
    status: AdSetStatus,
) -> ToggleOutcome:
    """
    POST /{adset_id} with the new status. status must be an AdSetStatus or its
    value, a bad one raises ValueError before any request. Past that it never
    raises: an id that is not a numeric node id fails without a request, and
    the outcome carries the platform's error message when the change was not
    applied.
    """
    status = AdSetStatus(status)
    if not ADSET_ID_RE.fullmatch(adset_id or ""):
        logger.info("Ad set %r -> %s refused, not a node id", adset_id, status.value)
        return ToggleOutcome(id=adset_id, success=False, action_label=status.label, error_message=NOT_AN_ADSET_ID)
    try:
        result = await client.post(adset_id, form_data={"status": status.value})
    except FacebookAPIError as e:
        logger.info("Ad set %s -> %s rejected, code=%s: %s", adset_id, status.value, e.code, e.message)
        return ToggleOutcome(id=adset_id, success=False, action_label=status.label, error_message=e.format_for_user())
    except FacebookError as e:
        logger.info("Ad set %s -> %s failed: %s", adset_id, status.value, e.message)
        return ToggleOutcome(id=adset_id, success=False, action_label=status.label, error_message=e.message)
    except Exception as e:
        logger.warning("Ad set %s -> %s failed unexpectedly: %s", adset_id, status.value, e, exc_info=e)
        return ToggleOutcome(id=adset_id, success=False, action_label=status.label, error_message=f"{type(e).__name__}: {e}")

    if result.get("success") is True:
        logger.info("Ad set %s -> %s", adset_id, status.value)
        return ToggleOutcome(id=adset_id, success=True, action_label=status.label)
    return ToggleOutcome(
        id=adset_id,
        success=False,
        action_label=status.label,
        error_message=f"Unexpected response: {str(result)[:200]}",
    )
