from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from adsbot_kit.integrations.facebook.exceptions import FacebookValidationError
from adsbot_kit.integrations.facebook.models import AccountInfo, AdSet, Insights

logger = logging.getLogger("facebook.utils")

# Currencies the Graph API reports without a minor unit: budget "1000" in JPY is 1000 yen
ZERO_DECIMAL_CURRENCIES = {
    "CLP", "COP", "CRC", "HUF", "ISK", "IDR", "JPY", "KRW", "PYG", "TWD", "VND",
}

CURRENCY_SYMBOLS = {
    "JPY": "¥",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "KRW": "₩",
}


def validate_ad_account_id(ad_account_id: str) -> str:
    if not ad_account_id:
        raise FacebookValidationError("ad_account_id", "is required")
    ad_account_id = str(ad_account_id).strip()
    if not ad_account_id:
        raise FacebookValidationError("ad_account_id", "cannot be empty")
    if not ad_account_id.startswith("act_"):
        return f"act_{ad_account_id}"
    return ad_account_id


def minor_units_factor(currency: str) -> int:
    if (currency or "").upper() in ZERO_DECIMAL_CURRENCIES:
        return 1
    return 100


def format_currency(amount: float, currency: str = "JPY") -> str:
    """Format an amount that is already in major units (yen, dollars)."""
    currency = (currency or "").upper()
    symbol = CURRENCY_SYMBOLS.get(currency)
    if minor_units_factor(currency) == 1:
        text = f"{amount:,.0f}"
    else:
        text = f"{amount:,.2f}"
    if symbol:
        return f"{symbol}{text}"
    return f"{text} {currency}".rstrip()


def format_minor_units(amount: int, currency: str = "JPY") -> str:
    return format_currency(amount / minor_units_factor(currency), currency)


def format_account_status(status_code: int) -> str:
    status_map = {
        1: "Active",
        2: "Disabled",
        3: "Unsettled",
        7: "Pending Risk Review",
        8: "Pending Settlement",
        9: "In Grace Period",
        100: "Pending Closure",
        101: "Closed",
        201: "Temporarily Unavailable",
    }
    return status_map.get(status_code, f"Unknown ({status_code})")


def normalize_insights_data(raw_data: Any) -> Optional[Insights]:
    """
    Insights come as an edge: {"data": [{...}], "paging": {...}}. An ad set
    without delivery in the window has no "insights" key at all, that is None here.
    """
    if not raw_data:
        return None
    if isinstance(raw_data, dict) and "data" in raw_data:
        rows = raw_data.get("data") or []
        if not isinstance(rows, list) or not rows:
            return None
        raw_data = rows[0]
    if not isinstance(raw_data, dict):
        logger.info("Ignoring insights of type %s", type(raw_data).__name__)
        return None
    try:
        return Insights(**raw_data)
    except ValidationError as e:
        logger.info("Ignoring malformed insights: %s", e.errors()[0].get("msg"))
        return None


def normalize_adset(raw: Any, currency: str = "JPY") -> Optional[AdSet]:
    """
    Map one raw Graph API ad set into AdSet. Malformed fields become absent,
    a record without an id cannot be toggled and is dropped.
    """
    if not isinstance(raw, dict):
        logger.info("Dropping ad set record of type %s", type(raw).__name__)
        return None
    factor = minor_units_factor(currency)
    fields: Dict[str, Any] = dict(raw)
    for key in ("daily_budget", "lifetime_budget"):
        if key in fields:
            fields[key] = _minor_to_major(fields[key], factor)
    fields["insights"] = normalize_insights_data(raw.get("insights"))
    try:
        return AdSet(**fields)
    except ValidationError as e:
        logger.info("Dropping malformed ad set record %r: %s", raw.get("id"), e.errors()[0].get("msg"))
        return None


def normalize_adsets(raw_list: Any, currency: str = "JPY") -> List[AdSet]:
    if not isinstance(raw_list, list):
        return []
    result = []
    for raw in raw_list:
        adset = normalize_adset(raw, currency)
        if adset is not None:
            result.append(adset)
    return result


def normalize_account_info(raw: Dict[str, Any], date_preset: Optional[str] = None) -> AccountInfo:
    fields = dict(raw)
    fields["insights"] = normalize_insights_data(raw.get("insights"))
    fields["date_preset"] = date_preset
    return AccountInfo(**fields)


def _minor_to_major(value: Any, factor: int) -> Any:
    try:
        return float(value) / factor
    except (TypeError, ValueError):
        # AdSet validators turn it into None
        return value
