"""
Live or demo: every read command starts here.

resolve_adsets() never raises. It returns LiveAdSets when the Graph API
answered, FallbackAdSets with the demo records otherwise. The class of the
result is the provenance, it holds for the whole record set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union, TYPE_CHECKING

from adsbot_kit.adsets.fixtures import demo_adsets
from adsbot_kit.integrations.facebook.models import AdSet
from adsbot_kit.integrations.facebook.operations import fetch_adsets

if TYPE_CHECKING:
    from adsbot_kit.integrations.facebook.client import FacebookAdsClient

logger = logging.getLogger("adsets.resolver")

REASON_NO_CREDENTIALS = "credentials missing"
REASON_FETCH_FAILED = "live fetch failed"


@dataclass(frozen=True)
class LiveAdSets:
    records: Tuple[AdSet, ...]
    is_live: ClassVar[bool] = True

    @property
    def provenance(self) -> str:
        return "🟢 Live data from Meta"


@dataclass(frozen=True)
class FallbackAdSets:
    records: Tuple[AdSet, ...]
    reason: str
    is_live: ClassVar[bool] = False

    @property
    def provenance(self) -> str:
        return f"🟡 Demo data ({self.reason})"


ResolvedAdSets = Union[LiveAdSets, FallbackAdSets]


async def resolve_adsets(
    client: "FacebookAdsClient",
    date_preset: Optional[str] = None,
) -> ResolvedAdSets:
    missing = client.missing_credentials
    if missing:
        logger.info("Using demo ad sets, not configured: %s", ", ".join(missing))
        return FallbackAdSets(demo_adsets(), REASON_NO_CREDENTIALS)

    adsets = await fetch_adsets(client, date_preset)
    if adsets is None:
        logger.info("Using demo ad sets, live fetch for %s failed", client.ad_account_id)
        return FallbackAdSets(demo_adsets(), REASON_FETCH_FAILED)

    logger.info("Using %d live ad sets from %s", len(adsets), client.ad_account_id)
    return LiveAdSets(tuple(adsets))
