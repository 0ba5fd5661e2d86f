"""
Sample ad sets shown whenever live data is not available: no credentials
configured, or the Graph API call failed. Replies built from these records
are marked as demo data.
"""

from datetime import datetime, timezone
from typing import Tuple

from adsbot_kit.integrations.facebook.models import AdSet, AdSetStatus

_CREATED = datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)
_UPDATED = datetime(2025, 1, 20, 9, 0, tzinfo=timezone.utc)

# Frozen models in a tuple, nobody can change them at runtime
DEMO_ADSETS: Tuple[AdSet, ...] = (
    AdSet(
        id="demo_adset_001",
        name="Demo AdSet - Spring Sale",
        status=AdSetStatus.ACTIVE,
        daily_budget=10000,
        spend_today=8500,
        created_time=_CREATED,
        updated_time=_UPDATED,
    ),
    AdSet(
        id="demo_adset_002",
        name="Demo AdSet - Retargeting",
        status=AdSetStatus.PAUSED,
        daily_budget=5000,
        spend_today=0,
        created_time=_CREATED,
        updated_time=_UPDATED,
    ),
    AdSet(
        id="demo_adset_003",
        name="Demo AdSet - Lookalike 1%",
        status=AdSetStatus.ACTIVE,
        daily_budget=15000,
        spend_today=12000,
        created_time=_CREATED,
        updated_time=_UPDATED,
    ),
)


def demo_adsets() -> Tuple[AdSet, ...]:
    return DEMO_ADSETS
