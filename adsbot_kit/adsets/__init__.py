"""
Ad set engine: where the records come from, what the numbers say about them,
and switching many of them at once.
"""

from .fixtures import DEMO_ADSETS, demo_adsets
from .resolver import (
    LiveAdSets,
    FallbackAdSets,
    ResolvedAdSets,
    resolve_adsets,
)
from .stats import (
    WARNING_THRESHOLD,
    AdSetSearchResult,
    AdSetStats,
    search_adsets,
    aggregate_adsets,
    over_budget_adsets,
)
from .bulk import (
    BulkToggleResult,
    parse_adset_ids,
    parse_target_status,
    bulk_set_status,
)

__all__ = [
    "DEMO_ADSETS",
    "demo_adsets",
    "LiveAdSets",
    "FallbackAdSets",
    "ResolvedAdSets",
    "resolve_adsets",
    "WARNING_THRESHOLD",
    "AdSetSearchResult",
    "AdSetStats",
    "search_adsets",
    "aggregate_adsets",
    "over_budget_adsets",
    "BulkToggleResult",
    "parse_adset_ids",
    "parse_target_status",
    "bulk_set_status",
]
