"""
Search, totals and over-budget warnings over a set of ad sets.

Pure functions: same records in, same result out, nothing is fetched or
modified. Per-record spend, budget, impressions and clicks come from the
AdSet properties, which apply the fallbacks (insights, then spend_today,
then zero).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from adsbot_kit.integrations.facebook.models import AdSet

WARNING_THRESHOLD = 0.8


@dataclass(frozen=True)
class AdSetSearchResult:
    query: str
    matches: Tuple[AdSet, ...]

    @property
    def count(self) -> int:
        return len(self.matches)

    def first(self, n: int) -> Tuple[AdSet, ...]:
        return self.matches[:n]


@dataclass(frozen=True)
class AdSetStats:
    active_count: int
    paused_count: int
    total_spend: float
    total_budget: float
    total_impressions: int
    total_clicks: int
    usage_ratio: float
    ctr: float


def search_adsets(records: Iterable[AdSet], query: str) -> AdSetSearchResult:
    needle = (query or "").casefold()
    matches = tuple(r for r in records if needle in r.name.casefold())
    return AdSetSearchResult(query=query or "", matches=matches)


def aggregate_adsets(records: Iterable[AdSet]) -> AdSetStats:
    active = paused = 0
    total_spend = total_budget = 0.0
    total_impressions = total_clicks = 0
    for r in records:
        if r.is_active:
            active += 1
        else:
            paused += 1
        total_spend += r.spend
        total_budget += r.budget
        total_impressions += r.impressions
        total_clicks += r.clicks
    return AdSetStats(
        active_count=active,
        paused_count=paused,
        total_spend=total_spend,
        total_budget=total_budget,
        total_impressions=total_impressions,
        total_clicks=total_clicks,
        usage_ratio=total_spend / total_budget if total_budget > 0 else 0.0,
        ctr=total_clicks / total_impressions * 100 if total_impressions > 0 else 0.0,
    )


def over_budget_adsets(records: Iterable[AdSet], threshold: float = WARNING_THRESHOLD) -> List[AdSet]:
    """
    Active ad sets that spent strictly more than threshold * daily budget.
    No budget counts as a budget of 1, so any spend without a budget warns.
    """
    result = []
    for r in records:
        if not r.is_active:
            continue
        budget = r.budget if r.budget > 0 else 1
        if r.spend / budget > threshold:
            result.append(r)
    return result
