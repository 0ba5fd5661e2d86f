"""
Everything behind /hello and /ads: runs the ad set engine and turns the
result into reply text. Knows nothing about Discord, so tests call it directly.

run() is the command boundary. Whatever happens inside a command, the caller
gets a string back: a result, an itemized partial failure, or a short error.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from adsbot_kit.akit_config import AdsBotConfig
from adsbot_kit.adsets import (
    AdSetStats,
    BulkToggleResult,
    WARNING_THRESHOLD,
    aggregate_adsets,
    bulk_set_status,
    over_budget_adsets,
    resolve_adsets,
    search_adsets,
)
from adsbot_kit.integrations.facebook import (
    AccountInfo,
    AdSet,
    FacebookAdsClient,
    FacebookValidationError,
    format_account_status,
    format_currency,
    format_minor_units,
    operations,
)

logger = logging.getLogger("ads_commands")

GREETING = "🤖 Hello! I'm the ad manager bot. Try /ads status."
SEARCH_SHOW = 10
LIST_SHOW = 10
WARNINGS_SHOW = 5
# /ads status compares today's spend with the daily budget
STATUS_DATE_PRESET = "today"

GENERIC_ERROR = "❌ Something went wrong while running /ads {op}. The details are in the bot log."


class AdsCommands:
    def __init__(self, config: AdsBotConfig, client: Optional[FacebookAdsClient] = None):
        self.config = config
        self.client = client or FacebookAdsClient(
            access_token=config.meta_access_token,
            ad_account_id=config.meta_ad_account_id,
            currency=config.meta_currency,
            api_version=config.meta_api_version,
            timeout=config.meta_timeout,
        )
        self._ops: Dict[str, Callable[..., Awaitable[str]]] = {
            "search": self.search,
            "toggle": self.toggle,
            "status": self.status,
            "list": self.list_adsets,
            "api-test": self.api_test,
        }

    @property
    def currency(self) -> str:
        return self.config.meta_currency

    def hello(self) -> str:
        return GREETING

    async def run(self, op: str, **kwargs: Any) -> str:
        handler = self._ops.get(op)
        if not handler:
            return f"Unknown command /ads {op}"
        try:
            return await handler(**kwargs)
        except FacebookValidationError as e:
            logger.info("/ads %s rejected: %s", op, e.message)
            return f"ERROR: {e.message}"
        except Exception as e:
            logger.warning("/ads %s crashed: %s", op, e, exc_info=e)
            return GENERIC_ERROR.format(op=op)

    async def search(self, name: str) -> str:
        resolved = await resolve_adsets(self.client)
        found = search_adsets(resolved.records, name)
        if not found.count:
            return f"🔍 No ad sets match {name!r}\n{resolved.provenance}"
        lines = [f"🔍 {found.count} ad set(s) match {name!r}"]
        lines += [self._adset_line(r) for r in found.first(SEARCH_SHOW)]
        if found.count > SEARCH_SHOW:
            lines.append(f"… and {found.count - SEARCH_SHOW} more, narrow the search to see them")
        lines.append(resolved.provenance)
        return "\n".join(lines)

    async def toggle(self, ids: str, action: str) -> str:
        result = await bulk_set_status(self.client, ids, action)
        return self._toggle_report(result)

    async def status(self) -> str:
        resolved = await resolve_adsets(self.client, STATUS_DATE_PRESET)
        stats = aggregate_adsets(resolved.records)
        warnings = over_budget_adsets(resolved.records)
        lines = ["📊 **Ad set status**"]
        lines += self._stats_lines(stats)
        if warnings:
            lines.append(f"⚠️ Over {WARNING_THRESHOLD:.0%} of daily budget: {len(warnings)}")
            for r in warnings[:WARNINGS_SHOW]:
                lines.append(f"  • {r.name} (`{r.id}`) {r.spend / (r.budget or 1):.0%}")
            if len(warnings) > WARNINGS_SHOW:
                lines.append(f"  … and {len(warnings) - WARNINGS_SHOW} more")
        if resolved.is_live:
            info = await operations.fetch_account_info(self.client, STATUS_DATE_PRESET)
            lines += self._account_lines(info)
        lines.append(resolved.provenance)
        return "\n".join(lines)

    async def list_adsets(self) -> str:
        resolved = await resolve_adsets(self.client)
        records = resolved.records
        if not records:
            return f"📋 The ad account has no ad sets\n{resolved.provenance}"
        lines = [f"📋 {len(records)} ad set(s)"]
        lines += [self._adset_line(r) for r in records[:LIST_SHOW]]
        if len(records) > LIST_SHOW:
            lines.append(f"… and {len(records) - LIST_SHOW} more, use /ads search to find one")
        lines.append(resolved.provenance)
        return "\n".join(lines)

    async def api_test(self) -> str:
        lines = ["🔧 **Meta API settings**"]
        for key, present in self.config.meta_settings_present.items():
            lines.append(f"{'✅' if present else '❌'} {key}")
        missing = self.client.missing_credentials
        if missing:
            lines.append(f"ℹ️ API calls skipped, not configured: {', '.join(missing)}. Read commands show demo data.")
            return "\n".join(lines)

        adsets = await operations.fetch_adsets(self.client)
        if adsets is None:
            lines.append("❌ Ad set list failed, see the bot log for the API error")
        else:
            lines.append(f"✅ Ad set list: {len(adsets)} ad set(s)")
        info = await operations.fetch_account_info(self.client)
        lines += self._account_lines(info)
        return "\n".join(lines)

    def _adset_line(self, r: AdSet) -> str:
        icon = "✅" if r.is_active else "⏸️"
        spend = format_currency(r.spend, self.currency)
        if r.daily_budget is None:
            return f"{icon} **{r.name}** (`{r.id}`) spend {spend} / no daily budget"
        return f"{icon} **{r.name}** (`{r.id}`) spend {spend} / {format_currency(r.budget, self.currency)} ({r.usage_ratio:.0%})"

    def _stats_lines(self, stats: AdSetStats) -> List[str]:
        return [
            f"✅ Active: {stats.active_count}",
            f"⏸️ Paused: {stats.paused_count}",
            f"💰 Daily budget: {format_currency(stats.total_budget, self.currency)}",
            f"💸 Spent: {format_currency(stats.total_spend, self.currency)} ({stats.usage_ratio:.1%})",
            f"👀 Impressions: {stats.total_impressions:,}  🖱️ Clicks: {stats.total_clicks:,}  CTR {stats.ctr:.2f}%",
        ]

    def _account_lines(self, info: Optional[AccountInfo]) -> List[str]:
        if info is None:
            return ["❌ Account info unavailable, see the bot log for the API error"]
        currency = info.currency or self.currency
        lines = [
            f"{'🏦' if info.is_active else '⚠️'} Account: {info.name or self.client.ad_account_id} ({format_account_status(info.account_status)})",
            f"   Balance: {format_minor_units(info.balance, currency)}",
        ]
        if info.insights is not None and info.insights.spend is not None:
            lines.append(f"   Spent {info.date_preset or 'today'}: {format_currency(info.insights.spend, currency)}")
        return lines

    def _toggle_report(self, result: BulkToggleResult) -> str:
        successes, failures = result.successes, result.failures
        lines = [f"🔁 {result.target_status.label}: {len(successes)} ok, {len(failures)} failed"]
        for o in successes:
            lines.append(f"  ✅ `{o.id}` {o.action_label}")
        for o in failures:
            lines.append(f"  ❌ `{o.id}` {o.error_message}")
        if successes:
            lines.append("Run /ads list to see the new status.")
        return "\n".join(lines)
