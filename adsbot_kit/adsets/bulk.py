"""
Bulk ACTIVE/PAUSED switching.

Ids are processed one after another, each awaited before the next one is
sent. A failed id is recorded and the loop moves on. Duplicated ids are
sent once per occurrence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union, TYPE_CHECKING

from adsbot_kit.integrations.facebook.exceptions import FacebookValidationError
from adsbot_kit.integrations.facebook.models import AdSetStatus, ToggleOutcome
from adsbot_kit.integrations.facebook.operations import update_adset_status

if TYPE_CHECKING:
    from adsbot_kit.integrations.facebook.client import FacebookAdsClient

logger = logging.getLogger("adsets.bulk")


@dataclass(frozen=True)
class BulkToggleResult:
    target_status: AdSetStatus
    outcomes: Tuple[ToggleOutcome, ...]

    @property
    def successes(self) -> List[ToggleOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failures(self) -> List[ToggleOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def all_ok(self) -> bool:
        return all(o.success for o in self.outcomes)


def parse_adset_ids(raw_ids: str) -> List[str]:
    ids = [x.strip() for x in (raw_ids or "").split(",")]
    ids = [x for x in ids if x]
    if not ids:
        raise FacebookValidationError("ids", "give at least one ad set id, comma separated")
    return ids


def parse_target_status(action: Union[str, AdSetStatus]) -> AdSetStatus:
    try:
        return AdSetStatus(str(getattr(action, "value", action)).strip().upper())
    except ValueError:
        raise FacebookValidationError("action", f"must be ACTIVE or PAUSED, got {action!r}")


async def bulk_set_status(
    client: "FacebookAdsClient",
    raw_ids: str,
    target_status: Union[str, AdSetStatus],
) -> BulkToggleResult:
    """
    Raises FacebookValidationError before any request if there are no ids or
    the status is not ACTIVE/PAUSED. Otherwise returns one outcome per id, in
    input order.
    """
    status = parse_target_status(target_status)
    ids = parse_adset_ids(raw_ids)
    logger.info("Setting %d ad set(s) to %s", len(ids), status.value)

    outcomes: List[ToggleOutcome] = []
    for adset_id in ids:
        outcomes.append(await update_adset_status(client, adset_id, status))

    result = BulkToggleResult(status, tuple(outcomes))
    logger.info("Bulk %s done: %d ok, %d failed", status.value, len(result.successes), len(result.failures))
    return result
