from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Optional

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.lifecycle import final_status
from adspot_admin.domain.adspot.models import (
    AdSpot,
    AdSpotMetrics,
    InactiveBreakdown,
    PlacementShare,
)
from adspot_admin.domain.adspot.ttl import is_active


def _percentage(count: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up, so 12.5 reports as 13 rather than banker's 12
    return int(math.floor(100 * count / total + 0.5))


def compute_metrics(
    adspots: Iterable[AdSpot],
    now: Optional[datetime] = None,
    coincidence_window: timedelta = rules.COINCIDENCE_WINDOW,
) -> AdSpotMetrics:
    """
    Aggregate activity and placement metrics over a collection of AdSpots.

    All records are resolved against the same ``now`` (current UTC time when
    omitted). The placement distribution always lists every placement in
    ``rules.PLACEMENTS`` order, zero counts included.
    """
    as_of = now or datetime.now(timezone.utc)
    records = list(adspots)
    total = len(records)

    active = 0
    expired_by_ttl = 0
    deactivated_by_user = 0
    placement_counts: Dict[str, int] = {placement: 0 for placement in rules.PLACEMENTS}

    for adspot in records:
        if is_active(adspot, as_of):
            active += 1
        else:
            status = final_status(adspot, as_of, coincidence_window)
            if status.reason == rules.EXPIRED_BY_TTL:
                expired_by_ttl += 1
            elif status.reason == rules.DEACTIVATED_BY_USER:
                deactivated_by_user += 1

        if adspot.placement in placement_counts:
            placement_counts[adspot.placement] += 1

    distribution = [
        PlacementShare(
            placement=placement,
            count=placement_counts[placement],
            percentage=_percentage(placement_counts[placement], total),
        )
        for placement in rules.PLACEMENTS
    ]

    return AdSpotMetrics(
        total=total,
        active=active,
        inactive=InactiveBreakdown(
            expired_by_ttl=expired_by_ttl,
            deactivated_by_user=deactivated_by_user,
        ),
        placement_distribution=distribution,
    )
