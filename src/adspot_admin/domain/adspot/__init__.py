from __future__ import annotations

from adspot_admin.domain.adspot.lifecycle import final_status
from adspot_admin.domain.adspot.metrics import compute_metrics
from adspot_admin.domain.adspot.models import (
    AdSpot,
    AdSpotCreatePayload,
    AdSpotFilter,
    AdSpotMetrics,
    FinalStatus,
    InactiveBreakdown,
    PlacementShare,
)
from adspot_admin.domain.adspot.ttl import compute_expiry, is_active

__all__ = [
    "compute_expiry",
    "compute_metrics",
    "final_status",
    "is_active",
    "AdSpot",
    "AdSpotCreatePayload",
    "AdSpotFilter",
    "AdSpotMetrics",
    "FinalStatus",
    "InactiveBreakdown",
    "PlacementShare",
]
