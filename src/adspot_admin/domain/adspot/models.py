from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.common.ids import AdSpotId


@dataclass(frozen=True)
class AdSpot:
    """A timed advertisement placement as stored."""

    id: AdSpotId
    title: str
    image_url: str
    placement: str  # home_screen | ride_summary | map_view
    status: str  # active | inactive
    created_at: datetime
    deactivated_at: Optional[datetime] = None
    ttl_minutes: Optional[int] = None
    # Recorded when the service writes the deactivation; None on legacy records.
    deactivation_cause: Optional[str] = None

    @staticmethod
    def new(
        adspot_id: str,
        title: str,
        image_url: str,
        placement: str,
        created_at: datetime,
        ttl_minutes: Optional[int] = None,
        status: str = rules.ACTIVE,
        deactivated_at: Optional[datetime] = None,
        deactivation_cause: Optional[str] = None,
    ) -> "AdSpot":
        return AdSpot(
            id=AdSpotId(adspot_id),
            title=title,
            image_url=image_url,
            placement=placement,
            status=status,
            created_at=created_at,
            deactivated_at=deactivated_at,
            ttl_minutes=ttl_minutes,
            deactivation_cause=deactivation_cause,
        )

    def deactivated(self, at: datetime, cause: Optional[str] = None) -> "AdSpot":
        return replace(self, status=rules.INACTIVE, deactivated_at=at, deactivation_cause=cause)

    def reactivated(self) -> "AdSpot":
        return replace(self, status=rules.ACTIVE, deactivated_at=None, deactivation_cause=None)


@dataclass(frozen=True)
class AdSpotCreatePayload:
    title: str
    image_url: str
    placement: str
    ttl_minutes: Optional[int] = None


@dataclass(frozen=True)
class AdSpotFilter:
    placement: Optional[str] = None
    search: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class FinalStatus:
    """Effective activity of an AdSpot and, when inactive, why."""

    is_active: bool
    reason: Optional[str] = None  # expired_by_ttl | deactivated_by_user | None


@dataclass(frozen=True)
class PlacementShare:
    placement: str
    count: int
    percentage: int


@dataclass(frozen=True)
class InactiveBreakdown:
    expired_by_ttl: int = 0
    deactivated_by_user: int = 0


@dataclass(frozen=True)
class AdSpotMetrics:
    total: int
    active: int
    inactive: InactiveBreakdown
    placement_distribution: List[PlacementShare] = field(default_factory=list)
