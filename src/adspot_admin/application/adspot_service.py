from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from adspot_admin.application.errors import AdSpotNotFoundError
from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.filters import (
    apply_filter,
    filter_active,
    filter_by_placement,
    filter_by_search,
)
from adspot_admin.domain.adspot.lifecycle import final_status
from adspot_admin.domain.adspot.metrics import compute_metrics
from adspot_admin.domain.adspot.models import (
    AdSpot,
    AdSpotCreatePayload,
    AdSpotFilter,
    AdSpotMetrics,
    FinalStatus,
)
from adspot_admin.domain.adspot.ttl import compute_expiry, is_ttl_expired
from adspot_admin.domain.common.ids import new_adspot_id
from adspot_admin.ports.adspot_repository import AdSpotRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ResolvedAdSpot:
    """A stored AdSpot together with its effective state at a given instant."""

    adspot: AdSpot
    status: FinalStatus
    expires_at: Optional[datetime]
    as_of: datetime


class AdSpotService:
    """Use cases over the AdSpot repository. Every read resolves TTL lazily."""

    def __init__(
        self,
        repository: AdSpotRepository,
        clock: Callable[[], datetime] = utc_now,
        coincidence_window: timedelta = rules.COINCIDENCE_WINDOW,
    ) -> None:
        self.repository = repository
        self.clock = clock
        self.coincidence_window = coincidence_window

    def list_adspots(self, adspot_filter: Optional[AdSpotFilter] = None) -> List[AdSpot]:
        return apply_filter(self.repository.list(), adspot_filter)

    def list_active(self, adspot_filter: Optional[AdSpotFilter] = None) -> List[AdSpot]:
        """
        AdSpots that are effectively active now, narrowed by placement and search.

        The stored status filter is ignored here since only active records remain.
        """
        adspots = filter_active(self.repository.list(), self.clock())
        if adspot_filter is not None:
            if adspot_filter.placement:
                adspots = filter_by_placement(adspots, adspot_filter.placement)
            if adspot_filter.search:
                adspots = filter_by_search(adspots, adspot_filter.search)
        return adspots

    def get_adspot(self, adspot_id: str) -> AdSpot:
        adspot = self.repository.get(adspot_id)
        if adspot is None:
            logger.warning(f"AdSpot {adspot_id} not found")
            raise AdSpotNotFoundError(adspot_id)
        return adspot

    def create_adspot(self, payload: AdSpotCreatePayload) -> AdSpot:
        adspot = AdSpot.new(
            adspot_id=new_adspot_id(),
            title=payload.title,
            image_url=payload.image_url,
            placement=payload.placement,
            created_at=self.clock(),
            ttl_minutes=payload.ttl_minutes,
        )
        self.repository.append(adspot)
        logger.info(f"AdSpot created: {adspot.id}. Total: {len(self.repository.list())}")
        return adspot

    def deactivate_adspot(self, adspot_id: str) -> AdSpot:
        """
        Mark an AdSpot inactive now.

        The cause is recorded with the write: expired_by_ttl when the TTL had
        already lapsed at this instant, deactivated_by_user otherwise. An AdSpot
        that is already inactive is returned unchanged so deactivated_at and
        the cause are only ever written once.
        """
        current = self.get_adspot(adspot_id)
        if current.status == rules.INACTIVE:
            logger.info(f"AdSpot {adspot_id} already inactive")
            return current
        now = self.clock()
        cause = rules.EXPIRED_BY_TTL if is_ttl_expired(current, now) else rules.DEACTIVATED_BY_USER
        updated = self.repository.update_status(adspot_id, rules.INACTIVE, deactivated_at=now, cause=cause)
        if updated is None:
            raise AdSpotNotFoundError(adspot_id)
        logger.info(f"AdSpot deactivated: {adspot_id} ({cause})")
        return updated

    def set_status(self, adspot_id: str, status: str) -> AdSpot:
        if status == rules.INACTIVE:
            return self.deactivate_adspot(adspot_id)

        updated = self.repository.update_status(adspot_id, status)
        if updated is None:
            logger.warning(f"AdSpot {adspot_id} not found")
            raise AdSpotNotFoundError(adspot_id)
        logger.info(f"AdSpot reactivated: {adspot_id}")
        return updated

    def toggle_adspot(self, adspot_id: str) -> AdSpot:
        current = self.get_adspot(adspot_id)
        new_status = rules.INACTIVE if current.status == rules.ACTIVE else rules.ACTIVE
        return self.set_status(adspot_id, new_status)

    def expire_lapsed(self) -> List[AdSpot]:
        """
        Persist TTL expiry for AdSpots still flagged active after their TTL lapsed.

        deactivated_at is stamped at the expiry instant itself.
        """
        now = self.clock()
        expired: List[AdSpot] = []
        for adspot in self.repository.list():
            if adspot.status != rules.ACTIVE or not is_ttl_expired(adspot, now):
                continue
            updated = self.repository.update_status(
                adspot.id,
                rules.INACTIVE,
                deactivated_at=compute_expiry(adspot),
                cause=rules.EXPIRED_BY_TTL,
            )
            if updated is not None:
                expired.append(updated)

        if expired:
            logger.info(f"Expired {len(expired)} AdSpots past their TTL")
        return expired

    def resolve(self, adspot: AdSpot, now: Optional[datetime] = None) -> ResolvedAdSpot:
        as_of = now or self.clock()
        return ResolvedAdSpot(
            adspot=adspot,
            status=final_status(adspot, as_of, self.coincidence_window),
            expires_at=compute_expiry(adspot),
            as_of=as_of,
        )

    def get_metrics(self) -> AdSpotMetrics:
        return compute_metrics(self.repository.list(), self.clock(), self.coincidence_window)
