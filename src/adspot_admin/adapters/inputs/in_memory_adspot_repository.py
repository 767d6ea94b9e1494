from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from adspot_admin.application.errors import DuplicateAdSpotError
from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot
from adspot_admin.ports.adspot_repository import AdSpotRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryAdSpotRepository(AdSpotRepository):
    """Process-local AdSpot store. Data is lost on restart."""

    def __init__(
        self,
        items: Optional[Iterable[AdSpot]] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._items: List[AdSpot] = list(items or [])
        self._clock = clock
        self._lock = threading.Lock()

    def list(self) -> List[AdSpot]:
        # AdSpot is frozen, so a fresh list is a complete snapshot
        with self._lock:
            return list(self._items)

    def get(self, adspot_id: str) -> Optional[AdSpot]:
        with self._lock:
            return self._find(adspot_id)[1]

    def append(self, adspot: AdSpot) -> AdSpot:
        with self._lock:
            if self._find(adspot.id)[1] is not None:
                raise DuplicateAdSpotError(f"AdSpot {adspot.id} already exists")
            self._items.append(adspot)
            logger.debug(f"Stored AdSpot {adspot.id}. Total: {len(self._items)}")
            return adspot

    def update_status(
        self,
        adspot_id: str,
        status: str,
        deactivated_at: Optional[datetime] = None,
        cause: Optional[str] = None,
    ) -> Optional[AdSpot]:
        """
        Set the stored status of an AdSpot.

        Moving to inactive stamps deactivated_at (now when not supplied) and the
        cause. Moving to active clears both.

        Returns:
            The updated AdSpot, or None when no AdSpot has that id
        """
        if status not in rules.STATUSES:
            raise ValueError(f"Invalid status: {status}")

        with self._lock:
            index, current = self._find(adspot_id)
            if current is None:
                return None

            if status == rules.INACTIVE:
                updated = current.deactivated(deactivated_at or self._clock(), cause)
            else:
                updated = current.reactivated()

            self._items[index] = updated
            return updated

    def _find(self, adspot_id: str) -> tuple[int, Optional[AdSpot]]:
        for index, adspot in enumerate(self._items):
            if adspot.id == adspot_id:
                return index, adspot
        return -1, None
