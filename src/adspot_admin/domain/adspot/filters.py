"""Pure filters over AdSpot collections."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from adspot_admin.domain.adspot.models import AdSpot, AdSpotFilter
from adspot_admin.domain.adspot.ttl import is_active


def filter_by_placement(adspots: Iterable[AdSpot], placement: str) -> List[AdSpot]:
    return [adspot for adspot in adspots if adspot.placement == placement]


def filter_by_search(adspots: Iterable[AdSpot], search: Optional[str]) -> List[AdSpot]:
    """Case-insensitive substring match on the title. A blank search keeps everything."""
    records = list(adspots)
    if not search or not search.strip():
        return records
    needle = search.strip().lower()
    return [adspot for adspot in records if needle in adspot.title.lower()]


def filter_by_status(adspots: Iterable[AdSpot], status: str) -> List[AdSpot]:
    """Filter on the stored status flag, not the effective activity."""
    return [adspot for adspot in adspots if adspot.status == status]


def filter_active(adspots: Iterable[AdSpot], now: datetime) -> List[AdSpot]:
    return [adspot for adspot in adspots if is_active(adspot, now)]


def apply_filter(adspots: Iterable[AdSpot], adspot_filter: Optional[AdSpotFilter]) -> List[AdSpot]:
    records = list(adspots)
    if adspot_filter is None:
        return records
    if adspot_filter.placement:
        records = filter_by_placement(records, adspot_filter.placement)
    if adspot_filter.status:
        records = filter_by_status(records, adspot_filter.status)
    if adspot_filter.search:
        records = filter_by_search(records, adspot_filter.search)
    return records
