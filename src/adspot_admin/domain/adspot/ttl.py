from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot


def compute_expiry(adspot: AdSpot) -> Optional[datetime]:
    """Return the instant the AdSpot's TTL lapses, or None when it never expires."""
    if adspot.ttl_minutes is None:
        return None
    return adspot.created_at + timedelta(minutes=adspot.ttl_minutes)


def is_ttl_expired(adspot: AdSpot, now: datetime) -> bool:
    expiry = compute_expiry(adspot)
    return expiry is not None and now >= expiry


def is_active(adspot: AdSpot, now: datetime) -> bool:
    """
    Decide whether an AdSpot is effectively active at ``now``.

    An inactive stored status always wins. Otherwise the AdSpot is active until
    its expiry instant; the expiry instant itself already counts as expired.
    """
    if adspot.status == rules.INACTIVE:
        return False
    return not is_ttl_expired(adspot, now)
