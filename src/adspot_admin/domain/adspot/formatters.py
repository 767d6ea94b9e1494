from __future__ import annotations

from datetime import datetime
from typing import Optional

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot
from adspot_admin.domain.adspot.ttl import compute_expiry


def format_placement(placement: str) -> str:
    """home_screen -> Home Screen"""
    return " ".join(word[:1].upper() + word[1:] for word in placement.split("_"))


def format_inactive_reason(reason: Optional[str]) -> str:
    if reason == rules.EXPIRED_BY_TTL:
        return "Expired by TTL"
    if reason == rules.DEACTIVATED_BY_USER:
        return "Deactivated manually"
    return "Active"


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}{'s' if value > 1 else ''}"


def ttl_remaining_text(adspot: AdSpot, now: datetime) -> str:
    """Human readable time left before the TTL lapses."""
    expiry = compute_expiry(adspot)
    if expiry is None:
        return "No limit"

    remaining_seconds = (expiry - now).total_seconds()
    if remaining_seconds <= 0:
        return "Expired"

    remaining_minutes = int(remaining_seconds // 60)
    remaining_hours = remaining_minutes // 60
    remaining_days = remaining_hours // 24

    if remaining_days > 0:
        return f"Expires in {_plural(remaining_days, 'day')}"
    if remaining_hours > 0:
        return f"Expires in {_plural(remaining_hours, 'hour')}"
    return f"Expires in {remaining_minutes} min"
