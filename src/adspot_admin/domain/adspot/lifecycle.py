from __future__ import annotations

from datetime import datetime, timedelta

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot, FinalStatus
from adspot_admin.domain.adspot.ttl import compute_expiry


def final_status(
    adspot: AdSpot,
    now: datetime,
    coincidence_window: timedelta = rules.COINCIDENCE_WINDOW,
) -> FinalStatus:
    """
    Resolve the effective state of an AdSpot and classify why it is inactive.

    Rules, first match wins:
    - Active flag and TTL not lapsed: active, no reason.
    - deactivated_at set:
        - a recorded deactivation_cause is taken as-is;
        - deactivated_at at or up to ``coincidence_window`` after the expiry
          instant: expired_by_ttl;
        - otherwise deactivated_by_user.
    - TTL lapsed: expired_by_ttl.
    - Inactive flag with nothing else to go on: deactivated_by_user.

    Args:
        adspot: AdSpot to resolve
        now: Reference instant
        coincidence_window: Tolerance for reading a deactivation as TTL expiry

    Returns:
        FinalStatus whose is_active always matches ttl.is_active(adspot, now)
    """
    expiry = compute_expiry(adspot)
    ttl_expired = expiry is not None and now >= expiry

    # A stale deactivated_at on an active record must not override the flag
    if adspot.status == rules.ACTIVE and not ttl_expired:
        return FinalStatus(is_active=True, reason=None)

    if adspot.deactivated_at is not None:
        if adspot.deactivation_cause in rules.INACTIVE_REASONS:
            return FinalStatus(is_active=False, reason=adspot.deactivation_cause)

        if expiry is not None:
            drift = abs(adspot.deactivated_at - expiry)
            if drift <= coincidence_window and adspot.deactivated_at >= expiry:
                return FinalStatus(is_active=False, reason=rules.EXPIRED_BY_TTL)

        return FinalStatus(is_active=False, reason=rules.DEACTIVATED_BY_USER)

    if ttl_expired:
        return FinalStatus(is_active=False, reason=rules.EXPIRED_BY_TTL)

    if adspot.status == rules.INACTIVE:
        return FinalStatus(is_active=False, reason=rules.DEACTIVATED_BY_USER)

    return FinalStatus(is_active=True, reason=None)
