from datetime import datetime, timedelta, timezone

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot
from adspot_admin.domain.adspot.ttl import compute_expiry, is_active, is_ttl_expired

NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_adspot(
    created_minutes_ago: float = 0,
    ttl_minutes: int | None = None,
    status: str = rules.ACTIVE,
) -> AdSpot:
    return AdSpot.new(
        adspot_id="ad-1",
        title="Test Ad",
        image_url="https://example.com/image.jpg",
        placement=rules.HOME_SCREEN,
        created_at=NOW - timedelta(minutes=created_minutes_ago),
        ttl_minutes=ttl_minutes,
        status=status,
    )


def test_compute_expiry_none_without_ttl():
    assert compute_expiry(make_adspot(created_minutes_ago=120)) is None


def test_compute_expiry_adds_ttl_to_created_at():
    adspot = make_adspot(created_minutes_ago=30, ttl_minutes=60)
    assert compute_expiry(adspot) == NOW + timedelta(minutes=30)


def test_active_without_ttl():
    assert is_active(make_adspot(created_minutes_ago=120), NOW) is True


def test_inactive_status_without_ttl():
    assert is_active(make_adspot(created_minutes_ago=120, status=rules.INACTIVE), NOW) is False


def test_active_while_ttl_running():
    assert is_active(make_adspot(created_minutes_ago=30, ttl_minutes=60), NOW) is True


def test_inactive_status_wins_over_running_ttl():
    adspot = make_adspot(created_minutes_ago=30, ttl_minutes=60, status=rules.INACTIVE)
    assert is_active(adspot, NOW) is False


def test_inactive_once_ttl_lapsed_even_if_flag_active():
    assert is_active(make_adspot(created_minutes_ago=90, ttl_minutes=60), NOW) is False


def test_expiry_instant_counts_as_expired():
    adspot = make_adspot(created_minutes_ago=60, ttl_minutes=60)
    assert is_active(adspot, NOW) is False
    assert is_active(adspot, NOW - timedelta(microseconds=1)) is True


def test_long_expired_ttl():
    assert is_active(make_adspot(created_minutes_ago=24 * 60, ttl_minutes=60), NOW) is False


def test_tiny_ttl():
    assert is_active(make_adspot(created_minutes_ago=2, ttl_minutes=1), NOW) is False


def test_one_year_ttl():
    adspot = make_adspot(created_minutes_ago=60, ttl_minutes=rules.MAX_TTL_MINUTES)
    assert is_active(adspot, NOW) is True


def test_created_in_the_future_is_not_expired():
    adspot = make_adspot(created_minutes_ago=-60, ttl_minutes=30)
    assert is_active(adspot, NOW) is True


def test_active_without_ttl_at_any_instant():
    adspot = make_adspot()
    for offset_days in (-365, 0, 1, 3650):
        assert is_active(adspot, NOW + timedelta(days=offset_days)) is True


def test_is_ttl_expired_ignores_status():
    adspot = make_adspot(created_minutes_ago=90, ttl_minutes=60, status=rules.INACTIVE)
    assert is_ttl_expired(adspot, NOW) is True
    assert is_ttl_expired(make_adspot(created_minutes_ago=90), NOW) is False
