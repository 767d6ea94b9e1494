from datetime import datetime, timedelta, timezone

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.filters import (
    apply_filter,
    filter_active,
    filter_by_placement,
    filter_by_search,
    filter_by_status,
)
from adspot_admin.domain.adspot.models import AdSpot, AdSpotFilter

NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_adspot(adspot_id: str, title: str, placement: str, status: str = rules.ACTIVE, ttl_minutes=None) -> AdSpot:
    return AdSpot.new(
        adspot_id=adspot_id,
        title=title,
        image_url="https://example.com/image.jpg",
        placement=placement,
        created_at=NOW - timedelta(minutes=90),
        ttl_minutes=ttl_minutes,
        status=status,
    )


ADSPOTS = [
    make_adspot("1", "Summer Promo", rules.HOME_SCREEN),
    make_adspot("2", "Special Offer", rules.RIDE_SUMMARY),
    make_adspot("3", "Summer Rides", rules.MAP_VIEW, status=rules.INACTIVE),
    make_adspot("4", "Flash sale", rules.HOME_SCREEN, ttl_minutes=60),
]


def test_filter_by_placement():
    result = filter_by_placement(ADSPOTS, rules.HOME_SCREEN)
    assert [a.id for a in result] == ["1", "4"]


def test_filter_by_search_is_case_insensitive_and_trimmed():
    result = filter_by_search(ADSPOTS, "  sUMMER ")
    assert [a.id for a in result] == ["1", "3"]


def test_filter_by_search_blank_keeps_everything():
    assert filter_by_search(ADSPOTS, "") == ADSPOTS
    assert filter_by_search(ADSPOTS, "   ") == ADSPOTS
    assert filter_by_search(ADSPOTS, None) == ADSPOTS


def test_filter_by_search_no_match():
    assert filter_by_search(ADSPOTS, "winter") == []


def test_filter_by_status_uses_stored_flag():
    # Ad 4 is TTL-expired but still flagged active
    result = filter_by_status(ADSPOTS, rules.ACTIVE)
    assert [a.id for a in result] == ["1", "2", "4"]


def test_filter_active_applies_ttl():
    result = filter_active(ADSPOTS, NOW)
    assert [a.id for a in result] == ["1", "2"]


def test_apply_filter_combines_criteria():
    result = apply_filter(ADSPOTS, AdSpotFilter(placement=rules.HOME_SCREEN, search="promo", status=rules.ACTIVE))
    assert [a.id for a in result] == ["1"]


def test_apply_filter_none_returns_copy():
    result = apply_filter(ADSPOTS, None)
    assert result == ADSPOTS
    assert result is not ADSPOTS
