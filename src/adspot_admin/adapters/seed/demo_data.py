from __future__ import annotations

from datetime import datetime, timedelta
from typing import List

from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot


def demo_adspots(now: datetime) -> List[AdSpot]:
    """
    Demo AdSpots with timestamps relative to ``now``.

    Covers the interesting cases: running TTL, no TTL, lapsed TTL and a manual
    deactivation.
    """
    one_hour_ago = now - timedelta(hours=1)
    two_hours_ago = now - timedelta(hours=2)
    one_day_ago = now - timedelta(days=1)

    return [
        AdSpot.new(
            adspot_id="mock-1",
            title="Summer Promo 2024",
            image_url="https://images.unsplash.com/photo-1469474968028-56623f02e42e?w=400&h=300&fit=crop",
            placement=rules.HOME_SCREEN,
            created_at=one_hour_ago,
            ttl_minutes=120,
        ),
        AdSpot.new(
            adspot_id="mock-2",
            title="Weekend Special Offer",
            image_url="https://picsum.photos/400/300?random=2",
            placement=rules.RIDE_SUMMARY,
            created_at=two_hours_ago,
        ),
        AdSpot.new(
            adspot_id="mock-3",
            title="Long Ride Discount",
            image_url="https://images.unsplash.com/photo-1469854523086-cc02fe5d8800?w=400&h=300&fit=crop",
            placement=rules.MAP_VIEW,
            created_at=now,
            ttl_minutes=30,
        ),
        AdSpot.new(
            adspot_id="mock-4",
            title="New Rider - 20% OFF",
            image_url="https://picsum.photos/400/300?random=4",
            placement=rules.HOME_SCREEN,
            created_at=one_day_ago,
            ttl_minutes=1440,
        ),
        AdSpot.new(
            adspot_id="mock-5",
            title="Loyalty Program",
            image_url="https://picsum.photos/400/300?random=5",
            placement=rules.RIDE_SUMMARY,
            created_at=one_day_ago,
            status=rules.INACTIVE,
            deactivated_at=now - timedelta(hours=12),
        ),
        AdSpot.new(
            adspot_id="mock-6",
            title="Launch Campaign",
            image_url="https://picsum.photos/400/300?random=6",
            placement=rules.MAP_VIEW,
            created_at=now - timedelta(minutes=10),
            ttl_minutes=60,
        ),
        AdSpot.new(
            adspot_id="mock-7",
            title="Black Friday Promo",
            image_url="https://images.unsplash.com/photo-1469854523086-cc02fe5d8800?w=400&h=300&fit=crop",
            placement=rules.HOME_SCREEN,
            created_at=now - timedelta(minutes=5),
        ),
        AdSpot.new(
            adspot_id="mock-8",
            title="Student Discount",
            image_url="https://picsum.photos/400/300?random=7",
            placement=rules.RIDE_SUMMARY,
            created_at=now - timedelta(minutes=15),
            ttl_minutes=45,
        ),
    ]
