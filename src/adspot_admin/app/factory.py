from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from adspot_admin.adapters.inputs.in_memory_adspot_repository import InMemoryAdSpotRepository
from adspot_admin.adapters.seed.demo_data import demo_adspots
from adspot_admin.adapters.seed.seed_loader import load_seed_file
from adspot_admin.application.adspot_service import AdSpotService, utc_now
from adspot_admin.ports.adspot_repository import AdSpotRepository
from adspot_admin.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_repository(
    settings: Optional[Settings] = None,
    clock: Callable[[], datetime] = utc_now,
) -> AdSpotRepository:
    """
    Build the AdSpot repository according to ADSPOT_SEED_MODE.

    demo seeds the built-in demo records, file loads ADSPOT_SEED_FILE,
    empty starts with nothing.
    """
    settings = settings or get_settings()
    seed_mode = settings.seed_mode

    if seed_mode == "demo":
        items = demo_adspots(clock())
    elif seed_mode == "file":
        if not settings.seed_file:
            raise ValueError("ADSPOT_SEED_FILE is required when ADSPOT_SEED_MODE=file")
        items = load_seed_file(settings.seed_file)
    elif seed_mode == "empty":
        items = []
    else:
        raise ValueError(f"Unknown ADSPOT_SEED_MODE: {seed_mode}")

    logger.info(f"Seeded AdSpot store with {len(items)} records ({seed_mode})")
    return InMemoryAdSpotRepository(items, clock=clock)


def create_service(
    settings: Optional[Settings] = None,
    repository: Optional[AdSpotRepository] = None,
    clock: Callable[[], datetime] = utc_now,
) -> AdSpotService:
    settings = settings or get_settings()
    return AdSpotService(
        repository=repository or create_repository(settings, clock=clock),
        clock=clock,
        coincidence_window=timedelta(seconds=settings.coincidence_window_seconds),
    )
