from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from adspot_admin.adapters.inputs.in_memory_adspot_repository import InMemoryAdSpotRepository
from adspot_admin.app.main import create_app
from adspot_admin.application.adspot_service import AdSpotService

NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(NOW)


@pytest.fixture
def repository(clock: FrozenClock) -> InMemoryAdSpotRepository:
    return InMemoryAdSpotRepository(clock=clock)


@pytest.fixture
def service(repository: InMemoryAdSpotRepository, clock: FrozenClock) -> AdSpotService:
    return AdSpotService(repository=repository, clock=clock)


@pytest.fixture
def client(service: AdSpotService) -> TestClient:
    return TestClient(create_app(service))
