import json
from datetime import timedelta

import pytest

from adspot_admin.app.factory import create_repository, create_service
from adspot_admin.settings import Settings


def test_demo_seed(clock):
    repository = create_repository(Settings(seed_mode="demo"), clock=clock)
    assert len(repository.list()) == 8


def test_empty_seed(clock):
    repository = create_repository(Settings(seed_mode="empty"), clock=clock)
    assert repository.list() == []


def test_file_seed(tmp_path, clock):
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "seed-1",
                    "title": "Seeded",
                    "imageUrl": "https://example.com/a.png",
                    "placement": "ride_summary",
                    "status": "active",
                    "createdAt": "2024-01-15T10:00:00Z",
                }
            ]
        ),
        encoding="utf-8",
    )

    repository = create_repository(Settings(seed_mode="file", seed_file=str(path)), clock=clock)

    assert [a.id for a in repository.list()] == ["seed-1"]


def test_file_seed_requires_path(clock):
    with pytest.raises(ValueError, match="ADSPOT_SEED_FILE"):
        create_repository(Settings(seed_mode="file"), clock=clock)


def test_unknown_seed_mode(clock):
    with pytest.raises(ValueError, match="Unknown"):
        create_repository(Settings(seed_mode="postgres"), clock=clock)


def test_service_uses_configured_window(clock):
    service = create_service(Settings(seed_mode="empty", coincidence_window_seconds=300), clock=clock)
    assert service.coincidence_window == timedelta(minutes=5)
    assert service.clock is clock


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ADSPOT_SEED_MODE", "EMPTY")
    monkeypatch.setenv("ADSPOT_COINCIDENCE_WINDOW_SECONDS", "90")
    monkeypatch.setenv("ADSPOT_MAX_TTL_MINUTES", "1440")

    settings = Settings.from_env()

    assert settings.seed_mode == "empty"
    assert settings.coincidence_window_seconds == 90
    assert settings.max_ttl_minutes == 1440
    assert settings.title_max_length == 100
