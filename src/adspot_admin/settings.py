from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # demo | empty | file
    seed_mode: str = "demo"
    seed_file: Optional[str] = None
    coincidence_window_seconds: int = 60
    max_ttl_minutes: int = 525600
    title_max_length: int = 100

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            seed_mode=os.getenv("ADSPOT_SEED_MODE", cls.seed_mode).lower(),
            seed_file=os.getenv("ADSPOT_SEED_FILE"),
            coincidence_window_seconds=int(
                os.getenv("ADSPOT_COINCIDENCE_WINDOW_SECONDS", cls.coincidence_window_seconds)
            ),
            max_ttl_minutes=int(os.getenv("ADSPOT_MAX_TTL_MINUTES", cls.max_ttl_minutes)),
            title_max_length=int(os.getenv("ADSPOT_TITLE_MAX_LENGTH", cls.title_max_length)),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
