"""Load AdSpot fixtures from a JSON seed file."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List

import jsonschema

from adspot_admin.application.errors import SeedDataError
from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.models import AdSpot

logger = logging.getLogger(__name__)

# Records use the camelCase keys of the AdSpot wire format; snake_case is accepted too.
SEED_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id", "title", "placement", "status"],
        "properties": {
            "id": {"type": "string", "minLength": 1},
            "title": {"type": "string", "minLength": 1},
            "imageUrl": {"type": "string"},
            "image_url": {"type": "string"},
            "placement": {"enum": list(rules.PLACEMENTS)},
            "status": {"enum": list(rules.STATUSES)},
            "createdAt": {"type": "string"},
            "created_at": {"type": "string"},
            "deactivatedAt": {"type": ["string", "null"]},
            "deactivated_at": {"type": ["string", "null"]},
            "ttlMinutes": {"type": ["integer", "null"], "minimum": 1},
            "ttl_minutes": {"type": ["integer", "null"], "minimum": 1},
            "deactivationCause": {"enum": [*rules.INACTIVE_REASONS, None]},
            "deactivation_cause": {"enum": [*rules.INACTIVE_REASONS, None]},
        },
        "anyOf": [{"required": ["imageUrl"]}, {"required": ["image_url"]}],
        "allOf": [{"anyOf": [{"required": ["createdAt"]}, {"required": ["created_at"]}]}],
    },
}


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _field(row: dict[str, Any], camel: str, snake: str) -> Any:
    return row[camel] if row.get(camel) is not None else row.get(snake)


def _row_to_adspot(row: dict[str, Any]) -> AdSpot:
    deactivated_at = _field(row, "deactivatedAt", "deactivated_at")
    return AdSpot.new(
        adspot_id=row["id"],
        title=row["title"],
        image_url=_field(row, "imageUrl", "image_url"),
        placement=row["placement"],
        status=row["status"],
        created_at=parse_timestamp(_field(row, "createdAt", "created_at")),
        deactivated_at=parse_timestamp(deactivated_at) if deactivated_at else None,
        ttl_minutes=_field(row, "ttlMinutes", "ttl_minutes"),
        deactivation_cause=_field(row, "deactivationCause", "deactivation_cause"),
    )


def load_adspots(data: Any, source: str | None = None) -> List[AdSpot]:
    """Validate already-decoded seed data and convert it to AdSpots."""
    try:
        jsonschema.validate(instance=data, schema=SEED_SCHEMA)
    except jsonschema.ValidationError as e:
        raise SeedDataError(f"Seed validation failed: {e.message}", path=source) from e

    try:
        adspots = [_row_to_adspot(row) for row in data]
    except ValueError as e:
        raise SeedDataError(f"Invalid timestamp in seed data: {e}", path=source) from e

    seen: set[str] = set()
    for adspot in adspots:
        if adspot.id in seen:
            raise SeedDataError(f"Duplicate AdSpot id in seed data: {adspot.id}", path=source)
        seen.add(adspot.id)

    return adspots


def load_seed_file(path: str | Path) -> List[AdSpot]:
    seed_path = Path(path)
    if not seed_path.exists():
        raise SeedDataError(f"Seed file not found: {seed_path}", path=str(seed_path))

    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file is not valid JSON: {e}", path=str(seed_path)) from e

    adspots = load_adspots(data, source=str(seed_path))
    logger.info(f"Loaded {len(adspots)} AdSpots from {seed_path}")
    return adspots
