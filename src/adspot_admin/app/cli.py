from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional

from adspot_admin.app.factory import create_service
from adspot_admin.domain.adspot import rules
from adspot_admin.domain.adspot.formatters import (
    format_inactive_reason,
    format_placement,
    ttl_remaining_text,
)
from adspot_admin.domain.adspot.models import AdSpotFilter
from adspot_admin.observability.logging import configure_logging


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def main(argv: Optional[list[str]] = None) -> None:
    configure_logging()
    parser = argparse.ArgumentParser(description="AdSpot Admin CLI")
    parser.add_argument("--as-of", dest="as_of_ts", help="ISO timestamp to evaluate TTL against")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List seeded AdSpots with their effective state")
    list_parser.add_argument("--placement", choices=rules.PLACEMENTS)
    list_parser.add_argument("--search")
    list_parser.add_argument("--active-only", action="store_true")

    subparsers.add_parser("metrics", help="Print AdSpot metrics")

    args = parser.parse_args(argv)
    if args.command not in ("list", "metrics"):
        parser.print_help()
        return

    as_of = parse_datetime(args.as_of_ts) or datetime.now(timezone.utc)
    service = create_service(clock=lambda: as_of)

    if args.command == "metrics":
        print(json.dumps(asdict(service.get_metrics()), indent=2))
        return

    adspot_filter = AdSpotFilter(placement=args.placement, search=args.search)
    if args.active_only:
        adspots = service.list_active(adspot_filter)
    else:
        adspots = service.list_adspots(adspot_filter)

    rows = []
    for adspot in adspots:
        resolved = service.resolve(adspot)
        rows.append(
            {
                "id": adspot.id,
                "title": adspot.title,
                "placement": format_placement(adspot.placement),
                "state": format_inactive_reason(resolved.status.reason),
                "ttl": ttl_remaining_text(adspot, as_of),
            }
        )
    print(json.dumps(rows, indent=2))


if __name__ == "__main__":
    main()
