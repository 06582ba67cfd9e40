"""Command-line front end over the local data directory.

Usage:
    python -m avgeek.cli stats
    python -m avgeek.cli badges --pending
    python -m avgeek.cli route CDG JFK --aircraft a350-900
    python -m avgeek.cli log CDG NCE --aircraft a320neo --cabin Business
    python -m avgeek.cli import /path/to/avgeek_logs.json
    python -m avgeek.cli export --output /tmp
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from avgeek.config import Settings
from avgeek.contracts.enums import CabinClass
from avgeek.persistence.errors import (
    FlightImportError,
    UnknownAircraftError,
    UnknownAirportError,
)
from avgeek.services.data_store import DataStore
from avgeek.services.estimator import trees_to_offset
from avgeek.services.route_simulator import RouteSimulator

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def cmd_stats(store: DataStore, args: argparse.Namespace) -> int:
    if args.year is not None:
        _print_json(store.summary(args.year).to_document())
        return 0
    stats = store.statistics()
    co2 = stats.total_estimated_co2_kg()
    _print_json({
        "total_flights": stats.total_flights,
        "total_distance_km": round(stats.total_distance_km, 1),
        "longest_flight_km": round(stats.max_single_flight_km(), 1),
        "by_manufacturer": {m: round(km, 1) for m, km in stats.distance_by_manufacturer()},
        "top_airports": dict(stats.top_airports(limit=5)),
        "estimated_co2_kg": round(co2, 1),
        "trees_one_year": round(trees_to_offset(co2), 1),
    })
    return 0


def cmd_badges(store: DataStore, args: argparse.Namespace) -> int:
    if args.pending:
        # Drain the queue: each badge is marked shown as it is printed.
        unlock = store.pop_next_badge()
        while unlock is not None:
            marker = "*" if unlock.is_major else "-"
            print(f"{marker} {unlock.badge.title}: {unlock.badge.detail}")
            unlock = store.advance_badge()
        return 0
    for badge in store.badges():
        mark = "x" if badge.achieved else " "
        print(f"[{mark}] {badge.title} ({badge.detail})")
    return 0


def cmd_route(store: DataStore, args: argparse.Namespace) -> int:
    sim = RouteSimulator(store.catalog)
    try:
        estimate = sim.simulate(args.origin, args.destination, args.aircraft)
    except (UnknownAirportError, UnknownAircraftError) as exc:
        logger.error("%s", exc)
        return 1
    _print_json(estimate.to_document())
    return 0


def cmd_log(store: DataStore, args: argparse.Namespace) -> int:
    try:
        flight = store.log_flight(
            args.origin, args.destination, args.aircraft,
            note=args.note,
            cabin=CabinClass(args.cabin) if args.cabin else None,
        )
    except (UnknownAirportError, UnknownAircraftError) as exc:
        logger.error("%s", exc)
        return 1
    print(f"Logged {flight.origin_iata} → {flight.destination_iata}: {flight.distance_km:.0f} km")
    for title in store.pending_badges():
        print(f"Unlocked: {title}")
    return 0


def cmd_import(store: DataStore, args: argparse.Namespace) -> int:
    try:
        added = store.import_file(args.path)
    except FlightImportError as exc:
        logger.error("Import failed: %s", exc)
        return 1
    print(f"Imported {added} flights")
    return 0


def cmd_export(store: DataStore, args: argparse.Namespace) -> int:
    path = store.export_to_file(args.output)
    if path is None:
        return 1
    print(path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AvGeek flight log")
    parser.add_argument("--data-dir", type=Path, help="Override AVGEEK_DATA_DIR")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("stats", help="Show statistics")
    p.add_argument("--year", type=int, help="Summary card for one year")
    p.set_defaults(func=cmd_stats)

    p = sub.add_parser("badges", help="List badges")
    p.add_argument("--pending", action="store_true", help="Show and dismiss unlocked badges")
    p.set_defaults(func=cmd_badges)

    p = sub.add_parser("route", help="Estimate a route")
    p.add_argument("origin")
    p.add_argument("destination")
    p.add_argument("--aircraft", help="Aircraft catalog id")
    p.set_defaults(func=cmd_route)

    p = sub.add_parser("log", help="Log a flight")
    p.add_argument("origin")
    p.add_argument("destination")
    p.add_argument("--aircraft", required=True, help="Aircraft catalog id")
    p.add_argument("--note")
    p.add_argument("--cabin", choices=[c.value for c in CabinClass])
    p.set_defaults(func=cmd_log)

    p = sub.add_parser("import", help="Merge an exported flight log")
    p.add_argument("path", type=Path)
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("export", help="Export the flight log")
    p.add_argument("--output", type=Path, help="Output directory (default: temp dir)")
    p.set_defaults(func=cmd_export)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    if args.data_dir is not None:
        settings = settings.model_copy(update={"data_dir": args.data_dir})

    store = DataStore.from_settings(settings)
    store.initialize()
    return args.func(store, args)


if __name__ == "__main__":
    sys.exit(main())
