"""Reference catalog: bundled aircraft and airport datasets → contracts.

Read-only: the datasets are loaded once and never mutated.  A missing or
malformed dataset degrades to an empty list (logged) so the app stays
usable with no reference data.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.airport import Airport
from avgeek.contracts.enums import AircraftCategory, ProductionStatus

logger = logging.getLogger(__name__)

AIRCRAFT_DB = "aircraft_db.json"
AIRPORTS_DB = "airports_db.json"

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

_aircraft_list = TypeAdapter(list[Aircraft])
_airport_list = TypeAdapter(list[Airport])


def _read_dataset(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except OSError as exc:
        logger.warning("Reference dataset unavailable: %s (%s)", path, exc)
        return None


def load_aircraft(path: Path) -> list[Aircraft]:
    """Load the aircraft dataset, sorted by name. Empty on any failure."""
    raw = _read_dataset(path)
    if raw is None:
        return []
    try:
        items = _aircraft_list.validate_json(raw)
    except ValidationError as exc:
        logger.warning("Malformed aircraft dataset %s: %d errors", path, exc.error_count())
        return []
    return sorted(items, key=lambda a: a.name)


def load_airports(path: Path) -> list[Airport]:
    """Load the airport dataset, sorted by IATA code. Empty on any failure."""
    raw = _read_dataset(path)
    if raw is None:
        return []
    try:
        items = _airport_list.validate_json(raw)
    except ValidationError as exc:
        logger.warning("Malformed airport dataset %s: %d errors", path, exc.error_count())
        return []
    return sorted(items, key=lambda a: a.iata)


def bundled_dataset(name: str) -> Path:
    """Path of a dataset shipped in ``avgeek/data``."""
    return _DATA_DIR / name


class ReferenceCatalog:
    """Read-only index over the aircraft and airport reference lists."""

    def __init__(self, aircraft: list[Aircraft], airports: list[Airport]):
        self._aircraft = list(aircraft)
        self._airports = list(airports)
        # First occurrence wins on duplicate keys.
        self._aircraft_index: dict[str, Aircraft] = {}
        for ac in self._aircraft:
            self._aircraft_index.setdefault(ac.id, ac)
        self._airport_index: dict[str, Airport] = {}
        for ap in self._airports:
            self._airport_index.setdefault(ap.iata.casefold(), ap)

    @classmethod
    def from_paths(cls, aircraft_path: Path, airports_path: Path) -> "ReferenceCatalog":
        catalog = cls(load_aircraft(aircraft_path), load_airports(airports_path))
        logger.info(
            "Reference catalog loaded: %d aircraft, %d airports",
            len(catalog.aircraft), len(catalog.airports),
        )
        return catalog

    @classmethod
    def from_bundle(cls) -> "ReferenceCatalog":
        return cls.from_paths(bundled_dataset(AIRCRAFT_DB), bundled_dataset(AIRPORTS_DB))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def aircraft(self) -> list[Aircraft]:
        return list(self._aircraft)

    @property
    def airports(self) -> list[Airport]:
        return list(self._airports)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def aircraft_by_id(self, aircraft_id: str) -> Aircraft | None:
        return self._aircraft_index.get(aircraft_id)

    def airport_by_code(self, code: str) -> Airport | None:
        """Case-insensitive IATA lookup."""
        return self._airport_index.get(code.strip().casefold())

    def manufacturers(self) -> list[str]:
        return sorted({a.manufacturer for a in self._aircraft})

    def compare(
        self, first_id: str, second_id: str
    ) -> tuple[Aircraft | None, Aircraft | None]:
        """Pair of aircraft for a side-by-side comparison."""
        return self.aircraft_by_id(first_id), self.aircraft_by_id(second_id)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_aircraft(
        self,
        query: str | None = None,
        *,
        status: ProductionStatus | None = None,
        category: AircraftCategory | None = None,
        manufacturer: str | None = None,
        favorites: set[str] | None = None,
    ) -> list[Aircraft]:
        """Filter the aircraft list, keeping catalog (name) order.

        *query* matches name, manufacturer, IATA or ICAO code
        (case-insensitive substring).  *favorites*, when given, restricts
        the result to those aircraft ids.
        """
        needle = (query or "").strip().casefold()

        def matches(ac: Aircraft) -> bool:
            if needle:
                haystacks = (ac.name, ac.manufacturer, ac.iata or "", ac.icao or "")
                if not any(needle in h.casefold() for h in haystacks):
                    return False
            if status is not None and ac.status != status:
                return False
            if category is not None and ac.category != category:
                return False
            if manufacturer is not None and ac.manufacturer != manufacturer:
                return False
            if favorites is not None and ac.id not in favorites:
                return False
            return True

        return [ac for ac in self._aircraft if matches(ac)]

    def search_airports(self, query: str) -> list[Airport]:
        needle = query.strip().casefold()
        if not needle:
            return self.airports
        return [
            ap for ap in self._airports
            if any(needle in h.casefold() for h in (ap.iata, ap.name, ap.city, ap.country))
        ]
