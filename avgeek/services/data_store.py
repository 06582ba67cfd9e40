"""DataStore: the one place user state is mutated.

Composes the reference catalog, the flight log, favorites and the badge
tracker.  Construct it explicitly, call ``initialize()`` once, then pass it
to whatever needs it (API app state, CLI command).

Every flight-log mutation runs the same explicit sequence under one lock:

1. mutate the in-memory log;
2. persist it (write-through);
3. recompute badges and let the tracker queue new unlocks.

So badge evaluation always sees a consistent post-mutation snapshot, and
no caller can observe the log and the badge state out of step.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from avgeek.config import KVBackend, Settings
from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.airport import Airport
from avgeek.contracts.badge import BadgeUnlock, RewardBadge
from avgeek.contracts.enums import CabinClass
from avgeek.contracts.flight import FlightLog
from avgeek.contracts.route import YearSummary
from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.persistence.errors import UnknownAircraftError, UnknownAirportError
from avgeek.persistence.firestore_store import FirestoreKeyValueStore
from avgeek.persistence.kv_store import JsonFileKeyValueStore, KeyValueStore
from avgeek.persistence.repositories.badge_state_repo import BadgeStateRepository
from avgeek.persistence.repositories.favorites_repo import FavoritesStore
from avgeek.persistence.repositories.flight_log_repo import FLIGHT_LOGS_FILE, FlightLogStore
from avgeek.services.badges import BadgeTracker, compute_badges
from avgeek.services.geo import airport_distance_km
from avgeek.services.statistics import FlightStatistics

logger = logging.getLogger(__name__)


class DataStore:
    def __init__(
        self,
        catalog: ReferenceCatalog,
        flight_log: FlightLogStore,
        kv_store: KeyValueStore,
    ):
        self._catalog = catalog
        self._flight_log = flight_log
        self._favorites = FavoritesStore(kv_store)
        self._tracker = BadgeTracker(BadgeStateRepository(kv_store))
        self._lock = threading.RLock()
        self._initialized = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataStore":
        catalog = ReferenceCatalog.from_paths(settings.aircraft_db, settings.airports_db)
        flight_log = FlightLogStore(Path(settings.data_dir) / FLIGHT_LOGS_FILE)
        if settings.kv_backend == KVBackend.FIRESTORE:
            kv_store: KeyValueStore = FirestoreKeyValueStore.from_default_credentials(
                settings.device_id
            )
        else:
            kv_store = JsonFileKeyValueStore(settings.settings_path)
        return cls(catalog, flight_log, kv_store)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Load persisted state and reconcile the badge baseline. Idempotent."""
        with self._lock:
            if self._initialized:
                return
            self._flight_log.load()
            self._favorites.load()
            self._tracker.initialize(self._compute_badges())
            self._initialized = True
            logger.info(
                "DataStore ready: %d flights, %d favorites, %d badges earned",
                len(self._flight_log), len(self._favorites.all()),
                len(self._tracker.earned_titles),
            )

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("DataStore.initialize() must be called first")

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> ReferenceCatalog:
        return self._catalog

    def aircraft(self, aircraft_id: str) -> Aircraft | None:
        return self._catalog.aircraft_by_id(aircraft_id)

    def airport(self, code: str) -> Airport | None:
        return self._catalog.airport_by_code(code)

    # ------------------------------------------------------------------
    # Flight log
    # ------------------------------------------------------------------

    def flights(self, newest_first: bool | None = None) -> list[FlightLog]:
        """Log order by default, or sorted by date when *newest_first* is given."""
        with self._lock:
            if newest_first is None:
                return self._flight_log.all()
            return self._flight_log.sorted_by_date(newest_first=newest_first)

    def append_flight(self, entry: FlightLog) -> list[RewardBadge]:
        """Add a flight. Returns the badges this unlocked (queued for display)."""
        with self._lock:
            self._require_initialized()
            self._flight_log.append(entry)
            return self._reevaluate_badges()

    def log_flight(
        self,
        origin_code: str,
        destination_code: str,
        aircraft_id: str,
        date: datetime | None = None,
        note: str | None = None,
        cabin: CabinClass | None = None,
    ) -> FlightLog:
        """Create a flight from catalog codes, capturing its great-circle distance."""
        origin = self._catalog.airport_by_code(origin_code)
        if origin is None:
            raise UnknownAirportError(origin_code)
        destination = self._catalog.airport_by_code(destination_code)
        if destination is None:
            raise UnknownAirportError(destination_code)
        if self._catalog.aircraft_by_id(aircraft_id) is None:
            raise UnknownAircraftError(aircraft_id)

        fields: dict = {
            "aircraft_id": aircraft_id,
            "origin_iata": origin.iata,
            "destination_iata": destination.iata,
            "distance_km": airport_distance_km(origin, destination),
            "note": note,
            "cabin": cabin,
        }
        if date is not None:
            fields["date"] = date
        entry = FlightLog(**fields)
        self.append_flight(entry)
        return entry

    def remove_flights(self, ids: Iterable[str]) -> int:
        with self._lock:
            self._require_initialized()
            removed = self._flight_log.remove(ids)
            if removed:
                self._reevaluate_badges()
            return removed

    def import_logs(self, buffer: bytes | str) -> int:
        """Merge an exported log. Raises ``ImportParseError``; log untouched then."""
        with self._lock:
            self._require_initialized()
            added = self._flight_log.import_merge(buffer)
            if added:
                self._reevaluate_badges()
            return added

    def import_file(self, path: Path) -> int:
        with self._lock:
            self._require_initialized()
            added = self._flight_log.import_file(path)
            if added:
                self._reevaluate_badges()
            return added

    def export_logs(self) -> bytes | None:
        with self._lock:
            return self._flight_log.export_all()

    def export_to_file(self, directory: Path | None = None) -> Path | None:
        with self._lock:
            return self._flight_log.export_to_file(directory)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def favorites(self) -> set[str]:
        with self._lock:
            return self._favorites.all()

    def is_favorite(self, aircraft_id: str) -> bool:
        with self._lock:
            return self._favorites.contains(aircraft_id)

    def add_favorite(self, aircraft_id: str) -> None:
        with self._lock:
            self._require_initialized()
            self._favorites.add(aircraft_id)

    def remove_favorite(self, aircraft_id: str) -> None:
        with self._lock:
            self._require_initialized()
            self._favorites.remove(aircraft_id)

    def toggle_favorite(self, aircraft_id: str) -> bool:
        with self._lock:
            self._require_initialized()
            return self._favorites.toggle(aircraft_id)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def statistics(self) -> FlightStatistics:
        """Snapshot of the current log; later mutations do not affect it."""
        with self._lock:
            return FlightStatistics(self._flight_log.all(), self._catalog)

    def summary(self, year: int | None = None) -> YearSummary:
        with self._lock:
            flights = self._flight_log.all()
        if year is not None:
            flights = [f for f in flights if f.date.year == year]
        stats = FlightStatistics(flights, self._catalog)
        return stats.summary(compute_badges(flights, self._catalog), year=year)

    # ------------------------------------------------------------------
    # Badges
    # ------------------------------------------------------------------

    def _compute_badges(self) -> list[RewardBadge]:
        return compute_badges(self._flight_log.all(), self._catalog)

    def _reevaluate_badges(self) -> list[RewardBadge]:
        return self._tracker.evaluate(self._compute_badges())

    def badges(self) -> list[RewardBadge]:
        with self._lock:
            return self._compute_badges()

    def pending_badges(self) -> list[str]:
        with self._lock:
            return self._tracker.pending_titles

    def peek_badge(self) -> RewardBadge | None:
        with self._lock:
            return self._tracker.peek()

    def current_badge(self) -> BadgeUnlock | None:
        with self._lock:
            return self._tracker.current

    def pop_next_badge(self) -> BadgeUnlock | None:
        with self._lock:
            return self._tracker.pop_next()

    def advance_badge(self) -> BadgeUnlock | None:
        with self._lock:
            return self._tracker.advance()

    def requeue_unshown_badges(self) -> list[RewardBadge]:
        with self._lock:
            self._require_initialized()
            return self._tracker.requeue_unshown(self._compute_badges())

    @property
    def earned_titles(self) -> set[str]:
        with self._lock:
            return self._tracker.earned_titles

    @property
    def shown_titles(self) -> set[str]:
        with self._lock:
            return self._tracker.shown_titles
