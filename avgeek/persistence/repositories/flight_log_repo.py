"""Repository for the user's flight log (a JSON array file).

Write-through: every mutation rewrites the whole file atomically before
returning.  A failed write is logged and swallowed; the in-memory list
stays the source of truth for the session.
"""

from __future__ import annotations

import json
import logging
import tempfile
import time
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from avgeek.contracts.flight import FlightLog
from avgeek.persistence.errors import (
    DuplicateFlightError,
    ImportParseError,
    ImportReadError,
)
from avgeek.persistence.file_store import read_json, write_atomic

logger = logging.getLogger(__name__)

FLIGHT_LOGS_FILE = "flight_logs.json"

_flight_list = TypeAdapter(list[FlightLog])


def _dedupe(flights: Iterable[FlightLog], seen: set[str]) -> list[FlightLog]:
    """Keep the first flight per id; *seen* is updated in place."""
    kept: list[FlightLog] = []
    for flight in flights:
        if flight.id in seen:
            continue
        seen.add(flight.id)
        kept.append(flight)
    return kept


class FlightLogStore:
    def __init__(self, path: Path):
        self._path = Path(path)
        self._flights: list[FlightLog] = []

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._flights)

    # ------------------------------------------------------------------
    # Load / persist
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Read the log file. Missing or corrupt → empty log."""
        raw = read_json(self._path)
        if raw is None:
            self._flights = []
            return
        try:
            flights = _flight_list.validate_python(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring corrupt flight log %s: %d errors", self._path, exc.error_count()
            )
            self._flights = []
            return
        self._flights = _dedupe(flights, set())
        logger.info("Loaded %d flights from %s", len(self._flights), self._path)

    def _serialize(self) -> bytes:
        return json.dumps(
            [f.to_document() for f in self._flights], indent=2, ensure_ascii=False
        ).encode()

    def _persist(self) -> bool:
        try:
            write_atomic(self._path, self._serialize())
        except Exception:
            logger.exception("Failed to persist flight log to %s", self._path)
            return False
        return True

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def all(self) -> list[FlightLog]:
        """Flights in log (insertion) order."""
        return list(self._flights)

    def get(self, flight_id: str) -> FlightLog | None:
        return next((f for f in self._flights if f.id == flight_id), None)

    def ids(self) -> set[str]:
        return {f.id for f in self._flights}

    def sorted_by_date(self, newest_first: bool = True) -> list[FlightLog]:
        return sorted(self._flights, key=lambda f: f.date, reverse=newest_first)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def append(self, entry: FlightLog) -> None:
        if any(f.id == entry.id for f in self._flights):
            raise DuplicateFlightError(entry.id)
        self._flights.append(entry)
        self._persist()

    def remove(self, ids: Iterable[str]) -> int:
        """Remove every flight whose id is in *ids*. Returns the count removed."""
        doomed = set(ids)
        kept = [f for f in self._flights if f.id not in doomed]
        removed = len(self._flights) - len(kept)
        if removed:
            self._flights = kept
            self._persist()
        return removed

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------

    def export_all(self) -> bytes | None:
        """Full log as a JSON array, or *None* if serialization fails."""
        try:
            return self._serialize()
        except (TypeError, ValueError):
            logger.exception("Flight log export failed")
            return None

    def export_to_file(self, directory: Path | None = None) -> Path | None:
        """Write ``avgeek_logs_<ts>.json`` (temp dir by default) for sharing."""
        data = self.export_all()
        if data is None:
            return None
        out_dir = Path(directory) if directory is not None else Path(tempfile.gettempdir())
        out_path = out_dir / f"avgeek_logs_{int(time.time())}.json"
        try:
            write_atomic(out_path, data)
        except OSError:
            logger.exception("Export failed: %s", out_path)
            return None
        logger.info("Exported %d flights to %s", len(self._flights), out_path)
        return out_path

    def import_merge(self, buffer: bytes | str) -> int:
        """Merge a JSON array of flight logs into the log.

        Incoming flights whose id is already logged (or repeated earlier in
        the buffer) are skipped: first write wins, nothing is overwritten.
        The rest are appended in buffer order.  Parsing happens before any
        change, so a bad buffer leaves the log untouched.

        Returns the number of flights added.
        """
        try:
            incoming = _flight_list.validate_json(buffer)
        except ValidationError as exc:
            raise ImportParseError(
                f"Not a valid flight log array ({exc.error_count()} errors)"
            ) from exc

        added = _dedupe(incoming, self.ids())
        if added:
            self._flights.extend(added)
            self._persist()
        logger.info(
            "Imported %d of %d flights (%d duplicates skipped)",
            len(added), len(incoming), len(incoming) - len(added),
        )
        return len(added)

    def import_file(self, path: Path) -> int:
        try:
            buffer = Path(path).read_bytes()
        except OSError as exc:
            raise ImportReadError(str(path), exc.strerror or str(exc)) from exc
        return self.import_merge(buffer)
