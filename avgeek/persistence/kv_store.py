"""Key-value store for small user settings (string lists per key).

Two backends share the ``KeyValueStore`` interface:

- ``JsonFileKeyValueStore``: one JSON object file in the data directory
  (default, fully offline).
- ``FirestoreKeyValueStore``: one Firestore document per key
  (see ``avgeek.persistence.firestore_store``).

Backends raise on write failure; repositories decide what to do with it.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from avgeek.persistence.file_store import read_json, write_atomic

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal string-list key-value store."""

    @abstractmethod
    def get_strings(self, key: str) -> list[str] | None:
        """Return the list stored under *key*, or *None* if absent/unreadable."""

    @abstractmethod
    def set_strings(self, key: str, values: list[str]) -> None:
        """Durably store *values* under *key* before returning."""


class JsonFileKeyValueStore(KeyValueStore):
    """All keys in a single JSON object, rewritten atomically on every set."""

    def __init__(self, path: Path):
        self._path = Path(path)
        self._data: dict[str, list[str]] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, list[str]]:
        raw = read_json(self._path)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring settings file %s: not a JSON object", self._path)
            return {}
        return {
            key: [str(v) for v in values]
            for key, values in raw.items()
            if isinstance(values, list)
        }

    def get_strings(self, key: str) -> list[str] | None:
        values = self._data.get(key)
        return list(values) if values is not None else None

    def set_strings(self, key: str, values: list[str]) -> None:
        self._data[key] = list(values)
        payload = json.dumps(self._data, indent=2, sort_keys=True).encode()
        write_atomic(self._path, payload)
