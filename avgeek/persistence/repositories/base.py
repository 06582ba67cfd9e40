"""Generic string-set repository over a ``KeyValueStore`` key."""

from __future__ import annotations

import logging

from avgeek.persistence.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class StringSetRepository:
    """Persisted set of strings stored as a list under one key.

    Reads never raise: a missing or unreadable key is an empty set.
    Writes are write-through; a failed write is logged and swallowed so
    the in-memory set stays the source of truth for the session.
    """

    def __init__(self, store: KeyValueStore, key: str):
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def load(self) -> set[str]:
        try:
            values = self._store.get_strings(self._key)
        except Exception as exc:
            logger.warning("Failed to read %s, treating as empty: %s", self._key, exc)
            return set()
        return set(values or [])

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, values: set[str]) -> bool:
        """Persist *values*. Returns *False* if the write failed."""
        try:
            self._store.set_strings(self._key, sorted(values))
        except Exception:
            logger.exception("Failed to persist %s (%d values)", self._key, len(values))
            return False
        return True
