"""Repository for favorited aircraft ids."""

from __future__ import annotations

from avgeek.persistence.kv_store import KeyValueStore
from avgeek.persistence.repositories.base import StringSetRepository

FAVORITES_KEY = "favorites_aircraft_ids"


class FavoritesStore:
    """Set of favorited aircraft ids, written through on every mutation."""

    def __init__(self, store: KeyValueStore):
        self._repo = StringSetRepository(store, FAVORITES_KEY)
        self._ids: set[str] = set()

    def load(self) -> None:
        self._ids = self._repo.load()

    def add(self, aircraft_id: str) -> None:
        if aircraft_id in self._ids:
            return
        self._ids.add(aircraft_id)
        self._repo.save(self._ids)

    def remove(self, aircraft_id: str) -> None:
        if aircraft_id not in self._ids:
            return
        self._ids.discard(aircraft_id)
        self._repo.save(self._ids)

    def toggle(self, aircraft_id: str) -> bool:
        """Flip membership. Returns *True* if the id is now a favorite."""
        if aircraft_id in self._ids:
            self.remove(aircraft_id)
            return False
        self.add(aircraft_id)
        return True

    def contains(self, aircraft_id: str) -> bool:
        return aircraft_id in self._ids

    def all(self) -> set[str]:
        return set(self._ids)
