"""Repository for badge-tracking title sets (earned / displayed)."""

from __future__ import annotations

from avgeek.persistence.kv_store import KeyValueStore
from avgeek.persistence.repositories.base import StringSetRepository

EARNED_KEY = "earned_badge_titles"
DISPLAYED_KEY = "displayed_badge_titles"


class BadgeStateRepository:
    """Two independent persisted title sets sharing one key-value store."""

    def __init__(self, store: KeyValueStore):
        self._earned = StringSetRepository(store, EARNED_KEY)
        self._displayed = StringSetRepository(store, DISPLAYED_KEY)

    def load_earned(self) -> set[str]:
        return self._earned.load()

    def load_displayed(self) -> set[str]:
        return self._displayed.load()

    def save_earned(self, titles: set[str]) -> bool:
        return self._earned.save(titles)

    def save_displayed(self, titles: set[str]) -> bool:
        return self._displayed.save(titles)
