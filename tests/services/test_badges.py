"""Tests for badge definitions and the unlock tracker."""

from __future__ import annotations

from avgeek.contracts.badge import RewardBadge
from avgeek.contracts.enums import CabinClass
from avgeek.contracts.flight import FlightLog
from avgeek.persistence.repositories.badge_state_repo import (
    DISPLAYED_KEY,
    EARNED_KEY,
    BadgeStateRepository,
)
from avgeek.services.badges import BadgeTracker, achieved_titles, compute_badges
from tests.persistence.fake_kv import FailingKeyValueStore, InMemoryKeyValueStore


def _flight(
    km: float,
    aircraft_id: str = "a320neo",
    origin: str = "CDG",
    dest: str = "NCE",
    cabin: CabinClass | None = None,
) -> FlightLog:
    return FlightLog(
        aircraft_id=aircraft_id, origin_iata=origin, destination_iata=dest,
        distance_km=km, cabin=cabin,
    )


def _badge(title: str, achieved: bool = True) -> RewardBadge:
    return RewardBadge(title=title, icon="rosette", achieved=achieved, detail="")


def _by_title(badges: list[RewardBadge]) -> dict[str, RewardBadge]:
    return {b.title: b for b in badges}


class TestComputeBadges:
    def test_empty_log(self, catalog):
        badges = compute_badges([], catalog)
        titles = [b.title for b in badges]
        assert "Long-Haul" not in titles
        assert "Hub Regular" not in titles
        assert "10k km Club" in titles
        assert "Premium Cabin Flyer" in titles
        assert achieved_titles(badges) == []

    def test_deterministic(self, catalog):
        flights = [_flight(6000), _flight(700, origin="NCE", dest="CDG")]
        assert compute_badges(flights, catalog) == compute_badges(flights, catalog)

    def test_fixed_order(self, catalog):
        titles = [b.title for b in compute_badges([_flight(100)], catalog)]
        assert titles[:5] == [
            "10k km Club", "50k km Club", "100k km Club",
            "Quarter-Million Club", "Million-Kilometer Club",
        ]
        assert titles[5:8] == ["10 Flights", "50 Flights", "100 Flights"]
        assert titles[-1] == "Hub Regular"

    def test_distance_detail(self, catalog):
        badges = _by_title(compute_badges([_flight(9999)], catalog))
        club = badges["10k km Club"]
        assert club.achieved is False
        assert club.detail == "Next at 10000 km • Current: 9999 km"

        badges = _by_title(compute_badges([_flight(9999), _flight(50)], catalog))
        assert badges["10k km Club"].achieved is True
        assert badges["10k km Club"].detail == "Achieved: 10049 km total"

    def test_flight_count(self, catalog):
        badges = _by_title(compute_badges([_flight(100)] * 10, catalog))
        assert badges["10 Flights"].achieved is True
        assert badges["50 Flights"].achieved is False

    def test_long_haul(self, catalog):
        assert _by_title(compute_badges([_flight(5000)], catalog))["Long-Haul"].achieved
        assert not _by_title(compute_badges([_flight(4999)], catalog))["Long-Haul"].achieved

    def test_premium_cabin(self, catalog):
        badges = _by_title(compute_badges([_flight(100, cabin=CabinClass.BUSINESS)], catalog))
        assert badges["Premium Cabin Flyer"].achieved is True

    def test_hub_regular(self, catalog):
        flights = [_flight(700), _flight(700, origin="NCE", dest="CDG")] * 5
        hub = _by_title(compute_badges(flights, catalog))["Hub Regular"]
        assert hub.achieved is True
        assert hub.detail == "CDG ×10 visits"

    def test_type_collector_ignores_unknown_aircraft(self, catalog):
        ids = [a.id for a in catalog.aircraft][:9] + ["ghost-1", "ghost-2"]
        flights = [_flight(100, aircraft_id=i) for i in ids]
        assert not _by_title(compute_badges(flights, catalog))["Type Collector"].achieved

        flights.append(_flight(100, aircraft_id=catalog.aircraft[9].id))
        assert _by_title(compute_badges(flights, catalog))["Type Collector"].achieved


class TestBadgeTracker:
    def _tracker(self, kv=None) -> tuple[BadgeTracker, InMemoryKeyValueStore]:
        kv = kv if kv is not None else InMemoryKeyValueStore()
        return BadgeTracker(BadgeStateRepository(kv)), kv

    def test_evaluate_before_initialize_is_ignored(self):
        tracker, _ = self._tracker()
        assert tracker.evaluate([_badge("A")]) == []
        assert tracker.pending_titles == []

    def test_baseline_is_silent(self):
        tracker, kv = self._tracker()
        tracker.initialize([_badge("A"), _badge("B", achieved=False)])
        assert tracker.earned_titles == {"A"}
        assert tracker.pending_titles == []
        assert kv.data[EARNED_KEY] == ["A"]

    def test_new_unlock_queued_once(self):
        tracker, kv = self._tracker()
        tracker.initialize([_badge("A", achieved=False)])

        assert [b.title for b in tracker.evaluate([_badge("A")])] == ["A"]
        assert tracker.pending_titles == ["A"]
        # Earned is persisted before anything is handed out.
        assert kv.data[EARNED_KEY] == ["A"]

        assert tracker.evaluate([_badge("A")]) == []
        assert tracker.pending_titles == ["A"]

    def test_pop_marks_shown_first(self):
        tracker, kv = self._tracker()
        tracker.initialize([])
        tracker.evaluate([_badge("A"), _badge("B")])

        first = tracker.pop_next()
        assert first.badge.title == "A"
        assert first.is_major is True
        assert first.has_more is True
        assert kv.data[DISPLAYED_KEY] == ["A"]
        assert tracker.current == first

        second = tracker.advance()
        assert second.badge.title == "B"
        assert second.is_major is False
        assert second.has_more is False

        assert tracker.advance() is None
        assert tracker.current is None

    def test_major_again_after_new_batch(self):
        tracker, _ = self._tracker()
        tracker.initialize([])
        tracker.evaluate([_badge("A")])
        tracker.pop_next()
        tracker.evaluate([_badge("A"), _badge("B")])
        assert tracker.pop_next().is_major is True

    def test_earned_is_monotonic(self):
        tracker, _ = self._tracker()
        tracker.initialize([])
        tracker.evaluate([_badge("A")])
        tracker.evaluate([_badge("A", achieved=False)])
        assert "A" in tracker.earned_titles
        # Regaining the badge does not queue it again.
        assert tracker.evaluate([_badge("A")]) == []

    def test_shown_is_never_requeued(self):
        kv = InMemoryKeyValueStore({DISPLAYED_KEY: ["A"]})
        tracker, _ = self._tracker(kv)
        tracker.initialize([])
        assert tracker.evaluate([_badge("A")]) == []
        assert "A" in tracker.earned_titles

    def test_requeue_unshown(self):
        kv = InMemoryKeyValueStore({EARNED_KEY: ["A", "B"], DISPLAYED_KEY: ["B"]})
        tracker, _ = self._tracker(kv)
        tracker.initialize([_badge("A"), _badge("B")])
        assert tracker.pending_titles == []

        assert [b.title for b in tracker.requeue_unshown([_badge("A"), _badge("B")])] == ["A"]
        assert tracker.requeue_unshown([_badge("A"), _badge("B")]) == []
        assert tracker.pending_titles == ["A"]

    def test_state_survives_restart(self):
        tracker, kv = self._tracker()
        tracker.initialize([])
        tracker.evaluate([_badge("A")])
        tracker.pop_next()

        restarted, _ = self._tracker(kv)
        restarted.initialize([_badge("A")])
        assert restarted.earned_titles == {"A"}
        assert restarted.shown_titles == {"A"}
        assert restarted.pending_titles == []

    def test_failing_store_keeps_memory(self):
        tracker, _ = self._tracker(FailingKeyValueStore())
        tracker.initialize([])
        tracker.evaluate([_badge("A")])
        unlock = tracker.pop_next()
        assert unlock.badge.title == "A"
        assert tracker.shown_titles == {"A"}
