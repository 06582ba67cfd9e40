"""Reward badges: definitions and the unlock-notification state machine.

``compute_badges`` is a pure function of the flight log and the catalog.

``BadgeTracker`` remembers which titles were ever earned and which were
ever shown, and feeds newly earned, never-shown badges through a FIFO
pending queue so each one reaches the user exactly once:

    mutation ──► evaluate() ──► pending ──► pop_next() ──► presentation
                                   ▲                          │
                                   └──────── advance() ◄──────┘ (dismiss)

Ordering guarantees:
- earned titles are persisted before anything is queued;
- a title is persisted as shown before its badge is handed out, so a
  crash during presentation never causes a re-show.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from avgeek.contracts.badge import BadgeUnlock, RewardBadge
from avgeek.contracts.flight import FlightLog
from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.persistence.repositories.badge_state_repo import BadgeStateRepository
from avgeek.services.statistics import FlightStatistics

logger = logging.getLogger(__name__)

DISTANCE_MILESTONES: list[tuple[int, str]] = [
    (10_000, "10k km Club"),
    (50_000, "50k km Club"),
    (100_000, "100k km Club"),
    (250_000, "Quarter-Million Club"),
    (1_000_000, "Million-Kilometer Club"),
]

FLIGHT_MILESTONES: list[tuple[int, str]] = [
    (10, "10 Flights"),
    (50, "50 Flights"),
    (100, "100 Flights"),
]

TYPE_COLLECTOR_MIN = 10
AIRPORT_EXPLORER_MIN = 20
WORLD_EXPLORER_MIN = 50
LONG_HAUL_KM = 5000
HUB_REGULAR_VISITS = 10


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


def compute_badges(
    flights: Sequence[FlightLog], catalog: ReferenceCatalog
) -> list[RewardBadge]:
    """Current badge set, in fixed catalog order.

    Deterministic and side-effect free.  "Long-Haul" and "Hub Regular" are
    only listed once at least one flight exists.
    """
    stats = FlightStatistics(flights, catalog)
    km = int(stats.total_distance_km)
    count = stats.total_flights

    badges: list[RewardBadge] = []

    for threshold, title in DISTANCE_MILESTONES:
        ok = km >= threshold
        badges.append(RewardBadge(
            title=title,
            icon="rosette",
            achieved=ok,
            detail=f"Achieved: {km} km total" if ok
            else f"Next at {threshold} km • Current: {km} km",
        ))

    for threshold, title in FLIGHT_MILESTONES:
        ok = count >= threshold
        badges.append(RewardBadge(
            title=title,
            icon="airplane.circle.fill" if ok else "airplane.circle",
            achieved=ok,
            detail=f"Achieved: {count} flights" if ok
            else f"Next at {threshold} flights • Current: {count}",
        ))

    distinct_aircraft = stats.distinct_aircraft_count()
    distinct_airports = stats.distinct_airport_count()
    diversity = [
        (distinct_aircraft >= TYPE_COLLECTOR_MIN, "Type Collector",
         f"{TYPE_COLLECTOR_MIN}+ aircraft types"),
        (distinct_airports >= AIRPORT_EXPLORER_MIN, "Airport Explorer",
         f"{AIRPORT_EXPLORER_MIN}+ unique airports"),
        (distinct_airports >= WORLD_EXPLORER_MIN, "World Explorer",
         f"{WORLD_EXPLORER_MIN}+ unique airports"),
    ]
    for ok, title, goal in diversity:
        badges.append(RewardBadge(
            title=title,
            icon="globe.americas.fill" if ok else "globe.americas",
            achieved=ok,
            detail=f"Achieved: {goal}" if ok else f"Next: {goal}",
        ))

    if count:
        longest = int(stats.max_single_flight_km())
        ok = longest >= LONG_HAUL_KM
        badges.append(RewardBadge(
            title="Long-Haul",
            icon="airplane",
            achieved=ok,
            detail=f"Longest flight: {longest} km" if ok
            else f"Next: {LONG_HAUL_KM} km • Current: {longest} km",
        ))

    premium = stats.has_premium_cabin_flight()
    badges.append(RewardBadge(
        title="Premium Cabin Flyer",
        icon="crown.fill" if premium else "crown",
        achieved=premium,
        detail="Flown Business/First" if premium else "Take one Business/First flight",
    ))

    top = stats.top_airports(limit=1)
    if top:
        code, visits = top[0]
        ok = visits >= HUB_REGULAR_VISITS
        badges.append(RewardBadge(
            title="Hub Regular",
            icon="building.2.fill" if ok else "building.2",
            achieved=ok,
            detail=f"{code} ×{visits} visits" if ok
            else f"Next: {HUB_REGULAR_VISITS} visits to a single airport • Best: {code} ×{visits}",
        ))

    return badges


def achieved_titles(badges: Sequence[RewardBadge]) -> list[str]:
    return [b.title for b in badges if b.achieved]


# ---------------------------------------------------------------------------
# Tracking state machine
# ---------------------------------------------------------------------------


class BadgeTracker:
    """Earned / shown bookkeeping plus the volatile pending queue.

    Not thread-safe on its own; the owning ``DataStore`` serializes calls.
    """

    def __init__(self, repo: BadgeStateRepository):
        self._repo = repo
        self._earned: set[str] = set()
        self._shown: set[str] = set()
        self._pending: deque[RewardBadge] = deque()
        self._current: BadgeUnlock | None = None
        self._next_is_major = False
        self._initializing = True

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return not self._initializing

    @property
    def earned_titles(self) -> set[str]:
        return set(self._earned)

    @property
    def shown_titles(self) -> set[str]:
        return set(self._shown)

    @property
    def pending_titles(self) -> list[str]:
        return [b.title for b in self._pending]

    @property
    def current(self) -> BadgeUnlock | None:
        """Badge most recently handed out and not yet dismissed."""
        return self._current

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, badges: Sequence[RewardBadge]) -> None:
        """Load persisted sets and fold in what is already achieved.

        Progress made before tracking existed becomes "earned" silently;
        nothing is queued during this baseline reconciliation.
        """
        self._earned = self._repo.load_earned()
        self._shown = self._repo.load_displayed()
        baseline = set(achieved_titles(badges))
        if not baseline <= self._earned:
            logger.info(
                "Badge baseline: %d already-achieved titles marked earned",
                len(baseline - self._earned),
            )
        self._earned |= baseline
        self._repo.save_earned(self._earned)
        self._initializing = False

    def evaluate(self, badges: Sequence[RewardBadge]) -> list[RewardBadge]:
        """React to a new badge snapshot after a mutation.

        Returns the badges appended to the pending queue (possibly none).
        """
        if self._initializing:
            return []

        newly = [b for b in badges if b.achieved and b.title not in self._earned]
        if not newly:
            return []

        self._earned.update(b.title for b in newly)
        self._repo.save_earned(self._earned)

        unseen = [b for b in newly if b.title not in self._shown]
        if not unseen:
            return []

        self._enqueue(unseen)
        logger.info("Badges unlocked: %s", ", ".join(b.title for b in unseen))
        return unseen

    def requeue_unshown(self, badges: Sequence[RewardBadge]) -> list[RewardBadge]:
        """Queue earned-but-never-shown badges that are still achieved.

        Opt-in recovery for a display interrupted by a crash; never called
        automatically.
        """
        queued = set(self.pending_titles)
        if self._current is not None:
            queued.add(self._current.badge.title)
        lost = [
            b for b in badges
            if b.achieved
            and b.title in self._earned
            and b.title not in self._shown
            and b.title not in queued
        ]
        if lost:
            self._enqueue(lost)
            logger.info("Re-queued unshown badges: %s", ", ".join(b.title for b in lost))
        return lost

    def _enqueue(self, badges: list[RewardBadge]) -> None:
        self._pending.extend(badges)
        self._next_is_major = True

    # ------------------------------------------------------------------
    # Display protocol
    # ------------------------------------------------------------------

    def peek(self) -> RewardBadge | None:
        return self._pending[0] if self._pending else None

    def pop_next(self) -> BadgeUnlock | None:
        """Hand out the head of the queue, persisting it as shown first."""
        if not self._pending:
            return None
        badge = self._pending.popleft()
        self._shown.add(badge.title)
        self._repo.save_displayed(self._shown)

        unlock = BadgeUnlock(
            badge=badge,
            is_major=self._next_is_major,
            has_more=bool(self._pending),
        )
        self._next_is_major = False
        self._current = unlock
        return unlock

    def advance(self) -> BadgeUnlock | None:
        """Dismiss the current badge and hand out the next one, if any."""
        self._current = None
        return self.pop_next()
