"""AvGeek data contracts: Pydantic v2 models for the flight companion.

Data authority
--------------

**Bundled JSON datasets** (read-only reference data, loaded once):
- ``Aircraft``: ``aircraft_db.json``
- ``Airport``: ``airports_db.json``

**Local file store** (source of truth for the user's flights):
- ``FlightLog``: ``flight_logs.json``, also the export/import format

**Key-value store** (small user settings, one string list per key):
- favorites: ``favorites_aircraft_ids``
- badge tracking: ``earned_badge_titles`` / ``displayed_badge_titles``

Calculated (never persisted)
----------------------------
- ``RewardBadge`` / ``BadgeUnlock``: recomputed from the flight log
- ``RouteEstimate`` / ``RouteChallenge`` / ``ChallengeResult``
- ``YearSummary``
"""

from avgeek.contracts.enums import (
    PREMIUM_CABINS,
    AircraftCategory,
    CabinClass,
    ProductionStatus,
)
from avgeek.contracts.common import StoreModel
from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.airport import Airport
from avgeek.contracts.flight import FlightLog, new_flight_id
from avgeek.contracts.badge import BadgeUnlock, RewardBadge
from avgeek.contracts.route import (
    ChallengeResult,
    RouteChallenge,
    RouteEstimate,
    YearSummary,
)

__all__ = [
    # Enums
    "AircraftCategory",
    "CabinClass",
    "PREMIUM_CABINS",
    "ProductionStatus",
    # Common
    "StoreModel",
    # Reference data
    "Aircraft",
    "Airport",
    # User data
    "FlightLog",
    "new_flight_id",
    # Calculated
    "BadgeUnlock",
    "RewardBadge",
    "ChallengeResult",
    "RouteChallenge",
    "RouteEstimate",
    "YearSummary",
]
