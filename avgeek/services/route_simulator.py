"""Route simulation and the "route challenge" game."""

from __future__ import annotations

import logging
import random

from avgeek.contracts.route import ChallengeResult, RouteChallenge, RouteEstimate
from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.persistence.errors import UnknownAircraftError, UnknownAirportError
from avgeek.services.estimator import estimate_route
from avgeek.services.geo import airport_distance_km

logger = logging.getLogger(__name__)

CHALLENGE_MIN_KM = 1500
CHALLENGE_MAX_TRIES = 30


class RouteSimulator:
    def __init__(self, catalog: ReferenceCatalog, rng: random.Random | None = None):
        self._catalog = catalog
        self._rng = rng or random.Random()

    def simulate(
        self,
        origin_code: str,
        destination_code: str,
        aircraft_id: str | None = None,
    ) -> RouteEstimate:
        """Estimate a route between two catalog airports.

        Raises ``UnknownAirportError`` / ``UnknownAircraftError`` when a
        code or id does not resolve.
        """
        origin = self._catalog.airport_by_code(origin_code)
        if origin is None:
            raise UnknownAirportError(origin_code)
        destination = self._catalog.airport_by_code(destination_code)
        if destination is None:
            raise UnknownAirportError(destination_code)

        aircraft = None
        if aircraft_id is not None:
            aircraft = self._catalog.aircraft_by_id(aircraft_id)
            if aircraft is None:
                raise UnknownAircraftError(aircraft_id)

        return estimate_route(origin, destination, aircraft)

    # ------------------------------------------------------------------
    # Challenge
    # ------------------------------------------------------------------

    def pick_challenge(self) -> RouteChallenge | None:
        """Random pair of distinct airports, preferably ≥ 1500 km apart.

        Gives up after a bounded number of draws and keeps the last pair,
        with the destination redrawn if it repeats the origin.
        *None* when the catalog has fewer than two airports.
        """
        airports = self._catalog.airports
        if len(airports) < 2:
            return None

        origin, destination = self._rng.choice(airports), self._rng.choice(airports)
        tries = 0
        while (
            origin.iata == destination.iata
            or airport_distance_km(origin, destination) < CHALLENGE_MIN_KM
        ) and tries < CHALLENGE_MAX_TRIES:
            origin, destination = self._rng.choice(airports), self._rng.choice(airports)
            tries += 1

        if tries == CHALLENGE_MAX_TRIES:
            logger.debug("Challenge draw gave up after %d tries", tries)
            if origin.iata == destination.iata:
                destination = self._rng.choice(
                    [a for a in airports if a.iata != origin.iata]
                )

        return RouteChallenge(
            origin_iata=origin.iata,
            destination_iata=destination.iata,
            distance_km=airport_distance_km(origin, destination),
        )

    def check_challenge(self, challenge: RouteChallenge, aircraft_id: str) -> ChallengeResult:
        """An aircraft with unknown range never passes."""
        aircraft = self._catalog.aircraft_by_id(aircraft_id)
        if aircraft is None:
            raise UnknownAircraftError(aircraft_id)

        km = challenge.distance_km
        range_km = aircraft.range_km
        success = range_km is not None and km <= range_km
        verdict = "Within range" if success else "Out of range"
        return ChallengeResult(
            challenge=challenge,
            aircraft_id=aircraft.id,
            range_km=range_km,
            success=success,
            message=f"{verdict} – {int(km)} km vs {range_km or 0} km",
        )
