"""Aggregate statistics over the flight log.

Everything here is a pure function of (flights, catalog), recomputed on
demand.  Breakdowns are lists of ``(key, value)`` pairs sorted by value,
descending; ties keep first-seen (log) order.
"""

from __future__ import annotations

from collections.abc import Sequence

from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.badge import RewardBadge
from avgeek.contracts.flight import FlightLog
from avgeek.contracts.route import YearSummary
from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.services.estimator import CO2_PER_KG_FUEL, flight_fuel_kg


def _descending(counts: dict) -> list[tuple]:
    # sorted() is stable, also with reverse=True.
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)


class FlightStatistics:
    def __init__(self, flights: Sequence[FlightLog], catalog: ReferenceCatalog):
        self._flights = list(flights)
        self._catalog = catalog

    @property
    def flights(self) -> list[FlightLog]:
        return list(self._flights)

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    @property
    def total_distance_km(self) -> float:
        return sum(f.distance_km for f in self._flights)

    @property
    def total_flights(self) -> int:
        return len(self._flights)

    def max_single_flight_km(self) -> float:
        return max((f.distance_km for f in self._flights), default=0.0)

    def has_premium_cabin_flight(self) -> bool:
        return any(f.is_premium_cabin for f in self._flights)

    def distinct_aircraft_count(self) -> int:
        """Distinct aircraft types flown, counting only catalog-known ones."""
        return len({
            f.aircraft_id for f in self._flights
            if self._catalog.aircraft_by_id(f.aircraft_id) is not None
        })

    def distinct_airport_count(self) -> int:
        codes: set[str] = set()
        for f in self._flights:
            codes.add(f.origin_iata)
            codes.add(f.destination_iata)
        return len(codes)

    # ------------------------------------------------------------------
    # Breakdowns
    # ------------------------------------------------------------------

    def distance_by_manufacturer(self) -> list[tuple[str, float]]:
        """Flights whose aircraft is not in the catalog are left out."""
        km: dict[str, float] = {}
        for f in self._flights:
            ac = self._catalog.aircraft_by_id(f.aircraft_id)
            if ac is not None:
                km[ac.manufacturer] = km.get(ac.manufacturer, 0.0) + f.distance_km
        return _descending(km)

    def distance_by_aircraft(self) -> list[tuple[Aircraft, float]]:
        """Flights whose aircraft is not in the catalog are left out."""
        km: dict[str, float] = {}
        for f in self._flights:
            km[f.aircraft_id] = km.get(f.aircraft_id, 0.0) + f.distance_km
        known = [
            (ac, total)
            for ac, total in ((self._catalog.aircraft_by_id(i), t) for i, t in km.items())
            if ac is not None
        ]
        return sorted(known, key=lambda pair: pair[1], reverse=True)

    def visits_by_airport(self) -> list[tuple[str, int]]:
        """One visit per appearance as origin and one as destination."""
        visits: dict[str, int] = {}
        for f in self._flights:
            visits[f.origin_iata] = visits.get(f.origin_iata, 0) + 1
            visits[f.destination_iata] = visits.get(f.destination_iata, 0) + 1
        return _descending(visits)

    def distance_by_airport(self) -> list[tuple[str, float]]:
        """Km of every flight touching the airport, as origin or destination."""
        km: dict[str, float] = {}
        for f in self._flights:
            km[f.origin_iata] = km.get(f.origin_iata, 0.0) + f.distance_km
            km[f.destination_iata] = km.get(f.destination_iata, 0.0) + f.distance_km
        return _descending(km)

    def top_airports(self, limit: int = 5) -> list[tuple[str, int]]:
        return self.visits_by_airport()[:max(limit, 0)]

    # ------------------------------------------------------------------
    # Estimates
    # ------------------------------------------------------------------

    def total_estimated_fuel_kg(self) -> float:
        return sum(
            flight_fuel_kg(f, self._catalog.aircraft_by_id(f.aircraft_id))
            for f in self._flights
        )

    def total_estimated_co2_kg(self) -> float:
        return self.total_estimated_fuel_kg() * CO2_PER_KG_FUEL

    # ------------------------------------------------------------------
    # Summary card
    # ------------------------------------------------------------------

    def flights_in_year(self, year: int) -> list[FlightLog]:
        return [f for f in self._flights if f.date.year == year]

    def summary(
        self, badges: Sequence[RewardBadge] = (), year: int | None = None
    ) -> YearSummary:
        """Card data for these flights; *badges* must be computed from the same flights."""
        by_aircraft = self.distance_by_aircraft()
        top_airports = self.top_airports(limit=1)
        earned = [b.title for b in badges if b.achieved]
        return YearSummary(
            year=year,
            total_distance_km=int(self.total_distance_km),
            total_flights=self.total_flights,
            top_aircraft=by_aircraft[0][0].name if by_aircraft else None,
            top_airport=top_airports[0][0] if top_airports else None,
            longest_flight_km=int(self.max_single_flight_km()),
            badge_count=len(earned),
            top_badges=earned[:3],
            estimated_co2_tonnes=self.total_estimated_co2_kg() / 1000.0,
        )
