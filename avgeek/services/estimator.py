"""Time, fuel and CO2 estimates from distance and aircraft performance.

Rough offline figures, good enough for a logbook:

- cruise speed: the aircraft's own figure, else a per-category default;
- fuel: average block burn (kg/h) × flight time, only when an aircraft
  is known;
- CO2: 3.16 kg per kg of jet fuel burned.
"""

from __future__ import annotations

import math

from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.airport import Airport
from avgeek.contracts.enums import AircraftCategory
from avgeek.contracts.flight import FlightLog
from avgeek.contracts.route import RouteEstimate
from avgeek.services.geo import airport_distance_km, km_to_nm

DEFAULT_CRUISE_SPEED_KMH = 840.0
CATEGORY_CRUISE_SPEED_KMH: dict[str, float] = {
    AircraftCategory.REGIONAL_TURBOPROP.value: 500.0,
    AircraftCategory.REGIONAL_JET.value: 780.0,
}
DEFAULT_FUEL_BURN_KG_PER_HOUR = 2600.0  # average jet
CO2_PER_KG_FUEL = 3.16  # Jet A
CO2_PER_TREE_PER_YEAR_KG = 21.8


def category_cruise_speed_kmh(category: str | None) -> float:
    if category is None:
        return DEFAULT_CRUISE_SPEED_KMH
    return CATEGORY_CRUISE_SPEED_KMH.get(category, DEFAULT_CRUISE_SPEED_KMH)


def cruise_speed_kmh(aircraft: Aircraft | None) -> float:
    """Explicit cruise speed, else the category default (840 km/h if no aircraft)."""
    if aircraft is None:
        return DEFAULT_CRUISE_SPEED_KMH
    if aircraft.cruise_speed_kmh:
        return float(aircraft.cruise_speed_kmh)
    return category_cruise_speed_kmh(aircraft.category)


def fuel_burn_kg_per_hour(aircraft: Aircraft) -> float:
    return aircraft.fuel_burn_kg_per_hour or DEFAULT_FUEL_BURN_KG_PER_HOUR


def estimated_minutes(distance_km: float, aircraft: Aircraft | None = None) -> int:
    minutes = distance_km / cruise_speed_kmh(aircraft) * 60
    # Half rounds up, not to even.
    return math.floor(minutes + 0.5)


def estimated_fuel_kg(distance_km: float, aircraft: Aircraft | None) -> float | None:
    """Fuel over the rounded flight time. *None* without an aircraft."""
    if aircraft is None:
        return None
    minutes = estimated_minutes(distance_km, aircraft)
    return fuel_burn_kg_per_hour(aircraft) * (minutes / 60)


def co2_kg(fuel_kg: float | None) -> float | None:
    return None if fuel_kg is None else fuel_kg * CO2_PER_KG_FUEL


def flight_fuel_kg(flight: FlightLog, aircraft: Aircraft | None) -> float:
    """Aggregate form used by statistics: unrounded hours, 0 if aircraft unknown."""
    if aircraft is None:
        return 0.0
    hours = flight.distance_km / cruise_speed_kmh(aircraft)
    return fuel_burn_kg_per_hour(aircraft) * hours


def trees_to_offset(co2: float, years: int = 1) -> float:
    """Trees needed to absorb *co2* kg over *years* (purely illustrative)."""
    return co2 / CO2_PER_TREE_PER_YEAR_KG * years


def estimate_route(
    origin: Airport,
    destination: Airport,
    aircraft: Aircraft | None = None,
) -> RouteEstimate:
    """Great-circle estimate between two airports."""
    km = airport_distance_km(origin, destination)
    fuel = estimated_fuel_kg(km, aircraft)

    within_range: bool | None = None
    if aircraft is not None and aircraft.range_km is not None:
        within_range = km <= aircraft.range_km

    return RouteEstimate(
        origin_iata=origin.iata,
        destination_iata=destination.iata,
        aircraft_id=aircraft.id if aircraft else None,
        distance_km=km,
        distance_nm=km_to_nm(km),
        cruise_speed_kmh=cruise_speed_kmh(aircraft),
        estimated_minutes=estimated_minutes(km, aircraft),
        estimated_fuel_kg=fuel,
        estimated_co2_kg=co2_kg(fuel),
        within_range=within_range,
    )
