"""Statistics endpoints: all calculated, nothing persisted."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from avgeek.api.deps import get_data_store
from avgeek.services.data_store import DataStore
from avgeek.services.estimator import trees_to_offset

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def overview(
    limit: int = Query(default=10, ge=1, le=100),
    store: DataStore = Depends(get_data_store),
) -> dict:
    stats = store.statistics()
    co2_kg = stats.total_estimated_co2_kg()
    return {
        "total_flights": stats.total_flights,
        "total_distance_km": stats.total_distance_km,
        "max_single_flight_km": stats.max_single_flight_km(),
        "has_premium_cabin_flight": stats.has_premium_cabin_flight(),
        "distance_by_manufacturer": [
            {"manufacturer": m, "distance_km": km} for m, km in stats.distance_by_manufacturer()
        ],
        "distance_by_aircraft": [
            {"aircraft_id": ac.id, "name": ac.name, "distance_km": km}
            for ac, km in stats.distance_by_aircraft()
        ],
        "visits_by_airport": [
            {"iata": code, "visits": n} for code, n in stats.visits_by_airport()[:limit]
        ],
        "distance_by_airport": [
            {"iata": code, "distance_km": km} for code, km in stats.distance_by_airport()[:limit]
        ],
        "estimated_fuel_kg": stats.total_estimated_fuel_kg(),
        "estimated_co2_kg": co2_kg,
        "trees_one_year": trees_to_offset(co2_kg),
    }


@router.get("/co2-offset")
async def co2_offset(
    years: int = Query(default=1, ge=1, le=10),
    store: DataStore = Depends(get_data_store),
) -> dict:
    co2_kg = store.statistics().total_estimated_co2_kg()
    return {
        "estimated_co2_kg": co2_kg,
        "years": years,
        "trees_needed": trees_to_offset(co2_kg, years),
    }


@router.get("/summary")
async def summary(
    year: int | None = None,
    store: DataStore = Depends(get_data_store),
) -> dict:
    return store.summary(year).to_document()
