"""Route simulation and route challenge endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from avgeek.api.deps import get_route_simulator
from avgeek.contracts.route import RouteChallenge
from avgeek.persistence.errors import UnknownAircraftError, UnknownAirportError
from avgeek.services.route_simulator import RouteSimulator

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("/simulate")
async def simulate(
    origin: str,
    destination: str,
    aircraft_id: str | None = None,
    sim: RouteSimulator = Depends(get_route_simulator),
) -> dict:
    try:
        estimate = sim.simulate(origin, destination, aircraft_id)
    except (UnknownAirportError, UnknownAircraftError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return estimate.to_document()


@router.get("/challenge")
async def new_challenge(sim: RouteSimulator = Depends(get_route_simulator)) -> dict:
    challenge = sim.pick_challenge()
    if challenge is None:
        raise HTTPException(status_code=404, detail="Not enough airports for a challenge")
    return challenge.to_document()


@router.post("/challenge/check")
async def check_challenge(
    challenge: RouteChallenge,
    aircraft_id: str,
    sim: RouteSimulator = Depends(get_route_simulator),
) -> dict:
    try:
        result = sim.check_challenge(challenge, aircraft_id)
    except UnknownAircraftError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return result.to_document()
