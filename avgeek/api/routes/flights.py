"""Flight log endpoints: CRUD, export and import."""

from __future__ import annotations

import asyncio
import time
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile
from pydantic import BaseModel, Field

from avgeek.api.deps import get_data_store
from avgeek.contracts.enums import CabinClass
from avgeek.contracts.flight import FlightLog
from avgeek.persistence.errors import (
    DuplicateFlightError,
    ImportParseError,
    UnknownAircraftError,
    UnknownAirportError,
)
from avgeek.services.data_store import DataStore

router = APIRouter(prefix="/flights", tags=["flights"])


class LogFlightRequest(BaseModel):
    """Request model for logging a flight between two catalog airports."""

    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    aircraft_id: str = Field(..., min_length=1)
    date: datetime | None = None
    note: str | None = None
    cabin: CabinClass | None = None


@router.get("")
async def list_flights(
    newest_first: bool | None = None,
    store: DataStore = Depends(get_data_store),
) -> list[dict]:
    return [f.to_document() for f in store.flights(newest_first=newest_first)]


@router.post("", status_code=201)
async def create_flight(
    flight: FlightLog,
    store: DataStore = Depends(get_data_store),
) -> dict:
    try:
        unlocked = await asyncio.to_thread(store.append_flight, flight)
    except DuplicateFlightError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    data = flight.to_document()
    data["unlocked_badges"] = [b.title for b in unlocked]
    return data


@router.post("/log", status_code=201)
async def log_flight(
    req: LogFlightRequest,
    store: DataStore = Depends(get_data_store),
) -> dict:
    """Create a flight from airport codes; the distance is computed here."""
    try:
        flight = await asyncio.to_thread(
            store.log_flight,
            req.origin,
            req.destination,
            req.aircraft_id,
            req.date,
            req.note,
            req.cabin,
        )
    except (UnknownAirportError, UnknownAircraftError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return flight.to_document()


@router.get("/export")
async def export_flights(store: DataStore = Depends(get_data_store)) -> Response:
    data = store.export_logs()
    if data is None:
        raise HTTPException(status_code=500, detail="Export failed")
    filename = f"avgeek_logs_{int(time.time())}.json"
    return Response(
        content=data,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import")
async def import_flights(
    file: UploadFile,
    store: DataStore = Depends(get_data_store),
) -> dict:
    """Merge an exported JSON log. Already-logged ids are skipped."""
    content = await file.read()
    try:
        added = await asyncio.to_thread(store.import_logs, content)
    except ImportParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"added": added, "total": len(store.flights())}


@router.get("/{flight_id}")
async def get_flight(
    flight_id: str,
    store: DataStore = Depends(get_data_store),
) -> dict:
    item = next((f for f in store.flights() if f.id == flight_id), None)
    if item is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return item.to_document()


@router.delete("/{flight_id}", status_code=204, response_class=Response)
async def delete_flight(
    flight_id: str,
    store: DataStore = Depends(get_data_store),
) -> Response:
    removed = await asyncio.to_thread(store.remove_flights, {flight_id})
    if not removed:
        raise HTTPException(status_code=404, detail="Flight not found")
    return Response(status_code=204)
