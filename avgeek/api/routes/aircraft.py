"""Aircraft catalog endpoints (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from avgeek.api.deps import get_catalog, get_data_store
from avgeek.contracts.enums import AircraftCategory, ProductionStatus
from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.services.data_store import DataStore

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.get("")
async def list_aircraft(
    q: str | None = None,
    status: ProductionStatus | None = None,
    category: AircraftCategory | None = None,
    manufacturer: str | None = None,
    favorites_only: bool = False,
    store: DataStore = Depends(get_data_store),
) -> list[dict]:
    favorites = store.favorites() if favorites_only else None
    items = store.catalog.search_aircraft(
        q,
        status=status,
        category=category,
        manufacturer=manufacturer,
        favorites=favorites,
    )
    return [a.to_document() for a in items]


@router.get("/manufacturers")
async def list_manufacturers(
    catalog: ReferenceCatalog = Depends(get_catalog),
) -> list[str]:
    return catalog.manufacturers()


@router.get("/compare")
async def compare_aircraft(
    first: str,
    second: str,
    catalog: ReferenceCatalog = Depends(get_catalog),
) -> dict:
    a, b = catalog.compare(first, second)
    if a is None or b is None:
        raise HTTPException(status_code=404, detail="Aircraft not found")
    return {"first": a.to_document(), "second": b.to_document()}


@router.get("/{aircraft_id}")
async def get_aircraft(
    aircraft_id: str,
    store: DataStore = Depends(get_data_store),
) -> dict:
    item = store.aircraft(aircraft_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Aircraft not found")
    data = item.to_document()
    data["favorite"] = store.is_favorite(aircraft_id)
    return data
