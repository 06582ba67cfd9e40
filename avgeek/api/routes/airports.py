"""Airport catalog endpoints (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from avgeek.api.deps import get_catalog
from avgeek.persistence.catalog import ReferenceCatalog

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get("")
async def list_airports(
    q: str = "",
    catalog: ReferenceCatalog = Depends(get_catalog),
) -> list[dict]:
    return [ap.to_document() for ap in catalog.search_airports(q)]


@router.get("/{code}")
async def get_airport(
    code: str,
    catalog: ReferenceCatalog = Depends(get_catalog),
) -> dict:
    airport = catalog.airport_by_code(code)
    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return airport.to_document()
