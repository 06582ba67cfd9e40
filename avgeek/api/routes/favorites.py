"""Favorite aircraft endpoints."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Response

from avgeek.api.deps import get_data_store
from avgeek.services.data_store import DataStore

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(store: DataStore = Depends(get_data_store)) -> list[str]:
    return sorted(store.favorites())


@router.put("/{aircraft_id}", status_code=204, response_class=Response)
async def add_favorite(
    aircraft_id: str,
    store: DataStore = Depends(get_data_store),
) -> Response:
    if store.aircraft(aircraft_id) is None:
        raise HTTPException(status_code=404, detail="Aircraft not found")
    await asyncio.to_thread(store.add_favorite, aircraft_id)
    return Response(status_code=204)


@router.delete("/{aircraft_id}", status_code=204, response_class=Response)
async def remove_favorite(
    aircraft_id: str,
    store: DataStore = Depends(get_data_store),
) -> Response:
    await asyncio.to_thread(store.remove_favorite, aircraft_id)
    return Response(status_code=204)
