"""Badge endpoints: current badge list and the unlock-notification queue.

Presentation protocol: ``POST /badges/next`` hands out the head of the
pending queue; after the user dismisses it, ``POST /badges/advance``
hands out the following one.  Both return ``204`` when nothing is pending.
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Response

from avgeek.api.deps import get_data_store
from avgeek.services.data_store import DataStore

router = APIRouter(prefix="/badges", tags=["badges"])


@router.get("")
async def list_badges(
    achieved_only: bool = False,
    store: DataStore = Depends(get_data_store),
) -> list[dict]:
    badges = store.badges()
    if achieved_only:
        badges = [b for b in badges if b.achieved]
    return [b.to_document() for b in badges]


@router.get("/pending")
async def pending(store: DataStore = Depends(get_data_store)) -> dict:
    current = store.current_badge()
    return {
        "current": current.to_document() if current else None,
        "pending": store.pending_badges(),
    }


@router.post("/next")
async def next_badge(store: DataStore = Depends(get_data_store)):
    unlock = await asyncio.to_thread(store.pop_next_badge)
    if unlock is None:
        return Response(status_code=204)
    return unlock.to_document()


@router.post("/advance")
async def advance(store: DataStore = Depends(get_data_store)):
    unlock = await asyncio.to_thread(store.advance_badge)
    if unlock is None:
        return Response(status_code=204)
    return unlock.to_document()
