"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, Request

from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.services.data_store import DataStore
from avgeek.services.route_simulator import RouteSimulator


# ------------------------------------------------------------------
# DataStore (singleton from app.state, built in the lifespan)
# ------------------------------------------------------------------


def get_data_store(request: Request) -> DataStore:
    return request.app.state.data_store


def get_catalog(store: DataStore = Depends(get_data_store)) -> ReferenceCatalog:
    return store.catalog


# ------------------------------------------------------------------
# Stateless services (new instance per request is fine)
# ------------------------------------------------------------------


def get_route_simulator(
    catalog: ReferenceCatalog = Depends(get_catalog),
) -> RouteSimulator:
    return RouteSimulator(catalog)
