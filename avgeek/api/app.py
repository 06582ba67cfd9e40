"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from avgeek.api.routes import aircraft, airports, badges, favorites, flights, routes, stats
from avgeek.config import Settings
from avgeek.services.data_store import DataStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: DataStore | None = None) -> FastAPI:
    """Build the API.

    *store* is used as-is when given (tests); otherwise one is built from
    *settings* (default: environment) and initialized on startup.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        data_store = store
        if data_store is None:
            data_store = DataStore.from_settings(settings)
            logger.info("Data directory: %s", settings.data_dir)
        data_store.initialize()
        app.state.data_store = data_store
        yield

    app = FastAPI(
        title="AvGeek API",
        description="Offline flight log, statistics and badges",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(aircraft.router, prefix="/api")
    app.include_router(airports.router, prefix="/api")
    app.include_router(flights.router, prefix="/api")
    app.include_router(favorites.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")
    app.include_router(badges.router, prefix="/api")
    app.include_router(routes.router, prefix="/api")

    @app.get("/api/health")
    async def health():
        data_store: DataStore = app.state.data_store
        return {
            "status": "ok",
            "initialized": data_store.initialized,
            "aircraft_count": len(data_store.catalog.aircraft),
            "airport_count": len(data_store.catalog.airports),
            "flight_count": len(data_store.flights()),
        }

    return app
