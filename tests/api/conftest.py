"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from avgeek.api.app import create_app
from avgeek.config import Settings


@pytest.fixture
def test_app(store, tmp_path):
    """FastAPI app over an initialized DataStore in a temp data directory."""
    app = create_app(settings=Settings(data_dir=tmp_path), store=store)
    # ASGITransport does not run the lifespan.
    app.state.data_store = store
    return app


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
