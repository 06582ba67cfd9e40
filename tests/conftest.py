"""Shared fixtures: bundled reference catalog and isolated stores."""

from __future__ import annotations

import pytest

from avgeek.persistence.catalog import ReferenceCatalog
from avgeek.persistence.repositories.flight_log_repo import FLIGHT_LOGS_FILE, FlightLogStore
from avgeek.services.data_store import DataStore
from tests.persistence.fake_kv import InMemoryKeyValueStore


@pytest.fixture(scope="session")
def catalog() -> ReferenceCatalog:
    return ReferenceCatalog.from_bundle()


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def flight_log(tmp_path) -> FlightLogStore:
    return FlightLogStore(tmp_path / FLIGHT_LOGS_FILE)


@pytest.fixture
def store(catalog, flight_log, kv) -> DataStore:
    data_store = DataStore(catalog, flight_log, kv)
    data_store.initialize()
    return data_store
