"""Shared fixtures: fake clock, in-memory store, network monitor."""

import pytest
from fakes import FakeClock

from app.repositories import CacheStore, Database
from app.services.network import NetworkMonitor


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return CacheStore(Database(":memory:", clock=clock))


@pytest.fixture
def network():
    return NetworkMonitor(online=True)


@pytest.fixture
def broken_store():
    """Store whose database can never be opened."""

    def refuse(path):
        raise OSError(f"cannot open {path}")

    return CacheStore(Database("/nonexistent/cache.duckdb", connect=refuse))
