"""Shared fixtures: fake providers, a virtual clock and an app wired to them."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services import ClientStore, SearchCache
from app.tests.factories import FakeClock, FakeProvider


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> SearchCache:
    return SearchCache(ttl_seconds=3600, clock=clock)


@pytest.fixture
def clients() -> ClientStore:
    return ClientStore()


@pytest.fixture
def peds() -> FakeProvider:
    return FakeProvider("peds")


@pytest.fixture
def patentsview() -> FakeProvider:
    return FakeProvider("patentsview")


@pytest.fixture
def tsdr() -> FakeProvider:
    return FakeProvider("tsdr")


@pytest.fixture
def api(
    cache: SearchCache, peds: FakeProvider, patentsview: FakeProvider, tsdr: FakeProvider
) -> TestClient:
    app = create_app(
        settings=Settings(seed_clients=True),
        patent_providers=[peds, patentsview],
        trademark_providers=[tsdr],
        cache=cache,
    )
    return TestClient(app)
