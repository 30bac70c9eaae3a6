"""Pytest configuration and fixtures for backend tests."""

from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime
import itertools

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from ayush_api.core.config import Settings
from ayush_api.main import create_app
from ayush_api.services import ClinicalStore, FHIRMapper, ReferenceCatalog

FIXED_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=UTC)
FIXED_TIMESTAMP = "2024-03-15T09:30:00+00:00"


def sequential_ids(prefix: str = "id") -> Callable[[], str]:
    """Id factory yielding prefix-1, prefix-2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with debug off, independent of the process environment."""
    return Settings(debug=False)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """A fresh application with an empty clinical store."""
    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def sync_client(app: FastAPI) -> TestClient:
    """Synchronous test client for tests that drive requests from threads."""
    return TestClient(app)


@pytest.fixture
def catalog() -> ReferenceCatalog:
    """Catalog seeded with the default disease records."""
    return ReferenceCatalog()


@pytest.fixture
def store(catalog: ReferenceCatalog) -> ClinicalStore:
    """Empty store with a fixed clock and predictable ids."""
    return ClinicalStore(
        catalog,
        clock=lambda: FIXED_TIMESTAMP,
        id_factory=sequential_ids("rec"),
    )


@pytest.fixture
def fixed_mapper() -> FHIRMapper:
    """Mapper whose clock and id factory always return the same values."""
    return FHIRMapper(clock=lambda: FIXED_NOW, id_factory=lambda: "fixed-id")
