from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from app.adapters.store import InMemoryStoreAdapter
from app.api.dependencies import get_store
from app.domain.entities import CatalogEntry
from app.main import app

BASE = "http://test"

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryStoreAdapter:
    """A fresh, empty store: services see the default catalog."""
    return InMemoryStoreAdapter()


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(now: datetime):
    return lambda: now


@pytest.fixture
def sample_catalog() -> list[CatalogEntry]:
    return [
        CatalogEntry(title="The Great Gatsby", author="F. Scott Fitzgerald", genre="Classic"),
        CatalogEntry(title="1984", author="George Orwell", genre="Dystopian"),
        CatalogEntry(title="Animal Farm", author="George Orwell", genre="Satire"),
        CatalogEntry(title="Brave New World", author="Aldous Huxley", genre="Dystopian"),
        CatalogEntry(title="Moby Dick", author="Herman Melville", genre="Adventure"),
    ]


@pytest.fixture
async def client(store: InMemoryStoreAdapter) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def user_client(client: AsyncClient) -> AsyncClient:
    client.headers["X-Username"] = "student"
    return client
