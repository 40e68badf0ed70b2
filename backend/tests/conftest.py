import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from business_api.api.deps import get_db
from business_api.main import app

TABLE_BOOTSTRAP_PATHS = (
    "/businesses/createBusinessesTable",
    "/reviews/createReviewsTable",
    "/photos/createPhotosTable",
)


def _sqlite_client(**client_kwargs):
    """
    TestClient backed by a private in-memory SQLite database.

    StaticPool keeps the single connection alive for the whole client
    lifetime, so every request sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    return engine, TestClient(app, **client_kwargs)


@pytest.fixture()
def bare_client():
    """Client whose database has no tables yet."""
    engine, test_client = _sqlite_client()
    with test_client:
        yield test_client
        test_client.portal.call(engine.dispose)
    app.dependency_overrides.clear()


@pytest.fixture()
def client(bare_client):
    """Client with the businesses, reviews and photos tables created."""
    for path in TABLE_BOOTSTRAP_PATHS:
        r = bare_client.post(path)
        assert r.status_code == 200, r.text
    return bare_client


@pytest.fixture()
def server_error_client():
    """
    Client with tables created that returns 500 responses instead of
    re-raising unhandled server errors into the test.
    """
    engine, test_client = _sqlite_client(raise_server_exceptions=False)
    with test_client:
        for path in TABLE_BOOTSTRAP_PATHS:
            r = test_client.post(path)
            assert r.status_code == 200, r.text
        yield test_client
        test_client.portal.call(engine.dispose)
    app.dependency_overrides.clear()


@pytest.fixture()
def business_payload():
    return {
        "ownerid": 1,
        "name": "Block 15",
        "address": "300 SW Jefferson Ave.",
        "city": "Corvallis",
        "state": "OR",
        "zip": "97333",
        "phone": "541-758-2077",
        "category": "Restaurant",
        "subcategory": "Brewpub",
        "website": "http://block15.com",
    }


@pytest.fixture()
def create_business(client, business_payload):
    def _create(**overrides):
        r = client.post("/businesses", json={**business_payload, **overrides})
        assert r.status_code == 201, r.text
        return r.json()["id"]

    return _create
