"""
Pytest configuration and fixtures.
Provides test app client and async DB session replacement.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.main import app
from app.db import session as db_session
from app.db.base import Base
from app.db.session import get_db
from app.core.rate_limit import limiter


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def session_maker():
    """
    In-memory SQLite database with all tables, shared by the app under test.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    # Health checks open their own session from the module globals
    saved = (db_session.engine, db_session.async_session_maker)
    db_session.engine, db_session.async_session_maker = test_engine, test_session_maker

    yield test_session_maker

    app.dependency_overrides.pop(get_db, None)
    db_session.engine, db_session.async_session_maker = saved
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture(scope="function")
async def test_client(session_maker):
    """
    Create a test HTTP client bound to the test database.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _signup(client: AsyncClient, email: str, password: str = "correct-horse") -> dict:
    response = await client.post(
        "/api/v1/auth/signup",
        json={"email": email, "password": password, "full_name": "Sam Sparky"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def auth_headers(test_client):
    """Bearer headers for a freshly signed-up user."""
    body = await _signup(test_client, "owner@example.com")
    return {"Authorization": f"Bearer {body['token']['access_token']}"}


@pytest.fixture
async def other_headers(test_client):
    """Bearer headers for a second, unrelated user."""
    body = await _signup(test_client, "someone-else@example.com")
    return {"Authorization": f"Bearer {body['token']['access_token']}"}


@pytest.fixture
async def client_record(test_client, auth_headers):
    """A client owned by the auth_headers user."""
    response = await test_client.post(
        "/api/v1/clients",
        json={"name": "Jane Homeowner", "email": "jane@example.com", "phone": "0400 000 000"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def quote_record(test_client, auth_headers, client_record):
    """A draft quote with two line items: 2 x 10.00 and 1 x 5.00."""
    response = await test_client.post(
        "/api/v1/quotes",
        json={
            "client_id": client_record["id"],
            "title": "Replace hot water system",
            "line_items": [
                {"description": "Labour", "quantity": 2, "unit_price": 10},
                {"description": "Fittings", "quantity": 1, "unit_price": 5},
            ],
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def signup(test_client):
    """Sign up a user by email and return the login response body."""
    async def _register(email: str, password: str = "correct-horse") -> dict:
        return await _signup(test_client, email, password)
    return _register
