"""Pytest fixtures for API integration tests.

The app runs against a throwaway SQLite file; the database session
dependency is overridden so tests never touch a configured database.
"""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pocketledger.infrastructure.persistence.sqlalchemy.models import Base
from pocketledger.presentation.api.app import API_V1_PREFIX, create_app
from pocketledger.presentation.api.dependencies import get_db_session
from pocketledger_config.settings import Settings, get_settings
from tests.integration.conftest import create_test_engine, make_user_model


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test settings with debug enabled and cheap bcrypt."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url=database_url,
        api_host="127.0.0.1",
        api_port=5000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
    )


def _run(coro) -> None:
    """Run a coroutine in a fresh event loop (TestClient owns its own loop)."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def sync_engine_setup(database_url):
    """Create the schema before the test and drop it afterwards."""
    engine = create_test_engine(database_url)

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def _drop():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()

    _run(_create())
    yield engine
    _run(_drop())


@pytest.fixture
def test_client(api_settings, sync_engine_setup):
    """Create a test client bound to the per-test SQLite database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        sync_engine_setup,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    # Override settings to use test settings
    app.dependency_overrides[get_settings] = lambda: api_settings

    yield TestClient(app, raise_server_exceptions=False)


def register(client: TestClient, name: str, email: str, password: str = "secret1"):
    return client.post(
        f"{API_V1_PREFIX}/user/auth/register",
        json={"name": name, "email": email, "password": password},
    )


@pytest.fixture
def registered_user_data() -> dict:
    return {"name": "Alice", "email": "alice@example.com", "password": "secret1"}


@pytest.fixture
def auth_headers(test_client, registered_user_data) -> dict:
    """Get auth headers for a registered user."""
    response = register(test_client, **registered_user_data)
    assert response.status_code == 201, (
        f"Registration failed: {response.status_code} - {response.text}"
    )

    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(test_client) -> dict:
    """Auth headers for a second, unrelated user."""
    response = register(test_client, "Bob", "bob@example.com")
    assert response.status_code == 201, response.text

    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def deleted_user_email(sync_engine_setup) -> str:
    """Email of a soft-deleted user stored directly in the database."""
    email = "gone@example.com"
    model = make_user_model(uuid4(), email)
    model.is_deleted = True

    async def _insert():
        async with AsyncSession(sync_engine_setup) as session:
            session.add(model)
            await session.commit()

    _run(_insert())
    return email
