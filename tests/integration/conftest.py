"""Shared database fixtures for integration tests.

Each test gets its own SQLite file under pytest's tmp_path, so tests are
isolated without any external database server.
"""

from datetime import datetime, timezone
from uuid import UUID

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from pocketledger.infrastructure.persistence.sqlalchemy.models import Base, UserModel

TEST_USER_ID = UUID("00000000-0000-0000-0000-0000000000a1")
TEST_USER_EMAIL = "alice@example.com"
TEST_USER_ID_2 = UUID("00000000-0000-0000-0000-0000000000b2")
TEST_USER_EMAIL_2 = "bob@example.com"


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


def create_test_engine(database_url: str) -> AsyncEngine:
    # NullPool: connections never outlive the event loop that opened them
    return create_async_engine(database_url, poolclass=NullPool)


def make_user_model(user_id: UUID, email: str) -> UserModel:
    now = datetime.now(tz=timezone.utc)
    return UserModel(
        id=user_id,
        name=email.split("@")[0].title(),
        email=email,
        password_hash="$2b$04$notarealhashnotarealhashnotarealhashnotarealhashnot",
        is_deleted=False,
        created_at=now,
        updated_at=now,
    )


@pytest_asyncio.fixture
async def async_engine(database_url):
    engine = create_test_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Session with two seeded users (Alice and Bob)."""
    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        session.add(make_user_model(TEST_USER_ID, TEST_USER_EMAIL))
        session.add(make_user_model(TEST_USER_ID_2, TEST_USER_EMAIL_2))
        await session.commit()
        yield session
