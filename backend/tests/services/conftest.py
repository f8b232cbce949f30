"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Caller identity injected by overriding get_current_user

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from taskforge.api.dependencies import get_current_user
from taskforge.core.domain_types import CallerIdentity
from taskforge.core.passwords import hash_password
from taskforge.db.base import Base
from taskforge.infrastructure.database import get_db, DatabaseSessionManager
from taskforge.models.user import User
import taskforge.infrastructure.database as db_module
import taskforge.models  # noqa: F401
from taskforge.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden, anonymous caller."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def login():
    """Set the caller identity for subsequent requests: login(user) / login(None)."""
    def _login(identity: CallerIdentity | User | None) -> CallerIdentity | None:
        if isinstance(identity, User):
            identity = CallerIdentity(id=identity.id, role=identity.role)
        app.dependency_overrides[get_current_user] = lambda: identity
        return identity

    return _login


async def _seed_user(db: AsyncSession, email: str, role: str) -> User:
    user = User(
        email=email,
        username=email.split("@")[0],
        password=hash_password("password123"),
        role=role,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def seed_user(test_db):
    return await _seed_user(test_db, "member@example.com", "user")


@pytest.fixture
async def seed_admin(test_db):
    return await _seed_user(test_db, "admin@example.com", "admin")
