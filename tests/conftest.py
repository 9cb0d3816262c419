"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hrms.core.auth.backend import create_access_token, hash_password
from hrms.core.database import Base, get_db
from hrms.main import create_app
from hrms.modules.organisations.models import Organisation
from hrms.modules.users.models import User


# In-memory SQLite; StaticPool keeps the single connection alive for the test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with the schema in place."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite's own transaction handling breaks SAVEPOINT; emit BEGIN ourselves
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    Each test runs in its own transaction that is rolled back
    after the test completes, ensuring test isolation.
    """
    async with engine.connect() as conn:
        await conn.begin()

        session_factory = async_sessionmaker(
            bind=conn,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        async with session_factory() as session:
            yield session

        await conn.rollback()


@pytest.fixture
async def app(db: AsyncSession) -> AsyncGenerator[FastAPI, None]:
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Organisation and User Fixtures
# ============================================================


@pytest.fixture
async def organisation(db: AsyncSession) -> Organisation:
    """Create a test organisation."""
    organisation = Organisation(name="Acme")
    db.add(organisation)
    await db.flush()
    return organisation


@pytest.fixture
async def user(db: AsyncSession, organisation: Organisation) -> User:
    """Create the organisation's admin."""
    user = User(
        organisation_id=organisation.id,
        email="alice@acme.com",
        password_hash=hash_password(TEST_PASSWORD),
        name="Alice",
    )
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    """Authorization header with a valid credential for the test admin."""
    token = create_access_token(user_id=user.id, organisation_id=user.organisation_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def authenticated_client(
    app: FastAPI, auth_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client carrying the test admin's credential."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=auth_headers,
    ) as client:
        yield client
