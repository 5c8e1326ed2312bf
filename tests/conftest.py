"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the app
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import filmes_api.models  # noqa: E402, F401 - registers all tables on Base.metadata
from filmes_api.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from filmes_api.main import app  # noqa: E402
from filmes_api.models.cinema import Cinema  # noqa: E402
from filmes_api.models.session import MovieSession  # noqa: E402


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine with the full schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the in-memory engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_client(
    client: AsyncClient, session_factory: async_sessionmaker[AsyncSession]
) -> AsyncGenerator[AsyncClient]:
    """HTTP client whose requests run against the in-memory database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def add_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[int, str], Awaitable[int]]:
    """Create a cinema and schedule an existing movie there."""

    async def _add_session(movie_id: int, cinema_name: str) -> int:
        async with session_factory() as session:
            cinema = Cinema(name=cinema_name)
            session.add(cinema)
            await session.flush()
            movie_session = MovieSession(movie_id=movie_id, cinema_id=cinema.id)
            session.add(movie_session)
            await session.commit()
            return movie_session.id

    return _add_session

