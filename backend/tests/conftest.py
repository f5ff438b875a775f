"""Shared fixtures: in-memory fakes for unit tests, SQLite-backed app for integration tests."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from article_board.application.services import ArticleService
from article_board.infrastructure.database import Base, get_session_factory
from article_board.main import app
from tests.fakes import BrokenArticleRepository, FakeArticleRepository, RecordingViewRenderer


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest.fixture
def broken_service() -> ArticleService:
    return ArticleService(BrokenArticleRepository())


@pytest.fixture
def views() -> RecordingViewRenderer:
    return RecordingViewRenderer()


@pytest_asyncio.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory SQLite database with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    """HTTP client against the real app, backed by the in-memory database."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
