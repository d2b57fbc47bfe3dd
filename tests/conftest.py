"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from apps.registry import register_repositories
from apps.widgets.models import Widget
from crud_core.repository.unit_of_work import RepositoryRegistry, UnitOfWork
from crud_core.security import create_access_token


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def registry() -> RepositoryRegistry:
    """Registry holding the application's repositories."""
    return register_repositories(RepositoryRegistry())


@pytest.fixture
def uow(async_session: AsyncSession, registry: RepositoryRegistry) -> UnitOfWork:
    """UnitOfWork over the in-memory database."""
    return UnitOfWork(session=async_session, registry=registry)


@pytest.fixture
def repository() -> AsyncMock:
    """Repository double; every capability method is an AsyncMock."""
    repo = AsyncMock()
    repo.get.return_value = None
    repo.get_all.return_value = []
    repo.get_by_specification.return_value = []
    return repo


@pytest.fixture
def mock_uow(repository: AsyncMock) -> MagicMock:
    """UnitOfWork double resolving every capability to the repository double."""
    unit = MagicMock(spec=UnitOfWork)
    unit.get.return_value = repository
    unit.commit = AsyncMock()
    return unit


@pytest.fixture
def access_token() -> str:
    return create_access_token({"sub": "test_user"})


@pytest.fixture
async def sample_widget(async_session: AsyncSession) -> Widget:
    """Create sample widget."""
    widget = Widget(id=1, name="bolt", quantity=10, description="M8 hex bolt")
    async_session.add(widget)
    await async_session.commit()
    await async_session.refresh(widget)
    return widget


@pytest.fixture
async def client(
    async_session: AsyncSession,
    access_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create authenticated test client."""
    from crud_core.api.dependencies import get_db

    async def _get_db():
        yield async_session

    app.dependency_overrides[get_db] = _get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {access_token}"}
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
