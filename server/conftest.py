"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from social_backend.db.data_source import DataSource
from social_backend.db.options import DataSourceOptions, build_data_source_options
from social_backend.db.session import get_data_source
from social_backend.main import app
from social_backend.models import User


@pytest.fixture
def memory_options() -> DataSourceOptions:
    """Application options against an in-memory database, with tables synchronized."""
    return build_data_source_options().model_copy(
        update={"database": ":memory:", "synchronize": True}
    )


@pytest.fixture
def file_options(tmp_path) -> DataSourceOptions:
    """Application options against a fresh database file."""
    return build_data_source_options().model_copy(
        update={"database": str(tmp_path / "database.sqlite")}
    )


@pytest.fixture(scope="function")
async def data_source(memory_options: DataSourceOptions) -> AsyncGenerator[DataSource, None]:
    """Create an initialized test data source."""
    data_source = await DataSource(memory_options).initialize()
    yield data_source
    await data_source.destroy()


@pytest.fixture(scope="function")
async def db_session(data_source: DataSource) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with data_source.session() as session:
        yield session


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    user = User(
        username="testuser",
        email="test@example.com",
        display_name="Test User",
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def client(data_source: DataSource) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the test data source."""
    app.dependency_overrides[get_data_source] = lambda: data_source

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
