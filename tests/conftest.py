"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from carbuilder.application.common.dispatcher import Dispatcher
from carbuilder.config import Settings
from carbuilder.core import build_dispatcher
from carbuilder.database import create_engine, create_schema, create_session_factory
from carbuilder.domain.cars.entities.car import Car
from carbuilder.infrastructure.cars.mappers.car_mapper import CarMapper
from carbuilder.infrastructure.common.persistence.sqlalchemy_unit_of_work import (
    EntityMapping,
    SqlAlchemyUnitOfWork,
    sqlalchemy_unit_of_work_factory,
)
from carbuilder.main import create_app
from carbuilder.models import Car as CarORM

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET_KEY = "test-signing-key-with-at-least-32-bytes!"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        DATABASE_URL=TEST_DATABASE_URL,
        SECRET_KEY=TEST_SECRET_KEY,
        ENVIRONMENT="test",
    )


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables for each test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def unit_of_work_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    return sqlalchemy_unit_of_work_factory(
        session_factory, {Car: EntityMapping(CarORM, CarMapper())}
    )


@pytest.fixture
def dispatcher(unit_of_work_factory: Callable[[], SqlAlchemyUnitOfWork]) -> Dispatcher:
    return build_dispatcher(unit_of_work_factory)


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Application with its schema created; ASGITransport does not run the lifespan."""
    app = create_app(settings)
    engine = app.state.container.engine()
    await create_schema(engine)
    yield app
    await engine.dispose()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Register a user and return a bearer Authorization header."""
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "driver@example.com",
            "password": "correct-horse-battery",
            "first_name": "Ada",
            "last_name": "Lovelace",
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
