"""Database configuration and session management."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all database models."""


def create_engine(database_url: str) -> AsyncEngine:
    """Create the application-scoped async engine."""
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url:
            # One shared connection, otherwise every checkout sees an empty database
            return create_async_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(database_url, connect_args={"check_same_thread": False})

    return create_async_engine(
        database_url,
        pool_size=20,  # Base pool size
        max_overflow=30,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,  # Recycle connections after 1 hour
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for per-request sessions. Nothing reaches the database before commit."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    # Register mappings on Base.metadata
    from carbuilder import models  # noqa: F401, PLC0415

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Dispose database engine on shutdown."""
    await engine.dispose()
