"""
SQLAlchemy implementation of the Unit of Work.

One instance wraps one AsyncSession and is used for exactly one request.
The session is created with autoflush disabled, so repository writes stay
in memory until `commit()` flushes them in a single transaction.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from carbuilder.application.common.unit_of_work import Repository, TEntity, UnitOfWork
from carbuilder.exceptions import ConfigurationError, StorageError
from carbuilder.infrastructure.common.persistence.sqlalchemy_repository import (
    EntityMapper,
    SqlAlchemyRepository,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EntityMapping:
    """How one domain entity type is stored."""

    orm_model: type[Any]
    mapper: EntityMapper[Any, Any]


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession, mappings: Mapping[type, EntityMapping]) -> None:
        self.session = session
        self._mappings = mappings
        self._repositories: dict[type, Repository[Any]] = {}

    def repository(self, entity_type: type[TEntity]) -> Repository[TEntity]:
        """
        Raises:
            ConfigurationError: If the entity type has no mapping
        """
        repository = self._repositories.get(entity_type)
        if repository is None:
            mapping = self._mappings.get(entity_type)
            if mapping is None:
                raise ConfigurationError(f"No persistence mapping for {entity_type.__name__}")
            repository = SqlAlchemyRepository(self.session, mapping.orm_model, mapping.mapper)
            self._repositories[entity_type] = repository
        return repository

    async def commit(self) -> int:
        affected = self._pending_changes()
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("commit_failed", error=str(e), pending_changes=affected)
            raise StorageError from e
        return affected

    async def rollback(self) -> None:
        await self.session.rollback()

    async def close(self) -> None:
        await self.session.close()

    def _pending_changes(self) -> int:
        modified = sum(1 for obj in self.session.dirty if self.session.is_modified(obj))
        return len(self.session.new) + modified + len(self.session.deleted)


def sqlalchemy_unit_of_work_factory(
    session_factory: async_sessionmaker[AsyncSession],
    mappings: Mapping[type, EntityMapping],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    """Bind a session factory and mappings into a Unit of Work factory."""

    def create() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory(), mappings)

    return create
