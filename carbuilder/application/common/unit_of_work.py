"""
Repository and Unit of Work interfaces.

A Repository stages changes to one entity type; the Unit of Work owning it
makes them durable in a single atomic commit.

Example:
    async with unit_of_work_factory() as unit_of_work:
        cars = unit_of_work.repository(Car)
        await cars.add(Car.create(...))
        await unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Any, Generic, Self, TypeVar

from carbuilder.domain.common.entity import Entity, EntityId

TEntity = TypeVar("TEntity", bound=Entity[Any])


class Repository(ABC, Generic[TEntity]):
    """
    Repository interface (Port), generic over the entity type.

    `add`, `update` and `delete` only stage a change; nothing is durable
    until the owning Unit of Work commits.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: EntityId) -> TEntity | None:
        """Return the entity, or None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    async def get_all(self) -> list[TEntity]:
        """Return every stored entity. Order is not defined."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, entity: TEntity) -> None:
        """Stage a new entity for insertion."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, entity: TEntity) -> None:
        """Stage the current state of an existing entity."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, entity: TEntity) -> None:
        """Stage an entity for removal."""
        raise NotImplementedError


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Owns one storage transaction, opened per request and never shared
    - Hands out repositories bound to that transaction
    - Persists every staged change atomically on commit
    - Discards staged changes when its scope is left without commit,
      whether by normal exit, exception or task cancellation

    Infrastructure provides the concrete implementation
    (SqlAlchemyUnitOfWork).
    """

    @abstractmethod
    def repository(self, entity_type: type[TEntity]) -> Repository[TEntity]:
        """Return the repository for the given entity type."""
        raise NotImplementedError

    @abstractmethod
    async def commit(self) -> int:
        """
        Atomically persist all changes staged since the last commit.

        Returns:
            Number of affected records

        Raises:
            StorageError: If the storage engine rejects the changes. Staged
                changes are rolled back before raising.
        """
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all changes staged since the last commit."""
        raise NotImplementedError

    async def close(self) -> None:
        """Release the underlying connection. Override when there is one."""

    async def __aenter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        Anything not committed is discarded. Commit must be called explicitly.
        """
        try:
            await self.rollback()
        finally:
            await self.close()


UnitOfWorkFactory = Callable[[], UnitOfWork]
