"""Generic SQLAlchemy repository."""

from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carbuilder.application.common.unit_of_work import Repository
from carbuilder.database import Base
from carbuilder.domain.common.entity import Entity, EntityId
from carbuilder.domain.common.exceptions import NotFoundError

TEntity = TypeVar("TEntity", bound=Entity[Any])
TModel = TypeVar("TModel", bound=Base)


class EntityMapper(Protocol[TEntity, TModel]):
    def to_domain(self, orm_model: TModel) -> TEntity: ...

    def to_orm(self, domain_entity: TEntity, orm_model: TModel | None = None) -> TModel: ...


class SqlAlchemyRepository(Repository[TEntity], Generic[TEntity, TModel]):
    """
    Repository backed by the Unit of Work's session.

    Writes go to the session only. They reach the database when the owning
    Unit of Work commits.
    """

    def __init__(
        self,
        session: AsyncSession,
        orm_model: type[TModel],
        mapper: EntityMapper[TEntity, TModel],
    ) -> None:
        self.session = session
        self.orm_model = orm_model
        self.mapper = mapper

    async def get_by_id(self, entity_id: EntityId) -> TEntity | None:
        orm_model = await self.session.get(self.orm_model, entity_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def get_all(self) -> list[TEntity]:
        result = await self.session.execute(select(self.orm_model))
        return [self.mapper.to_domain(orm_model) for orm_model in result.scalars().all()]

    async def add(self, entity: TEntity) -> None:
        self.session.add(self.mapper.to_orm(entity))

    async def update(self, entity: TEntity) -> None:
        """
        Raises:
            NotFoundError: If the entity is not stored
        """
        orm_model = await self.session.get(self.orm_model, entity.id.value)
        if orm_model is None:
            raise NotFoundError(type(entity).__name__, entity.id)
        self.mapper.to_orm(entity, orm_model)

    async def delete(self, entity: TEntity) -> None:
        """
        Raises:
            NotFoundError: If the entity is not stored
        """
        orm_model = await self.session.get(self.orm_model, entity.id.value)
        if orm_model is None:
            raise NotFoundError(type(entity).__name__, entity.id)
        await self.session.delete(orm_model)
