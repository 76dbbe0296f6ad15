from .sqlalchemy_repository import EntityMapper, SqlAlchemyRepository
from .sqlalchemy_unit_of_work import (
    EntityMapping,
    SqlAlchemyUnitOfWork,
    sqlalchemy_unit_of_work_factory,
)

__all__ = [
    "EntityMapper",
    "EntityMapping",
    "SqlAlchemyRepository",
    "SqlAlchemyUnitOfWork",
    "sqlalchemy_unit_of_work_factory",
]
