"""Mapper for Car ORM ↔ Domain conversion."""

from datetime import UTC, datetime

from carbuilder.domain.cars.entities.car import Car
from carbuilder.domain.common.value_objects.ids import CarId
from carbuilder.models import Car as CarORM


class CarMapper:
    """Mapper for Car ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CarORM) -> Car:
        """Convert ORM model to domain entity."""
        return Car.create_with_id(
            id=CarId(orm_model.id),
            make=orm_model.make,
            model=orm_model.model,
            year=orm_model.year,
            price=orm_model.price,
            description=orm_model.description,
            created_at=_as_utc(orm_model.created_at),
            updated_at=_as_utc(orm_model.updated_at) if orm_model.updated_at else None,
        )

    def to_orm(self, domain_entity: Car, orm_model: CarORM | None = None) -> CarORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.make = domain_entity.make
            orm_model.model = domain_entity.model
            orm_model.year = domain_entity.year
            orm_model.price = domain_entity.price
            orm_model.description = domain_entity.description
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return CarORM(
            id=domain_entity.id.value,
            make=domain_entity.make,
            model=domain_entity.model,
            year=domain_entity.year,
            price=domain_entity.price,
            description=domain_entity.description,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
