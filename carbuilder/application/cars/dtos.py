"""DTOs for car queries."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from carbuilder.domain.cars.entities.car import Car


@dataclass(frozen=True)
class CarDto:
    """Flat, read-only projection of a Car. The only shape of car data leaving the core."""

    id: UUID
    make: str
    model: str
    year: int
    price: Decimal
    description: str | None
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, car: Car) -> "CarDto":
        return cls(
            id=car.id.value,
            make=car.make,
            model=car.model,
            year=car.year,
            price=car.price,
            description=car.description,
            created_at=car.created_at,
            updated_at=car.updated_at,
        )
