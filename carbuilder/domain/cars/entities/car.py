"""Car entity: the managed record of the service."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any

from carbuilder.domain.cars.rules import car_violations
from carbuilder.domain.common.entity import Entity
from carbuilder.domain.common.exceptions import ValidationError
from carbuilder.domain.common.value_objects.ids import CarId

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
# Smallest step the stored timestamps can represent
_CLOCK_TICK = timedelta(microseconds=1)


@dataclass(eq=False)
class Car(Entity[CarId]):
    """
    A car listed in the catalogue.

    Business Rules:
    - Make and model are required and at most 50 characters
    - Year lies within [1900, current year + 1]
    - Price is greater than zero and at most 10,000,000
    - Description, when present, is at most 500 characters
    - Id and created_at are fixed at construction
    - updated_at is None until the first update, then strictly increases
    """

    # Identity
    id: CarId

    # Content
    make: str
    model: str
    year: int
    price: Decimal

    # Timestamps
    created_at: datetime

    description: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _ensure_valid(self.make, self.model, self.year, self.price, self.description)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Car.{name} cannot be changed after construction")
        super().__setattr__(name, value)

    # Command methods
    def update(
        self,
        make: str,
        model: str,
        year: int,
        price: Decimal | int | float,
        description: str | None = None,
    ) -> None:
        """
        Replace the mutable fields.

        All values are checked before any field changes, so a rejected update
        leaves the car untouched.

        Raises:
            ValidationError: If any invariant is violated
        """
        _ensure_valid(make, model, year, price, description)

        self.make = make.strip()
        self.model = model.strip()
        self.year = year
        self.price = _to_decimal(price)
        self.description = description
        self.updated_at = self._next_update_timestamp()

    def _next_update_timestamp(self) -> datetime:
        now = datetime.now(UTC)
        floor = self.updated_at or self.created_at
        if now <= floor:
            return floor + _CLOCK_TICK
        return now

    # Factory methods
    @classmethod
    def create(
        cls,
        make: str,
        model: str,
        year: int,
        price: Decimal | int | float,
        description: str | None = None,
    ) -> "Car":
        """
        Factory for creating a new car.

        Raises:
            ValidationError: If any invariant is violated
        """
        _ensure_valid(make, model, year, price, description)
        return cls(
            id=CarId.generate(),
            make=make.strip(),
            model=model.strip(),
            year=year,
            price=_to_decimal(price),
            description=description,
            created_at=datetime.now(UTC),
            updated_at=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CarId,
        make: str,
        model: str,
        year: int,
        price: Decimal,
        description: str | None,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Car":
        """Factory for reconstituting a car from persistence."""
        return cls(
            id=id,
            make=make,
            model=model,
            year=year,
            price=_to_decimal(price),
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )


def _ensure_valid(
    make: Any, model: Any, year: Any, price: Any, description: Any
) -> None:
    errors = car_violations(
        make=make, model=model, year=year, price=price, description=description
    )
    if errors:
        raise ValidationError(errors)


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
