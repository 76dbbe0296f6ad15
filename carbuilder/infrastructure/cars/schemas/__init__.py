"""Cars context schemas."""

from carbuilder.infrastructure.cars.schemas.car_schemas import (
    CarCreateRequest,
    CarResponse,
    CarUpdateRequest,
)

__all__ = [
    "CarCreateRequest",
    "CarResponse",
    "CarUpdateRequest",
]
