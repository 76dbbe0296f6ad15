"""Pydantic schemas for Car API request/response validation."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from carbuilder.application.cars.dtos import CarDto


class CarBase(BaseModel):
    """
    Base schema for Car writes.

    Only the shape is checked here. Business rules (lengths, year range,
    price bounds) run in the validation pipeline so every violation is
    reported at once.
    """

    make: str = Field(..., description="Manufacturer, e.g. Toyota")
    model: str = Field(..., description="Model name, e.g. Camry")
    year: int = Field(..., description="Model year")
    price: Decimal = Field(..., description="List price")
    description: str | None = Field(None, description="Free-text description")


class CarCreateRequest(CarBase):
    """Schema for creating a Car."""


class CarUpdateRequest(CarBase):
    """Schema for replacing a Car's fields."""


class CarResponse(BaseModel):
    """Schema for Car response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    make: str
    model: str
    year: int
    price: Decimal
    description: str | None
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_dto(cls, dto: CarDto) -> "CarResponse":
        return cls.model_validate(dto)
