"""
Cars application module.

Commands:
- CreateCarCommand -> CarId
- UpdateCarCommand -> None
- DeleteCarCommand -> None

Queries:
- GetCarByIdQuery -> CarDto
- GetCarsQuery -> list[CarDto]
"""

from .commands.create_car import CreateCarCommand
from .commands.delete_car import DeleteCarCommand
from .commands.update_car import UpdateCarCommand
from .dtos import CarDto
from .queries.get_car_by_id import GetCarByIdQuery
from .queries.get_cars import GetCarsQuery
from .registration import CAR_REQUEST_TYPES, register_car_requests

__all__ = [
    "CAR_REQUEST_TYPES",
    "CarDto",
    "CreateCarCommand",
    "DeleteCarCommand",
    "GetCarByIdQuery",
    "GetCarsQuery",
    "UpdateCarCommand",
    "register_car_requests",
]
