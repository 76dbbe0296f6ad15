"""Explicit dispatcher bindings for the cars module."""

from carbuilder.application.cars.commands.create_car import (
    CreateCarCommand,
    CreateCarCommandHandler,
)
from carbuilder.application.cars.commands.delete_car import (
    DeleteCarCommand,
    DeleteCarCommandHandler,
)
from carbuilder.application.cars.commands.update_car import (
    UpdateCarCommand,
    UpdateCarCommandHandler,
)
from carbuilder.application.cars.queries.get_car_by_id import (
    GetCarByIdQuery,
    GetCarByIdQueryHandler,
)
from carbuilder.application.cars.queries.get_cars import GetCarsQuery, GetCarsQueryHandler
from carbuilder.application.cars.validators import (
    CreateCarCommandValidator,
    UpdateCarCommandValidator,
)
from carbuilder.application.common.dispatcher import DispatcherBuilder
from carbuilder.domain.cars.entities.car import Car

# Every request type the cars module declares; build() checks each has a handler
CAR_REQUEST_TYPES: tuple[type, ...] = (
    CreateCarCommand,
    UpdateCarCommand,
    DeleteCarCommand,
    GetCarByIdQuery,
    GetCarsQuery,
)


def register_car_requests(builder: DispatcherBuilder) -> DispatcherBuilder:
    """Bind handlers and validators for every car request."""
    builder.register_handler(
        CreateCarCommand,
        lambda uow: CreateCarCommandHandler(uow.repository(Car), uow),
    )
    builder.register_handler(
        UpdateCarCommand,
        lambda uow: UpdateCarCommandHandler(uow.repository(Car), uow),
    )
    builder.register_handler(
        DeleteCarCommand,
        lambda uow: DeleteCarCommandHandler(uow.repository(Car), uow),
    )
    builder.register_handler(
        GetCarByIdQuery,
        lambda uow: GetCarByIdQueryHandler(uow.repository(Car)),
    )
    builder.register_handler(
        GetCarsQuery,
        lambda uow: GetCarsQueryHandler(uow.repository(Car)),
    )

    builder.register_validator(CreateCarCommand, CreateCarCommandValidator())
    builder.register_validator(UpdateCarCommand, UpdateCarCommandValidator())
    return builder
