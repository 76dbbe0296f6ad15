"""Update an existing car."""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from carbuilder.application.common.command import Command, CommandHandler
from carbuilder.application.common.unit_of_work import Repository, UnitOfWork
from carbuilder.domain.cars.entities.car import Car
from carbuilder.domain.common.exceptions import NotFoundError
from carbuilder.domain.common.value_objects.ids import CarId

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateCarCommand(Command[None]):
    id: CarId
    make: str
    model: str
    year: int
    price: Decimal
    description: str | None = None


class UpdateCarCommandHandler(CommandHandler[UpdateCarCommand, None]):
    """
    Replaces a car's mutable fields.

    No concurrency token is checked: two updates to the same car committed
    one after the other both succeed, and the later one wins.
    """

    def __init__(self, repository: Repository[Car], unit_of_work: UnitOfWork) -> None:
        self._repository = repository
        self._unit_of_work = unit_of_work

    async def handle(self, command: UpdateCarCommand) -> None:
        """
        Raises:
            NotFoundError: If the car does not exist
            ValidationError: If the entity rejects the new values
            StorageError: If the commit fails
        """
        car = await self._repository.get_by_id(command.id)
        if car is None:
            raise NotFoundError("Car", command.id)

        car.update(
            make=command.make,
            model=command.model,
            year=command.year,
            price=command.price,
            description=command.description,
        )
        await self._repository.update(car)
        await self._unit_of_work.commit()

        logger.info("car_updated", car_id=str(car.id))
