"""Create a car."""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from carbuilder.application.common.command import Command, CommandHandler
from carbuilder.application.common.unit_of_work import Repository, UnitOfWork
from carbuilder.domain.cars.entities.car import Car
from carbuilder.domain.common.value_objects.ids import CarId

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateCarCommand(Command[CarId]):
    make: str
    model: str
    year: int
    price: Decimal
    description: str | None = None


class CreateCarCommandHandler(CommandHandler[CreateCarCommand, CarId]):
    """Builds a new car and persists it in one commit."""

    def __init__(self, repository: Repository[Car], unit_of_work: UnitOfWork) -> None:
        self._repository = repository
        self._unit_of_work = unit_of_work

    async def handle(self, command: CreateCarCommand) -> CarId:
        """
        Raises:
            ValidationError: If the entity rejects the values
            StorageError: If the commit fails
        """
        car = Car.create(
            make=command.make,
            model=command.model,
            year=command.year,
            price=command.price,
            description=command.description,
        )
        await self._repository.add(car)
        await self._unit_of_work.commit()

        logger.info("car_created", car_id=str(car.id))
        return car.id
