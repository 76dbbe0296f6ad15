"""Delete a car."""

from dataclasses import dataclass

import structlog

from carbuilder.application.common.command import Command, CommandHandler
from carbuilder.application.common.unit_of_work import Repository, UnitOfWork
from carbuilder.domain.cars.entities.car import Car
from carbuilder.domain.common.exceptions import NotFoundError
from carbuilder.domain.common.value_objects.ids import CarId

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeleteCarCommand(Command[None]):
    id: CarId


class DeleteCarCommandHandler(CommandHandler[DeleteCarCommand, None]):
    def __init__(self, repository: Repository[Car], unit_of_work: UnitOfWork) -> None:
        self._repository = repository
        self._unit_of_work = unit_of_work

    async def handle(self, command: DeleteCarCommand) -> None:
        car = await self._repository.get_by_id(command.id)
        if car is None:
            raise NotFoundError("Car", command.id)

        await self._repository.delete(car)
        await self._unit_of_work.commit()

        logger.info("car_deleted", car_id=str(car.id))
