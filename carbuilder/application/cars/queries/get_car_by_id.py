"""Fetch one car."""

from dataclasses import dataclass

from carbuilder.application.cars.dtos import CarDto
from carbuilder.application.common.query import Query, QueryHandler
from carbuilder.application.common.unit_of_work import Repository
from carbuilder.domain.cars.entities.car import Car
from carbuilder.domain.common.exceptions import NotFoundError
from carbuilder.domain.common.value_objects.ids import CarId


@dataclass(frozen=True)
class GetCarByIdQuery(Query[CarDto]):
    id: CarId


class GetCarByIdQueryHandler(QueryHandler[GetCarByIdQuery, CarDto]):
    def __init__(self, repository: Repository[Car]) -> None:
        self._repository = repository

    async def handle(self, query: GetCarByIdQuery) -> CarDto:
        """
        Raises:
            NotFoundError: If the car does not exist
        """
        car = await self._repository.get_by_id(query.id)
        if car is None:
            raise NotFoundError("Car", query.id)
        return CarDto.from_entity(car)
