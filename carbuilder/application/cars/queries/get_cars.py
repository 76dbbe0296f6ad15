"""List every car."""

from dataclasses import dataclass

from carbuilder.application.cars.dtos import CarDto
from carbuilder.application.common.query import Query, QueryHandler
from carbuilder.application.common.unit_of_work import Repository
from carbuilder.domain.cars.entities.car import Car


@dataclass(frozen=True)
class GetCarsQuery(Query[list[CarDto]]):
    pass


class GetCarsQueryHandler(QueryHandler[GetCarsQuery, list[CarDto]]):
    def __init__(self, repository: Repository[Car]) -> None:
        self._repository = repository

    async def handle(self, query: GetCarsQuery) -> list[CarDto]:
        cars = await self._repository.get_all()
        return [CarDto.from_entity(car) for car in cars]
