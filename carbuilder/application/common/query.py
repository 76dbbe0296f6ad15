"""
Query and QueryHandler base classes.

Queries represent requests for information without side effects.
They are named descriptively: GetCarById, GetCars, etc.

Example:
    @dataclass(frozen=True)
    class GetCarByIdQuery(Query[CarDto]):
        id: CarId

    class GetCarByIdQueryHandler(QueryHandler[GetCarByIdQuery, CarDto]):
        def __init__(self, repository: Repository[Car]) -> None:
            self._repository = repository

        async def handle(self, query: GetCarByIdQuery) -> CarDto:
            car = await self._repository.get_by_id(query.id)
            ...
            return CarDto.from_entity(car)
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import TypeVar

from .request import Request, RequestHandler, TResult

# Input type (the query)
TQuery = TypeVar("TQuery", bound="Query")  # type: ignore[type-arg]


@dataclass(frozen=True)
class Query(Request[TResult]):
    """
    Base class for Queries.

    Queries are immutable, named descriptively and read-only.
    """


class QueryHandler(RequestHandler[TQuery, TResult]):
    """
    Base class for Query Handlers.

    Query Handlers:
    - Execute a single query type
    - Return DTOs, never domain entities
    - Have no side effects and never commit
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Handle the query and return the result."""
        raise NotImplementedError
