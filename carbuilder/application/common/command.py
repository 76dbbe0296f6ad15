"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: CreateCar, DeleteCar, etc.

Example:
    @dataclass(frozen=True)
    class CreateCarCommand(Command[CarId]):
        make: str
        model: str
        year: int
        price: Decimal

    class CreateCarCommandHandler(CommandHandler[CreateCarCommand, CarId]):
        def __init__(self, repository: Repository[Car], unit_of_work: UnitOfWork) -> None:
            self._repository = repository
            self._unit_of_work = unit_of_work

        async def handle(self, command: CreateCarCommand) -> CarId:
            car = Car.create(...)
            await self._repository.add(car)
            await self._unit_of_work.commit()
            return car.id
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import TypeVar

from .request import Request, RequestHandler, TResult

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")  # type: ignore[type-arg]


@dataclass(frozen=True)
class Command(Request[TResult]):
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (CreateCar, not CarCreation)
    - Carry all data needed to execute the operation, including the target id
      when they mutate an existing record
    """


class CommandHandler(RequestHandler[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Execute a single command type
    - Orchestrate domain logic
    - Stage changes through repositories and finish with one commit
    - Return the result of the operation

    Each command has exactly one handler.
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        Raises:
            DomainError: When business rules are violated
        """
        raise NotImplementedError
