"""
Request dispatcher.

Routes each request value to the one handler bound to its type, through an
ordered chain of pipeline behaviors (onion model). All bindings are made
explicitly on a DispatcherBuilder during startup; `build()` rejects missing
or inconsistent bindings before the service accepts any traffic.

Example:
    builder = DispatcherBuilder()
    builder.register_handler(
        CreateCarCommand, lambda uow: CreateCarCommandHandler(uow.repository(Car), uow)
    )
    builder.register_validator(CreateCarCommand, CreateCarCommandValidator())
    builder.add_behavior(LoggingBehavior())
    builder.add_behavior(ValidationBehavior(builder.validators))
    dispatcher = builder.build(unit_of_work_factory, request_types=[CreateCarCommand])

    car_id = await dispatcher.dispatch(CreateCarCommand(...))
"""

from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Self

import structlog

from carbuilder.application.common.behaviors import Next, PipelineBehavior, ValidationBehavior
from carbuilder.application.common.request import Request, RequestHandler, TResult
from carbuilder.application.common.unit_of_work import UnitOfWork, UnitOfWorkFactory
from carbuilder.application.common.validation import Validator, ValidatorRegistry
from carbuilder.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

HandlerFactory = Callable[[UnitOfWork], RequestHandler[Any, Any]]
Pipeline = Callable[[Request[Any], Next], Awaitable[Any]]


class Dispatcher:
    """
    Immutable request router.

    Holds no mutable state: the handler map and the composed behavior chain
    are fixed at construction. Each dispatch opens its own Unit of Work and
    creates a fresh handler bound to it.
    """

    def __init__(
        self,
        handlers: Mapping[type, HandlerFactory],
        behaviors: Sequence[PipelineBehavior],
        unit_of_work_factory: UnitOfWorkFactory,
    ) -> None:
        self._handlers = MappingProxyType(dict(handlers))
        self._pipeline = _compose(tuple(behaviors))
        self._unit_of_work_factory = unit_of_work_factory

    @property
    def request_types(self) -> frozenset[type]:
        """Every request type with a bound handler."""
        return frozenset(self._handlers)

    async def dispatch(self, request: Request[TResult]) -> TResult:
        """
        Run the request through the behavior chain and its handler.

        Raises:
            ConfigurationError: If no handler is bound to the request type
        """
        factory = self._handlers.get(type(request))
        if factory is None:
            raise ConfigurationError(f"No handler registered for {type(request).__name__}")

        async def invoke_handler() -> Any:
            async with self._unit_of_work_factory() as unit_of_work:
                handler = factory(unit_of_work)
                return await handler.handle(request)

        result: TResult = await self._pipeline(request, invoke_handler)
        return result


class DispatcherBuilder:
    """Collects bindings during startup and validates them in `build()`."""

    def __init__(self) -> None:
        self._handlers: dict[type, HandlerFactory] = {}
        self._behaviors: list[PipelineBehavior] = []
        self.validators = ValidatorRegistry()

    def register_handler(self, request_type: type, factory: HandlerFactory) -> Self:
        """
        Bind the handler for one request type.

        Raises:
            ConfigurationError: If the type already has a handler
        """
        if request_type in self._handlers:
            raise ConfigurationError(
                f"Handler for {request_type.__name__} is already registered"
            )
        self._handlers[request_type] = factory
        return self

    def register_validator(self, request_type: type, validator: Validator[Any]) -> Self:
        """Add a validator for one request type. A type may have several."""
        self.validators.register(request_type, validator)
        return self

    def add_behavior(self, behavior: PipelineBehavior) -> Self:
        """Append a behavior. The first one added is the outermost."""
        self._behaviors.append(behavior)
        return self

    def build(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        request_types: Iterable[type] = (),
    ) -> Dispatcher:
        """
        Validate every binding and produce the Dispatcher.

        Args:
            unit_of_work_factory: Opens one Unit of Work per dispatch
            request_types: Every request type the application declares; each
                must have a handler

        Raises:
            ConfigurationError: On a missing handler, a validator bound to a
                type without a handler, or validators without a
                ValidationBehavior in the chain
        """
        missing = [t.__name__ for t in request_types if t not in self._handlers]
        if missing:
            raise ConfigurationError(f"No handler registered for: {', '.join(missing)}")

        orphaned = [t.__name__ for t in self.validators.request_types if t not in self._handlers]
        if orphaned:
            raise ConfigurationError(
                f"Validators registered for types without a handler: {', '.join(orphaned)}"
            )

        if self.validators.request_types and not any(
            isinstance(b, ValidationBehavior) for b in self._behaviors
        ):
            raise ConfigurationError("Validators are registered but no ValidationBehavior is")

        self.validators.freeze()
        logger.info(
            "dispatcher_built",
            handlers=sorted(t.__name__ for t in self._handlers),
            behaviors=[type(b).__name__ for b in self._behaviors],
        )
        return Dispatcher(self._handlers, self._behaviors, unit_of_work_factory)


def _compose(behaviors: Sequence[PipelineBehavior]) -> Pipeline:
    """Fold behaviors into one callable; behaviors[0] ends up outermost."""

    async def run_handler(request: Request[Any], terminal: Next) -> Any:
        return await terminal()

    pipeline: Pipeline = run_handler
    for behavior in reversed(behaviors):
        pipeline = _wrap(behavior, pipeline)
    return pipeline


def _wrap(behavior: PipelineBehavior, inner: Pipeline) -> Pipeline:
    async def stage(request: Request[Any], terminal: Next) -> Any:
        return await behavior.handle(request, lambda: inner(request, terminal))

    return stage
