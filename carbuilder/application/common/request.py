"""
Request and RequestHandler base classes.

A request is an immutable value describing one intent. Its result type is
carried as a type parameter so `Dispatcher.dispatch` is typed per request.
Commands and queries are the two kinds of request.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Output type (the result of handling the request)
TResult = TypeVar("TResult")
# Input type (the request)
TRequest = TypeVar("TRequest", bound="Request")  # type: ignore[type-arg]


@dataclass(frozen=True)
class Request(Generic[TResult]):
    """Base class for every value the Dispatcher routes."""


class RequestHandler(ABC, Generic[TRequest, TResult]):
    """
    Handles exactly one request type.

    Handlers are created per dispatch and receive the Unit of Work opened for
    that dispatch, so they never share state with concurrent requests.
    """

    @abstractmethod
    async def handle(self, request: TRequest) -> TResult:
        """Handle the request and return its result."""
        raise NotImplementedError
