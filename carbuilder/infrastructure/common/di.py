from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from fastapi import Request

from carbuilder.application.common.dispatcher import Dispatcher
from carbuilder.core import Container

T = TypeVar("T")


def get_container(request: Request) -> Container:
    """The container created with the application."""
    container: Container = request.app.state.container
    return container


def get_dispatcher(request: Request) -> Dispatcher:
    return get_container(request).dispatcher()


def inject_use_case(select: Callable[[Container], Provider[T]]) -> Callable[[Request], T]:
    """
    Create a FastAPI dependency for a container provider.

    Example:
        use_case = Depends(inject_use_case(lambda c: c.authentication_use_case))
    """

    def dependency(request: Request) -> T:
        return select(get_container(request))()

    return dependency
