"""Ambient principal for the request being handled."""

from contextvars import ContextVar, Token

from carbuilder.domain.identity.principal import Principal

_current_principal: ContextVar[Principal | None] = ContextVar("current_principal", default=None)


def current_principal() -> Principal | None:
    """Principal of the caller in the current task, if authenticated."""
    return _current_principal.get()


def set_current_principal(principal: Principal | None) -> Token[Principal | None]:
    return _current_principal.set(principal)


def reset_current_principal(token: Token[Principal | None]) -> None:
    _current_principal.reset(token)
