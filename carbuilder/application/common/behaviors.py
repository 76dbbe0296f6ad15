"""
Pipeline behaviors.

A behavior wraps handler invocation. It receives the request and a
continuation to the next stage, and decides whether and how to call it.
Behaviors run in registration order going in and unwind in reverse order
coming out.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from carbuilder.application.common.request import Request
from carbuilder.application.common.validation import ValidatorRegistry, merge_violations
from carbuilder.application.identity.principal_context import current_principal
from carbuilder.domain.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)

Next = Callable[[], Awaitable[Any]]


class PipelineBehavior(ABC):
    """Cross-cutting stage wrapping handler invocation."""

    @abstractmethod
    async def handle(self, request: Request[Any], next_: Next) -> Any:
        """Run this stage, calling `next_()` to continue the chain."""
        raise NotImplementedError


class ValidationBehavior(PipelineBehavior):
    """
    Runs every validator registered for the request type.

    Violations from all validators are aggregated before anything is raised,
    so the caller sees every broken rule at once. Request types without
    validators pass straight through.
    """

    def __init__(self, registry: ValidatorRegistry) -> None:
        self._registry = registry

    async def handle(self, request: Request[Any], next_: Next) -> Any:
        validators = self._registry.validators_for(type(request))
        if not validators:
            return await next_()

        errors = merge_violations(validator.validate(request) for validator in validators)
        if errors:
            logger.info(
                "request_rejected",
                request_type=type(request).__name__,
                fields=list(errors),
            )
            raise ValidationError(errors)

        return await next_()


class LoggingBehavior(PipelineBehavior):
    """Binds request context into structlog and logs outcome and duration."""

    async def handle(self, request: Request[Any], next_: Next) -> Any:
        principal = current_principal()
        with structlog.contextvars.bound_contextvars(
            request_type=type(request).__name__,
            subject_id=principal.subject_id if principal else None,
        ):
            started = time.perf_counter()
            try:
                result = await next_()
            except Exception as e:
                logger.info(
                    "request_failed",
                    error=type(e).__name__,
                    duration_ms=_elapsed_ms(started),
                )
                raise
            logger.info("request_handled", duration_ms=_elapsed_ms(started))
            return result


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
