"""
Request validators.

A Validator is a declarative set of field rules for one request type. The
ValidationBehavior pipeline stage runs every validator registered for the
request in flight.

Example:
    class CreateCarCommandValidator(Validator[CreateCarCommand]):
        rules = CAR_RULES
"""

from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from carbuilder.domain.common.rules import FieldRule, collect_violations
from carbuilder.exceptions import ConfigurationError

TRequest = TypeVar("TRequest")


class Validator(Generic[TRequest]):
    """Declarative per-field rules for one request type."""

    rules: ClassVar[tuple[FieldRule, ...]] = ()

    def validate(self, request: TRequest) -> dict[str, list[str]]:
        """Evaluate every rule; an empty mapping means the request is valid."""
        values = {rule.field: getattr(request, rule.field, None) for rule in self.rules}
        return collect_violations(self.rules, values)


class ValidatorRegistry:
    """
    Request type -> validators, in registration order.

    Filled during startup, then frozen. Lookups after freezing never change.
    """

    def __init__(self) -> None:
        self._validators: dict[type, list[Validator[Any]]] = {}
        self._frozen = False

    def register(self, request_type: type, validator: Validator[Any]) -> None:
        if self._frozen:
            raise ConfigurationError("Validators cannot be registered after startup")
        self._validators.setdefault(request_type, []).append(validator)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def request_types(self) -> Iterable[type]:
        return tuple(self._validators)

    def validators_for(self, request_type: type) -> tuple[Validator[Any], ...]:
        return tuple(self._validators.get(request_type, ()))


def merge_violations(results: Iterable[dict[str, list[str]]]) -> dict[str, list[str]]:
    """Combine per-validator violations, keeping declaration order."""
    merged: dict[str, list[str]] = {}
    for result in results:
        for field, messages in result.items():
            merged.setdefault(field, []).extend(messages)
    return merged
