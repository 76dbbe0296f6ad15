"""
Declarative field rules.

A rule names the field it guards, a predicate the value must satisfy, and the
message reported when it does not. The same rule tuples are evaluated by
entities on construction/update and by request validators in the dispatch
pipeline, so both sites report identical violations.

Example:
    NAME_RULES = (
        FieldRule("name", is_present, "Name is required"),
        FieldRule("name", max_length(50), "Name must not exceed 50 characters", when=is_text),
    )
    errors = collect_violations(NAME_RULES, {"name": ""})
    # {"name": ["Name is required"]}
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldRule:
    """A single check against one named field."""

    field: str
    check: Predicate
    message: str | Callable[[], str]
    when: Predicate | None = None

    def violation(self, value: Any) -> str | None:
        """Return the message if the value breaks this rule, None otherwise."""
        if self.when is not None and not self.when(value):
            return None
        if self.check(value):
            return None
        return self.message() if callable(self.message) else self.message


def collect_violations(
    rules: Iterable[FieldRule], values: Mapping[str, Any]
) -> dict[str, list[str]]:
    """
    Evaluate every rule and aggregate violations by field.

    Never short-circuits: all rules run, and the resulting mapping preserves
    rule declaration order for both fields and messages.
    """
    errors: dict[str, list[str]] = {}
    for rule in rules:
        message = rule.violation(values.get(rule.field))
        if message is not None:
            errors.setdefault(rule.field, []).append(message)
    return errors


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_present(value: Any) -> bool:
    """Non-empty after stripping whitespace."""
    return isinstance(value, str) and bool(value.strip())


def is_number(value: Any) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def max_length(limit: int) -> Predicate:
    return lambda value: len(value) <= limit
