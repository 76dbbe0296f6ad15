"""Invariants shared by the Car entity and the car command validators."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from carbuilder.domain.common.rules import (
    FieldRule,
    collect_violations,
    is_number,
    is_present,
    is_text,
    max_length,
)

# Domain constraints
MAX_NAME_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 500
MIN_YEAR = 1900
MAX_PRICE = Decimal("10000000")
# Matches the Numeric(18, 2) price column
PRICE_DECIMAL_PLACES = 2


def max_year() -> int:
    """Latest accepted model year: next calendar year in UTC."""
    return datetime.now(UTC).year + 1


def _year_not_too_early(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= MIN_YEAR


def _year_not_too_late(value: Any) -> bool:
    return value <= max_year()


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _whole_cents(value: Any) -> bool:
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        return False
    exponent = amount.normalize().as_tuple().exponent
    return isinstance(exponent, int) and exponent >= -PRICE_DECIMAL_PLACES


CAR_RULES: tuple[FieldRule, ...] = (
    FieldRule("make", is_present, "Make is required"),
    FieldRule(
        "make",
        max_length(MAX_NAME_LENGTH),
        f"Make must not exceed {MAX_NAME_LENGTH} characters",
        when=is_text,
    ),
    FieldRule("model", is_present, "Model is required"),
    FieldRule(
        "model",
        max_length(MAX_NAME_LENGTH),
        f"Model must not exceed {MAX_NAME_LENGTH} characters",
        when=is_text,
    ),
    FieldRule("year", _year_not_too_early, f"Year must be {MIN_YEAR} or later"),
    FieldRule(
        "year",
        _year_not_too_late,
        lambda: f"Year cannot exceed {max_year()}",
        when=_is_integer,
    ),
    FieldRule("price", lambda v: is_number(v) and v > 0, "Price must be greater than zero"),
    FieldRule(
        "price",
        lambda v: v <= MAX_PRICE,
        "Price cannot exceed $10,000,000",
        when=is_number,
    ),
    FieldRule(
        "price",
        _whole_cents,
        f"Price must have at most {PRICE_DECIMAL_PLACES} decimal places",
        when=is_number,
    ),
    FieldRule(
        "description",
        max_length(MAX_DESCRIPTION_LENGTH),
        f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters",
        when=lambda v: is_text(v) and v != "",
    ),
)


def car_violations(
    *,
    make: Any,
    model: Any,
    year: Any,
    price: Any,
    description: Any = None,
) -> dict[str, list[str]]:
    """Evaluate every car rule against the given values."""
    return collect_violations(
        CAR_RULES,
        {
            "make": make,
            "model": model,
            "year": year,
            "price": price,
            "description": description,
        },
    )
