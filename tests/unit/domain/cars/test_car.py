from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from carbuilder.domain.cars.entities.car import Car
from carbuilder.domain.common.exceptions import ValidationError
from carbuilder.domain.common.value_objects.ids import CarId


def _camry() -> Car:
    return Car.create(
        make="Toyota", model="Camry", year=2024, price=25000, description="Reliable sedan"
    )


def test_create_car() -> None:
    """Test creating a valid car."""
    car = _camry()

    assert isinstance(car.id, CarId)
    assert car.make == "Toyota"
    assert car.model == "Camry"
    assert car.year == 2024
    assert car.price == Decimal("25000")
    assert car.description == "Reliable sedan"
    assert car.created_at.tzinfo is not None
    assert car.updated_at is None


def test_create_generates_distinct_ids() -> None:
    assert _camry().id != _camry().id


def test_create_strips_make_and_model() -> None:
    car = Car.create(make="  Toyota ", model=" Camry  ", year=2024, price=25000)

    assert car.make == "Toyota"
    assert car.model == "Camry"


def test_create_converts_float_price_exactly() -> None:
    car = Car.create(make="Toyota", model="Camry", year=2024, price=19999.99)

    assert car.price == Decimal("19999.99")


def test_create_rejects_sub_cent_price() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Car.create(make="Toyota", model="Camry", year=2024, price=Decimal("0.001"))

    assert exc_info.value.errors == {"price": ["Price must have at most 2 decimal places"]}


def test_create_rejects_non_positive_price() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Car.create(make="Honda", model="Accord", year=2024, price=-100)

    assert exc_info.value.errors == {"price": ["Price must be greater than zero"]}


def test_create_reports_every_violation() -> None:
    """All broken rules are reported together, not just the first."""
    with pytest.raises(ValidationError) as exc_info:
        Car.create(make="", model="X" * 51, year=1899, price=0, description="d" * 501)

    assert exc_info.value.errors == {
        "make": ["Make is required"],
        "model": ["Model must not exceed 50 characters"],
        "year": ["Year must be 1900 or later"],
        "price": ["Price must be greater than zero"],
        "description": ["Description must not exceed 500 characters"],
    }


def test_constructor_enforces_invariants() -> None:
    """Bypassing the factory does not bypass validation."""
    with pytest.raises(ValidationError):
        Car(
            id=CarId.generate(),
            make="Toyota",
            model="",
            year=2024,
            price=Decimal("1"),
            created_at=datetime.now(UTC),
        )


def test_update_changes_fields_and_sets_updated_at() -> None:
    car = _camry()

    car.update(make="Toyota", model="Camry Hybrid", year=2024, price=28000)

    assert car.model == "Camry Hybrid"
    assert car.price == Decimal("28000")
    assert car.description is None
    assert car.updated_at is not None
    assert car.updated_at > car.created_at


def test_rejected_update_leaves_car_untouched() -> None:
    car = _camry()

    with pytest.raises(ValidationError) as exc_info:
        car.update(make="Toyota", model="Camry Hybrid", year=2024, price=20_000_000)

    assert exc_info.value.errors == {"price": ["Price cannot exceed $10,000,000"]}
    assert car.model == "Camry"
    assert car.price == Decimal("25000")
    assert car.updated_at is None


def test_updated_at_never_moves_backwards() -> None:
    """A stored timestamp ahead of the local clock is advanced, never undercut."""
    future = datetime.now(UTC) + timedelta(hours=1)
    car = Car.create_with_id(
        id=CarId.generate(),
        make="Toyota",
        model="Camry",
        year=2024,
        price=Decimal("25000"),
        description=None,
        created_at=datetime.now(UTC) - timedelta(days=1),
        updated_at=future,
    )

    car.update(make="Toyota", model="Camry", year=2024, price=26000)

    assert car.updated_at == future + timedelta(microseconds=1)


def test_update_is_strictly_after_creation_with_a_lagging_clock() -> None:
    created = datetime.now(UTC) + timedelta(hours=1)
    car = Car.create_with_id(
        id=CarId.generate(),
        make="Toyota",
        model="Camry",
        year=2024,
        price=Decimal("25000"),
        description=None,
        created_at=created,
        updated_at=None,
    )

    car.update(make="Toyota", model="Camry", year=2024, price=26000)
    first = car.updated_at
    car.update(make="Toyota", model="Camry", year=2024, price=27000)

    assert first is not None
    assert first > created
    assert car.updated_at is not None
    assert car.updated_at > first


def test_id_and_created_at_are_immutable() -> None:
    car = _camry()

    with pytest.raises(AttributeError):
        car.id = CarId.generate()
    with pytest.raises(AttributeError):
        car.created_at = datetime.now(UTC)


def test_create_with_id() -> None:
    """Test reconstituting from persistence."""
    car_id = CarId.generate()
    created = datetime(2024, 1, 1, tzinfo=UTC)

    car = Car.create_with_id(
        id=car_id,
        make="Ford",
        model="Focus",
        year=2020,
        price=Decimal("15000.00"),
        description=None,
        created_at=created,
        updated_at=None,
    )

    assert car.id == car_id
    assert car.created_at == created


def test_equality_is_by_identity() -> None:
    car = _camry()
    same = Car.create_with_id(
        id=car.id,
        make="Other",
        model="Thing",
        year=2000,
        price=Decimal("1"),
        description=None,
        created_at=car.created_at,
        updated_at=None,
    )

    assert car == same
    assert car != _camry()
