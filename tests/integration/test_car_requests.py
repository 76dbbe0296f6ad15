"""End-to-end car requests through the production dispatcher and SQLite."""

from decimal import Decimal

import pytest

from carbuilder.application.cars import (
    CarDto,
    CreateCarCommand,
    DeleteCarCommand,
    GetCarByIdQuery,
    GetCarsQuery,
    UpdateCarCommand,
)
from carbuilder.domain.common.exceptions import NotFoundError, ValidationError
from carbuilder.domain.common.value_objects.ids import CarId


async def _create_camry(dispatcher) -> CarId:
    return await dispatcher.dispatch(
        CreateCarCommand(
            make="Toyota",
            model="Camry",
            year=2024,
            price=Decimal("25000"),
            description="Reliable sedan",
        )
    )


async def test_create_then_get_by_id(dispatcher) -> None:
    car_id = await _create_camry(dispatcher)

    car = await dispatcher.dispatch(GetCarByIdQuery(id=car_id))

    assert isinstance(car, CarDto)
    assert car.id == car_id.value
    assert (car.make, car.model, car.year) == ("Toyota", "Camry", 2024)
    assert car.price == Decimal("25000")
    assert car.description == "Reliable sedan"
    assert car.created_at is not None
    assert car.updated_at is None


async def test_invalid_create_persists_nothing(dispatcher) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await dispatcher.dispatch(
            CreateCarCommand(make="Honda", model="Accord", year=2024, price=Decimal("-100"))
        )

    assert exc_info.value.errors == {"price": ["Price must be greater than zero"]}
    assert await dispatcher.dispatch(GetCarsQuery()) == []


@pytest.mark.parametrize("price", [Decimal("0.001"), Decimal("25000.555")])
async def test_sub_cent_price_is_rejected_before_storage(dispatcher, price: Decimal) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await dispatcher.dispatch(
            CreateCarCommand(make="Toyota", model="Camry", year=2024, price=price)
        )

    assert exc_info.value.errors == {"price": ["Price must have at most 2 decimal places"]}
    assert await dispatcher.dispatch(GetCarsQuery()) == []


async def test_price_in_cents_reads_back_exactly(dispatcher) -> None:
    car_id = await dispatcher.dispatch(
        CreateCarCommand(make="Toyota", model="Camry", year=2024, price=Decimal("25000.55"))
    )

    car = await dispatcher.dispatch(GetCarByIdQuery(id=car_id))
    listed = await dispatcher.dispatch(GetCarsQuery())

    assert car.price == Decimal("25000.55")
    assert [c.price for c in listed] == [Decimal("25000.55")]


async def test_update_is_reflected_by_get_by_id(dispatcher) -> None:
    car_id = await _create_camry(dispatcher)

    await dispatcher.dispatch(
        UpdateCarCommand(
            id=car_id, make="Toyota", model="Camry Hybrid", year=2024, price=Decimal("28000")
        )
    )

    car = await dispatcher.dispatch(GetCarByIdQuery(id=car_id))
    assert car.model == "Camry Hybrid"
    assert car.price == Decimal("28000")
    assert car.updated_at is not None
    assert car.updated_at > car.created_at


async def test_invalid_update_leaves_car_unchanged(dispatcher) -> None:
    car_id = await _create_camry(dispatcher)

    with pytest.raises(ValidationError):
        await dispatcher.dispatch(
            UpdateCarCommand(id=car_id, make="", model="Camry", year=2024, price=Decimal("1"))
        )

    car = await dispatcher.dispatch(GetCarByIdQuery(id=car_id))
    assert car.make == "Toyota"
    assert car.updated_at is None


async def test_update_missing_car(dispatcher) -> None:
    with pytest.raises(NotFoundError):
        await dispatcher.dispatch(
            UpdateCarCommand(
                id=CarId.generate(), make="Toyota", model="Camry", year=2024, price=Decimal("1")
            )
        )


async def test_delete_missing_car_changes_nothing(dispatcher) -> None:
    car_id = await _create_camry(dispatcher)

    with pytest.raises(NotFoundError):
        await dispatcher.dispatch(DeleteCarCommand(id=CarId.generate()))

    cars = await dispatcher.dispatch(GetCarsQuery())
    assert [car.id for car in cars] == [car_id.value]


async def test_delete_then_get_is_not_found(dispatcher) -> None:
    car_id = await _create_camry(dispatcher)

    await dispatcher.dispatch(DeleteCarCommand(id=car_id))

    with pytest.raises(NotFoundError):
        await dispatcher.dispatch(GetCarByIdQuery(id=car_id))
    with pytest.raises(NotFoundError):
        await dispatcher.dispatch(DeleteCarCommand(id=car_id))


async def test_get_cars_returns_every_car(dispatcher) -> None:
    first = await _create_camry(dispatcher)
    second = await dispatcher.dispatch(
        CreateCarCommand(make="Ford", model="Focus", year=2020, price=Decimal("15000"))
    )

    cars = await dispatcher.dispatch(GetCarsQuery())

    assert {car.id for car in cars} == {first.value, second.value}
