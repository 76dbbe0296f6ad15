"""
Car endpoints.

Each route turns the HTTP request into a command or query, dispatches it and
shapes the result. Errors are translated by the global error handlers.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from starlette import status

from carbuilder.application.cars import (
    CreateCarCommand,
    DeleteCarCommand,
    GetCarByIdQuery,
    GetCarsQuery,
    UpdateCarCommand,
)
from carbuilder.application.common.dispatcher import Dispatcher
from carbuilder.domain.common.value_objects.ids import CarId
from carbuilder.infrastructure.cars.schemas import CarCreateRequest, CarResponse, CarUpdateRequest
from carbuilder.infrastructure.common.di import get_dispatcher
from carbuilder.infrastructure.identity.dependencies import get_current_principal

router = APIRouter(
    prefix="/cars",
    tags=["cars"],
    dependencies=[Depends(get_current_principal)],
)

DispatcherDep = Annotated[Dispatcher, Depends(get_dispatcher)]


@router.get("")
async def get_cars(dispatcher: DispatcherDep) -> list[CarResponse]:
    cars = await dispatcher.dispatch(GetCarsQuery())
    return [CarResponse.from_dto(car) for car in cars]


@router.get("/{car_id}")
async def get_car(car_id: UUID, dispatcher: DispatcherDep) -> CarResponse:
    car = await dispatcher.dispatch(GetCarByIdQuery(id=CarId(car_id)))
    return CarResponse.from_dto(car)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_car(request: CarCreateRequest, dispatcher: DispatcherDep) -> UUID:
    """Create a car and return its id."""
    car_id = await dispatcher.dispatch(
        CreateCarCommand(
            make=request.make,
            model=request.model,
            year=request.year,
            price=request.price,
            description=request.description,
        )
    )
    return car_id.value


@router.put("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_car(
    car_id: UUID, request: CarUpdateRequest, dispatcher: DispatcherDep
) -> Response:
    await dispatcher.dispatch(
        UpdateCarCommand(
            id=CarId(car_id),
            make=request.make,
            model=request.model,
            year=request.year,
            price=request.price,
            description=request.description,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: UUID, dispatcher: DispatcherDep) -> Response:
    await dispatcher.dispatch(DeleteCarCommand(id=CarId(car_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
