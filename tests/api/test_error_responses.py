"""Tests for how service errors are rendered to clients."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from carbuilder.exceptions import CarBuilderError, ConfigurationError, StorageError


@pytest.fixture
def failing_app(app: FastAPI) -> FastAPI:
    @app.get("/failures/configuration")
    async def configuration_failure() -> None:
        raise ConfigurationError("No handler registered for DeleteBoatCommand")

    @app.get("/failures/storage")
    async def storage_failure() -> None:
        raise StorageError("database is locked")

    @app.get("/failures/client")
    async def client_failure() -> None:
        raise CarBuilderError("Request is not acceptable", status_code=422)

    return app


@pytest.mark.parametrize(
    ("path", "status_code"),
    [("/failures/configuration", 500), ("/failures/storage", 503)],
)
async def test_server_side_errors_hide_their_detail(
    failing_app: FastAPI, client: AsyncClient, path: str, status_code: int
) -> None:
    response = await client.get(path)

    assert response.status_code == status_code
    assert response.json() == {"message": "An unexpected error occurred"}


async def test_client_side_service_error_keeps_its_message(
    failing_app: FastAPI, client: AsyncClient
) -> None:
    response = await client.get("/failures/client")

    assert response.status_code == 422
    assert response.json() == {"message": "Request is not acceptable"}


async def test_sub_cent_price_is_rejected(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/v1/cars",
        json={"make": "Toyota", "model": "Camry", "year": 2024, "price": "0.001"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"price": ["Price must have at most 2 decimal places"]}
    assert (await client.get("/api/v1/cars", headers=auth_headers)).json() == []
