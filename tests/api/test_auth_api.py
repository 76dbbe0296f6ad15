"""Tests for the authentication endpoints."""

from httpx import AsyncClient

REGISTER_URL = "/api/v1/auth/register"
LOGIN_URL = "/api/v1/auth/login"


async def _register(client: AsyncClient, email: str = "ada@example.com") -> None:
    response = await client.post(
        REGISTER_URL,
        json={"email": email, "password": "correct-horse-battery", "first_name": "Ada"},
    )
    assert response.status_code == 201


async def test_register_returns_token_and_identity(client: AsyncClient) -> None:
    response = await client.post(
        REGISTER_URL,
        json={
            "email": "ada@example.com",
            "password": "correct-horse-battery",
            "first_name": "Ada",
            "last_name": "Lovelace",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["token"].count(".") == 2
    assert data["email"] == "ada@example.com"
    assert data["first_name"] == "Ada"
    assert data["last_name"] == "Lovelace"


async def test_register_duplicate_email_conflicts(client: AsyncClient) -> None:
    await _register(client)

    response = await client.post(
        REGISTER_URL, json={"email": "ada@example.com", "password": "another-password"}
    )

    assert response.status_code == 409


async def test_register_rejects_short_password(client: AsyncClient) -> None:
    response = await client.post(REGISTER_URL, json={"email": "ada@example.com", "password": "x"})

    assert response.status_code == 400
    assert "password" in response.json()["errors"]


async def test_login_with_valid_credentials(client: AsyncClient) -> None:
    await _register(client)

    response = await client.post(
        LOGIN_URL, json={"email": "ada@example.com", "password": "correct-horse-battery"}
    )

    assert response.status_code == 200
    assert response.json()["email"] == "ada@example.com"


async def test_login_failures_are_indistinguishable(client: AsyncClient) -> None:
    await _register(client)

    wrong_password = await client.post(
        LOGIN_URL, json={"email": "ada@example.com", "password": "wrong-password"}
    )
    unknown_email = await client.post(
        LOGIN_URL, json={"email": "bob@example.com", "password": "correct-horse-battery"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.headers["WWW-Authenticate"] == "Bearer"
