"""Tests for application startup."""

import pytest
from httpx import AsyncClient

from carbuilder.config import Settings
from carbuilder.exceptions import ConfigurationError
from carbuilder.main import create_app


@pytest.mark.parametrize(
    ("secret_key", "message"),
    [
        ("", "SECRET_KEY is not configured"),
        ("   ", "SECRET_KEY is not configured"),
        ("short-key", "at least 32 bytes"),
    ],
)
def test_bad_signing_key_aborts_startup(secret_key: str, message: str) -> None:
    settings = Settings(
        _env_file=None,  # type: ignore[call-arg]
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SECRET_KEY=secret_key,
        ENVIRONMENT="test",
    )

    with pytest.raises(ConfigurationError, match=message):
        create_app(settings)


async def test_health_endpoint(client: AsyncClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
