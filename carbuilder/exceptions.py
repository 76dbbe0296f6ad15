"""Service-level exception hierarchy for CarBuilder."""

from fastapi import HTTPException
from starlette import status


class CarBuilderError(Exception):
    """Base exception for all CarBuilder service errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(CarBuilderError):
    """
    Startup wiring or settings are invalid.

    Raised while the process is starting (missing handler binding, duplicate
    binding, missing or malformed signing key). The service must never
    accept traffic after one of these.
    """


class StorageError(CarBuilderError):
    """Persisting staged changes failed; staged changes were rolled back."""

    def __init__(self, message: str = "Failed to persist changes") -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
