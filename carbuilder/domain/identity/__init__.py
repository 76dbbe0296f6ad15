"""Identity domain module."""

from .exceptions import (
    AuthenticationError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)
from .principal import Principal

__all__ = [
    "AuthenticationError",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "Principal",
    "TokenExpiredError",
]
