"""Identity context schemas."""

from carbuilder.infrastructure.identity.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
]
