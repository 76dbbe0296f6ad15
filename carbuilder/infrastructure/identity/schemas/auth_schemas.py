"""Pydantic schemas for authentication requests and responses."""

from pydantic import BaseModel, Field

from carbuilder.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticationResult,
)


class LoginRequest(BaseModel):
    """Schema for logging in with email and password."""

    email: str = Field(..., min_length=1, max_length=255, description="User email")
    password: str = Field(..., min_length=1, description="Plain text password")


class RegisterRequest(BaseModel):
    """Schema for registering a new user."""

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)


class AuthResponse(BaseModel):
    """Bearer token plus the identity it was issued for."""

    token: str
    email: str
    first_name: str | None
    last_name: str | None

    @classmethod
    def from_result(cls, result: AuthenticationResult) -> "AuthResponse":
        return cls(
            token=result.token,
            email=result.principal.email,
            first_name=result.principal.first_name,
            last_name=result.principal.last_name,
        )
