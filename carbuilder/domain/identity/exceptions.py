"""Identity domain exceptions."""

from carbuilder.domain.common.exceptions import DomainError


class AuthenticationError(DomainError):
    """Raised when a caller cannot be authenticated."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when login fails due to an unknown email or a wrong password."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, tampered with or mis-addressed."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(InvalidTokenError):
    """Raised when a bearer token is past its expiry."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class EmailAlreadyExistsError(DomainError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email
