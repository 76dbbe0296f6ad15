"""Use case for authenticating a user with email and password."""

from dataclasses import dataclass

import structlog

from carbuilder.application.identity.protocols.token_issuer import TokenIssuerProtocol
from carbuilder.application.identity.protocols.user_store import UserStoreProtocol
from carbuilder.domain.identity.exceptions import InvalidCredentialsError
from carbuilder.domain.identity.principal import Principal

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthenticationResult:
    """Bearer token issued for a principal."""

    token: str
    principal: Principal


class AuthenticateUserUseCase:
    """Use case for authenticating a user with email and password."""

    def __init__(
        self,
        user_store: UserStoreProtocol,
        token_issuer: TokenIssuerProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_store = user_store
        self.token_issuer = token_issuer

    async def authenticate(self, email: str, password: str) -> AuthenticationResult:
        """
        Authenticate a user with email and password.

        Args:
            email: User's email address
            password: User's plain text password

        Returns:
            Token and the authenticated principal

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        account = await self.user_store.find_by_email(email)

        # Verify even for unknown emails so both failure paths take the same time
        password_ok = await self.user_store.verify_password(account, password)
        if account is None or not password_ok:
            logger.info("authentication_failed", email=email)
            raise InvalidCredentialsError

        token = self.token_issuer.generate_token(account.principal)

        logger.info("user_authenticated", subject_id=account.principal.subject_id, email=email)

        return AuthenticationResult(token=token, principal=account.principal)
