"""Use case for registering a new user."""

import structlog

from carbuilder.application.identity.protocols.token_issuer import TokenIssuerProtocol
from carbuilder.application.identity.protocols.user_store import UserStoreProtocol
from carbuilder.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticationResult,
)

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Creates a user in the store and issues a token for it straight away."""

    def __init__(
        self,
        user_store: UserStoreProtocol,
        token_issuer: TokenIssuerProtocol,
    ) -> None:
        self.user_store = user_store
        self.token_issuer = token_issuer

    async def register(
        self,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> AuthenticationResult:
        """
        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        principal = await self.user_store.create_principal(email, password, first_name, last_name)
        token = self.token_issuer.generate_token(principal)

        logger.info("user_registered", subject_id=principal.subject_id, email=email)

        return AuthenticationResult(token=token, principal=principal)
