"""FastAPI dependencies for identity and authentication."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from carbuilder.application.identity.principal_context import (
    reset_current_principal,
    set_current_principal,
)
from carbuilder.domain.identity.exceptions import InvalidTokenError
from carbuilder.domain.identity.principal import Principal
from carbuilder.exceptions import CredentialsException
from carbuilder.infrastructure.common.di import get_container

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login", auto_error=False)


async def get_current_principal(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> AsyncIterator[Principal]:
    """
    Verify the bearer token and make its principal ambient for the request.

    Raises:
        CredentialsException: If the token is missing, invalid or expired
    """
    if not token:
        raise CredentialsException

    try:
        principal = get_container(request).token_issuer().verify_token(token)
    except InvalidTokenError:
        raise CredentialsException from None

    context_token = set_current_principal(principal)
    try:
        yield principal
    finally:
        reset_current_principal(context_token)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
