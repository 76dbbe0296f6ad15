"""Bearer token issuance and verification."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
import structlog

from carbuilder.domain.identity.exceptions import InvalidTokenError, TokenExpiredError
from carbuilder.domain.identity.principal import Principal
from carbuilder.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=8)
# HS256 keys shorter than the hash output are rejected
MIN_KEY_BYTES = 32

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer:
    """
    Issues and verifies HS256-signed JWTs.

    Tokens are stateless. A token stays valid until its `exp` claim passes;
    there is no server-side session or revocation list.
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        clock: Clock = _utc_now,
    ) -> None:
        """
        Raises:
            ConfigurationError: If the key is missing or shorter than 32 bytes
        """
        if not secret_key:
            raise ConfigurationError("SECRET_KEY is not configured")
        if len(secret_key.encode("utf-8")) < MIN_KEY_BYTES:
            raise ConfigurationError(
                f"SECRET_KEY must be at least {MIN_KEY_BYTES} bytes for {ALGORITHM}"
            )
        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._clock = clock

    def generate_token(self, principal: Principal) -> str:
        """Create a signed token for the principal, valid for eight hours."""
        issued_at = self._clock()
        claims: dict[str, Any] = {
            "sub": principal.subject_id,
            "email": principal.email,
            "name": principal.display_name,
            "first_name": principal.first_name,
            "last_name": principal.last_name,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + TOKEN_LIFETIME).timestamp()),
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> Principal:
        """
        Check signature, issuer, audience and expiry, and return the principal.

        Raises:
            TokenExpiredError: If the token is past its expiry
            InvalidTokenError: If the token is malformed, tampered with or
                addressed to another issuer or audience
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                # Time claims are checked against the injected clock below
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "exp", "iss", "aud"],
                },
            )
        except jwt.InvalidTokenError as e:
            logger.info("token_rejected", reason=str(e))
            raise InvalidTokenError from e

        expires_at = payload["exp"]
        if not isinstance(expires_at, int | float):
            raise InvalidTokenError("Malformed expiry claim")
        if self._clock().timestamp() >= expires_at:
            raise TokenExpiredError

        email = payload.get("email")
        if not isinstance(email, str):
            raise InvalidTokenError("Missing email claim")

        return Principal(
            subject_id=str(payload["sub"]),
            email=email,
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
        )
