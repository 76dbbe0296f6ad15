from .password_service import PasswordService
from .token_issuer import JwtTokenIssuer

__all__ = ["JwtTokenIssuer", "PasswordService"]
