from .token_issuer import TokenIssuerProtocol
from .user_store import UserAccount, UserStoreProtocol

__all__ = ["TokenIssuerProtocol", "UserAccount", "UserStoreProtocol"]
