"""Protocol for the external user store consumed by login and registration."""

from dataclasses import dataclass
from typing import Protocol

from carbuilder.domain.identity.principal import Principal


@dataclass(frozen=True)
class UserAccount:
    """A stored user as seen by the login flow."""

    principal: Principal
    hashed_password: str


class UserStoreProtocol(Protocol):
    async def find_by_email(self, email: str) -> UserAccount | None:
        """Return the account registered under the email, if any."""
        ...

    async def verify_password(self, account: UserAccount | None, password: str) -> bool:
        """
        Check a password against the account's hash.

        Accepts None so callers can spend the same hashing time whether or
        not the email exists; always False in that case.
        """
        ...

    async def create_principal(
        self,
        email: str,
        password: str,
        first_name: str | None,
        last_name: str | None,
    ) -> Principal:
        """
        Register a new user.

        Raises:
            EmailAlreadyExistsError: If the email is taken
        """
        ...
