"""Authenticated principal produced by the identity subsystem."""

from dataclasses import dataclass

from carbuilder.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Principal(ValueObject):
    """
    Identity of an authenticated caller.

    Owned by the external user store; this service only carries it between
    login, token issuance and request handling.
    """

    subject_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        """Full name when known, otherwise the email address."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.email
