"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError


class PasswordService:
    """Hashes and verifies passwords with pwdlib's recommended algorithm."""

    def __init__(self, pepper: str = "") -> None:
        self._pepper = pepper
        self._password_hash = PasswordHash.recommended()
        # A real hash so the unknown-email path costs the same as a real check.
        # A fake string like "abc123" would make pwdlib raise UnknownHashError.
        self._dummy_hash = self._password_hash.hash("dummy_password_for_timing_attack_prevention")

    def hash_password(self, plain_password: str) -> str:
        """Hash a plain password for storage with pepper."""
        return self._password_hash.hash(plain_password + self._pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a hashed password."""
        try:
            return self._password_hash.verify(plain_password + self._pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        """Get a dummy hash for timing attack prevention."""
        return self._dummy_hash
