"""Tests for the login and registration use cases against in-memory ports."""

import pytest

from carbuilder.application.identity.protocols.user_store import UserAccount
from carbuilder.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from carbuilder.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from carbuilder.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
)
from carbuilder.domain.identity.principal import Principal


class InMemoryUserStore:
    def __init__(self) -> None:
        self.accounts: dict[str, UserAccount] = {}
        self.verified: list[UserAccount | None] = []

    async def find_by_email(self, email: str) -> UserAccount | None:
        return self.accounts.get(email)

    async def verify_password(self, account: UserAccount | None, password: str) -> bool:
        self.verified.append(account)
        return account is not None and account.hashed_password == f"hashed:{password}"

    async def create_principal(
        self, email: str, password: str, first_name: str | None, last_name: str | None
    ) -> Principal:
        if email in self.accounts:
            raise EmailAlreadyExistsError(email)
        principal = Principal(
            subject_id=f"user-{len(self.accounts) + 1}",
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        self.accounts[email] = UserAccount(principal, f"hashed:{password}")
        return principal


class StubTokenIssuer:
    def generate_token(self, principal: Principal) -> str:
        return f"token-for-{principal.subject_id}"

    def verify_token(self, token: str) -> Principal:
        raise NotImplementedError


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def register(user_store) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_store, StubTokenIssuer())


@pytest.fixture
def authenticate(user_store) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(user_store, StubTokenIssuer())


async def test_register_issues_token_for_new_principal(register) -> None:
    result = await register.register("a@example.com", "secret-password", "Ada", "Lovelace")

    assert result.token == "token-for-user-1"
    assert result.principal.email == "a@example.com"
    assert result.principal.display_name == "Ada Lovelace"


async def test_register_duplicate_email(register) -> None:
    await register.register("a@example.com", "secret-password")

    with pytest.raises(EmailAlreadyExistsError):
        await register.register("a@example.com", "other-password")


async def test_authenticate_with_correct_password(register, authenticate) -> None:
    await register.register("a@example.com", "secret-password")

    result = await authenticate.authenticate("a@example.com", "secret-password")

    assert result.token == "token-for-user-1"
    assert result.principal.subject_id == "user-1"


async def test_wrong_password_and_unknown_email_fail_alike(
    register, authenticate, user_store
) -> None:
    await register.register("a@example.com", "secret-password")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        await authenticate.authenticate("a@example.com", "nope")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        await authenticate.authenticate("b@example.com", "secret-password")

    assert str(wrong_password.value) == str(unknown_email.value) == "Invalid email or password"
    # The password check runs on both paths
    assert len(user_store.verified) == 2
    assert user_store.verified[1] is None
