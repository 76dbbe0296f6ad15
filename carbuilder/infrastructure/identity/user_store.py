"""User store backed by the users table."""

import asyncio
import uuid

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from carbuilder.application.identity.protocols.user_store import UserAccount
from carbuilder.domain.identity.exceptions import EmailAlreadyExistsError
from carbuilder.domain.identity.principal import Principal
from carbuilder.infrastructure.identity.auth.password_service import PasswordService
from carbuilder.models import User as UserORM

logger = structlog.get_logger(__name__)


class SqlAlchemyUserStore:
    """
    User store with one short-lived session per call.

    Password hashing runs in a worker thread so it does not stall the event
    loop.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        password_service: PasswordService,
    ) -> None:
        self.session_factory = session_factory
        self.password_service = password_service

    async def find_by_email(self, email: str) -> UserAccount | None:
        async with self.session_factory() as session:
            stmt = select(UserORM).where(UserORM.email == _normalize(email))
            orm_model = (await session.execute(stmt)).scalar_one_or_none()
        return _to_account(orm_model) if orm_model else None

    async def verify_password(self, account: UserAccount | None, password: str) -> bool:
        hashed_password = (
            account.hashed_password if account else self.password_service.get_dummy_hash()
        )
        password_ok = await asyncio.to_thread(
            self.password_service.verify_password, password, hashed_password
        )
        return account is not None and password_ok

    async def create_principal(
        self,
        email: str,
        password: str,
        first_name: str | None,
        last_name: str | None,
    ) -> Principal:
        email = _normalize(email)
        hashed_password = await asyncio.to_thread(self.password_service.hash_password, password)

        async with self.session_factory() as session:
            exists = await session.execute(select(UserORM.id).where(UserORM.email == email))
            if exists.scalar_one_or_none() is not None:
                raise EmailAlreadyExistsError(email)

            orm_model = UserORM(
                id=str(uuid.uuid4()),
                email=email,
                hashed_password=hashed_password,
                first_name=first_name,
                last_name=last_name,
            )
            session.add(orm_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Lost a race with a concurrent registration
                await session.rollback()
                raise EmailAlreadyExistsError(email) from e

        logger.info("user_created", subject_id=orm_model.id)
        return _to_account(orm_model).principal


def _normalize(email: str) -> str:
    return email.strip().lower()


def _to_account(orm_model: UserORM) -> UserAccount:
    return UserAccount(
        principal=Principal(
            subject_id=orm_model.id,
            email=orm_model.email,
            first_name=orm_model.first_name,
            last_name=orm_model.last_name,
        ),
        hashed_password=orm_model.hashed_password,
    )
