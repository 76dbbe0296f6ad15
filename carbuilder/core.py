from dependency_injector import containers, providers

from carbuilder.application.cars.registration import CAR_REQUEST_TYPES, register_car_requests
from carbuilder.application.common.behaviors import LoggingBehavior, ValidationBehavior
from carbuilder.application.common.dispatcher import Dispatcher, DispatcherBuilder
from carbuilder.application.common.unit_of_work import UnitOfWorkFactory
from carbuilder.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from carbuilder.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from carbuilder.config import Settings
from carbuilder.database import create_engine, create_session_factory
from carbuilder.domain.cars.entities.car import Car
from carbuilder.infrastructure.cars.mappers.car_mapper import CarMapper
from carbuilder.infrastructure.common.persistence.sqlalchemy_unit_of_work import (
    EntityMapping,
    sqlalchemy_unit_of_work_factory,
)
from carbuilder.infrastructure.identity.auth.password_service import PasswordService
from carbuilder.infrastructure.identity.auth.token_issuer import JwtTokenIssuer
from carbuilder.infrastructure.identity.user_store import SqlAlchemyUserStore
from carbuilder.models import Car as CarORM


def build_dispatcher(unit_of_work_factory: UnitOfWorkFactory) -> Dispatcher:
    """
    Production dispatcher wiring.

    Logging is outermost so rejected requests are logged too; validation runs
    before any Unit of Work is opened.
    """
    builder = DispatcherBuilder()
    register_car_requests(builder)
    builder.add_behavior(LoggingBehavior())
    builder.add_behavior(ValidationBehavior(builder.validators))
    return builder.build(unit_of_work_factory, request_types=CAR_REQUEST_TYPES)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided when the application is created
    settings = providers.Dependency(instance_of=Settings)

    # Persistence
    engine = providers.Singleton(create_engine, database_url=settings.provided.DATABASE_URL)
    session_factory = providers.Singleton(create_session_factory, engine=engine)
    entity_mappings = providers.Object({Car: EntityMapping(CarORM, CarMapper())})
    unit_of_work_factory = providers.Singleton(
        sqlalchemy_unit_of_work_factory,
        session_factory=session_factory,
        mappings=entity_mappings,
    )

    # Request dispatch
    dispatcher = providers.Singleton(build_dispatcher, unit_of_work_factory=unit_of_work_factory)

    # Identity services
    password_service = providers.Singleton(
        PasswordService, pepper=settings.provided.PASSWORD_PEPPER
    )
    token_issuer = providers.Singleton(
        JwtTokenIssuer,
        secret_key=settings.provided.SECRET_KEY,
        issuer=settings.provided.JWT_ISSUER,
        audience=settings.provided.JWT_AUDIENCE,
    )
    user_store = providers.Singleton(
        SqlAlchemyUserStore,
        session_factory=session_factory,
        password_service=password_service,
    )

    # Identity module, application use cases
    authentication_use_case = providers.Factory(
        AuthenticateUserUseCase,
        user_store=user_store,
        token_issuer=token_issuer,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_store=user_store,
        token_issuer=token_issuer,
    )
