"""CarBuilder API, FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carbuilder.config import Settings, configure_logging, get_settings
from carbuilder.core import Container
from carbuilder.database import create_schema, dispose_engine
from carbuilder.infrastructure.cars.routers import cars
from carbuilder.infrastructure.common.error_handlers import register_error_handlers
from carbuilder.infrastructure.identity.routers import auth

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    The token issuer and the dispatcher are constructed here rather than on
    first use, so a missing signing key or an incomplete handler map aborts
    startup with ConfigurationError.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    container = Container(settings=settings)
    container.token_issuer()
    container.dispatcher()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Startup/shutdown lifecycle."""
        if settings.CREATE_SCHEMA_ON_STARTUP:
            await create_schema(container.engine())
        logger.info("application_started", environment=settings.ENVIRONMENT)
        yield
        await dispose_engine(container.engine())
        logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
    app.include_router(cars.router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app
