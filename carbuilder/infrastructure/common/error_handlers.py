"""
Global exception handlers.

Domain and service errors become JSON responses here so routers only
translate requests and results. Internal details never leave the service.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from carbuilder.domain.common.exceptions import NotFoundError, ValidationError
from carbuilder.domain.identity.exceptions import AuthenticationError, EmailAlreadyExistsError
from carbuilder.exceptions import CarBuilderError

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(NotFoundError, not_found_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(AuthenticationError, authentication_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(EmailAlreadyExistsError, email_exists_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(CarBuilderError, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": exc.errors},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies get the same shape as rule violations."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        # Skip the "body"/"path" location prefix
        loc = [str(part) for part in error["loc"][1:]] or [str(error["loc"][0])]
        errors.setdefault(".".join(loc), []).append(error["msg"])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": f"{exc.entity_type} not found"},
    )


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"message": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def email_exists_error_handler(
    request: Request, exc: EmailAlreadyExistsError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": "Email is already registered"},
    )


async def service_error_handler(request: Request, exc: CarBuilderError) -> JSONResponse:
    logger.error("service_error", path=request.url.path, error=exc.message)
    message = exc.message
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = GENERIC_ERROR_MESSAGE
    return JSONResponse(status_code=exc.status_code, content={"message": message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )
