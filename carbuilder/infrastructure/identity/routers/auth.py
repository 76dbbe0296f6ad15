from fastapi import APIRouter, Depends
from starlette import status

from carbuilder.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from carbuilder.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from carbuilder.infrastructure.common.di import inject_use_case
from carbuilder.infrastructure.identity.schemas import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(
        inject_use_case(lambda c: c.register_user_use_case)
    ),
) -> AuthResponse:
    """
    Register a new user and log them in.

    Duplicate emails are answered with 409 by the global error handlers.
    """
    result = await use_case.register(
        request.email, request.password, request.first_name, request.last_name
    )
    return AuthResponse.from_result(result)


@router.post("/login")
async def login(
    request: LoginRequest,
    use_case: AuthenticateUserUseCase = Depends(
        inject_use_case(lambda c: c.authentication_use_case)
    ),
) -> AuthResponse:
    result = await use_case.authenticate(request.email, request.password)
    return AuthResponse.from_result(result)
