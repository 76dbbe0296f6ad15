from .authenticate_user_use_case import AuthenticateUserUseCase, AuthenticationResult
from .register_user_use_case import RegisterUserUseCase

__all__ = ["AuthenticateUserUseCase", "AuthenticationResult", "RegisterUserUseCase"]
