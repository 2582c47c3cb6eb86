from .authentication_use_case import AuthenticatedSession, AuthenticationUseCase
from .register_user_use_case import Registration, RegisterUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .user_admin_use_case import UserAdminUseCase

__all__ = [
    "AuthenticatedSession",
    "AuthenticationUseCase",
    "RegisterUserUseCase",
    "Registration",
    "UpdateUserUseCase",
    "UserAdminUseCase",
]
