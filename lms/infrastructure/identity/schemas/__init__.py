from .user_schemas import (
    ActivationRequest,
    AuthResponse,
    AvatarUpdateRequest,
    EnrolledCourse,
    LoginRequest,
    PasswordUpdateRequest,
    RefreshTokenRequest,
    RegistrationResponse,
    SocialAuthRequest,
    UserEnvelope,
    UserListResponse,
    UserRegisterRequest,
    UserResponse,
    UserRoleUpdateRequest,
    UserSession,
    UserUpdateRequest,
)

__all__ = [
    "ActivationRequest",
    "AuthResponse",
    "AvatarUpdateRequest",
    "EnrolledCourse",
    "LoginRequest",
    "PasswordUpdateRequest",
    "RefreshTokenRequest",
    "RegistrationResponse",
    "SocialAuthRequest",
    "UserEnvelope",
    "UserListResponse",
    "UserRegisterRequest",
    "UserResponse",
    "UserRoleUpdateRequest",
    "UserSession",
    "UserUpdateRequest",
]
