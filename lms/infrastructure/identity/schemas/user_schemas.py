from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field

from lms.infrastructure.common.schemas.response_wrappers import ApiModel, MediaAsset

UserRole = Literal["admin", "user"]


class EnrolledCourse(ApiModel):
    course_id: int


class UserResponse(ApiModel):
    """Public view of a user, also the payload cached as the session."""

    id: int
    name: str
    email: str
    role: str
    is_verified: bool
    avatar: MediaAsset | None = None
    courses: list[EnrolledCourse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserSession(UserResponse):
    """Session context resolved for an authenticated request."""


class UserRegisterRequest(ApiModel):
    """Schema for user registration."""

    name: str = Field(..., min_length=3, max_length=30, description="Display name")
    email: EmailStr = Field(..., description="Email address for the new account")
    password: str = Field(..., min_length=8, max_length=32, description="Password (8-32 chars)")


class RegistrationResponse(ApiModel):
    success: bool = True
    message: str
    activation_token: str


class ActivationRequest(ApiModel):
    activation_token: str = Field(..., min_length=1)
    activation_code: str = Field(..., pattern=r"^\d{6}$", description="6-digit activation code")


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SocialAuthRequest(ApiModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100)
    avatar: MediaAsset | None = None


class RefreshTokenRequest(ApiModel):
    """Request body for refresh token (for clients without cookies)."""

    refresh_token: str | None = None


class AuthResponse(ApiModel):
    """Token pair plus the session user, returned by login and refresh."""

    success: bool = True
    message: str
    access_token: str
    refresh_token: str
    user: UserResponse


class UserEnvelope(ApiModel):
    success: bool = True
    message: str | None = None
    user: UserResponse


class UserListResponse(ApiModel):
    success: bool = True
    users: list[UserResponse]


class UserUpdateRequest(ApiModel):
    """Schema for updating user profile."""

    name: str | None = Field(None, min_length=3, max_length=30, description="New display name")
    email: EmailStr | None = Field(None, description="New email address")


class PasswordUpdateRequest(ApiModel):
    old_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=8, max_length=32, description="New password")


class AvatarUpdateRequest(ApiModel):
    avatar: str = Field(..., min_length=1, description="Image as a base64 data URL")


class UserRoleUpdateRequest(ApiModel):
    id: int
    role: UserRole
