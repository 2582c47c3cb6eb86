import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Request, Response
from starlette import status

from lms.application.identity.use_cases.authentication_use_case import (
    AuthenticatedSession,
    AuthenticationUseCase,
)
from lms.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from lms.config import get_settings
from lms.core import container
from lms.domain.common.exceptions import AuthenticationError
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.common.rate_limit import limiter
from lms.infrastructure.common.schemas import SuccessResponse
from lms.infrastructure.identity.dependencies import CurrentUser, OptionalUser, oauth2_scheme
from lms.infrastructure.identity.schemas import (
    ActivationRequest,
    AuthResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegistrationResponse,
    SocialAuthRequest,
    UserRegisterRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])
settings = get_settings()


def set_auth_cookies(response: Response, result: AuthenticatedSession) -> None:
    """Set both tokens as httpOnly cookies."""
    token_service = container.token_service()
    response.set_cookie(
        key="access_token",
        value=result.tokens.access_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=token_service.access_token_max_age,
    )
    response.set_cookie(
        key="refresh_token",
        value=result.tokens.refresh_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=token_service.refresh_token_max_age,
    )


def clear_auth_cookies(response: Response) -> None:
    for key in ("access_token", "refresh_token"):
        response.delete_cookie(
            key=key, httponly=True, secure=settings.COOKIE_SECURE, samesite="lax"
        )


def _auth_response(result: AuthenticatedSession, message: str) -> AuthResponse:
    return AuthResponse(
        message=message,
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
        user=result.session,
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> RegistrationResponse:
    """
    Register a new, unverified user account.

    A 6-digit activation code is emailed to the user. The returned activation
    token must be sent back together with that code to activate the account.
    """
    registration = use_case.register_user(
        register_data.name, register_data.email, register_data.password
    )
    return RegistrationResponse(
        message="Registration successful. Please verify your email.",
        activation_token=registration.activation_token,
    )


@router.post("/activate-user", status_code=status.HTTP_201_CREATED)
async def activate_user(
    activation: ActivationRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> SuccessResponse:
    use_case.activate_user(activation.activation_token, activation.activation_code)
    return SuccessResponse(message="Account activated successfully")


@router.get("/login")
@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> AuthResponse:
    """Log in with email and password; tokens are returned and set as cookies."""
    result = use_case.authenticate_user(credentials.email, credentials.password)
    set_auth_cookies(response, result)
    return _auth_response(result, "Logged in successfully")


@router.post("/social-auth")
async def social_auth(
    response: Response,
    data: SocialAuthRequest,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> AuthResponse:
    """Log in with an identity vouched for by an external provider."""
    avatar = data.avatar.model_dump() if data.avatar else None
    result = use_case.social_auth(data.email, data.name, avatar)
    set_auth_cookies(response, result)
    if result.created:
        response.status_code = status.HTTP_201_CREATED
    return _auth_response(result, "Logged in successfully")


@router.get("/refresh")
@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(
    request: Request,
    response: Response,
    bearer_token: Annotated[str | None, Depends(oauth2_scheme)],
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> AuthResponse:
    """
    Reissue the token pair from a refresh token.

    The refresh token can be provided either:
    - In the httpOnly cookie (for web clients)
    - In the request body
    - As a bearer token
    """
    token = refresh_token
    if not token and body and body.refresh_token:
        token = body.refresh_token
    if not token:
        token = bearer_token

    if not token:
        raise AuthenticationError("Refresh token required")

    result = use_case.refresh_access_token(token)
    set_auth_cookies(response, result)
    return _auth_response(result, "Access token updated successfully")


@router.get("/logout")
async def logout(
    response: Response,
    current_user: CurrentUser,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> SuccessResponse:
    """Clear the auth cookies and drop the cached session."""
    use_case.logout(current_user.id)
    clear_auth_cookies(response)
    return SuccessResponse(message="Logged out successfully")


@router.post("/logout")
async def logout_any(
    response: Response,
    current_user: OptionalUser,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> SuccessResponse:
    """Clear the auth cookies; the cached session is dropped if the caller is known."""
    if current_user is not None:
        use_case.logout(current_user.id)
    clear_auth_cookies(response)
    return SuccessResponse(message="Logged out successfully")
