"""FastAPI dependencies for identity and authentication."""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import Cookie, Depends
from fastapi.security import OAuth2PasswordBearer

from lms.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from lms.config import get_settings
from lms.core import container
from lms.domain.common.exceptions import AuthenticationError
from lms.domain.identity.exceptions import RoleNotAllowedError
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.identity.schemas import UserSession

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{get_settings().API_V1_PREFIX}/login", auto_error=False
)


def resolve_access_token(
    bearer_token: Annotated[str | None, Depends(oauth2_scheme)],
    access_token: Annotated[str | None, Cookie()] = None,
) -> str | None:
    """Access token from the Authorization header, falling back to the cookie."""
    return bearer_token or access_token


async def get_current_user(
    token: Annotated[str | None, Depends(resolve_access_token)],
    use_case: Annotated[
        AuthenticationUseCase, Depends(inject_use_case(container.authentication_use_case))
    ],
) -> UserSession:
    """
    Get the session of the authenticated caller.

    Args:
        token: JWT access token from the Authorization header or cookie
        use_case: Authentication use case bound to this request

    Returns:
        Cached session of the token's subject

    Raises:
        AuthenticationError: If no token was sent
        jwt.InvalidTokenError: If the token is invalid or expired
        SessionNotFoundError: If the subject has no cached session
    """
    if not token:
        raise AuthenticationError

    user_id = container.token_service().decode_access_token(token)
    return use_case.get_session(user_id)


async def get_optional_user(
    token: Annotated[str | None, Depends(resolve_access_token)],
    use_case: Annotated[
        AuthenticationUseCase, Depends(inject_use_case(container.authentication_use_case))
    ],
) -> UserSession | None:
    """Like get_current_user, but anonymous callers resolve to None."""
    if not token:
        return None

    try:
        user_id = container.token_service().decode_access_token(token)
        return use_case.get_session(user_id)
    except (jwt.InvalidTokenError, AuthenticationError):
        return None


def require_roles(*roles: str) -> Callable[[UserSession], UserSession]:
    """
    Build a dependency that admits only callers with one of `roles`.

    Usage:
        @router.get("/endpoint")
        async def my_endpoint(user: Annotated[UserSession, Depends(require_roles("admin"))]):
            ...
    """

    def dependency(
        current_user: Annotated[UserSession, Depends(get_current_user)],
    ) -> UserSession:
        if current_user.role not in roles:
            raise RoleNotAllowedError(current_user.role)
        return current_user

    return dependency


CurrentUser = Annotated[UserSession, Depends(get_current_user)]
OptionalUser = Annotated[UserSession | None, Depends(get_optional_user)]
AdminUser = Annotated[UserSession, Depends(require_roles("admin"))]
