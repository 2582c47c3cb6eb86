"""Use case for user registration and account activation."""

import secrets
from dataclasses import dataclass

import structlog

from lms.application.common.protocols.mail_service import MailServiceProtocol
from lms.application.identity.protocols.password_service import PasswordServiceProtocol
from lms.application.identity.protocols.token_service import TokenServiceProtocol
from lms.application.identity.protocols.user_repository import UserRepositoryProtocol
from lms.config import get_settings
from lms.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidActivationCodeError,
    RegistrationDisabledError,
    UserAlreadyActivatedError,
    UserNotFoundError,
)
from lms.feature_flags import is_user_registrations_enabled
from lms.models import User

logger = structlog.get_logger(__name__)


def generate_activation_code() -> str:
    """Random 6-digit code, never starting with zero."""
    return str(secrets.randbelow(900000) + 100000)


@dataclass(frozen=True)
class Registration:
    user: User
    activation_token: str


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        mail_service: MailServiceProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service
        self.mail_service = mail_service

    def register_user(self, name: str, email: str, password: str) -> Registration:
        """
        Register a new, unverified user account.

        The activation code is emailed and also embedded in the returned
        signed token; the client sends both back to activate the account.

        Args:
            name: Display name
            email: User's email address
            password: User's plain text password (will be hashed)

        Returns:
            The created user and its activation token

        Raises:
            RegistrationDisabledError: If registration is disabled via feature flag
            EmailAlreadyExistsError: If email is already registered
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        if self.user_repository.find_by_email(email):
            raise EmailAlreadyExistsError(email)

        user = User(
            name=name,
            email=email,
            hashed_password=self.password_service.hash_password(password),
            role="user",
            is_verified=False,
        )
        user = self.user_repository.save(user)

        activation_code = generate_activation_code()
        activation_token = self.token_service.create_activation_token(user.id, activation_code)

        self.mail_service.send(
            email=user.email,
            subject="Activate your account",
            template="activation-mail.html",
            data={
                "user": {"name": user.name},
                "activation_code": activation_code,
                "expires_in_minutes": get_settings().ACTIVATION_TOKEN_EXPIRE_MINUTES,
            },
        )

        logger.info("user_registered", user_id=user.id, email=email)

        return Registration(user=user, activation_token=activation_token)

    def activate_user(self, activation_token: str, activation_code: str) -> User:
        """
        Mark a user verified if the code matches the one signed into the token.

        Raises:
            jwt.InvalidTokenError: If the token is malformed, expired or forged
            InvalidActivationCodeError: If the code does not match
            UserNotFoundError: If the user no longer exists
            UserAlreadyActivatedError: If the account is already verified
        """
        user_id, expected_code = self.token_service.decode_activation_token(activation_token)
        if not secrets.compare_digest(expected_code, activation_code):
            raise InvalidActivationCodeError

        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        if user.is_verified:
            raise UserAlreadyActivatedError

        user.is_verified = True
        user = self.user_repository.save(user)

        logger.info("user_activated", user_id=user.id)

        return user
