"""
Authentication and identity related use cases.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from chirpy.core.security import hash_password, verify_password
from chirpy.core.tokens import TokenError, bearer_from_header, decode_token, issue_token
from chirpy.domain.models import User
from chirpy.repositories.errors import DuplicateEmailError, UserNotFoundError
from chirpy.repositories.users import UserRepository

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class RegistrationError(AuthError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AccountExistsError(AuthError):
    pass


class InvalidCredentialsError(AuthError):
    pass


class TokenInvalidError(AuthError):
    pass


@dataclass
class LoginSuccess:
    user: User
    token: str


@dataclass
class AuthService:
    """Handles registration, login, token checks and account updates."""

    users: UserRepository

    # -------------------------------------- helpers --------------------------------------
    def _validate_credentials(self, email: str, password: str) -> str:
        email = (email or "").strip()
        if not email or "@" not in email:
            raise RegistrationError("A valid email is required")
        if not password:
            raise RegistrationError("Password is required")
        return email

    # -------------------------------------- use cases --------------------------------------
    def register(self, email: str, password: str) -> User:
        email = self._validate_credentials(email, password)
        try:
            user = self.users.create(email, hash_password(password))
        except DuplicateEmailError as exc:
            raise AccountExistsError(str(exc)) from exc
        logger.info("Registered user %s", user.id)
        return user

    def login(self, email: str, password: str, expires_in_seconds: int | None = None) -> LoginSuccess:
        try:
            user = self.users.get_by_email((email or "").strip())
        except UserNotFoundError as exc:
            raise InvalidCredentialsError("Incorrect email or password") from exc
        if not verify_password(password or "", user.password_hash):
            logger.info("Rejected login for user %s", user.id)
            raise InvalidCredentialsError("Incorrect email or password")
        return LoginSuccess(user=user, token=issue_token(user.id, expires_in_seconds))

    def authenticate(self, authorization: str | None) -> User:
        """Resolve the user behind an ``Authorization`` header."""
        try:
            user_id = decode_token(bearer_from_header(authorization))
        except TokenError as exc:
            raise TokenInvalidError(str(exc)) from exc
        try:
            return self.users.get_by_id(user_id)
        except UserNotFoundError as exc:
            raise TokenInvalidError("Token subject no longer exists") from exc

    def update_account(self, user_id: int, email: str, password: str) -> User:
        email = self._validate_credentials(email, password)
        try:
            return self.users.update(user_id, email=email, password_hash=hash_password(password))
        except DuplicateEmailError as exc:
            raise AccountExistsError(str(exc)) from exc
