"""Domain services for demo authentication."""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone
from typing import Optional

from gmgn_server.core.config import Settings
from gmgn_server.core.crypto import hash_password, verify_password
from gmgn_server.core.security import TokenError, create_access_token, create_refresh_token, decode_token

from .exceptions import AccountValidationError, EmailAlreadyRegisteredError, InvalidCredentialsError
from .models import AuthSession, AuthTokens, RegisterInput, User, avatar_for, display_name_for
from .repository import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def generate_user_id() -> str:
    return f"user-{int(time.time() * 1000)}"


def missing_fields(values: dict[str, Optional[str]]) -> list[str]:
    return [name for name, value in values.items() if value is None or value == ""]


class AccountService:
    """Login, registration and token issuance.

    Authentication is deliberately permissive: seeded demo users log in with
    any password and unknown emails get a session-only user. Only accounts
    registered at runtime have their bcrypt hash checked.
    """

    def __init__(self, repository: UserRepository, settings: Settings) -> None:
        self._repository = repository
        self._settings = settings

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthSession:
        missing = missing_fields({"email": email, "password": password})
        if missing:
            raise AccountValidationError("Missing required fields", {"fields": missing})
        if not is_valid_email(email):
            raise AccountValidationError("Invalid email format")

        user = await self._repository.get_by_email(email)
        if user is None:
            logger.info("User not found, creating mock session for: %s", email)
            user = self._new_user(email)
        elif not verify_password(password, user.password_hash):
            raise InvalidCredentialsError("Invalid credentials")

        logger.info("Login successful: %s", user.email)
        return AuthSession(user=user, tokens=self.issue_tokens(user))

    async def register(self, payload: RegisterInput) -> AuthSession:
        missing = missing_fields(
            {
                "email": payload.email,
                "password": payload.password,
                "confirmPassword": payload.confirm_password,
            }
        )
        if missing:
            raise AccountValidationError("Missing required fields", {"fields": missing})
        if not is_valid_email(payload.email):
            raise AccountValidationError("Invalid email format")
        if len(payload.password) < MIN_PASSWORD_LENGTH:
            raise AccountValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if payload.password != payload.confirm_password:
            raise AccountValidationError("Passwords do not match")

        existing = await self._repository.get_by_email(payload.email)
        if existing is not None:
            raise EmailAlreadyRegisteredError(payload.email)

        user = self._new_user(payload.email)
        user.password_hash = hash_password(payload.password)
        await self._repository.add(user)
        logger.info("Registration successful: %s", user.email)
        return AuthSession(user=user, tokens=self.issue_tokens(user))

    async def current_user(self, token: str) -> User | None:
        """Resolve a bearer token; unknown or invalid tokens yield the demo user."""
        try:
            payload = decode_token(token, self._settings)
        except TokenError:
            payload = None
        if payload is not None:
            user = await self._repository.get_by_id(payload["sub"])
            if user is not None:
                return user
        users = await self._repository.list_users()
        return users[0] if users else None

    def issue_tokens(self, user: User) -> AuthTokens:
        return AuthTokens(
            access_token=create_access_token(user.id, user.email, self._settings),
            refresh_token=create_refresh_token(user.id, user.email, self._settings),
            expires_in=self._settings.security.access_token_expire_minutes * 60,
        )

    @staticmethod
    def _new_user(email: str) -> User:
        now = datetime.now(timezone.utc)
        return User(
            id=generate_user_id(),
            email=email,
            display_name=display_name_for(email),
            avatar_url=avatar_for(email),
            created_at=now,
            updated_at=now,
        )


__all__ = ["AccountService", "is_valid_email"]
