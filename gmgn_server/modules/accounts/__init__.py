"""Account domain exports"""

from .exceptions import (
    AccountError,
    AccountValidationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from .models import AuthSession, AuthTokens, RegisterInput, User
from .repository import UserRepository
from .service import AccountService

__all__ = [
    "AccountError",
    "AccountService",
    "AccountValidationError",
    "AuthSession",
    "AuthTokens",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "RegisterInput",
    "User",
    "UserRepository",
]
