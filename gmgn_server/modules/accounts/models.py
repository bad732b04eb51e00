"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    id: str
    email: str
    display_name: str
    avatar_url: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    wallet_address: Optional[str] = None
    # None for seeded demo users, which accept any password.
    password_hash: Optional[str] = field(default=None, repr=False)


@dataclass(slots=True)
class AuthTokens:
    access_token: str
    refresh_token: str
    expires_in: int


@dataclass(slots=True)
class AuthSession:
    user: User
    tokens: AuthTokens


@dataclass(slots=True)
class RegisterInput:
    email: str
    password: str
    confirm_password: str


def avatar_for(seed: str) -> str:
    return f"https://api.dicebear.com/7.x/identicon/svg?seed={seed}"


def display_name_for(email: str) -> str:
    return email.split("@", 1)[0] or "User"
