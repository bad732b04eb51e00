"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import User


class UserRepository(Protocol):
    """Abstract repository interface for user persistence."""

    async def get_by_id(self, user_id: str) -> User | None:
        ...

    async def get_by_email(self, email: str) -> User | None:
        ...

    async def list_users(self) -> Sequence[User]:
        ...

    async def add(self, user: User) -> User:
        ...
