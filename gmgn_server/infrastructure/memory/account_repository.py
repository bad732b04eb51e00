"""In-memory user repository seeded with the demo accounts."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Sequence

from gmgn_server.modules.accounts.exceptions import EmailAlreadyRegisteredError
from gmgn_server.modules.accounts.models import User, avatar_for


def demo_users() -> list[User]:
    return [
        User(
            id="user-1",
            email="demo@gmgn.ai",
            wallet_address="7xKXaB...3nPq",
            display_name="DemoTrader",
            avatar_url=avatar_for("demo"),
            created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        ),
        User(
            id="user-2",
            email="alice@example.com",
            wallet_address="3mKL9x...RtYu",
            display_name="AliceTrader",
            avatar_url=avatar_for("alice"),
            created_at=datetime(2024, 2, 20, 14, 45, tzinfo=timezone.utc),
            updated_at=datetime(2024, 2, 20, 14, 45, tzinfo=timezone.utc),
        ),
    ]


class InMemoryUserRepository:
    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._users: dict[str, User] = {}
        for user in users if users is not None else demo_users():
            self._users[user.id] = user

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        needle = email.lower()
        return next((user for user in self._users.values() if user.email.lower() == needle), None)

    async def list_users(self) -> Sequence[User]:
        return list(self._users.values())

    async def add(self, user: User) -> User:
        if await self.get_by_email(user.email) is not None:
            raise EmailAlreadyRegisteredError(user.email)
        self._users[user.id] = user
        return user
