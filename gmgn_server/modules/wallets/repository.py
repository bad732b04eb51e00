"""Repository protocol for wallet storage."""

from __future__ import annotations

from typing import Iterable, Protocol

from .models import Wallet


class WalletStore(Protocol):
    def get(self, user_id: str) -> Wallet | None:
        ...

    def save(self, wallet: Wallet) -> Wallet:
        ...

    def delete(self, user_id: str) -> bool:
        ...

    def count(self) -> int:
        ...

    def values(self) -> Iterable[Wallet]:
        ...
