"""In-process wallet storage; contents vanish on restart."""

from __future__ import annotations

from typing import Iterable

from gmgn_server.modules.wallets.models import Wallet


class InMemoryWalletStore:
    def __init__(self) -> None:
        self._wallets: dict[str, Wallet] = {}

    def get(self, user_id: str) -> Wallet | None:
        return self._wallets.get(user_id)

    def save(self, wallet: Wallet) -> Wallet:
        self._wallets[wallet.user_id] = wallet
        return wallet

    def delete(self, user_id: str) -> bool:
        return self._wallets.pop(user_id, None) is not None

    def count(self) -> int:
        return len(self._wallets)

    def values(self) -> Iterable[Wallet]:
        return list(self._wallets.values())
