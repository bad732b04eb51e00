"""Repository protocol for per-user copy settings."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import CopyTradeSettings


class CopySettingsRepository(Protocol):
    def get(self, user_id: str, trader_id: str) -> CopyTradeSettings | None:
        ...

    def save(self, user_id: str, settings: CopyTradeSettings) -> CopyTradeSettings:
        ...

    def delete(self, user_id: str, trader_id: str) -> bool:
        ...

    def list_for_user(self, user_id: str) -> Sequence[CopyTradeSettings]:
        ...
