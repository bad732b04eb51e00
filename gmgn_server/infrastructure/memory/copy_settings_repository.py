"""In-memory per-user copy-trade settings."""

from __future__ import annotations

from typing import Sequence

from gmgn_server.modules.copy_trade.models import CopyTradeSettings


class InMemoryCopySettingsRepository:
    def __init__(self) -> None:
        self._settings: dict[str, dict[str, CopyTradeSettings]] = {}

    def get(self, user_id: str, trader_id: str) -> CopyTradeSettings | None:
        return self._settings.get(user_id, {}).get(trader_id)

    def save(self, user_id: str, settings: CopyTradeSettings) -> CopyTradeSettings:
        self._settings.setdefault(user_id, {})[settings.trader_id] = settings
        return settings

    def delete(self, user_id: str, trader_id: str) -> bool:
        return self._settings.get(user_id, {}).pop(trader_id, None) is not None

    def list_for_user(self, user_id: str) -> Sequence[CopyTradeSettings]:
        return list(self._settings.get(user_id, {}).values())
