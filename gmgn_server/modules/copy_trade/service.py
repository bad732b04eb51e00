"""Copy-trade service: trader discovery, follow state and position reports."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Mapping, Optional, Sequence

from . import data
from .exceptions import TraderNotFoundError
from .models import (
    TRADER_SORT_FIELDS,
    CopyPosition,
    CopyTradeSettings,
    PositionReport,
    PositionSummary,
    Trader,
)
from .repository import CopySettingsRepository

logger = logging.getLogger(__name__)

TOP_TRADER_COUNT = 5
DEFAULT_SORT = "pnlPercent7d"

_SETTINGS_FIELDS = frozenset(item.name for item in fields(CopyTradeSettings)) - {"trader_id"}


class CopyTradeService:
    def __init__(
        self,
        repository: CopySettingsRepository,
        traders: Sequence[Trader] = data.MOCK_TRADERS,
        positions: Optional[Sequence[CopyPosition]] = None,
    ) -> None:
        self._repository = repository
        self._traders = tuple(traders)
        self._positions = list(positions) if positions is not None else data.mock_positions()

    # traders -----------------------------------------------------------

    def list_traders(
        self,
        *,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        verified: Optional[bool] = None,
        sort_by: Optional[str] = None,
        order: str = "desc",
    ) -> list[Trader]:
        traders = list(self._traders)
        if search:
            needle = search.lower()
            traders = [
                trader
                for trader in traders
                if needle in trader.display_name.lower() or needle in trader.address.lower()
            ]
        if tag:
            wanted = tag.lower()
            traders = [trader for trader in traders if any(wanted in item.lower() for item in trader.tags)]
        if verified:
            traders = [trader for trader in traders if trader.is_verified]

        key = sort_by if sort_by in TRADER_SORT_FIELDS else DEFAULT_SORT
        traders.sort(key=lambda trader: trader.sort_value(key), reverse=order != "asc")
        return traders

    def get_trader(self, trader_id: str) -> Optional[Trader]:
        return next((trader for trader in self._traders if trader.id == trader_id), None)

    def require_trader(self, trader_id: str) -> Trader:
        trader = self.get_trader(trader_id)
        if trader is None:
            raise TraderNotFoundError(trader_id)
        return trader

    def top_traders(self, limit: int = TOP_TRADER_COUNT) -> list[Trader]:
        return sorted(self._traders, key=lambda trader: trader.pnl_percent_7d, reverse=True)[:limit]

    # positions ---------------------------------------------------------

    def positions(self, user_id: str, status: Optional[str] = None) -> PositionReport:
        positions = [position for position in self._positions if position.user_id == user_id]
        if status:
            positions = [position for position in positions if position.status == status]
        summary = PositionSummary(
            total=len(positions),
            open_count=sum(1 for position in positions if position.status == "open"),
            total_pnl=sum(position.pnl for position in positions),
        )
        return PositionReport(positions=positions, summary=summary)

    # follow state ------------------------------------------------------

    def follow(self, user_id: str, trader_id: str) -> CopyTradeSettings:
        trader = self.require_trader(trader_id)
        settings = self._repository.save(user_id, CopyTradeSettings(trader_id=trader.id, is_active=True))
        logger.info("User %s now follows %s", user_id, trader.display_name)
        return settings

    def unfollow(self, user_id: str, trader_id: str) -> bool:
        trader = self.require_trader(trader_id)
        removed = self._repository.delete(user_id, trader.id)
        logger.info("User %s unfollowed %s (was following: %s)", user_id, trader.display_name, removed)
        return removed

    def update_settings(self, user_id: str, trader_id: str, updates: Mapping[str, Any]) -> CopyTradeSettings:
        """Merge ``updates`` into the stored settings, or the defaults when not following.

        Unknown keys and ``trader_id`` are ignored.
        """
        trader = self.require_trader(trader_id)
        current = self._repository.get(user_id, trader.id) or CopyTradeSettings(trader_id=trader.id)
        changes = {key: value for key, value in updates.items() if key in _SETTINGS_FIELDS and value is not None}
        merged = replace(current, **changes)
        logger.info("Updated copy settings for %s/%s: %s", user_id, trader.id, sorted(changes))
        return self._repository.save(user_id, merged)

    def following(self, user_id: str) -> list[CopyTradeSettings]:
        return list(self._repository.list_for_user(user_id))
