"""Domain models for copy trading."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

PositionStatus = Literal["open", "closed"]
TRADER_SORT_FIELDS = ("pnlPercent7d", "pnlPercent30d", "followers", "winRate")

_SORT_ATTRIBUTES = {
    "pnlPercent7d": "pnl_percent_7d",
    "pnlPercent30d": "pnl_percent_30d",
    "followers": "followers",
    "winRate": "win_rate",
}


@dataclass(frozen=True, slots=True)
class Trader:
    id: str
    address: str
    display_name: str
    avatar_url: str
    bio: str
    followers: int
    pnl_7d: float
    pnl_30d: float
    pnl_percent_7d: float
    pnl_percent_30d: float
    win_rate: float
    total_trades: int
    avg_hold_time: int
    is_verified: bool
    tags: tuple[str, ...] = ()

    def sort_value(self, sort_by: str) -> float:
        return getattr(self, _SORT_ATTRIBUTES[sort_by])


@dataclass(frozen=True, slots=True)
class CopyPosition:
    id: str
    trader_id: str
    user_id: str
    token_id: str
    entry_price: float
    current_price: float
    amount: float
    pnl: float
    pnl_percent: float
    status: PositionStatus
    opened_at: datetime
    closed_at: Optional[datetime] = None


@dataclass(slots=True)
class CopyTradeSettings:
    trader_id: str
    is_active: bool = False
    max_position_size: float = 100
    copy_ratio: float = 0.1
    stop_loss: float = 10
    take_profit: float = 50
    max_daily_trades: int = 10


@dataclass(slots=True)
class PositionSummary:
    total: int
    open_count: int
    total_pnl: float


@dataclass(slots=True)
class PositionReport:
    positions: list[CopyPosition] = field(default_factory=list)
    summary: PositionSummary = field(default_factory=lambda: PositionSummary(0, 0, 0.0))
