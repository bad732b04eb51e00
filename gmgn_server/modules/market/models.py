"""Domain models for tokens and market data."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

TimeFrame = Literal["1m", "5m", "15m", "1h", "4h", "1d", "1w"]
SortField = Literal["marketCap", "volume24h", "priceChangePercent24h"]

TIME_FRAME_SECONDS: dict[str, int] = {
    "1m": 60,
    "5m": 300,
    "15m": 900,
    "1h": 3600,
    "4h": 14400,
    "1d": 86400,
    "1w": 604800,
}


@dataclass(frozen=True, slots=True)
class Token:
    id: str
    symbol: str
    name: str
    address: str
    decimals: int
    logo_url: str
    chain: str = "solana"


@dataclass(frozen=True, slots=True)
class MarketBaseline:
    """Reference figures the simulated quotes wander around."""

    price: float
    change_24h: float
    volume_24h: float
    market_cap: float
    liquidity: float
    holders: int


@dataclass(slots=True)
class TokenMarketData:
    token_id: str
    price: float
    price_change_24h: float
    price_change_percent_24h: float
    volume_24h: float
    market_cap: float
    liquidity: float
    holders: int
    updated_at: datetime
    source: str = "simulated"


@dataclass(slots=True)
class TokenWithMarket:
    token: Token
    market: TokenMarketData

    @property
    def id(self) -> str:
        return self.token.id

    def sort_value(self, field: str) -> float:
        if field == "marketCap":
            return self.market.market_cap
        if field == "volume24h":
            return self.market.volume_24h
        return self.market.price_change_percent_24h


@dataclass(frozen=True, slots=True)
class Candle:
    time: int
    open: float
    high: float
    low: float
    close: float
    volume: int
