"""Protocols for price lookup and upstream market data providers."""

from __future__ import annotations

from typing import Optional, Protocol

from .models import TokenMarketData


class PriceSource(Protocol):
    """Synchronous, non-suspending price lookup consumed by the wallet ledger."""

    def quote(self, token_id: str) -> Optional[TokenMarketData]:
        ...

    def price_of(self, token_id: str) -> Optional[float]:
        ...


class MarketDataProvider(Protocol):
    """Upstream source of live quotes (DexScreener in production)."""

    async def fetch_market_data(self, token_id: str, address: str, chain: str) -> Optional[TokenMarketData]:
        ...

    async def aclose(self) -> None:
        ...
