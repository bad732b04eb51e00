"""Market data service: catalog lookups, quotes, listings and charts."""

from __future__ import annotations

import asyncio
import logging
import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Sequence

from gmgn_server.core.config import MarketDataSettings

from . import catalog
from .exceptions import InvalidTimeFrameError, TokenNotFoundError
from .models import TIME_FRAME_SECONDS, Candle, Token, TokenMarketData, TokenWithMarket
from .repository import MarketDataProvider

logger = logging.getLogger(__name__)

SORT_FIELDS = ("marketCap", "volume24h", "priceChangePercent24h")
MIN_CANDLES = 10
MAX_CANDLES = 500
DEFAULT_CANDLES = 100


@dataclass(slots=True)
class MarketDataService:
    """Serves token quotes from the upstream provider or a local simulation.

    ``quote``/``price_of`` never suspend, so the wallet ledger can use this
    object as its price source. ``fetch_market`` is the only path that may
    reach the network; whatever it returns is cached for ``cache_ttl_seconds``
    and becomes what ``quote`` serves.
    """

    settings: MarketDataSettings
    provider: Optional[MarketDataProvider] = None
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], float] = time.monotonic
    _cache: dict[str, tuple[float, TokenMarketData]] = field(default_factory=dict, init=False, repr=False)

    # catalog -----------------------------------------------------------

    def list_supported(self) -> Sequence[Token]:
        return catalog.SUPPORTED_TOKENS

    def get_token(self, token_id: str) -> Optional[Token]:
        return catalog.get_token(token_id)

    def require_token(self, token_id: str) -> Token:
        token = catalog.get_token(token_id)
        if token is None:
            raise TokenNotFoundError(token_id)
        return token

    # quotes ------------------------------------------------------------

    def quote(self, token_id: str) -> Optional[TokenMarketData]:
        cached = self._cached(token_id)
        if cached is not None:
            return cached
        market = self._simulate(token_id)
        if market is not None:
            self._store(market)
        return market

    def price_of(self, token_id: str) -> Optional[float]:
        market = self.quote(token_id)
        return market.price if market is not None else None

    async def fetch_market(self, token_id: str) -> Optional[TokenMarketData]:
        token = catalog.get_token(token_id)
        if token is None:
            return None
        cached = self._cached(token_id)
        if cached is not None:
            return cached

        market: Optional[TokenMarketData] = None
        if self.settings.live_prices and self.provider is not None:
            market = await self.provider.fetch_market_data(token.id, token.address, token.chain)
            if market is None:
                logger.warning("No live market data for %s, using simulated quote", token.symbol)
        if market is None:
            market = self._simulate(token_id)
        if market is not None:
            self._store(market)
        return market

    async def refresh(self, token_ids: Iterable[str]) -> None:
        """Warm the cache for ``token_ids`` before a synchronous projection."""
        await asyncio.gather(*(self.fetch_market(token_id) for token_id in set(token_ids)))

    # listings ----------------------------------------------------------

    async def get_token_with_market(self, token_id: str) -> Optional[TokenWithMarket]:
        token = catalog.get_token(token_id)
        if token is None:
            return None
        market = await self.fetch_market(token_id)
        if market is None:
            return None
        return TokenWithMarket(token=token, market=market)

    async def list_with_market(self) -> list[TokenWithMarket]:
        markets = await asyncio.gather(*(self.fetch_market(token.id) for token in catalog.SUPPORTED_TOKENS))
        tokens = [
            TokenWithMarket(token=token, market=market)
            for token, market in zip(catalog.SUPPORTED_TOKENS, markets)
            if market is not None
        ]
        logger.info("Fetched market data for %d tokens", len(tokens))
        return tokens

    async def list_tokens(
        self,
        *,
        search: str = "",
        sort_by: str = "marketCap",
        order: str = "desc",
    ) -> list[TokenWithMarket]:
        tokens = await self.list_with_market()
        if search:
            tokens = filter_by_query(tokens, search)
        if sort_by in SORT_FIELDS:
            tokens = sort_tokens(tokens, sort_by, order)
        return tokens

    async def trending(self, limit: int = 5) -> list[TokenWithMarket]:
        tokens = await self.list_with_market()
        return sort_tokens(tokens, "priceChangePercent24h", "desc")[:limit]

    async def gainers(self, limit: int = 10) -> list[TokenWithMarket]:
        tokens = sort_tokens(await self.list_with_market(), "priceChangePercent24h", "desc")
        return [item for item in tokens if item.market.price_change_percent_24h > 0][:limit]

    async def losers(self, limit: int = 10) -> list[TokenWithMarket]:
        tokens = sort_tokens(await self.list_with_market(), "priceChangePercent24h", "asc")
        return [item for item in tokens if item.market.price_change_percent_24h < 0][:limit]

    # charts ------------------------------------------------------------

    def chart(self, token_id: str, time_frame: str = "1h", count: int = DEFAULT_CANDLES) -> list[Candle]:
        self.require_token(token_id)
        if time_frame not in TIME_FRAME_SECONDS:
            raise InvalidTimeFrameError(time_frame)
        count = min(MAX_CANDLES, max(MIN_CANDLES, count))
        baseline = catalog.get_baseline(token_id)
        base_price = baseline.price if baseline is not None else 1.0
        volatility = 0.015 if token_id == "sol" else 0.03
        return generate_candles(self.rng, base_price, time_frame, count, volatility)

    # internals ---------------------------------------------------------

    def _cached(self, token_id: str) -> Optional[TokenMarketData]:
        entry = self._cache.get(token_id)
        if entry is None:
            return None
        stored_at, market = entry
        if self.clock() - stored_at > self.settings.cache_ttl_seconds:
            return None
        return market

    def _store(self, market: TokenMarketData) -> None:
        self._cache[market.token_id] = (self.clock(), market)

    def _simulate(self, token_id: str) -> Optional[TokenMarketData]:
        baseline = catalog.get_baseline(token_id)
        if baseline is None:
            return None
        variance = self.settings.price_variance
        price = baseline.price * (1 + (self.rng.random() - 0.5) * variance)
        base_percent = baseline.change_24h / (baseline.price - baseline.change_24h) * 100
        change_percent = base_percent + (self.rng.random() - 0.5) * 2
        return TokenMarketData(
            token_id=token_id,
            price=price,
            price_change_24h=price * change_percent / (100 + change_percent),
            price_change_percent_24h=change_percent,
            volume_24h=baseline.volume_24h * (1 + (self.rng.random() - 0.5) * 0.1),
            market_cap=baseline.market_cap,
            liquidity=baseline.liquidity,
            holders=baseline.holders,
            updated_at=datetime.now(timezone.utc),
        )

    async def aclose(self) -> None:
        if self.provider is not None:
            await self.provider.aclose()


def filter_by_query(tokens: Sequence[TokenWithMarket], query: str) -> list[TokenWithMarket]:
    normalized = query.lower().strip()
    if not normalized:
        return list(tokens)
    return [
        item
        for item in tokens
        if normalized in item.token.symbol.lower()
        or normalized in item.token.name.lower()
        or normalized in item.token.address.lower()
    ]


def sort_tokens(tokens: Sequence[TokenWithMarket], sort_by: str, order: str = "desc") -> list[TokenWithMarket]:
    return sorted(tokens, key=lambda item: item.sort_value(sort_by), reverse=order != "asc")


def generate_candles(
    rng: random.Random,
    base_price: float,
    time_frame: str,
    count: int,
    volatility: float = 0.02,
) -> list[Candle]:
    """Random-walk OHLCV series ending at the current interval."""
    interval = TIME_FRAME_SECONDS[time_frame]
    start_time = int(time.time()) - count * interval
    current = base_price * (0.9 + rng.random() * 0.2)
    candles: list[Candle] = []

    for index in range(count):
        open_ = current
        close = open_ * (1 + (rng.random() - 0.5) * volatility)
        high = max(open_, close) * (1 + rng.random() * volatility * 0.5)
        low = min(open_, close) * (1 - rng.random() * volatility * 0.5)
        candles.append(
            Candle(
                time=start_time + index * interval,
                open=round(open_, 8),
                high=round(high, 8),
                low=round(low, 8),
                close=round(close, 8),
                volume=int(1_000_000 * (0.5 + rng.random())),
            )
        )
        current = close

    return candles


__all__ = [
    "MarketDataService",
    "filter_by_query",
    "generate_candles",
    "sort_tokens",
]
