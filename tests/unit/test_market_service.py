"""
test_market_service.py - Unit tests for quotes, listings and charts
"""
import asyncio
import random
from datetime import datetime, timezone

import pytest

from gmgn_server.core.config import MarketDataSettings
from gmgn_server.modules.market import InvalidTimeFrameError, MarketDataService, TokenMarketData, TokenNotFoundError
from gmgn_server.modules.market.catalog import BASELINES
from gmgn_server.modules.market.service import filter_by_query, generate_candles


class StubProvider:
    def __init__(self, price=None):
        self.price = price
        self.calls = []
        self.closed = False

    async def fetch_market_data(self, token_id, address, chain):
        self.calls.append((token_id, address, chain))
        if self.price is None:
            return None
        return TokenMarketData(
            token_id=token_id,
            price=self.price,
            price_change_24h=0.0,
            price_change_percent_24h=1.5,
            volume_24h=1.0,
            market_cap=1.0,
            liquidity=1.0,
            holders=0,
            updated_at=datetime.now(timezone.utc),
            source="dexscreener",
        )

    async def aclose(self):
        self.closed = True


def test_catalog_has_eight_tokens(market):
    assert [token.id for token in market.list_supported()] == [
        "sol",
        "bonk",
        "wif",
        "jup",
        "ray",
        "orca",
        "popcat",
        "render",
    ]
    assert market.get_token("doge") is None
    with pytest.raises(TokenNotFoundError):
        market.require_token("doge")


def test_simulated_quote_stays_near_baseline(market):
    for token_id, baseline in BASELINES.items():
        quote = market.quote(token_id)
        assert quote.source == "simulated"
        assert abs(quote.price - baseline.price) <= baseline.price * 0.01 + 1e-12
        assert quote.market_cap == baseline.market_cap
    assert market.quote("doge") is None
    assert market.price_of("doge") is None


def test_quotes_are_cached_until_ttl_expires():
    now = [0.0]
    service = MarketDataService(
        settings=MarketDataSettings(cache_ttl_seconds=15),
        rng=random.Random(1),
        clock=lambda: now[0],
    )
    first = service.quote("sol")
    assert service.quote("sol") is first

    now[0] = 16.0
    second = service.quote("sol")
    assert second is not first
    assert service.quote("sol") is second


def test_live_provider_is_used_when_enabled():
    provider = StubProvider(price=123.0)
    service = MarketDataService(settings=MarketDataSettings(live_prices=True), provider=provider)

    market = asyncio.run(service.fetch_market("sol"))

    assert market.price == 123.0
    assert market.source == "dexscreener"
    assert provider.calls == [("sol", "So11111111111111111111111111111111111111112", "solana")]
    assert service.price_of("sol") == 123.0


def test_live_provider_failure_falls_back_to_simulation():
    provider = StubProvider(price=None)
    service = MarketDataService(settings=MarketDataSettings(live_prices=True), provider=provider)

    market = asyncio.run(service.fetch_market("jup"))

    assert market.source == "simulated"
    assert len(provider.calls) == 1


def test_provider_is_ignored_when_live_prices_disabled():
    provider = StubProvider(price=1.0)
    service = MarketDataService(settings=MarketDataSettings(live_prices=False), provider=provider)

    asyncio.run(service.fetch_market("jup"))
    asyncio.run(service.aclose())

    assert provider.calls == []
    assert provider.closed is True


def test_unknown_token_has_no_market(market):
    assert asyncio.run(market.fetch_market("doge")) is None
    assert asyncio.run(market.get_token_with_market("doge")) is None


def test_list_tokens_search_and_sort(market):
    found = asyncio.run(market.list_tokens(search="BON"))
    assert [item.id for item in found] == ["bonk"]

    by_cap = asyncio.run(market.list_tokens(sort_by="marketCap", order="asc"))
    caps = [item.market.market_cap for item in by_cap]
    assert caps == sorted(caps)
    assert by_cap[-1].id == "sol"


def test_filter_by_query_matches_name_and_address(market):
    tokens = asyncio.run(market.list_with_market())
    assert [item.id for item in filter_by_query(tokens, "dogwif")] == ["wif"]
    assert [item.id for item in filter_by_query(tokens, "JUPyiw")] == ["jup"]
    assert len(filter_by_query(tokens, "  ")) == 8


def test_trending_gainers_and_losers(market):
    trending = asyncio.run(market.trending())
    changes = [item.market.price_change_percent_24h for item in trending]
    assert len(trending) == 5
    assert changes == sorted(changes, reverse=True)
    assert trending[0].id == "popcat"

    gainers = asyncio.run(market.gainers())
    assert gainers and all(item.market.price_change_percent_24h > 0 for item in gainers)

    losers = asyncio.run(market.losers())
    assert {item.id for item in losers} == {"wif", "orca"}
    assert losers[0].market.price_change_percent_24h <= losers[-1].market.price_change_percent_24h


def test_chart_clamps_count_and_spaces_candles(market):
    candles = market.chart("jup", "5m", 5)
    assert len(candles) == 10
    assert all(later.time - earlier.time == 300 for earlier, later in zip(candles, candles[1:]))
    assert all(candle.high >= max(candle.open, candle.close) for candle in candles)
    assert all(candle.low <= min(candle.open, candle.close) for candle in candles)
    assert all(isinstance(candle.volume, int) for candle in candles)

    assert len(market.chart("jup", "1d", 10_000)) == 500
    assert len(market.chart("jup")) == 100


def test_chart_rejects_unknown_inputs(market):
    with pytest.raises(TokenNotFoundError):
        market.chart("doge", "1h")
    with pytest.raises(InvalidTimeFrameError):
        market.chart("sol", "2h")


def test_generated_candles_follow_a_continuous_walk():
    candles = generate_candles(random.Random(3), 10.0, "1h", 20, volatility=0.02)
    assert all(later.open == earlier.close for earlier, later in zip(candles, candles[1:]))
    assert 9.0 * 0.5 < candles[0].open < 11.0 * 1.5
