"""Shared fixtures: isolated apps and ledgers with predictable prices."""
import random
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from gmgn_server.core.config import Settings
from gmgn_server.infrastructure.memory.wallet_store import InMemoryWalletStore
from gmgn_server.main import create_app
from gmgn_server.modules.market import MarketDataService, TokenMarketData
from gmgn_server.modules.trading import OrderService
from gmgn_server.modules.wallets import WalletLedger


class FakePrices:
    """Price source with fixed quotes; tokens without a price quote as ``None``."""

    def __init__(self, prices=None, changes=None):
        self.prices = dict(prices or {})
        self.changes = dict(changes or {})

    def quote(self, token_id):
        price = self.prices.get(token_id)
        if price is None:
            return None
        return TokenMarketData(
            token_id=token_id,
            price=price,
            price_change_24h=0.0,
            price_change_percent_24h=self.changes.get(token_id, 0.0),
            volume_24h=0.0,
            market_cap=0.0,
            liquidity=0.0,
            holders=0,
            updated_at=datetime.now(timezone.utc),
        )

    def price_of(self, token_id):
        return self.prices.get(token_id)


@pytest.fixture
def settings():
    return Settings(environment="test", market_data={"live_prices": False})


@pytest.fixture
def fake_prices():
    return FakePrices({"sol": 100.0, "jup": 1.0})


@pytest.fixture
def ledger(fake_prices):
    return WalletLedger(store=InMemoryWalletStore(), prices=fake_prices)


@pytest.fixture
def market(settings):
    # Frozen clock: cached quotes never expire within a test.
    return MarketDataService(settings=settings.market_data, rng=random.Random(7), clock=lambda: 0.0)


@pytest.fixture
def priced_ledger(market):
    return WalletLedger(store=InMemoryWalletStore(), prices=market)


@pytest.fixture
def order_service(priced_ledger, market, settings):
    return OrderService(priced_ledger, market, settings.trading, settings.default_user_id)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
