"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gmgn_server.core.config import Settings, get_settings
from gmgn_server.infrastructure.dexscreener import DexScreenerClient
from gmgn_server.infrastructure.memory.account_repository import InMemoryUserRepository
from gmgn_server.infrastructure.memory.copy_settings_repository import InMemoryCopySettingsRepository
from gmgn_server.infrastructure.memory.wallet_store import InMemoryWalletStore
from gmgn_server.modules.accounts import AccountService
from gmgn_server.modules.copy_trade import CopyTradeService
from gmgn_server.modules.market import MarketDataService
from gmgn_server.modules.trading import OrderService
from gmgn_server.modules.wallets import WalletDefaults, WalletLedger


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    wallet_store: InMemoryWalletStore
    market: MarketDataService
    ledger: WalletLedger
    orders: OrderService
    accounts: AccountService
    copy_trade: CopyTradeService

    async def shutdown(self) -> None:
        """Release outbound connections held by the market data provider."""
        await self.market.aclose()


def build_container(settings: Optional[Settings] = None) -> ApplicationContainer:
    settings = settings or get_settings()
    provider = DexScreenerClient(settings.market_data) if settings.market_data.live_prices else None
    market = MarketDataService(settings=settings.market_data, provider=provider)

    store = InMemoryWalletStore()
    ledger = WalletLedger(
        store=store,
        prices=market,
        defaults=WalletDefaults(
            usd_balance=settings.wallet.default_usd_balance,
            token_id=settings.wallet.default_token_id,
            token_amount=settings.wallet.default_token_amount,
            history_limit=settings.wallet.history_limit,
        ),
    )

    return ApplicationContainer(
        settings=settings,
        wallet_store=store,
        market=market,
        ledger=ledger,
        orders=OrderService(ledger, market, settings.trading, settings.default_user_id),
        accounts=AccountService(InMemoryUserRepository(), settings),
        copy_trade=CopyTradeService(InMemoryCopySettingsRepository()),
    )


__all__ = ["ApplicationContainer", "build_container"]
