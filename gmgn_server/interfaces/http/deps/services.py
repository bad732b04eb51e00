"""Service providers backed by the application container."""

from fastapi import Depends, Request

from gmgn_server.core.config import Settings
from gmgn_server.core.container import ApplicationContainer
from gmgn_server.modules.accounts import AccountService
from gmgn_server.modules.copy_trade import CopyTradeService
from gmgn_server.modules.market import MarketDataService
from gmgn_server.modules.trading import OrderService
from gmgn_server.modules.wallets import WalletLedger


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_app_settings(container: ApplicationContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_market_service(container: ApplicationContainer = Depends(get_container)) -> MarketDataService:
    return container.market


def get_wallet_ledger(container: ApplicationContainer = Depends(get_container)) -> WalletLedger:
    return container.ledger


def get_order_service(container: ApplicationContainer = Depends(get_container)) -> OrderService:
    return container.orders


def get_account_service(container: ApplicationContainer = Depends(get_container)) -> AccountService:
    return container.accounts


def get_copy_trade_service(container: ApplicationContainer = Depends(get_container)) -> CopyTradeService:
    return container.copy_trade


__all__ = [
    "get_account_service",
    "get_app_settings",
    "get_container",
    "get_copy_trade_service",
    "get_market_service",
    "get_order_service",
    "get_wallet_ledger",
]
