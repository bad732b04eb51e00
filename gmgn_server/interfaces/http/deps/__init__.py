"""Reusable FastAPI dependencies."""

from .services import (
    get_account_service,
    get_app_settings,
    get_container,
    get_copy_trade_service,
    get_market_service,
    get_order_service,
    get_wallet_ledger,
)
from .user import get_current_user_id

__all__ = [
    "get_account_service",
    "get_app_settings",
    "get_container",
    "get_copy_trade_service",
    "get_current_user_id",
    "get_market_service",
    "get_order_service",
    "get_wallet_ledger",
]
