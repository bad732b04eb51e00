"""Wallet domain exports"""

from .models import (
    AssetHolding,
    Order,
    StoreStats,
    Transaction,
    Wallet,
    WalletBalance,
    WalletDefaults,
    WalletSummary,
)
from .repository import WalletStore
from .service import WalletLedger

__all__ = [
    "AssetHolding",
    "Order",
    "StoreStats",
    "Transaction",
    "Wallet",
    "WalletBalance",
    "WalletDefaults",
    "WalletLedger",
    "WalletStore",
    "WalletSummary",
]
