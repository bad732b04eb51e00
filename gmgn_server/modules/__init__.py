"""Domain modules and their public exports."""

from . import accounts, copy_trade, market, trading, wallets

__all__ = [
    "accounts",
    "copy_trade",
    "market",
    "trading",
    "wallets",
]
