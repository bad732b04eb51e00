from . import auth, copy_trade, health, market, trading, wallet

__all__ = ["auth", "copy_trade", "health", "market", "trading", "wallet"]
