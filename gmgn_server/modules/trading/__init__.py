"""Trading domain exports"""

from .exceptions import (
    InsufficientBalanceError,
    InvalidOrderError,
    MarketDataUnavailableError,
    OrderNotCancellableError,
    OrderNotFoundError,
    TradeFailedError,
    TradingError,
)
from .models import OrderRequest, TradeQuote
from .service import OrderService

__all__ = [
    "InsufficientBalanceError",
    "InvalidOrderError",
    "MarketDataUnavailableError",
    "OrderNotCancellableError",
    "OrderNotFoundError",
    "OrderRequest",
    "OrderService",
    "TradeFailedError",
    "TradeQuote",
    "TradingError",
]
