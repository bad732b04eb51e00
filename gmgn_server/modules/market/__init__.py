"""Market domain exports"""

from .exceptions import InvalidTimeFrameError, MarketError, TokenNotFoundError
from .models import Candle, Token, TokenMarketData, TokenWithMarket
from .repository import MarketDataProvider, PriceSource
from .service import MarketDataService

__all__ = [
    "Candle",
    "InvalidTimeFrameError",
    "MarketDataProvider",
    "MarketDataService",
    "MarketError",
    "PriceSource",
    "Token",
    "TokenMarketData",
    "TokenNotFoundError",
    "TokenWithMarket",
]
