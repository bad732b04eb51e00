from .exceptions import CopyTradeError, TraderNotFoundError
from .models import CopyPosition, CopyTradeSettings, PositionReport, PositionSummary, Trader
from .repository import CopySettingsRepository
from .service import CopyTradeService

__all__ = [
    "CopyPosition",
    "CopySettingsRepository",
    "CopyTradeError",
    "CopyTradeService",
    "CopyTradeSettings",
    "PositionReport",
    "PositionSummary",
    "Trader",
    "TraderNotFoundError",
]
