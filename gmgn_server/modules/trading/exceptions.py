"""Trading domain specific exceptions."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class TradingError(Exception):
    """Base class for trading domain errors."""


class InvalidOrderError(TradingError):
    """Raised when an order request is missing fields or carries bad values."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @classmethod
    def missing_fields(cls, fields: Sequence[str]) -> "InvalidOrderError":
        return cls("Missing required fields", {"fields": list(fields)})


class MarketDataUnavailableError(TradingError):
    """Raised when no usable price exists for the requested token."""


class InsufficientBalanceError(TradingError):
    """Raised when the wallet cannot cover a trade. An expected business outcome."""

    def __init__(self, asset: str, required: float, available: float) -> None:
        if asset == "USD":
            message = f"Insufficient USD balance. Required: ${required:.2f}, Available: ${available:.2f}"
        else:
            message = f"Insufficient {asset} balance. Required: {required}, Available: {available}"
        super().__init__(message)
        self.message = message
        self.asset = asset
        self.required = required
        self.available = available

    @property
    def details(self) -> dict[str, Any]:
        return {
            "asset": self.asset,
            "required": self.required,
            "available": self.available,
            "shortfall": max(self.required - self.available, 0.0),
        }


class TradeFailedError(TradingError):
    """Raised when the ledger rejects a trade for a reason other than funds."""


class OrderNotFoundError(TradingError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order '{order_id}' not found")
        self.order_id = order_id


class OrderNotCancellableError(TradingError):
    def __init__(self, order_id: str, status: str) -> None:
        super().__init__(f"Order '{order_id}' cannot be cancelled in status '{status}'")
        self.order_id = order_id
        self.status = status
