"""Domain models for order placement."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class OrderRequest:
    """Raw order parameters as received; validated by ``OrderService``."""

    token_id: Optional[str] = None
    side: Optional[str] = None
    type: Optional[str] = None
    amount: Optional[float] = None
    price: Optional[float] = None
    slippage: Optional[float] = None
    user_id: Optional[str] = None


@dataclass(slots=True)
class TradeQuote:
    token_id: str
    side: str
    amount: float
    price: float
    estimated_price: float
    estimated_total: float
    estimated_fee: float
    slippage: float
    expires_at: datetime
