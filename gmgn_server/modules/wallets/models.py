"""Domain models for the paper wallet ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

OrderSide = Literal["buy", "sell"]
OrderType = Literal["market", "limit"]
OrderStatus = Literal["pending", "filled", "cancelled"]
TransactionType = Literal["deposit", "withdraw", "swap", "transfer"]
TransactionStatus = Literal["pending", "confirmed", "failed"]

ORDER_SIDES: tuple[str, ...] = ("buy", "sell")
ORDER_TYPES: tuple[str, ...] = ("market", "limit")
TERMINAL_ORDER_STATUSES: frozenset[str] = frozenset({"filled", "cancelled"})


@dataclass(slots=True)
class AssetHolding:
    token_id: str
    symbol: str
    name: str
    logo_url: str
    amount: float


@dataclass(frozen=True, slots=True)
class Order:
    id: str
    user_id: str
    token_id: str
    side: OrderSide
    type: OrderType
    status: OrderStatus
    amount: float
    price: float
    filled_amount: float
    filled_price: float
    fee: float
    created_at: datetime
    updated_at: datetime

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_ORDER_STATUSES


@dataclass(frozen=True, slots=True)
class Transaction:
    id: str
    type: TransactionType
    token_id: str
    symbol: str
    amount: float
    amount_usd: float
    fee: float
    tx_hash: str
    status: TransactionStatus
    created_at: datetime


@dataclass(slots=True)
class Wallet:
    user_id: str
    usd_balance: float
    assets: dict[str, AssetHolding] = field(default_factory=dict)
    transactions: list[Transaction] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class WalletDefaults:
    usd_balance: float = 10_000
    token_id: str = "sol"
    token_amount: float = 5
    history_limit: int = 100


@dataclass(slots=True)
class WalletBalance:
    token_id: str
    symbol: str
    name: str
    logo_url: str
    balance: float
    balance_usd: float
    price: float
    price_change_24h: float


@dataclass(slots=True)
class WalletSummary:
    total_balance_usd: float
    total_pnl_24h: float
    total_pnl_percent_24h: float
    balances: list[WalletBalance]
    available_usd: float


@dataclass(slots=True)
class StoreStats:
    user_count: int
    total_transactions: int
