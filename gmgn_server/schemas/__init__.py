"""Pydantic schemas used across the project.

Every schema serialises with camelCase keys and accepts either camelCase or
snake_case on input.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from gmgn_server.core.errors import utc_timestamp
from gmgn_server.core.pagination import PaginationParams, paginate

T = TypeVar("T")


def to_camel(name: str) -> str:
    # pydantic's to_camel upper-cases letters after digits ("volume24H").
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# envelopes -------------------------------------------------------------


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    timestamp: str = Field(default_factory=utc_timestamp)


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool


class Page(CamelModel, Generic[T]):
    items: list[T]
    pagination: PaginationMeta

    @classmethod
    def build(cls, items: Sequence[Any], params: PaginationParams):
        total = len(items)
        total_pages = params.total_pages(total)
        return cls(
            items=paginate(items, params),
            pagination=PaginationMeta(
                page=params.page,
                limit=params.limit,
                total=total,
                total_pages=total_pages,
                has_more=params.page < total_pages,
            ),
        )


class HealthResponse(CamelModel):
    status: str = "ok"
    timestamp: str
    uptime: float
    wallets: int
    transactions: int


# market ----------------------------------------------------------------


class MarketDataOut(CamelModel):
    token_id: str
    price: float
    price_change_24h: float
    price_change_percent_24h: float
    volume_24h: float
    market_cap: float
    liquidity: float
    holders: int
    updated_at: datetime
    source: str


class TokenOut(CamelModel):
    id: str
    symbol: str
    name: str
    address: str
    decimals: int
    logo_url: str
    chain: str


class TokenWithMarketOut(TokenOut):
    market: MarketDataOut

    @classmethod
    def from_domain(cls, item: Any) -> "TokenWithMarketOut":
        token = TokenOut.model_validate(item.token)
        return cls(**token.model_dump(), market=MarketDataOut.model_validate(item.market))


class CandleOut(CamelModel):
    time: int
    open: float
    high: float
    low: float
    close: float
    volume: int


# wallet ----------------------------------------------------------------


class WalletBalanceOut(CamelModel):
    token_id: str
    symbol: str
    name: str
    logo_url: str
    balance: float
    balance_usd: float
    price: float
    price_change_24h: float


class WalletSummaryOut(CamelModel):
    total_balance_usd: float
    total_pnl_24h: float
    total_pnl_percent_24h: float
    balances: list[WalletBalanceOut]
    available_usd: float


class TransactionOut(CamelModel):
    id: str
    type: str
    token_id: str
    symbol: str
    amount: float
    amount_usd: float
    fee: float
    tx_hash: str
    status: str
    created_at: datetime


class OrderOut(CamelModel):
    id: str
    user_id: str
    token_id: str
    side: str
    type: str
    status: str
    amount: float
    price: float
    filled_amount: float
    filled_price: float
    fee: float
    created_at: datetime
    updated_at: datetime


# trading ---------------------------------------------------------------


class OrderCreate(CamelModel):
    """Order request body. Field presence and values are checked by the order service."""

    model_config = ConfigDict(allow_inf_nan=False)

    token_id: Optional[str] = None
    side: Optional[str] = None
    type: Optional[str] = None
    amount: Optional[float] = None
    price: Optional[float] = None
    slippage: Optional[float] = None
    user_id: Optional[str] = None


class QuoteOut(CamelModel):
    token_id: str
    side: str
    amount: float
    price: float
    estimated_price: float
    estimated_total: float
    estimated_fee: float
    slippage: float
    expires_at: datetime


# accounts --------------------------------------------------------------


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None


class UserOut(CamelModel):
    id: str
    email: str
    display_name: str
    avatar_url: str
    wallet_address: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class TokensOut(CamelModel):
    access_token: str
    refresh_token: str
    expires_in: int


class AuthSessionOut(CamelModel):
    user: UserOut
    tokens: TokensOut


# copy trade ------------------------------------------------------------


class TraderOut(CamelModel):
    id: str
    address: str
    display_name: str
    avatar_url: str
    bio: str
    followers: int
    pnl_7d: float
    pnl_30d: float
    pnl_percent_7d: float
    pnl_percent_30d: float
    win_rate: float
    total_trades: int
    avg_hold_time: int
    is_verified: bool
    tags: list[str]


class CopyPositionOut(CamelModel):
    id: str
    trader_id: str
    user_id: str
    token_id: str
    entry_price: float
    current_price: float
    amount: float
    pnl: float
    pnl_percent: float
    status: str
    opened_at: datetime
    closed_at: Optional[datetime] = None


class PositionSummaryOut(CamelModel):
    total: int
    open_count: int
    total_pnl: float


class PositionReportOut(CamelModel):
    positions: list[CopyPositionOut]
    summary: PositionSummaryOut


class CopySettingsOut(CamelModel):
    trader_id: str
    is_active: bool
    max_position_size: float
    copy_ratio: float
    stop_loss: float
    take_profit: float
    max_daily_trades: int


class FollowOut(CopySettingsOut):
    trader: TraderOut


class CopySettingsUpdate(CamelModel):
    model_config = ConfigDict(allow_inf_nan=False)

    is_active: Optional[bool] = None
    max_position_size: Optional[float] = Field(default=None, gt=0)
    copy_ratio: Optional[float] = Field(default=None, gt=0, le=1)
    stop_loss: Optional[float] = Field(default=None, ge=0, le=100)
    take_profit: Optional[float] = Field(default=None, ge=0)
    max_daily_trades: Optional[int] = Field(default=None, ge=1)


__all__ = [
    "ApiResponse",
    "AuthSessionOut",
    "CamelModel",
    "CandleOut",
    "CopyPositionOut",
    "CopySettingsOut",
    "CopySettingsUpdate",
    "FollowOut",
    "HealthResponse",
    "LoginRequest",
    "MarketDataOut",
    "OrderCreate",
    "OrderOut",
    "Page",
    "PaginationMeta",
    "PositionReportOut",
    "PositionSummaryOut",
    "QuoteOut",
    "RegisterRequest",
    "TokenOut",
    "TokenWithMarketOut",
    "TokensOut",
    "TraderOut",
    "TransactionOut",
    "UserOut",
    "WalletBalanceOut",
    "WalletSummaryOut",
    "to_camel",
]
