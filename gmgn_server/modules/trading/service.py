"""Order placement on top of the wallet ledger."""

from __future__ import annotations

import asyncio
import logging
import math
import weakref
from datetime import datetime, timedelta, timezone
from typing import Optional

from gmgn_server.core.config import TradingSettings
from gmgn_server.core.ids import generate_id, generate_tx_hash
from gmgn_server.modules.market import MarketDataService, Token, TokenNotFoundError
from gmgn_server.modules.wallets import Order, Transaction, WalletLedger
from gmgn_server.modules.wallets.models import ORDER_SIDES, ORDER_TYPES

from .exceptions import (
    InsufficientBalanceError,
    InvalidOrderError,
    MarketDataUnavailableError,
    OrderNotCancellableError,
    OrderNotFoundError,
    TradeFailedError,
)
from .models import OrderRequest, TradeQuote

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("tokenId", "token_id"),
    ("side", "side"),
    ("type", "type"),
    ("amount", "amount"),
)


def execution_price(market_price: float, side: str, slippage: float) -> float:
    """Market price moved against the taker by ``slippage`` percent."""
    multiplier = 1 + slippage / 100 if side == "buy" else 1 - slippage / 100
    return market_price * multiplier


def transaction_from_order(order: Order, token: Token) -> Transaction:
    total = order.filled_amount * order.filled_price
    signed = 1 if order.side == "buy" else -1
    return Transaction(
        id=generate_id("tx"),
        type="swap",
        token_id=order.token_id,
        symbol=token.symbol,
        amount=signed * order.filled_amount,
        amount_usd=signed * total,
        fee=order.fee,
        tx_hash=generate_tx_hash(),
        status="confirmed",
        created_at=datetime.now(timezone.utc),
    )


class OrderService:
    """Validates, prices and executes orders.

    Placement for a given user runs under that user's lock, from the price
    fetch through the ledger mutation and the history records, so two
    concurrent orders can never both spend the same balance.
    """

    def __init__(
        self,
        ledger: WalletLedger,
        market: MarketDataService,
        settings: TradingSettings,
        default_user_id: str,
    ) -> None:
        self._ledger = ledger
        self._market = market
        self._settings = settings
        self._default_user_id = default_user_id
        # Locks live only while an operation holds or awaits them.
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = weakref.WeakValueDictionary()

    def lock_for(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    async def place_order(self, request: OrderRequest) -> Order:
        missing = [name for name, attr in REQUIRED_FIELDS if getattr(request, attr) in (None, "")]
        if missing:
            raise InvalidOrderError.missing_fields(missing)

        token = self._market.get_token(request.token_id)
        if token is None:
            raise TokenNotFoundError(request.token_id)

        user_id = request.user_id or self._default_user_id
        async with self.lock_for(user_id):
            market = await self._market.fetch_market(token.id)
            if market is None or market.price <= 0:
                raise MarketDataUnavailableError("Failed to get market data")

            self._validate(request)
            amount = float(request.amount)
            slippage = self._settings.default_slippage if request.slippage is None else request.slippage
            is_market = request.type == "market"
            price = execution_price(market.price, request.side, slippage) if is_market else float(request.price)
            fee = amount * price * self._settings.fee_rate if is_market else 0.0

            now = datetime.now(timezone.utc)
            order = Order(
                id=generate_id("order"),
                user_id=user_id,
                token_id=token.id,
                side=request.side,
                type=request.type,
                status="filled" if is_market else "pending",
                amount=amount,
                price=request.price if request.price is not None else market.price,
                filled_amount=amount if is_market else 0.0,
                filled_price=price if is_market else 0.0,
                fee=fee,
                created_at=now,
                updated_at=now,
            )

            if is_market:
                total = amount * price
                if not math.isfinite(total + fee):
                    raise InvalidOrderError("Order size is out of range")
                if not self._ledger.apply_trade(user_id, request.side, token.id, amount, total, fee):
                    raise self._rejection(user_id, request.side, token, amount, total, fee)
                self._ledger.record_transaction(user_id, transaction_from_order(order, token))

            self._ledger.record_order(user_id, order)

        logger.info("Order created: %s %s", order.id, order.status)
        return order

    async def cancel_order(self, user_id: str, order_id: str) -> Order:
        """Mark a pending order cancelled. Balances are never reversed."""
        async with self.lock_for(user_id):
            order = self._ledger.get_order(user_id, order_id)
            if order is None:
                raise OrderNotFoundError(order_id)
            if order.status != "pending":
                raise OrderNotCancellableError(order_id, order.status)
            cancelled = self._ledger.update_order_status(user_id, order_id, "cancelled")
        if cancelled is None:
            raise OrderNotFoundError(order_id)
        logger.info("Order cancelled: %s", order_id)
        return cancelled

    async def get_quote(self, token_id: Optional[str], side: Optional[str], amount: Optional[float]) -> TradeQuote:
        if not token_id or not side or not amount:
            raise InvalidOrderError("Missing required parameters: tokenId, side, amount")
        token = self._market.require_token(token_id)
        if side not in ORDER_SIDES:
            raise InvalidOrderError("Invalid order side", {"validValues": list(ORDER_SIDES)})
        if not math.isfinite(amount) or amount <= 0:
            raise InvalidOrderError("Amount must be greater than zero")

        market = await self._market.fetch_market(token.id)
        if market is None or market.price <= 0:
            raise MarketDataUnavailableError("Failed to get market data")

        slippage = self._settings.default_slippage
        estimated_price = execution_price(market.price, side, slippage)
        estimated_total = amount * estimated_price
        if not math.isfinite(estimated_total):
            raise InvalidOrderError("Order size is out of range")
        return TradeQuote(
            token_id=token.id,
            side=side,
            amount=amount,
            price=market.price,
            estimated_price=estimated_price,
            estimated_total=estimated_total,
            estimated_fee=estimated_total * self._settings.fee_rate,
            slippage=slippage,
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=self._settings.quote_ttl_seconds),
        )

    def _validate(self, request: OrderRequest) -> None:
        if request.side not in ORDER_SIDES:
            raise InvalidOrderError("Invalid order side", {"validValues": list(ORDER_SIDES)})
        if request.type not in ORDER_TYPES:
            raise InvalidOrderError("Invalid order type", {"validValues": list(ORDER_TYPES)})
        if request.type == "limit" and not request.price:
            raise InvalidOrderError("Price is required for limit orders")
        if not math.isfinite(request.amount) or request.amount <= 0:
            raise InvalidOrderError("Amount must be greater than zero")
        if request.price is not None and (not math.isfinite(request.price) or request.price < 0):
            raise InvalidOrderError("Price must be a non-negative number")
        if request.slippage is not None and not 0 <= request.slippage <= self._settings.max_slippage:
            raise InvalidOrderError(
                "Invalid slippage",
                {"min": 0, "max": self._settings.max_slippage},
            )

    def _rejection(
        self,
        user_id: str,
        side: str,
        token: Token,
        amount: float,
        total: float,
        fee: float,
    ) -> Exception:
        if side == "buy":
            available = self._ledger.get_usd_balance(user_id)
            required = total + fee
            if available < required:
                return InsufficientBalanceError("USD", required, available)
        else:
            available = self._ledger.get_token_holding(user_id, token.id)
            if available < amount:
                return InsufficientBalanceError(token.symbol, amount, available)
        return TradeFailedError(f"Trade could not be applied for {token.symbol}")


__all__ = ["OrderService", "execution_price", "transaction_from_order"]
