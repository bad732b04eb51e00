"""Wallet ledger: the only path through which paper balances change."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from gmgn_server.modules.market import catalog
from gmgn_server.modules.market.repository import PriceSource

from .models import (
    AssetHolding,
    Order,
    OrderStatus,
    StoreStats,
    Transaction,
    Wallet,
    WalletBalance,
    WalletDefaults,
    WalletSummary,
)
from .repository import WalletStore

logger = logging.getLogger(__name__)

# Holdings left within this distance of zero after a sell are removed.
_DUST = 1e-12


@dataclass(slots=True)
class WalletLedger:
    """Per-user cash balance, token holdings and trade history.

    Invariants kept after every committed mutation:

    * ``usd_balance`` is never negative;
    * every holding has a positive amount (emptied holdings are removed);
    * ``orders`` and ``transactions`` are newest first and hold at most
      ``defaults.history_limit`` entries.

    Every method is synchronous, so a single mutation can never be
    interleaved with another coroutine.
    """

    store: WalletStore
    prices: PriceSource
    defaults: WalletDefaults = field(default_factory=WalletDefaults)

    def get_or_create(self, user_id: str) -> Wallet:
        wallet = self.store.get(user_id)
        if wallet is None:
            wallet = Wallet(user_id=user_id, usd_balance=self.defaults.usd_balance)
            token = catalog.get_token(self.defaults.token_id)
            if token is not None and self.defaults.token_amount > 0:
                wallet.assets[token.id] = AssetHolding(
                    token_id=token.id,
                    symbol=token.symbol,
                    name=token.name,
                    logo_url=token.logo_url,
                    amount=self.defaults.token_amount,
                )
            self.store.save(wallet)
            logger.info("Created new wallet for user: %s", user_id)
        return wallet

    def get_usd_balance(self, user_id: str) -> float:
        return self.get_or_create(user_id).usd_balance

    def get_token_holding(self, user_id: str, token_id: str) -> float:
        holding = self.get_or_create(user_id).assets.get(token_id)
        return holding.amount if holding is not None else 0.0

    def apply_trade(
        self,
        user_id: str,
        side: str,
        token_id: str,
        amount: float,
        total_usd: float,
        fee: float,
    ) -> bool:
        """Debit/credit the wallet for one executed trade.

        Returns ``False`` and leaves the wallet untouched when the trade
        cannot be covered or its inputs are malformed.
        """
        wallet = self.get_or_create(user_id)
        token = catalog.get_token(token_id)
        if token is None:
            logger.error("Token not found: %s", token_id)
            return False
        if not all(math.isfinite(value) for value in (amount, total_usd, fee)):
            logger.warning(
                "Rejected trade with non-finite inputs: amount=%s total=%s fee=%s", amount, total_usd, fee
            )
            return False
        if amount < 0 or total_usd < 0 or fee < 0:
            logger.warning(
                "Rejected trade with negative inputs: amount=%s total=%s fee=%s", amount, total_usd, fee
            )
            return False

        if side == "buy":
            total_cost = total_usd + fee
            if wallet.usd_balance < total_cost:
                logger.info("Insufficient USD balance: %s < %s", wallet.usd_balance, total_cost)
                return False

            wallet.usd_balance -= total_cost
            holding = wallet.assets.get(token_id)
            if holding is not None:
                holding.amount += amount
            elif amount > 0:
                wallet.assets[token_id] = AssetHolding(
                    token_id=token_id,
                    symbol=token.symbol,
                    name=token.name,
                    logo_url=token.logo_url,
                    amount=amount,
                )
            logger.info("BUY: -$%.2f USD, +%s %s (user=%s)", total_cost, amount, token.symbol, user_id)
            return True

        if side == "sell":
            holding = wallet.assets.get(token_id)
            held = holding.amount if holding is not None else 0.0
            if holding is None or held < amount:
                logger.info("Insufficient token balance: %s < %s", held, amount)
                return False

            holding.amount -= amount
            if holding.amount <= _DUST:
                del wallet.assets[token_id]
            wallet.usd_balance += max(total_usd - fee, 0.0)
            logger.info(
                "SELL: +$%.2f USD, -%s %s (user=%s)", total_usd - fee, amount, token.symbol, user_id
            )
            return True

        logger.warning("Unknown trade side: %s", side)
        return False

    def record_transaction(self, user_id: str, transaction: Transaction) -> None:
        wallet = self.get_or_create(user_id)
        wallet.transactions.insert(0, transaction)
        del wallet.transactions[self.defaults.history_limit :]
        logger.info("Added transaction: %s", transaction.id)

    def record_order(self, user_id: str, order: Order) -> None:
        wallet = self.get_or_create(user_id)
        wallet.orders.insert(0, order)
        del wallet.orders[self.defaults.history_limit :]
        logger.info("Added order: %s", order.id)

    def get_order(self, user_id: str, order_id: str) -> Optional[Order]:
        wallet = self.get_or_create(user_id)
        return next((order for order in wallet.orders if order.id == order_id), None)

    def update_order_status(self, user_id: str, order_id: str, status: OrderStatus) -> Optional[Order]:
        wallet = self.get_or_create(user_id)
        for index, order in enumerate(wallet.orders):
            if order.id == order_id:
                updated = replace(order, status=status, updated_at=datetime.now(timezone.utc))
                wallet.orders[index] = updated
                return updated
        return None

    def list_orders(self, user_id: str, status: Optional[str] = None) -> list[Order]:
        orders = list(self.get_or_create(user_id).orders)
        if status:
            orders = [order for order in orders if order.status == status]
        return orders

    def list_transactions(
        self,
        user_id: str,
        type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Transaction]:
        transactions = list(self.get_or_create(user_id).transactions)
        if type:
            transactions = [tx for tx in transactions if tx.type == type]
        if status:
            transactions = [tx for tx in transactions if tx.status == status]
        return transactions

    def list_balances(self, user_id: str, order: str = "desc") -> list[WalletBalance]:
        wallet = self.get_or_create(user_id)
        balances: list[WalletBalance] = []
        for holding in wallet.assets.values():
            market = self.prices.quote(holding.token_id)
            price = market.price if market is not None else 0.0
            balances.append(
                WalletBalance(
                    token_id=holding.token_id,
                    symbol=holding.symbol,
                    name=holding.name,
                    logo_url=holding.logo_url,
                    balance=holding.amount,
                    balance_usd=holding.amount * price,
                    price=price,
                    price_change_24h=market.price_change_percent_24h if market is not None else 0.0,
                )
            )
        return sorted(balances, key=lambda balance: balance.balance_usd, reverse=order != "asc")

    def compute_portfolio_value(self, user_id: str) -> float:
        wallet = self.get_or_create(user_id)
        total = wallet.usd_balance
        for holding in wallet.assets.values():
            price = self.prices.price_of(holding.token_id)
            if price:
                total += holding.amount * price
        return total

    def summarize(self, user_id: str) -> WalletSummary:
        wallet = self.get_or_create(user_id)
        balances = self.list_balances(user_id)
        holdings_usd = sum(balance.balance_usd for balance in balances)
        total_balance_usd = wallet.usd_balance + holdings_usd

        total_pnl_24h = 0.0
        for balance in balances:
            growth = 1 + balance.price_change_24h / 100
            if growth <= 0:
                continue
            total_pnl_24h += balance.balance_usd - balance.balance_usd / growth

        baseline = total_balance_usd - total_pnl_24h
        total_pnl_percent_24h = total_pnl_24h / baseline * 100 if total_balance_usd > 0 and baseline else 0.0

        return WalletSummary(
            total_balance_usd=total_balance_usd,
            total_pnl_24h=total_pnl_24h,
            total_pnl_percent_24h=total_pnl_percent_24h,
            balances=balances,
            available_usd=wallet.usd_balance,
        )

    def reset(self, user_id: str) -> None:
        self.store.delete(user_id)
        logger.info("Reset wallet for user: %s", user_id)

    def stats(self) -> StoreStats:
        wallets = list(self.store.values())
        return StoreStats(
            user_count=len(wallets),
            total_transactions=sum(len(wallet.transactions) for wallet in wallets),
        )


__all__ = ["WalletLedger"]
