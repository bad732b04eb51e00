"""Read projections over the caller's paper wallet, plus reset."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from gmgn_server.core.pagination import PaginationParams, get_pagination
from gmgn_server.interfaces.http.deps import get_current_user_id, get_market_service, get_wallet_ledger
from gmgn_server.modules.market import MarketDataService
from gmgn_server.modules.wallets import WalletLedger
from gmgn_server.schemas import (
    ApiResponse,
    OrderOut,
    Page,
    TransactionOut,
    WalletBalanceOut,
    WalletSummaryOut,
)

router = APIRouter()
logger = logging.getLogger(__name__)


async def _refresh_prices(user_id: str, ledger: WalletLedger, market: MarketDataService) -> None:
    # Refresh quotes for every holding so the synchronous projections see current prices.
    wallet = ledger.get_or_create(user_id)
    await market.refresh(wallet.assets.keys())


@router.get("/summary", response_model=ApiResponse[WalletSummaryOut], summary="Portfolio value and 24h PnL")
async def get_summary(
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
    market: MarketDataService = Depends(get_market_service),
):
    logger.info("[Wallet] Get summary: %s", user_id)
    await _refresh_prices(user_id, ledger, market)
    summary = ledger.summarize(user_id)
    return ApiResponse[WalletSummaryOut](data=WalletSummaryOut.model_validate(summary))


@router.get("/balances", response_model=ApiResponse[Page[WalletBalanceOut]], summary="Token holdings by USD value")
async def get_balances(
    order: str = Query(default="desc"),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
    market: MarketDataService = Depends(get_market_service),
):
    logger.info("[Wallet] Get balances: %s", user_id)
    await _refresh_prices(user_id, ledger, market)
    balances = ledger.list_balances(user_id, order)
    return ApiResponse[Page[WalletBalanceOut]](data=Page[WalletBalanceOut].build(balances, pagination))


@router.get("/transactions", response_model=ApiResponse[Page[TransactionOut]], summary="Transaction history")
async def get_transactions(
    tx_type: Optional[str] = Query(default=None, alias="type"),
    tx_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
):
    logger.info("[Wallet] Get transactions: %s", user_id)
    transactions = ledger.list_transactions(user_id, tx_type, tx_status)
    return ApiResponse[Page[TransactionOut]](data=Page[TransactionOut].build(transactions, pagination))


@router.get("/orders", response_model=ApiResponse[Page[OrderOut]], summary="Order history")
async def get_orders(
    order_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
):
    logger.info("[Wallet] Get orders: %s", user_id)
    orders = ledger.list_orders(user_id, order_status)
    return ApiResponse[Page[OrderOut]](data=Page[OrderOut].build(orders, pagination))


@router.get("/orders/pending", response_model=ApiResponse[Page[OrderOut]], summary="Open limit orders")
async def get_pending_orders(
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
):
    logger.info("[Wallet] Get pending orders: %s", user_id)
    orders = ledger.list_orders(user_id, "pending")
    return ApiResponse[Page[OrderOut]](data=Page[OrderOut].build(orders, pagination))


@router.post("/reset", response_model=ApiResponse[WalletSummaryOut], summary="Restore the default wallet")
async def reset_wallet(
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
    market: MarketDataService = Depends(get_market_service),
):
    logger.info("[Wallet] Reset: %s", user_id)
    ledger.reset(user_id)
    await _refresh_prices(user_id, ledger, market)
    summary = ledger.summarize(user_id)
    return ApiResponse[WalletSummaryOut](data=WalletSummaryOut.model_validate(summary), message="Wallet reset")
