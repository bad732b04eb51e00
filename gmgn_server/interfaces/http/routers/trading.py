"""Order placement, cancellation and quotes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from gmgn_server.core.errors import ApiError, ErrorCode
from gmgn_server.core.pagination import PaginationParams, get_pagination
from gmgn_server.interfaces.http.deps import get_current_user_id, get_order_service, get_wallet_ledger
from gmgn_server.modules.market import TokenNotFoundError
from gmgn_server.modules.trading import (
    InsufficientBalanceError,
    InvalidOrderError,
    MarketDataUnavailableError,
    OrderNotCancellableError,
    OrderNotFoundError,
    OrderRequest,
    OrderService,
    TradeFailedError,
    TradingError,
)
from gmgn_server.modules.wallets import WalletLedger
from gmgn_server.schemas import ApiResponse, OrderCreate, OrderOut, Page, QuoteOut

router = APIRouter()
logger = logging.getLogger(__name__)


def to_api_error(exc: Exception) -> ApiError:
    """Map trading and catalog failures onto the HTTP error taxonomy."""
    if isinstance(exc, InvalidOrderError):
        return ApiError.validation(exc.message, exc.details)
    if isinstance(exc, (TokenNotFoundError, OrderNotFoundError)):
        return ApiError.not_found(str(exc))
    if isinstance(exc, OrderNotCancellableError):
        return ApiError.validation(str(exc), {"status": exc.status})
    if isinstance(exc, InsufficientBalanceError):
        return ApiError(status.HTTP_400_BAD_REQUEST, ErrorCode.INSUFFICIENT_BALANCE, exc.message, exc.details)
    if isinstance(exc, TradeFailedError):
        return ApiError(status.HTTP_400_BAD_REQUEST, ErrorCode.TRADE_FAILED, str(exc))
    if isinstance(exc, MarketDataUnavailableError):
        return ApiError.internal(str(exc))
    return ApiError.internal("Order processing failed")


@router.post(
    "/order",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[OrderOut],
    summary="Place a market or limit order",
)
async def place_order(
    payload: OrderCreate,
    user_id: str = Depends(get_current_user_id),
    orders: OrderService = Depends(get_order_service),
):
    logger.info("[Trading] Place order: %s", payload.model_dump(exclude_none=True, by_alias=True))
    request = OrderRequest(
        token_id=payload.token_id,
        side=payload.side,
        type=payload.type,
        amount=payload.amount,
        price=payload.price,
        slippage=payload.slippage,
        user_id=payload.user_id or user_id,
    )
    try:
        order = await orders.place_order(request)
    except (TradingError, TokenNotFoundError) as exc:
        raise to_api_error(exc) from exc
    return ApiResponse[OrderOut](data=OrderOut.model_validate(order))


@router.delete("/order/{order_id}", response_model=ApiResponse[OrderOut], summary="Cancel a pending order")
async def cancel_order(
    order_id: str,
    user_id: str = Depends(get_current_user_id),
    orders: OrderService = Depends(get_order_service),
):
    logger.info("[Trading] Cancel order: %s", order_id)
    try:
        order = await orders.cancel_order(user_id, order_id)
    except TradingError as exc:
        raise to_api_error(exc) from exc
    return ApiResponse[OrderOut](data=OrderOut.model_validate(order), message="Order cancelled successfully")


@router.get("/quote", response_model=ApiResponse[QuoteOut], summary="Estimate execution for a market order")
async def get_quote(
    token_id: Optional[str] = Query(default=None, alias="tokenId"),
    side: Optional[str] = Query(default=None),
    amount: Optional[float] = Query(default=None),
    orders: OrderService = Depends(get_order_service),
):
    logger.info("[Trading] Get quote: %s %s %s", token_id, side, amount)
    try:
        quote = await orders.get_quote(token_id, side, amount)
    except (TradingError, TokenNotFoundError) as exc:
        raise to_api_error(exc) from exc
    return ApiResponse[QuoteOut](data=QuoteOut.model_validate(quote))


@router.get("/orders", response_model=ApiResponse[Page[OrderOut]], summary="List the user's orders")
async def list_orders(
    order_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_current_user_id),
    ledger: WalletLedger = Depends(get_wallet_ledger),
):
    logger.info("[Trading] Get orders: %s", user_id)
    orders = ledger.list_orders(user_id, order_status)
    return ApiResponse[Page[OrderOut]](data=Page[OrderOut].build(orders, pagination))
