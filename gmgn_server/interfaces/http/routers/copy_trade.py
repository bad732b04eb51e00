"""Copy-trade discovery and follow settings."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from gmgn_server.core.errors import ApiError
from gmgn_server.core.pagination import PaginationParams, get_pagination
from gmgn_server.interfaces.http.deps import get_copy_trade_service, get_current_user_id
from gmgn_server.modules.copy_trade import CopyTradeService, TraderNotFoundError
from gmgn_server.schemas import (
    ApiResponse,
    CopySettingsOut,
    CopySettingsUpdate,
    FollowOut,
    Page,
    PositionReportOut,
    TraderOut,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/traders", response_model=ApiResponse[Page[TraderOut]], summary="Browse traders")
async def list_traders(
    search: str = Query(default=""),
    tag: Optional[str] = Query(default=None),
    verified: Optional[str] = Query(default=None),
    sort_by: str = Query(default="pnlPercent7d", alias="sortBy"),
    order: str = Query(default="desc"),
    pagination: PaginationParams = Depends(get_pagination),
    copy_trade: CopyTradeService = Depends(get_copy_trade_service),
):
    logger.info("[CopyTrade] Get traders")
    traders = copy_trade.list_traders(
        search=search,
        tag=tag,
        verified=verified == "true",
        sort_by=sort_by,
        order=order,
    )
    return ApiResponse[Page[TraderOut]](data=Page[TraderOut].build(traders, pagination))


@router.get("/traders/{trader_id}", response_model=ApiResponse[TraderOut], summary="Trader detail")
async def get_trader(trader_id: str, copy_trade: CopyTradeService = Depends(get_copy_trade_service)):
    logger.info("[CopyTrade] Get trader: %s", trader_id)
    trader = copy_trade.get_trader(trader_id)
    if trader is None:
        raise ApiError.not_found(str(TraderNotFoundError(trader_id)))
    return ApiResponse[TraderOut](data=TraderOut.model_validate(trader))


@router.get("/top", response_model=ApiResponse[list[TraderOut]], summary="Best traders by 7d PnL")
async def top_traders(copy_trade: CopyTradeService = Depends(get_copy_trade_service)):
    logger.info("[CopyTrade] Get top traders")
    return ApiResponse[list[TraderOut]](data=[TraderOut.model_validate(item) for item in copy_trade.top_traders()])


@router.get("/positions", response_model=ApiResponse[PositionReportOut], summary="Copied positions")
async def get_positions(
    position_status: Optional[str] = Query(default=None, alias="status"),
    user_id: str = Depends(get_current_user_id),
    copy_trade: CopyTradeService = Depends(get_copy_trade_service),
):
    logger.info("[CopyTrade] Get positions: %s", user_id)
    report = copy_trade.positions(user_id, position_status)
    return ApiResponse[PositionReportOut](data=PositionReportOut.model_validate(report))


@router.post(
    "/follow/{trader_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[FollowOut],
    summary="Start copying a trader",
)
async def follow_trader(
    trader_id: str,
    user_id: str = Depends(get_current_user_id),
    copy_trade: CopyTradeService = Depends(get_copy_trade_service),
):
    logger.info("[CopyTrade] Follow trader: %s", trader_id)
    try:
        settings = copy_trade.follow(user_id, trader_id)
    except TraderNotFoundError as exc:
        raise ApiError.not_found(str(exc)) from exc
    trader = copy_trade.require_trader(trader_id)
    data = FollowOut(
        **CopySettingsOut.model_validate(settings).model_dump(),
        trader=TraderOut.model_validate(trader),
    )
    return ApiResponse[FollowOut](data=data, message="Successfully started following trader")


@router.delete("/follow/{trader_id}", response_model=ApiResponse[None], summary="Stop copying a trader")
async def unfollow_trader(
    trader_id: str,
    user_id: str = Depends(get_current_user_id),
    copy_trade: CopyTradeService = Depends(get_copy_trade_service),
):
    logger.info("[CopyTrade] Unfollow trader: %s", trader_id)
    try:
        copy_trade.unfollow(user_id, trader_id)
    except TraderNotFoundError as exc:
        raise ApiError.not_found(str(exc)) from exc
    return ApiResponse[None](message="Successfully stopped following trader")


@router.put("/settings/{trader_id}", response_model=ApiResponse[CopySettingsOut], summary="Update copy settings")
async def update_settings(
    trader_id: str,
    payload: CopySettingsUpdate,
    user_id: str = Depends(get_current_user_id),
    copy_trade: CopyTradeService = Depends(get_copy_trade_service),
):
    updates = payload.model_dump(exclude_none=True)
    logger.info("[CopyTrade] Update settings: %s %s", trader_id, updates)
    try:
        settings = copy_trade.update_settings(user_id, trader_id, updates)
    except TraderNotFoundError as exc:
        raise ApiError.not_found(str(exc)) from exc
    return ApiResponse[CopySettingsOut](
        data=CopySettingsOut.model_validate(settings),
        message="Settings updated successfully",
    )


@router.get("/following", response_model=ApiResponse[list[CopySettingsOut]], summary="Followed traders")
async def list_following(
    user_id: str = Depends(get_current_user_id),
    copy_trade: CopyTradeService = Depends(get_copy_trade_service),
):
    logger.info("[CopyTrade] Get following: %s", user_id)
    following = copy_trade.following(user_id)
    return ApiResponse[list[CopySettingsOut]](data=[CopySettingsOut.model_validate(item) for item in following])
