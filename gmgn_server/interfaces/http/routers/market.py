"""Token catalog, market listings and charts."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from gmgn_server.core.errors import ApiError
from gmgn_server.core.pagination import PaginationParams, get_pagination
from gmgn_server.interfaces.http.deps import get_market_service
from gmgn_server.modules.market import InvalidTimeFrameError, MarketDataService, TokenNotFoundError
from gmgn_server.modules.market.models import TIME_FRAME_SECONDS
from gmgn_server.modules.market.service import DEFAULT_CANDLES
from gmgn_server.schemas import ApiResponse, CandleOut, Page, TokenWithMarketOut

router = APIRouter()
logger = logging.getLogger(__name__)


def _parse_count(raw: Optional[str]) -> int:
    try:
        return int(float(raw)) or DEFAULT_CANDLES
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_CANDLES


@router.get("/tokens", response_model=ApiResponse[Page[TokenWithMarketOut]], summary="List supported tokens")
async def list_tokens(
    search: str = Query(default=""),
    sort_by: str = Query(default="marketCap", alias="sortBy"),
    order: str = Query(default="desc"),
    pagination: PaginationParams = Depends(get_pagination),
    market: MarketDataService = Depends(get_market_service),
):
    logger.info("[Market] Get tokens")
    tokens = await market.list_tokens(search=search, sort_by=sort_by, order=order)
    items = [TokenWithMarketOut.from_domain(item) for item in tokens]
    return ApiResponse[Page[TokenWithMarketOut]](data=Page[TokenWithMarketOut].build(items, pagination))


@router.get("/tokens/{token_id}", response_model=ApiResponse[TokenWithMarketOut], summary="Token detail")
async def get_token(token_id: str, market: MarketDataService = Depends(get_market_service)):
    logger.info("[Market] Get token: %s", token_id)
    if market.get_token(token_id) is None:
        raise ApiError.not_found(str(TokenNotFoundError(token_id)))
    item = await market.get_token_with_market(token_id)
    if item is None:
        raise ApiError.internal("Failed to get market data")
    return ApiResponse[TokenWithMarketOut](data=TokenWithMarketOut.from_domain(item))


@router.get("/tokens/{token_id}/chart", response_model=ApiResponse[list[CandleOut]], summary="OHLCV candles")
async def get_chart(
    token_id: str,
    time_frame: str = Query(default="1h", alias="timeFrame"),
    count: Optional[str] = Query(default=None),
    market: MarketDataService = Depends(get_market_service),
):
    logger.info("[Market] Get chart: %s %s %s", token_id, time_frame, count)
    try:
        candles = market.chart(token_id, time_frame, _parse_count(count))
    except TokenNotFoundError as exc:
        raise ApiError.not_found(str(exc)) from exc
    except InvalidTimeFrameError as exc:
        raise ApiError.validation("Invalid time frame", {"validValues": list(TIME_FRAME_SECONDS)}) from exc
    return ApiResponse[list[CandleOut]](data=[CandleOut.model_validate(candle) for candle in candles])


@router.get("/trending", response_model=ApiResponse[list[TokenWithMarketOut]], summary="Top movers by 24h change")
async def get_trending(market: MarketDataService = Depends(get_market_service)):
    logger.info("[Market] Get trending")
    tokens = await market.trending()
    return ApiResponse[list[TokenWithMarketOut]](data=[TokenWithMarketOut.from_domain(item) for item in tokens])


@router.get("/gainers", response_model=ApiResponse[list[TokenWithMarketOut]], summary="Tokens up over 24h")
async def get_gainers(market: MarketDataService = Depends(get_market_service)):
    logger.info("[Market] Get gainers")
    tokens = await market.gainers()
    return ApiResponse[list[TokenWithMarketOut]](data=[TokenWithMarketOut.from_domain(item) for item in tokens])


@router.get("/losers", response_model=ApiResponse[list[TokenWithMarketOut]], summary="Tokens down over 24h")
async def get_losers(market: MarketDataService = Depends(get_market_service)):
    logger.info("[Market] Get losers")
    tokens = await market.losers()
    return ApiResponse[list[TokenWithMarketOut]](data=[TokenWithMarketOut.from_domain(item) for item in tokens])
