from fastapi import APIRouter

from gmgn_server.interfaces.http.routers import auth, copy_trade, health, market, trading, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router, tags=["health"])
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(market.router, prefix="/market", tags=["market"])
    router.include_router(trading.router, prefix="/trading", tags=["trading"])
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    router.include_router(copy_trade.router, prefix="/copy-trade", tags=["copy-trade"])
    return router


__all__ = [
    "create_api_router",
]
