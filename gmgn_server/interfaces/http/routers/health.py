"""Liveness probe."""
import time

from fastapi import APIRouter, Depends, Request

from gmgn_server.core.errors import utc_timestamp
from gmgn_server.interfaces.http.deps import get_wallet_ledger
from gmgn_server.modules.wallets import WalletLedger
from gmgn_server.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(request: Request, ledger: WalletLedger = Depends(get_wallet_ledger)):
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    stats = ledger.stats()
    return HealthResponse(
        timestamp=utc_timestamp(),
        uptime=round(time.monotonic() - started_at, 3),
        wallets=stats.user_count,
        transactions=stats.total_transactions,
    )
