"""DexScreener HTTP client used as the live market data provider."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from gmgn_server.core.config import MarketDataSettings
from gmgn_server.modules.market.models import TokenMarketData

logger = logging.getLogger(__name__)


def _as_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _liquidity(pair: dict[str, Any]) -> float:
    return _as_float((pair.get("liquidity") or {}).get("usd"))


def select_best_pair(pairs: list[dict[str, Any]], chain: str) -> Optional[dict[str, Any]]:
    """Return the highest-liquidity pair on ``chain``."""
    chain_pairs = [pair for pair in pairs if str(pair.get("chainId", "")).lower() == chain.lower()]
    if not chain_pairs:
        return None
    return max(chain_pairs, key=_liquidity)


def pair_to_market_data(token_id: str, pair: dict[str, Any]) -> TokenMarketData:
    price = _as_float(pair.get("priceUsd"))
    change_percent = _as_float((pair.get("priceChange") or {}).get("h24"))
    return TokenMarketData(
        token_id=token_id,
        price=price,
        price_change_24h=price * change_percent / 100,
        price_change_percent_24h=change_percent,
        volume_24h=_as_float((pair.get("volume") or {}).get("h24")),
        market_cap=_as_float(pair.get("marketCap")),
        liquidity=_liquidity(pair),
        holders=0,
        updated_at=datetime.now(timezone.utc),
        source="dexscreener",
    )


class DexScreenerClient:
    """One attempt per call with a fixed timeout; failures come back as ``None``."""

    def __init__(self, settings: MarketDataSettings, client: Optional[httpx.AsyncClient] = None) -> None:
        self.settings = settings
        self._client = client or httpx.AsyncClient(
            base_url=settings.dexscreener_base_url,
            timeout=settings.request_timeout,
        )

    async def fetch_pairs(self, address: str) -> list[dict[str, Any]]:
        resp = await self._client.get(f"/dex/tokens/{address}")
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            return []
        return list(payload.get("pairs") or [])

    async def fetch_market_data(self, token_id: str, address: str, chain: str) -> Optional[TokenMarketData]:
        try:
            pairs = await self.fetch_pairs(address)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to fetch DexScreener data for %s: %s", address, exc)
            return None

        if not pairs:
            logger.warning("No DexScreener pairs found for token: %s", address)
            return None
        best = select_best_pair(pairs, chain)
        if best is None:
            logger.warning("No %s pairs found for token: %s", chain, address)
            return None

        market = pair_to_market_data(token_id, best)
        if market.price <= 0:
            logger.warning("DexScreener returned no usable price for %s", address)
            return None
        return market

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["DexScreenerClient", "pair_to_market_data", "select_best_pair"]
