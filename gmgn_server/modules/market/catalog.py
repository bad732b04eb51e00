"""Supported tokens and the baseline figures used for simulated quotes."""

from __future__ import annotations

from typing import Optional

from .models import MarketBaseline, Token

SUPPORTED_TOKENS: tuple[Token, ...] = (
    Token(
        id="sol",
        symbol="SOL",
        name="Solana",
        address="So11111111111111111111111111111111111111112",
        decimals=9,
        logo_url=(
            "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/"
            "So11111111111111111111111111111111111111112/logo.png"
        ),
    ),
    Token(
        id="bonk",
        symbol="BONK",
        name="Bonk",
        address="DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
        decimals=5,
        logo_url="https://arweave.net/hQiPZOsRZXGXBJd_82PhVdlM_hACsT_q6wqwf5cSY7I",
    ),
    Token(
        id="wif",
        symbol="WIF",
        name="dogwifhat",
        address="EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm",
        decimals=6,
        logo_url="https://bafkreibk3covs5ltyqxa272uodhculbr6kea6betiez2aotjqqzlvtygt4.ipfs.nftstorage.link",
    ),
    Token(
        id="jup",
        symbol="JUP",
        name="Jupiter",
        address="JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN",
        decimals=6,
        logo_url="https://static.jup.ag/jup/icon.png",
    ),
    Token(
        id="ray",
        symbol="RAY",
        name="Raydium",
        address="4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
        decimals=6,
        logo_url=(
            "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/"
            "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R/logo.png"
        ),
    ),
    Token(
        id="orca",
        symbol="ORCA",
        name="Orca",
        address="orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE",
        decimals=6,
        logo_url=(
            "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/"
            "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE/logo.png"
        ),
    ),
    Token(
        id="popcat",
        symbol="POPCAT",
        name="Popcat",
        address="7GCihgDB8fe6KNjn2MYtkzZcRjQy3t9GHdC8uHYmW2hr",
        decimals=9,
        logo_url="https://bafkreidvkvuzyslw5jh5z242lgzwzhbi2kxxnpkic5wsvyno5ikvpr7reu.ipfs.nftstorage.link",
    ),
    Token(
        id="render",
        symbol="RENDER",
        name="Render Token",
        address="rndrizKT3MK1iimdxRdWabcF7Zg7AR5T4nud4EkHBof",
        decimals=8,
        logo_url=(
            "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/"
            "rndrizKT3MK1iimdxRdWabcF7Zg7AR5T4nud4EkHBof/logo.png"
        ),
    ),
)

BASELINES: dict[str, MarketBaseline] = {
    "sol": MarketBaseline(178.45, 5.23, 2_450_000_000, 82_000_000_000, 450_000_000, 2_500_000),
    "bonk": MarketBaseline(0.00002834, 0.00000156, 180_000_000, 1_800_000_000, 45_000_000, 850_000),
    "wif": MarketBaseline(2.45, -0.12, 320_000_000, 2_400_000_000, 85_000_000, 420_000),
    "jup": MarketBaseline(0.92, 0.04, 95_000_000, 1_250_000_000, 65_000_000, 380_000),
    "ray": MarketBaseline(4.78, 0.23, 42_000_000, 720_000_000, 28_000_000, 145_000),
    "orca": MarketBaseline(3.92, -0.08, 18_000_000, 280_000_000, 22_000_000, 95_000),
    "popcat": MarketBaseline(0.78, 0.15, 125_000_000, 760_000_000, 32_000_000, 185_000),
    "render": MarketBaseline(7.24, 0.42, 85_000_000, 2_800_000_000, 48_000_000, 125_000),
}

_TOKENS_BY_ID = {token.id: token for token in SUPPORTED_TOKENS}


def get_token(token_id: str) -> Optional[Token]:
    return _TOKENS_BY_ID.get(token_id)


def get_baseline(token_id: str) -> Optional[MarketBaseline]:
    return BASELINES.get(token_id)


__all__ = ["BASELINES", "SUPPORTED_TOKENS", "get_baseline", "get_token"]
