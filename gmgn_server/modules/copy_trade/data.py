"""Mock traders and copy positions served by the copy-trade endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .models import CopyPosition, Trader

MOCK_TRADERS: tuple[Trader, ...] = (
    Trader(
        id="trader-1",
        address="7xKX...3nPq",
        display_name="SolanaWhale",
        avatar_url="https://api.dicebear.com/7.x/identicon/svg?seed=whale",
        bio="Full-time DeFi trader. Focus on SOL ecosystem gems. NFA.",
        followers=12_450,
        pnl_7d=45_230,
        pnl_30d=182_400,
        pnl_percent_7d=23.5,
        pnl_percent_30d=89.2,
        win_rate=72.4,
        total_trades=1_245,
        avg_hold_time=14_400,
        is_verified=True,
        tags=("Top Trader", "Whale", "DeFi"),
    ),
    Trader(
        id="trader-2",
        address="3mKL...9xRt",
        display_name="MemeKing",
        avatar_url="https://api.dicebear.com/7.x/identicon/svg?seed=meme",
        bio="Early meme coin hunter. DYOR. High risk, high reward.",
        followers=8_920,
        pnl_7d=28_100,
        pnl_30d=-15_600,
        pnl_percent_7d=156.8,
        pnl_percent_30d=-12.4,
        win_rate=45.2,
        total_trades=892,
        avg_hold_time=3_600,
        is_verified=True,
        tags=("Meme Hunter", "High Risk"),
    ),
    Trader(
        id="trader-3",
        address="9pQR...2wXz",
        display_name="DiamondHands",
        avatar_url="https://api.dicebear.com/7.x/identicon/svg?seed=diamond",
        bio="Long-term holder. Blue chip tokens only. Patience pays.",
        followers=5_640,
        pnl_7d=8_450,
        pnl_30d=95_200,
        pnl_percent_7d=4.2,
        pnl_percent_30d=47.6,
        win_rate=68.9,
        total_trades=156,
        avg_hold_time=604_800,
        is_verified=False,
        tags=("Holder", "Blue Chip"),
    ),
    Trader(
        id="trader-4",
        address="5tYU...7mNb",
        display_name="ScalpMaster",
        avatar_url="https://api.dicebear.com/7.x/identicon/svg?seed=scalp",
        bio="Quick in, quick out. Scalping is an art form.",
        followers=15_780,
        pnl_7d=12_890,
        pnl_30d=67_450,
        pnl_percent_7d=8.9,
        pnl_percent_30d=42.3,
        win_rate=61.5,
        total_trades=4_567,
        avg_hold_time=900,
        is_verified=True,
        tags=("Scalper", "High Frequency"),
    ),
    Trader(
        id="trader-5",
        address="2aBC...4dEf",
        display_name="NFTDegen",
        avatar_url="https://api.dicebear.com/7.x/identicon/svg?seed=nft",
        bio="NFT & token trader. Community alpha. LFG!",
        followers=3_210,
        pnl_7d=-5_670,
        pnl_30d=23_400,
        pnl_percent_7d=-8.4,
        pnl_percent_30d=34.7,
        win_rate=52.1,
        total_trades=678,
        avg_hold_time=86_400,
        is_verified=False,
        tags=("NFT", "Community"),
    ),
    Trader(
        id="trader-6",
        address="8gHI...1jKl",
        display_name="AlphaSeeker",
        avatar_url="https://api.dicebear.com/7.x/identicon/svg?seed=alpha",
        bio="On-chain analysis. Finding alpha before the crowd.",
        followers=9_870,
        pnl_7d=34_560,
        pnl_30d=145_800,
        pnl_percent_7d=18.7,
        pnl_percent_30d=78.9,
        win_rate=65.3,
        total_trades=423,
        avg_hold_time=43_200,
        is_verified=True,
        tags=("Alpha", "On-chain", "Analyst"),
    ),
)


def mock_positions(now: datetime | None = None) -> list[CopyPosition]:
    now = now or datetime.now(timezone.utc)
    return [
        CopyPosition(
            id="pos-1",
            trader_id="trader-1",
            user_id="user-1",
            token_id="bonk",
            entry_price=0.00002534,
            current_price=0.00002834,
            amount=50_000_000,
            pnl=150,
            pnl_percent=11.84,
            status="open",
            opened_at=now - timedelta(days=1),
        ),
        CopyPosition(
            id="pos-2",
            trader_id="trader-1",
            user_id="user-1",
            token_id="wif",
            entry_price=2.12,
            current_price=2.45,
            amount=100,
            pnl=33,
            pnl_percent=15.57,
            status="open",
            opened_at=now - timedelta(days=2),
        ),
        CopyPosition(
            id="pos-3",
            trader_id="trader-4",
            user_id="user-1",
            token_id="jup",
            entry_price=0.95,
            current_price=0.92,
            amount=500,
            pnl=-15,
            pnl_percent=-3.16,
            status="open",
            opened_at=now - timedelta(hours=1),
        ),
    ]
