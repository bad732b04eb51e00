"""
test_copy_trade.py - Trader discovery, positions and follow settings
"""
import pytest

from gmgn_server.infrastructure.memory.copy_settings_repository import InMemoryCopySettingsRepository
from gmgn_server.modules.copy_trade import CopyTradeService, TraderNotFoundError


@pytest.fixture
def copy_trade():
    return CopyTradeService(InMemoryCopySettingsRepository())


def _ids(traders):
    return [trader.id for trader in traders]


def test_default_listing_sorts_by_weekly_pnl(copy_trade):
    traders = copy_trade.list_traders()
    assert _ids(traders) == ["trader-2", "trader-1", "trader-6", "trader-4", "trader-3", "trader-5"]


def test_filters(copy_trade):
    assert _ids(copy_trade.list_traders(verified=True)) == ["trader-2", "trader-1", "trader-6", "trader-4"]
    assert _ids(copy_trade.list_traders(tag="whale")) == ["trader-1"]
    assert _ids(copy_trade.list_traders(tag="HIGH")) == ["trader-2", "trader-4"]
    assert _ids(copy_trade.list_traders(search="alpha")) == ["trader-6"]
    assert _ids(copy_trade.list_traders(search="9pQR")) == ["trader-3"]


def test_sort_options(copy_trade):
    assert _ids(copy_trade.list_traders(sort_by="followers", order="asc"))[0] == "trader-5"
    assert _ids(copy_trade.list_traders(sort_by="winRate"))[0] == "trader-1"
    assert _ids(copy_trade.list_traders(sort_by="pnlPercent30d"))[-1] == "trader-2"
    assert _ids(copy_trade.list_traders(sort_by="bogus")) == _ids(copy_trade.list_traders())


def test_top_traders(copy_trade):
    assert _ids(copy_trade.top_traders()) == ["trader-2", "trader-1", "trader-6", "trader-4", "trader-3"]


def test_positions_summary(copy_trade):
    report = copy_trade.positions("user-1")
    assert [position.token_id for position in report.positions] == ["bonk", "wif", "jup"]
    assert report.summary.total == 3
    assert report.summary.open_count == 3
    assert report.summary.total_pnl == pytest.approx(168)

    assert copy_trade.positions("user-1", "closed").summary.total == 0
    assert copy_trade.positions("user-2").positions == []


def test_follow_stores_active_defaults(copy_trade):
    settings = copy_trade.follow("user-1", "trader-4")

    assert settings.is_active is True
    assert (settings.max_position_size, settings.copy_ratio, settings.stop_loss) == (100, 0.1, 10)
    assert (settings.take_profit, settings.max_daily_trades) == (50, 10)
    assert copy_trade.following("user-1") == [settings]
    assert copy_trade.following("user-2") == []


def test_update_settings_merges_and_keeps_trader_id(copy_trade):
    copy_trade.follow("user-1", "trader-4")

    updated = copy_trade.update_settings("user-1", "trader-4", {"copy_ratio": 0.25, "trader_id": "trader-9"})

    assert updated.trader_id == "trader-4"
    assert updated.copy_ratio == 0.25
    assert updated.is_active is True
    assert updated.max_position_size == 100
    assert copy_trade.following("user-1") == [updated]


def test_update_settings_without_following_starts_from_defaults(copy_trade):
    updated = copy_trade.update_settings("user-1", "trader-1", {"stop_loss": 5})
    assert updated.is_active is False
    assert updated.stop_loss == 5


def test_unfollow_removes_settings(copy_trade):
    copy_trade.follow("user-1", "trader-1")
    assert copy_trade.unfollow("user-1", "trader-1") is True
    assert copy_trade.following("user-1") == []
    assert copy_trade.unfollow("user-1", "trader-1") is False


def test_unknown_trader(copy_trade):
    assert copy_trade.get_trader("trader-99") is None
    with pytest.raises(TraderNotFoundError):
        copy_trade.follow("user-1", "trader-99")
    with pytest.raises(TraderNotFoundError):
        copy_trade.update_settings("user-1", "trader-99", {})
