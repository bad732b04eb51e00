"""
test_wallet_ledger.py - Unit tests for the paper wallet ledger

Tests:
- Lazy wallet creation and default funding
- Buy/sell application, boundaries and rejection
- History caps and order status updates
- Priced projections (balances, portfolio value, summary)
- Reset and store statistics
"""
import random
from datetime import datetime, timezone

import pytest

from gmgn_server.modules.wallets import Order, Transaction


def _transaction(index: int) -> Transaction:
    return Transaction(
        id=f"tx-{index}",
        type="swap",
        token_id="sol",
        symbol="SOL",
        amount=1.0,
        amount_usd=100.0,
        fee=0.1,
        tx_hash=f"0x{index:064x}",
        status="confirmed",
        created_at=datetime.now(timezone.utc),
    )


def _order(index: int, status: str = "pending") -> Order:
    now = datetime.now(timezone.utc)
    return Order(
        id=f"order-{index}",
        user_id="u1",
        token_id="jup",
        side="buy",
        type="limit",
        status=status,
        amount=10.0,
        price=0.9,
        filled_amount=0.0,
        filled_price=0.0,
        fee=0.0,
        created_at=now,
        updated_at=now,
    )


def test_new_wallet_gets_default_funding(ledger):
    wallet = ledger.get_or_create("u1")
    assert wallet.usd_balance == 10_000
    assert list(wallet.assets) == ["sol"]
    assert wallet.assets["sol"].amount == 5
    assert wallet.assets["sol"].symbol == "SOL"


def test_get_or_create_is_idempotent(ledger):
    first = ledger.get_or_create("u1")
    first.usd_balance -= 1
    second = ledger.get_or_create("u1")
    assert second is first
    assert second.usd_balance == 9_999
    assert ledger.store.count() == 1


def test_token_holding_is_zero_when_absent(ledger):
    assert ledger.get_token_holding("u1", "bonk") == 0.0
    assert ledger.get_token_holding("u1", "sol") == 5


def test_buy_with_insufficient_funds_changes_nothing(ledger):
    wallet = ledger.get_or_create("u1")
    wallet.usd_balance = 100

    assert ledger.apply_trade("u1", "buy", "sol", 1, 150, 0.15) is False
    assert wallet.usd_balance == 100
    assert wallet.assets["sol"].amount == 5


def test_successful_buy_debits_cost_and_fee(ledger):
    assert ledger.apply_trade("u1", "buy", "jup", 500, 460, 0.18) is True
    assert ledger.get_usd_balance("u1") == pytest.approx(9_539.82)
    holding = ledger.get_or_create("u1").assets["jup"]
    assert holding.amount == 500
    assert holding.name == "Jupiter"


def test_buy_boundary_is_inclusive(ledger):
    wallet = ledger.get_or_create("u1")
    wallet.usd_balance = 100.0

    assert ledger.apply_trade("u1", "buy", "jup", 10, 99.5, 0.5) is True
    assert wallet.usd_balance == 0.0


def test_buy_adds_to_existing_holding(ledger):
    assert ledger.apply_trade("u1", "buy", "sol", 2, 200, 0.2) is True
    assert ledger.get_token_holding("u1", "sol") == 7


def test_sell_draining_holding_removes_it(ledger):
    assert ledger.apply_trade("u1", "sell", "sol", 5, 500, 0.5) is True
    wallet = ledger.get_or_create("u1")
    assert "sol" not in wallet.assets
    assert wallet.usd_balance == pytest.approx(10_499.5)


def test_sell_more_than_held_is_rejected(ledger):
    assert ledger.apply_trade("u1", "sell", "sol", 6, 600, 0.6) is False
    assert ledger.apply_trade("u1", "sell", "jup", 1, 1, 0.0) is False
    assert ledger.get_token_holding("u1", "sol") == 5
    assert ledger.get_usd_balance("u1") == 10_000


def test_selling_a_hair_more_than_held_is_rejected(ledger):
    assert ledger.apply_trade("u1", "sell", "sol", 5 + 5e-13, 500, 0.5) is False
    assert ledger.get_token_holding("u1", "sol") == 5
    assert ledger.get_usd_balance("u1") == 10_000


def test_round_trip_costs_both_fees(ledger):
    start = ledger.get_usd_balance("u1")
    assert ledger.apply_trade("u1", "buy", "jup", 10, 100, 0.1)
    assert ledger.apply_trade("u1", "sell", "jup", 10, 100, 0.1)
    assert ledger.get_usd_balance("u1") == pytest.approx(start - 0.2)
    assert ledger.get_token_holding("u1", "jup") == 0.0


@pytest.mark.parametrize(
    "side, token_id, amount, total, fee",
    [
        ("buy", "sol", -1, 100, 0.1),
        ("buy", "sol", 1, -100, 0.1),
        ("sell", "sol", 1, 100, -0.1),
        ("hold", "sol", 1, 100, 0.1),
        ("buy", "doge", 1, 100, 0.1),
        ("buy", "jup", float("nan"), float("nan"), 0.0),
        ("buy", "jup", 1, 100, float("nan")),
        ("sell", "sol", 1, float("inf"), 0.1),
        ("sell", "sol", float("-inf"), 100, 0.1),
    ],
)
def test_malformed_trades_are_rejected(ledger, side, token_id, amount, total, fee):
    assert ledger.apply_trade("u1", side, token_id, amount, total, fee) is False
    wallet = ledger.get_or_create("u1")
    assert wallet.usd_balance == 10_000
    assert {key: holding.amount for key, holding in wallet.assets.items()} == {"sol": 5}


def test_random_trade_sequences_keep_balances_non_negative(ledger):
    rng = random.Random(42)
    for _ in range(500):
        side = rng.choice(["buy", "sell"])
        token_id = rng.choice(["sol", "jup"])
        amount = rng.uniform(0, 20)
        total = amount * rng.uniform(0.5, 200)
        ledger.apply_trade("u1", side, token_id, amount, total, total * 0.001)

        wallet = ledger.get_or_create("u1")
        assert wallet.usd_balance >= 0
        assert all(holding.amount > 0 for holding in wallet.assets.values())


def test_transaction_history_evicts_oldest(ledger):
    for index in range(101):
        ledger.record_transaction("u1", _transaction(index))

    transactions = ledger.list_transactions("u1")
    assert len(transactions) == 100
    assert "tx-0" not in {tx.id for tx in transactions}
    assert [tx.id for tx in transactions[:3]] == ["tx-100", "tx-99", "tx-98"]
    assert transactions[-1].id == "tx-1"


def test_order_history_evicts_oldest(ledger):
    for index in range(101):
        ledger.record_order("u1", _order(index))

    orders = ledger.list_orders("u1")
    assert len(orders) == 100
    assert orders[0].id == "order-100"
    assert ledger.get_order("u1", "order-0") is None


def test_list_filters(ledger):
    ledger.record_order("u1", _order(1, "pending"))
    ledger.record_order("u1", _order(2, "filled"))
    ledger.record_transaction("u1", _transaction(1))

    assert [order.id for order in ledger.list_orders("u1", "filled")] == ["order-2"]
    assert ledger.list_transactions("u1", type="deposit") == []
    assert len(ledger.list_transactions("u1", type="swap", status="confirmed")) == 1


def test_update_order_status_preserves_other_fields(ledger):
    original = _order(1)
    ledger.record_order("u1", original)

    updated = ledger.update_order_status("u1", "order-1", "cancelled")

    assert updated.status == "cancelled"
    assert updated.updated_at >= original.updated_at
    assert (updated.id, updated.amount, updated.price, updated.created_at) == (
        original.id,
        original.amount,
        original.price,
        original.created_at,
    )
    assert ledger.get_order("u1", "order-1") == updated
    assert ledger.update_order_status("u1", "missing", "cancelled") is None


def test_list_balances_sorts_by_usd_value(ledger, fake_prices):
    ledger.apply_trade("u1", "buy", "jup", 2_000, 0, 0)
    ledger.apply_trade("u1", "buy", "bonk", 1_000, 0, 0)

    balances = ledger.list_balances("u1")
    assert [balance.token_id for balance in balances] == ["jup", "sol", "bonk"]
    assert balances[1].balance_usd == pytest.approx(500)

    bonk = balances[2]
    assert bonk.price == 0.0
    assert bonk.balance_usd == 0.0

    ascending = ledger.list_balances("u1", order="asc")
    assert [balance.token_id for balance in ascending] == ["bonk", "sol", "jup"]


def test_portfolio_value_ignores_unpriced_holdings(ledger):
    ledger.apply_trade("u1", "buy", "bonk", 1_000, 0, 0)
    assert ledger.compute_portfolio_value("u1") == pytest.approx(10_500)


def test_summary_reports_24h_pnl(ledger, fake_prices):
    fake_prices.prices["sol"] = 110.0
    fake_prices.changes["sol"] = 10.0

    summary = ledger.summarize("u1")

    assert summary.available_usd == 10_000
    assert summary.total_balance_usd == pytest.approx(10_550)
    assert summary.total_pnl_24h == pytest.approx(50)
    assert summary.total_pnl_percent_24h == pytest.approx(50 / 10_500 * 100)
    assert [balance.token_id for balance in summary.balances] == ["sol"]


def test_reset_restores_defaults(ledger):
    ledger.apply_trade("u1", "sell", "sol", 5, 500, 0.5)
    ledger.apply_trade("u1", "buy", "jup", 100, 100, 0.1)
    ledger.record_order("u1", _order(1))

    ledger.reset("u1")
    wallet = ledger.get_or_create("u1")

    assert wallet.usd_balance == 10_000
    assert {key: holding.amount for key, holding in wallet.assets.items()} == {"sol": 5}
    assert wallet.orders == []
    assert wallet.transactions == []


def test_stats_counts_wallets_and_transactions(ledger):
    ledger.record_transaction("u1", _transaction(1))
    ledger.record_transaction("u2", _transaction(2))
    ledger.record_transaction("u2", _transaction(3))

    stats = ledger.stats()
    assert stats.user_count == 2
    assert stats.total_transactions == 3
