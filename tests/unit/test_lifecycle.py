"""Tests for rebuilding order state from transactions."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest  # type: ignore

from tests.helpers import payloads
from v20client.decoding import decode_transaction, decode_transactions
from v20client.lifecycle import OrderTracker, order_from_transaction
from v20client.models.order import LimitOrder, MarketOrder, OrderState, TakeProfitOrder


def test_market_order_then_fill_is_filled() -> None:
    create = decode_transaction(payloads.market_order_transaction("1000"))
    fill = decode_transaction(payloads.order_fill_transaction("1001", order_id="1000", batch_id="1000"))
    assert create.batch_id == fill.batch_id

    tracker = OrderTracker()
    tracker.apply(create)
    assert tracker.get("1000").state is OrderState.PENDING
    tracker.apply(fill)

    order = tracker.get("1000")
    assert isinstance(order, MarketOrder)
    assert order.state is OrderState.FILLED
    assert order.trade_opened_id == "1001"
    assert order.filling_transaction_id == "1001"
    assert order.filled_time == fill.time
    assert order.is_terminal
    assert tracker.pending() == []


def test_order_copies_creation_fields() -> None:
    order = order_from_transaction(decode_transaction(payloads.market_order_transaction("1000")))
    assert order.id == "1000"
    assert order.instrument == "EUR_USD"
    assert order.units == Decimal("100")
    assert order.client_extensions is not None and order.client_extensions.tag == "strategy-a"
    assert order.take_profit_on_fill is not None
    assert order.take_profit_on_fill.price == Decimal("1.09500")


def test_order_from_non_creating_transaction_raises() -> None:
    with pytest.raises(TypeError):
        order_from_transaction(decode_transaction(payloads.minimal_transaction("CLOSE")))


def test_cancel_with_replacement() -> None:
    tracker = OrderTracker()
    tracker.apply_all(
        decode_transactions(
            [
                payloads.minimal_transaction("LIMIT_ORDER", "10"),
                payloads.minimal_transaction(
                    "ORDER_CANCEL", "11", orderID="10", reason="CLIENT_REQUEST_REPLACED", replacedByOrderID="12"
                ),
                payloads.minimal_transaction("LIMIT_ORDER", "12", replacesOrderID="10", price="1.09000"),
            ]
        )
    )
    old = tracker.get("10")
    new = tracker.get("12")
    assert isinstance(old, LimitOrder) and isinstance(new, LimitOrder)
    assert old.state is OrderState.CANCELLED
    assert old.cancelling_transaction_id == "11"
    assert old.replaced_by_order_id == "12"
    assert new.replaces_order_id == "10"
    assert new.price == Decimal("1.09000")
    assert [o.id for o in tracker.pending()] == ["12"]


def test_trade_dependent_order_is_tracked() -> None:
    tracker = OrderTracker()
    order = tracker.apply(decode_transaction(payloads.minimal_transaction("TAKE_PROFIT_ORDER", "5")))
    assert isinstance(order, TakeProfitOrder)
    assert order.trade_id == "42"


def test_unknown_order_is_ignored(caplog) -> None:
    tracker = OrderTracker()
    with caplog.at_level(logging.DEBUG, logger="v20client.lifecycle"):
        result = tracker.apply(decode_transaction(payloads.order_cancel_transaction("7", order_id="3")))
    assert result is None
    assert tracker.orders == {}
    assert "unknown order 3" in caplog.text


def test_other_transactions_are_ignored() -> None:
    tracker = OrderTracker()
    assert tracker.apply(decode_transaction(payloads.minimal_transaction("DAILY_FINANCING", "9"))) is None
    assert tracker.last_transaction_id == "9"


def test_out_of_order_transactions_are_rejected() -> None:
    tracker = OrderTracker()
    tracker.apply(decode_transaction(payloads.minimal_transaction("LIMIT_ORDER", "1000")))
    with pytest.raises(ValueError):
        tracker.apply(decode_transaction(payloads.minimal_transaction("CLOSE", "999")))
    with pytest.raises(ValueError):
        tracker.apply(decode_transaction(payloads.minimal_transaction("CLOSE", "1000")))
