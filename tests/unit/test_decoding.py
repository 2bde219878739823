"""Tests for whole-body and collection decoding.

Synchronous responses decode all-or-nothing and report the wire path
of the first bad field, while the best-effort helper isolates a bad
element and keeps the rest.
"""

from __future__ import annotations

from decimal import Decimal

import pytest  # type: ignore

from tests.helpers import payloads
from v20client.decoding import (
    decode_model,
    decode_orders,
    decode_transactions,
    decode_transactions_best_effort,
    parse_json,
)
from v20client.errors import SchemaViolation, UnknownVariant
from v20client.models.account import Account
from v20client.models.order import LimitOrder
from v20client.models.transaction import MarketOrderTransaction, OrderFillTransaction
from v20client.responses import CreateOrderErrorResponse, CreateOrderResponse, TransactionsResponse


def test_parse_json_reads_floats_as_decimal() -> None:
    data = parse_json(b'{"price": 1.10000, "count": 3}')
    assert data["price"] == Decimal("1.10000")
    assert str(data["price"]) == "1.10000"
    assert data["count"] == 3


def test_parse_json_rejects_invalid_text() -> None:
    with pytest.raises(SchemaViolation):
        parse_json(b"{not json")


@pytest.mark.parametrize(
    "raw",
    [
        b'{"units": ' + b"9" * 5000 + b"}",
        b"[" * 200000,
        b'{"instrument": "\xc3"}',
    ],
    ids=["oversized-integer", "deep-nesting", "bad-encoding"],
)
def test_parse_json_maps_every_parser_failure(raw: bytes) -> None:
    with pytest.raises(SchemaViolation) as excinfo:
        parse_json(raw)
    assert excinfo.value.path == ""


def test_nested_order_error_keeps_enclosing_path() -> None:
    orders = [payloads.limit_order(str(2000 + i)) for i in range(4)]
    orders[3]["price"] = "not-a-price"
    raw = {"id": payloads.ACCOUNT_ID, "currency": "USD", "orders": orders}
    with pytest.raises(SchemaViolation) as excinfo:
        decode_model(Account, raw)
    assert excinfo.value.path == "orders.3.price"


def test_nested_transaction_error_keeps_enclosing_path() -> None:
    bad_fill = payloads.order_fill_transaction("1001")
    del bad_fill["orderID"]
    bad_create = payloads.market_order_transaction("1000")
    del bad_create["instrument"]
    with pytest.raises(SchemaViolation) as excinfo:
        decode_model(CreateOrderResponse, {"orderCreateTransaction": bad_create})
    assert excinfo.value.path == "orderCreateTransaction.instrument"

    response = {
        "transactions": [payloads.minimal_transaction("CLOSE", "1"), bad_fill],
        "lastTransactionID": "1001",
    }
    with pytest.raises(SchemaViolation) as excinfo:
        decode_model(TransactionsResponse, response)
    assert excinfo.value.path == "transactions.1.orderID"


def test_decode_transactions_is_all_or_nothing() -> None:
    good = payloads.minimal_transaction("CLOSE", "1")
    bad = payloads.minimal_transaction("CLOSE", "2")
    bad["type"] = "BRAND_NEW"
    with pytest.raises(UnknownVariant):
        decode_transactions([good, bad])
    with pytest.raises(SchemaViolation):
        decode_transactions({"type": "CLOSE"})


def test_decode_transactions_best_effort_isolates_failures() -> None:
    bad = payloads.minimal_transaction("CLOSE", "2")
    bad["type"] = "BRAND_NEW"
    items = [
        payloads.minimal_transaction("CLOSE", "1"),
        bad,
        {"type": "ORDER_FILL"},
        payloads.minimal_transaction("REOPEN", "4"),
    ]
    decoded, failures = decode_transactions_best_effort(items)
    assert [txn.id for txn in decoded] == ["1", "4"]
    assert [index for index, _ in failures] == [1, 2]
    assert isinstance(failures[0][1], UnknownVariant)
    assert isinstance(failures[1][1], SchemaViolation)


def test_decode_orders() -> None:
    orders = decode_orders([payloads.limit_order("1"), payloads.limit_order("2")])
    assert [o.id for o in orders] == ["1", "2"]
    assert all(isinstance(o, LimitOrder) for o in orders)


def test_polymorphic_fields_inside_responses() -> None:
    response = decode_model(CreateOrderResponse, payloads.create_order_response())
    assert isinstance(response.order_create_transaction, MarketOrderTransaction)
    assert isinstance(response.order_fill_transaction, OrderFillTransaction)
    assert response.filled
    assert response.order_cancel_transaction is None
    assert [t.id for t in response.produced_transactions()] == ["1000", "1001"]
    assert response.last_transaction_id == "1001"


def test_unknown_variant_inside_response_fails_the_body() -> None:
    body = {
        "transactions": [payloads.minimal_transaction("CLOSE", "1"), {"type": "BRAND_NEW", "id": "2"}],
        "lastTransactionID": "2",
    }
    with pytest.raises(UnknownVariant):
        decode_model(TransactionsResponse, body)


def test_error_response_exposes_reject_transaction() -> None:
    body = decode_model(CreateOrderErrorResponse, payloads.create_order_reject_response())
    reject = body.reject_transaction()
    assert reject is not None
    assert reject.reject_reason.value == "INSUFFICIENT_MARGIN"
    assert body.error_code == "INSUFFICIENT_MARGIN"


def test_account_with_embedded_orders() -> None:
    account = decode_model(
        Account,
        {
            "id": payloads.ACCOUNT_ID,
            "currency": "EUR",
            "balance": "100000.0000",
            "orders": [payloads.limit_order("7")],
            "trades": [],
            "positions": [],
            "lastTransactionID": "7",
        },
    )
    assert isinstance(account.orders[0], LimitOrder)
    assert account.balance == Decimal("100000.0000")
