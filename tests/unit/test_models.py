"""Tests for the v20 record models and variant decoding.

These unit tests decode wire payloads for every order and transaction
type, check that encoding and decoding again yields the same record,
and verify the failure modes for unknown discriminants and malformed
fields.  They run fully offline.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest  # type: ignore
from pydantic import ValidationError

from tests.helpers import payloads
from v20client.decoding import decode_model, decode_order, decode_transaction, parse_json, to_json, to_wire
from v20client.errors import SchemaViolation, UnknownVariant
from v20client.models import wire_name
from v20client.models.account import AccountSummary
from v20client.models.order import (
    ORDER_VARIANTS,
    LimitOrder,
    MarketOrder,
    OrderState,
    OrderType,
    TimeInForce,
    TrailingStopLossOrder,
    trigger_price,
)
from v20client.models.pricing import ClientPrice
from v20client.models.transaction import (
    REJECT_VARIANTS,
    TRANSACTION_VARIANTS,
    MarketOrderTransaction,
    OrderCancelReason,
    OrderCancelTransaction,
    OrderFillTransaction,
    TransactionRejectReason,
    TransactionType,
)
from v20client.models.variants import ORDER_TYPES, TRANSACTION_TYPES


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trade_closed_ids", "tradeClosedIDs"),
        ("order_id", "orderID"),
        ("full_vwap", "fullVWAP"),
        ("quote_pl", "quotePL"),
        ("nav", "NAV"),
        ("margin_closeout_nav", "marginCloseoutNAV"),
        ("time_in_force", "timeInForce"),
        ("user_id", "userID"),
    ],
)
def test_wire_name(name: str, expected: str) -> None:
    assert wire_name(name) == expected


def test_every_transaction_type_has_exactly_one_variant() -> None:
    discriminants = [cls.discriminant() for cls in TRANSACTION_VARIANTS]
    assert sorted(discriminants) == sorted(t.value for t in TransactionType)
    assert len(set(discriminants)) == len(discriminants)
    assert set(TRANSACTION_TYPES) == {t.value for t in TransactionType}


def test_every_order_type_has_exactly_one_variant() -> None:
    discriminants = [cls.discriminant() for cls in ORDER_VARIANTS]
    assert sorted(discriminants) == sorted(t.value for t in OrderType)
    assert set(ORDER_TYPES) == {t.value for t in OrderType}


@pytest.mark.parametrize("txn_type", sorted(payloads.TRANSACTION_REQUIRED))
def test_transaction_roundtrip_with_required_fields_only(txn_type: str) -> None:
    txn = decode_transaction(payloads.minimal_transaction(txn_type))
    assert type(txn) is TRANSACTION_TYPES[txn_type]
    assert txn.type.value == txn_type
    assert txn.id == "1000"
    assert decode_transaction(to_wire(txn)) == txn
    # the JSON text form decodes to the same record
    assert decode_transaction(parse_json(to_json(txn))) == txn


ALL_VARIANTS = list(ORDER_VARIANTS) + list(TRANSACTION_VARIANTS)


def _decode_variant(cls, raw):
    return decode_order(raw) if cls in ORDER_VARIANTS else decode_transaction(raw)


def _wire_keys(cls):
    return {field.alias or wire_name(name) for name, field in cls.model_fields.items()}


@pytest.mark.parametrize("cls", ALL_VARIANTS, ids=lambda cls: cls.__name__)
def test_variant_roundtrip_with_every_field(cls) -> None:
    record = _decode_variant(cls, payloads.full_record(cls))
    assert type(record) is cls
    wire = to_wire(record)
    assert set(wire) == _wire_keys(cls)
    assert _decode_variant(cls, wire) == record
    assert _decode_variant(cls, parse_json(to_json(record))) == record


@pytest.mark.parametrize("cls", ALL_VARIANTS, ids=lambda cls: cls.__name__)
def test_variant_roundtrip_with_required_fields_only(cls) -> None:
    record = _decode_variant(cls, payloads.minimal_record(cls))
    assert type(record) is cls
    for name, field in cls.model_fields.items():
        if not field.is_required() and field.default is None:
            assert getattr(record, name) is None, name
    assert _decode_variant(cls, to_wire(record)) == record


def test_market_order_defaults_survive_roundtrip() -> None:
    order = decode_order(payloads.minimal_record(MarketOrder))
    assert order.time_in_force is TimeInForce.FOK
    assert to_wire(order)["timeInForce"] == "FOK"
    assert decode_order(to_wire(order)) == order


def test_rich_transactions_roundtrip() -> None:
    for raw in (
        payloads.market_order_transaction(),
        payloads.order_fill_transaction(),
        payloads.order_cancel_transaction(),
    ):
        txn = decode_transaction(raw)
        assert decode_transaction(to_wire(txn)) == txn


def test_order_roundtrip_and_fields() -> None:
    order = decode_order(payloads.limit_order())
    assert isinstance(order, LimitOrder)
    assert order.state is OrderState.PENDING
    assert order.time_in_force is TimeInForce.GTD
    assert order.units == Decimal("-250")
    assert order.client_extensions is not None and order.client_extensions.id == "limit-1"
    assert order.filling_transaction_id is None
    assert decode_order(to_wire(order)) == order


def test_order_without_client_extensions_decodes() -> None:
    raw = payloads.limit_order()
    del raw["clientExtensions"]
    order = decode_order(raw)
    assert order.client_extensions is None
    assert "clientExtensions" not in to_wire(order)


def test_absent_optionals_are_omitted_on_the_wire() -> None:
    wire = to_wire(decode_transaction(payloads.minimal_transaction("ORDER_CANCEL")))
    assert "replacedByOrderID" not in wire
    assert "clientOrderID" not in wire
    assert wire["orderID"] == "1000"


def test_decimal_fidelity() -> None:
    raw = payloads.minimal_transaction("LIMIT_ORDER", price="1.234567891")
    txn = decode_transaction(raw)
    assert txn.price == Decimal("1.234567891")
    assert to_wire(txn)["price"] == "1.234567891"


def test_decimal_fidelity_for_bare_json_numbers() -> None:
    text = '{"type": "PRICE", "instrument": "EUR_USD", "time": "2024-03-01T12:00:00Z", "closeoutBid": 1.084999999}'
    price = decode_model(ClientPrice, parse_json(text))
    assert price.closeout_bid == Decimal("1.084999999")
    assert to_wire(price)["closeoutBid"] == "1.084999999"


def test_nanosecond_timestamps_are_accepted() -> None:
    txn = decode_transaction(payloads.minimal_transaction("CLOSE"))
    assert txn.time == datetime(2024, 3, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    assert to_wire(txn)["time"] == "2024-03-01T12:00:00.123456Z"


def test_unknown_transaction_type_is_unknown_variant() -> None:
    raw = payloads.minimal_transaction("CLOSE")
    raw["type"] = "SOMETHING_NEW"
    with pytest.raises(UnknownVariant) as excinfo:
        decode_transaction(raw)
    assert excinfo.value.discriminant == "SOMETHING_NEW"
    assert excinfo.value.family == "transaction"
    assert not isinstance(excinfo.value, SchemaViolation)


def test_unknown_order_type_is_unknown_variant() -> None:
    raw = payloads.limit_order()
    raw["type"] = "ICEBERG"
    with pytest.raises(UnknownVariant):
        decode_order(raw)


def test_missing_required_field_names_the_field() -> None:
    raw = payloads.minimal_transaction("ORDER_FILL")
    del raw["orderID"]
    with pytest.raises(SchemaViolation) as excinfo:
        decode_transaction(raw)
    assert excinfo.value.path == "orderID"


def test_invalid_enum_value_is_schema_violation() -> None:
    raw = payloads.order_cancel_transaction(reason="NOT_A_REASON")
    with pytest.raises(SchemaViolation) as excinfo:
        decode_transaction(raw)
    assert excinfo.value.path == "reason"


@pytest.mark.parametrize("raw", [None, [], "MARKET_ORDER", {"id": "1"}, {"type": 7}])
def test_missing_discriminant_is_schema_violation(raw) -> None:
    with pytest.raises(SchemaViolation):
        decode_transaction(raw)


def test_variant_rejects_foreign_type_value() -> None:
    with pytest.raises(ValidationError):
        MarketOrderTransaction.model_validate(payloads.minimal_transaction("LIMIT_ORDER"))


def test_cancel_reason_is_exposed_as_enum() -> None:
    txn = decode_transaction(payloads.order_cancel_transaction(reason="INSUFFICIENT_MARGIN"))
    assert isinstance(txn, OrderCancelTransaction)
    assert txn.reason is OrderCancelReason.INSUFFICIENT_MARGIN


def test_reject_variants_carry_reject_reason() -> None:
    assert REJECT_VARIANTS
    for cls in REJECT_VARIANTS:
        txn = decode_transaction(payloads.minimal_transaction(cls.discriminant()))
        assert isinstance(txn.reject_reason, TransactionRejectReason)


def test_order_fill_nested_records() -> None:
    txn = decode_transaction(payloads.order_fill_transaction())
    assert isinstance(txn, OrderFillTransaction)
    assert txn.trade_opened is not None and txn.trade_opened.trade_id == "1001"
    assert txn.full_price is not None and txn.full_price.best_ask == Decimal("1.08512")
    assert txn.full_vwap == Decimal("1.08512")
    assert txn.trades_closed == []


def test_trigger_price_per_variant() -> None:
    assert trigger_price(decode_order(payloads.limit_order())) == Decimal("1.10000")
    market = MarketOrder(
        id="1",
        create_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
        state=OrderState.FILLED,
        instrument="EUR_USD",
        units=Decimal("10"),
    )
    assert trigger_price(market) is None
    trailing = TrailingStopLossOrder(
        id="2",
        create_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
        state=OrderState.PENDING,
        trade_id="42",
        distance=Decimal("0.005"),
        trailing_stop_value=Decimal("1.0801"),
    )
    assert trigger_price(trailing) == Decimal("1.0801")


def test_account_summary_never_reset_pl_time() -> None:
    summary = AccountSummary.model_validate(
        {"id": payloads.ACCOUNT_ID, "currency": "USD", "resettablePLTime": "0", "NAV": "100.5"}
    )
    assert summary.resettable_pl_time is None
    assert summary.nav == Decimal("100.5")
