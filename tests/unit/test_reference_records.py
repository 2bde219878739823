"""Decoding of the records no endpoint response embeds.

These records are part of the public model set for callers that receive
them from other sources (user details, archived pricing snapshots, order
entry metadata), so each must decode from its wire form and round-trip.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest  # type: ignore

from tests.helpers import payloads
from v20client.decoding import decode_model, to_wire
from v20client.errors import SchemaViolation
from v20client.models.account import PositionAggregationMode, UserAttributes
from v20client.models.common import GuaranteedStopLossOrderEntryData, LiquidityRegenerationSchedule
from v20client.models.order import CancellableOrderType, OrderIdentifier, OrderType, UnitsAvailable


def test_order_identifier() -> None:
    ident = decode_model(OrderIdentifier, {"orderID": "1523", "clientOrderID": "my-order"})
    assert ident.order_id == "1523"
    assert ident.client_order_id == "my-order"
    assert to_wire(ident) == {"orderID": "1523", "clientOrderID": "my-order"}


def test_units_available() -> None:
    raw = {
        "default": {"long": "1000", "short": "950.5"},
        "reduceFirst": {"long": "1000", "short": "950.5"},
        "reduceOnly": {"long": "0", "short": "0"},
        "openOnly": {"long": "1000", "short": "950.5"},
    }
    units = decode_model(UnitsAvailable, raw)
    assert units.default.short == Decimal("950.5")
    assert units.reduce_only.long == Decimal("0")
    assert to_wire(units) == raw


def test_units_available_requires_every_fill_option() -> None:
    with pytest.raises(SchemaViolation) as excinfo:
        decode_model(UnitsAvailable, {"default": {"long": "1", "short": "1"}})
    assert excinfo.value.path == "reduceFirst"


def test_cancellable_order_types_are_order_types() -> None:
    assert {t.value for t in CancellableOrderType} <= {t.value for t in OrderType}
    assert "MARKET" not in {t.value for t in CancellableOrderType}
    assert CancellableOrderType("TRAILING_STOP_LOSS") is CancellableOrderType.TRAILING_STOP_LOSS


def test_user_attributes() -> None:
    user = decode_model(
        UserAttributes,
        {
            "userID": 1234567,
            "username": "trader",
            "divisionAbbreviation": "OC",
            "languageAbbreviation": "en",
            "homeCurrency": "EUR",
        },
    )
    assert user.user_id == 1234567
    assert user.home_currency == "EUR"
    assert user.email is None
    assert "email" not in to_wire(user)


def test_position_aggregation_mode_values() -> None:
    assert [mode.value for mode in PositionAggregationMode] == ["ABSOLUTE_SUM", "MAXIMAL_SIDE", "NET_SUM"]
    with pytest.raises(ValueError):
        PositionAggregationMode("SUM")


def test_liquidity_regeneration_schedule() -> None:
    schedule = decode_model(
        LiquidityRegenerationSchedule,
        {
            "steps": [
                {"timestamp": payloads.TIME, "bidLiquidityUsed": "250000", "askLiquidityUsed": "0"},
                {"timestamp": "2024-03-01T12:00:05Z", "bidLiquidityUsed": "0", "askLiquidityUsed": "0"},
            ]
        },
    )
    assert len(schedule.steps) == 2
    assert schedule.steps[1].timestamp == datetime(2024, 3, 1, 12, 0, 5, tzinfo=timezone.utc)
    assert schedule.steps[0].bid_liquidity_used == Decimal("250000")
    assert decode_model(LiquidityRegenerationSchedule, to_wire(schedule)) == schedule
    assert decode_model(LiquidityRegenerationSchedule, {}).steps == []


def test_guaranteed_stop_loss_entry_data() -> None:
    raw = {
        "minimumDistance": "0.00500",
        "premium": "0.00015",
        "levelRestriction": {"volume": "1000000", "priceRange": "0.00250"},
    }
    data = decode_model(GuaranteedStopLossOrderEntryData, raw)
    assert data.minimum_distance == Decimal("0.00500")
    assert data.level_restriction is not None
    assert data.level_restriction.price_range == Decimal("0.00250")
    assert to_wire(data) == raw
