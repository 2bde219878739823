"""Identifiers, instrument metadata and other primitive wire types."""

from __future__ import annotations

from enum import Enum
from typing import List, NewType, Optional

from pydantic import Field

from .base import DecimalNumber, V20Model

AccountID = NewType("AccountID", str)
OrderID = NewType("OrderID", str)
TradeID = NewType("TradeID", str)
TransactionID = NewType("TransactionID", str)
ClientID = NewType("ClientID", str)
ClientTag = NewType("ClientTag", str)
ClientComment = NewType("ClientComment", str)
RequestID = NewType("RequestID", str)

Currency = NewType("Currency", str)
InstrumentName = NewType("InstrumentName", str)

# "@" prefixed client order id, or a plain server order id.
OrderSpecifier = NewType("OrderSpecifier", str)
TradeSpecifier = NewType("TradeSpecifier", str)


def transaction_id_key(transaction_id: str) -> int:
    """Sort key giving TransactionIDs their numeric order.

    TransactionIDs are strings on the wire but increase numerically, so
    ``"999" < "1000"`` must hold.  Raises ``ValueError`` for ids that are
    not decimal integers.
    """
    return int(transaction_id)


def client_order_specifier(client_id: str) -> OrderSpecifier:
    """Build an OrderSpecifier that addresses an order by its client id."""
    return OrderSpecifier(client_id if client_id.startswith("@") else f"@{client_id}")


class InstrumentType(str, Enum):
    CURRENCY = "CURRENCY"
    CFD = "CFD"
    METAL = "METAL"


class DayOfWeek(str, Enum):
    SUNDAY = "SUNDAY"
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"


class Direction(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"


class GuaranteedStopLossOrderModeForInstrument(str, Enum):
    DISABLED = "DISABLED"
    ALLOWED = "ALLOWED"
    REQUIRED = "REQUIRED"


class Tag(V20Model):
    type: str
    name: str


class FinancingDayOfWeek(V20Model):
    day_of_week: DayOfWeek
    days_charged: int


class InstrumentFinancing(V20Model):
    long_rate: DecimalNumber
    short_rate: DecimalNumber
    financing_days_of_week: List[FinancingDayOfWeek] = Field(default_factory=list)


class InstrumentCommission(V20Model):
    commission: DecimalNumber
    units_traded: DecimalNumber
    minimum_commission: DecimalNumber


class GuaranteedStopLossOrderLevelRestriction(V20Model):
    volume: DecimalNumber
    price_range: DecimalNumber


class Instrument(V20Model):
    """Full specification of a tradeable instrument."""

    name: InstrumentName
    type: InstrumentType
    display_name: str
    pip_location: int
    display_precision: int
    trade_units_precision: int
    minimum_trade_size: DecimalNumber
    maximum_trailing_stop_distance: DecimalNumber
    minimum_trailing_stop_distance: DecimalNumber
    maximum_position_size: DecimalNumber
    maximum_order_units: DecimalNumber
    margin_rate: DecimalNumber
    minimum_guaranteed_stop_loss_distance: Optional[DecimalNumber] = None
    commission: Optional[InstrumentCommission] = None
    guaranteed_stop_loss_order_mode: Optional[GuaranteedStopLossOrderModeForInstrument] = None
    guaranteed_stop_loss_order_execution_premium: Optional[DecimalNumber] = None
    guaranteed_stop_loss_order_level_restriction: Optional[GuaranteedStopLossOrderLevelRestriction] = None
    financing: Optional[InstrumentFinancing] = None
    tags: List[Tag] = Field(default_factory=list)


class ConversionFactor(V20Model):
    factor: DecimalNumber


class HomeConversionFactors(V20Model):
    """Factors converting quote-currency gains and losses into home currency."""

    gain_quote_home: Optional[ConversionFactor] = None
    loss_quote_home: Optional[ConversionFactor] = None
    gain_base_home: Optional[ConversionFactor] = None
    loss_base_home: Optional[ConversionFactor] = None
