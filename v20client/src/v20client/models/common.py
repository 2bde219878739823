"""
Records shared by orders, transactions and account state.

These are the building blocks that appear inside several variant families:
client extensions, the on-fill risk order details attached to entry orders,
the closeout instructions carried by market orders, and the trade and
financing records produced when orders fill.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DateTime, DecimalNumber, V20Model
from .primitives import (
    ClientComment,
    ClientID,
    ClientTag,
    GuaranteedStopLossOrderLevelRestriction,
    HomeConversionFactors,
    InstrumentName,
    TradeID,
    TransactionID,
)


class TimeInForce(str, Enum):
    """How long an order remains pending before it is cancelled."""

    GTC = "GTC"
    GTD = "GTD"
    GFD = "GFD"
    FOK = "FOK"
    IOC = "IOC"


class OrderPositionFill(str, Enum):
    OPEN_ONLY = "OPEN_ONLY"
    REDUCE_FIRST = "REDUCE_FIRST"
    REDUCE_ONLY = "REDUCE_ONLY"
    DEFAULT = "DEFAULT"


class OrderTriggerCondition(str, Enum):
    DEFAULT = "DEFAULT"
    INVERSE = "INVERSE"
    BID = "BID"
    ASK = "ASK"
    MID = "MID"


class AccountFinancingMode(str, Enum):
    NO_FINANCING = "NO_FINANCING"
    SECOND_BY_SECOND = "SECOND_BY_SECOND"
    DAILY = "DAILY"


class MarketOrderMarginCloseoutReason(str, Enum):
    MARGIN_CHECK_VIOLATION = "MARGIN_CHECK_VIOLATION"
    REGULATORY_MARGIN_CALL_VIOLATION = "REGULATORY_MARGIN_CALL_VIOLATION"
    REGULATORY_MARGIN_CHECK_VIOLATION = "REGULATORY_MARGIN_CHECK_VIOLATION"


class ClientExtensions(V20Model):
    """Client-supplied id, tag and comment attached to an order or trade.

    Must not be set on accounts that are associated with MT4.
    """

    id: Optional[ClientID] = None
    tag: Optional[ClientTag] = None
    comment: Optional[ClientComment] = None


class TakeProfitDetails(V20Model):
    price: DecimalNumber
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    client_extensions: Optional[ClientExtensions] = None


class StopLossDetails(V20Model):
    """Exactly one of ``price`` or ``distance`` is expected."""

    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    client_extensions: Optional[ClientExtensions] = None


class GuaranteedStopLossDetails(V20Model):
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    client_extensions: Optional[ClientExtensions] = None


class TrailingStopLossDetails(V20Model):
    distance: DecimalNumber
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    client_extensions: Optional[ClientExtensions] = None


class TradeOpen(V20Model):
    """A trade opened by an order fill."""

    trade_id: TradeID
    units: DecimalNumber
    price: Optional[DecimalNumber] = None
    guaranteed_execution_fee: Optional[DecimalNumber] = None
    quote_guaranteed_execution_fee: Optional[DecimalNumber] = None
    client_extensions: Optional[ClientExtensions] = None
    half_spread_cost: Optional[DecimalNumber] = None
    initial_margin_required: Optional[DecimalNumber] = None


class TradeReduce(V20Model):
    """A trade reduced or closed by an order fill."""

    trade_id: TradeID
    units: DecimalNumber
    price: Optional[DecimalNumber] = None
    realized_pl: Optional[DecimalNumber] = None
    financing: Optional[DecimalNumber] = None
    base_financing: Optional[DecimalNumber] = None
    quote_financing: Optional[DecimalNumber] = None
    financing_rate: Optional[DecimalNumber] = None
    guaranteed_execution_fee: Optional[DecimalNumber] = None
    quote_guaranteed_execution_fee: Optional[DecimalNumber] = None
    half_spread_cost: Optional[DecimalNumber] = None


class MarketOrderTradeClose(V20Model):
    trade_id: TradeID
    client_trade_id: Optional[str] = None
    # "ALL" or a decimal number of units
    units: str


class MarketOrderPositionCloseout(V20Model):
    instrument: InstrumentName
    units: str


class MarketOrderMarginCloseout(V20Model):
    reason: MarketOrderMarginCloseoutReason


class MarketOrderDelayedTradeClose(V20Model):
    trade_id: TradeID
    client_trade_id: Optional[str] = None
    source_transaction_id: TransactionID


class LiquidityRegenerationScheduleStep(V20Model):
    timestamp: DateTime
    bid_liquidity_used: DecimalNumber
    ask_liquidity_used: DecimalNumber


class LiquidityRegenerationSchedule(V20Model):
    steps: List[LiquidityRegenerationScheduleStep] = Field(default_factory=list)


class OpenTradeFinancing(V20Model):
    trade_id: TradeID
    financing: DecimalNumber
    base_financing: Optional[DecimalNumber] = None
    quote_financing: Optional[DecimalNumber] = None
    financing_rate: Optional[DecimalNumber] = None


class PositionFinancing(V20Model):
    instrument: InstrumentName
    financing: DecimalNumber
    base_financing: Optional[DecimalNumber] = None
    quote_financing: Optional[DecimalNumber] = None
    home_conversion_factors: Optional[HomeConversionFactors] = None
    open_trade_financings: List[OpenTradeFinancing] = Field(default_factory=list)
    account_financing_mode: Optional[AccountFinancingMode] = None


class OpenTradeDividendAdjustment(V20Model):
    trade_id: TradeID
    dividend_adjustment: DecimalNumber
    quote_dividend_adjustment: Optional[DecimalNumber] = None


class GuaranteedStopLossOrderEntryData(V20Model):
    minimum_distance: DecimalNumber
    premium: DecimalNumber
    level_restriction: Optional[GuaranteedStopLossOrderLevelRestriction] = None
