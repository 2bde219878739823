"""Trades and their summary/calculated projections."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DateTime, DecimalNumber, V20Model
from .common import ClientExtensions
from .order import GuaranteedStopLossOrder, StopLossOrder, TakeProfitOrder, TrailingStopLossOrder
from .primitives import InstrumentName, OrderID, TradeID, TransactionID


class TradeState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    CLOSE_WHEN_TRADEABLE = "CLOSE_WHEN_TRADEABLE"


class TradeStateFilter(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    CLOSE_WHEN_TRADEABLE = "CLOSE_WHEN_TRADEABLE"
    ALL = "ALL"


class TradePL(str, Enum):
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    ZERO = "ZERO"


class TradeFields(V20Model):
    id: TradeID
    instrument: InstrumentName
    price: DecimalNumber
    open_time: DateTime
    state: TradeState
    initial_units: DecimalNumber
    initial_margin_required: Optional[DecimalNumber] = None
    current_units: DecimalNumber
    realized_pl: Optional[DecimalNumber] = None
    unrealized_pl: Optional[DecimalNumber] = None
    margin_used: Optional[DecimalNumber] = None
    average_close_price: Optional[DecimalNumber] = None
    closing_transaction_ids: List[TransactionID] = Field(default_factory=list)
    financing: Optional[DecimalNumber] = None
    dividend_adjustment: Optional[DecimalNumber] = None
    close_time: Optional[DateTime] = None
    client_extensions: Optional[ClientExtensions] = None


class Trade(TradeFields):
    """A trade with its dependent risk orders embedded.

    The orders point back at the trade through ``tradeID``; the trade does
    not own them.
    """

    take_profit_order: Optional[TakeProfitOrder] = None
    stop_loss_order: Optional[StopLossOrder] = None
    guaranteed_stop_loss_order: Optional[GuaranteedStopLossOrder] = None
    trailing_stop_loss_order: Optional[TrailingStopLossOrder] = None


class TradeSummary(TradeFields):
    """A trade with its dependent risk orders referenced by id."""

    take_profit_order_id: Optional[OrderID] = None
    stop_loss_order_id: Optional[OrderID] = None
    guaranteed_stop_loss_order_id: Optional[OrderID] = None
    trailing_stop_loss_order_id: Optional[OrderID] = None


class CalculatedTradeState(V20Model):
    id: TradeID
    unrealized_pl: Optional[DecimalNumber] = None
    margin_used: Optional[DecimalNumber] = None
