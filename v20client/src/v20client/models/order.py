"""
Order variants and order request bodies.

An order is one of nine variants, selected by its ``type`` field.  The
variants share an envelope (``id``, ``createTime``, ``state``,
``clientExtensions`` and ``type``) and the fields that describe how the
order ended (filled or cancelled).  Those terminal fields are optional:
they are only present once the order reached the corresponding state.

``Order`` is the union of all variants.  Code that needs to treat every
variant uses ``match`` over the concrete classes; see ``trigger_price``.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List, Optional, Union, assert_never

from .base import DateTime, DecimalNumber, TaggedModel, V20Model
from .common import (
    ClientExtensions,
    GuaranteedStopLossDetails,
    MarketOrderDelayedTradeClose,
    MarketOrderMarginCloseout,
    MarketOrderPositionCloseout,
    MarketOrderTradeClose,
    OrderPositionFill,
    OrderTriggerCondition,
    StopLossDetails,
    TakeProfitDetails,
    TimeInForce,
    TrailingStopLossDetails,
)
from .primitives import ClientID, InstrumentName, OrderID, TradeID, TransactionID


class OrderType(str, Enum):
    MARKET = "MARKET"
    LIMIT = "LIMIT"
    STOP = "STOP"
    MARKET_IF_TOUCHED = "MARKET_IF_TOUCHED"
    TAKE_PROFIT = "TAKE_PROFIT"
    STOP_LOSS = "STOP_LOSS"
    GUARANTEED_STOP_LOSS = "GUARANTEED_STOP_LOSS"
    TRAILING_STOP_LOSS = "TRAILING_STOP_LOSS"
    FIXED_PRICE = "FIXED_PRICE"


class CancellableOrderType(str, Enum):
    LIMIT = "LIMIT"
    STOP = "STOP"
    MARKET_IF_TOUCHED = "MARKET_IF_TOUCHED"
    TAKE_PROFIT = "TAKE_PROFIT"
    STOP_LOSS = "STOP_LOSS"
    GUARANTEED_STOP_LOSS = "GUARANTEED_STOP_LOSS"
    TRAILING_STOP_LOSS = "TRAILING_STOP_LOSS"


class OrderState(str, Enum):
    PENDING = "PENDING"
    FILLED = "FILLED"
    TRIGGERED = "TRIGGERED"
    CANCELLED = "CANCELLED"


class OrderStateFilter(str, Enum):
    PENDING = "PENDING"
    FILLED = "FILLED"
    TRIGGERED = "TRIGGERED"
    CANCELLED = "CANCELLED"
    ALL = "ALL"


TERMINAL_ORDER_STATES = frozenset({OrderState.FILLED, OrderState.CANCELLED})


class OrderIdentifier(V20Model):
    order_id: OrderID
    client_order_id: Optional[ClientID] = None


class DynamicOrderState(V20Model):
    """Price-dependent state of a pending trailing stop loss order."""

    id: OrderID
    trailing_stop_value: DecimalNumber
    trigger_distance: Optional[DecimalNumber] = None
    is_trigger_distance_exact: Optional[bool] = None


class UnitsAvailableDetails(V20Model):
    long: DecimalNumber
    short: DecimalNumber


class UnitsAvailable(V20Model):
    """Units available for new orders under each position fill option."""

    default: UnitsAvailableDetails
    reduce_first: UnitsAvailableDetails
    reduce_only: UnitsAvailableDetails
    open_only: UnitsAvailableDetails


# ---------------------------------------------------------------------------
# Field sets
# ---------------------------------------------------------------------------


class OrderBase(TaggedModel):
    """Envelope and terminal-state fields carried by every order variant."""

    FAMILY = "order"

    id: OrderID
    create_time: DateTime
    state: OrderState
    client_extensions: Optional[ClientExtensions] = None
    filling_transaction_id: Optional[TransactionID] = None
    filled_time: Optional[DateTime] = None
    trade_opened_id: Optional[TradeID] = None
    trade_reduced_id: Optional[TradeID] = None
    trade_closed_ids: Optional[List[TradeID]] = None
    cancelling_transaction_id: Optional[TransactionID] = None
    cancelled_time: Optional[DateTime] = None

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_ORDER_STATES


class OnFillFields(V20Model):
    """Risk orders and trade extensions to create when an entry order fills."""

    take_profit_on_fill: Optional[TakeProfitDetails] = None
    stop_loss_on_fill: Optional[StopLossDetails] = None
    guaranteed_stop_loss_on_fill: Optional[GuaranteedStopLossDetails] = None
    trailing_stop_loss_on_fill: Optional[TrailingStopLossDetails] = None
    trade_client_extensions: Optional[ClientExtensions] = None


class ReplacementFields(V20Model):
    replaces_order_id: Optional[OrderID] = None
    replaced_by_order_id: Optional[OrderID] = None


class PriceTriggeredFields(V20Model):
    """Fields shared by orders that wait for a price to be reached."""

    instrument: InstrumentName
    units: DecimalNumber
    price: DecimalNumber
    time_in_force: TimeInForce = TimeInForce.GTC
    gtd_time: Optional[DateTime] = None
    position_fill: OrderPositionFill = OrderPositionFill.DEFAULT
    trigger_condition: OrderTriggerCondition = OrderTriggerCondition.DEFAULT


class TradeDependentFields(V20Model):
    """Fields shared by risk orders attached to an existing trade."""

    trade_id: TradeID
    client_trade_id: Optional[ClientID] = None
    time_in_force: TimeInForce = TimeInForce.GTC
    gtd_time: Optional[DateTime] = None
    trigger_condition: OrderTriggerCondition = OrderTriggerCondition.DEFAULT


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class MarketOrder(OrderBase, OnFillFields):
    type: OrderType = OrderType.MARKET
    instrument: InstrumentName
    units: DecimalNumber
    time_in_force: TimeInForce = TimeInForce.FOK
    price_bound: Optional[DecimalNumber] = None
    position_fill: OrderPositionFill = OrderPositionFill.DEFAULT
    trade_close: Optional[MarketOrderTradeClose] = None
    long_position_closeout: Optional[MarketOrderPositionCloseout] = None
    short_position_closeout: Optional[MarketOrderPositionCloseout] = None
    margin_closeout: Optional[MarketOrderMarginCloseout] = None
    delayed_trade_close: Optional[MarketOrderDelayedTradeClose] = None


class FixedPriceOrder(OrderBase, OnFillFields):
    type: OrderType = OrderType.FIXED_PRICE
    instrument: InstrumentName
    units: DecimalNumber
    price: DecimalNumber
    position_fill: OrderPositionFill = OrderPositionFill.DEFAULT
    trade_state: Optional[str] = None


class LimitOrder(OrderBase, PriceTriggeredFields, OnFillFields, ReplacementFields):
    type: OrderType = OrderType.LIMIT


class StopOrder(OrderBase, PriceTriggeredFields, OnFillFields, ReplacementFields):
    type: OrderType = OrderType.STOP
    price_bound: Optional[DecimalNumber] = None


class MarketIfTouchedOrder(OrderBase, PriceTriggeredFields, OnFillFields, ReplacementFields):
    type: OrderType = OrderType.MARKET_IF_TOUCHED
    price_bound: Optional[DecimalNumber] = None
    initial_market_price: Optional[DecimalNumber] = None


class TakeProfitOrder(OrderBase, TradeDependentFields, ReplacementFields):
    type: OrderType = OrderType.TAKE_PROFIT
    price: DecimalNumber


class StopLossOrder(OrderBase, TradeDependentFields, ReplacementFields):
    type: OrderType = OrderType.STOP_LOSS
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None
    guaranteed: Optional[bool] = None
    guaranteed_execution_premium: Optional[DecimalNumber] = None


class GuaranteedStopLossOrder(OrderBase, TradeDependentFields, ReplacementFields):
    type: OrderType = OrderType.GUARANTEED_STOP_LOSS
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None
    guaranteed_execution_premium: Optional[DecimalNumber] = None


class TrailingStopLossOrder(OrderBase, TradeDependentFields, ReplacementFields):
    type: OrderType = OrderType.TRAILING_STOP_LOSS
    distance: DecimalNumber
    trailing_stop_value: Optional[DecimalNumber] = None


Order = Union[
    MarketOrder,
    FixedPriceOrder,
    LimitOrder,
    StopOrder,
    MarketIfTouchedOrder,
    TakeProfitOrder,
    StopLossOrder,
    GuaranteedStopLossOrder,
    TrailingStopLossOrder,
]

ORDER_VARIANTS = (
    MarketOrder,
    FixedPriceOrder,
    LimitOrder,
    StopOrder,
    MarketIfTouchedOrder,
    TakeProfitOrder,
    StopLossOrder,
    GuaranteedStopLossOrder,
    TrailingStopLossOrder,
)


def trigger_price(order: Order) -> Optional[Decimal]:
    """Return the price at which ``order`` fills or triggers, if it has one.

    Market orders fill at the current price and have none.  Stop loss
    orders placed by distance have none until the server computes it.
    """
    match order:
        case MarketOrder():
            return None
        case FixedPriceOrder() | LimitOrder() | StopOrder() | MarketIfTouchedOrder() | TakeProfitOrder():
            return order.price
        case StopLossOrder() | GuaranteedStopLossOrder():
            return order.price
        case TrailingStopLossOrder():
            return order.trailing_stop_value
        case _:
            assert_never(order)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------


class OrderRequestBase(TaggedModel):
    """Order specification submitted when creating or replacing an order.

    Absent fields are left to the server's defaults.
    """

    FAMILY = "order request"

    client_extensions: Optional[ClientExtensions] = None


class EntryRequestFields(V20Model):
    instrument: InstrumentName
    units: DecimalNumber
    time_in_force: Optional[TimeInForce] = None
    position_fill: Optional[OrderPositionFill] = None
    take_profit_on_fill: Optional[TakeProfitDetails] = None
    stop_loss_on_fill: Optional[StopLossDetails] = None
    guaranteed_stop_loss_on_fill: Optional[GuaranteedStopLossDetails] = None
    trailing_stop_loss_on_fill: Optional[TrailingStopLossDetails] = None
    trade_client_extensions: Optional[ClientExtensions] = None


class PendingRequestFields(V20Model):
    price: DecimalNumber
    gtd_time: Optional[DateTime] = None
    trigger_condition: Optional[OrderTriggerCondition] = None


class TradeRequestFields(V20Model):
    trade_id: TradeID
    client_trade_id: Optional[ClientID] = None
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    trigger_condition: Optional[OrderTriggerCondition] = None


class MarketOrderRequest(OrderRequestBase, EntryRequestFields):
    type: OrderType = OrderType.MARKET
    price_bound: Optional[DecimalNumber] = None


class LimitOrderRequest(OrderRequestBase, EntryRequestFields, PendingRequestFields):
    type: OrderType = OrderType.LIMIT


class StopOrderRequest(OrderRequestBase, EntryRequestFields, PendingRequestFields):
    type: OrderType = OrderType.STOP
    price_bound: Optional[DecimalNumber] = None


class MarketIfTouchedOrderRequest(OrderRequestBase, EntryRequestFields, PendingRequestFields):
    type: OrderType = OrderType.MARKET_IF_TOUCHED
    price_bound: Optional[DecimalNumber] = None


class TakeProfitOrderRequest(OrderRequestBase, TradeRequestFields):
    type: OrderType = OrderType.TAKE_PROFIT
    price: DecimalNumber


class StopLossOrderRequest(OrderRequestBase, TradeRequestFields):
    type: OrderType = OrderType.STOP_LOSS
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None


class GuaranteedStopLossOrderRequest(OrderRequestBase, TradeRequestFields):
    type: OrderType = OrderType.GUARANTEED_STOP_LOSS
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None


class TrailingStopLossOrderRequest(OrderRequestBase, TradeRequestFields):
    type: OrderType = OrderType.TRAILING_STOP_LOSS
    distance: DecimalNumber


OrderRequest = Union[
    MarketOrderRequest,
    LimitOrderRequest,
    StopOrderRequest,
    MarketIfTouchedOrderRequest,
    TakeProfitOrderRequest,
    StopLossOrderRequest,
    GuaranteedStopLossOrderRequest,
    TrailingStopLossOrderRequest,
]
