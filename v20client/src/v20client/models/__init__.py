"""
Typed schema of the v20 REST and streaming API.

Every record is a frozen Pydantic model; see ``base.py`` for the wire
conventions.  The polymorphic ``Order`` and ``Transaction`` families are
resolved by ``variants.decode_order`` and ``variants.decode_transaction``.
"""

from .base import V20Model, format_rfc3339, wire_name  # noqa: F401
from .primitives import (  # noqa: F401
    AccountID,
    ClientID,
    Currency,
    Instrument,
    InstrumentName,
    OrderID,
    OrderSpecifier,
    RequestID,
    TradeID,
    TradeSpecifier,
    TransactionID,
    client_order_specifier,
    transaction_id_key,
)
from .common import ClientExtensions, TimeInForce  # noqa: F401
from .pricing import ClientPrice, PricingHeartbeat  # noqa: F401
from .order import ORDER_VARIANTS, Order, OrderRequest, OrderState, OrderType  # noqa: F401
from .transaction import (  # noqa: F401
    TRANSACTION_VARIANTS,
    Transaction,
    TransactionHeartbeat,
    TransactionRejectReason,
    TransactionType,
)
from .variants import decode_order, decode_transaction  # noqa: F401
from .trade import Trade, TradeSummary  # noqa: F401
from .position import Position  # noqa: F401
from .account import Account, AccountChanges, AccountChangesState, AccountSummary  # noqa: F401
from .instrument import Candlestick, CandlestickGranularity, OrderBook, PositionBook  # noqa: F401
