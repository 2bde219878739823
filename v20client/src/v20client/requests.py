"""
Request parameter and body models.

Query models are flattened by ``encode_query``: absent parameters are
omitted, lists are comma-joined, booleans are ``true``/``false``, datetimes
are RFC3339 and enumerations use their wire tokens.  Parameters are sorted
by name so the same request always produces the same URL.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from .models.base import DateTime, DecimalNumber, V20Model, format_decimal, format_rfc3339
from .models.common import (
    ClientExtensions,
    GuaranteedStopLossDetails,
    StopLossDetails,
    TakeProfitDetails,
    TrailingStopLossDetails,
)
from .models.instrument import CandlestickGranularity, WeeklyAlignment
from .models.order import OrderRequest, OrderStateFilter
from .models.pricing import PricingComponent
from .models.primitives import InstrumentName, OrderID, TradeID, TransactionID
from .models.trade import TradeStateFilter
from .models.transaction import TransactionFilter


def _query_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return format_rfc3339(value)
    if isinstance(value, Decimal):
        return format_decimal(value)
    return str(value)


def query_params(params: Optional[BaseModel]) -> List[Tuple[str, str]]:
    """Flatten a query model into sorted ``(name, value)`` pairs."""
    if params is None:
        return []
    data = params.model_dump(by_alias=True, exclude_none=True)
    pairs: List[Tuple[str, str]] = []
    for name in sorted(data):
        value = data[name]
        if isinstance(value, (list, tuple)) and not value:
            continue
        pairs.append((name, _query_value(value)))
    return pairs


def encode_query(params: Optional[BaseModel]) -> str:
    """Return the URL-encoded query string for ``params`` (without ``?``)."""
    return urlencode(query_params(params))


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


class AccountInstrumentsQuery(V20Model):
    instruments: List[InstrumentName] = Field(default_factory=list)


class AccountChangesQuery(V20Model):
    since_transaction_id: TransactionID


class CandlesQuery(V20Model):
    """Parameters of the candlestick endpoints."""

    price: Optional[PricingComponent] = None
    granularity: Optional[CandlestickGranularity] = None
    count: Optional[int] = None
    from_time: Optional[DateTime] = Field(default=None, alias="from")
    to: Optional[DateTime] = None
    smooth: Optional[bool] = None
    include_first: Optional[bool] = None
    daily_alignment: Optional[int] = None
    alignment_timezone: Optional[str] = None
    weekly_alignment: Optional[WeeklyAlignment] = None
    units: Optional[DecimalNumber] = None


class BookQuery(V20Model):
    time: Optional[DateTime] = None


class OrdersQuery(V20Model):
    ids: List[OrderID] = Field(default_factory=list)
    state: Optional[OrderStateFilter] = None
    instrument: Optional[InstrumentName] = None
    count: Optional[int] = None
    before_id: Optional[OrderID] = None


class TradesQuery(V20Model):
    ids: List[TradeID] = Field(default_factory=list)
    state: Optional[TradeStateFilter] = None
    instrument: Optional[InstrumentName] = None
    count: Optional[int] = None
    before_id: Optional[TradeID] = None


class TransactionPagesQuery(V20Model):
    from_time: Optional[DateTime] = Field(default=None, alias="from")
    to: Optional[DateTime] = None
    page_size: Optional[int] = None
    type: List[TransactionFilter] = Field(default_factory=list)


class TransactionRangeQuery(V20Model):
    from_id: TransactionID = Field(alias="from")
    to_id: TransactionID = Field(alias="to")
    type: List[TransactionFilter] = Field(default_factory=list)


class TransactionsSinceQuery(V20Model):
    id: TransactionID
    type: List[TransactionFilter] = Field(default_factory=list)


class LatestCandlesQuery(V20Model):
    # e.g. "EUR_USD:S10:BM"
    candle_specifications: List[str]
    units: Optional[DecimalNumber] = None
    smooth: Optional[bool] = None
    daily_alignment: Optional[int] = None
    alignment_timezone: Optional[str] = None
    weekly_alignment: Optional[WeeklyAlignment] = None


class PricingQuery(V20Model):
    instruments: List[InstrumentName]
    since: Optional[DateTime] = None
    include_home_conversions: Optional[bool] = None


class PricingStreamQuery(V20Model):
    instruments: List[InstrumentName]
    snapshot: Optional[bool] = None
    include_home_conversions: Optional[bool] = None


# ---------------------------------------------------------------------------
# Bodies
# ---------------------------------------------------------------------------


class AccountConfigurationBody(V20Model):
    alias: Optional[str] = None
    margin_rate: Optional[DecimalNumber] = None


class OrderBody(V20Model):
    """Body of the create and replace order endpoints."""

    order: OrderRequest


class OrderClientExtensionsBody(V20Model):
    client_extensions: Optional[ClientExtensions] = None
    trade_client_extensions: Optional[ClientExtensions] = None


class CloseTradeBody(V20Model):
    # "ALL" or a positive decimal number of units
    units: str = "ALL"


class TradeClientExtensionsBody(V20Model):
    client_extensions: ClientExtensions


class TradeOrdersBody(V20Model):
    take_profit: Optional[TakeProfitDetails] = None
    stop_loss: Optional[StopLossDetails] = None
    trailing_stop_loss: Optional[TrailingStopLossDetails] = None
    guaranteed_stop_loss: Optional[GuaranteedStopLossDetails] = None


class ClosePositionBody(V20Model):
    # "ALL", "NONE" or a decimal number of units for each side
    long_units: Optional[str] = None
    long_client_extensions: Optional[ClientExtensions] = None
    short_units: Optional[str] = None
    short_client_extensions: Optional[ClientExtensions] = None
