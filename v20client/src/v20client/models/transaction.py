"""
Transaction variants.

Transactions are the account's immutable, strictly ordered ledger.  Every
variant carries the same envelope (``id``, ``time``, ``userID``,
``accountID``, ``batchID``, ``requestID`` and ``type``).  Transactions that
the server creates together in response to one request share a
``batchID``.

Most order kinds come as a create/reject pair.  The pair shares one field
set class; the reject variant adds ``rejectReason`` (and, for replaceable
orders, ``intendedReplacesOrderID``).  A reject is never an instance of the
matching create variant.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from .base import DateTime, DecimalNumber, TaggedModel, V20Model
from .common import (
    ClientExtensions,
    MarketOrderDelayedTradeClose,
    MarketOrderMarginCloseout,
    MarketOrderPositionCloseout,
    MarketOrderTradeClose,
    OpenTradeDividendAdjustment,
    OrderPositionFill,
    OrderTriggerCondition,
    PositionFinancing,
    TimeInForce,
    TradeOpen,
    TradeReduce,
)
from .order import OnFillFields
from .pricing import ClientPrice
from .primitives import (
    AccountID,
    ClientID,
    Currency,
    HomeConversionFactors,
    InstrumentName,
    OrderID,
    RequestID,
    TradeID,
    TransactionID,
)


class TransactionType(str, Enum):
    CREATE = "CREATE"
    CLOSE = "CLOSE"
    REOPEN = "REOPEN"
    CLIENT_CONFIGURE = "CLIENT_CONFIGURE"
    CLIENT_CONFIGURE_REJECT = "CLIENT_CONFIGURE_REJECT"
    TRANSFER_FUNDS = "TRANSFER_FUNDS"
    TRANSFER_FUNDS_REJECT = "TRANSFER_FUNDS_REJECT"
    MARKET_ORDER = "MARKET_ORDER"
    MARKET_ORDER_REJECT = "MARKET_ORDER_REJECT"
    FIXED_PRICE_ORDER = "FIXED_PRICE_ORDER"
    LIMIT_ORDER = "LIMIT_ORDER"
    LIMIT_ORDER_REJECT = "LIMIT_ORDER_REJECT"
    STOP_ORDER = "STOP_ORDER"
    STOP_ORDER_REJECT = "STOP_ORDER_REJECT"
    MARKET_IF_TOUCHED_ORDER = "MARKET_IF_TOUCHED_ORDER"
    MARKET_IF_TOUCHED_ORDER_REJECT = "MARKET_IF_TOUCHED_ORDER_REJECT"
    TAKE_PROFIT_ORDER = "TAKE_PROFIT_ORDER"
    TAKE_PROFIT_ORDER_REJECT = "TAKE_PROFIT_ORDER_REJECT"
    STOP_LOSS_ORDER = "STOP_LOSS_ORDER"
    STOP_LOSS_ORDER_REJECT = "STOP_LOSS_ORDER_REJECT"
    GUARANTEED_STOP_LOSS_ORDER = "GUARANTEED_STOP_LOSS_ORDER"
    GUARANTEED_STOP_LOSS_ORDER_REJECT = "GUARANTEED_STOP_LOSS_ORDER_REJECT"
    TRAILING_STOP_LOSS_ORDER = "TRAILING_STOP_LOSS_ORDER"
    TRAILING_STOP_LOSS_ORDER_REJECT = "TRAILING_STOP_LOSS_ORDER_REJECT"
    ORDER_FILL = "ORDER_FILL"
    ORDER_CANCEL = "ORDER_CANCEL"
    ORDER_CANCEL_REJECT = "ORDER_CANCEL_REJECT"
    ORDER_CLIENT_EXTENSIONS_MODIFY = "ORDER_CLIENT_EXTENSIONS_MODIFY"
    ORDER_CLIENT_EXTENSIONS_MODIFY_REJECT = "ORDER_CLIENT_EXTENSIONS_MODIFY_REJECT"
    TRADE_CLIENT_EXTENSIONS_MODIFY = "TRADE_CLIENT_EXTENSIONS_MODIFY"
    TRADE_CLIENT_EXTENSIONS_MODIFY_REJECT = "TRADE_CLIENT_EXTENSIONS_MODIFY_REJECT"
    MARGIN_CALL_ENTER = "MARGIN_CALL_ENTER"
    MARGIN_CALL_EXTEND = "MARGIN_CALL_EXTEND"
    MARGIN_CALL_EXIT = "MARGIN_CALL_EXIT"
    DELAYED_TRADE_CLOSURE = "DELAYED_TRADE_CLOSURE"
    DAILY_FINANCING = "DAILY_FINANCING"
    DIVIDEND_ADJUSTMENT = "DIVIDEND_ADJUSTMENT"
    RESET_RESETTABLE_PL = "RESET_RESETTABLE_PL"


class TransactionFilter(str, Enum):
    """Values accepted by the ``type`` filter of the transaction queries."""

    ORDER = "ORDER"
    FUNDING = "FUNDING"
    ADMIN = "ADMIN"
    CREATE = "CREATE"
    CLOSE = "CLOSE"
    REOPEN = "REOPEN"
    CLIENT_CONFIGURE = "CLIENT_CONFIGURE"
    CLIENT_CONFIGURE_REJECT = "CLIENT_CONFIGURE_REJECT"
    TRANSFER_FUNDS = "TRANSFER_FUNDS"
    TRANSFER_FUNDS_REJECT = "TRANSFER_FUNDS_REJECT"
    MARKET_ORDER = "MARKET_ORDER"
    MARKET_ORDER_REJECT = "MARKET_ORDER_REJECT"
    LIMIT_ORDER = "LIMIT_ORDER"
    LIMIT_ORDER_REJECT = "LIMIT_ORDER_REJECT"
    STOP_ORDER = "STOP_ORDER"
    STOP_ORDER_REJECT = "STOP_ORDER_REJECT"
    MARKET_IF_TOUCHED_ORDER = "MARKET_IF_TOUCHED_ORDER"
    MARKET_IF_TOUCHED_ORDER_REJECT = "MARKET_IF_TOUCHED_ORDER_REJECT"
    TAKE_PROFIT_ORDER = "TAKE_PROFIT_ORDER"
    TAKE_PROFIT_ORDER_REJECT = "TAKE_PROFIT_ORDER_REJECT"
    STOP_LOSS_ORDER = "STOP_LOSS_ORDER"
    STOP_LOSS_ORDER_REJECT = "STOP_LOSS_ORDER_REJECT"
    GUARANTEED_STOP_LOSS_ORDER = "GUARANTEED_STOP_LOSS_ORDER"
    GUARANTEED_STOP_LOSS_ORDER_REJECT = "GUARANTEED_STOP_LOSS_ORDER_REJECT"
    TRAILING_STOP_LOSS_ORDER = "TRAILING_STOP_LOSS_ORDER"
    TRAILING_STOP_LOSS_ORDER_REJECT = "TRAILING_STOP_LOSS_ORDER_REJECT"
    ONE_CANCELS_ALL_ORDER = "ONE_CANCELS_ALL_ORDER"
    ONE_CANCELS_ALL_ORDER_REJECT = "ONE_CANCELS_ALL_ORDER_REJECT"
    ONE_CANCELS_ALL_ORDER_TRIGGERED = "ONE_CANCELS_ALL_ORDER_TRIGGERED"
    ORDER_FILL = "ORDER_FILL"
    ORDER_CANCEL = "ORDER_CANCEL"
    ORDER_CANCEL_REJECT = "ORDER_CANCEL_REJECT"
    ORDER_CLIENT_EXTENSIONS_MODIFY = "ORDER_CLIENT_EXTENSIONS_MODIFY"
    ORDER_CLIENT_EXTENSIONS_MODIFY_REJECT = "ORDER_CLIENT_EXTENSIONS_MODIFY_REJECT"
    TRADE_CLIENT_EXTENSIONS_MODIFY = "TRADE_CLIENT_EXTENSIONS_MODIFY"
    TRADE_CLIENT_EXTENSIONS_MODIFY_REJECT = "TRADE_CLIENT_EXTENSIONS_MODIFY_REJECT"
    MARGIN_CALL_ENTER = "MARGIN_CALL_ENTER"
    MARGIN_CALL_EXTEND = "MARGIN_CALL_EXTEND"
    MARGIN_CALL_EXIT = "MARGIN_CALL_EXIT"
    DELAYED_TRADE_CLOSURE = "DELAYED_TRADE_CLOSURE"
    DAILY_FINANCING = "DAILY_FINANCING"
    RESET_RESETTABLE_PL = "RESET_RESETTABLE_PL"


class FundingReason(str, Enum):
    CLIENT_FUNDING = "CLIENT_FUNDING"
    ACCOUNT_TRANSFER = "ACCOUNT_TRANSFER"
    DIVISION_MIGRATION = "DIVISION_MIGRATION"
    SITE_MIGRATION = "SITE_MIGRATION"
    ADJUSTMENT = "ADJUSTMENT"


class MarketOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    TRADE_CLOSE = "TRADE_CLOSE"
    POSITION_CLOSEOUT = "POSITION_CLOSEOUT"
    MARGIN_CLOSEOUT = "MARGIN_CLOSEOUT"
    DELAYED_TRADE_CLOSE = "DELAYED_TRADE_CLOSE"


class FixedPriceOrderReason(str, Enum):
    PLATFORM_ACCOUNT_MIGRATION = "PLATFORM_ACCOUNT_MIGRATION"
    TRADE_CLOSE_DIVISION_ACCOUNT_MIGRATION = "TRADE_CLOSE_DIVISION_ACCOUNT_MIGRATION"
    TRADE_CLOSE_ADMINISTRATIVE_ACTION = "TRADE_CLOSE_ADMINISTRATIVE_ACTION"


class LimitOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"


class StopOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"


class MarketIfTouchedOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"


class TakeProfitOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"
    ON_FILL = "ON_FILL"


class StopLossOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"
    ON_FILL = "ON_FILL"


class GuaranteedStopLossOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"
    ON_FILL = "ON_FILL"


class TrailingStopLossOrderReason(str, Enum):
    CLIENT_ORDER = "CLIENT_ORDER"
    REPLACEMENT = "REPLACEMENT"
    ON_FILL = "ON_FILL"


class TransactionRejectReason(str, Enum):
    """Why the server rejected a request; carried by every reject transaction."""

    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    INSTRUMENT_PRICE_UNKNOWN = "INSTRUMENT_PRICE_UNKNOWN"
    ACCOUNT_NOT_ACTIVE = "ACCOUNT_NOT_ACTIVE"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    ACCOUNT_ORDER_CREATION_LOCKED = "ACCOUNT_ORDER_CREATION_LOCKED"
    ACCOUNT_CONFIGURATION_LOCKED = "ACCOUNT_CONFIGURATION_LOCKED"
    ACCOUNT_DEPOSIT_LOCKED = "ACCOUNT_DEPOSIT_LOCKED"
    ACCOUNT_WITHDRAWAL_LOCKED = "ACCOUNT_WITHDRAWAL_LOCKED"
    ACCOUNT_ORDER_CANCEL_LOCKED = "ACCOUNT_ORDER_CANCEL_LOCKED"
    INSTRUMENT_NOT_TRADEABLE = "INSTRUMENT_NOT_TRADEABLE"
    PENDING_ORDERS_ALLOWED_EXCEEDED = "PENDING_ORDERS_ALLOWED_EXCEEDED"
    ORDER_ID_UNSPECIFIED = "ORDER_ID_UNSPECIFIED"
    ORDER_DOESNT_EXIST = "ORDER_DOESNT_EXIST"
    ORDER_IDENTIFIER_INCONSISTENCY = "ORDER_IDENTIFIER_INCONSISTENCY"
    TRADE_ID_UNSPECIFIED = "TRADE_ID_UNSPECIFIED"
    TRADE_DOESNT_EXIST = "TRADE_DOESNT_EXIST"
    TRADE_IDENTIFIER_INCONSISTENCY = "TRADE_IDENTIFIER_INCONSISTENCY"
    INSUFFICIENT_MARGIN = "INSUFFICIENT_MARGIN"
    INSTRUMENT_MISSING = "INSTRUMENT_MISSING"
    INSTRUMENT_UNKNOWN = "INSTRUMENT_UNKNOWN"
    UNITS_MISSING = "UNITS_MISSING"
    UNITS_INVALID = "UNITS_INVALID"
    UNITS_PRECISION_EXCEEDED = "UNITS_PRECISION_EXCEEDED"
    UNITS_LIMIT_EXCEEDED = "UNITS_LIMIT_EXCEEDED"
    UNITS_MINIMUM_NOT_MET = "UNITS_MINIMUM_NOT_MET"
    PRICE_MISSING = "PRICE_MISSING"
    PRICE_INVALID = "PRICE_INVALID"
    PRICE_PRECISION_EXCEEDED = "PRICE_PRECISION_EXCEEDED"
    PRICE_DISTANCE_MISSING = "PRICE_DISTANCE_MISSING"
    PRICE_DISTANCE_INVALID = "PRICE_DISTANCE_INVALID"
    PRICE_DISTANCE_PRECISION_EXCEEDED = "PRICE_DISTANCE_PRECISION_EXCEEDED"
    PRICE_DISTANCE_MAXIMUM_EXCEEDED = "PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    PRICE_DISTANCE_MINIMUM_NOT_MET = "PRICE_DISTANCE_MINIMUM_NOT_MET"
    TIME_IN_FORCE_MISSING = "TIME_IN_FORCE_MISSING"
    TIME_IN_FORCE_INVALID = "TIME_IN_FORCE_INVALID"
    TIME_IN_FORCE_GTD_TIMESTAMP_MISSING = "TIME_IN_FORCE_GTD_TIMESTAMP_MISSING"
    TIME_IN_FORCE_GTD_TIMESTAMP_IN_PAST = "TIME_IN_FORCE_GTD_TIMESTAMP_IN_PAST"
    PRICE_BOUND_INVALID = "PRICE_BOUND_INVALID"
    PRICE_BOUND_PRECISION_EXCEEDED = "PRICE_BOUND_PRECISION_EXCEEDED"
    ORDERS_ON_FILL_DUPLICATE_CLIENT_ORDER_IDS = "ORDERS_ON_FILL_DUPLICATE_CLIENT_ORDER_IDS"
    TRADE_ON_FILL_CLIENT_EXTENSIONS_NOT_SUPPORTED = "TRADE_ON_FILL_CLIENT_EXTENSIONS_NOT_SUPPORTED"
    CLIENT_ORDER_ID_INVALID = "CLIENT_ORDER_ID_INVALID"
    CLIENT_ORDER_ID_ALREADY_EXISTS = "CLIENT_ORDER_ID_ALREADY_EXISTS"
    CLIENT_ORDER_TAG_INVALID = "CLIENT_ORDER_TAG_INVALID"
    CLIENT_ORDER_COMMENT_INVALID = "CLIENT_ORDER_COMMENT_INVALID"
    CLIENT_TRADE_ID_INVALID = "CLIENT_TRADE_ID_INVALID"
    CLIENT_TRADE_ID_ALREADY_EXISTS = "CLIENT_TRADE_ID_ALREADY_EXISTS"
    CLIENT_TRADE_TAG_INVALID = "CLIENT_TRADE_TAG_INVALID"
    CLIENT_TRADE_COMMENT_INVALID = "CLIENT_TRADE_COMMENT_INVALID"
    ORDER_FILL_POSITION_ACTION_MISSING = "ORDER_FILL_POSITION_ACTION_MISSING"
    ORDER_FILL_POSITION_ACTION_INVALID = "ORDER_FILL_POSITION_ACTION_INVALID"
    TRIGGER_CONDITION_MISSING = "TRIGGER_CONDITION_MISSING"
    TRIGGER_CONDITION_INVALID = "TRIGGER_CONDITION_INVALID"
    ORDER_PARTIAL_FILL_OPTION_MISSING = "ORDER_PARTIAL_FILL_OPTION_MISSING"
    ORDER_PARTIAL_FILL_OPTION_INVALID = "ORDER_PARTIAL_FILL_OPTION_INVALID"
    INVALID_REISSUE_IMMEDIATE_PARTIAL_FILL = "INVALID_REISSUE_IMMEDIATE_PARTIAL_FILL"
    ORDERS_ON_FILL_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION = "ORDERS_ON_FILL_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION"
    ORDERS_ON_FILL_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION = "ORDERS_ON_FILL_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION"
    TAKE_PROFIT_ORDER_ALREADY_EXISTS = "TAKE_PROFIT_ORDER_ALREADY_EXISTS"
    TAKE_PROFIT_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD = "TAKE_PROFIT_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD"
    TAKE_PROFIT_ON_FILL_PRICE_MISSING = "TAKE_PROFIT_ON_FILL_PRICE_MISSING"
    TAKE_PROFIT_ON_FILL_PRICE_INVALID = "TAKE_PROFIT_ON_FILL_PRICE_INVALID"
    TAKE_PROFIT_ON_FILL_PRICE_PRECISION_EXCEEDED = "TAKE_PROFIT_ON_FILL_PRICE_PRECISION_EXCEEDED"
    TAKE_PROFIT_ON_FILL_TIME_IN_FORCE_MISSING = "TAKE_PROFIT_ON_FILL_TIME_IN_FORCE_MISSING"
    TAKE_PROFIT_ON_FILL_TIME_IN_FORCE_INVALID = "TAKE_PROFIT_ON_FILL_TIME_IN_FORCE_INVALID"
    TAKE_PROFIT_ON_FILL_GTD_TIMESTAMP_MISSING = "TAKE_PROFIT_ON_FILL_GTD_TIMESTAMP_MISSING"
    TAKE_PROFIT_ON_FILL_GTD_TIMESTAMP_IN_PAST = "TAKE_PROFIT_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    TAKE_PROFIT_ON_FILL_CLIENT_ORDER_ID_INVALID = "TAKE_PROFIT_ON_FILL_CLIENT_ORDER_ID_INVALID"
    TAKE_PROFIT_ON_FILL_CLIENT_ORDER_TAG_INVALID = "TAKE_PROFIT_ON_FILL_CLIENT_ORDER_TAG_INVALID"
    TAKE_PROFIT_ON_FILL_CLIENT_ORDER_COMMENT_INVALID = "TAKE_PROFIT_ON_FILL_CLIENT_ORDER_COMMENT_INVALID"
    TAKE_PROFIT_ON_FILL_TRIGGER_CONDITION_MISSING = "TAKE_PROFIT_ON_FILL_TRIGGER_CONDITION_MISSING"
    TAKE_PROFIT_ON_FILL_TRIGGER_CONDITION_INVALID = "TAKE_PROFIT_ON_FILL_TRIGGER_CONDITION_INVALID"
    STOP_LOSS_ORDER_ALREADY_EXISTS = "STOP_LOSS_ORDER_ALREADY_EXISTS"
    STOP_LOSS_ORDER_GUARANTEED_REQUIRED = "STOP_LOSS_ORDER_GUARANTEED_REQUIRED"
    STOP_LOSS_ORDER_GUARANTEED_PRICE_WITHIN_SPREAD = "STOP_LOSS_ORDER_GUARANTEED_PRICE_WITHIN_SPREAD"
    STOP_LOSS_ORDER_GUARANTEED_NOT_ALLOWED = "STOP_LOSS_ORDER_GUARANTEED_NOT_ALLOWED"
    STOP_LOSS_ORDER_GUARANTEED_HALTED_CREATE_VIOLATION = "STOP_LOSS_ORDER_GUARANTEED_HALTED_CREATE_VIOLATION"
    STOP_LOSS_ORDER_GUARANTEED_HALTED_TIGHTEN_VIOLATION = "STOP_LOSS_ORDER_GUARANTEED_HALTED_TIGHTEN_VIOLATION"
    STOP_LOSS_ORDER_GUARANTEED_HEDGING_NOT_ALLOWED = "STOP_LOSS_ORDER_GUARANTEED_HEDGING_NOT_ALLOWED"
    STOP_LOSS_ORDER_GUARANTEED_MINIMUM_DISTANCE_NOT_MET = "STOP_LOSS_ORDER_GUARANTEED_MINIMUM_DISTANCE_NOT_MET"
    STOP_LOSS_ORDER_NOT_CANCELABLE = "STOP_LOSS_ORDER_NOT_CANCELABLE"
    STOP_LOSS_ORDER_NOT_REPLACEABLE = "STOP_LOSS_ORDER_NOT_REPLACEABLE"
    STOP_LOSS_ORDER_GUARANTEED_LEVEL_RESTRICTION_EXCEEDED = "STOP_LOSS_ORDER_GUARANTEED_LEVEL_RESTRICTION_EXCEEDED"
    STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_SPECIFIED = "STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_SPECIFIED"
    STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_MISSING = "STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_MISSING"
    STOP_LOSS_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD = "STOP_LOSS_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD"
    STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION = "STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION"
    STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION = "STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION"
    STOP_LOSS_ON_FILL_REQUIRED_FOR_PENDING_ORDER = "STOP_LOSS_ON_FILL_REQUIRED_FOR_PENDING_ORDER"
    STOP_LOSS_ON_FILL_GUARANTEED_NOT_ALLOWED = "STOP_LOSS_ON_FILL_GUARANTEED_NOT_ALLOWED"
    STOP_LOSS_ON_FILL_GUARANTEED_REQUIRED = "STOP_LOSS_ON_FILL_GUARANTEED_REQUIRED"
    STOP_LOSS_ON_FILL_PRICE_MISSING = "STOP_LOSS_ON_FILL_PRICE_MISSING"
    STOP_LOSS_ON_FILL_PRICE_INVALID = "STOP_LOSS_ON_FILL_PRICE_INVALID"
    STOP_LOSS_ON_FILL_PRICE_PRECISION_EXCEEDED = "STOP_LOSS_ON_FILL_PRICE_PRECISION_EXCEEDED"
    STOP_LOSS_ON_FILL_GUARANTEED_MINIMUM_DISTANCE_NOT_MET = "STOP_LOSS_ON_FILL_GUARANTEED_MINIMUM_DISTANCE_NOT_MET"
    STOP_LOSS_ON_FILL_GUARANTEED_LEVEL_RESTRICTION_EXCEEDED = "STOP_LOSS_ON_FILL_GUARANTEED_LEVEL_RESTRICTION_EXCEEDED"
    STOP_LOSS_ON_FILL_DISTANCE_INVALID = "STOP_LOSS_ON_FILL_DISTANCE_INVALID"
    STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED = "STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    STOP_LOSS_ON_FILL_DISTANCE_PRECISION_EXCEEDED = "STOP_LOSS_ON_FILL_DISTANCE_PRECISION_EXCEEDED"
    STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_SPECIFIED = "STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_SPECIFIED"
    STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_MISSING = "STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_MISSING"
    STOP_LOSS_ON_FILL_TIME_IN_FORCE_MISSING = "STOP_LOSS_ON_FILL_TIME_IN_FORCE_MISSING"
    STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID = "STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID"
    STOP_LOSS_ON_FILL_GTD_TIMESTAMP_MISSING = "STOP_LOSS_ON_FILL_GTD_TIMESTAMP_MISSING"
    STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST = "STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_INVALID = "STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_INVALID"
    STOP_LOSS_ON_FILL_CLIENT_ORDER_TAG_INVALID = "STOP_LOSS_ON_FILL_CLIENT_ORDER_TAG_INVALID"
    STOP_LOSS_ON_FILL_CLIENT_ORDER_COMMENT_INVALID = "STOP_LOSS_ON_FILL_CLIENT_ORDER_COMMENT_INVALID"
    STOP_LOSS_ON_FILL_TRIGGER_CONDITION_MISSING = "STOP_LOSS_ON_FILL_TRIGGER_CONDITION_MISSING"
    STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID = "STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID"
    GUARANTEED_STOP_LOSS_ORDER_ALREADY_EXISTS = "GUARANTEED_STOP_LOSS_ORDER_ALREADY_EXISTS"
    GUARANTEED_STOP_LOSS_ORDER_REQUIRED = "GUARANTEED_STOP_LOSS_ORDER_REQUIRED"
    GUARANTEED_STOP_LOSS_ORDER_PRICE_WITHIN_SPREAD = "GUARANTEED_STOP_LOSS_ORDER_PRICE_WITHIN_SPREAD"
    GUARANTEED_STOP_LOSS_ORDER_NOT_ALLOWED = "GUARANTEED_STOP_LOSS_ORDER_NOT_ALLOWED"
    GUARANTEED_STOP_LOSS_ORDER_HALTED_CREATE_VIOLATION = "GUARANTEED_STOP_LOSS_ORDER_HALTED_CREATE_VIOLATION"
    GUARANTEED_STOP_LOSS_ORDER_CREATE_VIOLATION = "GUARANTEED_STOP_LOSS_ORDER_CREATE_VIOLATION"
    GUARANTEED_STOP_LOSS_ORDER_HALTED_TIGHTEN_VIOLATION = "GUARANTEED_STOP_LOSS_ORDER_HALTED_TIGHTEN_VIOLATION"
    GUARANTEED_STOP_LOSS_ORDER_TIGHTEN_VIOLATION = "GUARANTEED_STOP_LOSS_ORDER_TIGHTEN_VIOLATION"
    GUARANTEED_STOP_LOSS_ORDER_HEDGING_NOT_ALLOWED = "GUARANTEED_STOP_LOSS_ORDER_HEDGING_NOT_ALLOWED"
    GUARANTEED_STOP_LOSS_ORDER_MINIMUM_DISTANCE_NOT_MET = "GUARANTEED_STOP_LOSS_ORDER_MINIMUM_DISTANCE_NOT_MET"
    GUARANTEED_STOP_LOSS_ORDER_NOT_CANCELABLE = "GUARANTEED_STOP_LOSS_ORDER_NOT_CANCELABLE"
    GUARANTEED_STOP_LOSS_ORDER_HALTED_NOT_CANCELABLE = "GUARANTEED_STOP_LOSS_ORDER_HALTED_NOT_CANCELABLE"
    GUARANTEED_STOP_LOSS_ORDER_NOT_REPLACEABLE = "GUARANTEED_STOP_LOSS_ORDER_NOT_REPLACEABLE"
    GUARANTEED_STOP_LOSS_ORDER_HALTED_NOT_REPLACEABLE = "GUARANTEED_STOP_LOSS_ORDER_HALTED_NOT_REPLACEABLE"
    GUARANTEED_STOP_LOSS_ORDER_LEVEL_RESTRICTION_VOLUME_EXCEEDED = "GUARANTEED_STOP_LOSS_ORDER_LEVEL_RESTRICTION_VOLUME_EXCEEDED"
    GUARANTEED_STOP_LOSS_ORDER_LEVEL_RESTRICTION_PRICE_RANGE_EXCEEDED = "GUARANTEED_STOP_LOSS_ORDER_LEVEL_RESTRICTION_PRICE_RANGE_EXCEEDED"
    GUARANTEED_STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_SPECIFIED = "GUARANTEED_STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_SPECIFIED"
    GUARANTEED_STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_MISSING = "GUARANTEED_STOP_LOSS_ORDER_PRICE_AND_DISTANCE_BOTH_MISSING"
    GUARANTEED_STOP_LOSS_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD = "GUARANTEED_STOP_LOSS_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD"
    GUARANTEED_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION = "GUARANTEED_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION"
    GUARANTEED_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION = "GUARANTEED_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION"
    GUARANTEED_STOP_LOSS_ON_FILL_REQUIRED_FOR_PENDING_ORDER = "GUARANTEED_STOP_LOSS_ON_FILL_REQUIRED_FOR_PENDING_ORDER"
    GUARANTEED_STOP_LOSS_ON_FILL_NOT_ALLOWED = "GUARANTEED_STOP_LOSS_ON_FILL_NOT_ALLOWED"
    GUARANTEED_STOP_LOSS_ON_FILL_REQUIRED = "GUARANTEED_STOP_LOSS_ON_FILL_REQUIRED"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_MISSING = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_MISSING"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_PRECISION_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_PRECISION_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_MINIMUM_DISTANCE_NOT_MET = "GUARANTEED_STOP_LOSS_ON_FILL_MINIMUM_DISTANCE_NOT_MET"
    GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_VOLUME_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_VOLUME_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_PRICE_RANGE_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_PRICE_RANGE_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_DISTANCE_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_DISTANCE_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_DISTANCE_PRECISION_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_DISTANCE_PRECISION_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_SPECIFIED = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_SPECIFIED"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_MISSING = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_AND_DISTANCE_BOTH_MISSING"
    GUARANTEED_STOP_LOSS_ON_FILL_TIME_IN_FORCE_MISSING = "GUARANTEED_STOP_LOSS_ON_FILL_TIME_IN_FORCE_MISSING"
    GUARANTEED_STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_MISSING = "GUARANTEED_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_MISSING"
    GUARANTEED_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST = "GUARANTEED_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_TAG_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_TAG_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_COMMENT_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_COMMENT_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_MISSING = "GUARANTEED_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_MISSING"
    GUARANTEED_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID"
    TRAILING_STOP_LOSS_ORDER_ALREADY_EXISTS = "TRAILING_STOP_LOSS_ORDER_ALREADY_EXISTS"
    TRAILING_STOP_LOSS_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD = "TRAILING_STOP_LOSS_ORDER_WOULD_VIOLATE_FIFO_VIOLATION_SAFEGUARD"
    TRAILING_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION = "TRAILING_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION"
    TRAILING_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION = "TRAILING_STOP_LOSS_ORDER_RMO_MUTUAL_EXCLUSIVITY_GSLO_EXCLUDES_OTHERS_VIOLATION"
    TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MISSING = "TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MISSING"
    TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_INVALID = "TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_INVALID"
    TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_PRECISION_EXCEEDED = "TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_PRECISION_EXCEEDED"
    TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED = "TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MINIMUM_NOT_MET = "TRAILING_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MINIMUM_NOT_MET"
    TRAILING_STOP_LOSS_ON_FILL_TIME_IN_FORCE_MISSING = "TRAILING_STOP_LOSS_ON_FILL_TIME_IN_FORCE_MISSING"
    TRAILING_STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID = "TRAILING_STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID"
    TRAILING_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_MISSING = "TRAILING_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_MISSING"
    TRAILING_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST = "TRAILING_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_INVALID = "TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_INVALID"
    TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_TAG_INVALID = "TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_TAG_INVALID"
    TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_COMMENT_INVALID = "TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_COMMENT_INVALID"
    TRAILING_STOP_LOSS_ORDERS_NOT_SUPPORTED = "TRAILING_STOP_LOSS_ORDERS_NOT_SUPPORTED"
    TRAILING_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_MISSING = "TRAILING_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_MISSING"
    TRAILING_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID = "TRAILING_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID"
    CLOSE_TRADE_TYPE_MISSING = "CLOSE_TRADE_TYPE_MISSING"
    CLOSE_TRADE_PARTIAL_UNITS_MISSING = "CLOSE_TRADE_PARTIAL_UNITS_MISSING"
    CLOSE_TRADE_UNITS_EXCEED_TRADE_SIZE = "CLOSE_TRADE_UNITS_EXCEED_TRADE_SIZE"
    CLOSEOUT_POSITION_DOESNT_EXIST = "CLOSEOUT_POSITION_DOESNT_EXIST"
    CLOSEOUT_POSITION_INCOMPLETE_SPECIFICATION = "CLOSEOUT_POSITION_INCOMPLETE_SPECIFICATION"
    CLOSEOUT_POSITION_UNITS_EXCEED_POSITION_SIZE = "CLOSEOUT_POSITION_UNITS_EXCEED_POSITION_SIZE"
    CLOSEOUT_POSITION_REJECT = "CLOSEOUT_POSITION_REJECT"
    CLOSEOUT_POSITION_PARTIAL_UNITS_MISSING = "CLOSEOUT_POSITION_PARTIAL_UNITS_MISSING"
    MARKUP_GROUP_ID_INVALID = "MARKUP_GROUP_ID_INVALID"
    POSITION_AGGREGATION_MODE_INVALID = "POSITION_AGGREGATION_MODE_INVALID"
    ADMIN_CONFIGURE_DATA_MISSING = "ADMIN_CONFIGURE_DATA_MISSING"
    MARGIN_RATE_INVALID = "MARGIN_RATE_INVALID"
    MARGIN_RATE_WOULD_TRIGGER_CLOSEOUT = "MARGIN_RATE_WOULD_TRIGGER_CLOSEOUT"
    ALIAS_INVALID = "ALIAS_INVALID"
    CLIENT_CONFIGURE_DATA_MISSING = "CLIENT_CONFIGURE_DATA_MISSING"
    MARGIN_RATE_WOULD_TRIGGER_MARGIN_CALL = "MARGIN_RATE_WOULD_TRIGGER_MARGIN_CALL"
    AMOUNT_INVALID = "AMOUNT_INVALID"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    AMOUNT_MISSING = "AMOUNT_MISSING"
    FUNDING_REASON_MISSING = "FUNDING_REASON_MISSING"
    OCA_ORDER_IDS_STOP_LOSS_NOT_ALLOWED = "OCA_ORDER_IDS_STOP_LOSS_NOT_ALLOWED"
    CLIENT_EXTENSIONS_DATA_MISSING = "CLIENT_EXTENSIONS_DATA_MISSING"
    REPLACING_ORDER_INVALID = "REPLACING_ORDER_INVALID"
    REPLACING_TRADE_ID_INVALID = "REPLACING_TRADE_ID_INVALID"
    ORDER_CANCEL_WOULD_TRIGGER_CLOSEOUT = "ORDER_CANCEL_WOULD_TRIGGER_CLOSEOUT"


class OrderCancelReason(str, Enum):
    """Why an order was cancelled; carried by ORDER_CANCEL."""

    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    ACCOUNT_NEW_POSITIONS_LOCKED = "ACCOUNT_NEW_POSITIONS_LOCKED"
    ACCOUNT_ORDER_CREATION_LOCKED = "ACCOUNT_ORDER_CREATION_LOCKED"
    ACCOUNT_ORDER_FILL_LOCKED = "ACCOUNT_ORDER_FILL_LOCKED"
    CLIENT_REQUEST = "CLIENT_REQUEST"
    MIGRATION = "MIGRATION"
    MARKET_HALTED = "MARKET_HALTED"
    LINKED_TRADE_CLOSED = "LINKED_TRADE_CLOSED"
    TIME_IN_FORCE_EXPIRED = "TIME_IN_FORCE_EXPIRED"
    INSUFFICIENT_MARGIN = "INSUFFICIENT_MARGIN"
    FIFO_VIOLATION = "FIFO_VIOLATION"
    BOUNDS_VIOLATION = "BOUNDS_VIOLATION"
    CLIENT_REQUEST_REPLACED = "CLIENT_REQUEST_REPLACED"
    DIVIDEND_ADJUSTMENT_REPLACED = "DIVIDEND_ADJUSTMENT_REPLACED"
    INSUFFICIENT_LIQUIDITY = "INSUFFICIENT_LIQUIDITY"
    TAKE_PROFIT_ON_FILL_GTD_TIMESTAMP_IN_PAST = "TAKE_PROFIT_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    TAKE_PROFIT_ON_FILL_LOSS = "TAKE_PROFIT_ON_FILL_LOSS"
    LOSING_TAKE_PROFIT = "LOSING_TAKE_PROFIT"
    STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST = "STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    STOP_LOSS_ON_FILL_LOSS = "STOP_LOSS_ON_FILL_LOSS"
    STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED = "STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    STOP_LOSS_ON_FILL_REQUIRED = "STOP_LOSS_ON_FILL_REQUIRED"
    STOP_LOSS_ON_FILL_GUARANTEED_REQUIRED = "STOP_LOSS_ON_FILL_GUARANTEED_REQUIRED"
    STOP_LOSS_ON_FILL_GUARANTEED_NOT_ALLOWED = "STOP_LOSS_ON_FILL_GUARANTEED_NOT_ALLOWED"
    STOP_LOSS_ON_FILL_GUARANTEED_MINIMUM_DISTANCE_NOT_MET = "STOP_LOSS_ON_FILL_GUARANTEED_MINIMUM_DISTANCE_NOT_MET"
    STOP_LOSS_ON_FILL_GUARANTEED_LEVEL_RESTRICTION_EXCEEDED = "STOP_LOSS_ON_FILL_GUARANTEED_LEVEL_RESTRICTION_EXCEEDED"
    STOP_LOSS_ON_FILL_GUARANTEED_HEDGING_NOT_ALLOWED = "STOP_LOSS_ON_FILL_GUARANTEED_HEDGING_NOT_ALLOWED"
    STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID = "STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID"
    STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID = "STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST = "GUARANTEED_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    GUARANTEED_STOP_LOSS_ON_FILL_LOSS = "GUARANTEED_STOP_LOSS_ON_FILL_LOSS"
    GUARANTEED_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_REQUIRED = "GUARANTEED_STOP_LOSS_ON_FILL_REQUIRED"
    GUARANTEED_STOP_LOSS_ON_FILL_NOT_ALLOWED = "GUARANTEED_STOP_LOSS_ON_FILL_NOT_ALLOWED"
    GUARANTEED_STOP_LOSS_ON_FILL_MINIMUM_DISTANCE_NOT_MET = "GUARANTEED_STOP_LOSS_ON_FILL_MINIMUM_DISTANCE_NOT_MET"
    GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_VOLUME_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_VOLUME_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_PRICE_RANGE_EXCEEDED = "GUARANTEED_STOP_LOSS_ON_FILL_LEVEL_RESTRICTION_PRICE_RANGE_EXCEEDED"
    GUARANTEED_STOP_LOSS_ON_FILL_HEDGING_NOT_ALLOWED = "GUARANTEED_STOP_LOSS_ON_FILL_HEDGING_NOT_ALLOWED"
    GUARANTEED_STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_TIME_IN_FORCE_INVALID"
    GUARANTEED_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID = "GUARANTEED_STOP_LOSS_ON_FILL_TRIGGER_CONDITION_INVALID"
    TAKE_PROFIT_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED = "TAKE_PROFIT_ON_FILL_PRICE_DISTANCE_MAXIMUM_EXCEEDED"
    TRAILING_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST = "TRAILING_STOP_LOSS_ON_FILL_GTD_TIMESTAMP_IN_PAST"
    CLIENT_TRADE_ID_ALREADY_EXISTS = "CLIENT_TRADE_ID_ALREADY_EXISTS"
    POSITION_CLOSEOUT_FAILED = "POSITION_CLOSEOUT_FAILED"
    OPEN_TRADES_ALLOWED_EXCEEDED = "OPEN_TRADES_ALLOWED_EXCEEDED"
    PENDING_ORDERS_ALLOWED_EXCEEDED = "PENDING_ORDERS_ALLOWED_EXCEEDED"
    TAKE_PROFIT_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS = "TAKE_PROFIT_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS"
    STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS = "STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS"
    GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS = "GUARANTEED_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS"
    TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS = "TRAILING_STOP_LOSS_ON_FILL_CLIENT_ORDER_ID_ALREADY_EXISTS"
    POSITION_SIZE_EXCEEDED = "POSITION_SIZE_EXCEEDED"
    HEDGING_GSLO_VIOLATION = "HEDGING_GSLO_VIOLATION"
    ACCOUNT_POSITION_VALUE_LIMIT_EXCEEDED = "ACCOUNT_POSITION_VALUE_LIMIT_EXCEEDED"
    INSTRUMENT_BID_REDUCE_ONLY = "INSTRUMENT_BID_REDUCE_ONLY"
    INSTRUMENT_ASK_REDUCE_ONLY = "INSTRUMENT_ASK_REDUCE_ONLY"
    INSTRUMENT_BID_HALTED = "INSTRUMENT_BID_HALTED"
    INSTRUMENT_ASK_HALTED = "INSTRUMENT_ASK_HALTED"
    STOP_LOSS_ON_FILL_GUARANTEED_BID_HALTED = "STOP_LOSS_ON_FILL_GUARANTEED_BID_HALTED"
    STOP_LOSS_ON_FILL_GUARANTEED_ASK_HALTED = "STOP_LOSS_ON_FILL_GUARANTEED_ASK_HALTED"
    GUARANTEED_STOP_LOSS_ON_FILL_BID_HALTED = "GUARANTEED_STOP_LOSS_ON_FILL_BID_HALTED"
    GUARANTEED_STOP_LOSS_ON_FILL_ASK_HALTED = "GUARANTEED_STOP_LOSS_ON_FILL_ASK_HALTED"
    FIFO_VIOLATION_SAFEGUARD_VIOLATION = "FIFO_VIOLATION_SAFEGUARD_VIOLATION"
    FIFO_VIOLATION_SAFEGUARD_PARTIAL_CLOSE_VIOLATION = "FIFO_VIOLATION_SAFEGUARD_PARTIAL_CLOSE_VIOLATION"
    ORDERS_ON_FILL_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION = "ORDERS_ON_FILL_RMO_MUTUAL_EXCLUSIVITY_MUTUALLY_EXCLUSIVE_VIOLATION"


class OrderFillReason(str, Enum):
    LIMIT_ORDER = "LIMIT_ORDER"
    STOP_ORDER = "STOP_ORDER"
    MARKET_IF_TOUCHED_ORDER = "MARKET_IF_TOUCHED_ORDER"
    TAKE_PROFIT_ORDER = "TAKE_PROFIT_ORDER"
    STOP_LOSS_ORDER = "STOP_LOSS_ORDER"
    GUARANTEED_STOP_LOSS_ORDER = "GUARANTEED_STOP_LOSS_ORDER"
    TRAILING_STOP_LOSS_ORDER = "TRAILING_STOP_LOSS_ORDER"
    MARKET_ORDER = "MARKET_ORDER"
    MARKET_ORDER_TRADE_CLOSE = "MARKET_ORDER_TRADE_CLOSE"
    MARKET_ORDER_POSITION_CLOSEOUT = "MARKET_ORDER_POSITION_CLOSEOUT"
    MARKET_ORDER_MARGIN_CLOSEOUT = "MARKET_ORDER_MARGIN_CLOSEOUT"
    MARKET_ORDER_DELAYED_TRADE_CLOSE = "MARKET_ORDER_DELAYED_TRADE_CLOSE"
    FIXED_PRICE_ORDER = "FIXED_PRICE_ORDER"
    FIXED_PRICE_ORDER_PLATFORM_ACCOUNT_MIGRATION = "FIXED_PRICE_ORDER_PLATFORM_ACCOUNT_MIGRATION"
    FIXED_PRICE_ORDER_DIVISION_ACCOUNT_MIGRATION = "FIXED_PRICE_ORDER_DIVISION_ACCOUNT_MIGRATION"
    FIXED_PRICE_ORDER_ADMINISTRATIVE_ACTION = "FIXED_PRICE_ORDER_ADMINISTRATIVE_ACTION"


class TransactionHeartbeat(V20Model):
    """Keepalive frame of the transaction stream."""

    type: str = "HEARTBEAT"
    last_transaction_id: TransactionID
    time: DateTime


# ---------------------------------------------------------------------------
# Field sets
# ---------------------------------------------------------------------------


class TransactionBase(TaggedModel):
    """Envelope shared by every transaction variant."""

    FAMILY = "transaction"

    id: TransactionID
    time: DateTime
    user_id: int
    account_id: AccountID
    batch_id: TransactionID
    request_id: Optional[RequestID] = None


class RejectFields(V20Model):
    reject_reason: TransactionRejectReason


class ReplaceRejectFields(RejectFields):
    intended_replaces_order_id: Optional[OrderID] = None


class OrderLinkFields(V20Model):
    """Links from an order-creating transaction to related transactions."""

    replaces_order_id: Optional[OrderID] = None
    cancelling_transaction_id: Optional[TransactionID] = None


class ClientConfigureFields(V20Model):
    alias: Optional[str] = None
    margin_rate: Optional[DecimalNumber] = None


class TransferFundsFields(V20Model):
    amount: DecimalNumber
    funding_reason: Optional[FundingReason] = None
    comment: Optional[str] = None


class MarketOrderFields(OnFillFields):
    instrument: InstrumentName
    units: DecimalNumber
    time_in_force: Optional[TimeInForce] = None
    price_bound: Optional[DecimalNumber] = None
    position_fill: Optional[OrderPositionFill] = None
    trade_close: Optional[MarketOrderTradeClose] = None
    long_position_closeout: Optional[MarketOrderPositionCloseout] = None
    short_position_closeout: Optional[MarketOrderPositionCloseout] = None
    margin_closeout: Optional[MarketOrderMarginCloseout] = None
    delayed_trade_close: Optional[MarketOrderDelayedTradeClose] = None
    reason: Optional[MarketOrderReason] = None
    client_extensions: Optional[ClientExtensions] = None


class PendingOrderFields(OnFillFields):
    instrument: InstrumentName
    units: DecimalNumber
    price: DecimalNumber
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    position_fill: Optional[OrderPositionFill] = None
    trigger_condition: Optional[OrderTriggerCondition] = None
    client_extensions: Optional[ClientExtensions] = None


class LimitOrderFields(PendingOrderFields):
    reason: Optional[LimitOrderReason] = None


class StopOrderFields(PendingOrderFields):
    price_bound: Optional[DecimalNumber] = None
    reason: Optional[StopOrderReason] = None


class MarketIfTouchedOrderFields(PendingOrderFields):
    price_bound: Optional[DecimalNumber] = None
    reason: Optional[MarketIfTouchedOrderReason] = None


class RiskOrderFields(V20Model):
    """Fields shared by orders attached to an existing trade."""

    trade_id: TradeID
    client_trade_id: Optional[ClientID] = None
    time_in_force: Optional[TimeInForce] = None
    gtd_time: Optional[DateTime] = None
    trigger_condition: Optional[OrderTriggerCondition] = None
    client_extensions: Optional[ClientExtensions] = None
    order_fill_transaction_id: Optional[TransactionID] = None


class TakeProfitOrderFields(RiskOrderFields):
    price: DecimalNumber
    reason: Optional[TakeProfitOrderReason] = None


class StopLossOrderFields(RiskOrderFields):
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None
    guaranteed: Optional[bool] = None
    guaranteed_execution_premium: Optional[DecimalNumber] = None
    reason: Optional[StopLossOrderReason] = None


class GuaranteedStopLossOrderFields(RiskOrderFields):
    price: Optional[DecimalNumber] = None
    distance: Optional[DecimalNumber] = None
    guaranteed_execution_premium: Optional[DecimalNumber] = None
    reason: Optional[GuaranteedStopLossOrderReason] = None


class TrailingStopLossOrderFields(RiskOrderFields):
    distance: DecimalNumber
    reason: Optional[TrailingStopLossOrderReason] = None


class OrderClientExtensionsModifyFields(V20Model):
    order_id: OrderID
    client_order_id: Optional[ClientID] = None
    client_extensions_modify: Optional[ClientExtensions] = None
    trade_client_extensions_modify: Optional[ClientExtensions] = None


class TradeClientExtensionsModifyFields(V20Model):
    trade_id: TradeID
    client_trade_id: Optional[ClientID] = None
    trade_client_extensions_modify: Optional[ClientExtensions] = None


# ---------------------------------------------------------------------------
# Account lifecycle
# ---------------------------------------------------------------------------


class CreateTransaction(TransactionBase):
    type: TransactionType = TransactionType.CREATE
    division_id: Optional[int] = None
    site_id: Optional[int] = None
    account_user_id: Optional[int] = None
    account_number: Optional[int] = None
    home_currency: Optional[Currency] = None


class CloseTransaction(TransactionBase):
    type: TransactionType = TransactionType.CLOSE


class ReopenTransaction(TransactionBase):
    type: TransactionType = TransactionType.REOPEN


class ClientConfigureTransaction(TransactionBase, ClientConfigureFields):
    type: TransactionType = TransactionType.CLIENT_CONFIGURE


class ClientConfigureRejectTransaction(TransactionBase, ClientConfigureFields, RejectFields):
    type: TransactionType = TransactionType.CLIENT_CONFIGURE_REJECT


class TransferFundsTransaction(TransactionBase, TransferFundsFields):
    type: TransactionType = TransactionType.TRANSFER_FUNDS
    account_balance: Optional[DecimalNumber] = None


class TransferFundsRejectTransaction(TransactionBase, TransferFundsFields, RejectFields):
    type: TransactionType = TransactionType.TRANSFER_FUNDS_REJECT


# ---------------------------------------------------------------------------
# Order creation
# ---------------------------------------------------------------------------


class MarketOrderTransaction(TransactionBase, MarketOrderFields):
    type: TransactionType = TransactionType.MARKET_ORDER


class MarketOrderRejectTransaction(TransactionBase, MarketOrderFields, RejectFields):
    type: TransactionType = TransactionType.MARKET_ORDER_REJECT


class FixedPriceOrderTransaction(TransactionBase, OnFillFields):
    type: TransactionType = TransactionType.FIXED_PRICE_ORDER
    instrument: InstrumentName
    units: DecimalNumber
    price: DecimalNumber
    position_fill: Optional[OrderPositionFill] = None
    trade_state: Optional[str] = None
    reason: Optional[FixedPriceOrderReason] = None
    client_extensions: Optional[ClientExtensions] = None


class LimitOrderTransaction(TransactionBase, LimitOrderFields, OrderLinkFields):
    type: TransactionType = TransactionType.LIMIT_ORDER


class LimitOrderRejectTransaction(TransactionBase, LimitOrderFields, ReplaceRejectFields):
    type: TransactionType = TransactionType.LIMIT_ORDER_REJECT


class StopOrderTransaction(TransactionBase, StopOrderFields, OrderLinkFields):
    type: TransactionType = TransactionType.STOP_ORDER


class StopOrderRejectTransaction(TransactionBase, StopOrderFields, ReplaceRejectFields):
    type: TransactionType = TransactionType.STOP_ORDER_REJECT


class MarketIfTouchedOrderTransaction(TransactionBase, MarketIfTouchedOrderFields, OrderLinkFields):
    type: TransactionType = TransactionType.MARKET_IF_TOUCHED_ORDER


class MarketIfTouchedOrderRejectTransaction(
    TransactionBase, MarketIfTouchedOrderFields, ReplaceRejectFields
):
    type: TransactionType = TransactionType.MARKET_IF_TOUCHED_ORDER_REJECT


class TakeProfitOrderTransaction(TransactionBase, TakeProfitOrderFields, OrderLinkFields):
    type: TransactionType = TransactionType.TAKE_PROFIT_ORDER


class TakeProfitOrderRejectTransaction(TransactionBase, TakeProfitOrderFields, ReplaceRejectFields):
    type: TransactionType = TransactionType.TAKE_PROFIT_ORDER_REJECT


class StopLossOrderTransaction(TransactionBase, StopLossOrderFields, OrderLinkFields):
    type: TransactionType = TransactionType.STOP_LOSS_ORDER


class StopLossOrderRejectTransaction(TransactionBase, StopLossOrderFields, ReplaceRejectFields):
    type: TransactionType = TransactionType.STOP_LOSS_ORDER_REJECT


class GuaranteedStopLossOrderTransaction(
    TransactionBase, GuaranteedStopLossOrderFields, OrderLinkFields
):
    type: TransactionType = TransactionType.GUARANTEED_STOP_LOSS_ORDER


class GuaranteedStopLossOrderRejectTransaction(
    TransactionBase, GuaranteedStopLossOrderFields, ReplaceRejectFields
):
    type: TransactionType = TransactionType.GUARANTEED_STOP_LOSS_ORDER_REJECT


class TrailingStopLossOrderTransaction(TransactionBase, TrailingStopLossOrderFields, OrderLinkFields):
    type: TransactionType = TransactionType.TRAILING_STOP_LOSS_ORDER


class TrailingStopLossOrderRejectTransaction(
    TransactionBase, TrailingStopLossOrderFields, ReplaceRejectFields
):
    type: TransactionType = TransactionType.TRAILING_STOP_LOSS_ORDER_REJECT


# ---------------------------------------------------------------------------
# Order and trade outcomes
# ---------------------------------------------------------------------------


class OrderFillTransaction(TransactionBase):
    """An order was filled, opening, reducing or closing trades."""

    type: TransactionType = TransactionType.ORDER_FILL
    order_id: OrderID
    client_order_id: Optional[ClientID] = None
    instrument: InstrumentName
    units: DecimalNumber
    home_conversion_factors: Optional[HomeConversionFactors] = None
    full_vwap: Optional[DecimalNumber] = None
    full_price: Optional[ClientPrice] = None
    reason: Optional[OrderFillReason] = None
    pl: Optional[DecimalNumber] = None
    quote_pl: Optional[DecimalNumber] = None
    financing: Optional[DecimalNumber] = None
    base_financing: Optional[DecimalNumber] = None
    quote_financing: Optional[DecimalNumber] = None
    commission: Optional[DecimalNumber] = None
    guaranteed_execution_fee: Optional[DecimalNumber] = None
    quote_guaranteed_execution_fee: Optional[DecimalNumber] = None
    account_balance: Optional[DecimalNumber] = None
    trade_opened: Optional[TradeOpen] = None
    trades_closed: List[TradeReduce] = Field(default_factory=list)
    trade_reduced: Optional[TradeReduce] = None
    half_spread_cost: Optional[DecimalNumber] = None


class OrderCancelTransaction(TransactionBase):
    type: TransactionType = TransactionType.ORDER_CANCEL
    order_id: OrderID
    client_order_id: Optional[ClientID] = None
    reason: OrderCancelReason
    replaced_by_order_id: Optional[OrderID] = None


class OrderCancelRejectTransaction(TransactionBase, RejectFields):
    type: TransactionType = TransactionType.ORDER_CANCEL_REJECT
    order_id: OrderID
    client_order_id: Optional[ClientID] = None


class OrderClientExtensionsModifyTransaction(TransactionBase, OrderClientExtensionsModifyFields):
    type: TransactionType = TransactionType.ORDER_CLIENT_EXTENSIONS_MODIFY


class OrderClientExtensionsModifyRejectTransaction(
    TransactionBase, OrderClientExtensionsModifyFields, RejectFields
):
    type: TransactionType = TransactionType.ORDER_CLIENT_EXTENSIONS_MODIFY_REJECT


class TradeClientExtensionsModifyTransaction(TransactionBase, TradeClientExtensionsModifyFields):
    type: TransactionType = TransactionType.TRADE_CLIENT_EXTENSIONS_MODIFY


class TradeClientExtensionsModifyRejectTransaction(
    TransactionBase, TradeClientExtensionsModifyFields, RejectFields
):
    type: TransactionType = TransactionType.TRADE_CLIENT_EXTENSIONS_MODIFY_REJECT


# ---------------------------------------------------------------------------
# Margin, financing and administrative events
# ---------------------------------------------------------------------------


class MarginCallEnterTransaction(TransactionBase):
    type: TransactionType = TransactionType.MARGIN_CALL_ENTER


class MarginCallExtendTransaction(TransactionBase):
    type: TransactionType = TransactionType.MARGIN_CALL_EXTEND
    extension_number: Optional[int] = None


class MarginCallExitTransaction(TransactionBase):
    type: TransactionType = TransactionType.MARGIN_CALL_EXIT


class DelayedTradeClosureTransaction(TransactionBase):
    type: TransactionType = TransactionType.DELAYED_TRADE_CLOSURE
    reason: Optional[MarketOrderReason] = None
    trade_ids: List[TradeID] = Field(default_factory=list)


class DailyFinancingTransaction(TransactionBase):
    type: TransactionType = TransactionType.DAILY_FINANCING
    financing: Optional[DecimalNumber] = None
    account_balance: Optional[DecimalNumber] = None
    position_financings: List[PositionFinancing] = Field(default_factory=list)


class DividendAdjustmentTransaction(TransactionBase):
    type: TransactionType = TransactionType.DIVIDEND_ADJUSTMENT
    instrument: InstrumentName
    dividend_adjustment: DecimalNumber
    quote_dividend_adjustment: Optional[DecimalNumber] = None
    home_conversion_factors: Optional[HomeConversionFactors] = None
    account_balance: Optional[DecimalNumber] = None
    open_trade_dividend_adjustments: List[OpenTradeDividendAdjustment] = Field(default_factory=list)


class ResetResettablePLTransaction(TransactionBase):
    type: TransactionType = TransactionType.RESET_RESETTABLE_PL


Transaction = Union[
    CreateTransaction,
    CloseTransaction,
    ReopenTransaction,
    ClientConfigureTransaction,
    ClientConfigureRejectTransaction,
    TransferFundsTransaction,
    TransferFundsRejectTransaction,
    MarketOrderTransaction,
    MarketOrderRejectTransaction,
    FixedPriceOrderTransaction,
    LimitOrderTransaction,
    LimitOrderRejectTransaction,
    StopOrderTransaction,
    StopOrderRejectTransaction,
    MarketIfTouchedOrderTransaction,
    MarketIfTouchedOrderRejectTransaction,
    TakeProfitOrderTransaction,
    TakeProfitOrderRejectTransaction,
    StopLossOrderTransaction,
    StopLossOrderRejectTransaction,
    GuaranteedStopLossOrderTransaction,
    GuaranteedStopLossOrderRejectTransaction,
    TrailingStopLossOrderTransaction,
    TrailingStopLossOrderRejectTransaction,
    OrderFillTransaction,
    OrderCancelTransaction,
    OrderCancelRejectTransaction,
    OrderClientExtensionsModifyTransaction,
    OrderClientExtensionsModifyRejectTransaction,
    TradeClientExtensionsModifyTransaction,
    TradeClientExtensionsModifyRejectTransaction,
    MarginCallEnterTransaction,
    MarginCallExtendTransaction,
    MarginCallExitTransaction,
    DelayedTradeClosureTransaction,
    DailyFinancingTransaction,
    DividendAdjustmentTransaction,
    ResetResettablePLTransaction,
]

TRANSACTION_VARIANTS = (
    CreateTransaction,
    CloseTransaction,
    ReopenTransaction,
    ClientConfigureTransaction,
    ClientConfigureRejectTransaction,
    TransferFundsTransaction,
    TransferFundsRejectTransaction,
    MarketOrderTransaction,
    MarketOrderRejectTransaction,
    FixedPriceOrderTransaction,
    LimitOrderTransaction,
    LimitOrderRejectTransaction,
    StopOrderTransaction,
    StopOrderRejectTransaction,
    MarketIfTouchedOrderTransaction,
    MarketIfTouchedOrderRejectTransaction,
    TakeProfitOrderTransaction,
    TakeProfitOrderRejectTransaction,
    StopLossOrderTransaction,
    StopLossOrderRejectTransaction,
    GuaranteedStopLossOrderTransaction,
    GuaranteedStopLossOrderRejectTransaction,
    TrailingStopLossOrderTransaction,
    TrailingStopLossOrderRejectTransaction,
    OrderFillTransaction,
    OrderCancelTransaction,
    OrderCancelRejectTransaction,
    OrderClientExtensionsModifyTransaction,
    OrderClientExtensionsModifyRejectTransaction,
    TradeClientExtensionsModifyTransaction,
    TradeClientExtensionsModifyRejectTransaction,
    MarginCallEnterTransaction,
    MarginCallExtendTransaction,
    MarginCallExitTransaction,
    DelayedTradeClosureTransaction,
    DailyFinancingTransaction,
    DividendAdjustmentTransaction,
    ResetResettablePLTransaction,
)

REJECT_VARIANTS = tuple(cls for cls in TRANSACTION_VARIANTS if issubclass(cls, RejectFields))
