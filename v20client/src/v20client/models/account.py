"""
Account aggregate and its projections.

``Account`` is the full aggregate.  ``AccountSummary`` drops the trade,
position and order collections.  ``AccountChangesState`` carries only the
price-dependent fields, all of them optional.  ``AccountChanges`` lists the
entities that changed since a transaction.  All of them describe the same
account as of a ``lastTransactionID``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import DateTime, DecimalNumber, V20Model
from .common import AccountFinancingMode
from .order import DynamicOrderState
from .position import CalculatedPositionState, Position
from .primitives import AccountID, Currency, TransactionID
from .trade import CalculatedTradeState, TradeSummary
from .variants import OrderField, TransactionField


class GuaranteedStopLossOrderMode(str, Enum):
    DISABLED = "DISABLED"
    ALLOWED = "ALLOWED"
    REQUIRED = "REQUIRED"


class GuaranteedStopLossOrderMutability(str, Enum):
    FIXED = "FIXED"
    REPLACEABLE = "REPLACEABLE"
    CANCELABLE = "CANCELABLE"
    PRICE_WIDEN_ONLY = "PRICE_WIDEN_ONLY"


class PositionAggregationMode(str, Enum):
    ABSOLUTE_SUM = "ABSOLUTE_SUM"
    MAXIMAL_SIDE = "MAXIMAL_SIDE"
    NET_SUM = "NET_SUM"


class GuaranteedStopLossOrderParameters(V20Model):
    mutability_market_open: GuaranteedStopLossOrderMutability
    mutability_market_halted: GuaranteedStopLossOrderMutability


class AccountProperties(V20Model):
    id: AccountID
    mt4_account_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)


class CalculatedAccountFields(V20Model):
    """Price-dependent account state, valid as of ``lastTransactionID``."""

    unrealized_pl: Optional[DecimalNumber] = None
    nav: Optional[DecimalNumber] = None
    margin_used: Optional[DecimalNumber] = None
    margin_available: Optional[DecimalNumber] = None
    position_value: Optional[DecimalNumber] = None
    margin_closeout_unrealized_pl: Optional[DecimalNumber] = None
    margin_closeout_nav: Optional[DecimalNumber] = None
    margin_closeout_margin_used: Optional[DecimalNumber] = None
    margin_closeout_percent: Optional[DecimalNumber] = None
    margin_closeout_position_value: Optional[DecimalNumber] = None
    withdrawal_limit: Optional[DecimalNumber] = None
    margin_call_margin_used: Optional[DecimalNumber] = None
    margin_call_percent: Optional[DecimalNumber] = None
    balance: Optional[DecimalNumber] = None
    pl: Optional[DecimalNumber] = None
    resettable_pl: Optional[DecimalNumber] = None
    financing: Optional[DecimalNumber] = None
    commission: Optional[DecimalNumber] = None
    dividend_adjustment: Optional[DecimalNumber] = None
    guaranteed_execution_fees: Optional[DecimalNumber] = None
    margin_call_enter_time: Optional[DateTime] = None
    margin_call_extension_count: Optional[int] = None
    last_margin_call_extension_time: Optional[DateTime] = None


class AccountSummary(CalculatedAccountFields):
    id: AccountID
    alias: Optional[str] = None
    currency: Currency
    created_by_user_id: Optional[int] = None
    created_time: Optional[DateTime] = None
    guaranteed_stop_loss_order_parameters: Optional[GuaranteedStopLossOrderParameters] = None
    guaranteed_stop_loss_order_mode: Optional[GuaranteedStopLossOrderMode] = None
    resettable_pl_time: Optional[DateTime] = None
    margin_rate: Optional[DecimalNumber] = None
    open_trade_count: Optional[int] = None
    open_position_count: Optional[int] = None
    pending_order_count: Optional[int] = None
    hedging_enabled: Optional[bool] = None
    last_transaction_id: Optional[TransactionID] = None

    @field_validator("resettable_pl_time", mode="before")
    @classmethod
    def _never_reset(cls, value: Any) -> Any:
        # "0" means the resettable PL was never reset
        return None if value in ("0", 0) else value


class Account(AccountSummary):
    trades: List[TradeSummary] = Field(default_factory=list)
    positions: List[Position] = Field(default_factory=list)
    orders: List[OrderField] = Field(default_factory=list)


class AccountChangesState(CalculatedAccountFields):
    orders: List[DynamicOrderState] = Field(default_factory=list)
    trades: List[CalculatedTradeState] = Field(default_factory=list)
    positions: List[CalculatedPositionState] = Field(default_factory=list)


class AccountChanges(V20Model):
    orders_created: List[OrderField] = Field(default_factory=list)
    orders_cancelled: List[OrderField] = Field(default_factory=list)
    orders_filled: List[OrderField] = Field(default_factory=list)
    orders_triggered: List[OrderField] = Field(default_factory=list)
    trades_opened: List[TradeSummary] = Field(default_factory=list)
    trades_reduced: List[TradeSummary] = Field(default_factory=list)
    trades_closed: List[TradeSummary] = Field(default_factory=list)
    positions: List[Position] = Field(default_factory=list)
    transactions: List[TransactionField] = Field(default_factory=list)


class UserAttributes(V20Model):
    user_id: int
    username: str
    title: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    division_abbreviation: Optional[str] = None
    language_abbreviation: Optional[str] = None
    home_currency: Optional[Currency] = None


__all__ = [
    "Account",
    "AccountChanges",
    "AccountChangesState",
    "AccountFinancingMode",
    "AccountProperties",
    "AccountSummary",
    "CalculatedAccountFields",
    "GuaranteedStopLossOrderMode",
    "GuaranteedStopLossOrderMutability",
    "GuaranteedStopLossOrderParameters",
    "PositionAggregationMode",
    "UserAttributes",
]
