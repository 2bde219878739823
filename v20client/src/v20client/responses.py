"""
Response bodies of the v20 endpoints.

State-changing endpoints answer with the transactions the call produced
plus the account's ``lastTransactionID``.  Which optional transaction
fields are present is the only reliable signal of what happened; for
example ``CreateOrderResponse.order_fill_transaction`` is set only when the
order filled immediately.  Each documented 4xx status has an error body
that carries the reject transaction, if the server created one.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .models.account import Account, AccountChanges, AccountChangesState, AccountProperties, AccountSummary
from .models.base import DateTime, V20Model
from .models.instrument import Candlestick, CandlestickGranularity, OrderBook, PositionBook
from .models.position import Position
from .models.pricing import ClientPrice, HomeConversions
from .models.primitives import Instrument, InstrumentName, TransactionID, transaction_id_key
from .models.trade import Trade
from .models.transaction import (
    TRANSACTION_VARIANTS,
    ClientConfigureRejectTransaction,
    ClientConfigureTransaction,
    MarketOrderRejectTransaction,
    MarketOrderTransaction,
    OrderCancelRejectTransaction,
    OrderCancelTransaction,
    OrderClientExtensionsModifyRejectTransaction,
    OrderClientExtensionsModifyTransaction,
    OrderFillTransaction,
    TradeClientExtensionsModifyRejectTransaction,
    TradeClientExtensionsModifyTransaction,
    Transaction,
    TransactionFilter,
)
from .models.variants import OrderField, TransactionField


class ChangeResponse(V20Model):
    """Common tail of every state-changing success response."""

    related_transaction_ids: List[TransactionID] = Field(default_factory=list)
    last_transaction_id: Optional[TransactionID] = None

    def produced_transactions(self) -> List[Transaction]:
        """Return every transaction carried by this response, in id order."""
        found: List[Transaction] = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, TRANSACTION_VARIANTS):
                found.append(value)
        return sorted(found, key=lambda txn: transaction_id_key(txn.id))


class ErrorResponse(V20Model):
    """Common shape of the documented error bodies."""

    error_code: Optional[str] = None
    error_message: Optional[str] = None
    last_transaction_id: Optional[TransactionID] = None
    related_transaction_ids: List[TransactionID] = Field(default_factory=list)

    def reject_transaction(self) -> Optional[Transaction]:
        """Return the first reject transaction carried by the body, if any."""
        for name in type(self).model_fields:
            if name.endswith("reject_transaction"):
                value = getattr(self, name)
                if value is not None:
                    return value
        return None


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class AccountListResponse(V20Model):
    accounts: List[AccountProperties] = Field(default_factory=list)


class AccountResponse(V20Model):
    account: Account
    last_transaction_id: TransactionID


class AccountSummaryResponse(V20Model):
    account: AccountSummary
    last_transaction_id: TransactionID


class AccountInstrumentsResponse(V20Model):
    instruments: List[Instrument] = Field(default_factory=list)
    last_transaction_id: TransactionID


class AccountConfigurationResponse(ChangeResponse):
    client_configure_transaction: ClientConfigureTransaction


class AccountConfigurationErrorResponse(ErrorResponse):
    client_configure_reject_transaction: Optional[ClientConfigureRejectTransaction] = None


class AccountChangesResponse(V20Model):
    changes: AccountChanges
    state: AccountChangesState
    last_transaction_id: TransactionID


# ---------------------------------------------------------------------------
# Instruments and pricing
# ---------------------------------------------------------------------------


class CandlesResponse(V20Model):
    instrument: InstrumentName
    granularity: CandlestickGranularity
    candles: List[Candlestick] = Field(default_factory=list)


class LatestCandlesResponse(V20Model):
    latest_candles: List[CandlesResponse] = Field(default_factory=list)


class OrderBookResponse(V20Model):
    order_book: OrderBook


class PositionBookResponse(V20Model):
    position_book: PositionBook


class PricingResponse(V20Model):
    prices: List[ClientPrice] = Field(default_factory=list)
    home_conversions: List[HomeConversions] = Field(default_factory=list)
    time: Optional[DateTime] = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class CreateOrderResponse(ChangeResponse):
    order_create_transaction: TransactionField
    order_fill_transaction: Optional[OrderFillTransaction] = None
    order_cancel_transaction: Optional[OrderCancelTransaction] = None
    order_reissue_transaction: Optional[TransactionField] = None
    order_reissue_reject_transaction: Optional[TransactionField] = None

    @property
    def filled(self) -> bool:
        return self.order_fill_transaction is not None


class CreateOrderErrorResponse(ErrorResponse):
    order_reject_transaction: Optional[TransactionField] = None


class OrdersResponse(V20Model):
    orders: List[OrderField] = Field(default_factory=list)
    last_transaction_id: TransactionID


class OrderResponse(V20Model):
    order: OrderField
    last_transaction_id: TransactionID


class ReplaceOrderResponse(ChangeResponse):
    order_cancel_transaction: OrderCancelTransaction
    order_create_transaction: TransactionField
    order_fill_transaction: Optional[OrderFillTransaction] = None
    order_reissue_transaction: Optional[TransactionField] = None
    order_reissue_reject_transaction: Optional[TransactionField] = None
    replacing_order_cancel_transaction: Optional[OrderCancelTransaction] = None


class ReplaceOrderErrorResponse(ErrorResponse):
    order_cancel_reject_transaction: Optional[OrderCancelRejectTransaction] = None
    order_reject_transaction: Optional[TransactionField] = None


class CancelOrderResponse(ChangeResponse):
    order_cancel_transaction: OrderCancelTransaction


class CancelOrderErrorResponse(ErrorResponse):
    order_cancel_reject_transaction: Optional[OrderCancelRejectTransaction] = None


class OrderClientExtensionsResponse(ChangeResponse):
    order_client_extensions_modify_transaction: OrderClientExtensionsModifyTransaction


class OrderClientExtensionsErrorResponse(ErrorResponse):
    order_client_extensions_modify_reject_transaction: Optional[
        OrderClientExtensionsModifyRejectTransaction
    ] = None


# ---------------------------------------------------------------------------
# Trades
# ---------------------------------------------------------------------------


class TradesResponse(V20Model):
    trades: List[Trade] = Field(default_factory=list)
    last_transaction_id: TransactionID


class TradeResponse(V20Model):
    trade: Trade
    last_transaction_id: TransactionID


class CloseTradeResponse(ChangeResponse):
    order_create_transaction: MarketOrderTransaction
    order_fill_transaction: Optional[OrderFillTransaction] = None
    order_cancel_transaction: Optional[OrderCancelTransaction] = None


class CloseTradeErrorResponse(ErrorResponse):
    order_reject_transaction: Optional[MarketOrderRejectTransaction] = None


class TradeClientExtensionsResponse(ChangeResponse):
    trade_client_extensions_modify_transaction: TradeClientExtensionsModifyTransaction


class TradeClientExtensionsErrorResponse(ErrorResponse):
    trade_client_extensions_modify_reject_transaction: Optional[
        TradeClientExtensionsModifyRejectTransaction
    ] = None


class TradeOrdersResponse(ChangeResponse):
    take_profit_order_cancel_transaction: Optional[OrderCancelTransaction] = None
    take_profit_order_transaction: Optional[TransactionField] = None
    take_profit_order_fill_transaction: Optional[OrderFillTransaction] = None
    take_profit_order_created_cancel_transaction: Optional[OrderCancelTransaction] = None
    stop_loss_order_cancel_transaction: Optional[OrderCancelTransaction] = None
    stop_loss_order_transaction: Optional[TransactionField] = None
    stop_loss_order_fill_transaction: Optional[OrderFillTransaction] = None
    stop_loss_order_created_cancel_transaction: Optional[OrderCancelTransaction] = None
    trailing_stop_loss_order_cancel_transaction: Optional[OrderCancelTransaction] = None
    trailing_stop_loss_order_transaction: Optional[TransactionField] = None
    guaranteed_stop_loss_order_cancel_transaction: Optional[OrderCancelTransaction] = None
    guaranteed_stop_loss_order_transaction: Optional[TransactionField] = None


class TradeOrdersErrorResponse(ErrorResponse):
    take_profit_order_cancel_reject_transaction: Optional[OrderCancelRejectTransaction] = None
    take_profit_order_reject_transaction: Optional[TransactionField] = None
    stop_loss_order_cancel_reject_transaction: Optional[OrderCancelRejectTransaction] = None
    stop_loss_order_reject_transaction: Optional[TransactionField] = None
    trailing_stop_loss_order_cancel_reject_transaction: Optional[OrderCancelRejectTransaction] = None
    trailing_stop_loss_order_reject_transaction: Optional[TransactionField] = None
    guaranteed_stop_loss_order_cancel_reject_transaction: Optional[OrderCancelRejectTransaction] = None
    guaranteed_stop_loss_order_reject_transaction: Optional[TransactionField] = None


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


class PositionsResponse(V20Model):
    positions: List[Position] = Field(default_factory=list)
    last_transaction_id: TransactionID


class PositionResponse(V20Model):
    position: Position
    last_transaction_id: TransactionID


class ClosePositionResponse(ChangeResponse):
    long_order_create_transaction: Optional[MarketOrderTransaction] = None
    long_order_fill_transaction: Optional[OrderFillTransaction] = None
    long_order_cancel_transaction: Optional[OrderCancelTransaction] = None
    short_order_create_transaction: Optional[MarketOrderTransaction] = None
    short_order_fill_transaction: Optional[OrderFillTransaction] = None
    short_order_cancel_transaction: Optional[OrderCancelTransaction] = None


class ClosePositionErrorResponse(ErrorResponse):
    long_order_reject_transaction: Optional[MarketOrderRejectTransaction] = None
    short_order_reject_transaction: Optional[MarketOrderRejectTransaction] = None


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class TransactionPagesResponse(V20Model):
    """Paged view of the transaction history; ``pages`` are fetchable URLs."""

    from_time: Optional[DateTime] = Field(default=None, alias="from")
    to: Optional[DateTime] = None
    page_size: Optional[int] = None
    type: List[TransactionFilter] = Field(default_factory=list)
    count: int = 0
    pages: List[str] = Field(default_factory=list)
    last_transaction_id: TransactionID


class TransactionResponse(V20Model):
    transaction: TransactionField
    last_transaction_id: TransactionID


class TransactionsResponse(V20Model):
    transactions: List[TransactionField] = Field(default_factory=list)
    last_transaction_id: TransactionID
