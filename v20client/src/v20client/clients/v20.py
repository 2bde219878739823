"""
Endpoint methods of the v20 REST and streaming API.

``V20Client`` is a thin layer over ``HttpTransport``: each method builds
the path, query model and body for one endpoint and declares which
statuses it documents.  Responses come back as the models in
``v20client.responses``; documented error statuses raise the endpoint's
``TypedRejection`` subclass.

Example::

    async with V20Client.from_env() as client:
        summary = await client.get_account_summary(account_id)
        result = await client.create_order(
            account_id, MarketOrderRequest(instrument="EUR_USD", units=Decimal("100"))
        )
        if result.filled:
            ...
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

import aiohttp

from ..config import ClientSettings
from ..errors import (
    AccountConfigurationRejected,
    CancelOrderRejected,
    ClosePositionRejected,
    CloseTradeRejected,
    CreateOrderRejected,
    OrderClientExtensionsRejected,
    ReplaceOrderRejected,
    TradeClientExtensionsRejected,
    TradeOrdersRejected,
)
from ..models.common import ClientExtensions
from ..models.order import OrderRequest
from ..models.primitives import AccountID, InstrumentName, OrderSpecifier, TradeSpecifier, TransactionID
from ..models.transaction import TransactionFilter
from ..requests import (
    AccountChangesQuery,
    AccountConfigurationBody,
    AccountInstrumentsQuery,
    BookQuery,
    CandlesQuery,
    ClosePositionBody,
    CloseTradeBody,
    LatestCandlesQuery,
    OrderBody,
    OrderClientExtensionsBody,
    OrdersQuery,
    PricingQuery,
    PricingStreamQuery,
    TradeClientExtensionsBody,
    TradeOrdersBody,
    TradesQuery,
    TransactionPagesQuery,
    TransactionRangeQuery,
    TransactionsSinceQuery,
)
from ..responses import (
    AccountChangesResponse,
    AccountConfigurationErrorResponse,
    AccountConfigurationResponse,
    AccountInstrumentsResponse,
    AccountListResponse,
    AccountResponse,
    AccountSummaryResponse,
    CancelOrderErrorResponse,
    CancelOrderResponse,
    CandlesResponse,
    ClosePositionErrorResponse,
    ClosePositionResponse,
    CloseTradeErrorResponse,
    CloseTradeResponse,
    CreateOrderErrorResponse,
    CreateOrderResponse,
    LatestCandlesResponse,
    OrderBookResponse,
    OrderClientExtensionsErrorResponse,
    OrderClientExtensionsResponse,
    OrderResponse,
    OrdersResponse,
    PositionBookResponse,
    PositionResponse,
    PositionsResponse,
    PricingResponse,
    ReplaceOrderErrorResponse,
    ReplaceOrderResponse,
    TradeClientExtensionsErrorResponse,
    TradeClientExtensionsResponse,
    TradeOrdersErrorResponse,
    TradeOrdersResponse,
    TradeResponse,
    TradesResponse,
    TransactionPagesResponse,
    TransactionResponse,
    TransactionsResponse,
)
from ..streaming import PricingStream, TransactionStream
from .auth import AuthProvider
from .http_client import Endpoint, HttpTransport, path_segment

logger = logging.getLogger(__name__)


def _read(name: str, model: Any) -> Endpoint:
    return Endpoint(name, {200: model})


LIST_ACCOUNTS = _read("list_accounts", AccountListResponse)
GET_ACCOUNT = _read("get_account", AccountResponse)
GET_ACCOUNT_SUMMARY = _read("get_account_summary", AccountSummaryResponse)
GET_ACCOUNT_INSTRUMENTS = _read("get_account_instruments", AccountInstrumentsResponse)
CONFIGURE_ACCOUNT = Endpoint(
    "configure_account",
    {200: AccountConfigurationResponse},
    {400: AccountConfigurationErrorResponse, 403: AccountConfigurationErrorResponse},
    AccountConfigurationRejected,
)
GET_ACCOUNT_CHANGES = _read("get_account_changes", AccountChangesResponse)

GET_CANDLES = _read("get_candles", CandlesResponse)
GET_ORDER_BOOK = _read("get_order_book", OrderBookResponse)
GET_POSITION_BOOK = _read("get_position_book", PositionBookResponse)

CREATE_ORDER = Endpoint(
    "create_order",
    {201: CreateOrderResponse},
    {400: CreateOrderErrorResponse, 404: CreateOrderErrorResponse},
    CreateOrderRejected,
)
LIST_ORDERS = _read("list_orders", OrdersResponse)
LIST_PENDING_ORDERS = _read("list_pending_orders", OrdersResponse)
GET_ORDER = _read("get_order", OrderResponse)
REPLACE_ORDER = Endpoint(
    "replace_order",
    {201: ReplaceOrderResponse},
    {400: ReplaceOrderErrorResponse, 404: ReplaceOrderErrorResponse},
    ReplaceOrderRejected,
)
CANCEL_ORDER = Endpoint(
    "cancel_order",
    {200: CancelOrderResponse},
    {404: CancelOrderErrorResponse},
    CancelOrderRejected,
)
SET_ORDER_CLIENT_EXTENSIONS = Endpoint(
    "set_order_client_extensions",
    {200: OrderClientExtensionsResponse},
    {400: OrderClientExtensionsErrorResponse, 404: OrderClientExtensionsErrorResponse},
    OrderClientExtensionsRejected,
)

LIST_TRADES = _read("list_trades", TradesResponse)
LIST_OPEN_TRADES = _read("list_open_trades", TradesResponse)
GET_TRADE = _read("get_trade", TradeResponse)
CLOSE_TRADE = Endpoint(
    "close_trade",
    {200: CloseTradeResponse},
    {400: CloseTradeErrorResponse, 404: CloseTradeErrorResponse},
    CloseTradeRejected,
)
SET_TRADE_CLIENT_EXTENSIONS = Endpoint(
    "set_trade_client_extensions",
    {200: TradeClientExtensionsResponse},
    {400: TradeClientExtensionsErrorResponse, 404: TradeClientExtensionsErrorResponse},
    TradeClientExtensionsRejected,
)
SET_TRADE_ORDERS = Endpoint(
    "set_trade_orders",
    {200: TradeOrdersResponse},
    {400: TradeOrdersErrorResponse, 404: TradeOrdersErrorResponse},
    TradeOrdersRejected,
)

LIST_POSITIONS = _read("list_positions", PositionsResponse)
LIST_OPEN_POSITIONS = _read("list_open_positions", PositionsResponse)
GET_POSITION = _read("get_position", PositionResponse)
CLOSE_POSITION = Endpoint(
    "close_position",
    {200: ClosePositionResponse},
    {400: ClosePositionErrorResponse, 404: ClosePositionErrorResponse},
    ClosePositionRejected,
)

LIST_TRANSACTION_PAGES = _read("list_transaction_pages", TransactionPagesResponse)
GET_TRANSACTION = _read("get_transaction", TransactionResponse)
GET_TRANSACTION_RANGE = _read("get_transaction_range", TransactionsResponse)
GET_TRANSACTIONS_SINCE = _read("get_transactions_since", TransactionsResponse)

GET_LATEST_CANDLES = _read("get_latest_candles", LatestCandlesResponse)
GET_PRICING = _read("get_pricing", PricingResponse)
GET_ACCOUNT_INSTRUMENT_CANDLES = _read("get_account_instrument_candles", CandlesResponse)


def _account(account_id: AccountID) -> str:
    return f"/accounts/{path_segment(account_id)}"


class V20Client:
    """Asynchronous client for one v20 API environment."""

    def __init__(
        self,
        settings: ClientSettings,
        *,
        auth_provider: Optional[AuthProvider] = None,
        session: Optional[aiohttp.ClientSession] = None,
        transport: Optional[HttpTransport] = None,
    ) -> None:
        self.settings = settings
        self.transport = transport or HttpTransport(
            settings, auth_provider=auth_provider, session=session
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "V20Client":
        return cls(ClientSettings.from_env(), **kwargs)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> "V20Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    async def list_accounts(self) -> AccountListResponse:
        return await self.transport.request("GET", "/accounts", LIST_ACCOUNTS)

    async def get_account(self, account_id: AccountID) -> AccountResponse:
        return await self.transport.request("GET", _account(account_id), GET_ACCOUNT)

    async def get_account_summary(self, account_id: AccountID) -> AccountSummaryResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/summary", GET_ACCOUNT_SUMMARY
        )

    async def get_account_instruments(
        self, account_id: AccountID, instruments: Sequence[InstrumentName] = ()
    ) -> AccountInstrumentsResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/instruments",
            GET_ACCOUNT_INSTRUMENTS,
            query=AccountInstrumentsQuery(instruments=list(instruments)),
        )

    async def configure_account(
        self, account_id: AccountID, body: AccountConfigurationBody
    ) -> AccountConfigurationResponse:
        return await self.transport.request(
            "PATCH", f"{_account(account_id)}/configuration", CONFIGURE_ACCOUNT, body=body
        )

    async def get_account_changes(
        self, account_id: AccountID, since_transaction_id: TransactionID
    ) -> AccountChangesResponse:
        """Return the changes to the account since ``since_transaction_id``.

        Pass the ``last_transaction_id`` of a previous response to poll for
        everything that happened after it.
        """
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/changes",
            GET_ACCOUNT_CHANGES,
            query=AccountChangesQuery(since_transaction_id=since_transaction_id),
        )

    # ------------------------------------------------------------------
    # Instruments
    # ------------------------------------------------------------------

    async def get_candles(
        self, instrument: InstrumentName, query: Optional[CandlesQuery] = None
    ) -> CandlesResponse:
        return await self.transport.request(
            "GET",
            f"/instruments/{path_segment(instrument)}/candles",
            GET_CANDLES,
            query=query,
        )

    async def get_order_book(
        self, instrument: InstrumentName, query: Optional[BookQuery] = None
    ) -> OrderBookResponse:
        return await self.transport.request(
            "GET",
            f"/instruments/{path_segment(instrument)}/orderBook",
            GET_ORDER_BOOK,
            query=query,
        )

    async def get_position_book(
        self, instrument: InstrumentName, query: Optional[BookQuery] = None
    ) -> PositionBookResponse:
        return await self.transport.request(
            "GET",
            f"/instruments/{path_segment(instrument)}/positionBook",
            GET_POSITION_BOOK,
            query=query,
        )

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def create_order(self, account_id: AccountID, order: OrderRequest) -> CreateOrderResponse:
        """Submit a new order.

        The response tells what happened synchronously: check
        ``order_fill_transaction`` and ``order_cancel_transaction`` rather
        than assuming the order is pending.

        Raises:
            CreateOrderRejected: the order was rejected (HTTP 400 or 404).
        """
        return await self.transport.request(
            "POST", f"{_account(account_id)}/orders", CREATE_ORDER, body=OrderBody(order=order)
        )

    async def list_orders(
        self, account_id: AccountID, query: Optional[OrdersQuery] = None
    ) -> OrdersResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/orders", LIST_ORDERS, query=query
        )

    async def list_pending_orders(self, account_id: AccountID) -> OrdersResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/pendingOrders", LIST_PENDING_ORDERS
        )

    async def get_order(self, account_id: AccountID, order_specifier: OrderSpecifier) -> OrderResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/orders/{path_segment(order_specifier)}",
            GET_ORDER,
        )

    async def replace_order(
        self, account_id: AccountID, order_specifier: OrderSpecifier, order: OrderRequest
    ) -> ReplaceOrderResponse:
        """Cancel ``order_specifier`` and create ``order`` in its place."""
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/orders/{path_segment(order_specifier)}",
            REPLACE_ORDER,
            body=OrderBody(order=order),
        )

    async def cancel_order(
        self, account_id: AccountID, order_specifier: OrderSpecifier
    ) -> CancelOrderResponse:
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/orders/{path_segment(order_specifier)}/cancel",
            CANCEL_ORDER,
        )

    async def set_order_client_extensions(
        self,
        account_id: AccountID,
        order_specifier: OrderSpecifier,
        client_extensions: Optional[ClientExtensions] = None,
        trade_client_extensions: Optional[ClientExtensions] = None,
    ) -> OrderClientExtensionsResponse:
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/orders/{path_segment(order_specifier)}/clientExtensions",
            SET_ORDER_CLIENT_EXTENSIONS,
            body=OrderClientExtensionsBody(
                client_extensions=client_extensions,
                trade_client_extensions=trade_client_extensions,
            ),
        )

    # ------------------------------------------------------------------
    # Trades
    # ------------------------------------------------------------------

    async def list_trades(
        self, account_id: AccountID, query: Optional[TradesQuery] = None
    ) -> TradesResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/trades", LIST_TRADES, query=query
        )

    async def list_open_trades(self, account_id: AccountID) -> TradesResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/openTrades", LIST_OPEN_TRADES
        )

    async def get_trade(self, account_id: AccountID, trade_specifier: TradeSpecifier) -> TradeResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/trades/{path_segment(trade_specifier)}",
            GET_TRADE,
        )

    async def close_trade(
        self, account_id: AccountID, trade_specifier: TradeSpecifier, units: str = "ALL"
    ) -> CloseTradeResponse:
        """Close a trade fully (``"ALL"``) or partially (a number of units)."""
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/trades/{path_segment(trade_specifier)}/close",
            CLOSE_TRADE,
            body=CloseTradeBody(units=units),
        )

    async def set_trade_client_extensions(
        self,
        account_id: AccountID,
        trade_specifier: TradeSpecifier,
        client_extensions: ClientExtensions,
    ) -> TradeClientExtensionsResponse:
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/trades/{path_segment(trade_specifier)}/clientExtensions",
            SET_TRADE_CLIENT_EXTENSIONS,
            body=TradeClientExtensionsBody(client_extensions=client_extensions),
        )

    async def set_trade_orders(
        self, account_id: AccountID, trade_specifier: TradeSpecifier, body: TradeOrdersBody
    ) -> TradeOrdersResponse:
        """Create, replace or cancel the take profit and stop loss orders of a trade."""
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/trades/{path_segment(trade_specifier)}/orders",
            SET_TRADE_ORDERS,
            body=body,
        )

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    async def list_positions(self, account_id: AccountID) -> PositionsResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/positions", LIST_POSITIONS
        )

    async def list_open_positions(self, account_id: AccountID) -> PositionsResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/openPositions", LIST_OPEN_POSITIONS
        )

    async def get_position(self, account_id: AccountID, instrument: InstrumentName) -> PositionResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/positions/{path_segment(instrument)}",
            GET_POSITION,
        )

    async def close_position(
        self, account_id: AccountID, instrument: InstrumentName, body: ClosePositionBody
    ) -> ClosePositionResponse:
        return await self.transport.request(
            "PUT",
            f"{_account(account_id)}/positions/{path_segment(instrument)}/close",
            CLOSE_POSITION,
            body=body,
        )

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def list_transaction_pages(
        self, account_id: AccountID, query: Optional[TransactionPagesQuery] = None
    ) -> TransactionPagesResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/transactions", LIST_TRANSACTION_PAGES, query=query
        )

    async def get_transaction(
        self, account_id: AccountID, transaction_id: TransactionID
    ) -> TransactionResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/transactions/{path_segment(transaction_id)}",
            GET_TRANSACTION,
        )

    async def get_transaction_range(
        self,
        account_id: AccountID,
        from_id: TransactionID,
        to_id: TransactionID,
        types: Sequence[TransactionFilter] = (),
    ) -> TransactionsResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/transactions/idrange",
            GET_TRANSACTION_RANGE,
            query=TransactionRangeQuery(from_id=from_id, to_id=to_id, type=list(types)),
        )

    async def get_transactions_since(
        self,
        account_id: AccountID,
        transaction_id: TransactionID,
        types: Sequence[TransactionFilter] = (),
    ) -> TransactionsResponse:
        """Return every transaction after ``transaction_id``."""
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/transactions/sinceid",
            GET_TRANSACTIONS_SINCE,
            query=TransactionsSinceQuery(id=transaction_id, type=list(types)),
        )

    async def stream_transactions(self, account_id: AccountID) -> TransactionStream:
        """Open the account's transaction stream.

        Use the returned stream with ``async with`` or call ``aclose()``.
        """
        resp = await self.transport.open_stream(
            f"{_account(account_id)}/transactions/stream", "stream_transactions"
        )
        return TransactionStream(resp, queue_size=self.settings.stream_queue_size)

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    async def get_latest_candles(
        self, account_id: AccountID, query: LatestCandlesQuery
    ) -> LatestCandlesResponse:
        return await self.transport.request(
            "GET", f"{_account(account_id)}/candles/latest", GET_LATEST_CANDLES, query=query
        )

    async def get_pricing(
        self,
        account_id: AccountID,
        instruments: Sequence[InstrumentName],
        *,
        since: Optional[datetime] = None,
        include_home_conversions: Optional[bool] = None,
    ) -> PricingResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/pricing",
            GET_PRICING,
            query=PricingQuery(
                instruments=list(instruments),
                since=since,
                include_home_conversions=include_home_conversions,
            ),
        )

    async def get_account_instrument_candles(
        self,
        account_id: AccountID,
        instrument: InstrumentName,
        query: Optional[CandlesQuery] = None,
    ) -> CandlesResponse:
        return await self.transport.request(
            "GET",
            f"{_account(account_id)}/instruments/{path_segment(instrument)}/candles",
            GET_ACCOUNT_INSTRUMENT_CANDLES,
            query=query,
        )

    async def stream_pricing(
        self,
        account_id: AccountID,
        instruments: Sequence[InstrumentName],
        *,
        snapshot: Optional[bool] = None,
        include_home_conversions: Optional[bool] = None,
    ) -> PricingStream:
        """Open a price stream for ``instruments``."""
        resp = await self.transport.open_stream(
            f"{_account(account_id)}/pricing/stream",
            "stream_pricing",
            query=PricingStreamQuery(
                instruments=list(instruments),
                snapshot=snapshot,
                include_home_conversions=include_home_conversions,
            ),
        )
        return PricingStream(resp, queue_size=self.settings.stream_queue_size)


__all__ = ["V20Client"]
