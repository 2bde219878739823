"""
Order state reconstruction from the transaction history.

``OrderTracker`` folds a transaction sequence, in id order, into the
orders it describes.  An order-creating transaction opens a ``PENDING``
order whose id is the transaction id; ``ORDER_FILL`` and ``ORDER_CANCEL``
move it to its terminal state and record which transaction did so.
Transactions about orders the tracker never saw are ignored, which makes
it safe to start from the middle of the history.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Type

from .models.order import (
    FixedPriceOrder,
    GuaranteedStopLossOrder,
    LimitOrder,
    MarketIfTouchedOrder,
    MarketOrder,
    Order,
    OrderBase,
    OrderState,
    StopLossOrder,
    StopOrder,
    TakeProfitOrder,
    TrailingStopLossOrder,
)
from .models.primitives import OrderID, TransactionID, transaction_id_key
from .models.transaction import (
    FixedPriceOrderTransaction,
    GuaranteedStopLossOrderTransaction,
    LimitOrderTransaction,
    MarketIfTouchedOrderTransaction,
    MarketOrderTransaction,
    OrderCancelTransaction,
    OrderFillTransaction,
    StopLossOrderTransaction,
    StopOrderTransaction,
    TakeProfitOrderTransaction,
    Transaction,
    TrailingStopLossOrderTransaction,
)

logger = logging.getLogger(__name__)

ORDER_FOR_TRANSACTION: Dict[type, Type[OrderBase]] = {
    MarketOrderTransaction: MarketOrder,
    FixedPriceOrderTransaction: FixedPriceOrder,
    LimitOrderTransaction: LimitOrder,
    StopOrderTransaction: StopOrder,
    MarketIfTouchedOrderTransaction: MarketIfTouchedOrder,
    TakeProfitOrderTransaction: TakeProfitOrder,
    StopLossOrderTransaction: StopLossOrder,
    GuaranteedStopLossOrderTransaction: GuaranteedStopLossOrder,
    TrailingStopLossOrderTransaction: TrailingStopLossOrder,
}

# Transaction fields that describe the transaction itself, not the order.
_ENVELOPE_FIELDS = frozenset(
    {
        "id",
        "time",
        "type",
        "user_id",
        "account_id",
        "batch_id",
        "request_id",
        "reason",
        "cancelling_transaction_id",
    }
)


def order_from_transaction(txn: Transaction) -> Order:
    """Build the ``PENDING`` order created by an order-creating transaction.

    Raises:
        TypeError: if ``txn`` does not create an order.
    """
    order_cls = ORDER_FOR_TRANSACTION.get(type(txn))
    if order_cls is None:
        raise TypeError(f"{type(txn).__name__} does not create an order")
    data = {
        name: value
        for name, value in txn
        if name in order_cls.model_fields and name not in _ENVELOPE_FIELDS and value is not None
    }
    data.update(id=txn.id, create_time=txn.time, state=OrderState.PENDING)
    return order_cls.model_validate(data)  # type: ignore[return-value]


class OrderTracker:
    """Maintain the current state of every order seen in a transaction sequence."""

    def __init__(self) -> None:
        self.orders: Dict[OrderID, Order] = {}
        self.last_transaction_id: Optional[TransactionID] = None

    def get(self, order_id: OrderID) -> Optional[Order]:
        return self.orders.get(order_id)

    def pending(self) -> List[Order]:
        return [order for order in self.orders.values() if order.state == OrderState.PENDING]

    def apply_all(self, transactions: Iterable[Transaction]) -> None:
        for txn in transactions:
            self.apply(txn)

    def apply(self, txn: Transaction) -> Optional[Order]:
        """Fold one transaction in and return the order it touched, if any.

        Raises:
            ValueError: if ``txn`` is not newer than the last applied transaction.
        """
        if self.last_transaction_id is not None and transaction_id_key(txn.id) <= transaction_id_key(
            self.last_transaction_id
        ):
            raise ValueError(
                f"transaction {txn.id} applied after {self.last_transaction_id}; "
                "transactions must be applied in id order"
            )
        self.last_transaction_id = txn.id

        match txn:
            case OrderFillTransaction():
                return self._update(
                    txn.order_id,
                    state=OrderState.FILLED,
                    filling_transaction_id=txn.id,
                    filled_time=txn.time,
                    trade_opened_id=txn.trade_opened.trade_id if txn.trade_opened else None,
                    trade_reduced_id=txn.trade_reduced.trade_id if txn.trade_reduced else None,
                    trade_closed_ids=[trade.trade_id for trade in txn.trades_closed] or None,
                )
            case OrderCancelTransaction():
                update = dict(
                    state=OrderState.CANCELLED,
                    cancelling_transaction_id=txn.id,
                    cancelled_time=txn.time,
                )
                if txn.replaced_by_order_id is not None:
                    update["replaced_by_order_id"] = txn.replaced_by_order_id
                return self._update(txn.order_id, **update)
            case _ if type(txn) in ORDER_FOR_TRANSACTION:
                order = order_from_transaction(txn)
                self.orders[order.id] = order
                return order
            case _:
                return None

    def _update(self, order_id: OrderID, **changes: object) -> Optional[Order]:
        order = self.orders.get(order_id)
        if order is None:
            logger.debug("Ignoring transaction for unknown order %s", order_id)
            return None
        changes = {name: value for name, value in changes.items() if name in type(order).model_fields}
        updated = order.model_copy(update=changes)
        self.orders[order_id] = updated
        return updated
