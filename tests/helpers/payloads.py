"""JSON payload builders for v20 records.

Each builder returns a fresh dict in wire form (camelCase keys, decimals
as strings) so tests can mutate it freely.  ``TRANSACTION_REQUIRED``
lists, per transaction type, the fields that type needs beyond the
common envelope; ``minimal_transaction`` combines the two.  ``full_record``
and ``minimal_record`` derive a payload for any record class from its
fields, for checks that must cover every variant.
"""

from __future__ import annotations

import enum
import types
import typing
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Type

from pydantic import BaseModel

from v20client.models import wire_name

ACCOUNT_ID = "101-004-1234567-001"
TIME = "2024-03-01T12:00:00.123456789Z"

_ENTRY = {"instrument": "EUR_USD", "units": "100"}
_PENDING = {"instrument": "EUR_USD", "units": "100", "price": "1.08500"}

TRANSACTION_REQUIRED: Dict[str, Dict[str, Any]] = {
    "CREATE": {},
    "CLOSE": {},
    "REOPEN": {},
    "CLIENT_CONFIGURE": {},
    "CLIENT_CONFIGURE_REJECT": {"rejectReason": "ACCOUNT_LOCKED"},
    "TRANSFER_FUNDS": {"amount": "1000.00"},
    "TRANSFER_FUNDS_REJECT": {"amount": "1000.00", "rejectReason": "AMOUNT_INVALID"},
    "MARKET_ORDER": dict(_ENTRY),
    "MARKET_ORDER_REJECT": dict(_ENTRY, rejectReason="INSUFFICIENT_MARGIN"),
    "FIXED_PRICE_ORDER": dict(_PENDING),
    "LIMIT_ORDER": dict(_PENDING),
    "LIMIT_ORDER_REJECT": dict(_PENDING, rejectReason="PRICE_INVALID"),
    "STOP_ORDER": dict(_PENDING),
    "STOP_ORDER_REJECT": dict(_PENDING, rejectReason="PRICE_INVALID"),
    "MARKET_IF_TOUCHED_ORDER": dict(_PENDING),
    "MARKET_IF_TOUCHED_ORDER_REJECT": dict(_PENDING, rejectReason="PRICE_INVALID"),
    "TAKE_PROFIT_ORDER": {"tradeID": "42", "price": "1.09000"},
    "TAKE_PROFIT_ORDER_REJECT": {"tradeID": "42", "price": "1.09000", "rejectReason": "TRADE_DOESNT_EXIST"},
    "STOP_LOSS_ORDER": {"tradeID": "42"},
    "STOP_LOSS_ORDER_REJECT": {"tradeID": "42", "rejectReason": "TRADE_DOESNT_EXIST"},
    "GUARANTEED_STOP_LOSS_ORDER": {"tradeID": "42"},
    "GUARANTEED_STOP_LOSS_ORDER_REJECT": {"tradeID": "42", "rejectReason": "TRADE_DOESNT_EXIST"},
    "TRAILING_STOP_LOSS_ORDER": {"tradeID": "42", "distance": "0.00500"},
    "TRAILING_STOP_LOSS_ORDER_REJECT": {
        "tradeID": "42",
        "distance": "0.00500",
        "rejectReason": "TRADE_DOESNT_EXIST",
    },
    "ORDER_FILL": {"orderID": "1000", "instrument": "EUR_USD", "units": "100"},
    "ORDER_CANCEL": {"orderID": "1000", "reason": "CLIENT_REQUEST"},
    "ORDER_CANCEL_REJECT": {"orderID": "1000", "rejectReason": "ORDER_DOESNT_EXIST"},
    "ORDER_CLIENT_EXTENSIONS_MODIFY": {"orderID": "1000"},
    "ORDER_CLIENT_EXTENSIONS_MODIFY_REJECT": {"orderID": "1000", "rejectReason": "ORDER_DOESNT_EXIST"},
    "TRADE_CLIENT_EXTENSIONS_MODIFY": {"tradeID": "42"},
    "TRADE_CLIENT_EXTENSIONS_MODIFY_REJECT": {"tradeID": "42", "rejectReason": "TRADE_DOESNT_EXIST"},
    "MARGIN_CALL_ENTER": {},
    "MARGIN_CALL_EXTEND": {},
    "MARGIN_CALL_EXIT": {},
    "DELAYED_TRADE_CLOSURE": {},
    "DAILY_FINANCING": {},
    "DIVIDEND_ADJUSTMENT": {"instrument": "US30_USD", "dividendAdjustment": "1.25"},
    "RESET_RESETTABLE_PL": {},
}


def envelope(txn_id: str = "1000", batch_id: str | None = None) -> Dict[str, Any]:
    return {
        "id": txn_id,
        "time": TIME,
        "userID": 1234567,
        "accountID": ACCOUNT_ID,
        "batchID": batch_id or txn_id,
        "requestID": "24952648215781442",
    }


def minimal_transaction(txn_type: str, txn_id: str = "1000", **extra: Any) -> Dict[str, Any]:
    payload = envelope(txn_id)
    payload["type"] = txn_type
    payload.update(TRANSACTION_REQUIRED[txn_type])
    payload.update(extra)
    return payload


def market_order_transaction(txn_id: str = "1000") -> Dict[str, Any]:
    return minimal_transaction(
        "MARKET_ORDER",
        txn_id,
        timeInForce="FOK",
        positionFill="DEFAULT",
        reason="CLIENT_ORDER",
        clientExtensions={"id": "my-order", "tag": "strategy-a"},
        takeProfitOnFill={"price": "1.09500", "timeInForce": "GTC"},
    )


def order_fill_transaction(txn_id: str = "1001", order_id: str = "1000", batch_id: str = "1000") -> Dict[str, Any]:
    payload = minimal_transaction(
        "ORDER_FILL",
        txn_id,
        orderID=order_id,
        reason="MARKET_ORDER",
        fullVWAP="1.08512",
        pl="0.0000",
        financing="0.0000",
        commission="0.0000",
        accountBalance="100000.0000",
        tradeOpened={"tradeID": txn_id, "units": "100", "price": "1.08512", "halfSpreadCost": "0.0065"},
        fullPrice={
            "type": "PRICE",
            "instrument": "EUR_USD",
            "time": TIME,
            "bids": [{"price": "1.08505", "liquidity": 1000000}],
            "asks": [{"price": "1.08512", "liquidity": 1000000}],
            "closeoutBid": "1.08505",
            "closeoutAsk": "1.08512",
        },
    )
    payload["batchID"] = batch_id
    return payload


def order_cancel_transaction(
    txn_id: str = "1001", order_id: str = "1000", reason: str = "INSUFFICIENT_MARGIN"
) -> Dict[str, Any]:
    return minimal_transaction("ORDER_CANCEL", txn_id, orderID=order_id, reason=reason)


def limit_order(order_id: str = "2000", state: str = "PENDING") -> Dict[str, Any]:
    return {
        "type": "LIMIT",
        "id": order_id,
        "createTime": TIME,
        "state": state,
        "instrument": "EUR_USD",
        "units": "-250",
        "price": "1.10000",
        "timeInForce": "GTD",
        "gtdTime": "2024-03-08T12:00:00Z",
        "positionFill": "DEFAULT",
        "triggerCondition": "DEFAULT",
        "clientExtensions": {"id": "limit-1"},
    }


def price(instrument: str = "EUR_USD", bid: str = "1.08505", ask: str = "1.08512") -> Dict[str, Any]:
    return {
        "type": "PRICE",
        "instrument": instrument,
        "time": TIME,
        "tradeable": True,
        "bids": [{"price": bid, "liquidity": 10000000}],
        "asks": [{"price": ask, "liquidity": 10000000}],
        "closeoutBid": bid,
        "closeoutAsk": ask,
    }


def pricing_heartbeat() -> Dict[str, Any]:
    return {"type": "HEARTBEAT", "time": TIME}


def transaction_heartbeat(last_transaction_id: str = "1000") -> Dict[str, Any]:
    return {"type": "HEARTBEAT", "lastTransactionID": last_transaction_id, "time": TIME}


def create_order_response() -> Dict[str, Any]:
    return {
        "orderCreateTransaction": market_order_transaction("1000"),
        "orderFillTransaction": order_fill_transaction("1001", "1000", "1000"),
        "relatedTransactionIDs": ["1000", "1001"],
        "lastTransactionID": "1001",
    }


def create_order_reject_response() -> Dict[str, Any]:
    return {
        "orderRejectTransaction": minimal_transaction(
            "MARKET_ORDER_REJECT", "1002", rejectReason="INSUFFICIENT_MARGIN"
        ),
        "relatedTransactionIDs": ["1002"],
        "lastTransactionID": "1002",
        "errorCode": "INSUFFICIENT_MARGIN",
        "errorMessage": "Insufficient margin to open the position",
    }


# ---------------------------------------------------------------------------
# Generated records
# ---------------------------------------------------------------------------


def sample_value(annotation: Any) -> Any:
    """Return a wire value that validates against ``annotation``."""
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin is typing.Annotated:
        return sample_value(args[0])
    if origin in (typing.Union, types.UnionType):
        return sample_value(next(arg for arg in args if arg is not type(None)))
    if origin is list:
        return [sample_value(args[0])]
    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return sample_value(supertype)
    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            return full_record(annotation)
        if issubclass(annotation, enum.Enum):
            return next(iter(annotation)).value
        if issubclass(annotation, bool):
            return True
        if issubclass(annotation, int):
            return 7
        if issubclass(annotation, Decimal):
            return "1.23450"
        if issubclass(annotation, datetime):
            return TIME
        if issubclass(annotation, str):
            return "1234"
    raise TypeError(f"no sample value for {annotation!r}")


def _build(model: Type[BaseModel], optional: bool) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for name, field in model.model_fields.items():
        key = field.alias or wire_name(name)
        if name == "type" and not field.is_required():
            # discriminant fixed by the class
            payload[key] = getattr(field.default, "value", field.default)
        elif optional or field.is_required():
            payload[key] = sample_value(field.annotation)
    return payload


def full_record(model: Type[BaseModel]) -> Dict[str, Any]:
    """Wire payload for ``model`` with every field, optional ones included, set."""
    return _build(model, optional=True)


def minimal_record(model: Type[BaseModel]) -> Dict[str, Any]:
    """Wire payload for ``model`` with only its required fields set."""
    return _build(model, optional=False)
