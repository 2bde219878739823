"""
Typed asynchronous client for the OANDA v20 trading API.

The package models every v20 record as an immutable Pydantic model,
decodes the polymorphic order and transaction families by their ``type``
field, and wraps the REST and streaming endpoints in ``V20Client``.

Example::

    from v20client import V20Client

    async with V20Client.from_env() as client:
        async with await client.stream_transactions(account_id) as stream:
            async for txn in stream:
                print(txn.type, txn.id)
"""

from .clients import BearerTokenProvider, HttpTransport, V20Client  # noqa: F401
from .config import ClientSettings  # noqa: F401
from .decoding import (  # noqa: F401
    decode_order,
    decode_orders,
    decode_transaction,
    decode_transactions,
    decode_transactions_best_effort,
    parse_json,
    to_json,
    to_wire,
)
from .errors import (  # noqa: F401
    DecodeError,
    SchemaViolation,
    TransportError,
    TypedRejection,
    UnexpectedStatus,
    UnknownVariant,
    V20Error,
)
from .lifecycle import OrderTracker  # noqa: F401
from .streaming import EventStream, PricingStream, TransactionStream  # noqa: F401

__version__ = "0.1.0"
