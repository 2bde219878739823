"""
Error taxonomy of the v20 client.

Callers branch on the exception class rather than on message text:

* ``TransportError``: nothing usable came back (connection, TLS, timeout).
* ``UnexpectedStatus``: a status the endpoint does not document.
* ``TypedRejection``: a documented error status whose body was decoded;
  each state-changing endpoint has its own subclass.
* ``SchemaViolation`` / ``UnknownVariant``: a body did not fit the schema,
  or named a variant this client does not know (a newer server).

Decode errors deliberately do not derive from ``ValueError`` so that they
pass through Pydantic validators unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:  # pragma: no cover
    from pydantic import ValidationError


class V20Error(Exception):
    """Base class for every error raised by this package."""


class TransportError(V20Error):
    """The request could not be sent or no response was received."""

    def __init__(self, message: str, *, method: str = "", url: str = "") -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class UnexpectedStatus(V20Error):
    """A response arrived with a status code not documented for the endpoint."""

    def __init__(self, status: int, body: str = "", *, endpoint: str = "") -> None:
        self.status = status
        self.body = body
        self.endpoint = endpoint
        truncated = body[:200] if body else ""
        super().__init__(f"{endpoint or 'request'} returned HTTP {status}: {truncated}")


class TypedRejection(V20Error):
    """A documented error response, decoded into its endpoint-specific shape.

    Attributes:
        status: HTTP status code.
        body: the decoded error response model.
        error_code: the server's ``errorCode``, if any.
        error_message: the server's ``errorMessage``.
        reject_reason: the ``rejectReason`` of the reject transaction carried
            in the body, if the server created one.
        last_transaction_id: the account's ``lastTransactionID`` cursor.
        related_transaction_ids: ids of the transactions the request created.
    """

    def __init__(self, status: int, body: Any) -> None:
        self.status = status
        self.body = body
        self.error_code: Optional[str] = getattr(body, "error_code", None)
        self.error_message: Optional[str] = getattr(body, "error_message", None)
        self.last_transaction_id: Optional[str] = getattr(body, "last_transaction_id", None)
        self.related_transaction_ids: List[str] = list(
            getattr(body, "related_transaction_ids", None) or []
        )
        reject = None
        reject_transaction = getattr(body, "reject_transaction", None)
        if callable(reject_transaction):
            reject = reject_transaction()
        self.reject_transaction = reject
        self.reject_reason = getattr(reject, "reject_reason", None)
        reason = getattr(self.reject_reason, "value", self.reject_reason)
        detail = self.error_message or self.error_code or reason or "rejected"
        super().__init__(f"HTTP {status}: {detail}")


class AccountConfigurationRejected(TypedRejection):
    pass


class CreateOrderRejected(TypedRejection):
    pass


class ReplaceOrderRejected(TypedRejection):
    pass


class CancelOrderRejected(TypedRejection):
    pass


class OrderClientExtensionsRejected(TypedRejection):
    pass


class CloseTradeRejected(TypedRejection):
    pass


class TradeClientExtensionsRejected(TypedRejection):
    pass


class TradeOrdersRejected(TypedRejection):
    pass


class ClosePositionRejected(TypedRejection):
    pass


class DecodeError(V20Error):
    """A JSON value could not be decoded into the expected model."""


class SchemaViolation(DecodeError):
    """A value did not fit its schema.

    ``path`` is the dotted wire path of the offending field, or ``""`` when
    the value as a whole is wrong.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)

    @classmethod
    def from_validation_error(cls, exc: "ValidationError") -> "SchemaViolation":
        errors = exc.errors()
        if not errors:
            return cls("", str(exc))
        first = errors[0]
        parts = [str(part) for part in first.get("loc", ())]
        # Errors from an embedded order or transaction carry their inner path.
        inner = (first.get("ctx") or {}).get("path")
        if inner:
            parts.append(inner)
        return cls(".".join(parts), first.get("msg", "invalid value"))


class UnknownVariant(DecodeError):
    """A discriminant named a variant this client does not know."""

    def __init__(self, family: str, discriminant: str) -> None:
        self.family = family
        self.discriminant = discriminant
        super().__init__(f"unknown {family} type {discriminant!r}")
