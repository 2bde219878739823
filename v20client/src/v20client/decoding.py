"""
Decoding and encoding of v20 JSON bodies.

Bodies are parsed with ``parse_float=Decimal`` so that prices and amounts
sent as bare JSON numbers keep every digit.  Whole bodies decode
all-or-nothing, and every ``V20Client`` method decodes its response that
way.  ``decode_transactions_best_effort`` is a helper for callers that hold
a raw transaction list themselves (an archived page, a replayed log) and
would rather keep the good entries than discard them all.  The client never
calls it; the streams isolate bad lines on their own.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Iterable, List, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import DecodeError, SchemaViolation
from .models.order import Order
from .models.transaction import Transaction
from .models.variants import decode_order, decode_transaction

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

__all__ = [
    "decode_model",
    "decode_order",
    "decode_orders",
    "decode_transaction",
    "decode_transactions",
    "decode_transactions_best_effort",
    "parse_json",
    "to_json",
    "to_wire",
]


def parse_json(raw: Union[bytes, str]) -> Any:
    """Parse JSON text, reading every non-integer number as ``Decimal``.

    Raises:
        SchemaViolation: if ``raw`` is not valid JSON, nests too deeply, or
            holds an integer literal too long to convert.
    """
    try:
        return json.loads(raw, parse_float=Decimal)
    except (ValueError, RecursionError) as exc:
        raise SchemaViolation("", f"invalid JSON: {exc}") from exc


def decode_model(model: Type[M], obj: Any) -> M:
    """Validate ``obj`` against ``model``, mapping failures to ``SchemaViolation``."""
    try:
        return model.model_validate(obj)
    except ValidationError as exc:
        raise SchemaViolation.from_validation_error(exc) from exc


def _require_list(items: Any) -> List[Any]:
    if not isinstance(items, list):
        raise SchemaViolation("", f"expected a JSON array, got {type(items).__name__}")
    return items


def decode_orders(items: Any) -> List[Order]:
    """Decode a list of orders; the first bad element fails the whole list."""
    return [decode_order(item) for item in _require_list(items)]


def decode_transactions(items: Any) -> List[Transaction]:
    """Decode a list of transactions; the first bad element fails the whole list."""
    return [decode_transaction(item) for item in _require_list(items)]


def decode_transactions_best_effort(
    items: Iterable[Any],
) -> Tuple[List[Transaction], List[Tuple[int, DecodeError]]]:
    """Decode each transaction independently.

    Returns:
        A tuple ``(decoded, failures)`` where ``failures`` pairs the index
        of every element that could not be decoded with its error.
    """
    decoded: List[Transaction] = []
    failures: List[Tuple[int, DecodeError]] = []
    for index, item in enumerate(items):
        try:
            decoded.append(decode_transaction(item))
        except DecodeError as exc:
            logger.warning("Skipping transaction at index %d: %s", index, exc)
            failures.append((index, exc))
    return decoded, failures


def to_wire(model: BaseModel) -> Any:
    """Return the JSON-ready wire form of ``model`` (absent fields omitted)."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_json(model: BaseModel) -> str:
    return json.dumps(to_wire(model), separators=(",", ":"))
