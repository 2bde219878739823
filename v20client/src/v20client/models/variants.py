"""
Two-pass resolution of the polymorphic order and transaction families.

The first pass reads only the ``type`` discriminant and looks up the
variant class; the second validates the whole object against it.  The
``OrderField`` and ``TransactionField`` annotations let other models embed
a polymorphic member and have it resolved the same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Callable, Dict, Type

from pydantic import PlainValidator, ValidationError
from pydantic_core import PydanticCustomError

from ..errors import SchemaViolation, UnknownVariant
from .base import TaggedModel
from .order import ORDER_VARIANTS, Order
from .transaction import TRANSACTION_VARIANTS, Transaction

ORDER_TYPES: Dict[str, Type[TaggedModel]] = {cls.discriminant(): cls for cls in ORDER_VARIANTS}
TRANSACTION_TYPES: Dict[str, Type[TaggedModel]] = {
    cls.discriminant(): cls for cls in TRANSACTION_VARIANTS
}


def resolve_variant(family: str, registry: Dict[str, Type[TaggedModel]], obj: Any) -> Any:
    if not isinstance(obj, Mapping):
        raise SchemaViolation("", f"expected a JSON object for {family}, got {type(obj).__name__}")
    discriminant = obj.get("type")
    if not isinstance(discriminant, str):
        raise SchemaViolation("type", f"{family} discriminant is missing or not a string")
    cls = registry.get(discriminant)
    if cls is None:
        raise UnknownVariant(family, discriminant)
    try:
        return cls.model_validate(obj)
    except ValidationError as exc:
        raise SchemaViolation.from_validation_error(exc) from exc


def decode_order(obj: Any) -> Order:
    """Decode a JSON object into its concrete Order variant.

    Raises:
        UnknownVariant: if ``type`` names no known order variant.
        SchemaViolation: if the object does not fit the selected variant.
    """
    return resolve_variant("order", ORDER_TYPES, obj)


def decode_transaction(obj: Any) -> Transaction:
    """Decode a JSON object into its concrete Transaction variant.

    Raises:
        UnknownVariant: if ``type`` names no known transaction variant.
        SchemaViolation: if the object does not fit the selected variant.
    """
    return resolve_variant("transaction", TRANSACTION_TYPES, obj)


def _nested(decode: Callable[[Any], Any], value: Any) -> Any:
    # Hand the inner path back to pydantic so the enclosing location is kept.
    try:
        return decode(value)
    except SchemaViolation as exc:
        raise PydanticCustomError(
            "v20_schema", "{message}", {"message": exc.message, "path": exc.path}
        ) from exc


def _as_order(value: Any) -> Order:
    if isinstance(value, ORDER_VARIANTS):
        return value
    return _nested(decode_order, value)


def _as_transaction(value: Any) -> Transaction:
    if isinstance(value, TRANSACTION_VARIANTS):
        return value
    return _nested(decode_transaction, value)


OrderField = Annotated[Order, PlainValidator(_as_order)]
TransactionField = Annotated[Transaction, PlainValidator(_as_transaction)]
