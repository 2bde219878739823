"""
Base model and wire types shared by every v20 schema record.

All records are Pydantic models.  Python attributes use snake_case while
the wire uses the broker's camelCase names (with ``ID``, ``PL``, ``NAV``
and ``VWAP`` kept upper case), so an alias generator maps between the two.
Records are immutable and tolerate unknown keys so that a newer server
does not break an older client.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, field_validator

_UPPER_WORDS = {"id": "ID", "ids": "IDs", "pl": "PL", "nav": "NAV", "vwap": "VWAP"}

# RFC3339 timestamps from the server carry nanoseconds; datetime holds micros.
_FRACTION = re.compile(r"(\.\d{6})\d+")


def wire_name(field_name: str) -> str:
    """Return the wire (JSON) name for a snake_case attribute name.

    >>> wire_name("trade_closed_ids")
    'tradeClosedIDs'
    >>> wire_name("nav")
    'NAV'
    """
    head, *rest = field_name.split("_")
    if head == "nav":
        head = "NAV"
    return head + "".join(_UPPER_WORDS.get(word, word[:1].upper() + word[1:]) for word in rest)


def _trim_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _FRACTION.sub(r"\1", value, count=1)
    return value


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC3339 in UTC with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        text += ".%06d" % value.microsecond
    return text + "Z"


def format_decimal(value: Decimal) -> str:
    """Render a decimal in positional notation without losing digits."""
    return format(value, "f")


DateTime = Annotated[
    datetime,
    BeforeValidator(_trim_fraction),
    PlainSerializer(format_rfc3339, return_type=str, when_used="json"),
]

DecimalNumber = Annotated[
    Decimal,
    PlainSerializer(format_decimal, return_type=str, when_used="json"),
]


class V20Model(BaseModel):
    """Base class for every record exchanged with the v20 API."""

    model_config = ConfigDict(
        alias_generator=wire_name,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Return a JSON-ready dict using wire names and omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TaggedModel(V20Model):
    """A record whose ``type`` field selects one member of a variant family.

    Subclasses declare ``type`` with a default equal to their fixed
    discriminant.  Any other value is rejected during validation.
    """

    FAMILY: ClassVar[str] = "record"

    @classmethod
    def discriminant(cls) -> str:
        default = cls.model_fields["type"].default
        return getattr(default, "value", default)

    @field_validator("type", check_fields=False)
    @classmethod
    def _fixed_type(cls, value: Any) -> Any:
        expected = cls.discriminant()
        if getattr(value, "value", value) != expected:
            raise ValueError(f"type must be {expected!r} for {cls.__name__}")
        return value
