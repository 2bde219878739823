"""Candlesticks and the order/position books of an instrument."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DateTime, DecimalNumber, V20Model
from .primitives import InstrumentName


class CandlestickGranularity(str, Enum):
    S5 = "S5"
    S10 = "S10"
    S15 = "S15"
    S30 = "S30"
    M1 = "M1"
    M2 = "M2"
    M4 = "M4"
    M5 = "M5"
    M10 = "M10"
    M15 = "M15"
    M30 = "M30"
    H1 = "H1"
    H2 = "H2"
    H3 = "H3"
    H4 = "H4"
    H6 = "H6"
    H8 = "H8"
    H12 = "H12"
    D = "D"
    W = "W"
    M = "M"


class WeeklyAlignment(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class CandlestickData(V20Model):
    o: DecimalNumber
    h: DecimalNumber
    l: DecimalNumber  # noqa: E741
    c: DecimalNumber


class Candlestick(V20Model):
    time: DateTime
    bid: Optional[CandlestickData] = None
    ask: Optional[CandlestickData] = None
    mid: Optional[CandlestickData] = None
    volume: int
    complete: bool


class OrderBookBucket(V20Model):
    price: DecimalNumber
    long_count_percent: DecimalNumber
    short_count_percent: DecimalNumber


class OrderBook(V20Model):
    instrument: InstrumentName
    time: DateTime
    price: DecimalNumber
    bucket_width: DecimalNumber
    buckets: List[OrderBookBucket] = Field(default_factory=list)


class PositionBookBucket(V20Model):
    price: DecimalNumber
    long_count_percent: DecimalNumber
    short_count_percent: DecimalNumber


class PositionBook(V20Model):
    instrument: InstrumentName
    time: DateTime
    price: DecimalNumber
    bucket_width: DecimalNumber
    buckets: List[PositionBookBucket] = Field(default_factory=list)
