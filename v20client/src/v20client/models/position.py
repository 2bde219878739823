"""Positions: the per-instrument aggregate of an account's trades."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import DecimalNumber, V20Model
from .primitives import InstrumentName, TradeID


class PositionSide(V20Model):
    """One side (long or short) of a position."""

    units: DecimalNumber
    average_price: Optional[DecimalNumber] = None
    trade_ids: List[TradeID] = Field(default_factory=list)
    pl: Optional[DecimalNumber] = None
    unrealized_pl: Optional[DecimalNumber] = None
    resettable_pl: Optional[DecimalNumber] = None
    financing: Optional[DecimalNumber] = None
    dividend_adjustment: Optional[DecimalNumber] = None
    guaranteed_execution_fees: Optional[DecimalNumber] = None


class Position(V20Model):
    instrument: InstrumentName
    pl: Optional[DecimalNumber] = None
    unrealized_pl: Optional[DecimalNumber] = None
    margin_used: Optional[DecimalNumber] = None
    resettable_pl: Optional[DecimalNumber] = None
    financing: Optional[DecimalNumber] = None
    commission: Optional[DecimalNumber] = None
    dividend_adjustment: Optional[DecimalNumber] = None
    guaranteed_execution_fees: Optional[DecimalNumber] = None
    long: PositionSide
    short: PositionSide

    @property
    def net_units(self) -> DecimalNumber:
        return self.long.units + self.short.units


class CalculatedPositionState(V20Model):
    instrument: InstrumentName
    net_unrealized_pl: Optional[DecimalNumber] = None
    long_unrealized_pl: Optional[DecimalNumber] = None
    short_unrealized_pl: Optional[DecimalNumber] = None
    margin_used: Optional[DecimalNumber] = None
