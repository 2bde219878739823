"""Prices, price buckets and home currency conversions."""

from __future__ import annotations

from typing import List, NewType, Optional

from pydantic import Field

from .base import DateTime, DecimalNumber, V20Model
from .primitives import Currency, InstrumentName

# Any combination of "M" (mid), "B" (bid) and "A" (ask), e.g. "BA".
PricingComponent = NewType("PricingComponent", str)


class PriceBucket(V20Model):
    price: DecimalNumber
    liquidity: Optional[DecimalNumber] = None


class QuoteHomeConversionFactors(V20Model):
    positive_units: DecimalNumber
    negative_units: DecimalNumber


class ClientPrice(V20Model):
    """Bid/ask price of an instrument as seen by one account."""

    type: str = "PRICE"
    instrument: InstrumentName
    time: DateTime
    tradeable: Optional[bool] = None
    bids: List[PriceBucket] = Field(default_factory=list)
    asks: List[PriceBucket] = Field(default_factory=list)
    closeout_bid: Optional[DecimalNumber] = None
    closeout_ask: Optional[DecimalNumber] = None
    quote_home_conversion_factors: Optional[QuoteHomeConversionFactors] = None

    @property
    def best_bid(self) -> Optional[DecimalNumber]:
        return self.bids[0].price if self.bids else None

    @property
    def best_ask(self) -> Optional[DecimalNumber]:
        return self.asks[0].price if self.asks else None


class PricingHeartbeat(V20Model):
    """Keepalive frame of the pricing stream."""

    type: str = "HEARTBEAT"
    time: DateTime


class HomeConversions(V20Model):
    currency: Currency
    account_gain: DecimalNumber
    account_loss: DecimalNumber
    position_value: DecimalNumber
