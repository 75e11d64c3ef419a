"""
OHLCV candle and price-source selection.

Candle is the input of every candle-based indicator. Derived quantities
(true range, typical price, close-location value) live here so indicators
do not reimplement them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Source(str, Enum):
    """Which candle quantity an indicator reads."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    TP = "tp"  # (high + low + close) / 3
    HL2 = "hl2"
    OHLC4 = "ohlc4"
    VOLUMED_PRICE = "volumed_price"  # tp * volume

    @classmethod
    def parse(cls, text: str) -> Source:
        """
        Parse a source name case-insensitively.

        Raises:
            ValueError: If the name is not a known source.
        """
        key = text.strip().lower()
        aliases = {"typical": "tp", "typical_price": "tp", "hlc3": "tp"}
        key = aliases.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown source '{text}'. Valid: {valid}") from None


@dataclass(frozen=True, slots=True)
class Candle:
    """Immutable OHLCV bar."""

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def tp(self) -> float:
        """Typical price: (high + low + close) / 3."""
        return (self.high + self.low + self.close) / 3.0

    @property
    def hl2(self) -> float:
        return (self.high + self.low) * 0.5

    @property
    def ohlc4(self) -> float:
        return (self.open + self.high + self.low + self.close) * 0.25

    @property
    def volumed_price(self) -> float:
        return self.tp * self.volume

    @property
    def clv(self) -> float:
        """
        Close location value in [-1, 1].

        Formula:
            clv = ((close - low) - (high - close)) / (high - low)

        Returns 0 for a zero-range candle.
        """
        if self.high == self.low:
            return 0.0
        return ((self.close - self.low) - (self.high - self.close)) / (self.high - self.low)

    def tr(self, prev: Candle) -> float:
        """
        True range relative to the previous candle.

        Formula:
            tr = max(high, prev.close) - min(low, prev.close)
        """
        return max(self.high, prev.close) - min(self.low, prev.close)

    def source(self, source: Source) -> float:
        """Return the quantity selected by `source`."""
        if source is Source.CLOSE:
            return self.close
        if source is Source.OPEN:
            return self.open
        if source is Source.HIGH:
            return self.high
        if source is Source.LOW:
            return self.low
        if source is Source.VOLUME:
            return self.volume
        if source is Source.TP:
            return self.tp
        if source is Source.HL2:
            return self.hl2
        if source is Source.OHLC4:
            return self.ohlc4
        return self.volumed_price

    @classmethod
    def from_price(cls, price: float, volume: float = 0.0) -> Candle:
        """Flat candle with every price field equal to `price`."""
        return cls(open=price, high=price, low=price, close=price, volume=volume)
