"""
Accumulation/Distribution Index over candles.

Formula:
    contribution = clv * volume
    clv = ((close - low) - (high - close)) / (high - low)

With length >= 1 the index is the sum of the last `length`
contributions (Cumulative). With length == 0 it is the classic unbounded
accumulation/distribution line.
"""

from __future__ import annotations

from ..core.candle import Candle
from ..core.method import StreamingMethod, validate_period
from .cumulative import Cumulative


class ADI(StreamingMethod):
    """
    Windowed (length >= 1) or unbounded (length == 0) A/D index.

    The seed candle's contribution pre-fills the window; for the unbounded
    line it is the starting total.
    """

    __slots__ = ("length", "_seed", "_cumulative", "_total")

    def __init__(self, length: int, candle: Candle) -> None:
        self.length = validate_period("ADI", "length", length, minimum=0)
        self._seed = candle.clv * candle.volume
        self._cumulative = Cumulative(length, self._seed) if length > 0 else None
        self._total = self._seed if self._cumulative is None else self._cumulative.value

    def update(self, candle: Candle) -> float:
        contribution = candle.clv * candle.volume
        if self._cumulative is None:
            self._total += contribution
        else:
            self._total = self._cumulative.update(contribution)
        return self._total

    def reset(self) -> None:
        if self._cumulative is None:
            self._total = self._seed
        else:
            self._cumulative.reset()
            self._total = self._cumulative.value

    @property
    def value(self) -> float:
        return self._total
