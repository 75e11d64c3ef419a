"""
Chande Momentum Oscillator.

Links:
    https://www.investopedia.com/terms/c/chandemomentumoscillator.asp

Formula:
    change   = source - prev_source
    pos_sum  = sum(max(change, 0), period)
    neg_sum  = sum(max(-change, 0), period)
    cmo      = (pos_sum - neg_sum) / (pos_sum + neg_sum)

1 value:
    main value, range [-1.0, 1.0]

1 signal:
    full buy when main crosses under -zone, full sell when it crosses
    above +zone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..core.action import Action
from ..core.candle import Candle, Source
from ..core.indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from ..methods import Change, CrossAbove, CrossUnder, Cumulative


def _split_change(change: float) -> tuple[float, float]:
    """Split a change into (gain, loss), both >= 0."""
    if change > 0:
        return change, 0.0
    if change < 0:
        return 0.0, -change
    return 0.0, 0.0


@dataclass
class ChandeMomentumOscillator(IndicatorConfig):
    """Chande Momentum Oscillator configuration."""

    NAME: ClassVar[str] = "ChandeMomentumOscillator"
    SIZE: ClassVar[tuple[int, int]] = (1, 1)

    period: int = 9
    # signal zone, range [0.0; 1.0]
    zone: float = 0.5
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return self.period >= 1 and 0.0 <= self.zone <= 1.0

    def _init(self, candle: Candle) -> ChandeMomentumOscillatorInstance:
        return ChandeMomentumOscillatorInstance(cfg=self, candle=candle)


@dataclass
class ChandeMomentumOscillatorInstance(IndicatorInstance):
    """Chande Momentum Oscillator state."""

    cfg: ChandeMomentumOscillator
    candle: Candle = field(repr=False)
    _change: Change = field(init=False, repr=False)
    _pos_sum: Cumulative = field(init=False, repr=False)
    _neg_sum: Cumulative = field(init=False, repr=False)
    _cross_under: CrossUnder = field(init=False, repr=False)
    _cross_above: CrossAbove = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._change = Change(1, self.candle.source(self.cfg.source))
        # History before the seed candle carries no momentum
        self._pos_sum = Cumulative(self.cfg.period, 0.0)
        self._neg_sum = Cumulative(self.cfg.period, 0.0)
        self._cross_under = CrossUnder()
        self._cross_above = CrossAbove()

    @property
    def config(self) -> ChandeMomentumOscillator:
        return self.cfg

    def update(self, candle: Candle) -> IndicatorResult:
        gain, loss = _split_change(self._change.update(candle.source(self.cfg.source)))

        pos_sum = self._pos_sum.update(gain)
        neg_sum = self._neg_sum.update(loss)

        total = pos_sum + neg_sum
        value = (pos_sum - neg_sum) / total if total != 0 else 0.0

        under = self._cross_under.update((value, -self.cfg.zone))
        above = self._cross_above.update((value, self.cfg.zone))
        if under:
            signal = 1
        elif above:
            signal = -1
        else:
            signal = 0

        return IndicatorResult.new([value], [Action.from_sign(signal)])
