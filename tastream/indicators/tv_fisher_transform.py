"""
Fisher Transform, TradingView variant.

Links:
    https://www.investopedia.com/terms/f/fisher-transform.asp

Formula:
    x      = 0.66 * ((src - lowest) / (highest - lowest) - 0.5) + 0.67 * x_prev
    b      = clamp(x, -0.999, 0.999)
    fisher = 0.5 * ln((1 + b) / (1 - b)) + 0.5 * fisher_prev

highest/lowest run over period1. A flat window (highest == lowest)
divides by 1 instead of 0.

2 values:
    fisher, trigger (method(period2) over the previous fisher value)

2 signals:
    1. reversal out of an extreme zone: full buy when fisher is below
       -zone and turns up, full sell when above +zone and turns down.
    2. direction change: full buy when fisher starts rising, full sell
       when it stops rising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from ..core.action import Action
from ..core.candle import Candle, Source
from ..core.indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from ..core.method import StreamingMethod
from ..methods import Highest, Lowest, RegularMethods, regular_method

BOUND = 0.999


def _bound_value(value: float) -> float:
    return min(BOUND, max(-BOUND, value))


@dataclass
class TVFisherTransform(IndicatorConfig):
    """Fisher Transform (TradingView) configuration."""

    NAME: ClassVar[str] = "TVFisherTransform"
    SIZE: ClassVar[tuple[int, int]] = (2, 2)

    period1: int = 9
    period2: int = 1
    zone: float = 1.5
    method: RegularMethods = RegularMethods.SMA
    source: Source = Source.TP

    def validate(self) -> bool:
        return self.period1 >= 3 and self.period2 >= 1 and self.zone >= 0.0

    def _init(self, candle: Candle) -> TVFisherTransformInstance:
        return TVFisherTransformInstance(cfg=self, candle=candle)


@dataclass
class TVFisherTransformInstance(IndicatorInstance):
    """Fisher Transform state."""

    cfg: TVFisherTransform
    candle: Candle = field(repr=False)
    _trigger: StreamingMethod = field(init=False, repr=False)
    _highest: Highest = field(init=False, repr=False)
    _lowest: Lowest = field(init=False, repr=False)
    _prev_value: float = field(default=0.0, init=False)
    _prev_fish: float = field(default=0.0, init=False)
    _prev_rising: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        src = self.candle.source(self.cfg.source)
        self._trigger = regular_method(self.cfg.method, self.cfg.period2, 0.0)
        self._highest = Highest(self.cfg.period1, src)
        self._lowest = Lowest(self.cfg.period1, src)

    @property
    def config(self) -> TVFisherTransform:
        return self.cfg

    def update(self, candle: Candle) -> IndicatorResult:
        src = candle.source(self.cfg.source)

        # Normalize price to [-1, 1] over period1
        h = self._highest.update(src)
        lo = self._lowest.update(src)
        span = h - lo if h != lo else 1.0
        v1 = 0.66 * ((src - lo) / span - 0.5) + 0.67 * self._prev_value
        self._prev_value = v1

        bound_val = _bound_value(v1)
        fisher = 0.5 * math.log((1.0 + bound_val) / (1.0 - bound_val)) + 0.5 * self._prev_fish
        slope = fisher - self._prev_fish

        zone = self.cfg.zone
        if fisher < -zone and slope > 0:
            s1 = 1
        elif fisher > zone and slope < 0:
            s1 = -1
        else:
            s1 = 0

        rising = fisher > self._prev_fish
        if rising != self._prev_rising:
            s2 = 1 if rising else -1
        else:
            s2 = 0
        self._prev_rising = rising

        trigger = self._trigger.update(self._prev_fish)
        self._prev_fish = fisher

        return IndicatorResult.new(
            [fisher, trigger],
            [Action.from_sign(s1), Action.from_sign(s2)],
        )
