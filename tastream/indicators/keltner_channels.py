"""
Keltner Channels.

Links:
    https://en.wikipedia.org/wiki/Keltner_channel

Formula:
    middle = method(source, period)
    atr    = sma(true_range, period)
    upper  = middle + sigma * atr
    lower  = middle - sigma * atr

3 values:
    source, upper bound, lower bound

1 signal:
    full buy when the source crosses under the lower bound, full sell when
    it crosses above the upper bound.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..core.action import Action
from ..core.candle import Candle, Source
from ..core.indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from ..core.method import StreamingMethod
from ..methods import SMA, CrossAbove, CrossUnder, RegularMethods, regular_method


@dataclass
class KeltnerChannels(IndicatorConfig):
    """Keltner Channels configuration."""

    NAME: ClassVar[str] = "KeltnerChannels"
    SIZE: ClassVar[tuple[int, int]] = (3, 1)

    period: int = 20
    method: RegularMethods = RegularMethods.EMA
    sigma: float = 1.0
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return self.period > 1 and self.sigma > 1e-4

    def _init(self, candle: Candle) -> KeltnerChannelsInstance:
        return KeltnerChannelsInstance(cfg=self, prev_candle=candle)


@dataclass
class KeltnerChannelsInstance(IndicatorInstance):
    """Keltner Channels state."""

    cfg: KeltnerChannels
    prev_candle: Candle
    _ma: StreamingMethod = field(init=False, repr=False)
    _atr: SMA = field(init=False, repr=False)
    _cross_above: CrossAbove = field(init=False, repr=False)
    _cross_under: CrossUnder = field(init=False, repr=False)

    def __post_init__(self) -> None:
        candle = self.prev_candle
        self._ma = regular_method(self.cfg.method, self.cfg.period, candle.source(self.cfg.source))
        self._atr = SMA(self.cfg.period, candle.high - candle.low)
        self._cross_above = CrossAbove()
        self._cross_under = CrossUnder()

    @property
    def config(self) -> KeltnerChannels:
        return self.cfg

    def update(self, candle: Candle) -> IndicatorResult:
        source = candle.source(self.cfg.source)
        tr = candle.tr(self.prev_candle)
        self.prev_candle = candle

        ma = self._ma.update(source)
        atr = self._atr.update(tr)

        upper = ma + atr * self.cfg.sigma
        lower = ma - atr * self.cfg.sigma

        # Both detectors must advance every step to keep their state current
        under = self._cross_under.update((source, lower))
        above = self._cross_above.update((source, upper))
        if under:
            signal = 1
        elif above:
            signal = -1
        else:
            signal = 0

        return IndicatorResult.new([source, upper, lower], [Action.from_sign(signal)])
