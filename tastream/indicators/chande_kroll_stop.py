"""
Chande Kroll Stop.

Links:
    https://tradingview.com/support/solutions/43000589105-chande-kroll-stop/

Formula:
    atr          = method(true_range, p)
    first_high   = highest(high, p) - x * atr
    first_low    = lowest(low, p) + x * atr
    stop_short   = highest(first_high, q)
    stop_long    = lowest(first_low, q)

3 values:
    stop long, source value, stop short (same range as the source)

2 signals:
    1. relative position of the source between stop long and stop short:
       above stop short -> full buy, below stop long -> full sell.
    2. appears only when stop long crosses stop short upwards; direction
       is the sign of the combined move of both stops.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..core.action import Action, signi
from ..core.candle import Candle, Source
from ..core.indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from ..core.method import StreamingMethod
from ..methods import CrossAbove, Highest, Lowest, RegularMethods, regular_method


@dataclass
class ChandeKrollStop(IndicatorConfig):
    """Chande Kroll Stop configuration."""

    NAME: ClassVar[str] = "ChandeKrollStop"
    SIZE: ClassVar[tuple[int, int]] = (3, 2)

    # ATR period length, range [1; inf)
    p: int = 10
    # ATR method
    method: RegularMethods = RegularMethods.SMA
    # ATR multiplier, range [0; inf)
    x: float = 1.0
    # multiplied highest/lowest period length, range [1; inf)
    q: int = 9
    # price source
    source: Source = Source.CLOSE

    def validate(self) -> bool:
        return self.x >= 0.0 and self.p >= 1 and self.q >= 1

    def _init(self, candle: Candle) -> ChandeKrollStopInstance:
        return ChandeKrollStopInstance(cfg=self, prev_candle=candle)


@dataclass
class ChandeKrollStopInstance(IndicatorInstance):
    """Chande Kroll Stop state."""

    cfg: ChandeKrollStop
    prev_candle: Candle
    _ma: StreamingMethod = field(init=False, repr=False)
    _highest1: Highest = field(init=False, repr=False)
    _lowest1: Lowest = field(init=False, repr=False)
    _highest2: Highest = field(init=False, repr=False)
    _lowest2: Lowest = field(init=False, repr=False)
    _prev_stop_short: float = field(init=False)
    _prev_stop_long: float = field(init=False)
    _cross_above: CrossAbove = field(init=False, repr=False)

    def __post_init__(self) -> None:
        cfg = self.cfg
        candle = self.prev_candle
        tr = candle.high - candle.low
        stop_short = candle.high - cfg.x * tr
        stop_long = candle.low + cfg.x * tr

        self._ma = regular_method(cfg.method, cfg.p, candle.tr(candle))
        self._highest1 = Highest(cfg.p, candle.high)
        self._lowest1 = Lowest(cfg.p, candle.low)
        self._highest2 = Highest(cfg.q, stop_short)
        self._lowest2 = Lowest(cfg.q, stop_long)
        self._prev_stop_short = stop_short
        self._prev_stop_long = stop_long
        self._cross_above = CrossAbove((stop_long, stop_short))

    @property
    def config(self) -> ChandeKrollStop:
        return self.cfg

    def update(self, candle: Candle) -> IndicatorResult:
        tr = candle.tr(self.prev_candle)
        self.prev_candle = candle

        atr = self._ma.update(tr)

        first_high = self._highest1.update(candle.high) - atr * self.cfg.x
        first_low = self._lowest1.update(candle.low) + atr * self.cfg.x

        stop_short = self._highest2.update(first_high)
        stop_long = self._lowest2.update(first_low)

        src = candle.source(self.cfg.source)

        mid = (stop_short + stop_long) * 0.5
        size = mid - stop_long
        value = 0.0 if size == 0.0 else (src - mid) / size

        # Signal 2 requires stop long actually crossing above stop short
        stops_move = (stop_short - self._prev_stop_short) + (stop_long - self._prev_stop_long)
        crossed = self._cross_above.update((stop_long, stop_short))
        if crossed and stop_short < stop_long:
            s2 = signi(stops_move)
        else:
            s2 = 0

        self._prev_stop_short = stop_short
        self._prev_stop_long = stop_long

        return IndicatorResult.new(
            [stop_long, src, stop_short],
            [Action.from_value(value), Action.from_sign(s2)],
        )
