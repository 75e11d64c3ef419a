"""
Chaikin Money Flow.

Links:
    https://en.wikipedia.org/wiki/Chaikin_Analytics

Formula:
    cmf = sum(clv * volume, size) / sum(volume, size)

1 value:
    main value, range [-1.0, 1.0]

1 signal:
    full buy when main crosses above zero, full sell when it crosses below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ..core.action import Action
from ..core.candle import Candle
from ..core.indicator import IndicatorConfig, IndicatorInstance, IndicatorResult
from ..methods import ADI, Cross, Cumulative


@dataclass
class ChaikinMoneyFlow(IndicatorConfig):
    """Chaikin Money Flow configuration."""

    NAME: ClassVar[str] = "ChaikinMoneyFlow"
    SIZE: ClassVar[tuple[int, int]] = (1, 1)
    VOLUME_BASED: ClassVar[bool] = True

    # main length size, range [2; inf)
    size: int = 20

    def validate(self) -> bool:
        return self.size > 1

    def _init(self, candle: Candle) -> ChaikinMoneyFlowInstance:
        return ChaikinMoneyFlowInstance(cfg=self, candle=candle)


@dataclass
class ChaikinMoneyFlowInstance(IndicatorInstance):
    """Chaikin Money Flow state."""

    cfg: ChaikinMoneyFlow
    candle: Candle = field(repr=False)
    _adi: ADI = field(init=False, repr=False)
    _vol_sum: Cumulative = field(init=False, repr=False)
    _cross: Cross = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._adi = ADI(self.cfg.size, self.candle)
        self._vol_sum = Cumulative(self.cfg.size, self.candle.volume)
        self._cross = Cross()

    @property
    def config(self) -> ChaikinMoneyFlow:
        return self.cfg

    def update(self, candle: Candle) -> IndicatorResult:
        adi = self._adi.update(candle)
        vol_sum = self._vol_sum.update(candle.volume)

        # No volume in the window: no money flow either way
        value = adi / vol_sum if vol_sum != 0 else 0.0
        signal = self._cross.update((value, 0.0))

        return IndicatorResult.new([value], [Action.from_sign(signal)])
