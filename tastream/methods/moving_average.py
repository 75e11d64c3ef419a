"""
Regular moving averages with O(1) seeded updates.

Includes SMA, WMA, EMA, DEMA, TEMA and RMA. Every average is seeded with
a value that stands for all pre-history, so a constant input returns that
constant from the very first update.
"""

from __future__ import annotations

from ..core.method import StreamingMethod, validate_period
from ..core.window import Window
from .cumulative import Cumulative


class SMA(StreamingMethod):
    """
    Simple Moving Average with O(1) updates using a windowed sum.

    Formula:
        sma = sum(last length inputs) / length
    """

    __slots__ = ("length", "_sum", "_divider", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("SMA", "length", length)
        self._sum = Cumulative(length, value)
        self._divider = 1.0 / length
        self._value = value

    def update(self, value: float) -> float:
        self._value = self._sum.update(value) * self._divider
        return self._value

    def reset(self) -> None:
        self._sum.reset()
        self._value = self._sum.value * self._divider

    @property
    def value(self) -> float:
        return self._value


class WMA(StreamingMethod):
    """
    Weighted Moving Average with TRUE O(1) updates.

    Formula:
        wma = sum(weight[i] * x[i]) / sum(weights)
        where weight[i] = i + 1 (most recent has weight `length`)

    O(1) update technique:
        - Every value already in the window loses 1 from its weight:
          subtract window_sum (which still holds the oldest, weight 1)
        - New value enters with weight `length`
        - window_sum = window_sum - oldest + new
    """

    __slots__ = ("length", "_seed", "_window", "_divisor", "_numerator", "_window_sum", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("WMA", "length", length)
        self._seed = value
        self._window: Window[float] = Window(length, value)
        # Weight divisor = 1 + 2 + ... + length
        self._divisor = length * (length + 1) / 2.0
        self.reset()

    def update(self, value: float) -> float:
        oldest = self._window.push(value)
        self._numerator += self.length * value - self._window_sum
        self._window_sum += value - oldest
        self._value = self._numerator / self._divisor
        return self._value

    def reset(self) -> None:
        self._window.reset()
        self._numerator = self._seed * self._divisor
        self._window_sum = self._seed * self.length
        self._value = self._seed

    @property
    def value(self) -> float:
        return self._value


class EMA(StreamingMethod):
    """
    Exponential Moving Average with O(1) updates.

    Formula:
        alpha = 2 / (length + 1)
        ema = alpha * x + (1 - alpha) * ema_prev
    """

    __slots__ = ("length", "_alpha", "_seed", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("EMA", "length", length)
        self._alpha = 2.0 / (length + 1)
        self._seed = value
        self._value = value

    def update(self, value: float) -> float:
        self._value = self._alpha * value + (1.0 - self._alpha) * self._value
        return self._value

    def reset(self) -> None:
        self._value = self._seed

    @property
    def value(self) -> float:
        return self._value


class DEMA(StreamingMethod):
    """
    Double EMA.

    Formula:
        dema = 2 * ema1 - ema2
        where ema2 = ema(ema1)
    """

    __slots__ = ("length", "_ema1", "_ema2", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("DEMA", "length", length)
        self._ema1 = EMA(length, value)
        self._ema2 = EMA(length, value)
        self._value = value

    def update(self, value: float) -> float:
        e1 = self._ema1.update(value)
        e2 = self._ema2.update(e1)
        self._value = 2.0 * e1 - e2
        return self._value

    def reset(self) -> None:
        self._ema1.reset()
        self._ema2.reset()
        self._value = self._ema1.value

    @property
    def value(self) -> float:
        return self._value


class TEMA(StreamingMethod):
    """
    Triple EMA.

    Formula:
        tema = 3 * (ema1 - ema2) + ema3
    """

    __slots__ = ("length", "_ema1", "_ema2", "_ema3", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("TEMA", "length", length)
        self._ema1 = EMA(length, value)
        self._ema2 = EMA(length, value)
        self._ema3 = EMA(length, value)
        self._value = value

    def update(self, value: float) -> float:
        e1 = self._ema1.update(value)
        e2 = self._ema2.update(e1)
        e3 = self._ema3.update(e2)
        self._value = 3.0 * (e1 - e2) + e3
        return self._value

    def reset(self) -> None:
        self._ema1.reset()
        self._ema2.reset()
        self._ema3.reset()
        self._value = self._ema1.value

    @property
    def value(self) -> float:
        return self._value


class RMA(StreamingMethod):
    """
    Running (Wilder's) Moving Average.

    Formula:
        alpha = 1 / length
        rma = alpha * x + (1 - alpha) * rma_prev

    Example:
        >>> rma = RMA(3, 1.0)
        >>> round(rma.update(1.0), 6)
        1.0
        >>> round(rma.update(2.0), 6)
        1.333333
        >>> round(rma.update(3.0), 6)
        1.888889
    """

    __slots__ = ("length", "_alpha", "_alpha_rev", "_seed", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("RMA", "length", length)
        self._alpha = 1.0 / length
        self._alpha_rev = 1.0 - self._alpha
        self._seed = value
        self._value = value

    def update(self, value: float) -> float:
        self._value = self._alpha * value + self._alpha_rev * self._value
        return self._value

    def reset(self) -> None:
        self._value = self._seed

    @property
    def value(self) -> float:
        return self._value


# Aliases
MMA = RMA
SMMA = RMA


class Change(StreamingMethod):
    """
    Difference from the value `length` steps back.

    Formula:
        change = x - x[length steps ago]
    """

    __slots__ = ("length", "_window", "_value")

    def __init__(self, length: int, value: float) -> None:
        self.length = validate_period("Change", "length", length)
        self._window: Window[float] = Window(length, value)
        self._value = 0.0

    def update(self, value: float) -> float:
        self._value = value - self._window.push(value)
        return self._value

    def reset(self) -> None:
        self._window.reset()
        self._value = 0.0

    @property
    def value(self) -> float:
        return self._value
