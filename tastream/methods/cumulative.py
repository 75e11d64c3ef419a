"""
Windowed running sum with O(1) updates.

Uses running sum technique:
    total = total + new - window.push(new)

Every indicator that needs a trailing sum (volume totals, gain/loss
totals, moving averages) reuses Cumulative instead of keeping its own
window bookkeeping.

Numerics: the total is maintained by running subtraction, not fresh
summation, so floating-point error can accumulate over very long streams.
This is the cost of O(1) updates versus O(length) resummation; reset()
is the way to start from an exact total again.
"""

from __future__ import annotations

from ..core.method import StreamingMethod, validate_period
from ..core.window import Window


class Cumulative(StreamingMethod):
    """
    Sum of the last `length` contributions.

    The window starts filled with the seed contribution, so while warming
    up the total includes (length - k) copies of the seed after k updates.

    Example:
        >>> acc = Cumulative(2, 0.0)
        >>> [acc.update(v) for v in (3.0, 5.0, 2.0, 4.0)]
        [3.0, 8.0, 7.0, 6.0]
    """

    __slots__ = ("length", "_seed", "_window", "_total")

    def __init__(self, length: int, value: float) -> None:
        """
        Args:
            length: Number of contributions summed (must be >= 1).
            value: Seed contribution.

        Raises:
            InvalidParameter: If length < 1.
        """
        self.length = validate_period("Cumulative", "length", length)
        self._seed = value
        self._window: Window[float] = Window(length, value)
        self._total = value * length

    def update(self, value: float) -> float:
        """Add a contribution, drop the one leaving the window - O(1)."""
        self._total += value - self._window.push(value)
        return self._total

    def reset(self) -> None:
        self._window.reset()
        self._total = self._seed * self.length

    @property
    def value(self) -> float:
        """Current total."""
        return self._total

    @property
    def window(self) -> Window[float]:
        """Contributions currently summed (oldest first)."""
        return self._window

    def __repr__(self) -> str:
        return f"Cumulative(length={self.length}, value={self._total!r})"
