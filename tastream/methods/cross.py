"""
Edge-triggered crossing detectors over a pair of streams.

Each detector remembers the last STRICT relation between `a` and `b`
(above: a > b, below: a < b). Equal steps neither fire nor reset that
memory, so a signal fires exactly once per genuine sign change of
(a - b), no matter how many equal steps sit in between:

    a:        1  3  4  4  5  2  6
    b:        4  4  4  4  4  4  4
    above:    0  0  0  0  1  0  1

Signal convention:
- CrossAbove: +1 when the relation becomes "above", else 0
- CrossUnder: -1 when the relation becomes "below", else 0
- Cross:      +1 / -1 / 0 from one shared state machine, so a single
              step can never fire both directions

The initial pair establishes the relation without emitting; without one
the relation starts undetermined and the first strict side fires.
"""

from __future__ import annotations

from ..core.action import signi
from ..core.method import StreamingMethod

_UNDETERMINED = 0


def _relation(pair: tuple[float, float] | None) -> int:
    """Strict side of a pair: 1 above, -1 below, 0 equal/undetermined."""
    if pair is None:
        return _UNDETERMINED
    a, b = pair
    return signi(a - b)


class _CrossBase(StreamingMethod):
    """Shared strict-side memory for the crossing detectors."""

    __slots__ = ("_initial_side", "_side", "_signal")

    def __init__(self, initial: tuple[float, float] | None = None) -> None:
        """
        Args:
            initial: Optional (a0, b0) establishing the starting relation.
        """
        self._initial_side = _relation(initial)
        self._side = self._initial_side
        self._signal = 0

    def _advance(self, pair: tuple[float, float]) -> int:
        """
        Update the remembered side; return the new side on a change, else 0.
        """
        side = _relation(pair)
        if side == _UNDETERMINED or side == self._side:
            return 0
        self._side = side
        return side

    def reset(self) -> None:
        self._side = self._initial_side
        self._signal = 0

    @property
    def value(self) -> int:
        """Signal emitted by the last update (0 before any update)."""
        return self._signal

    @property
    def side(self) -> int:
        """Last strict relation: 1 above, -1 below, 0 undetermined."""
        return self._side

    def __repr__(self) -> str:
        return f"{type(self).__name__}(side={self._side}, value={self._signal})"


class Cross(_CrossBase):
    """Signed crossing detector: +1 cross above, -1 cross under."""

    __slots__ = ()

    def update(self, value: tuple[float, float]) -> int:
        self._signal = self._advance(value)
        return self._signal


class CrossAbove(_CrossBase):
    """
    Fires +1 on the step `a` moves strictly above `b`.

    Example:
        >>> cross = CrossAbove((1.0, 4.0))
        >>> [cross.update((a, 4.0)) for a in (1.0, 3.0, 5.0, 2.0, 6.0)]
        [0, 0, 1, 0, 1]
    """

    __slots__ = ()

    def update(self, value: tuple[float, float]) -> int:
        changed = self._advance(value)
        self._signal = 1 if changed > 0 else 0
        return self._signal


class CrossUnder(_CrossBase):
    """Fires -1 on the step `a` moves strictly below `b`."""

    __slots__ = ()

    def update(self, value: tuple[float, float]) -> int:
        changed = self._advance(value)
        self._signal = -1 if changed < 0 else 0
        return self._signal
