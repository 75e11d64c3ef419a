"""
Trading signal values produced by indicators.

An Action is a signed strength in [-1, 1]: positive means buy, negative
means sell, zero means no signal. Strength is stored as an integer in
[-255, 255] so equal signals compare equal regardless of float noise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

_BOUND = 255


def signi(value: float) -> int:
    """Sign of `value` as -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass(frozen=True, slots=True)
class Action:
    """Signed signal strength."""

    strength: int = 0

    BUY_ALL: ClassVar[Action]
    SELL_ALL: ClassVar[Action]
    NONE: ClassVar[Action]

    def __post_init__(self) -> None:
        if not -_BOUND <= self.strength <= _BOUND:
            raise ValueError(
                f"strength must be in [-{_BOUND}, {_BOUND}], got {self.strength}"
            )

    @classmethod
    def from_value(cls, value: float) -> Action:
        """
        Build an action from a float, clamped to [-1, 1].

        NaN maps to no signal.
        """
        if math.isnan(value):
            return cls.NONE
        clamped = min(1.0, max(-1.0, value))
        return cls(int(round(clamped * _BOUND)))

    @classmethod
    def from_sign(cls, sign: int) -> Action:
        """Full buy for positive, full sell for negative, none for zero."""
        if sign > 0:
            return cls.BUY_ALL
        if sign < 0:
            return cls.SELL_ALL
        return cls.NONE

    @property
    def ratio(self) -> float:
        """Strength as a float in [-1, 1]."""
        return self.strength / _BOUND

    @property
    def sign(self) -> int:
        return signi(self.strength)

    @property
    def is_buy(self) -> bool:
        return self.strength > 0

    @property
    def is_sell(self) -> bool:
        return self.strength < 0

    def __bool__(self) -> bool:
        return self.strength != 0

    def __repr__(self) -> str:
        if self.strength > 0:
            return f"Action.buy({self.ratio:.3f})"
        if self.strength < 0:
            return f"Action.sell({-self.ratio:.3f})"
        return "Action.none()"


Action.BUY_ALL = Action(_BOUND)
Action.SELL_ALL = Action(-_BOUND)
Action.NONE = Action(0)
