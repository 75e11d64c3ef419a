"""
Closed set of regular moving averages selectable by name.

Indicators let users pick a smoothing method from configuration strings.
The name is parsed once into RegularMethods and resolved once into a
concrete method through a dict-based factory; there is no reflection or
open-ended lookup.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ..core.method import StreamingMethod
from ..utils.logger import get_logger
from .moving_average import DEMA, EMA, RMA, SMA, TEMA, WMA


class RegularMethods(str, Enum):
    """Moving averages an indicator may be configured with."""

    SMA = "sma"
    WMA = "wma"
    EMA = "ema"
    DEMA = "dema"
    TEMA = "tema"
    RMA = "rma"

    @classmethod
    def parse(cls, text: str) -> RegularMethods:
        """
        Parse a method name case-insensitively ("mma"/"smma" mean RMA).

        Raises:
            ValueError: If the name is not a regular method.
        """
        key = text.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown method '{text}'. Valid: {valid}") from None


_ALIASES: dict[str, str] = {
    "mma": "rma",
    "smma": "rma",
    "wilder": "rma",
}


_FACTORY: dict[RegularMethods, Callable[[int, float], StreamingMethod]] = {
    RegularMethods.SMA: SMA,
    RegularMethods.WMA: WMA,
    RegularMethods.EMA: EMA,
    RegularMethods.DEMA: DEMA,
    RegularMethods.TEMA: TEMA,
    RegularMethods.RMA: RMA,
}


def regular_method(kind: RegularMethods | str, length: int, value: float) -> StreamingMethod:
    """
    Create a seeded moving average of the given kind.

    Args:
        kind: RegularMethods member or its name.
        length: Averaging length (must be >= 1).
        value: Seed value.

    Raises:
        ValueError: If kind is an unknown name.
        InvalidParameter: If length < 1.
    """
    if not isinstance(kind, RegularMethods):
        kind = RegularMethods.parse(kind)
    method = _FACTORY[kind](length, value)
    get_logger().debug("Created %s(length=%d)", kind.name, length)
    return method
