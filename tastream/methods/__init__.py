"""
Streaming methods for manipulating timeseries.

Every method is seeded at construction and updated one input at a time
in O(1) amortized work:

    from tastream.methods import Highest, CrossAbove

    highest = Highest(length=20, value=first_high)
    cross = CrossAbove((first_close, first_ma))

    for candle in stream:
        hh = highest.update(candle.high)
        signal = cross.update((candle.close, ma.update(candle.close)))
"""

from __future__ import annotations

# Primitives
from .highest_lowest import Highest, Lowest
from .cumulative import Cumulative
from .adi import ADI
from .cross import Cross, CrossAbove, CrossUnder

# Regular methods
from .moving_average import SMA, WMA, EMA, DEMA, TEMA, RMA, MMA, SMMA, Change
from .regular import RegularMethods, regular_method

__all__ = [
    # Primitives
    "Highest",
    "Lowest",
    "Cumulative",
    "ADI",
    "Cross",
    "CrossAbove",
    "CrossUnder",
    # Regular methods
    "SMA",
    "WMA",
    "EMA",
    "DEMA",
    "TEMA",
    "RMA",
    "MMA",
    "SMMA",
    "Change",
    "RegularMethods",
    "regular_method",
]
