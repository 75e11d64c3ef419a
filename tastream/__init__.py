"""
tastream - streaming technical analysis.

Seeded O(1) methods (windowed extrema, windowed sums, crossings, moving
averages) and the indicators built from them.

    from tastream import Candle, Highest, create_indicator

    highest = Highest(20, first.high)
    cmf = create_indicator("cmf", first, {"size": "21"})
"""

from __future__ import annotations

from .core import (
    Action,
    Candle,
    IndicatorConfig,
    IndicatorConfigError,
    IndicatorInstance,
    IndicatorResult,
    InvalidConfig,
    InvalidParameter,
    ParameterParseError,
    Source,
    StreamingMethod,
    UnknownParameterError,
    Window,
    signi,
)
from .methods import (
    ADI,
    Change,
    Cross,
    CrossAbove,
    CrossUnder,
    Cumulative,
    DEMA,
    EMA,
    Highest,
    Lowest,
    MMA,
    RMA,
    RegularMethods,
    SMA,
    SMMA,
    TEMA,
    WMA,
    regular_method,
)
from .indicators import (
    ChaikinMoneyFlow,
    ChandeKrollStop,
    ChandeMomentumOscillator,
    KeltnerChannels,
    TVFisherTransform,
    create_indicator,
    get_indicator_config,
    list_indicators,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Action",
    "Candle",
    "IndicatorConfig",
    "IndicatorConfigError",
    "IndicatorInstance",
    "IndicatorResult",
    "InvalidConfig",
    "InvalidParameter",
    "ParameterParseError",
    "Source",
    "StreamingMethod",
    "UnknownParameterError",
    "Window",
    "signi",
    # Primitives
    "ADI",
    "Cross",
    "CrossAbove",
    "CrossUnder",
    "Cumulative",
    "Highest",
    "Lowest",
    # Regular methods
    "Change",
    "DEMA",
    "EMA",
    "MMA",
    "RMA",
    "RegularMethods",
    "SMA",
    "SMMA",
    "TEMA",
    "WMA",
    "regular_method",
    # Indicators
    "ChaikinMoneyFlow",
    "ChandeKrollStop",
    "ChandeMomentumOscillator",
    "KeltnerChannels",
    "TVFisherTransform",
    "create_indicator",
    "get_indicator_config",
    "list_indicators",
]
