"""
Core types shared by every streaming method and indicator.

Public API:
-----------
    StreamingMethod      - Base class for seeded O(1) methods
    Window               - Fixed-capacity FIFO ring buffer
    Candle, Source       - OHLCV bar and price-source selection
    Action, signi        - Signal strength
    IndicatorConfig      - Indicator parameters + string setters
    IndicatorInstance    - Running indicator state
    IndicatorResult      - Values and signals of one step
    InvalidParameter     - Method parameter outside its domain
    IndicatorConfigError - Base of configuration errors
"""

from __future__ import annotations

from .errors import (
    InvalidParameter,
    IndicatorConfigError,
    UnknownParameterError,
    ParameterParseError,
    InvalidConfig,
)
from .method import StreamingMethod, validate_period
from .window import Window
from .candle import Candle, Source
from .action import Action, signi
from .indicator import IndicatorConfig, IndicatorInstance, IndicatorResult

__all__ = [
    # Errors
    "InvalidParameter",
    "IndicatorConfigError",
    "UnknownParameterError",
    "ParameterParseError",
    "InvalidConfig",
    # Method contract
    "StreamingMethod",
    "validate_period",
    "Window",
    # Data
    "Candle",
    "Source",
    "Action",
    "signi",
    # Indicators
    "IndicatorConfig",
    "IndicatorInstance",
    "IndicatorResult",
]
