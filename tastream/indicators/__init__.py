"""
Technical indicators built from streaming methods.

Usage:
    from tastream.indicators import create_indicator

    kc = create_indicator("kc", first_candle, {"period": "14", "sigma": "2"})
    for candle in stream:
        result = kc.update(candle)
        source, upper, lower = result.values
        signal = result.signals[0]
"""

from __future__ import annotations

from .chaikin_money_flow import ChaikinMoneyFlow, ChaikinMoneyFlowInstance
from .chande_kroll_stop import ChandeKrollStop, ChandeKrollStopInstance
from .chande_momentum_oscillator import ChandeMomentumOscillator, ChandeMomentumOscillatorInstance
from .keltner_channels import KeltnerChannels, KeltnerChannelsInstance
from .tv_fisher_transform import TVFisherTransform, TVFisherTransformInstance
from .factory import (
    INDICATORS,
    create_indicator,
    get_indicator_config,
    list_indicators,
    supports_indicator,
)

__all__ = [
    # Configs and instances
    "ChaikinMoneyFlow",
    "ChaikinMoneyFlowInstance",
    "ChandeKrollStop",
    "ChandeKrollStopInstance",
    "ChandeMomentumOscillator",
    "ChandeMomentumOscillatorInstance",
    "KeltnerChannels",
    "KeltnerChannelsInstance",
    "TVFisherTransform",
    "TVFisherTransformInstance",
    # Factory
    "INDICATORS",
    "create_indicator",
    "get_indicator_config",
    "list_indicators",
    "supports_indicator",
]
