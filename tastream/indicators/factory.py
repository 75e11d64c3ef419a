"""
Factory for creating indicators from a name and string parameters.

Provides create_indicator() to instantiate any indicator from a type
string and a {name: value} dict of string parameters, plus registry
query functions.
"""

from __future__ import annotations

from ..core.candle import Candle
from ..core.indicator import IndicatorConfig, IndicatorInstance
from ..utils.logger import get_logger
from .chaikin_money_flow import ChaikinMoneyFlow
from .chande_kroll_stop import ChandeKrollStop
from .chande_momentum_oscillator import ChandeMomentumOscillator
from .keltner_channels import KeltnerChannels
from .tv_fisher_transform import TVFisherTransform


# Dict-based factory: indicator key -> config class
INDICATORS: dict[str, type[IndicatorConfig]] = {
    "cmf": ChaikinMoneyFlow,
    "cks": ChandeKrollStop,
    "kc": KeltnerChannels,
    "cmo": ChandeMomentumOscillator,
    "tv_fisher": TVFisherTransform,
}

# Full class names resolve to the same configs
_BY_NAME: dict[str, str] = {cls.NAME.lower(): key for key, cls in INDICATORS.items()}


def _resolve(indicator_type: str) -> type[IndicatorConfig]:
    key = indicator_type.strip().lower()
    key = _BY_NAME.get(key, key)
    config_cls = INDICATORS.get(key)
    if config_cls is None:
        raise ValueError(
            f"Unknown indicator '{indicator_type}'. "
            f"Valid: {sorted(INDICATORS)}"
        )
    return config_cls


def get_indicator_config(
    indicator_type: str,
    params: dict[str, str] | None = None,
) -> IndicatorConfig:
    """
    Build an indicator configuration with string parameters applied.

    Args:
        indicator_type: Short key ("kc") or class name ("KeltnerChannels").
        params: String parameters, parsed per field type.

    Raises:
        ValueError: If indicator_type is unknown.
        UnknownParameterError: If params names an unknown field.
        ParameterParseError: If a value cannot be parsed.
    """
    config = _resolve(indicator_type)()
    if params:
        config.set_many(params)
    return config


def create_indicator(
    indicator_type: str,
    candle: Candle,
    params: dict[str, str] | None = None,
) -> IndicatorInstance:
    """
    Create a running indicator seeded with `candle`.

    Raises:
        ValueError: If indicator_type is unknown.
        IndicatorConfigError: If params are unknown, unparsable or invalid.
    """
    config = get_indicator_config(indicator_type, params)
    instance = config.init(candle)
    get_logger().debug("Created indicator %s", config.NAME)
    return instance


def supports_indicator(indicator_type: str) -> bool:
    key = indicator_type.strip().lower()
    return key in INDICATORS or key in _BY_NAME


def list_indicators() -> list[str]:
    """Get sorted list of indicator keys."""
    return sorted(INDICATORS)
