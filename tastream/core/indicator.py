"""
Indicator configuration and instance interfaces.

An indicator is split in two:
- IndicatorConfig: a dataclass of parameters with defaults, string
  key/value setters and validation rules.
- IndicatorInstance: the running state created by IndicatorConfig.init()
  from a seed candle. It owns the streaming methods it needs as plain
  fields and returns an IndicatorResult per candle.

Configuration error policy (uniform for every indicator):
- unknown field      -> UnknownParameterError
- unparsable value   -> ParameterParseError
- init() on invalid  -> InvalidConfig

Usage:
    cfg = KeltnerChannels()
    cfg.set("period", "14")
    cfg.set("source", "hl2")
    instance = cfg.init(first_candle)
    result = instance.update(next_candle)
"""

from __future__ import annotations

import dataclasses
import typing
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..utils.logger import get_logger
from .action import Action
from .candle import Candle
from .errors import InvalidConfig, ParameterParseError, UnknownParameterError


@dataclass(frozen=True)
class IndicatorResult:
    """Values and signals produced by one indicator step."""

    values: tuple[float, ...]
    signals: tuple[Action, ...]

    @classmethod
    def new(cls, values: Sequence[float], signals: Sequence[Action]) -> IndicatorResult:
        return cls(values=tuple(values), signals=tuple(signals))

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> Action:
        return self.signals[index]

    @property
    def size(self) -> tuple[int, int]:
        return len(self.values), len(self.signals)


def _parse_int(text: str) -> int:
    return int(text.strip())


def _parse_float(text: str) -> float:
    return float(text.strip())


_SCALAR_PARSERS: dict[type, Callable[[str], Any]] = {
    int: _parse_int,
    float: _parse_float,
}


def _parser_for(field_type: Any) -> Callable[[str], Any]:
    """Parser for a config field type: scalars or an Enum with parse()."""
    if field_type in _SCALAR_PARSERS:
        return _SCALAR_PARSERS[field_type]
    if isinstance(field_type, type) and issubclass(field_type, Enum):
        parse = getattr(field_type, "parse", None)
        if parse is not None:
            return parse
        return lambda text: field_type(text.strip())
    raise TypeError(f"No string parser for field type {field_type!r}")


class IndicatorConfig(ABC):
    """
    Base class for indicator configuration dataclasses.

    Subclasses are @dataclass types whose fields are the indicator
    parameters. They define NAME, SIZE and validate(), and build their
    instance in _init().
    """

    NAME: ClassVar[str]
    # (number of values, number of signals)
    SIZE: ClassVar[tuple[int, int]]
    VOLUME_BASED: ClassVar[bool] = False

    @abstractmethod
    def validate(self) -> bool:
        """True if all parameters are inside their valid ranges."""
        ...

    @abstractmethod
    def _init(self, candle: Candle) -> IndicatorInstance:
        """Create the running instance; config is already validated."""
        ...

    @property
    def output_size(self) -> tuple[int, int]:
        """(number of values, number of signals)."""
        return self.SIZE

    @property
    def is_volume_based(self) -> bool:
        return self.VOLUME_BASED

    @classmethod
    def parameter_names(cls) -> list[str]:
        return [f.name for f in dataclasses.fields(cls)]  # type: ignore[arg-type]

    def set(self, name: str, value: str) -> None:
        """
        Set a parameter from its string representation.

        Args:
            name: Field name.
            value: String value, parsed according to the field type.

        Raises:
            UnknownParameterError: If the indicator has no such field.
            ParameterParseError: If the value cannot be parsed.
        """
        names = self.parameter_names()
        if name not in names:
            raise UnknownParameterError(self.NAME, name, names)

        field_type = typing.get_type_hints(type(self))[name]
        parser = _parser_for(field_type)
        try:
            parsed = parser(value)
        except (TypeError, ValueError):
            type_name = getattr(field_type, "__name__", str(field_type))
            raise ParameterParseError(self.NAME, name, value, type_name) from None
        setattr(self, name, parsed)

    def set_many(self, params: dict[str, str]) -> None:
        """Apply several string parameters; stops at the first error."""
        for name, value in params.items():
            self.set(name, value)

    def init(self, candle: Candle) -> IndicatorInstance:
        """
        Validate the configuration and create a running instance.

        Args:
            candle: Seed candle used to pre-warm every internal method.

        Raises:
            InvalidConfig: If validate() fails.
        """
        if not self.validate():
            raise InvalidConfig(self.NAME, self)
        instance = self._init(candle)
        get_logger().debug("Initialized %s with %r", self.NAME, self)
        return instance


class IndicatorInstance(ABC):
    """Running state of one indicator over one candle stream."""

    @property
    @abstractmethod
    def config(self) -> IndicatorConfig:
        ...

    @property
    def name(self) -> str:
        return self.config.NAME

    @abstractmethod
    def update(self, candle: Candle) -> IndicatorResult:
        """Consume one candle and return values and signals."""
        ...
