"""
Exceptions raised by streaming methods and indicator configuration.

Two independent families:
- InvalidParameter: a method was constructed with parameters outside
  their domain (period < 1, capacity < 1, ...). Raised before any state
  is created.
- IndicatorConfigError: string key/value configuration failed. Every
  configuration failure is raised; nothing is logged-and-ignored.

Both derive from ValueError so callers that only care about "bad input"
can catch a single type.
"""

from __future__ import annotations


class InvalidParameter(ValueError):
    """A streaming method parameter is outside its valid domain."""

    def __init__(self, method: str, name: str, value: object, expected: str, fix: str | None = None) -> None:
        self.method = method
        self.name = name
        self.value = value
        self.expected = expected
        message = f"{method}: '{name}' must be {expected}, got {value!r}"
        if fix:
            message += f"\n\nFix: {fix}"
        super().__init__(message)


class IndicatorConfigError(ValueError):
    """Base class for indicator configuration failures."""


class UnknownParameterError(IndicatorConfigError):
    """Configuration names a field the indicator does not have."""

    def __init__(self, indicator: str, name: str, valid: list[str]) -> None:
        self.indicator = indicator
        self.name = name
        self.valid = valid
        super().__init__(
            f"Unknown parameter '{name}' for '{indicator}'. "
            f"Valid: {sorted(valid)}"
        )


class ParameterParseError(IndicatorConfigError):
    """A configuration value could not be parsed into the field's type."""

    def __init__(self, indicator: str, name: str, value: str, expected: str) -> None:
        self.indicator = indicator
        self.name = name
        self.value = value
        super().__init__(
            f"Cannot parse {value!r} as {expected} for '{indicator}.{name}'"
        )


class InvalidConfig(IndicatorConfigError):
    """Configuration parsed but failed its validation rules."""

    def __init__(self, indicator: str, config: object) -> None:
        self.indicator = indicator
        self.config = config
        super().__init__(f"Invalid configuration for '{indicator}': {config!r}")
