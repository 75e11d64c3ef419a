"""
Base class for streaming methods.

Every method consumes one input per time step and returns one output,
with O(1) amortized work per update. Methods are seeded at construction
so the very first update already produces a well-defined value:

    sma = SMA(length=3, value=5.0)
    sma.update(4.0)   # window is [5.0, 5.0, 4.0]

Instances are not thread-safe. Independent instances share no state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .errors import InvalidParameter


def validate_period(method: str, name: str, value: Any, minimum: int = 1) -> int:
    """
    Check that an integer window parameter is >= minimum.

    Args:
        method: Method class name (for the error message).
        name: Parameter name.
        value: Supplied value.
        minimum: Smallest accepted value.

    Returns:
        The validated value.

    Raises:
        InvalidParameter: If value is not an int or is below minimum.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidParameter(
            method,
            name,
            value,
            f"integer >= {minimum}",
            fix=f"{method}({name}={max(minimum, 1) * 10}, ...)",
        )
    return value


class StreamingMethod(ABC):
    """Base class for seeded O(1) streaming methods."""

    __slots__ = ()

    @abstractmethod
    def update(self, value: Any) -> Any:
        """Consume one input and return the new output."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Restore the freshly-constructed (seeded) state."""
        ...

    @property
    @abstractmethod
    def value(self) -> Any:
        """Last output."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r})"
