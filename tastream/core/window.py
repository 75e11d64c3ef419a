"""
Fixed-capacity circular buffer for O(1) windowed bookkeeping.

Window is always full: it is pre-filled with a seed at construction and
every push evicts exactly one element, the current oldest. push() returns
the evicted element so callers can keep running sums without rescanning:

    total += new - window.push(new)

Performance Contract:
- Window.push(): O(1)
- Window.__getitem__(): O(1)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

import numpy as np

from .method import validate_period

T = TypeVar("T")


class Window(Generic[T]):
    """
    FIFO ring buffer holding the last `capacity` pushed elements.

    Elements are accessed by logical index where 0 is the oldest element
    and capacity-1 is the most recently pushed one.

    Example:
        >>> w = Window(3, 0)
        >>> [w.push(v) for v in (1, 2, 3, 4, 5)]
        [0, 0, 0, 1, 2]
        >>> list(w)
        [3, 4, 5]

    Attributes:
        capacity: Number of elements held (fixed).
    """

    __slots__ = ("capacity", "_seed", "_buffer", "_head")

    def __init__(self, capacity: int, seed: T) -> None:
        """
        Initialize a window filled with `seed`.

        Args:
            capacity: Number of slots (must be >= 1).
            seed: Value every slot starts with.

        Raises:
            InvalidParameter: If capacity < 1.
        """
        self.capacity = validate_period("Window", "capacity", capacity)
        self._seed = seed
        self._buffer: list[T] = [seed] * capacity
        self._head = 0  # Slot holding the oldest element

    def push(self, value: T) -> T:
        """
        Insert `value` and return the element it evicts.

        Args:
            value: New newest element.

        Returns:
            The element that was oldest immediately before insertion.
        """
        evicted = self._buffer[self._head]
        self._buffer[self._head] = value
        self._head += 1
        if self._head == self.capacity:
            self._head = 0
        return evicted

    @property
    def oldest(self) -> T:
        """Element that the next push will evict."""
        return self._buffer[self._head]

    @property
    def newest(self) -> T:
        """Most recently pushed element (the seed before any push)."""
        return self._buffer[self._head - 1]

    def __getitem__(self, idx: int) -> T:
        """
        Get element by logical index (0 = oldest, capacity-1 = newest).

        Raises:
            IndexError: If idx is out of range.
        """
        if idx < 0 or idx >= self.capacity:
            raise IndexError(
                f"Index {idx} out of range [0, {self.capacity})"
            )
        physical = self._head + idx
        if physical >= self.capacity:
            physical -= self.capacity
        return self._buffer[physical]

    def __iter__(self) -> Iterator[T]:
        for i in range(self.capacity):
            yield self[i]

    def __len__(self) -> int:
        return self.capacity

    def reset(self) -> None:
        """Refill every slot with the construction seed."""
        self._buffer = [self._seed] * self.capacity
        self._head = 0

    def to_array(self) -> np.ndarray:
        """
        Return a copy of the window contents in logical order.

        Returns:
            numpy array with oldest element first, newest last.
        """
        return np.array(list(self))

    def __repr__(self) -> str:
        return f"Window(capacity={self.capacity}, values={list(self)!r})"
