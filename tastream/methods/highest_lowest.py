"""
Windowed running maximum / minimum with amortized O(1) updates.

Highest and Lowest keep a monotonic deque of (value, index) candidates:
- Highest: values non-increasing from front to back (front = max)
- Lowest: values non-decreasing from front to back (front = min)

On each update:
    1. advance the clock
    2. pop from the back every candidate the new value dominates
       (<= for max, >= for min; ties resolve to the newest)
    3. append (value, now)
    4. pop from the front candidates older than `length` steps
    5. report the front value

Each value is appended once and popped at most once, so the cost per
update is O(1) amortized and the deque never exceeds `length` entries.

The seed stands for all pre-history: it is a single candidate at index 0
and ages out after `length` real updates. Output always equals the
brute-force max/min over the trailing `length` inputs.
"""

from __future__ import annotations

from abc import abstractmethod
from collections import deque

from ..core.method import StreamingMethod, validate_period


class _WindowExtremum(StreamingMethod):
    """Shared deque bookkeeping for Highest and Lowest."""

    __slots__ = ("length", "_seed", "_deque", "_index")

    def __init__(self, length: int, value: float) -> None:
        """
        Initialize with a seed standing for all pre-history.

        Args:
            length: Window length in steps (must be >= 1).
            value: Seed value.

        Raises:
            InvalidParameter: If length < 1.
        """
        self.length = validate_period(type(self).__name__, "length", length)
        self._seed = value
        self._deque: deque[tuple[float, int]] = deque()
        self._index = 0
        self.reset()

    @abstractmethod
    def _dominated(self, candidate: float, value: float) -> bool:
        """True if `candidate` can never again be the answer once `value` arrives."""
        ...

    def update(self, value: float) -> float:
        """Push one value and return the current extremum - amortized O(1)."""
        self._index += 1
        now = self._index

        while self._deque and self._dominated(self._deque[-1][0], value):
            self._deque.pop()
        self._deque.append((value, now))

        # Window covers indices (now - length, now]
        expired = now - self.length
        while self._deque[0][1] <= expired:
            self._deque.popleft()

        return self._deque[0][0]

    def reset(self) -> None:
        self._deque.clear()
        self._deque.append((self._seed, 0))
        self._index = 0

    @property
    def value(self) -> float:
        """Current extremum - O(1) via deque front."""
        return self._deque[0][0]

    @property
    def bars_since(self) -> int:
        """
        Steps since the current extremum was seen.

        The seed counts as seen at step 0.
        """
        return self._index - self._deque[0][1]

    def __len__(self) -> int:
        """Number of live candidates (always <= length)."""
        return len(self._deque)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length}, value={self.value!r})"


class Highest(_WindowExtremum):
    """
    Running maximum of the last `length` inputs.

    Example:
        >>> h = Highest(3, 5.0)
        >>> [h.update(v) for v in (5, 7, 3, 9, 4, 4, 8)]
        [5, 7, 7, 9, 9, 9, 8]
    """

    __slots__ = ()

    def _dominated(self, candidate: float, value: float) -> bool:
        return candidate <= value


class Lowest(_WindowExtremum):
    """
    Running minimum of the last `length` inputs.

    Example:
        >>> low = Lowest(3, 5.0)
        >>> [low.update(v) for v in (5, 7, 3, 9, 4, 4, 8)]
        [5, 5, 3, 3, 3, 4, 4]
    """

    __slots__ = ()

    def _dominated(self, candidate: float, value: float) -> bool:
        return candidate >= value
