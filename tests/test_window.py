"""
Tests for the Window ring buffer.

Validates that:
1. The window starts full of the seed and push() returns evictions in FIFO order
2. Logical indexing is oldest-first and bounds-checked
3. reset() restores the seeded state
4. capacity < 1 is rejected at construction
"""

import numpy as np
import pytest

from tastream.core import InvalidParameter, Window


class TestWindowPush:
    """Test eviction order."""

    def test_evicted_sequence(self):
        """Seed is evicted for the first `capacity` pushes, then real history."""
        w = Window(3, 0)
        assert [w.push(v) for v in (1, 2, 3, 4, 5)] == [0, 0, 0, 1, 2]

    def test_capacity_one_returns_previous_value(self):
        w = Window(1, "seed")
        assert w.push("a") == "seed"
        assert w.push("b") == "a"
        assert list(w) == ["b"]

    def test_starts_full_of_seed(self):
        w = Window(4, 7.5)
        assert len(w) == 4
        assert list(w) == [7.5, 7.5, 7.5, 7.5]

    def test_long_stream_matches_shift(self):
        """After warm-up push() returns the input from `capacity` steps ago."""
        w = Window(5, -1)
        evicted = [w.push(i) for i in range(100)]
        assert evicted[:5] == [-1] * 5
        assert evicted[5:] == list(range(95))


class TestWindowAccess:
    """Test logical indexing and views."""

    def test_oldest_and_newest(self):
        w = Window(3, 0)
        assert w.newest == 0
        w.push(1)
        assert w.newest == 1
        assert w.oldest == 0
        w.push(2)
        w.push(3)
        assert w.oldest == 1
        assert w.newest == 3

    def test_getitem_is_oldest_first_after_wrap(self):
        w = Window(3, 0)
        for v in (1, 2, 3, 4):
            w.push(v)
        assert [w[0], w[1], w[2]] == [2, 3, 4]

    @pytest.mark.parametrize("idx", [-1, 3, 10])
    def test_getitem_out_of_range_raises(self, idx):
        w = Window(3, 0)
        with pytest.raises(IndexError, match="out of range"):
            w[idx]

    def test_to_array(self):
        w = Window(3, 0.0)
        w.push(1.0)
        np.testing.assert_array_equal(w.to_array(), np.array([0.0, 0.0, 1.0]))


class TestWindowReset:

    def test_reset_restores_seed(self):
        w = Window(3, 9)
        for v in (1, 2, 3, 4):
            w.push(v)
        w.reset()
        assert list(w) == [9, 9, 9]
        assert [w.push(v) for v in (1, 2, 3, 4)] == [9, 9, 9, 1]


class TestWindowValidation:

    @pytest.mark.parametrize("capacity", [0, -3])
    def test_capacity_below_one_raises(self, capacity):
        with pytest.raises(InvalidParameter, match="'capacity' must be integer >= 1"):
            Window(capacity, 0)

    def test_non_integer_capacity_raises(self):
        with pytest.raises(InvalidParameter):
            Window(2.5, 0)

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError, match="Fix:"):
            Window(0, 0)
