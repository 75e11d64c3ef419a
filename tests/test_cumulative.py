"""
Tests for Cumulative and ADI.

Validates that:
1. Cumulative keeps the trailing windowed sum with the seed pre-filled
2. Integer-valued streams stay exact (no drift)
3. ADI sums clv * volume over a window, or unbounded when length == 0
"""

import math
import random

import pytest

from tastream.core import Candle, InvalidParameter
from tastream.methods import ADI, Cumulative


class TestCumulative:

    def test_scenario_totals(self):
        acc = Cumulative(2, 0.0)
        assert [acc.update(v) for v in (3.0, 5.0, 2.0, 4.0)] == [3.0, 8.0, 7.0, 6.0]

    def test_seed_prefills_window(self):
        acc = Cumulative(3, 2.0)
        assert acc.value == 6.0
        # Seed contributions age out one per step
        assert [acc.update(0.0) for _ in range(4)] == [4.0, 2.0, 0.0, 0.0]

    def test_matches_fresh_sum_on_integers(self):
        rng = random.Random(1)
        inputs = [float(rng.randint(-50, 50)) for _ in range(1000)]
        acc = Cumulative(7, 0.0)
        history = [0.0] * 6 + inputs
        for i, v in enumerate(inputs):
            assert acc.update(v) == sum(history[i:i + 7])

    def test_close_to_fresh_sum_on_floats(self):
        rng = random.Random(2)
        inputs = [rng.uniform(0, 1e6) for _ in range(2000)]
        acc = Cumulative(20, inputs[0])
        history = [inputs[0]] * 19 + inputs
        for i, v in enumerate(inputs):
            assert math.isclose(acc.update(v), math.fsum(history[i:i + 20]), rel_tol=1e-9)

    def test_window_exposes_contributions(self):
        acc = Cumulative(3, 0.0)
        acc.update(1.0)
        acc.update(2.0)
        assert list(acc.window) == [0.0, 1.0, 2.0]

    def test_reset(self):
        acc = Cumulative(2, 1.0)
        acc.update(10.0)
        acc.reset()
        assert acc.value == 2.0
        assert acc.update(10.0) == 11.0

    def test_invalid_length(self):
        with pytest.raises(InvalidParameter, match="Cumulative"):
            Cumulative(0, 0.0)


class TestADI:

    def test_contribution_is_clv_times_volume(self):
        seed = Candle(open=10, high=12, low=8, close=10, volume=100)  # clv 0
        adi = ADI(2, seed)
        assert adi.value == 0.0
        # close at the high: clv 1
        assert adi.update(Candle(open=10, high=12, low=8, close=12, volume=50)) == 50.0
        # close at the low: clv -1
        assert adi.update(Candle(open=10, high=12, low=8, close=8, volume=20)) == 30.0
        assert adi.update(Candle(open=10, high=12, low=8, close=10, volume=20)) == -20.0

    def test_zero_range_candle_contributes_nothing(self):
        adi = ADI(3, Candle.from_price(5.0, volume=1e6))
        assert adi.update(Candle.from_price(6.0, volume=1e6)) == 0.0

    def test_unbounded_when_length_zero(self):
        seed = Candle(open=1, high=2, low=0, close=2, volume=10)  # +10
        adi = ADI(0, seed)
        assert adi.value == 10.0
        up = Candle(open=1, high=2, low=0, close=2, volume=5)
        totals = [adi.update(up) for _ in range(4)]
        assert totals == [15.0, 20.0, 25.0, 30.0]

    def test_reset(self, candles):
        for length in (0, 5):
            adi = ADI(length, candles[0])
            first = [adi.update(c) for c in candles]
            adi.reset()
            assert [adi.update(c) for c in candles] == first

    def test_negative_length_raises(self, flat_candle):
        with pytest.raises(InvalidParameter, match="integer >= 0"):
            ADI(-1, flat_candle)
