"""
Tests for the crossing detectors.

Validates that:
1. Signals fire exactly once per strict sign change of (a - b)
2. Equal steps neither fire nor reset the remembered side
3. CrossAbove emits +1, CrossUnder emits -1, Cross emits both from one state
4. reset() restores the initial relation
"""

import random

import pytest

from tastream.methods import Cross, CrossAbove, CrossUnder


def strict_sign_changes(pairs, initial_side=0):
    """Reference: sign changes of (a - b) ignoring zeros."""
    side = initial_side
    out = []
    for a, b in pairs:
        s = (a > b) - (a < b)
        if s != 0 and s != side:
            out.append(s)
            side = s
        else:
            out.append(0)
    return out


class TestCrossAbove:

    def test_scenario(self):
        cross = CrossAbove((1.0, 4.0))
        signals = [cross.update((a, 4.0)) for a in (1.0, 3.0, 5.0, 2.0, 6.0)]
        assert signals == [0, 0, 1, 0, 1]

    def test_equal_steps_do_not_refire(self):
        """below -> equal -> above fires once; above -> equal -> above never refires."""
        cross = CrossAbove((0.0, 1.0))
        a_values = [1.0, 1.0, 2.0, 1.0, 1.0, 2.0, 3.0]
        signals = [cross.update((a, 1.0)) for a in a_values]
        assert signals == [0, 0, 1, 0, 0, 0, 0]

    def test_touch_without_crossing_is_silent(self):
        cross = CrossAbove((0.0, 1.0))
        signals = [cross.update((a, 1.0)) for a in (0.5, 1.0, 0.5, 1.0, 0.0)]
        assert signals == [0, 0, 0, 0, 0]

    def test_initial_relation_does_not_emit(self):
        cross = CrossAbove((5.0, 1.0))
        assert cross.update((6.0, 1.0)) == 0

    def test_undetermined_start_fires_on_first_strict_side(self):
        cross = CrossAbove()
        assert cross.update((1.0, 1.0)) == 0
        assert cross.update((2.0, 1.0)) == 1
        assert cross.update((3.0, 1.0)) == 0


class TestCrossUnder:

    def test_mirrors_cross_above(self):
        under = CrossUnder((5.0, 4.0))
        signals = [under.update((a, 4.0)) for a in (5.0, 4.0, 3.0, 6.0, 2.0)]
        assert signals == [0, 0, -1, 0, -1]

    def test_never_emits_positive(self):
        rng = random.Random(4)
        under = CrossUnder()
        for _ in range(300):
            assert under.update((rng.random(), rng.random())) in (0, -1)


class TestCross:

    def test_signed_from_shared_state(self):
        cross = Cross((0.0, 1.0))
        signals = [cross.update((a, 1.0)) for a in (2.0, 1.0, 0.0, 1.0, 2.0, 2.0)]
        assert signals == [1, 0, -1, 0, 1, 0]

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_matches_sign_change_reference(self, seed):
        rng = random.Random(seed)
        pairs = [(float(rng.randint(0, 4)), float(rng.randint(0, 4))) for _ in range(500)]
        cross = Cross()
        above = CrossAbove()
        under = CrossUnder()
        expected = strict_sign_changes(pairs)

        assert [cross.update(p) for p in pairs] == expected
        assert [above.update(p) for p in pairs] == [max(s, 0) for s in expected]
        assert [under.update(p) for p in pairs] == [min(s, 0) for s in expected]

    def test_value_and_side(self):
        cross = Cross((1.0, 2.0))
        assert cross.side == -1
        assert cross.value == 0
        cross.update((3.0, 2.0))
        assert cross.side == 1
        assert cross.value == 1
        cross.update((3.0, 3.0))
        assert cross.side == 1
        assert cross.value == 0

    def test_reset_restores_initial_relation(self):
        cross = Cross((1.0, 2.0))
        cross.update((3.0, 2.0))
        cross.reset()
        assert cross.side == -1
        assert cross.update((3.0, 2.0)) == 1
