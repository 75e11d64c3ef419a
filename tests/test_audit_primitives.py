"""
Tests for the parity audit and its vectorized references.
"""

import json

import numpy as np
import pytest
from rich.console import Console

from tastream.audits import (
    generate_flat_bars,
    generate_rapid_swing_data,
    generate_step_data,
    generate_synthetic_ohlcv,
    vectorized_cross,
    vectorized_extremum,
    vectorized_window_push,
    vectorized_window_sum,
)
from tastream.audits.audit_primitives import main, run_primitive_parity_audit


class TestVectorizedReferences:

    def test_extremum(self):
        values = np.array([5, 7, 3, 9, 4, 4, 8], dtype=float)
        np.testing.assert_array_equal(
            vectorized_extremum(values, 3, 5.0, "max"), [5, 7, 7, 9, 9, 9, 8]
        )
        np.testing.assert_array_equal(
            vectorized_extremum(values, 3, 5.0, "min"), [5, 5, 3, 3, 3, 4, 4]
        )

    def test_window_sum(self):
        values = np.array([3.0, 5.0, 2.0, 4.0])
        np.testing.assert_array_equal(vectorized_window_sum(values, 2, 0.0), [3.0, 8.0, 7.0, 6.0])

    def test_window_push(self):
        values = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        np.testing.assert_array_equal(vectorized_window_push(values, 3, 0.0), [0, 0, 0, 1, 2])

    def test_cross(self):
        a = np.array([1.0, 3.0, 5.0, 2.0, 6.0])
        b = np.full(5, 4.0)
        np.testing.assert_array_equal(vectorized_cross(a, b, (1.0, 4.0), "above"), [0, 0, 1, 0, 1])
        np.testing.assert_array_equal(vectorized_cross(a, b, (1.0, 4.0), "under"), [0, 0, 0, -1, 0])
        np.testing.assert_array_equal(vectorized_cross(a, b, None, "cross"), [-1, 0, 1, -1, 1])

    def test_cross_ignores_equal_steps(self):
        a = np.array([0.0, 1.0, 1.0, 2.0, 1.0, 2.0])
        b = np.ones(6)
        np.testing.assert_array_equal(vectorized_cross(a, b, None, "cross"), [-1, 0, 0, 1, 0, 0])


class TestDataGenerators:

    @pytest.mark.parametrize("generator", [
        generate_synthetic_ohlcv,
        generate_rapid_swing_data,
        generate_step_data,
    ])
    def test_shape_and_ordering(self, generator):
        df = generator(bars=200, seed=1)
        assert list(df.columns) == ["open", "high", "low", "close", "volume"]
        assert len(df) == 200
        assert (df["high"] >= df[["open", "close"]].max(axis=1)).all()
        assert (df["low"] <= df[["open", "close"]].min(axis=1)).all()

    def test_deterministic(self):
        assert generate_synthetic_ohlcv(bars=100, seed=3).equals(generate_synthetic_ohlcv(bars=100, seed=3))

    def test_synthetic_has_pause_blocks_and_ties(self):
        df = generate_synthetic_ohlcv(bars=200, seed=1)
        pause = df.iloc[150:200]
        assert (pause["high"] == pause["low"]).all()
        assert (pause["close"] == pause["open"]).all()
        assert (df["high"] == df[["open", "close"]].max(axis=1)).any()
        assert ((df[["open", "high", "low", "close"]] / 0.5) % 1 == 0).all().all()

    def test_rapid_swing_plateaus_repeat_exactly(self):
        df = generate_rapid_swing_data(bars=120, seed=1)
        closes = df["close"].to_numpy()
        assert closes[0] == closes[1] == closes[11]
        assert closes[5] == closes[6] == closes[7]
        assert closes[0] > closes[6]
        assert (closes[12:24] == closes[0:12]).sum() >= 6

    def test_flat_bars(self):
        df = generate_flat_bars(bars=10, price=5.0)
        assert (df[["open", "high", "low", "close"]] == 5.0).all().all()


class TestParityAudit:

    def test_all_checks_pass(self):
        result = run_primitive_parity_audit(bars=400, seed=3)
        failures = [(r.primitive, r.dataset, r.mismatched_lengths) for r in result.results if not r.passed]
        assert failures == []
        assert result.success
        assert result.determinism_pass
        assert result.reset_pass
        assert result.passed_checks == result.total_checks == 32

    def test_defaults_come_from_config(self, monkeypatch):
        monkeypatch.setenv("TASTREAM_AUDIT_BARS", "120")
        monkeypatch.setenv("TASTREAM_AUDIT_SEED", "5")
        result = run_primitive_parity_audit()
        assert (result.bars_tested, result.seed) == (120, 5)

    def test_too_few_bars(self):
        with pytest.raises(ValueError, match="at least 2 bars"):
            run_primitive_parity_audit(bars=1)

    def test_to_dict_is_json_serializable(self):
        data = run_primitive_parity_audit(bars=100, seed=1).to_dict()
        assert json.loads(json.dumps(data))["success"] is True
        assert {r["primitive"] for r in data["results"]} == {
            "Window", "Highest", "Lowest", "Cumulative", "ADI", "Cross", "CrossAbove", "CrossUnder",
        }

    def test_print_summary(self):
        out = Console(record=True, width=160)
        run_primitive_parity_audit(bars=100, seed=1).print_summary(out)
        text = out.export_text()
        assert "PARITY AUDIT" in text
        assert "[OK]" in text

    def test_main_exit_code(self):
        assert main(["--bars", "100", "--seed", "2"]) == 0
        assert main(["--bars", "100", "--json"]) == 0
