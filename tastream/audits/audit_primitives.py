"""
Streaming vs vectorized parity audit for the windowed primitives.

Run with: python -m tastream.audits.audit_primitives

Drives every primitive (Window, Highest, Lowest, Cumulative, ADI, Cross,
CrossAbove, CrossUnder) bar-by-bar over several synthetic datasets and
compares each output against a pandas reference:
- Window, Highest, Lowest and the crossing detectors must match exactly
- Cumulative and ADI must match within the relative tolerance (running
  sums drift from a fresh summation)

Also checks determinism (two runs agree) and reset (a reset instance
replays identically).

Exit code 0 = all checks pass, 1 = failures.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np
import pandas as pd
from rich.console import Console
from rich.table import Table

from ..config import get_config
from ..core.candle import Candle
from ..core.window import Window
from ..methods import ADI, Cross, CrossAbove, CrossUnder, Cumulative, Highest, Lowest
from ..utils.logger import get_logger
from .data_generators import (
    candles_from_df,
    generate_flat_bars,
    generate_rapid_swing_data,
    generate_step_data,
    generate_synthetic_ohlcv,
)
from .vectorized_references import (
    vectorized_cross,
    vectorized_extremum,
    vectorized_window_push,
    vectorized_window_sum,
)

LENGTHS = (1, 2, 5, 20, 50)
CROSS_MA_LENGTH = 10

console = Console()


@dataclass
class PrimitiveParityResult:
    """Result of comparing one primitive on one dataset."""

    primitive: str
    dataset: str
    passed: bool
    max_abs_diff: float
    mismatched_lengths: list[str] = field(default_factory=list)
    checks: int = 0
    error_message: str | None = None


@dataclass
class PrimitiveParityAuditResult:
    """Result of the complete primitive parity audit."""

    success: bool
    bars_tested: int
    seed: int
    tolerance: float
    determinism_pass: bool
    reset_pass: bool
    results: list[PrimitiveParityResult] = field(default_factory=list)
    error_message: str | None = None

    @property
    def total_checks(self) -> int:
        return len(self.results)

    @property
    def passed_checks(self) -> int:
        return sum(1 for r in self.results if r.passed)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "success": self.success,
            "bars_tested": self.bars_tested,
            "seed": self.seed,
            "tolerance": self.tolerance,
            "determinism_pass": self.determinism_pass,
            "reset_pass": self.reset_pass,
            "total_checks": self.total_checks,
            "passed_checks": self.passed_checks,
            "results": [
                {
                    "primitive": r.primitive,
                    "dataset": r.dataset,
                    "passed": r.passed,
                    "max_abs_diff": r.max_abs_diff,
                    "mismatched_lengths": r.mismatched_lengths,
                    "checks": r.checks,
                    "error_message": r.error_message,
                }
                for r in self.results
            ],
            "error_message": self.error_message,
        }

    def print_summary(self, out: Console | None = None) -> None:
        """Print human-readable summary to console."""
        out = out or console
        out.print()
        out.print("[bold]PRIMITIVE STREAMING vs VECTORIZED PARITY AUDIT[/]")
        out.print(f"Bars tested: {self.bars_tested}  Seed: {self.seed}  Tolerance: {self.tolerance}")
        out.print(f"Determinism: {'PASS' if self.determinism_pass else 'FAIL'}")
        out.print(f"Reset: {'PASS' if self.reset_pass else 'FAIL'}")
        out.print()

        table = Table(show_header=True, header_style="bold")
        table.add_column("Primitive")
        table.add_column("Dataset")
        table.add_column("Status")
        table.add_column("Max diff", justify="right")
        table.add_column("Checks", justify="right")
        table.add_column("Details")

        for r in self.results:
            status = "[green]PASS[/]" if r.passed else "[red]FAIL[/]"
            details = r.error_message or ", ".join(r.mismatched_lengths[:5])
            table.add_row(
                r.primitive,
                r.dataset,
                status,
                f"{r.max_abs_diff:.2e}",
                str(r.checks),
                details,
            )
        out.print(table)

        if self.success:
            out.print(f"[green][OK] {self.passed_checks}/{self.total_checks} checks match vectorized references[/]")
        else:
            out.print(f"[red][FAIL] {self.passed_checks}/{self.total_checks} checks passed[/]")
            if self.error_message:
                out.print(f"[red]{self.error_message}[/]")


# =============================================================================
# Streaming runners
# =============================================================================


def _stream(method: Any, inputs: list[Any]) -> np.ndarray:
    return np.array([method.update(x) for x in inputs], dtype=np.float64)


def _stream_window(values: np.ndarray, capacity: int) -> np.ndarray:
    window: Window[float] = Window(capacity, float(values[0]))
    return np.array([window.push(float(v)) for v in values], dtype=np.float64)


def _clv_volume(candles: list[Candle]) -> np.ndarray:
    return np.array([c.clv * c.volume for c in candles], dtype=np.float64)


def _max_relative_diff(streamed: np.ndarray, reference: np.ndarray) -> float:
    if not len(reference):
        return 0.0
    # Relative to the series scale: windowed sums pass through zero
    scale = max(1.0, float(np.max(np.abs(reference))))
    return float(np.max(np.abs(streamed - reference))) / scale


def _compare(
    primitive: str,
    dataset: str,
    pairs: list[tuple[str, np.ndarray, np.ndarray]],
    tolerance: float,
) -> PrimitiveParityResult:
    """
    Compare (label, streamed, reference) arrays.

    tolerance == 0 demands exact equality; otherwise differences are
    measured relative to max(1, max|reference|).
    """
    max_diff = 0.0
    mismatched: list[str] = []
    for label, streamed, reference in pairs:
        if streamed.shape != reference.shape:
            mismatched.append(f"{label}(shape)")
            max_diff = float("inf")
            continue
        if tolerance == 0.0:
            diff = float(np.max(np.abs(streamed - reference))) if len(reference) else 0.0
            if not np.array_equal(streamed, reference):
                mismatched.append(f"{label}(n={int(np.sum(streamed != reference))})")
        else:
            diff = _max_relative_diff(streamed, reference)
            if diff > tolerance:
                mismatched.append(f"{label}(max={diff:.2e})")
        max_diff = max(max_diff, diff)

    return PrimitiveParityResult(
        primitive=primitive,
        dataset=dataset,
        passed=not mismatched,
        max_abs_diff=max_diff,
        mismatched_lengths=mismatched,
        checks=len(pairs),
    )


# =============================================================================
# Per-primitive checks
# =============================================================================


def _check_window(dataset: str, df: pd.DataFrame, tolerance: float) -> PrimitiveParityResult:
    closes = df["close"].to_numpy(dtype=np.float64)
    pairs = [
        (f"n={n}", _stream_window(closes, n), vectorized_window_push(closes, n, closes[0]))
        for n in LENGTHS
    ]
    return _compare("Window", dataset, pairs, 0.0)


def _check_extremum(
    dataset: str,
    df: pd.DataFrame,
    tolerance: float,
    cls: type,
    column: str,
    mode: str,
) -> PrimitiveParityResult:
    values = df[column].to_numpy(dtype=np.float64)
    pairs = [
        (
            f"n={n}",
            _stream(cls(n, float(values[0])), values.tolist()),
            vectorized_extremum(values, n, float(values[0]), mode),
        )
        for n in LENGTHS
    ]
    return _compare(cls.__name__, dataset, pairs, 0.0)


def _check_cumulative(dataset: str, df: pd.DataFrame, tolerance: float) -> PrimitiveParityResult:
    volumes = df["volume"].to_numpy(dtype=np.float64)
    pairs = [
        (
            f"n={n}",
            _stream(Cumulative(n, float(volumes[0])), volumes.tolist()),
            vectorized_window_sum(volumes, n, float(volumes[0])),
        )
        for n in LENGTHS
    ]
    return _compare("Cumulative", dataset, pairs, tolerance)


def _check_adi(dataset: str, df: pd.DataFrame, tolerance: float) -> PrimitiveParityResult:
    candles = candles_from_df(df)
    contributions = _clv_volume(candles)
    seed = float(contributions[0])
    pairs = [
        (
            f"n={n}",
            _stream(ADI(n, candles[0]), candles),
            vectorized_window_sum(contributions, n, seed),
        )
        for n in LENGTHS
    ]
    pairs.append((
        "n=0",
        _stream(ADI(0, candles[0]), candles),
        np.cumsum(np.concatenate([[seed], contributions]))[1:],
    ))
    return _compare("ADI", dataset, pairs, tolerance)


def _cross_inputs(df: pd.DataFrame) -> tuple[np.ndarray, np.ndarray]:
    closes = df["close"]
    ma = closes.rolling(window=CROSS_MA_LENGTH, min_periods=1).mean()
    return closes.to_numpy(dtype=np.float64), ma.to_numpy(dtype=np.float64)


def _check_cross(
    dataset: str,
    df: pd.DataFrame,
    tolerance: float,
    cls: type,
    kind: str,
) -> PrimitiveParityResult:
    # close vs its moving average, plus close vs open (exact ties on step data)
    inputs = [_cross_inputs(df), (df["close"].to_numpy(np.float64), df["open"].to_numpy(np.float64))]
    pairs = []
    for i, (a, b) in enumerate(inputs):
        stream_pairs = list(zip(a.tolist(), b.tolist()))
        for label, initial in (("none", None), ("seeded", stream_pairs[0])):
            pairs.append((
                f"in{i}/{label}",
                _stream(cls(initial), stream_pairs),
                vectorized_cross(a, b, initial, kind).astype(np.float64),
            ))
    return _compare(cls.__name__, dataset, pairs, 0.0)


_CHECKS: list[Callable[[str, pd.DataFrame, float], PrimitiveParityResult]] = [
    _check_window,
    lambda d, df, t: _check_extremum(d, df, t, Highest, "high", "max"),
    lambda d, df, t: _check_extremum(d, df, t, Lowest, "low", "min"),
    _check_cumulative,
    _check_adi,
    lambda d, df, t: _check_cross(d, df, t, Cross, "cross"),
    lambda d, df, t: _check_cross(d, df, t, CrossAbove, "above"),
    lambda d, df, t: _check_cross(d, df, t, CrossUnder, "under"),
]


# =============================================================================
# Determinism and reset
# =============================================================================


def _run_all_methods(candles: list[Candle]) -> list[float]:
    first = candles[0]
    methods = [
        (Highest(20, first.high), lambda c: c.high),
        (Lowest(20, first.low), lambda c: c.low),
        (Cumulative(20, first.volume), lambda c: c.volume),
        (ADI(20, first), lambda c: c),
        (Cross((first.close, first.open)), lambda c: (c.close, c.open)),
    ]
    outputs: list[float] = []
    for method, pick in methods:
        outputs.extend(float(method.update(pick(c))) for c in candles)
        method.reset()
        outputs.extend(float(method.update(pick(c))) for c in candles)
    return outputs


def _check_determinism(candles: list[Candle]) -> tuple[bool, bool]:
    """
    Returns: (determinism_pass, reset_pass)
    """
    first_run = _run_all_methods(candles)
    second_run = _run_all_methods(candles)
    deterministic = first_run == second_run

    # Each method streamed twice around a reset: both halves must agree
    half = len(candles)
    reset_ok = all(
        first_run[i:i + half] == first_run[i + half:i + 2 * half]
        for i in range(0, len(first_run), 2 * half)
    )
    return deterministic, reset_ok


# =============================================================================
# Entry points
# =============================================================================


def run_primitive_parity_audit(
    bars: int | None = None,
    seed: int | None = None,
    tolerance: float | None = None,
) -> PrimitiveParityAuditResult:
    """
    Run the full parity audit.

    Unset arguments fall back to the audit configuration
    (TASTREAM_AUDIT_BARS, TASTREAM_AUDIT_SEED, TASTREAM_AUDIT_TOLERANCE).
    """
    audit_cfg = get_config().audit
    bars = audit_cfg.bars if bars is None else bars
    seed = audit_cfg.seed if seed is None else seed
    tolerance = audit_cfg.tolerance if tolerance is None else tolerance
    logger = get_logger()

    if bars < 2:
        raise ValueError(f"Audit needs at least 2 bars, got {bars}")

    datasets = {
        "synthetic": generate_synthetic_ohlcv(bars=bars, seed=seed),
        "flat": generate_flat_bars(bars=bars),
        "rapid_swing": generate_rapid_swing_data(bars=bars, seed=seed),
        "step": generate_step_data(bars=bars, seed=seed),
    }

    results: list[PrimitiveParityResult] = []
    for name, df in datasets.items():
        for check in _CHECKS:
            results.append(check(name, df, tolerance))

    determinism_pass, reset_pass = _check_determinism(candles_from_df(datasets["synthetic"]))

    success = determinism_pass and reset_pass and all(r.passed for r in results)
    failed = [f"{r.primitive}/{r.dataset}" for r in results if not r.passed]
    logger.info(
        "Primitive parity audit: %d/%d checks passed (bars=%d, seed=%d)",
        len(results) - len(failed), len(results), bars, seed,
    )
    if failed:
        logger.warning("Primitive parity failures: %s", ", ".join(failed))

    return PrimitiveParityAuditResult(
        success=success,
        bars_tested=bars,
        seed=seed,
        tolerance=tolerance,
        determinism_pass=determinism_pass,
        reset_pass=reset_pass,
        results=results,
        error_message=None if success else f"{len(failed)} check(s) failed",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Streaming vs vectorized parity audit for windowed primitives",
    )
    parser.add_argument("--bars", type=int, default=None, help="Bars per dataset (default: TASTREAM_AUDIT_BARS)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: TASTREAM_AUDIT_SEED)")
    parser.add_argument("--tolerance", type=float, default=None, help="Relative tolerance for running sums")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON instead of a table")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI validation."""
    args = parse_args(argv)
    result = run_primitive_parity_audit(bars=args.bars, seed=args.seed, tolerance=args.tolerance)
    if args.json:
        console.print_json(data=result.to_dict())
    else:
        result.print_summary()
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
