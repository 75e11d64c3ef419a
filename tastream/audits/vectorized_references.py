"""
Vectorized reference implementations for the streaming primitives.

Uses pandas rolling windows and forward-fill as the ground truth. The
seed is modeled exactly as the streaming side treats it: `length - 1`
copies of the seed are prepended as pre-history, then dropped from the
result.
"""

from __future__ import annotations

from typing import Literal

import numpy as np
import pandas as pd


def _with_history(values: np.ndarray, length: int, seed: float) -> pd.Series:
    history = np.full(length - 1, seed, dtype=np.float64)
    return pd.Series(np.concatenate([history, np.asarray(values, dtype=np.float64)]))


def vectorized_extremum(
    values: np.ndarray,
    length: int,
    seed: float,
    mode: Literal["max", "min"],
) -> np.ndarray:
    """
    Rolling max/min over the trailing `length` inputs.

    Args:
        values: Input series.
        length: Window length.
        seed: Value standing for all pre-history.
        mode: "max" or "min".

    Returns:
        numpy array aligned with `values`.
    """
    series = _with_history(values, length, seed)
    rolling = series.rolling(window=length, min_periods=length)
    result = rolling.max() if mode == "max" else rolling.min()
    return result.to_numpy()[length - 1:]


def vectorized_window_sum(values: np.ndarray, length: int, seed: float) -> np.ndarray:
    """Rolling sum of the trailing `length` contributions (fresh summation)."""
    series = _with_history(values, length, seed)
    result = series.rolling(window=length, min_periods=length).sum()
    return result.to_numpy()[length - 1:]


def vectorized_window_push(values: np.ndarray, capacity: int, seed: float) -> np.ndarray:
    """Values a full FIFO of `capacity` evicts: the input shifted by capacity."""
    series = pd.Series(np.asarray(values, dtype=np.float64))
    return series.shift(capacity, fill_value=seed).to_numpy()


def vectorized_cross(
    a: np.ndarray,
    b: np.ndarray,
    initial: tuple[float, float] | None = None,
    kind: Literal["cross", "above", "under"] = "cross",
) -> np.ndarray:
    """
    Crossing signals of `a` against `b`.

    The strict side sign(a - b) is forward-filled across equal steps, then
    a signal is emitted wherever the filled side differs from the previous
    one.

    Returns:
        int array of +1 / -1 / 0 per step.
    """
    side = pd.Series(np.sign(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)))
    initial_side = 0.0 if initial is None else float(np.sign(initial[0] - initial[1]))

    filled = side.replace(0.0, np.nan).ffill().fillna(initial_side)
    previous = filled.shift(1, fill_value=initial_side)

    changed = (filled != previous) & (filled != 0.0)
    signals = np.where(changed, filled, 0.0)

    if kind == "above":
        signals = np.where(signals > 0, signals, 0.0)
    elif kind == "under":
        signals = np.where(signals < 0, signals, 0.0)
    return signals.astype(np.int64)
