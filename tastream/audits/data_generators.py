"""
Synthetic OHLCV data generators for primitive parity audits.

Provides data generators that exercise different regimes:
- Trend / range / pause blocks on a price tick grid
- Flat bars (zero range, every value tied)
- Clipped triangle swings (frequent crossings, tied plateaus)
- Coarse price steps (many exact ties and equal steps)
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..core.candle import Candle

# (drift, volatility) per block; the last block is a pause with no movement
_REGIMES = np.array([
    (0.0012, 0.014),
    (0.0, 0.010),
    (-0.0012, 0.018),
    (0.0, 0.0),
])
_REGIME_BARS = 50


def _to_tick(values: np.ndarray, tick: float) -> np.ndarray:
    return np.round(values / tick) * tick


def _frame(
    opens: np.ndarray,
    highs: np.ndarray,
    lows: np.ndarray,
    closes: np.ndarray,
    volumes: np.ndarray,
) -> pd.DataFrame:
    return pd.DataFrame({
        "open": opens,
        "high": highs,
        "low": lows,
        "close": closes,
        "volume": volumes,
    })


def generate_synthetic_ohlcv(
    bars: int = 2000,
    seed: int = 42,
    start: float = 50000.0,
    tick: float = 0.5,
) -> pd.DataFrame:
    """
    Generate synthetic OHLCV data cycling through trend, range and pause blocks.

    Prices sit on a `tick` grid, so closes repeat and wicks are often
    zero. Pause blocks are flat bars: extremum trackers see long runs of
    ties and crossing detectors see equal steps.

    Args:
        bars: Number of bars to generate.
        seed: Random seed for reproducibility.
        start: Opening price of the first bar.
        tick: Price grid step.

    Returns:
        DataFrame with columns: open, high, low, close, volume
    """
    rng = np.random.default_rng(seed)

    regime = (np.arange(bars) // _REGIME_BARS) % len(_REGIMES)
    drift, vol = _REGIMES[regime].T

    log_returns = drift + vol * rng.standard_normal(bars)
    closes = _to_tick(start * np.exp(np.cumsum(log_returns)), tick)
    opens = np.concatenate([_to_tick(np.array([start]), tick), closes[:-1]])

    # Wicks in whole ticks; zero volatility means no wick at all
    wick_scale = vol * opens / (2.0 * tick)
    upper = np.floor(np.abs(rng.standard_normal(bars)) * wick_scale) * tick
    lower = np.floor(np.abs(rng.standard_normal(bars)) * wick_scale) * tick
    highs = np.maximum(opens, closes) + upper
    lows = np.minimum(opens, closes) - lower

    volumes = np.round(rng.gamma(2.0, 400_000.0, size=bars)) + 100_000.0

    return _frame(opens, highs, lows, closes, volumes)


def generate_flat_bars(bars: int = 500, price: float = 50000.0) -> pd.DataFrame:
    """
    Generate flat bars where every OHLC value is identical.

    Every comparison is a tie: extremum trackers must not grow their
    deques and crossing detectors must stay silent.
    """
    flat = np.full(bars, price)
    return _frame(flat, flat.copy(), flat.copy(), flat.copy(), np.full(bars, 1_000_000.0))


def generate_rapid_swing_data(
    bars: int = 1000,
    seed: int = 77,
    period: int = 12,
    amplitude: float = 0.03,
) -> pd.DataFrame:
    """
    Generate a clipped triangle wave around 50000 (period `period` bars).

    The clip leaves short plateaus at both extremes where closes repeat
    exactly; the slopes carry whole-tick jitter. Close crosses its moving
    averages every half period.
    """
    rng = np.random.default_rng(seed)
    base = 50000.0

    phase = (np.arange(bars) % period) / period
    wave = np.clip(4.0 * np.abs(phase - 0.5) - 1.0, -0.6, 0.6)
    on_slope = np.abs(wave) < 0.6
    jitter = np.where(on_slope, rng.integers(-2, 3, size=bars), 0)
    closes = np.round(base * (1.0 + amplitude * wave)) + jitter

    opens = np.concatenate([closes[:1], closes[:-1]])

    highs = np.maximum(opens, closes) + rng.integers(0, 4, size=bars)
    lows = np.minimum(opens, closes) - rng.integers(0, 4, size=bars)
    volumes = rng.integers(1, 20, size=bars) * 50_000.0

    return _frame(opens, highs, lows, closes, volumes)


def generate_step_data(bars: int = 1000, seed: int = 5) -> pd.DataFrame:
    """
    Generate prices on a coarse integer grid.

    Small integer moves (including zero) create runs of exactly equal
    values: tie-breaking in extremum trackers and equal steps between
    crossings.
    """
    rng = np.random.RandomState(seed)
    moves = rng.randint(-2, 3, size=bars)
    closes = 100.0 + np.cumsum(moves).astype(float)

    opens = np.roll(closes, 1)
    opens[0] = closes[0]

    highs = np.maximum(opens, closes) + rng.randint(0, 2, size=bars)
    lows = np.minimum(opens, closes) - rng.randint(0, 2, size=bars)
    volumes = rng.randint(0, 5, size=bars).astype(float) * 100.0

    return _frame(opens, highs, lows, closes, volumes)


def candles_from_df(df: pd.DataFrame) -> list[Candle]:
    """Convert an OHLCV DataFrame to a list of Candles."""
    return [
        Candle(
            open=float(row.open),
            high=float(row.high),
            low=float(row.low),
            close=float(row.close),
            volume=float(row.volume),
        )
        for row in df.itertuples(index=False)
    ]
