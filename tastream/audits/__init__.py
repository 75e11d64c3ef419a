"""
Parity audits for the streaming primitives.

- data_generators: synthetic OHLCV regimes (trending, flat, swings, ties)
- vectorized_references: pandas ground truth for each primitive
- audit_primitives: CLI runner comparing both (python -m tastream.audits.audit_primitives)
"""

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

__all__ = [
    # Data
    "candles_from_df",
    "generate_flat_bars",
    "generate_rapid_swing_data",
    "generate_step_data",
    "generate_synthetic_ohlcv",
    # References
    "vectorized_cross",
    "vectorized_extremum",
    "vectorized_window_push",
    "vectorized_window_sum",
]
