"""Shared fixtures for tastream tests."""

import pytest

from tastream.audits.data_generators import candles_from_df, generate_synthetic_ohlcv
from tastream.config import reset_config
from tastream.core import Candle


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from TASTREAM_* variables and the cached Config."""
    for key in (
        "TASTREAM_LOG_LEVEL",
        "TASTREAM_LOG_DIR",
        "TASTREAM_AUDIT_BARS",
        "TASTREAM_AUDIT_SEED",
        "TASTREAM_AUDIT_TOLERANCE",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def candles():
    """300 synthetic candles (deterministic)."""
    return candles_from_df(generate_synthetic_ohlcv(bars=300, seed=7))


@pytest.fixture
def flat_candle():
    return Candle.from_price(100.0, volume=1000.0)
