"""
Configuration management for tastream.
Loads settings from environment variables with sensible defaults.

Streaming methods and indicators take their parameters explicitly; the
environment only controls ambient behavior (logging, parity audit).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = ""  # Empty = console only


@dataclass
class AuditConfig:
    """
    Parity audit configuration.

    The audit drives every primitive over `bars` synthetic candles
    generated from `seed` and compares against vectorized references.
    Windowed sums are compared within `tolerance` (running subtraction
    drifts); extrema and crossings must match exactly.
    """
    bars: int = 2000
    seed: int = 42
    tolerance: float = 1e-9

    def __post_init__(self):
        if self.bars < 2:
            raise ValueError(f"TASTREAM_AUDIT_BARS must be >= 2, got {self.bars}")
        if self.seed < 0:
            raise ValueError(f"TASTREAM_AUDIT_SEED must be >= 0, got {self.seed}")
        if self.tolerance < 0:
            raise ValueError(
                f"TASTREAM_AUDIT_TOLERANCE must be >= 0, got {self.tolerance}"
            )


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()
        self.audit = self._load_audit_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("TASTREAM_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("TASTREAM_LOG_DIR", ""),
        )

    def _load_audit_config(self) -> AuditConfig:
        """Load parity audit configuration from environment."""
        try:
            return AuditConfig(
                bars=int(os.getenv("TASTREAM_AUDIT_BARS", "2000")),
                seed=int(os.getenv("TASTREAM_AUDIT_SEED", "42")),
                tolerance=float(os.getenv("TASTREAM_AUDIT_TOLERANCE", "1e-9")),
            )
        except ValueError as e:
            raise ValueError(f"Invalid audit configuration: {e}") from e

    def summary(self) -> dict:
        """Get configuration summary (for display)."""
        return {
            "log_level": self.log.level,
            "log_dir": self.log.log_dir or "(console only)",
            "audit_bars": self.audit.bars,
            "audit_seed": self.audit.seed,
            "audit_tolerance": self.audit.tolerance,
        }


def get_config(env_file: str = ".env") -> Config:
    """Get the global configuration instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    Config._instance = None
