"""
Configuration module.
"""

from .config import Config, LogConfig, AuditConfig, get_config, reset_config

__all__ = [
    "Config",
    "LogConfig",
    "AuditConfig",
    "get_config",
    "reset_config",
]
