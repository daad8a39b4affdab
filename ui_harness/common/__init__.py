"""
Common configuration and logging utilities for the UI harness.
"""

from .global_config import (
    ConfigurationError,
    HarnessConfig,
    get_config,
    init_logger,
    load_config,
    reset_config,
)

__all__ = [
    "ConfigurationError",
    "HarnessConfig",
    "get_config",
    "init_logger",
    "load_config",
    "reset_config",
]
