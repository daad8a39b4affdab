"""
Repository-level pytest configuration.

Keeps local runs predictable:
  - Logging is initialized once from the harness configuration
  - The cached configuration is dropped at the end of the run
"""

from __future__ import annotations

from typing import Generator

import pytest

from ui_harness.common import init_logger, reset_config


@pytest.fixture(scope="session", autouse=True)
def _harness_logging() -> Generator[None, None, None]:
    """
    Configure Loguru from config/config.yaml (or env overrides) for the run.
    """
    init_logger()
    yield
    reset_config()
