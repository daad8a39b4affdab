"""
================================================================================
Suite-wide Pytest Configuration
================================================================================

Registers the markers used across the suites and tags every test with the
suite it lives in, so `-m unit` runs without a browser and `-m ui` selects
the Chromium tests.

================================================================================
"""

from pathlib import Path

import pytest


MARKERS = {
    # Priority
    "P0": "Critical priority tests - must pass for deployment",
    "P1": "High priority tests - important functionality",
    "P2": "Medium priority tests - edge cases and minor features",
    "P3": "Low priority tests - extensive validation",
    # Type
    "smoke": "Quick verification tests",
    "regression": "Full regression test suite",
    # Suite (applied automatically by directory)
    "unit": "Harness tests against the in-memory page",
    "ui": "Tests driving a real browser",
}

SUITE_DIRS = {
    "unit": pytest.mark.unit,
    "ui_testing": pytest.mark.ui,
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    for item in items:
        parts = Path(str(item.fspath)).parts
        for directory, marker in SUITE_DIRS.items():
            if directory in parts:
                item.add_marker(marker)


def pytest_report_header(config):
    return ["", "=" * 60, "UI Harness Test Suite", "=" * 60, ""]
