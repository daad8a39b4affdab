"""
================================================================================
UI Harness
================================================================================

Browser-interaction layer for automated UI test suites.

Modules:
    - common: Configuration and logging
    - framework: Locators, waits, interactions, composite controls, assertions
    - pages: Page objects built on the framework

Example:
    from ui_harness.common import get_config, init_logger
    from ui_harness.framework import HarnessSession

    init_logger()
    session = HarnessSession(page, get_config())
    session.actions.click("#login-button")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "framework",
    "pages",
]
