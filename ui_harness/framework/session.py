"""
================================================================================
Harness Session
================================================================================

Wires one Playwright page to a resolver, a waiter and every helper built on
them. Each test scenario owns its own session; nothing is shared between
sessions, so parallel scenarios only need separate pages.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from playwright.sync_api import Page

from ui_harness.common.global_config import HarnessConfig, get_config

from .alerts import AlertHelper
from .assertions import AssertionHelper
from .checkbox import CheckboxHelper
from .dropdown import DropDownHelper
from .element_actions import InteractionEngine
from .locators import LocatorResolver
from .script_commands import ScriptCommands
from .waiter import ConditionWaiter, WaitPolicy


class HarnessSession:
    """
    Helper bundle for one page.

    Usage:
        session = HarnessSession(page, config)
        session.actions.fill_text("#user-name", "standard_user")
        session.verify.assert_page_title("Swag Labs")
    """

    def __init__(
        self,
        page: Page,
        config: Optional[HarnessConfig] = None,
        sleep: Optional[Callable[[float], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            page: Playwright page owned by this session
            config: Process-wide settings (defaults to get_config())
            sleep: Poll sleep override, mainly for tests
            clock: Monotonic clock override, mainly for tests
        """
        self.page = page
        self.config = config or get_config()
        self.policy = WaitPolicy.from_config(self.config)

        self.resolver = LocatorResolver(page)
        self.waiter = ConditionWaiter(
            page, self.resolver, self.policy, sleep=sleep, clock=clock
        )
        self.actions = InteractionEngine(page, self.resolver, self.waiter, self.policy)
        self.checkboxes = CheckboxHelper(self.actions)
        self.dropdowns = DropDownHelper(self.actions)
        self.alerts = AlertHelper(page, self.waiter)
        self.scripts = ScriptCommands(page, self.resolver)
        self.verify = AssertionHelper(self.actions)

    def close(self) -> None:
        """Release page listeners; the page itself stays with its owner."""
        self.alerts.detach()


__all__ = [
    "HarnessSession",
]
