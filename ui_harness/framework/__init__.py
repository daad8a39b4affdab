"""
================================================================================
UI Interaction Framework
================================================================================

Playwright-based, wait-synchronized element interaction layer.

Components:
    - locators: Locator union and resolver
    - conditions: Readiness predicates
    - waiter: Polling condition waiter and wait policy
    - element_actions: Interaction engine (verbs + navigation)
    - checkbox / dropdown / alerts / script_commands: Composite controls
    - assertions: Page-state assertions
    - session: One-page helper bundle

Author: Automation Team
License: MIT
================================================================================
"""

from .alerts import AlertHelper, HandledAlert
from .assertions import AssertionHelper, AssertionKind
from .checkbox import BatchOutcome, CheckboxHelper
from .conditions import ConditionKind, ReadinessCondition
from .dropdown import DropDownHelper
from .element_actions import InteractionEngine
from .exceptions import (
    AssertionFailed,
    Cancelled,
    ElementNotFound,
    HarnessError,
    InvalidLocator,
    StaleElement,
    UnsupportedOperation,
    WaitTimeout,
)
from .locators import (
    HandleLocator,
    Locator,
    LocatorResolver,
    SelectorLocator,
    as_locator,
    by_handle,
    by_selector,
)
from .script_commands import ScriptCommands
from .session import HarnessSession
from .waiter import ConditionWaiter, WaitPolicy

__all__ = [
    "AlertHelper",
    "AssertionFailed",
    "AssertionHelper",
    "AssertionKind",
    "BatchOutcome",
    "Cancelled",
    "CheckboxHelper",
    "ConditionKind",
    "ConditionWaiter",
    "DropDownHelper",
    "ElementNotFound",
    "HandleLocator",
    "HarnessError",
    "HandledAlert",
    "HarnessSession",
    "InteractionEngine",
    "InvalidLocator",
    "Locator",
    "LocatorResolver",
    "ReadinessCondition",
    "ScriptCommands",
    "SelectorLocator",
    "StaleElement",
    "UnsupportedOperation",
    "WaitPolicy",
    "WaitTimeout",
    "as_locator",
    "by_handle",
    "by_selector",
]
