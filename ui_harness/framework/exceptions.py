"""
================================================================================
Harness Exceptions
================================================================================

Failure taxonomy shared by the interaction engine, the composite control
helpers and the assertion layer.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

from playwright.sync_api import Error as PlaywrightError


# Fragments of Playwright error messages raised when a handle lost its node
STALE_ERROR_MARKERS = (
    "not attached to the dom",
    "element is detached",
    "execution context was destroyed",
)


class HarnessError(Exception):
    """Base class for every failure raised by the harness."""
    pass


class ElementNotFound(HarnessError):
    """Raised when a selector matches nothing in the live document."""

    def __init__(self, locator: Any, message: Optional[str] = None):
        self.locator = locator
        super().__init__(message or f"No element matches locator: {locator}")


class InvalidLocator(HarnessError, TypeError):
    """Raised when a value is neither a selector nor an element handle."""
    pass


class WaitTimeout(HarnessError):
    """Raised when a readiness condition never held before the deadline."""

    def __init__(self, condition: Any, elapsed: float, target: Any = None):
        self.condition = condition
        self.elapsed = elapsed
        self.target = target
        where = f" on {target}" if target is not None else ""
        super().__init__(
            f"Timed out after {elapsed:.2f}s waiting for {condition}{where}"
        )


class Cancelled(HarnessError):
    """Raised when a wait was cancelled by its caller before completing."""

    def __init__(self, condition: Any, elapsed: float):
        self.condition = condition
        self.elapsed = elapsed
        super().__init__(f"Wait for {condition} cancelled after {elapsed:.2f}s")


class StaleElement(HarnessError):
    """Raised when a handle was invalidated between resolution and action."""

    def __init__(self, locator: Any, action: str = ""):
        self.locator = locator
        self.action = action
        verb = f" during {action}" if action else ""
        super().__init__(f"Element went stale{verb}: {locator}")


class UnsupportedOperation(HarnessError):
    """Raised when an operation is not valid for the control's current shape."""
    pass


class AssertionFailed(HarnessError, AssertionError):
    """
    Structured assertion failure.

    Attributes:
        kind: Assertion kind that failed
        expected: Expected value
        actual: Observed value
    """

    def __init__(self, kind: Any, expected: Any, actual: Any, message: str = ""):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        self.message = message
        detail = f"{message}: " if message else ""
        super().__init__(
            f"Assertion Failed ({kind}): {detail}expected {expected!r}, got {actual!r}"
        )


def is_stale_error(exc: BaseException) -> bool:
    """Return True when a driver error means the element handle went stale."""
    if not isinstance(exc, PlaywrightError):
        return False
    text = str(getattr(exc, "message", "") or exc).lower()
    return any(marker in text for marker in STALE_ERROR_MARKERS)


__all__ = [
    "HarnessError",
    "ElementNotFound",
    "InvalidLocator",
    "WaitTimeout",
    "Cancelled",
    "StaleElement",
    "UnsupportedOperation",
    "AssertionFailed",
    "is_stale_error",
]
