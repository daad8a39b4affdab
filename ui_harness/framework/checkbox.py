"""
================================================================================
Checkbox Helper
================================================================================

Binary toggle state machine (Checked / Unchecked) built on the interaction
engine, with sequential batch operations over every match of a selector.

Batch policy is partial success: a stale, missing or never-ready member is
logged and recorded in the BatchOutcome, and the batch carries on.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Tuple

import allure
from loguru import logger
from playwright.sync_api import ElementHandle

from .conditions import ReadinessCondition
from .element_actions import InteractionEngine
from .exceptions import ElementNotFound, StaleElement, WaitTimeout
from .locators import as_locator, by_handle


# Per-element failures a batch records and moves past
BATCH_RECOVERABLE = (StaleElement, ElementNotFound, WaitTimeout)


@dataclass
class BatchOutcome:
    """
    Result of a batch checkbox operation.

    Attributes:
        succeeded: Indices (document order) handled without error
        failed: (index, error) pairs for members that could not be handled
    """
    succeeded: List[int] = field(default_factory=list)
    failed: List[Tuple[int, Exception]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


class CheckboxHelper:
    """
    Checkbox operations.

    Example:
        checkboxes = CheckboxHelper(engine)
        checkboxes.select("#remember-me")
        assert checkboxes.is_checked("#remember-me")
        outcome = checkboxes.select_all("input.filter")
    """

    def __init__(self, engine: InteractionEngine):
        self.engine = engine

    def _set_state(self, locator: Any, want_checked: bool, timeout: float = None) -> bool:
        label = "select" if want_checked else "deselect"

        def apply(el: ElementHandle) -> bool:
            if el.is_checked() == want_checked:
                logger.info(f"Checkbox already {label}ed: {locator}")
                return False
            el.click(timeout=self.engine.action_timeout_ms(timeout))
            logger.info(f"Checkbox {label}ed: {locator}")
            return True

        return self.engine.perform(
            locator,
            ReadinessCondition.clickable(),
            apply,
            description=f"{label}_checkbox",
            timeout=timeout,
        )

    @allure.step("Select checkbox: {locator}")
    def select(self, locator: Any, timeout: float = None) -> bool:
        """
        Check the box if it is unchecked.

        Returns:
            True if a click was issued
        """
        return self._set_state(locator, True, timeout)

    @allure.step("Deselect checkbox: {locator}")
    def deselect(self, locator: Any, timeout: float = None) -> bool:
        """
        Uncheck the box if it is checked.

        Returns:
            True if a click was issued
        """
        return self._set_state(locator, False, timeout)

    @allure.step("Toggle checkbox: {locator}")
    def toggle(self, locator: Any, timeout: float = None) -> None:
        """Click the box regardless of its state."""
        self.engine.click(locator, timeout=timeout)

    def is_checked(self, locator: Any, timeout: float = None) -> bool:
        return self.engine.is_selected(locator, timeout=timeout)

    # =========================================================================
    # Batch Operations
    # =========================================================================

    def _for_each(
        self,
        locator: Any,
        operation: Callable[..., Any],
        name: str,
        timeout: float = None,
    ) -> BatchOutcome:
        handles = self.engine.resolver.resolve_all(as_locator(locator))
        outcome = BatchOutcome()

        for index, handle in enumerate(handles):
            try:
                operation(by_handle(handle), timeout=timeout)
                outcome.succeeded.append(index)
            except BATCH_RECOVERABLE as e:
                logger.error(f"{name} skipped checkbox #{index} of {locator}: {e}")
                outcome.failed.append((index, e))

        logger.info(
            f"{name} on {locator}: {len(outcome.succeeded)}/{outcome.total} succeeded"
        )
        return outcome

    @allure.step("Select all checkboxes: {locator}")
    def select_all(self, locator: Any, timeout: float = None) -> BatchOutcome:
        return self._for_each(locator, self.select, "select_all", timeout)

    @allure.step("Deselect all checkboxes: {locator}")
    def deselect_all(self, locator: Any, timeout: float = None) -> BatchOutcome:
        return self._for_each(locator, self.deselect, "deselect_all", timeout)

    @allure.step("Toggle all checkboxes: {locator}")
    def toggle_all(self, locator: Any, timeout: float = None) -> BatchOutcome:
        return self._for_each(locator, self.toggle, "toggle_all", timeout)


__all__ = [
    "BatchOutcome",
    "CheckboxHelper",
]
