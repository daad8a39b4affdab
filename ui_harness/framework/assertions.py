"""
================================================================================
Assertion Helper
================================================================================

One-shot page-state verification built on the interaction engine's reads.

Every mismatch is logged and raised as AssertionFailed(kind, expected, actual)
so callers can format their own report; nothing continues silently.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import allure
from loguru import logger

from .element_actions import InteractionEngine
from .exceptions import AssertionFailed


class AssertionKind(str, Enum):
    """Supported assertion kinds."""
    STRING_EQUALS = "string_equals"
    INT_EQUALS = "int_equals"
    TRUE = "true"
    CONTAINS = "contains"
    ELEMENT_DISPLAYED = "element_displayed"
    ELEMENT_ENABLED = "element_enabled"
    ELEMENT_SELECTED = "element_selected"
    ELEMENT_TEXT = "element_text"
    ELEMENT_CONTAINS_TEXT = "element_contains_text"
    PAGE_TITLE = "page_title"
    CURRENT_URL = "current_url"
    URL_CONTAINS = "url_contains"


class AssertionHelper:
    """
    Hard assertions over values, elements and the page.

    Example:
        verify = AssertionHelper(engine)
        verify.assert_page_title("Swag Labs")
        verify.assert_element_displayed("#login-button")
    """

    def __init__(self, engine: InteractionEngine):
        self.engine = engine

    def _check(self, passed: bool, kind: AssertionKind, expected: Any, actual: Any, message: str) -> None:
        if passed:
            logger.info(f"Assertion passed ({kind.value}): {message or expected!r}")
            return
        error = AssertionFailed(kind, expected, actual, message)
        logger.error(str(error))
        raise error

    # =========================================================================
    # Value Assertions
    # =========================================================================

    @allure.step("Assert equals: {expected}")
    def assert_equals(self, actual: str, expected: str, message: str = "") -> None:
        self._check(actual == expected, AssertionKind.STRING_EQUALS, expected, actual, message)

    @allure.step("Assert integer equals: {expected}")
    def assert_int_equals(self, actual: int, expected: int, message: str = "") -> None:
        self._check(actual == expected, AssertionKind.INT_EQUALS, expected, actual, message)

    @allure.step("Assert true: {message}")
    def assert_true(self, condition: bool, message: str = "") -> None:
        self._check(bool(condition), AssertionKind.TRUE, True, condition, message)

    @allure.step("Assert contains: {expected}")
    def assert_contains(self, actual: str, expected: str, message: str = "") -> None:
        passed = actual is not None and expected in actual
        self._check(passed, AssertionKind.CONTAINS, expected, actual, message)

    # =========================================================================
    # Element Assertions
    # =========================================================================

    @allure.step("Assert element displayed: {locator}")
    def assert_element_displayed(self, locator: Any) -> None:
        actual = self.engine.is_displayed(locator)
        self._check(actual, AssertionKind.ELEMENT_DISPLAYED, True, actual, f"Element is displayed: {locator}")

    @allure.step("Assert element enabled: {locator}")
    def assert_element_enabled(self, locator: Any) -> None:
        actual = self.engine.is_enabled(locator)
        self._check(actual, AssertionKind.ELEMENT_ENABLED, True, actual, f"Element is enabled: {locator}")

    @allure.step("Assert element selected: {locator}")
    def assert_element_selected(self, locator: Any) -> None:
        actual = self.engine.is_selected(locator)
        self._check(actual, AssertionKind.ELEMENT_SELECTED, True, actual, f"Element is selected: {locator}")

    @allure.step("Assert element text: {locator}")
    def assert_element_text(self, locator: Any, text: str) -> None:
        actual = self.engine.read_text(locator)
        self._check(actual == text, AssertionKind.ELEMENT_TEXT, text, actual, "Element text assertion")

    @allure.step("Assert element contains text: {locator}")
    def assert_element_contains_text(self, locator: Any, text: str) -> None:
        actual = self.engine.read_text(locator)
        self._check(text in actual, AssertionKind.ELEMENT_CONTAINS_TEXT, text, actual, "Element text contains")

    # =========================================================================
    # Page Assertions
    # =========================================================================

    @allure.step("Assert page title: {expected_title}")
    def assert_page_title(self, expected_title: str) -> None:
        actual = self.engine.title()
        self._check(actual == expected_title, AssertionKind.PAGE_TITLE, expected_title, actual, "Page title assertion")

    @allure.step("Assert current URL: {expected_url}")
    def assert_current_url(self, expected_url: str) -> None:
        actual = self.engine.current_url()
        self._check(actual == expected_url, AssertionKind.CURRENT_URL, expected_url, actual, "Current URL assertion")

    @allure.step("Assert URL contains: {substring}")
    def assert_url_contains(self, substring: str) -> None:
        actual = self.engine.current_url()
        self._check(substring in actual, AssertionKind.URL_CONTAINS, substring, actual, "URL contains assertion")


__all__ = [
    "AssertionKind",
    "AssertionHelper",
]
