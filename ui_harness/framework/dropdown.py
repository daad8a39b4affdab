"""
================================================================================
Dropdown Helper
================================================================================

Single/multi <select> control operations built on the interaction engine.

deselect_all / reset are only valid on multi-valued controls; on a single
select they raise UnsupportedOperation without touching the control.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, List

import allure
from loguru import logger
from playwright.sync_api import ElementHandle

from .conditions import ReadinessCondition
from .element_actions import InteractionEngine
from .exceptions import ElementNotFound, UnsupportedOperation


SELECTED_TEXTS_SCRIPT = "el => Array.from(el.selectedOptions).map(o => o.text.trim())"
OPTION_TEXTS_SCRIPT = "el => Array.from(el.options).map(o => o.text.trim())"
IS_MULTIPLE_SCRIPT = "el => el.multiple === true"
DESELECT_ALL_SCRIPT = """el => {
    for (const option of el.options) { option.selected = false; }
    el.dispatchEvent(new Event('input', { bubbles: true }));
    el.dispatchEvent(new Event('change', { bubbles: true }));
}"""


class DropDownHelper:
    """
    Select-list operations.

    Example:
        dropdown = DropDownHelper(engine)
        dropdown.select_by_visible_text(".product_sort_container", "Price (low to high)")
        assert dropdown.get_selected_text(".product_sort_container") == "Price (low to high)"
    """

    def __init__(self, engine: InteractionEngine):
        self.engine = engine

    def _with_select(self, locator: Any, action, description: str, timeout: float = None):
        return self.engine.perform(
            locator,
            ReadinessCondition.clickable(),
            action,
            description=description,
            timeout=timeout,
        )

    @allure.step("Select option by text '{text}' in {locator}")
    def select_by_visible_text(self, locator: Any, text: str, timeout: float = None) -> None:
        self._with_select(
            locator,
            lambda el: el.select_option(label=text, timeout=self.engine.action_timeout_ms(timeout)),
            "select_by_visible_text",
            timeout,
        )
        logger.info(f"Selected option by visible text: '{text}'")

    @allure.step("Select option by value '{value}' in {locator}")
    def select_by_value(self, locator: Any, value: str, timeout: float = None) -> None:
        self._with_select(
            locator,
            lambda el: el.select_option(value=value, timeout=self.engine.action_timeout_ms(timeout)),
            "select_by_value",
            timeout,
        )
        logger.info(f"Selected option by value: '{value}'")

    @allure.step("Select option by index {index} in {locator}")
    def select_by_index(self, locator: Any, index: int, timeout: float = None) -> None:
        self._with_select(
            locator,
            lambda el: el.select_option(index=index, timeout=self.engine.action_timeout_ms(timeout)),
            "select_by_index",
            timeout,
        )
        logger.info(f"Selected option by index: {index}")

    def get_selected_text(self, locator: Any, timeout: float = None) -> str:
        """
        Text of the first selected option.

        Raises:
            ElementNotFound: No option is selected
        """
        selected: List[str] = self._with_select(
            locator,
            lambda el: el.evaluate(SELECTED_TEXTS_SCRIPT),
            "get_selected_text",
            timeout,
        )
        if not selected:
            raise ElementNotFound(locator, f"No option is selected in {locator}")
        logger.info(f"Currently selected option text: '{selected[0]}'")
        return selected[0]

    def get_all_options(self, locator: Any, timeout: float = None) -> List[str]:
        """Texts of every option, in document order."""
        options: List[str] = self._with_select(
            locator,
            lambda el: el.evaluate(OPTION_TEXTS_SCRIPT),
            "get_all_options",
            timeout,
        )
        logger.info(f"Retrieved all options from dropdown, total options: {len(options)}")
        return options

    def is_option_disabled(self, locator: Any, text: str, timeout: float = None) -> bool:
        """
        Whether the option with the given visible text is disabled.

        Raises:
            ElementNotFound: No option has that text
        """

        def check(el: ElementHandle) -> bool:
            for option in el.query_selector_all("option"):
                if (option.inner_text() or "").strip() == text:
                    return not option.is_enabled()
            raise ElementNotFound(locator, f"Option with text '{text}' not found in {locator}")

        disabled = self._with_select(locator, check, "is_option_disabled", timeout)
        logger.info(f"Option '{text}' is {'disabled' if disabled else 'enabled'}")
        return disabled

    def is_multiple(self, locator: Any, timeout: float = None) -> bool:
        return self._with_select(
            locator,
            lambda el: bool(el.evaluate(IS_MULTIPLE_SCRIPT)),
            "is_multiple",
            timeout,
        )

    @allure.step("Deselect all options in {locator}")
    def deselect_all(self, locator: Any, timeout: float = None) -> None:
        """
        Clear every selection of a multi-select.

        Raises:
            UnsupportedOperation: Control is single-valued
        """

        def clear(el: ElementHandle) -> None:
            if not el.evaluate(IS_MULTIPLE_SCRIPT):
                logger.error(f"Cannot deselect options in a single-select dropdown: {locator}")
                raise UnsupportedOperation(
                    f"Cannot deselect options in a single-select dropdown: {locator}"
                )
            el.evaluate(DESELECT_ALL_SCRIPT)

        self._with_select(locator, clear, "deselect_all", timeout)
        logger.info(f"All options deselected in multi-select dropdown: {locator}")

    def reset(self, locator: Any, timeout: float = None) -> None:
        """Alias of deselect_all, under the same single-select guard."""
        self.deselect_all(locator, timeout=timeout)


__all__ = [
    "DropDownHelper",
]
