# ================================================================================
# Script Commands Module
# ================================================================================
#
# Escape hatch for actions the native element API cannot express. Every
# wrapper runs a fixed script body through page.evaluate with the resolved
# element passed as the first argument.
#
# Script convention: each script is a JS function taking one array argument,
# destructured as ([el, value]) => ...
#
# Element wrappers resolve through the LocatorResolver but do not wait for a
# readiness condition; script execution does not depend on visibility.
#
# ================================================================================

from typing import Any, Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from .locators import LocatorResolver, as_locator


SCROLL_TO_TOP = "() => window.scrollTo(0, 0)"
SCROLL_TO_BOTTOM = "() => window.scrollTo(0, document.body.scrollHeight)"
SCROLL_TO_ELEMENT = "([el]) => el.scrollIntoView(true)"
HIGHLIGHT = "([el]) => { el.style.backgroundColor = 'yellow'; }"
REMOVE_HIGHLIGHT = "([el]) => { el.style.backgroundColor = ''; }"
FORCE_CLICK = "([el]) => el.click()"
SET_VALUE = "([el, value]) => { el.value = value; }"
GET_VALUE = "([el]) => el.value"


class ScriptCommands:
    """Named wrappers over page.evaluate."""

    def __init__(self, page: Page, resolver: LocatorResolver):
        self.page = page
        self.resolver = resolver

    def execute(self, script: str, *args: Any) -> Any:
        """
        Run a script in the page.

        Args:
            script: JS function source; receives args as one array
            *args: Serializable values or element handles

        Returns:
            The script's return value
        """
        result = self.page.evaluate(script, list(args))
        logger.info(f"Executed script: '{script}', with {len(args)} argument(s)")
        return result

    def _on_element(self, script: str, locator: Any, *args: Any) -> Any:
        element = self.resolver.resolve(as_locator(locator))
        return self.execute(script, element, *args)

    @allure.step("Scroll to top")
    def scroll_to_top(self) -> None:
        self.execute(SCROLL_TO_TOP)

    @allure.step("Scroll to bottom")
    def scroll_to_bottom(self) -> None:
        self.execute(SCROLL_TO_BOTTOM)

    @allure.step("Scroll to element: {locator}")
    def scroll_to_element(self, locator: Any) -> None:
        self._on_element(SCROLL_TO_ELEMENT, locator)
        logger.info(f"Scrolled to element: {locator}")

    @allure.step("Highlight element: {locator}")
    def highlight(self, locator: Any) -> None:
        self._on_element(HIGHLIGHT, locator)
        logger.info(f"Highlighted element: {locator}")

    @allure.step("Remove highlight: {locator}")
    def remove_highlight(self, locator: Any) -> None:
        self._on_element(REMOVE_HIGHLIGHT, locator)
        logger.info(f"Removed highlight from element: {locator}")

    @allure.step("Force click: {locator}")
    def force_click(self, locator: Any) -> None:
        """Dispatch a DOM click, ignoring visibility and overlays."""
        self._on_element(FORCE_CLICK, locator)
        logger.info(f"Performed hard click on element: {locator}")

    @allure.step("Set value of {locator}")
    def set_value(self, locator: Any, value: str) -> None:
        self._on_element(SET_VALUE, locator, value)
        logger.info(f"Set input value for element: {locator} to '{value}'")

    def get_value(self, locator: Any) -> Optional[str]:
        value = self._on_element(GET_VALUE, locator)
        logger.info(f"Retrieved input value for element: {locator} - Value: '{value}'")
        return value


__all__ = [
    "ScriptCommands",
]
