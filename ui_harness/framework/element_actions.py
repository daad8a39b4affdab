# ================================================================================
# Element Actions Module
# ================================================================================
#
# This module provides the interaction engine: one method per verb, each
# following the same template of resolve -> wait for precondition -> act.
#
# Key Features:
#   - Verb-specific readiness preconditions
#   - Single re-resolve on staleness for selector locators
#   - Element state reads for assertions and composite controls
#   - Navigation helpers
#   - Allure step integration
#
# ================================================================================

from typing import Any, Callable, Optional, TypeVar

import allure
from loguru import logger
from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from .conditions import ReadinessCondition
from .exceptions import StaleElement, is_stale_error
from .locators import LocatorResolver, SelectorLocator, as_locator
from .waiter import ConditionWaiter, WaitPolicy


T = TypeVar('T')


class InteractionEngine:
    """
    Wait-synchronized element interactions bound to one Playwright page.

    Staleness policy: if the action itself hits a detached node, a selector
    locator is re-resolved, re-waited and re-acted exactly once; a handle
    locator fails immediately with StaleElement.

    Example:
        engine = InteractionEngine(page, resolver, waiter)
        engine.fill_text("#user-name", "standard_user")
        engine.click("#login-button")
    """

    def __init__(
        self,
        page: Page,
        resolver: LocatorResolver,
        waiter: ConditionWaiter,
        policy: WaitPolicy = None,
    ):
        """
        Initialize the engine.

        Args:
            page: Playwright Page owned by the caller
            resolver: Locator resolver bound to the same page
            waiter: Condition waiter bound to the same page
            policy: Default WaitPolicy (falls back to the waiter's)
        """
        self.page = page
        self.resolver = resolver
        self.waiter = waiter
        self.policy = policy or waiter.policy

    # =========================================================================
    # Verb Template
    # =========================================================================

    def perform(
        self,
        locator: Any,
        condition: ReadinessCondition,
        action: Callable[[ElementHandle], T],
        description: str = "",
        timeout: float = None,
    ) -> T:
        """
        Wait for condition on locator, then run action on the handle.

        Args:
            locator: Selector string, ElementHandle or Locator
            condition: Precondition the element must satisfy
            action: Callable receiving the ready handle
            description: Verb name for logs and errors
            timeout: Per-call timeout in seconds

        Returns:
            Whatever action returns

        Raises:
            ElementNotFound, WaitTimeout: From resolution/wait, unchanged
            StaleElement: Handle went stale during the wait or the action
        """
        target = as_locator(locator)
        policy = self.policy.with_timeout(timeout)
        attempts = 2 if isinstance(target, SelectorLocator) else 1

        for attempt in range(1, attempts + 1):
            element = self.waiter.wait_for(target, condition, policy)
            try:
                return action(element)
            except PlaywrightError as e:
                if not is_stale_error(e):
                    raise
                logger.warning(
                    f"Element went stale during {description or 'action'} "
                    f"(attempt {attempt}/{attempts}): {target}"
                )
                if attempt == attempts:
                    raise StaleElement(target, description) from e

    def action_timeout_ms(self, timeout: Optional[float] = None) -> float:
        """Driver-side action timeout in milliseconds."""
        return self.policy.with_timeout(timeout).timeout * 1000

    # =========================================================================
    # Interaction Verbs
    # =========================================================================

    @allure.step("Click element: {locator}")
    def click(self, locator: Any, timeout: float = None) -> None:
        """Click an element once it is clickable."""
        logger.info(f"Clicking element: {locator}")
        self.perform(
            locator,
            ReadinessCondition.clickable(),
            lambda el: el.click(timeout=self.action_timeout_ms(timeout)),
            description="click",
            timeout=timeout,
        )
        logger.debug(f"Successfully clicked: {locator}")

    @allure.step("Double-click element: {locator}")
    def double_click(self, locator: Any, timeout: float = None) -> None:
        """Double-click an element once it is clickable."""
        logger.info(f"Double-clicking element: {locator}")
        self.perform(
            locator,
            ReadinessCondition.clickable(),
            lambda el: el.dblclick(timeout=self.action_timeout_ms(timeout)),
            description="double_click",
            timeout=timeout,
        )

    @allure.step("Fill text: {locator}")
    def fill_text(self, locator: Any, text: str, timeout: float = None) -> None:
        """
        Replace the value of an input with text.

        Args:
            locator: Input locator
            text: New value
            timeout: Per-call timeout in seconds
        """
        logger.info(f"Filling input: {locator} with '{text[:50]}'")

        def fill(el: ElementHandle) -> None:
            el.fill("", timeout=self.action_timeout_ms(timeout))
            el.fill(text, timeout=self.action_timeout_ms(timeout))

        self.perform(
            locator,
            ReadinessCondition.visible(),
            fill,
            description="fill_text",
            timeout=timeout,
        )
        logger.debug(f"Successfully filled: {locator}")

    @allure.step("Clear text: {locator}")
    def clear_text(self, locator: Any, timeout: float = None) -> None:
        """Clear the value of an input."""
        logger.info(f"Clearing input: {locator}")
        self.perform(
            locator,
            ReadinessCondition.visible(),
            lambda el: el.fill("", timeout=self.action_timeout_ms(timeout)),
            description="clear_text",
            timeout=timeout,
        )

    @allure.step("Get text: {locator}")
    def read_text(self, locator: Any, timeout: float = None) -> str:
        """
        Read the rendered text of a visible element.

        Returns:
            Text with surrounding whitespace trimmed
        """
        text = self.perform(
            locator,
            ReadinessCondition.visible(),
            lambda el: (el.inner_text() or "").strip(),
            description="read_text",
            timeout=timeout,
        )
        logger.debug(f"Got text from {locator}: '{text}'")
        return text

    @allure.step("Scroll into view: {locator}")
    def scroll_into_view(self, locator: Any, timeout: float = None) -> None:
        """Scroll the viewport to an attached element."""
        logger.info(f"Scrolling to element: {locator}")
        self.perform(
            locator,
            ReadinessCondition.present(),
            lambda el: el.scroll_into_view_if_needed(timeout=self.action_timeout_ms(timeout)),
            description="scroll_into_view",
            timeout=timeout,
        )

    @allure.step("Focus and click: {locator}")
    def focus_and_click(self, locator: Any, timeout: float = None) -> None:
        """Move the cursor onto an element, then click it."""
        logger.info(f"Hovering and clicking: {locator}")

        def hover_click(el: ElementHandle) -> None:
            el.hover(timeout=self.action_timeout_ms(timeout))
            el.click(timeout=self.action_timeout_ms(timeout))

        self.perform(
            locator,
            ReadinessCondition.visible(),
            hover_click,
            description="focus_and_click",
            timeout=timeout,
        )

    # =========================================================================
    # Element State
    # =========================================================================

    def wait_until(
        self,
        locator: Any,
        condition: ReadinessCondition,
        timeout: float = None,
    ) -> Optional[ElementHandle]:
        """
        Block until locator satisfies condition.

        Returns:
            The handle, or None when INVISIBLE was satisfied by absence
        """
        target = None if condition.is_page_level else as_locator(locator)
        logger.info(f"Waiting for {target or 'page'} to be {condition}")
        return self.waiter.wait_for(target, condition, self.policy.with_timeout(timeout))

    @allure.step("Get attribute: {name} from {locator}")
    def get_attribute(self, locator: Any, name: str, timeout: float = None) -> Optional[str]:
        value = self.perform(
            locator,
            ReadinessCondition.present(),
            lambda el: el.get_attribute(name),
            description="get_attribute",
            timeout=timeout,
        )
        logger.debug(f"Got attribute {name} from {locator}: '{value}'")
        return value

    def is_displayed(self, locator: Any, timeout: float = None) -> bool:
        return self.perform(
            locator,
            ReadinessCondition.present(),
            ReadinessCondition.visible().holds_for,
            description="is_displayed",
            timeout=timeout,
        )

    def is_enabled(self, locator: Any, timeout: float = None) -> bool:
        return self.perform(
            locator,
            ReadinessCondition.present(),
            lambda el: el.is_enabled(),
            description="is_enabled",
            timeout=timeout,
        )

    def is_selected(self, locator: Any, timeout: float = None) -> bool:
        """Single evaluation of the SELECTED condition (no waiting for it)."""
        return self.perform(
            locator,
            ReadinessCondition.present(),
            ReadinessCondition.selected().holds_for,
            description="is_selected",
            timeout=timeout,
        )

    # =========================================================================
    # Navigation
    # =========================================================================

    @allure.step("Navigate to {url}")
    def navigate_to(self, url: str) -> None:
        logger.info(f"Navigating to: {url}")
        self.page.goto(url)

    @allure.step("Navigate back")
    def back(self) -> None:
        logger.info("Navigating back")
        self.page.go_back()

    @allure.step("Navigate forward")
    def forward(self) -> None:
        logger.info("Navigating forward")
        self.page.go_forward()

    @allure.step("Refresh page")
    def refresh(self) -> None:
        logger.info("Refreshing page")
        self.page.reload()

    def current_url(self) -> str:
        url = self.page.url
        logger.debug(f"Current URL: {url}")
        return url

    def title(self) -> str:
        title = self.page.title()
        logger.debug(f"Page title: {title}")
        return title


__all__ = [
    "InteractionEngine",
]
