# ================================================================================
# Condition Waiter Module
# ================================================================================
#
# This module provides the synchronization primitive used by every interaction:
# a cooperative polling loop that re-evaluates a readiness condition until it
# holds or the deadline elapses.
#
# Key Features:
#   - Fixed poll interval, wall-clock deadline
#   - Selector targets re-resolved on every tick
#   - Staleness during evaluation treated as "not yet" (selectors and page checks)
#   - A bound handle that goes stale fails at once
#   - Absence satisfies INVISIBLE
#   - Optional cancellation via threading.Event
#
# Usage:
#   waiter = ConditionWaiter(page, LocatorResolver(page), WaitPolicy(timeout=10))
#   handle = waiter.wait_for(by_selector("#login"), ReadinessCondition.clickable())
#
# ================================================================================

import threading
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Tuple, TypeVar

from loguru import logger
from playwright.sync_api import ElementHandle, Error as PlaywrightError, Page

from .conditions import ReadinessCondition
from .exceptions import Cancelled, ElementNotFound, StaleElement, WaitTimeout, is_stale_error
from .locators import HandleLocator, Locator, LocatorResolver


T = TypeVar('T')


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timing for wait operations.

    Attributes:
        timeout: Total time to wait in seconds
        poll_interval: Delay between condition evaluations in seconds
    """
    timeout: float = 10.0
    poll_interval: float = 0.25

    def __post_init__(self):
        if self.timeout < 0:
            raise ValueError(f"timeout must be >= 0, got {self.timeout}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")

    @classmethod
    def from_config(cls, config: Any) -> "WaitPolicy":
        """Build the process-wide policy from a HarnessConfig."""
        return cls(
            timeout=float(config.default_wait_seconds),
            poll_interval=float(config.poll_interval_seconds),
        )

    def with_timeout(self, timeout: Optional[float]) -> "WaitPolicy":
        """Return a copy with a per-call timeout (None keeps the current one)."""
        if timeout is None:
            return self
        return replace(self, timeout=float(timeout))


class ConditionWaiter:
    """
    Blocks the calling thread until a readiness condition holds.

    The waiter never evaluates in parallel and keeps no state between calls,
    so one instance can serve every helper bound to the same page.
    """

    def __init__(
        self,
        page: Page,
        resolver: LocatorResolver,
        policy: WaitPolicy = None,
        sleep: Callable[[float], None] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the waiter.

        Args:
            page: Playwright Page the conditions are evaluated against
            resolver: Resolver used to re-query selector targets
            policy: Default WaitPolicy for calls that do not pass one
            sleep: Poll sleep in seconds; defaults to page.wait_for_timeout so
                Playwright keeps dispatching events (dialogs) while polling
            clock: Monotonic clock in seconds
        """
        self.page = page
        self.resolver = resolver
        self.policy = policy or WaitPolicy()
        self._sleep = sleep or (lambda seconds: page.wait_for_timeout(seconds * 1000))
        self._clock = clock

    def until(
        self,
        check_fn: Callable[[], Tuple[bool, T]],
        condition: Any,
        policy: WaitPolicy = None,
        description: str = "",
        cancel_event: Optional[threading.Event] = None,
    ) -> T:
        """
        Poll check_fn until it reports success.

        Args:
            check_fn: Function returning (satisfied, result)
            condition: Condition or label being waited for (used in errors and logs)
            policy: Timing override for this call
            description: Human-readable target for logging
            cancel_event: When set, the wait stops with Cancelled

        Returns:
            The result from the first satisfied check

        Raises:
            WaitTimeout: Deadline elapsed without success
            Cancelled: cancel_event was set
        """
        policy = policy or self.policy
        start_time = self._clock()
        attempt = 0

        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise Cancelled(condition, self._clock() - start_time)

            attempt += 1
            satisfied, result = check_fn()
            elapsed = self._clock() - start_time

            if satisfied:
                logger.debug(
                    f"Condition {condition} met after {attempt} attempt(s) "
                    f"({elapsed:.2f}s) {description}".rstrip()
                )
                return result

            if elapsed >= policy.timeout:
                logger.error(
                    f"Timeout after {elapsed:.2f}s waiting for {condition} {description}".rstrip()
                )
                raise WaitTimeout(condition, elapsed, description or None)

            self._sleep(min(policy.poll_interval, policy.timeout - elapsed))

    def wait_for(
        self,
        target: Optional[Locator],
        condition: ReadinessCondition,
        policy: WaitPolicy = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Optional[ElementHandle]:
        """
        Wait until target satisfies condition.

        Args:
            target: Locator to evaluate; ignored for page-level conditions
            condition: Readiness condition
            policy: Timing override for this call
            cancel_event: Optional cancellation token

        Returns:
            The satisfying handle, or None for page-level conditions and for
            INVISIBLE satisfied by absence

        Raises:
            ElementNotFound: Selector never matched during the whole wait
            WaitTimeout: Element was found but never satisfied the condition
            StaleElement: A bound handle detached (unless waiting for INVISIBLE)
        """
        if condition.is_page_level:
            def check_page() -> Tuple[bool, None]:
                try:
                    return condition.holds_for_page(self.page), None
                except PlaywrightError as e:
                    if not is_stale_error(e):
                        raise
                    logger.debug(f"Document changed while evaluating {condition}")
                    return False, None

            return self.until(
                check_page,
                condition,
                policy=policy,
                cancel_event=cancel_event,
            )

        found = False

        def check() -> Tuple[bool, Optional[ElementHandle]]:
            nonlocal found
            try:
                element = self.resolver.resolve(target)
            except ElementNotFound:
                return condition.accepts_absence, None
            except PlaywrightError as e:
                if not is_stale_error(e):
                    raise
                logger.debug(f"Document changed while resolving {target}")
                return condition.accepts_absence, None

            found = True
            try:
                return condition.holds_for(element), element
            except PlaywrightError as e:
                if not is_stale_error(e):
                    raise
                logger.debug(f"Element went stale while evaluating {condition}: {target}")
                if isinstance(target, HandleLocator) and not condition.accepts_absence:
                    # A bound handle never re-attaches
                    raise StaleElement(target, f"wait for {condition}") from e
                # A detached node is as gone as a missing one
                return condition.accepts_absence, None

        try:
            return self.until(
                check,
                condition,
                policy=policy,
                description=str(target),
                cancel_event=cancel_event,
            )
        except WaitTimeout as e:
            if not found:
                raise ElementNotFound(
                    target,
                    f"No element matched {target} within {e.elapsed:.2f}s",
                ) from e
            raise


__all__ = [
    "WaitPolicy",
    "ConditionWaiter",
]
