"""
================================================================================
Alert Helper
================================================================================

Modal dialog (alert / confirm / prompt) handling.

Playwright delivers dialogs as page events, and while a dialog listener is
registered the page stays frozen until the listener settles the dialog. Two
flows follow from that:

- A dialog opened synchronously by an action (onclick="confirm(...)") must be
  answered before the action can return. Run the action inside
  expect_alert(), which arms a decision the listener applies on arrival.
- A dialog opened later (timers, network callbacks) is queued; "Present"
  means the queue is non-empty, and accept/dismiss/prompt settle the oldest.

Waiting polls through page.wait_for_timeout, which keeps the event loop
dispatching dialogs.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Deque, Iterator, Optional, Tuple

import allure
from loguru import logger
from playwright.sync_api import Dialog, Page

from .exceptions import UnsupportedOperation, WaitTimeout
from .waiter import ConditionWaiter


# Condition label reported by alert waits
ALERT_PRESENT = "alert_present"


@dataclass
class HandledAlert:
    """
    A dialog answered by an armed expectation.

    Attributes:
        accept: Decision applied on arrival
        prompt_text: Text sent to a prompt when accepting
        message: Dialog message, None until a dialog arrived
        type: Dialog type ("alert", "confirm", "prompt", "beforeunload")
    """
    accept: bool = True
    prompt_text: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = None

    @property
    def handled(self) -> bool:
        return self.message is not None


class AlertHelper:
    """
    Alert state machine: Absent / Present.

    Example:
        alerts = AlertHelper(page, waiter)
        with alerts.expect_alert(accept=True) as alert:
            engine.click("#delete")
        assert alert.message == "Delete item?"
    """

    def __init__(self, page: Page, waiter: ConditionWaiter):
        self.page = page
        self.waiter = waiter
        self._pending: Deque[Dialog] = deque()
        self._armed: Optional[HandledAlert] = None
        self.page.on("dialog", self._on_dialog)
        logger.debug("AlertHelper listening for dialogs")

    def _on_dialog(self, dialog: Dialog) -> None:
        logger.debug(f"Dialog opened ({dialog.type}): {dialog.message}")
        expectation = self._armed
        if expectation is None:
            self._pending.append(dialog)
            return

        # One dialog per expectation; later ones queue
        self._armed = None
        expectation.message = dialog.message
        expectation.type = dialog.type
        self._settle(dialog, expectation.accept, expectation.prompt_text)

    def _check_pending(self) -> Tuple[bool, Optional[Dialog]]:
        if self._pending:
            return True, self._pending[0]
        return False, None

    @staticmethod
    def _settle(dialog: Dialog, accept: bool, prompt_text: Optional[str] = None) -> None:
        if accept and prompt_text is not None:
            dialog.accept(prompt_text)
            logger.info("Alert accepted.")
        elif accept:
            dialog.accept()
            logger.info("Alert accepted.")
        else:
            dialog.dismiss()
            logger.info("Alert dismissed.")

    def detach(self) -> None:
        """Stop listening for dialogs."""
        self.page.remove_listener("dialog", self._on_dialog)

    @contextmanager
    def expect_alert(
        self,
        accept: bool = True,
        prompt_text: str = None,
        timeout: float = None,
    ) -> Iterator[HandledAlert]:
        """
        Answer the next dialog as soon as it opens.

        The block runs the action that opens the dialog. If the dialog has not
        arrived when the block exits, the exit waits for it.

        Args:
            accept: Accept (True) or dismiss (False) the dialog
            prompt_text: Text for a prompt dialog; only sent when accepting
            timeout: Per-call timeout in seconds for the exit wait

        Yields:
            HandledAlert filled in when the dialog arrives

        Raises:
            WaitTimeout: No dialog opened before the deadline
            UnsupportedOperation: Another expectation is already armed
        """
        if self._armed is not None:
            raise UnsupportedOperation("An alert expectation is already armed")

        expectation = HandledAlert(accept=accept, prompt_text=prompt_text)
        self._armed = expectation
        logger.debug(f"Expecting alert (accept={accept})")
        try:
            yield expectation
            if not expectation.handled:
                self.waiter.until(
                    lambda: (expectation.handled, expectation),
                    ALERT_PRESENT,
                    policy=self.waiter.policy.with_timeout(timeout),
                    description="alert",
                )
        finally:
            if self._armed is expectation:
                self._armed = None

    def wait_for_alert(self, timeout: float = None) -> Dialog:
        """
        Block until a dialog is open.

        Raises:
            WaitTimeout: No dialog appeared before the deadline
        """
        logger.debug("Waiting for alert to be present...")
        return self.waiter.until(
            self._check_pending,
            ALERT_PRESENT,
            policy=self.waiter.policy.with_timeout(timeout),
            description="alert",
        )

    def is_present(self, timeout: float = None) -> bool:
        try:
            self.wait_for_alert(timeout=timeout)
            return True
        except WaitTimeout:
            logger.debug("No alert was present.")
            return False

    def get_text(self, timeout: float = None) -> str:
        text = self.wait_for_alert(timeout=timeout).message
        logger.info(f"Retrieved alert text: '{text}'")
        return text

    def _take(self, timeout: float = None) -> Dialog:
        self.wait_for_alert(timeout=timeout)
        return self._pending.popleft()

    @allure.step("Accept alert")
    def accept(self, timeout: float = None) -> None:
        logger.info("Accepting alert.")
        self._settle(self._take(timeout), accept=True)

    @allure.step("Dismiss alert")
    def dismiss(self, timeout: float = None) -> None:
        logger.info("Dismissing alert.")
        self._settle(self._take(timeout), accept=False)

    @allure.step("Send text to alert and accept")
    def send_text_and_accept(self, text: str, timeout: float = None) -> None:
        self.send_text_and_handle(text, accept=True, timeout=timeout)

    @allure.step("Send text to alert and handle (accept={accept})")
    def send_text_and_handle(self, text: str, accept: bool, timeout: float = None) -> None:
        """
        Answer a prompt dialog.

        Playwright only takes prompt text when accepting, so a dismissed
        prompt discards the text.
        """
        logger.info(f"Sending text '{text}' to alert and will {'accept' if accept else 'dismiss'}")
        self._settle(self._take(timeout), accept, text)

    def accept_if_present(self, timeout: float = None) -> bool:
        """
        Accept an open dialog if there is one.

        Returns:
            True if a dialog was accepted
        """
        if not self.is_present(timeout=timeout):
            return False
        self.accept(timeout=timeout)
        return True


__all__ = [
    "ALERT_PRESENT",
    "AlertHelper",
    "HandledAlert",
]
