"""
================================================================================
Page Object Base
================================================================================

Shared plumbing for page objects: where the page lives, how to get there,
and report screenshots. Interactions and checks go through the session's
engine and assertion helper, never through the raw Playwright page.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import allure
from loguru import logger

from ui_harness.framework.session import HarnessSession


# Screenshots are written under <repo>/screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare URL_PATH and their selectors as class attributes:

        class LoginPage(BasePage):
            URL_PATH = "/"
            USERNAME_INPUT = "#user-name"
    """

    URL_PATH: str = "/"

    def __init__(self, session: HarnessSession):
        self.session = session
        self.page = session.page
        self.config = session.config
        self.actions = session.actions
        self.verify = session.verify

    @property
    def url(self) -> str:
        """Absolute URL: configured base_url joined with URL_PATH."""
        return f"{self.config.base_url.rstrip('/')}{self.URL_PATH}"

    def navigate(self) -> None:
        self.actions.navigate_to(self.url)

    def screenshot(self, name: str, full_page: bool = False) -> Path:
        """
        Save a PNG of the page and attach it to the Allure report.

        Returns:
            Path of the saved file
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        filepath = SCREENSHOT_DIR / f"{name}_{datetime.now():%Y%m%d_%H%M%S}.png"

        self.page.screenshot(path=str(filepath), full_page=full_page)
        allure.attach.file(str(filepath), name=name, attachment_type=allure.attachment_type.PNG)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


# Page objects may subclass either name
PageBase = BasePage

__all__ = [
    "BasePage",
    "PageBase",
]
