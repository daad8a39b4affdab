"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, harness sessions and page objects.

Key Features:
- Headless Chromium shared across the session (skips when not installed)
- Fresh context, page and HarnessSession per test
- Local pages served through page.route, no network access needed
- Screenshot capture on failure

================================================================================
"""

from types import MappingProxyType
from typing import Callable, Dict, Generator

import allure
import pytest
from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Route,
    sync_playwright,
)

from ui_harness.common.global_config import HarnessConfig
from ui_harness.framework import HarnessSession
from ui_harness.pages import LoginPage


BASE_URL = "https://shop.test"


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser() -> Generator[Browser, None, None]:
    """
    Session-scoped headless Chromium.

    Skips the UI suite when the Playwright browser binaries are missing.
    """
    playwright = sync_playwright().start()
    try:
        browser = playwright.chromium.launch(headless=True)
    except PlaywrightError as e:
        playwright.stop()
        pytest.skip(f"Chromium is not available: {e}")

    yield browser

    browser.close()
    playwright.stop()


@pytest.fixture(scope="function")
def context(browser: Browser) -> Generator[BrowserContext, None, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = browser.new_context(viewport={"width": 1280, "height": 800})
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


# ================================================================================
# Harness Fixtures
# ================================================================================

@pytest.fixture
def ui_config() -> HarnessConfig:
    return HarnessConfig(
        default_wait_seconds=5,
        poll_interval_seconds=0.1,
        base_url=BASE_URL,
        expectations=MappingProxyType({
            "login_page_title": "Swag Labs",
            "login_page_url": f"{BASE_URL}/",
            "inventory_page_title": "Swag Labs",
            "inventory_page_url": f"{BASE_URL}/inventory.html",
        }),
    )


@pytest.fixture
def session(page: Page, ui_config: HarnessConfig) -> Generator[HarnessSession, None, None]:
    session = HarnessSession(page, ui_config)
    yield session
    session.close()


@pytest.fixture
def serve(page: Page) -> Callable[[Dict[str, str]], None]:
    """
    Serve in-memory HTML documents under BASE_URL.

    Usage:
        serve({"/": LOGIN_HTML, "/inventory.html": INVENTORY_HTML})
    """

    def install(documents: Dict[str, str]) -> None:
        def handle(route: Route) -> None:
            path = route.request.url[len(BASE_URL):].split("?")[0] or "/"
            if path in documents:
                route.fulfill(status=200, content_type="text/html", body=documents[path])
            else:
                route.fulfill(status=404, content_type="text/html", body="<title>404</title>")

        page.route(f"{BASE_URL}/**", handle)

    return install


@pytest.fixture
def login_page(session: HarnessSession) -> LoginPage:
    return LoginPage(session)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Automatically takes a screenshot when a UI test fails and attaches
    it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is None:
            return
        try:
            allure.attach(
                page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
