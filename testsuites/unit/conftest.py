"""
Fixtures wiring the harness to the in-memory fake page.
"""

from types import MappingProxyType

import pytest

from ui_harness.common.global_config import HarnessConfig
from ui_harness.framework import HarnessSession

from testsuites.unit.fake_browser import FakeClock, FakePage


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage(url="https://shop.test/", title="Swag Labs")


@pytest.fixture
def harness_config() -> HarnessConfig:
    return HarnessConfig(
        default_wait_seconds=5,
        poll_interval_seconds=0.5,
        base_url="https://shop.test",
        expectations=MappingProxyType({
            "login_page_title": "Swag Labs",
            "login_page_url": "https://shop.test/",
            "inventory_page_title": "Swag Labs",
            "inventory_page_url": "https://shop.test/inventory.html",
        }),
    )


@pytest.fixture
def session(fake_page: FakePage, harness_config: HarnessConfig, clock: FakeClock) -> HarnessSession:
    return HarnessSession(fake_page, harness_config, sleep=clock.sleep, clock=clock)
