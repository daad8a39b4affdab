from unittest.mock import MagicMock

import pytest
from playwright.sync_api import ElementHandle

from ui_harness.framework.exceptions import ElementNotFound, InvalidLocator
from ui_harness.framework.locators import (
    HandleLocator,
    LocatorResolver,
    SelectorLocator,
    as_locator,
    by_handle,
    by_selector,
)

from testsuites.unit.fake_browser import FakeElement, FakePage


def test_resolve_returns_first_match_in_document_order():
    page = FakePage()
    first, second = FakeElement("first"), FakeElement("second")
    page.add(".item", first, second)

    resolver = LocatorResolver(page)
    assert resolver.resolve(by_selector(".item")) is first
    assert resolver.resolve(by_selector(".item")) is first


def test_resolve_requeries_the_document_every_call():
    page = FakePage()
    old = page.add("#btn", FakeElement("old"))
    resolver = LocatorResolver(page)
    assert resolver.resolve(by_selector("#btn")) is old

    page.remove("#btn")
    new = page.add("#btn", FakeElement("new"))
    assert resolver.resolve(by_selector("#btn")) is new


def test_resolve_raises_when_selector_matches_nothing():
    resolver = LocatorResolver(FakePage())
    with pytest.raises(ElementNotFound) as exc_info:
        resolver.resolve(by_selector("#missing"))
    assert exc_info.value.locator == SelectorLocator("#missing")


def test_resolve_all_returns_every_match_and_rejects_empty():
    page = FakePage()
    boxes = [FakeElement(str(i)) for i in range(3)]
    page.add("input.box", *boxes)
    resolver = LocatorResolver(page)

    assert resolver.resolve_all(by_selector("input.box")) == boxes
    with pytest.raises(ElementNotFound):
        resolver.resolve_all(by_selector("input.none"))


def test_handle_locator_is_returned_unchanged():
    element = FakeElement("bound")
    resolver = LocatorResolver(FakePage())
    assert resolver.resolve(by_handle(element)) is element
    assert resolver.resolve_all(by_handle(element)) == [element]


@pytest.mark.parametrize("bad", [42, None, 3.5, ["#a"], {"css": "#a"}])
def test_resolver_rejects_values_outside_the_union(bad):
    resolver = LocatorResolver(FakePage())
    with pytest.raises(InvalidLocator):
        resolver.resolve(bad)
    with pytest.raises(InvalidLocator):
        resolver.resolve_all(bad)


def test_as_locator_coerces_raw_values():
    handle = MagicMock(spec=ElementHandle)

    assert as_locator("#user-name") == SelectorLocator("#user-name")
    assert as_locator(handle) == HandleLocator(handle)
    locator = by_selector("#x")
    assert as_locator(locator) is locator


@pytest.mark.parametrize("bad", [42, None, "", "   ", object()])
def test_as_locator_rejects_invalid_input(bad):
    with pytest.raises(InvalidLocator):
        as_locator(bad)


def test_invalid_locator_is_a_type_error():
    with pytest.raises(TypeError):
        as_locator(7)
