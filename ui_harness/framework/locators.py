"""
================================================================================
Locators
================================================================================

Tagged locator values and the resolver that turns them into live handles.

A locator is exactly one of:
    - SelectorLocator: a Playwright selector, re-queried on every resolution
    - HandleLocator: an ElementHandle the caller already holds

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Union

from loguru import logger
from playwright.sync_api import ElementHandle, Page

from .exceptions import ElementNotFound, InvalidLocator


@dataclass(frozen=True)
class SelectorLocator:
    """Declarative selector (CSS, text=, xpath=, ...)."""
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HandleLocator:
    """Already-bound element handle; cannot be re-resolved after staleness."""
    ref: ElementHandle

    def __str__(self) -> str:
        return f"<handle {self.ref!r}>"


Locator = Union[SelectorLocator, HandleLocator]


def by_selector(value: str) -> SelectorLocator:
    """Build a selector locator."""
    return SelectorLocator(value)


def by_handle(ref: ElementHandle) -> HandleLocator:
    """Build a handle locator."""
    return HandleLocator(ref)


def as_locator(value: Any) -> Locator:
    """
    Coerce a raw value into the locator union.

    Page objects may pass plain selector strings or handles; everything past
    this point only sees SelectorLocator / HandleLocator.

    Raises:
        InvalidLocator: For any other type
    """
    if isinstance(value, (SelectorLocator, HandleLocator)):
        return value
    if isinstance(value, str):
        if not value.strip():
            raise InvalidLocator("Selector must be a non-empty string")
        return SelectorLocator(value)
    if isinstance(value, ElementHandle):
        return HandleLocator(value)
    raise InvalidLocator(
        f"Locator must be a selector or an element handle, got {type(value).__name__}"
    )


class LocatorResolver:
    """
    Resolves locators against a Playwright page.

    Holds no state besides the page: selector locators are queried on every
    call so callers always get the node currently in the document.

    Example:
        resolver = LocatorResolver(page)
        handle = resolver.resolve(by_selector("#user-name"))
    """

    def __init__(self, page: Page):
        self.page = page

    def resolve(self, locator: Locator) -> ElementHandle:
        """
        Resolve a locator to its first match in document order.

        Raises:
            ElementNotFound: Selector matched nothing
            InvalidLocator: Value is not part of the locator union
        """
        if isinstance(locator, HandleLocator):
            return locator.ref
        if isinstance(locator, SelectorLocator):
            logger.debug(f"Resolving selector: {locator.value}")
            handle = self.page.query_selector(locator.value)
            if handle is None:
                raise ElementNotFound(locator)
            return handle
        raise InvalidLocator(
            f"Cannot resolve {type(locator).__name__}; expected SelectorLocator or HandleLocator"
        )

    def resolve_all(self, locator: Locator) -> List[ElementHandle]:
        """
        Resolve a locator to every match in document order.

        Raises:
            ElementNotFound: Selector matched nothing
            InvalidLocator: Value is not part of the locator union
        """
        if isinstance(locator, HandleLocator):
            return [locator.ref]
        if isinstance(locator, SelectorLocator):
            handles = self.page.query_selector_all(locator.value)
            logger.debug(f"Selector {locator.value} matched {len(handles)} element(s)")
            if not handles:
                raise ElementNotFound(locator)
            return list(handles)
        raise InvalidLocator(
            f"Cannot resolve {type(locator).__name__}; expected SelectorLocator or HandleLocator"
        )


__all__ = [
    "SelectorLocator",
    "HandleLocator",
    "Locator",
    "by_selector",
    "by_handle",
    "as_locator",
    "LocatorResolver",
]
