"""
================================================================================
Readiness Conditions
================================================================================

Predicates over an element handle or the page that must hold before an
interaction is safe. Conditions are plain values: they are created per call
and re-evaluated on every poll tick.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from playwright.sync_api import ElementHandle, Page


class ConditionKind(str, Enum):
    """Supported readiness predicates."""
    VISIBLE = "visible"
    CLICKABLE = "clickable"
    INVISIBLE = "invisible"
    SELECTED = "selected"
    TEXT_EQUALS = "text_equals"
    TEXT_CONTAINS = "text_contains"
    ATTRIBUTE_EQUALS = "attribute_equals"
    TITLE_CONTAINS = "title_contains"
    PRESENT = "present"


# Conditions evaluated against the page rather than an element
PAGE_LEVEL_KINDS = frozenset({
    ConditionKind.TITLE_CONTAINS,
})


@dataclass(frozen=True)
class ReadinessCondition:
    """
    A readiness predicate with its arguments.

    Attributes:
        kind: Predicate kind
        expected: Expected text/attribute value/title fragment (if any)
        attribute: Attribute name for ATTRIBUTE_EQUALS
    """
    kind: ConditionKind
    expected: Optional[str] = None
    attribute: Optional[str] = None

    @classmethod
    def visible(cls) -> "ReadinessCondition":
        return cls(ConditionKind.VISIBLE)

    @classmethod
    def clickable(cls) -> "ReadinessCondition":
        return cls(ConditionKind.CLICKABLE)

    @classmethod
    def invisible(cls) -> "ReadinessCondition":
        return cls(ConditionKind.INVISIBLE)

    @classmethod
    def selected(cls) -> "ReadinessCondition":
        return cls(ConditionKind.SELECTED)

    @classmethod
    def present(cls) -> "ReadinessCondition":
        return cls(ConditionKind.PRESENT)

    @classmethod
    def text_equals(cls, expected: str) -> "ReadinessCondition":
        return cls(ConditionKind.TEXT_EQUALS, expected=expected)

    @classmethod
    def text_contains(cls, expected: str) -> "ReadinessCondition":
        return cls(ConditionKind.TEXT_CONTAINS, expected=expected)

    @classmethod
    def attribute_equals(cls, name: str, expected: str) -> "ReadinessCondition":
        return cls(ConditionKind.ATTRIBUTE_EQUALS, expected=expected, attribute=name)

    @classmethod
    def title_contains(cls, fragment: str) -> "ReadinessCondition":
        return cls(ConditionKind.TITLE_CONTAINS, expected=fragment)

    @property
    def is_page_level(self) -> bool:
        return self.kind in PAGE_LEVEL_KINDS

    @property
    def accepts_absence(self) -> bool:
        """True when a missing element satisfies the condition."""
        return self.kind is ConditionKind.INVISIBLE

    def holds_for(self, element: ElementHandle) -> bool:
        """
        Evaluate the predicate against a live element.

        Driver errors (including staleness) propagate to the waiter, which
        decides whether they count as "not yet".
        """
        kind = self.kind
        if kind is ConditionKind.PRESENT:
            return True
        if kind is ConditionKind.VISIBLE:
            return element.is_visible()
        if kind is ConditionKind.CLICKABLE:
            return element.is_visible() and element.is_enabled()
        if kind is ConditionKind.INVISIBLE:
            return not element.is_visible()
        if kind is ConditionKind.SELECTED:
            return element.is_checked()
        if kind is ConditionKind.TEXT_EQUALS:
            return (element.inner_text() or "").strip() == self.expected
        if kind is ConditionKind.TEXT_CONTAINS:
            return self.expected in (element.inner_text() or "")
        if kind is ConditionKind.ATTRIBUTE_EQUALS:
            return element.get_attribute(self.attribute) == self.expected
        raise ValueError(f"{self} is not an element-level condition")

    def holds_for_page(self, page: Page) -> bool:
        """Evaluate a page-level predicate."""
        if self.kind is ConditionKind.TITLE_CONTAINS:
            return self.expected in (page.title() or "")
        raise ValueError(f"{self} cannot be evaluated against the page alone")

    def __str__(self) -> str:
        if self.kind is ConditionKind.ATTRIBUTE_EQUALS:
            return f"{self.kind.value}({self.attribute}={self.expected!r})"
        if self.expected is not None:
            return f"{self.kind.value}({self.expected!r})"
        return self.kind.value


__all__ = [
    "ConditionKind",
    "ReadinessCondition",
]
