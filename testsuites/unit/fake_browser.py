"""
In-memory stand-ins for the Playwright page, element handles and dialogs.

Only the surface the harness touches is implemented. Staleness is simulated
with real `playwright.sync_api.Error` instances so the harness classifies it
exactly as it would a live driver error.
"""

from typing import Any, Callable, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError

from ui_harness.framework import dropdown, script_commands


def stale_error() -> PlaywrightError:
    return PlaywrightError("Element is not attached to the DOM")


class FakeClock:
    """Manual monotonic clock; sleeping advances time and fires tick hooks."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: List[float] = []
        self.on_tick: List[Callable[[], None]] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        for hook in list(self.on_tick):
            hook()


class FakeElement:
    def __init__(
        self,
        text: str = "",
        visible: bool = True,
        enabled: bool = True,
        checked: bool = False,
        attributes: Optional[Dict[str, str]] = None,
        value: str = "",
    ):
        self.text = text
        self.visible = visible
        self.enabled = enabled
        self.checked = checked
        self.attributes = dict(attributes or {})
        self.value = value
        self.stale = False
        self.stale_actions = 0
        self.calls: List[tuple] = []

    def __repr__(self) -> str:
        return f"FakeElement({self.text or self.attributes!r})"

    def _guard(self) -> None:
        if self.stale:
            raise stale_error()

    def _act(self, name: str, *args: Any) -> None:
        if self.stale_actions > 0:
            self.stale_actions -= 1
            raise stale_error()
        self._guard()
        self.calls.append((name,) + args)

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    # -- state ---------------------------------------------------------------

    def is_visible(self) -> bool:
        self._guard()
        return self.visible

    def is_enabled(self) -> bool:
        self._guard()
        return self.enabled

    def is_checked(self) -> bool:
        self._guard()
        return self.checked

    def inner_text(self, timeout: float = None) -> str:
        self._guard()
        return self.text

    def get_attribute(self, name: str, timeout: float = None) -> Optional[str]:
        self._guard()
        return self.attributes.get(name)

    # -- actions -------------------------------------------------------------

    def click(self, timeout: float = None) -> None:
        self._act("click")
        self.checked = not self.checked

    def dblclick(self, timeout: float = None) -> None:
        self._act("dblclick")

    def fill(self, value: str, timeout: float = None) -> None:
        self._act("fill", value)
        self.value = value

    def hover(self, timeout: float = None) -> None:
        self._act("hover")

    def scroll_into_view_if_needed(self, timeout: float = None) -> None:
        self._act("scroll_into_view_if_needed")


class FakeOption(FakeElement):
    def __init__(self, text: str, value: str = None, disabled: bool = False, selected: bool = False):
        super().__init__(text=text, enabled=not disabled, value=value if value is not None else text)
        self.selected = selected


class FakeSelect(FakeElement):
    def __init__(self, options: List[FakeOption], multiple: bool = False):
        super().__init__()
        self.options = options
        self.multiple = multiple

    def query_selector_all(self, selector: str) -> List[FakeOption]:
        self._guard()
        return list(self.options)

    def select_option(self, value=None, index=None, label=None, timeout: float = None) -> None:
        self._act("select_option", value, index, label)
        if label is not None:
            matches = [o for o in self.options if o.text == label]
        elif value is not None:
            matches = [o for o in self.options if o.value == value]
        else:
            matches = [self.options[index]]
        if not matches:
            raise PlaywrightError("did not find some options")
        if not self.multiple:
            for option in self.options:
                option.selected = False
        matches[0].selected = True

    def evaluate(self, script: str, arg: Any = None) -> Any:
        self._guard()
        if script == dropdown.SELECTED_TEXTS_SCRIPT:
            return [o.text for o in self.options if o.selected]
        if script == dropdown.OPTION_TEXTS_SCRIPT:
            return [o.text for o in self.options]
        if script == dropdown.IS_MULTIPLE_SCRIPT:
            return self.multiple
        if script == dropdown.DESELECT_ALL_SCRIPT:
            self.calls.append(("deselect_all",))
            for option in self.options:
                option.selected = False
            return None
        raise AssertionError(f"Unexpected script: {script}")


class FakeDialog:
    def __init__(self, message: str, type: str = "alert"):
        self.message = message
        self.type = type
        self.accepted: Optional[bool] = None
        self.prompt_text: Optional[str] = None

    def accept(self, prompt_text: str = None) -> None:
        self.accepted = True
        self.prompt_text = prompt_text

    def dismiss(self) -> None:
        self.accepted = False


class FakePage:
    def __init__(self, url: str = "about:blank", title: str = ""):
        self.url = url
        self._title = title
        self.elements: Dict[str, List[FakeElement]] = {}
        self.listeners: Dict[str, List[Callable]] = {}
        self.history: List[str] = [url]
        self.evaluations: List[tuple] = []
        self.reloads = 0

    def add(self, selector: str, *elements: FakeElement) -> FakeElement:
        self.elements.setdefault(selector, []).extend(elements)
        return elements[0]

    def remove(self, selector: str) -> None:
        self.elements.pop(selector, None)

    # -- queries -------------------------------------------------------------

    def query_selector(self, selector: str) -> Optional[FakeElement]:
        matches = self.elements.get(selector) or []
        return matches[0] if matches else None

    def query_selector_all(self, selector: str) -> List[FakeElement]:
        return list(self.elements.get(selector) or [])

    def title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title

    # -- navigation ----------------------------------------------------------

    def goto(self, url: str, **kwargs: Any) -> None:
        self.url = url
        self.history.append(url)

    def go_back(self, **kwargs: Any) -> None:
        self.history.append("<back>")

    def go_forward(self, **kwargs: Any) -> None:
        self.history.append("<forward>")

    def reload(self, **kwargs: Any) -> None:
        self.reloads += 1

    # -- events --------------------------------------------------------------

    def on(self, event: str, handler: Callable) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable) -> None:
        self.listeners.get(event, []).remove(handler)

    def open_dialog(self, dialog: FakeDialog) -> FakeDialog:
        for handler in self.listeners.get("dialog", []):
            handler(dialog)
        return dialog

    # -- scripts -------------------------------------------------------------

    def evaluate(self, script: str, arg: Any = None) -> Any:
        self.evaluations.append((script, arg))
        if script == script_commands.GET_VALUE:
            return arg[0].value
        if script == script_commands.SET_VALUE:
            arg[0].value = arg[1]
        if script == script_commands.FORCE_CLICK:
            arg[0].calls.append(("js_click",))
        return None

    def wait_for_timeout(self, timeout: float) -> None:
        raise AssertionError("Unit tests must inject a fake sleep")
