import pytest

from ui_harness.framework import script_commands
from ui_harness.framework.exceptions import ElementNotFound

from testsuites.unit.fake_browser import FakeElement


@pytest.fixture
def scripts(session):
    return session.scripts


def test_execute_passes_arguments_as_one_array(fake_page, scripts):
    scripts.execute("([a, b]) => a + b", 1, 2)

    assert fake_page.evaluations == [("([a, b]) => a + b", [1, 2])]


def test_page_scrolls_take_no_element(fake_page, scripts):
    scripts.scroll_to_top()
    scripts.scroll_to_bottom()

    assert fake_page.evaluations == [
        (script_commands.SCROLL_TO_TOP, []),
        (script_commands.SCROLL_TO_BOTTOM, []),
    ]


def test_element_scripts_receive_resolved_handle(fake_page, scripts):
    element = fake_page.add("#item", FakeElement(visible=False))

    scripts.scroll_to_element("#item")
    scripts.highlight("#item")
    scripts.remove_highlight("#item")

    assert [call[0] for call in fake_page.evaluations] == [
        script_commands.SCROLL_TO_ELEMENT,
        script_commands.HIGHLIGHT,
        script_commands.REMOVE_HIGHLIGHT,
    ]
    assert all(call[1] == [element] for call in fake_page.evaluations)


def test_force_click_ignores_visibility(fake_page, scripts, clock):
    element = fake_page.add("#covered", FakeElement(visible=False))

    scripts.force_click("#covered")

    assert element.count("js_click") == 1
    assert clock.sleeps == []


def test_set_and_get_value(fake_page, scripts):
    field = fake_page.add("#user-name", FakeElement())

    scripts.set_value("#user-name", "locked_out_user")

    assert field.value == "locked_out_user"
    assert scripts.get_value("#user-name") == "locked_out_user"


def test_missing_element_raises_without_waiting(scripts, clock):
    with pytest.raises(ElementNotFound):
        scripts.highlight("#missing")
    assert clock.sleeps == []
