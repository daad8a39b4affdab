"""
Login page object driven end to end against the in-memory page.
"""

import pytest

from ui_harness.framework import AssertionFailed, AssertionKind
from ui_harness.pages import LoginPage

from testsuites.unit.fake_browser import FakeElement


@pytest.fixture
def login_page(session, fake_page):
    username = fake_page.add(LoginPage.USERNAME_INPUT, FakeElement())
    password = fake_page.add(LoginPage.PASSWORD_INPUT, FakeElement())
    button = fake_page.add(LoginPage.LOGIN_BUTTON, FakeElement(text="Login"))

    def submit(timeout=None):
        button.calls.append(("click",))
        if (username.value, password.value) == ("standard_user", "secret"):
            fake_page.url = "https://shop.test/inventory.html"
        else:
            fake_page.add(
                LoginPage.ERROR_MESSAGE,
                FakeElement(text="Epic sadface: Username and password do not match"),
            )

    button.click = submit
    return LoginPage(session)


def test_open_navigates_to_base_url(login_page, fake_page):
    login_page.open()

    assert fake_page.history[-1] == "https://shop.test/"
    login_page.verify_open_login_page()


def test_successful_login(login_page, fake_page):
    login_page.open()
    login_page.login("standard_user", "secret")

    login_page.verify_login_successful()
    assert fake_page.query_selector(LoginPage.LOGIN_BUTTON).count("click") == 1


def test_failed_login_shows_error_and_stays_on_login_page(login_page):
    login_page.open()
    login_page.login("standard_user", "wrong")

    assert "do not match" in login_page.error_text()
    with pytest.raises(AssertionFailed) as exc_info:
        login_page.verify_login_successful()
    assert exc_info.value.kind is AssertionKind.CURRENT_URL
    assert exc_info.value.expected == "https://shop.test/inventory.html"


def test_login_page_check_fails_when_form_is_hidden(login_page, fake_page):
    fake_page.query_selector(LoginPage.PASSWORD_INPUT).visible = False

    with pytest.raises(AssertionFailed) as exc_info:
        login_page.verify_open_login_page()
    assert exc_info.value.kind is AssertionKind.ELEMENT_DISPLAYED
