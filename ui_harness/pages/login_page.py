"""
================================================================================
Login Page Object
================================================================================

Login form: username, password and login button, plus the expectations for
the login page and the page reached after a successful login.

Expected titles/URLs come from the `expectations` section of the config:
    login_page_title, login_page_url, inventory_page_title, inventory_page_url

================================================================================
"""

from __future__ import annotations

import allure

from ui_harness.pages.page_base import PageBase


class LoginPage(PageBase):
    """Login page object."""

    URL_PATH = "/"

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = "[data-test='error']"

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        self.navigate()
        return self

    def enter_username(self, username: str) -> None:
        self.actions.fill_text(self.USERNAME_INPUT, username)

    def enter_password(self, password: str) -> None:
        self.actions.fill_text(self.PASSWORD_INPUT, password)

    def click_login_button(self) -> None:
        self.actions.click(self.LOGIN_BUTTON)

    @allure.step("Login (username={username})")
    def login(self, username: str, password: str) -> None:
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()

    @allure.step("Verify login page is open")
    def verify_open_login_page(self) -> None:
        self.verify.assert_page_title(self.config.expect("login_page_title"))
        self.verify.assert_current_url(self.config.expect("login_page_url"))
        self.verify.assert_element_displayed(self.USERNAME_INPUT)
        self.verify.assert_element_displayed(self.PASSWORD_INPUT)
        self.verify.assert_element_displayed(self.LOGIN_BUTTON)

    @allure.step("Verify login succeeded")
    def verify_login_successful(self) -> None:
        self.verify.assert_page_title(self.config.expect("inventory_page_title"))
        self.verify.assert_current_url(self.config.expect("inventory_page_url"))

    def error_text(self) -> str:
        return self.actions.read_text(self.ERROR_MESSAGE)
