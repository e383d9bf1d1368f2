"""Account login page."""

from __future__ import annotations

import re

from playwright.sync_api import Locator

from storefront_e2e.config.settings import Credentials
from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import LOGIN


class LoginPage:
    """Customer login form."""

    PATH = "/index.php?route=account/login"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        # Form
        self.email_input: Locator = page.locator(LOGIN["email_input"])
        self.password_input: Locator = page.locator(LOGIN["password_input"])
        self.login_button: Locator = page.locator(LOGIN["login_button"])
        self.forgot_password_link: Locator = page.locator(LOGIN["forgot_password_link"])
        self.register_link: Locator = page.locator(LOGIN["register_link"])
        self.remember_me_checkbox: Locator = page.locator(LOGIN["remember_me_checkbox"])

        # Messages
        self.error_message: Locator = page.locator(LOGIN["error_message"])
        self.email_error: Locator = page.locator(LOGIN["email_error"])
        self.password_error: Locator = page.locator(LOGIN["password_error"])
        self.success_message: Locator = page.locator(LOGIN["success_message"])

    def navigate_to_login(self) -> None:
        self.actions.navigate_to(self.PATH)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def fill_login_form(self, email: str, password: str) -> None:
        self.actions.fill_input(self.email_input, email)
        self.actions.fill_input(self.password_input, password)

    def login(self, email: str, password: str) -> None:
        self.fill_login_form(email, password)
        self.actions.click_element(self.login_button)

    def login_as(self, credentials: Credentials) -> None:
        self.login(credentials.email, credentials.password)

    def login_with_remember_me(self, email: str, password: str) -> None:
        self.fill_login_form(email, password)
        self.actions.click_element(self.remember_me_checkbox)
        self.actions.click_element(self.login_button)

    def click_forgot_password(self) -> None:
        self.actions.click_element(self.forgot_password_link)

    def click_register(self) -> None:
        self.actions.click_element(self.register_link)

    def clear_login_form(self) -> None:
        self.actions.clear_input(self.email_input)
        self.actions.clear_input(self.password_input)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_error_message(self) -> str:
        return self.actions.get_text(self.error_message)

    def get_email_error(self) -> str:
        return self.actions.get_text(self.email_error)

    def get_password_error(self) -> str:
        return self.actions.get_text(self.password_error)

    def get_success_message(self) -> str:
        return self.actions.get_text(self.success_message)

    def is_error_message_visible(self) -> bool:
        return self.actions.is_element_visible(self.error_message)

    def is_success_message_visible(self) -> bool:
        return self.actions.is_element_visible(self.success_message)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_login_page_loaded(self) -> None:
        self.actions.assert_element_visible(self.email_input)
        self.actions.assert_element_visible(self.password_input)
        self.actions.assert_element_visible(self.login_button)

    def verify_login_form_validation(self) -> None:
        """Submit the empty form and expect the error alert."""
        self.actions.click_element(self.login_button)
        self.actions.assert_element_visible(self.error_message)

    def verify_successful_login(self) -> None:
        account_url = re.compile(r".*account.*")
        self.actions.wait_for_url(account_url)
        self.actions.assert_url(account_url)

    def verify_failed_login(self) -> None:
        self.actions.assert_element_visible(self.error_message)
