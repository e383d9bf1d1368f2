"""Account registration page."""

from __future__ import annotations

import re

from playwright.sync_api import Locator

from storefront_e2e.models import RegistrationDetails
from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import REGISTER


class RegisterPage:
    """New-customer registration form.

    The success path ends on the ``account/success`` route; the failure path
    leaves the form in place with the ``.alert-danger`` banner and per-field
    error texts (``#input-<field>-error``).
    """

    PATH = "/index.php?route=account/register"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        # Personal details
        self.first_name_input: Locator = page.locator(REGISTER["first_name_input"])
        self.last_name_input: Locator = page.locator(REGISTER["last_name_input"])
        self.email_input: Locator = page.locator(REGISTER["email_input"])
        self.telephone_input: Locator = page.locator(REGISTER["telephone_input"])

        # Password
        self.password_input: Locator = page.locator(REGISTER["password_input"])
        self.confirm_password_input: Locator = page.locator(REGISTER["confirm_password_input"])

        # Options and buttons
        self.newsletter_checkbox: Locator = page.locator(REGISTER["newsletter_checkbox"])
        self.privacy_policy_checkbox: Locator = page.locator(REGISTER["privacy_policy_checkbox"])
        self.continue_button: Locator = page.locator(REGISTER["continue_button"])
        self.back_button: Locator = page.locator(REGISTER["back_button"])

        # Messages
        self.error_message: Locator = page.locator(REGISTER["error_message"])
        self.first_name_error: Locator = page.locator(REGISTER["field_error"].format(field="firstname"))
        self.last_name_error: Locator = page.locator(REGISTER["field_error"].format(field="lastname"))
        self.email_error: Locator = page.locator(REGISTER["field_error"].format(field="email"))
        self.telephone_error: Locator = page.locator(REGISTER["field_error"].format(field="telephone"))
        self.password_error: Locator = page.locator(REGISTER["field_error"].format(field="password"))
        self.confirm_password_error: Locator = page.locator(REGISTER["field_error"].format(field="confirm"))
        self.success_message: Locator = page.locator(REGISTER["success_message"])

    def navigate_to_register(self) -> None:
        self.actions.navigate_to(self.PATH)

    # -------------------------------------------------------------------------
    # Form filling
    # -------------------------------------------------------------------------

    def fill_personal_details(
        self, first_name: str, last_name: str, email: str, telephone: str
    ) -> None:
        self.actions.fill_input(self.first_name_input, first_name)
        self.actions.fill_input(self.last_name_input, last_name)
        self.actions.fill_input(self.email_input, email)
        self.actions.fill_input(self.telephone_input, telephone)

    def fill_password_fields(self, password: str, confirm_password: str) -> None:
        self.actions.fill_input(self.password_input, password)
        self.actions.fill_input(self.confirm_password_input, confirm_password)

    def fill_registration_form(
        self,
        first_name: str,
        last_name: str,
        email: str,
        telephone: str,
        password: str,
        confirm_password: str,
    ) -> None:
        self.fill_personal_details(first_name, last_name, email, telephone)
        self.fill_password_fields(password, confirm_password)

    def register_with_newsletter(
        self,
        first_name: str,
        last_name: str,
        email: str,
        telephone: str,
        password: str,
        confirm_password: str,
    ) -> None:
        self.fill_registration_form(
            first_name, last_name, email, telephone, password, confirm_password
        )
        self.actions.click_element(self.newsletter_checkbox)
        self.actions.click_element(self.privacy_policy_checkbox)
        self.actions.click_element(self.continue_button)

    def register_without_newsletter(
        self,
        first_name: str,
        last_name: str,
        email: str,
        telephone: str,
        password: str,
        confirm_password: str,
    ) -> None:
        self.fill_registration_form(
            first_name, last_name, email, telephone, password, confirm_password
        )
        self.actions.click_element(self.privacy_policy_checkbox)
        self.actions.click_element(self.continue_button)

    def register(self, details: RegistrationDetails, newsletter: bool = False) -> None:
        """Submit the whole form from one RegistrationDetails value."""
        submit = self.register_with_newsletter if newsletter else self.register_without_newsletter
        submit(
            details.first_name,
            details.last_name,
            details.email,
            details.telephone,
            details.password,
            details.confirm_password,
        )

    def click_continue(self) -> None:
        self.actions.click_element(self.continue_button)

    def click_back(self) -> None:
        self.actions.click_element(self.back_button)

    def toggle_newsletter(self) -> None:
        self.actions.click_element(self.newsletter_checkbox)

    def accept_privacy_policy(self) -> None:
        self.actions.click_element(self.privacy_policy_checkbox)

    def clear_registration_form(self) -> None:
        for field in (
            self.first_name_input,
            self.last_name_input,
            self.email_input,
            self.telephone_input,
            self.password_input,
            self.confirm_password_input,
        ):
            self.actions.clear_input(field)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_error_message(self) -> str:
        return self.actions.get_text(self.error_message)

    def get_field_error(self, field_name: str) -> str:
        """Error text under one field, e.g. ``get_field_error("confirm")``."""
        error = self.page.locator(REGISTER["field_error"].format(field=field_name))
        return self.actions.get_text(error)

    def get_success_message(self) -> str:
        return self.actions.get_text(self.success_message)

    def is_error_message_visible(self) -> bool:
        return self.actions.is_element_visible(self.error_message)

    def is_success_message_visible(self) -> bool:
        return self.actions.is_element_visible(self.success_message)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_registration_page_loaded(self) -> None:
        for field in (
            self.first_name_input,
            self.last_name_input,
            self.email_input,
            self.telephone_input,
            self.password_input,
            self.confirm_password_input,
        ):
            self.actions.assert_element_visible(field)

    def verify_registration_form_validation(self) -> None:
        """Submit the empty form and expect the error alert."""
        self.actions.click_element(self.continue_button)
        self.actions.assert_element_visible(self.error_message)

    def verify_successful_registration(self) -> None:
        success_url = re.compile(r".*success.*")
        self.actions.wait_for_url(success_url)
        self.actions.assert_url(success_url)

    def verify_failed_registration(self) -> None:
        self.actions.assert_element_visible(self.error_message)
