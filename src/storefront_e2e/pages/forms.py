"""Student registration practice form."""

from __future__ import annotations

from playwright.sync_api import Locator

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.elements import INVALID_FIELD_CLASS
from storefront_e2e.pages.selectors import PRACTICE_FORM


class PracticeFormPage:
    """Practice form; a valid submit opens a confirmation modal.

    Invalid fields are flagged after submit through the form's validation
    classes, which ``verify_field_invalid`` checks by element id.
    """

    PATH = "/automation-practice-form"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        self.first_name_input: Locator = page.locator(PRACTICE_FORM["first_name_input"])
        self.last_name_input: Locator = page.locator(PRACTICE_FORM["last_name_input"])
        self.email_input: Locator = page.locator(PRACTICE_FORM["email_input"])
        self.mobile_input: Locator = page.locator(PRACTICE_FORM["mobile_input"])
        self.submit_button: Locator = page.locator(PRACTICE_FORM["submit_button"])
        self.submission_modal: Locator = page.locator(PRACTICE_FORM["submission_modal"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def fill_required(self, first_name: str, last_name: str, email: str, mobile: str) -> None:
        self.actions.fill_input(self.first_name_input, first_name)
        self.actions.fill_input(self.last_name_input, last_name)
        self.actions.fill_input(self.email_input, email)
        self.actions.fill_input(self.mobile_input, mobile)

    def select_gender(self, gender: str) -> None:
        radio = self.page.locator(PRACTICE_FORM["gender_radio"].format(gender=gender))
        self.actions.click_element(radio, force=True)

    def submit(self) -> None:
        self.actions.click_element(self.submit_button)

    def verify_submission_modal(self) -> None:
        self.actions.assert_element_visible(self.submission_modal)

    def verify_field_invalid(self, field_id: str) -> None:
        field = self.page.locator(PRACTICE_FORM["field"].format(field=field_id))
        self.actions.assert_attribute(field, "class", INVALID_FIELD_CLASS)

    def is_submitted(self) -> bool:
        return self.actions.is_element_visible(self.submission_modal)
