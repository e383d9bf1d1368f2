"""Pages under the "Elements" section: text box, check box, radio button."""

from __future__ import annotations

import re

from playwright.sync_api import Locator

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import CHECK_BOX, RADIO_BUTTON, TEXT_BOX

# Class the site adds to inputs it rejected on submit
INVALID_FIELD_CLASS = re.compile(r".*was-validated.*")
CHECKED_NODE_CLASS = re.compile(r".*rct-checked.*")


class TextBoxPage:
    """Text box form that echoes what was submitted into an output panel."""

    PATH = "/text-box"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        self.user_name_input: Locator = page.locator(TEXT_BOX["user_name_input"])
        self.user_email_input: Locator = page.locator(TEXT_BOX["user_email_input"])
        self.current_address_input: Locator = page.locator(TEXT_BOX["current_address_input"])
        self.permanent_address_input: Locator = page.locator(TEXT_BOX["permanent_address_input"])
        self.submit_button: Locator = page.locator(TEXT_BOX["submit_button"])
        self.output: Locator = page.locator(TEXT_BOX["output"])
        self.output_name: Locator = page.locator(TEXT_BOX["output_name"])
        self.output_email: Locator = page.locator(TEXT_BOX["output_email"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def fill_form(
        self, name: str, email: str, current_address: str, permanent_address: str
    ) -> None:
        self.actions.fill_input(self.user_name_input, name)
        self.actions.fill_input(self.user_email_input, email)
        self.actions.fill_input(self.current_address_input, current_address)
        self.actions.fill_input(self.permanent_address_input, permanent_address)

    def submit(self) -> None:
        self.actions.click_element(self.submit_button)

    def get_output_name(self) -> str:
        return self.actions.get_text(self.output_name)

    def get_output_email(self) -> str:
        return self.actions.get_text(self.output_email)

    def verify_output_visible(self) -> None:
        self.actions.assert_element_visible(self.output)

    def verify_output(self, name: str, email: str | None = None) -> None:
        self.verify_output_visible()
        self.actions.assert_text_content(self.output_name, name)
        if email is not None:
            self.actions.assert_text_content(self.output_email, email)

    def verify_email_invalid(self) -> None:
        self.actions.assert_attribute(self.user_email_input, "class", INVALID_FIELD_CLASS)


class CheckBoxPage:
    """Expandable check box tree with a textual result of the selection."""

    PATH = "/checkbox"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page

        self.expand_button: Locator = self.page.locator(CHECK_BOX["expand_button"])
        self.expand_all_button: Locator = self.page.locator(CHECK_BOX["expand_all_button"])
        self.result: Locator = self.page.locator(CHECK_BOX["result"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def node(self, label: str) -> Locator:
        return self.page.locator(CHECK_BOX["node_label"].format(label=label))

    def expand_all(self) -> None:
        self.actions.click_element(self.expand_all_button)

    def expand_first(self) -> None:
        """Expand the first collapsed node (the tree root)."""
        self.actions.click_element(self.expand_button.first)

    def toggle(self, label: str) -> None:
        self.actions.click_element(self.node(label))

    def get_result_text(self) -> str:
        return self.actions.get_text(self.result)

    def verify_selected(self, label: str) -> None:
        """The result panel lists the node, lower-cased."""
        self.actions.assert_text_content(self.result, label.lower())

    def verify_checked(self, label: str) -> None:
        self.actions.assert_attribute(self.node(label), "class", CHECKED_NODE_CLASS)


class RadioButtonPage:
    PATH = "/radio-button"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page

        self.selected_text: Locator = self.page.locator(RADIO_BUTTON["selected_text"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def option(self, value: str) -> Locator:
        return self.page.locator(RADIO_BUTTON["option"].format(value=value))

    def select(self, value: str) -> None:
        # The native input sits under its label; force skips the hit test
        self.actions.click_element(self.option(value), force=True)

    def get_selected_text(self) -> str:
        return self.actions.get_text(self.selected_text)

    def verify_selected(self, text: str) -> None:
        self.actions.assert_text_content(self.selected_text, text)
