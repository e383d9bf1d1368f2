"""Browser dialogs page."""

from __future__ import annotations

import structlog
from playwright.sync_api import Dialog, Locator

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import ALERTS

log = structlog.get_logger(__name__)


class AlertsPage:
    """Buttons that raise alert and confirm dialogs.

    Dialogs block the page until handled, so register a handler with
    ``accept_next_dialog`` or ``dismiss_next_dialog`` before triggering one.
    """

    PATH = "/alerts"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        self.alert_button: Locator = page.locator(ALERTS["alert_button"])
        self.confirm_button: Locator = page.locator(ALERTS["confirm_button"])
        self.confirm_result: Locator = page.locator(ALERTS["confirm_result"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def accept_next_dialog(self) -> None:
        self.page.once("dialog", self._accept)

    def dismiss_next_dialog(self) -> None:
        self.page.once("dialog", self._dismiss)

    def trigger_alert(self) -> None:
        self.actions.click_element(self.alert_button)

    def trigger_confirm(self) -> None:
        self.actions.click_element(self.confirm_button)

    def get_confirm_result(self) -> str:
        return self.actions.get_text(self.confirm_result)

    def verify_confirm_result(self, text: str) -> None:
        self.actions.assert_text_content(self.confirm_result, text)

    @staticmethod
    def _accept(dialog: Dialog) -> None:
        log.debug("dialog_accepted", type=dialog.type, message=dialog.message)
        dialog.accept()

    @staticmethod
    def _dismiss(dialog: Dialog) -> None:
        log.debug("dialog_dismissed", type=dialog.type, message=dialog.message)
        dialog.dismiss()
