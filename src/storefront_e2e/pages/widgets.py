"""Pages under the "Widgets" section: date picker and select menu."""

from __future__ import annotations

import re

from playwright.sync_api import Locator

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import DATE_PICKER, SELECT_MENU

NON_EMPTY = re.compile(r".+")


class DatePickerPage:
    PATH = "/date-picker"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page

        self.month_year_input: Locator = self.page.locator(DATE_PICKER["month_year_input"])
        self.selected_day: Locator = self.page.locator(DATE_PICKER["selected_day"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def open_month_year_picker(self) -> None:
        self.actions.click_element(self.month_year_input)

    def pick_selected_day(self) -> None:
        """Open the calendar and confirm the day it highlights."""
        self.open_month_year_picker()
        self.actions.click_element(self.selected_day.first)

    def get_month_year_value(self) -> str:
        return self.actions.get_input_value(self.month_year_input)

    def verify_date_selected(self) -> None:
        self.actions.assert_value(self.month_year_input, NON_EMPTY)


class SelectMenuPage:
    PATH = "/select-menu"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page

        self.old_style_select: Locator = self.page.locator(SELECT_MENU["old_style_select"])

    def navigate(self) -> None:
        self.actions.navigate_to(self.PATH)

    def select_old_style(self, value: str) -> None:
        self.actions.select_option(self.old_style_select, value)

    def verify_old_style_value(self, value: str) -> None:
        self.actions.assert_value(self.old_style_select, value)
