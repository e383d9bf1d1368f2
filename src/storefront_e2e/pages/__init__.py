"""Page objects for the storefront and the form-widget pages.

Usage:
    from storefront_e2e.pages import HomePage, PageActions

    actions = PageActions(page, settings)
    home = HomePage(actions)
    home.navigate_to_home()
    home.verify_home_page_loaded()

Pattern:
    - One class per page, built around a shared PageActions
    - Locators assigned once in __init__, from pages/selectors.py
    - Methods for actions, queries (fresh reads) and verifications
"""

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.alerts import AlertsPage
from storefront_e2e.pages.cart import CartPage
from storefront_e2e.pages.elements import CheckBoxPage, RadioButtonPage, TextBoxPage
from storefront_e2e.pages.forms import PracticeFormPage
from storefront_e2e.pages.home import HomePage
from storefront_e2e.pages.login import LoginPage
from storefront_e2e.pages.product import ProductPage
from storefront_e2e.pages.register import RegisterPage
from storefront_e2e.pages.widgets import DatePickerPage, SelectMenuPage

__all__ = [
    "AlertsPage",
    "CartPage",
    "CheckBoxPage",
    "DatePickerPage",
    "HomePage",
    "LoginPage",
    "PageActions",
    "PracticeFormPage",
    "ProductPage",
    "RadioButtonPage",
    "RegisterPage",
    "SelectMenuPage",
    "TextBoxPage",
]
