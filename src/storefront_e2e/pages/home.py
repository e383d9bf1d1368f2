"""Storefront home page: header, top menu, featured products and banner."""

from __future__ import annotations

import re

from playwright.sync_api import Locator

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import HOME, SIDEBAR


class HomePage:
    """Home page of the storefront.

    Indexed methods (``add_product_to_cart(i)``, ``get_product_name(i)``...)
    expect an index that exists on the page; an out-of-range index surfaces
    as the driver's element timeout.
    """

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        # Header
        self.logo: Locator = page.locator(HOME["logo"])
        self.search_input: Locator = page.locator(HOME["search_input"])
        self.search_button: Locator = page.locator(HOME["search_button"])
        self.cart_button: Locator = page.locator(HOME["cart_button"])
        self.cart_count: Locator = page.locator(HOME["cart_count"])
        self.my_account_dropdown: Locator = page.locator(HOME["my_account_dropdown"])
        self.login_link: Locator = page.locator(HOME["login_link"])
        self.register_link: Locator = page.locator(HOME["register_link"])
        self.wishlist_link: Locator = page.locator(HOME["wishlist_link"])

        # Top menu
        self.desktops_menu: Locator = page.locator(HOME["desktops_menu"])
        self.laptops_notebooks_menu: Locator = page.locator(HOME["laptops_notebooks_menu"])
        self.components_menu: Locator = page.locator(HOME["components_menu"])
        self.tablets_menu: Locator = page.locator(HOME["tablets_menu"])
        self.software_menu: Locator = page.locator(HOME["software_menu"])
        self.phones_pdas_menu: Locator = page.locator(HOME["phones_pdas_menu"])
        self.cameras_menu: Locator = page.locator(HOME["cameras_menu"])
        self.mp3_players_menu: Locator = page.locator(HOME["mp3_players_menu"])

        # Featured products
        self.featured_products_section: Locator = page.locator(HOME["featured_products_section"])
        self.product_cards: Locator = page.locator(HOME["product_cards"])
        self.add_to_cart_buttons: Locator = page.locator(HOME["add_to_cart_buttons"])
        self.add_to_wishlist_buttons: Locator = page.locator(HOME["add_to_wishlist_buttons"])
        self.product_names: Locator = page.locator(HOME["product_names"])
        self.product_prices: Locator = page.locator(HOME["product_prices"])

        # Banner
        self.banner_slider: Locator = page.locator(HOME["banner_slider"])
        self.slider_next_button: Locator = page.locator(HOME["slider_next_button"])
        self.slider_prev_button: Locator = page.locator(HOME["slider_prev_button"])

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate_to_home(self) -> None:
        self.actions.navigate_to_home()

    def navigate_to_category(self, category_name: str) -> None:
        category = self.page.locator(HOME["category_link"].format(name=category_name))
        self.actions.click_element(category)

    def open_section(self, category_name: str, item_name: str) -> None:
        """Open a category, then one of the items in its side menu.

        Example:
            home.open_section("Elements", "Text Box")
        """
        self.navigate_to_category(category_name)
        self.actions.wait_for_page_load()
        item = self.page.locator(SIDEBAR["menu_item"].format(name=item_name))
        self.actions.click_element(item)
        self.actions.wait_for_page_load()

    def search_product(self, product_name: str) -> None:
        self.actions.fill_input(self.search_input, product_name)
        self.actions.click_element(self.search_button)

    def open_cart(self) -> None:
        self.actions.click_element(self.cart_button)

    def open_login_page(self) -> None:
        self.actions.click_element(self.my_account_dropdown)
        self.actions.click_element(self.login_link)

    def open_registration_page(self) -> None:
        self.actions.click_element(self.my_account_dropdown)
        self.actions.click_element(self.register_link)

    def open_wishlist(self) -> None:
        self.actions.click_element(self.wishlist_link)

    # -------------------------------------------------------------------------
    # Featured products
    # -------------------------------------------------------------------------

    def add_product_to_cart(self, product_index: int = 0) -> None:
        self.actions.click_element(self.add_to_cart_buttons.nth(product_index))

    def add_product_to_wishlist(self, product_index: int = 0) -> None:
        self.actions.click_element(self.add_to_wishlist_buttons.nth(product_index))

    def get_product_name(self, product_index: int = 0) -> str:
        return self.actions.get_text(self.product_names.nth(product_index))

    def get_product_price(self, product_index: int = 0) -> str:
        return self.actions.get_text(self.product_prices.nth(product_index))

    def click_product(self, product_index: int = 0) -> None:
        self.actions.click_element(self.product_names.nth(product_index))

    def get_featured_products_count(self) -> int:
        return self.actions.count(self.product_cards)

    def get_cart_count(self) -> str:
        """Cart summary text from the header, e.g. "1 item(s) - $122.00"."""
        return self.actions.get_text(self.cart_count)

    # -------------------------------------------------------------------------
    # Banner
    # -------------------------------------------------------------------------

    def next_slide(self) -> None:
        self.actions.click_element(self.slider_next_button)

    def previous_slide(self) -> None:
        self.actions.click_element(self.slider_prev_button)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_home_page_loaded(self) -> None:
        self.actions.assert_element_visible(self.logo)
        self.actions.assert_element_visible(self.search_input)
        self.actions.assert_element_visible(self.cart_button)

    def verify_search_functionality(self, product_name: str) -> None:
        """Search, then check the search results route was reached."""
        self.search_product(product_name)
        self.actions.wait_for_page_load()
        self.actions.assert_url(re.compile(r".*search.*"))
