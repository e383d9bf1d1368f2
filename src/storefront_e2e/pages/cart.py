"""Shopping cart page."""

from __future__ import annotations

import re

import structlog
from playwright.sync_api import Locator

from storefront_e2e.models import CartItem, CartSummary
from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import CART

log = structlog.get_logger(__name__)


class CartPage:
    """Cart table, totals, coupon/voucher forms and shipping estimate.

    Row-level reads take an index into the current table. Flows that change
    the table while walking it (clear_cart, update_all_cart_items_quantities)
    snapshot first and never index into rows that may have shifted.
    """

    PATH = "/index.php?route=checkout/cart"

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        # Item rows
        self.cart_items: Locator = page.locator(CART["cart_items"])
        self.cart_item_names: Locator = page.locator(CART["cart_item_names"])
        self.cart_item_prices: Locator = page.locator(CART["cart_item_prices"])
        self.cart_item_quantities: Locator = page.locator(CART["cart_item_quantities"])
        self.cart_item_totals: Locator = page.locator(CART["cart_item_totals"])
        self.remove_buttons: Locator = page.locator(CART["remove_buttons"])

        # Summary
        self.cart_subtotal: Locator = page.locator(CART["cart_subtotal"])
        self.cart_total: Locator = page.locator(CART["cart_total"])
        self.checkout_button: Locator = page.locator(CART["checkout_button"])
        self.continue_shopping_button: Locator = page.locator(CART["continue_shopping_button"])
        self.update_cart_button: Locator = page.locator(CART["update_cart_button"])

        # Empty cart
        self.empty_cart_message: Locator = page.locator(CART["empty_cart_message"])
        self.empty_cart_continue_button: Locator = page.locator(CART["empty_cart_continue_button"])

        # Coupon and voucher
        self.coupon_input: Locator = page.locator(CART["coupon_input"])
        self.apply_coupon_button: Locator = page.locator(CART["apply_coupon_button"])
        self.voucher_input: Locator = page.locator(CART["voucher_input"])
        self.apply_voucher_button: Locator = page.locator(CART["apply_voucher_button"])

        # Shipping estimate
        self.country_select: Locator = page.locator(CART["country_select"])
        self.region_select: Locator = page.locator(CART["region_select"])
        self.postcode_input: Locator = page.locator(CART["postcode_input"])
        self.get_quotes_button: Locator = page.locator(CART["get_quotes_button"])

    def navigate_to_cart(self) -> None:
        self.actions.navigate_to(self.PATH)

    # -------------------------------------------------------------------------
    # Row queries
    # -------------------------------------------------------------------------

    def get_cart_items_count(self) -> int:
        return self.actions.count(self.cart_items)

    def get_cart_item_name(self, index: int = 0) -> str:
        return self.actions.get_text(self.cart_item_names.nth(index))

    def get_cart_item_price(self, index: int = 0) -> str:
        return self.actions.get_text(self.cart_item_prices.nth(index))

    def get_cart_item_quantity(self, index: int = 0) -> str:
        return self.actions.get_attribute(self.cart_item_quantities.nth(index), "value") or ""

    def get_cart_item_total(self, index: int = 0) -> str:
        return self.actions.get_text(self.cart_item_totals.nth(index))

    def get_cart_item_names(self) -> list[str]:
        """Snapshot of every item name currently in the table."""
        return [self.get_cart_item_name(i) for i in range(self.actions.count(self.cart_item_names))]

    def get_cart_subtotal(self) -> str:
        return self.actions.get_text(self.cart_subtotal)

    def get_cart_total(self) -> str:
        return self.actions.get_text(self.cart_total)

    def is_cart_empty(self) -> bool:
        return self.actions.is_element_visible(self.empty_cart_message)

    # -------------------------------------------------------------------------
    # Row actions
    # -------------------------------------------------------------------------

    def update_cart_item_quantity(self, index: int, quantity: int) -> None:
        self.actions.fill_input(self.cart_item_quantities.nth(index), str(quantity))

    def cart_row(self, product_name: str, occurrence: int = 0) -> Locator:
        """Row whose name cell reads exactly ``product_name``.

        ``occurrence`` picks among rows sharing the name (the same product
        added with different options), counted from the top.
        """
        exact_name = re.compile(rf"^\s*{re.escape(product_name.strip())}\s*$")
        name_cell = self.page.locator(CART["row_name_link"]).filter(has_text=exact_name)
        return self.cart_items.filter(has=name_cell).nth(occurrence)

    def update_cart_item_quantity_by_name(
        self, product_name: str, quantity: int, occurrence: int = 0
    ) -> None:
        row = self.cart_row(product_name, occurrence)
        self.actions.fill_input(row.locator(CART["row_quantity_input"]), str(quantity))

    def remove_cart_item(self, index: int = 0) -> None:
        self.actions.click_element(self.remove_buttons.nth(index))

    def clear_cart(self) -> None:
        """Remove every row, always from the top of the table."""
        items_count = self.get_cart_items_count()
        log.debug("clear_cart", items_count=items_count)
        for _ in range(items_count):
            if self.actions.count(self.remove_buttons) == 0:
                break
            self.remove_cart_item(0)
            self.actions.wait_for_page_load()

    def update_all_cart_items_quantities(self, quantities: list[int]) -> None:
        """Set quantities row by row, then press update once.

        Rows are matched by the exact names read before the first edit, so a
        row that moves while editing still gets its own quantity. Repeated
        names are told apart by their order in that snapshot.
        """
        names = self.get_cart_item_names()
        seen: dict[str, int] = {}
        for name, quantity in zip(names, quantities):
            key = name.strip()
            occurrence = seen.get(key, 0)
            seen[key] = occurrence + 1
            self.update_cart_item_quantity_by_name(name, quantity, occurrence)
        self.click_update_cart()

    # -------------------------------------------------------------------------
    # Buttons and forms
    # -------------------------------------------------------------------------

    def click_checkout(self) -> None:
        self.actions.click_element(self.checkout_button)

    def click_continue_shopping(self) -> None:
        self.actions.click_element(self.continue_shopping_button)

    def click_update_cart(self) -> None:
        self.actions.click_element(self.update_cart_button)

    def click_empty_cart_continue(self) -> None:
        self.actions.click_element(self.empty_cart_continue_button)

    def apply_coupon(self, coupon_code: str) -> None:
        self.actions.fill_input(self.coupon_input, coupon_code)
        self.actions.click_element(self.apply_coupon_button)

    def apply_voucher(self, voucher_code: str) -> None:
        self.actions.fill_input(self.voucher_input, voucher_code)
        self.actions.click_element(self.apply_voucher_button)

    def get_shipping_estimate(self, country: str, region: str, postcode: str) -> None:
        self.actions.select_option(self.country_select, country)
        self.actions.select_option(self.region_select, region)
        self.actions.fill_input(self.postcode_input, postcode)
        self.actions.click_element(self.get_quotes_button)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_cart_page_loaded(self) -> None:
        self.actions.assert_element_visible(self.cart_items.first)
        self.actions.assert_element_visible(self.checkout_button)

    def verify_cart_is_empty(self) -> None:
        self.actions.assert_element_visible(self.empty_cart_message)

    def verify_cart_has_items(self) -> None:
        items_count = self.get_cart_items_count()
        if items_count <= 0:
            raise AssertionError("Expected at least one item in the cart")

    def verify_cart_item_exists(self, product_name: str) -> None:
        names = self.get_cart_item_names()
        if not any(product_name in name for name in names):
            raise AssertionError(f"{product_name!r} not found in cart items {names}")

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def get_cart_summary(self) -> CartSummary:
        """Read counts, totals and every row into one CartSummary."""
        items_count = self.get_cart_items_count()
        items = [
            CartItem(
                name=self.get_cart_item_name(i),
                price=self.get_cart_item_price(i),
                quantity=self.get_cart_item_quantity(i),
                total=self.get_cart_item_total(i),
            )
            for i in range(items_count)
        ]
        return CartSummary(
            items_count=items_count,
            subtotal=self.get_cart_subtotal(),
            total=self.get_cart_total(),
            items=items,
        )
