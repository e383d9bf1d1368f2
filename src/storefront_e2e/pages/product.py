"""Product detail page."""

from __future__ import annotations

from pathlib import Path

from playwright.sync_api import Locator

from storefront_e2e.pages.actions import PageActions
from storefront_e2e.pages.selectors import PRODUCT

MIN_RATING = 1
MAX_RATING = 5


class ProductPage:
    """Product details, purchase options, reviews and related products."""

    def __init__(self, actions: PageActions) -> None:
        self.actions = actions
        self.page = actions.page
        page = self.page

        # Product information
        self.product_name: Locator = page.locator(PRODUCT["product_name"])
        self.product_price: Locator = page.locator(PRODUCT["product_price"])
        self.product_description: Locator = page.locator(PRODUCT["product_description"])
        self.thumbnail_images: Locator = page.locator(PRODUCT["thumbnail_images"])
        self.main_product_image: Locator = self.thumbnail_images.first

        # Purchase options
        self.quantity_input: Locator = page.locator(PRODUCT["quantity_input"])
        self.add_to_cart_button: Locator = page.locator(PRODUCT["add_to_cart_button"])
        self.add_to_wishlist_button: Locator = page.locator(PRODUCT["add_to_wishlist_button"])
        self.compare_button: Locator = page.locator(PRODUCT["compare_button"])
        self.product_options: Locator = page.locator(PRODUCT["product_options"])
        self.option_selects: Locator = page.locator(PRODUCT["option_selects"])
        self.option_checkboxes: Locator = page.locator(PRODUCT["option_checkboxes"])
        self.option_text_inputs: Locator = page.locator(PRODUCT["option_text_inputs"])

        # Reviews
        self.reviews_tab: Locator = page.locator(PRODUCT["reviews_tab"])
        self.review_form: Locator = page.locator(PRODUCT["review_form"])
        self.review_name_input: Locator = page.locator(PRODUCT["review_name_input"])
        self.review_text_input: Locator = page.locator(PRODUCT["review_text_input"])
        self.review_rating_inputs: Locator = page.locator(PRODUCT["review_rating_inputs"])
        self.submit_review_button: Locator = page.locator(PRODUCT["submit_review_button"])
        self.review_list: Locator = page.locator(PRODUCT["review_list"])

        # Related products
        self.related_products_section: Locator = page.locator(PRODUCT["related_products_section"])
        self.related_product_cards: Locator = page.locator(PRODUCT["related_product_cards"])

        # Breadcrumb
        self.breadcrumb_home: Locator = page.locator(PRODUCT["breadcrumb_home"])
        self.breadcrumb_category: Locator = page.locator(PRODUCT["breadcrumb_links"]).nth(1)
        self.breadcrumb_product: Locator = page.locator(PRODUCT["breadcrumb_product"])

        # Messages
        self.success_message: Locator = page.locator(PRODUCT["success_message"])
        self.error_message: Locator = page.locator(PRODUCT["error_message"])

    def navigate_to_product(self, product_url: str) -> None:
        self.actions.navigate_to(product_url)

    # -------------------------------------------------------------------------
    # Product information
    # -------------------------------------------------------------------------

    def get_product_name(self) -> str:
        return self.actions.get_text(self.product_name)

    def get_product_price(self) -> str:
        return self.actions.get_text(self.product_price)

    def get_product_description(self) -> str:
        return self.actions.get_text(self.product_description)

    def get_product_images_count(self) -> int:
        return self.actions.count(self.thumbnail_images)

    def click_product_image_thumbnail(self, index: int) -> None:
        self.actions.click_element(self.thumbnail_images.nth(index))

    # -------------------------------------------------------------------------
    # Purchase
    # -------------------------------------------------------------------------

    def set_quantity(self, quantity: int) -> None:
        self.actions.fill_input(self.quantity_input, str(quantity))

    def add_to_cart(self) -> None:
        self.actions.click_element(self.add_to_cart_button)

    def add_to_cart_with_quantity(self, quantity: int) -> None:
        self.set_quantity(quantity)
        self.add_to_cart()

    def add_to_wishlist(self) -> None:
        self.actions.click_element(self.add_to_wishlist_button)

    def add_to_compare(self) -> None:
        self.actions.click_element(self.compare_button)

    def select_product_option(self, option_name: str, value: str) -> None:
        option = self.page.locator(PRODUCT["option_select"].format(name=option_name))
        self.actions.select_option(option, value)

    def check_product_option(self, option_name: str) -> None:
        option = self.page.locator(PRODUCT["option_input"].format(name=option_name))
        self.actions.click_element(option)

    def fill_product_option(self, option_name: str, value: str) -> None:
        option = self.page.locator(PRODUCT["option_input"].format(name=option_name))
        self.actions.fill_input(option, value)

    # -------------------------------------------------------------------------
    # Reviews
    # -------------------------------------------------------------------------

    def open_reviews_tab(self) -> None:
        self.actions.click_element(self.reviews_tab)

    def submit_review(self, name: str, review: str, rating: int) -> None:
        """Write a review with a 1-5 star rating.

        Raises:
            ValueError: If rating is outside 1-5.
        """
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
        self.open_reviews_tab()
        self.actions.fill_input(self.review_name_input, name)
        self.actions.fill_input(self.review_text_input, review)
        self.actions.click_element(self.review_rating_inputs.nth(rating - 1))
        self.actions.click_element(self.submit_review_button)

    def get_reviews_count(self) -> int:
        return self.actions.count(self.review_list.locator(PRODUCT["review_items"]))

    # -------------------------------------------------------------------------
    # Related products and breadcrumb
    # -------------------------------------------------------------------------

    def get_related_products_count(self) -> int:
        return self.actions.count(self.related_product_cards)

    def click_related_product(self, index: int) -> None:
        self.actions.click_element(self.related_product_cards.nth(index))

    def navigate_to_home_via_breadcrumb(self) -> None:
        self.actions.click_element(self.breadcrumb_home)

    def navigate_to_category_via_breadcrumb(self) -> None:
        self.actions.click_element(self.breadcrumb_category)

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def get_success_message(self) -> str:
        return self.actions.get_text(self.success_message)

    def get_error_message(self) -> str:
        return self.actions.get_text(self.error_message)

    def is_success_message_visible(self) -> bool:
        return self.actions.is_element_visible(self.success_message)

    def is_error_message_visible(self) -> bool:
        return self.actions.is_element_visible(self.error_message)

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_product_page_loaded(self) -> None:
        self.actions.assert_element_visible(self.product_name)
        self.actions.assert_element_visible(self.product_price)
        self.actions.assert_element_visible(self.add_to_cart_button)

    def verify_product_added_to_cart(self) -> None:
        self.actions.assert_element_visible(self.success_message)
        self.actions.assert_text_content(self.success_message, "Success")

    def verify_product_added_to_wishlist(self) -> None:
        self.actions.assert_element_visible(self.success_message)
        self.actions.assert_text_content(self.success_message, "Success")

    def take_product_screenshot(self) -> Path | None:
        return self.actions.take_screenshot(f"product-{self.get_product_name()}")
