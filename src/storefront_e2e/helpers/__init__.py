"""
Test Helpers

Data generation, assertions, validation, waits and browser utilities for
scenarios.

Usage:
    from storefront_e2e.helpers import DataGenerator, assert_price_format, wait_for_change
"""

from storefront_e2e.helpers.assertions import (
    assert_element_count_equals,
    assert_element_count_greater_than,
    assert_email_format,
    assert_page_load_time,
    assert_phone_format,
    assert_positive_quantity,
    assert_price_format,
    assert_text_contains,
    assert_url_contains,
)
from storefront_e2e.helpers.browser import (
    VIEWPORTS,
    capture_failure_screenshot,
    clear_browser_storage,
    get_memory_usage,
    measure_page_load_time,
    set_viewport,
)
from storefront_e2e.helpers.data_generator import (
    DataGenerator,
    generate_random_address,
    generate_random_email,
    generate_random_last_name,
    generate_random_name,
    generate_random_password,
    generate_random_phone,
    generate_random_product_name,
)
from storefront_e2e.helpers.validation import (
    validate_cart_data,
    validate_product_data,
    validate_user_data,
)
from storefront_e2e.helpers.waits import wait_for_change, wait_for_condition

__all__ = [
    "VIEWPORTS",
    "DataGenerator",
    "assert_element_count_equals",
    "assert_element_count_greater_than",
    "assert_email_format",
    "assert_page_load_time",
    "assert_phone_format",
    "assert_positive_quantity",
    "assert_price_format",
    "assert_text_contains",
    "assert_url_contains",
    "capture_failure_screenshot",
    "clear_browser_storage",
    "generate_random_address",
    "generate_random_email",
    "generate_random_last_name",
    "generate_random_name",
    "generate_random_password",
    "generate_random_phone",
    "generate_random_product_name",
    "get_memory_usage",
    "measure_page_load_time",
    "set_viewport",
    "validate_cart_data",
    "validate_product_data",
    "validate_user_data",
    "wait_for_change",
    "wait_for_condition",
]
