"""
Assertion Helpers

Named format and count checks for values read off a page. Each one raises
AssertionError with the offending value on failure, also under ``python -O``,
so they can stand in for plain ``assert`` statements in scenarios.

Usage:
    from storefront_e2e.helpers.assertions import assert_price_format

    assert_price_format(cart.get_cart_total())
"""

from __future__ import annotations

import re

PRICE_PATTERN = re.compile(r"\$[\d,]+\.\d{2}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\d{3}-\d{3}-\d{4}")

DEFAULT_MAX_LOAD_TIME_MS = 5_000


def assert_price_format(price: str) -> None:
    """Price must look like ``$1,234.56``."""
    if not PRICE_PATTERN.fullmatch(price):
        raise AssertionError(f"Invalid price format: {price!r}")


def assert_email_format(email: str) -> None:
    if not EMAIL_PATTERN.fullmatch(email):
        raise AssertionError(f"Invalid email format: {email!r}")


def assert_phone_format(phone: str) -> None:
    """Phone must look like ``555-123-4567``."""
    if not PHONE_PATTERN.fullmatch(phone):
        raise AssertionError(f"Invalid phone format: {phone!r}")


def assert_positive_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise AssertionError(f"Quantity must be positive, got {quantity}")


def assert_text_contains(text: str, substring: str) -> None:
    if substring not in text:
        raise AssertionError(f"{substring!r} not found in {text!r}")


def assert_url_contains(url: str, path: str) -> None:
    if path not in url:
        raise AssertionError(f"URL {url!r} does not contain {path!r}")


def assert_element_count_greater_than(count: int, min_count: int) -> None:
    if count <= min_count:
        raise AssertionError(f"Expected more than {min_count} elements, found {count}")


def assert_element_count_equals(count: int, expected_count: int) -> None:
    if count != expected_count:
        raise AssertionError(f"Expected {expected_count} elements, found {count}")


def assert_page_load_time(load_time_ms: float, max_time_ms: float = DEFAULT_MAX_LOAD_TIME_MS) -> None:
    """Load time must be strictly under ``max_time_ms``."""
    if load_time_ms >= max_time_ms:
        raise AssertionError(
            f"Page took {load_time_ms:.0f}ms to load, limit is {max_time_ms:.0f}ms"
        )
