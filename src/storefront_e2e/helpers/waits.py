"""
Wait Helpers

Polling utilities for state the page settles into asynchronously, such as
a cart badge updating after an add-to-cart click.
Inspired by Cypress recurse pattern.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Poll an action until condition is met.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error

    Returns:
        The result of action() when condition is met

    Raises:
        TimeoutError: If condition not met within timeout

    Example:
        # Wait for the cart badge to mention an item
        text = wait_for_condition(
            action=home.get_cart_count,
            condition=lambda t: "1 item" in t,
            timeout_seconds=5.0,
        )
    """
    start_time = time.monotonic()
    last_result: T | None = None

    while True:
        last_result = action()

        if condition(last_result):
            return last_result

        if time.monotonic() - start_time >= timeout_seconds:
            break

        time.sleep(poll_interval_seconds)

    raise TimeoutError(f"{error_message}. Last result: {last_result}")


def wait_for_change(
    read: Callable[[], T],
    initial: T,
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
) -> T:
    """Poll ``read`` until it returns something other than ``initial``."""
    return wait_for_condition(
        action=read,
        condition=lambda value: value != initial,
        timeout_seconds=timeout_seconds,
        poll_interval_seconds=poll_interval_seconds,
        error_message=f"Value did not change from {initial!r}",
    )
