"""
Wait Helpers

Polling and condition-waiting utilities shared by screen objects.
Playwright pages use the locator's own auto-waiting instead.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from petspot_e2e.constants.timeouts import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_WAIT_TIMEOUT_SECONDS,
)

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = DEFAULT_WAIT_TIMEOUT_SECONDS,
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
    error_message: str = "Condition not met within timeout",
    ignored_exceptions: tuple[type[Exception], ...] = (),
) -> T:
    """
    Poll an action until condition is met.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error
        ignored_exceptions: Errors raised by action that count as "not yet"

    Returns:
        The result of action() when condition is met

    Raises:
        TimeoutError: If condition not met within timeout

    Example:
        # Wait for the home tab to report itself as selected
        wait_for_condition(
            action=lambda: driver.get_attribute(tab, "selected"),
            condition=lambda value: value == "true",
            timeout_seconds=5.0,
        )
    """
    start_time = time.monotonic()
    last_result: T | None = None
    last_error: Exception | None = None

    while True:
        try:
            last_result = action()
            last_error = None
            if condition(last_result):
                return last_result
        except ignored_exceptions as e:
            last_error = e

        if time.monotonic() - start_time >= timeout_seconds:
            break
        time.sleep(poll_interval_seconds)

    detail = f"Last error: {last_error}" if last_error else f"Last result: {last_result}"
    raise TimeoutError(f"{error_message}. {detail}")
