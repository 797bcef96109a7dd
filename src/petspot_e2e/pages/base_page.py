"""Base page object and the read/write error contract.

Page objects expose two kinds of methods:

- Actions (click, hover, tap) let driver errors propagate, so a step that
  cannot act fails its scenario.
- Verifications (is/has/get/count) return a documented default when the
  driver raises. A broken locator therefore reads the same as an absent
  element; every suppressed error is logged at debug level with the page
  and method name so the two cases can still be told apart in the logs.

Only driver errors are suppressed. Programming errors such as an unknown
navigation label always propagate.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from petspot_e2e.constants.timeouts import DEFAULT_WAIT_TIMEOUT_SECONDS
from petspot_e2e.core.exceptions import (
    AppiumHTTPError,
    DriverSessionError,
    ElementNotFoundError,
)
from petspot_e2e.core.locators import by_test_id, containing_test_id, xpath

log = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# playwright's TimeoutError subclasses its Error; builtin TimeoutError comes
# from wait_for_condition.
VERIFICATION_ERRORS: tuple[type[Exception], ...] = (
    PlaywrightError,
    AppiumHTTPError,
    DriverSessionError,
    ElementNotFoundError,
    TimeoutError,
)


def verification(default: Any) -> Callable[[F], F]:
    """Mark a method as a verification returning ``default`` on driver errors.

    Args:
        default: Value returned on failure. Pass a callable (e.g. ``list``)
            to build a fresh mutable default per call.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except VERIFICATION_ERRORS as e:
                log.debug(
                    "verification_defaulted",
                    page=type(self).__name__,
                    check=func.__name__,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                return default() if callable(default) else default

        return wrapper  # type: ignore[return-value]

    return decorator


class BasePage:
    """Template for web page objects.

    Subclasses declare their ``data-testid`` values as class constants and
    build locators per call through ``_by_test_id``; Playwright locators
    resolve lazily, so nothing is cached across navigations.
    """

    def __init__(
        self, page: Page, timeout_seconds: float = DEFAULT_WAIT_TIMEOUT_SECONDS
    ) -> None:
        self.page = page
        self.timeout_seconds = timeout_seconds

    def _timeout_ms(self, timeout_seconds: float | None = None) -> float:
        seconds = self.timeout_seconds if timeout_seconds is None else timeout_seconds
        return seconds * 1000

    def _by_test_id(self, test_id: str) -> Locator:
        return self.page.locator(xpath(by_test_id(test_id)))

    def _containing_test_id(self, fragment: str) -> Locator:
        return self.page.locator(xpath(containing_test_id(fragment)))

    def _wait_visible(self, locator: Locator, timeout_seconds: float | None = None) -> bool:
        """Explicit wait; True when visible in time, False otherwise."""
        try:
            locator.wait_for(state="visible", timeout=self._timeout_ms(timeout_seconds))
            return True
        except PlaywrightError as e:
            log.debug("wait_for_visible_timed_out", page=type(self).__name__, error=str(e))
            return False

    def _click(self, locator: Locator) -> None:
        # Playwright waits for the element to be attached, visible and enabled.
        locator.click(timeout=self._timeout_ms())

    def _computed_style(self, locator: Locator, prop: str) -> str:
        value = locator.evaluate(
            "(el, prop) => getComputedStyle(el).getPropertyValue(prop)", prop
        )
        return str(value or "").strip()

    @verification(default="")
    def get_current_url(self) -> str:
        return self.page.url
