"""Base screen object for the mobile apps.

Screens follow the same contract as web pages: taps propagate errors,
checks return defaults through ``verification``.
"""

from __future__ import annotations

from petspot_e2e.constants.timeouts import DEFAULT_WAIT_TIMEOUT_SECONDS
from petspot_e2e.core.locators import (
    by_content_desc,
    by_ios_name,
    containing_content_desc,
    containing_ios_name,
)
from petspot_e2e.drivers.mobile import MobileDriver
from petspot_e2e.pages.base_page import verification


class BaseScreen:
    """Template for Android/iOS screen objects.

    Android exposes test tags as ``content-desc``, iOS as ``name``; the
    locator helpers pick the attribute from the driver's platform.
    """

    def __init__(
        self, driver: MobileDriver, timeout_seconds: float = DEFAULT_WAIT_TIMEOUT_SECONDS
    ) -> None:
        self.driver = driver
        self.timeout_seconds = timeout_seconds

    def _by_tag(self, tag: str) -> str:
        return by_content_desc(tag) if self.driver.is_android else by_ios_name(tag)

    def _containing_tag(self, fragment: str) -> str:
        if self.driver.is_android:
            return containing_content_desc(fragment)
        return containing_ios_name(fragment)

    def _tap(self, xpath: str) -> None:
        element = self.driver.wait_until_clickable(xpath, self.timeout_seconds)
        self.driver.click(element)

    def _wait_visible(self, xpath: str, timeout_seconds: float | None = None) -> bool:
        try:
            self.driver.wait_until_visible(
                xpath, self.timeout_seconds if timeout_seconds is None else timeout_seconds
            )
            return True
        except TimeoutError:
            return False

    @verification(default=False)
    def _is_displayed(self, xpath: str) -> bool:
        return self.driver.is_displayed(self.driver.find(xpath))

    @verification(default=False)
    def is_element_with_accessibility_id_displayed(self, accessibility_id: str) -> bool:
        element = self.driver.find_by_accessibility_id(accessibility_id)
        return self.driver.is_displayed(element)
