"""Mobile driver session used by screen objects."""

from __future__ import annotations

import structlog

from petspot_e2e.config.settings import Settings
from petspot_e2e.constants.timeouts import DEFAULT_WAIT_TIMEOUT_SECONDS
from petspot_e2e.core.exceptions import AppiumHTTPError, ElementNotFoundError
from petspot_e2e.drivers.appium_client import AppiumClient, ElementRef
from petspot_e2e.drivers.capabilities import session_payload
from petspot_e2e.helpers.waits import wait_for_condition

log = structlog.get_logger(__name__)


class MobileDriver:
    """Appium session bound to one platform.

    Screen objects only talk to this class; it never caches element refs
    between calls.
    """

    def __init__(self, client: AppiumClient, platform: str) -> None:
        self.client = client
        self.platform = platform.lower()

    @classmethod
    def start(
        cls, platform: str, settings: Settings, grant_location: bool = True
    ) -> MobileDriver:
        """Open a new Appium session for the platform.

        The HTTP client is closed again if the session cannot be created.
        """
        payload = session_payload(platform, settings, grant_location)
        client = AppiumClient(
            settings.appium_server_url, timeout=settings.appium_request_timeout_seconds
        )
        try:
            client.create_session(payload)
        except Exception:
            client.close()
            raise
        log.info("mobile_driver_started", platform=platform, grant_location=grant_location)
        return cls(client, platform)

    def quit(self) -> None:
        self.client.close()

    @property
    def is_android(self) -> bool:
        return self.platform == "android"

    def find_all(self, xpath: str) -> list[ElementRef]:
        return self.client.find_elements("xpath", xpath)

    def find(self, xpath: str) -> ElementRef:
        """Return the first match.

        Raises:
            ElementNotFoundError: If nothing matches.
        """
        elements = self.find_all(xpath)
        if not elements:
            raise ElementNotFoundError(xpath)
        return elements[0]

    def find_by_accessibility_id(self, accessibility_id: str) -> ElementRef:
        elements = self.client.find_elements("accessibility id", accessibility_id)
        if not elements:
            raise ElementNotFoundError(f"accessibility id={accessibility_id}")
        return elements[0]

    def is_displayed(self, element: ElementRef) -> bool:
        return self.client.is_element_displayed(element)

    def get_attribute(self, element: ElementRef, name: str) -> str | None:
        return self.client.get_element_attribute(element, name)

    def get_text(self, element: ElementRef) -> str:
        return self.client.get_element_text(element)

    def click(self, element: ElementRef) -> None:
        self.client.click(element)

    def wait_until_visible(
        self, xpath: str, timeout_seconds: float = DEFAULT_WAIT_TIMEOUT_SECONDS
    ) -> ElementRef:
        """Wait for the first match to be displayed.

        Raises:
            TimeoutError: If it does not appear in time.
        """

        def _visible() -> ElementRef | None:
            element = self.find(xpath)
            return element if self.is_displayed(element) else None

        return wait_for_condition(
            action=_visible,
            condition=lambda element: element is not None,
            timeout_seconds=timeout_seconds,
            error_message=f"Element not visible: {xpath}",
            ignored_exceptions=(ElementNotFoundError, AppiumHTTPError),
        )

    def wait_until_clickable(
        self, xpath: str, timeout_seconds: float = DEFAULT_WAIT_TIMEOUT_SECONDS
    ) -> ElementRef:
        """Wait for the first match to be displayed and enabled."""

        def _clickable() -> ElementRef | None:
            element = self.find(xpath)
            if self.is_displayed(element) and self.client.is_element_enabled(element):
                return element
            return None

        return wait_for_condition(
            action=_clickable,
            condition=lambda element: element is not None,
            timeout_seconds=timeout_seconds,
            error_message=f"Element not clickable: {xpath}",
            ignored_exceptions=(ElementNotFoundError, AppiumHTTPError),
        )

    def screenshot(self) -> bytes:
        return self.client.get_screenshot_png_bytes()
