"""PetSpot E2E exception hierarchy.

This module defines the base exception class and specialized exceptions
for infrastructure failures raised by the test tooling itself. Assertion
failures in step definitions stay plain ``AssertionError``.
"""

from typing import Any


class PetSpotE2EError(Exception):
    """Base exception for all PetSpot E2E tooling errors.

    All custom exceptions should inherit from this class so hooks can tell
    tooling failures apart from assertion failures.
    """

    pass


class ConfigurationError(PetSpotE2EError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("Unknown platform: windows")
    """

    pass


class BackendAPIError(PetSpotE2EError):
    """Raised when a test-data call to the backend REST API fails.

    Attributes:
        method: HTTP method of the failed call.
        url: Full URL of the failed call.
        status_code: HTTP status code if a response was received.
    """

    def __init__(
        self, message: str, method: str, url: str, status_code: int | None = None
    ) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DriverSessionError(PetSpotE2EError):
    """Raised when a driver session is missing or cannot be created.

    Example:
        raise DriverSessionError("No active Appium session")
    """

    pass


class ElementNotFoundError(PetSpotE2EError):
    """Raised when a locator matches no element.

    Attributes:
        locator: The locator expression that matched nothing.
    """

    def __init__(self, locator: str, message: str | None = None) -> None:
        self.locator = locator
        super().__init__(message or f"No element matches {locator}")


class AppiumHTTPError(PetSpotE2EError):
    """Raised when the Appium server call fails or returns an error payload.

    Attributes:
        method: HTTP method of the failed call.
        url: Full URL of the failed call.
        status_code: HTTP status code if a response was received.
        response_json: Decoded error payload, if any.
    """

    def __init__(
        self,
        message: str,
        method: str,
        url: str,
        status_code: int | None = None,
        response_json: dict[str, Any] | None = None,
    ) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response_json = response_json
        super().__init__(message)


class AppBuildError(PetSpotE2EError):
    """Raised when building or copying a mobile app artifact fails.

    Attributes:
        platform: "android" or "ios".
    """

    def __init__(self, platform: str, message: str) -> None:
        self.platform = platform
        super().__init__(f"{platform}: {message}")


class UnknownNavigationItemError(PetSpotE2EError, ValueError):
    """Raised when a step names a navigation item or tab that does not exist.

    Example:
        raise UnknownNavigationItemError("Settings")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown navigation item: {name}")
