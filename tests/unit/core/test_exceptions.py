"""Unit tests for the exception hierarchy."""

import pytest

from petspot_e2e.core.exceptions import (
    AppBuildError,
    AppiumHTTPError,
    ConfigurationError,
    DriverSessionError,
    ElementNotFoundError,
    PetSpotE2EError,
    UnknownNavigationItemError,
)


@pytest.mark.unit
class TestPetSpotE2EExceptions:
    """Tests for custom exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad config"),
            DriverSessionError("no session"),
            ElementNotFoundError("//*[@data-testid='x']"),
            AppiumHTTPError("boom", method="GET", url="http://127.0.0.1:4723/status"),
            AppBuildError("android", "gradle failed"),
            UnknownNavigationItemError("Settings"),
        ],
    )
    def test_base_exception_is_catchable(self, error: PetSpotE2EError) -> None:
        with pytest.raises(PetSpotE2EError):
            raise error

    def test_element_not_found_keeps_locator(self) -> None:
        error = ElementNotFoundError("//*[@data-testid='landing.footer']")

        assert error.locator == "//*[@data-testid='landing.footer']"
        assert "landing.footer" in str(error)

    def test_element_not_found_custom_message(self) -> None:
        error = ElementNotFoundError("//x", "Card index 3 out of bounds")

        assert str(error) == "Card index 3 out of bounds"

    def test_appium_http_error_details(self) -> None:
        error = AppiumHTTPError(
            "Appium HTTP 404",
            method="POST",
            url="http://127.0.0.1:4723/session/abc/elements",
            status_code=404,
            response_json={"value": {"error": "no such element"}},
        )

        assert error.status_code == 404
        assert error.method == "POST"
        assert error.response_json == {"value": {"error": "no such element"}}

    def test_app_build_error_names_platform(self) -> None:
        error = AppBuildError("ios", "xcodebuild failed")

        assert error.platform == "ios"
        assert str(error) == "ios: xcodebuild failed"

    def test_unknown_navigation_item_is_value_error(self) -> None:
        """Unknown labels are programming errors, also catchable as ValueError."""
        with pytest.raises(ValueError, match="Unknown navigation item: Settings"):
            raise UnknownNavigationItemError("Settings")
