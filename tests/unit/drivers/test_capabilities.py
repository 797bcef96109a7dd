"""Unit tests for Appium capability payloads."""

import json

import pytest

from petspot_e2e.config.settings import Settings
from petspot_e2e.core.exceptions import ConfigurationError
from petspot_e2e.drivers.capabilities import session_payload


@pytest.mark.unit
class TestSessionPayload:
    """Tests for session_payload()."""

    def test_android_payload(self, test_settings: Settings) -> None:
        payload = session_payload("Android", test_settings)

        caps = payload["capabilities"]["alwaysMatch"]
        assert payload["capabilities"]["firstMatch"] == [{}]
        assert caps["platformName"] == "Android"
        assert caps["appium:automationName"] == "UiAutomator2"
        assert caps["appium:appPackage"] == "com.intive.aifirst.petspot"
        assert caps["appium:app"].endswith("petspot-android.apk")
        assert caps["appium:autoGrantPermissions"] is True

    def test_android_without_location(self, test_settings: Settings) -> None:
        caps = session_payload("android", test_settings, grant_location=False)["capabilities"][
            "alwaysMatch"
        ]

        assert caps["appium:autoGrantPermissions"] is False

    def test_ios_payload_grants_location(self, test_settings: Settings) -> None:
        caps = session_payload("ios", test_settings)["capabilities"]["alwaysMatch"]

        assert caps["platformName"] == "iOS"
        assert caps["appium:automationName"] == "XCUITest"
        assert caps["appium:app"].endswith("petspot-ios.app")
        permissions = json.loads(caps["appium:permissions"])
        assert permissions == {"com.intive.aifirst.petspot.PetSpot": {"location": "always"}}

    def test_ios_without_location(self, test_settings: Settings) -> None:
        caps = session_payload("ios", test_settings, grant_location=False)["capabilities"][
            "alwaysMatch"
        ]

        assert "appium:permissions" not in caps

    def test_unknown_platform_raises(self, test_settings: Settings) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported platform: web"):
            session_payload("web", test_settings)
