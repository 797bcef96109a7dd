"""Appium capability payloads for Android and iOS sessions."""

from typing import Any

from petspot_e2e.config.settings import Settings
from petspot_e2e.core.exceptions import ConfigurationError


def android_capabilities(settings: Settings, grant_location: bool = True) -> dict[str, Any]:
    """UiAutomator2 capabilities for the PetSpot APK."""
    return {
        "platformName": "Android",
        "appium:platformVersion": settings.android_platform_version,
        "appium:deviceName": settings.android_device_name,
        "appium:automationName": "UiAutomator2",
        "appium:app": str(settings.android_app_path.resolve()),
        "appium:appPackage": settings.android_app_package,
        "appium:autoGrantPermissions": grant_location,
        "appium:newCommandTimeout": 300,
    }


def ios_capabilities(settings: Settings, grant_location: bool = True) -> dict[str, Any]:
    """XCUITest capabilities for the PetSpot simulator bundle."""
    caps: dict[str, Any] = {
        "platformName": "iOS",
        "appium:platformVersion": settings.ios_platform_version,
        "appium:deviceName": settings.ios_device_name,
        "appium:automationName": "XCUITest",
        "appium:app": str(settings.ios_app_path.resolve()),
        "appium:bundleId": settings.ios_bundle_id,
        "appium:newCommandTimeout": 300,
    }
    if grant_location:
        caps["appium:permissions"] = (
            '{"%s": {"location": "always"}}' % settings.ios_bundle_id
        )
    return caps


def session_payload(
    platform: str, settings: Settings, grant_location: bool = True
) -> dict[str, Any]:
    """Build the WebDriver new-session body for a platform.

    Raises:
        ConfigurationError: If platform is neither android nor ios.
    """
    normalized = platform.lower()
    if normalized == "android":
        caps = android_capabilities(settings, grant_location)
    elif normalized == "ios":
        caps = ios_capabilities(settings, grant_location)
    else:
        raise ConfigurationError(
            f"Unsupported platform: {platform}. Expected 'android' or 'ios'"
        )
    return {"capabilities": {"alwaysMatch": caps, "firstMatch": [{}]}}
