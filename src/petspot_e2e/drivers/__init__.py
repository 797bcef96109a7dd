"""Driver sessions: Appium for mobile (web uses pytest-playwright's page)."""

from petspot_e2e.drivers.appium_client import AppiumClient, ElementRef
from petspot_e2e.drivers.mobile import MobileDriver

__all__ = ["AppiumClient", "ElementRef", "MobileDriver"]
