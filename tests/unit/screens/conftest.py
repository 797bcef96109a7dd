"""Mocked mobile driver for screen-object tests."""

from unittest.mock import MagicMock

import pytest

from petspot_e2e.core.exceptions import ElementNotFoundError
from petspot_e2e.drivers.appium_client import ElementRef
from petspot_e2e.drivers.mobile import MobileDriver


def _not_found(xpath: str) -> None:
    raise ElementNotFoundError(xpath)


@pytest.fixture
def android_driver() -> MagicMock:
    """Android session where nothing is on screen unless a test says so."""
    driver = MagicMock(spec=MobileDriver)
    driver.is_android = True
    driver.find.side_effect = _not_found
    driver.find_all.return_value = []
    driver.wait_until_visible.side_effect = TimeoutError("Element not visible")
    driver.wait_until_clickable.side_effect = TimeoutError("Element not clickable")
    return driver


@pytest.fixture
def ios_driver(android_driver: MagicMock) -> MagicMock:
    android_driver.is_android = False
    return android_driver


@pytest.fixture
def element() -> ElementRef:
    return ElementRef(element_id="00000000-0000-0001-ffff-ffff00000010")
