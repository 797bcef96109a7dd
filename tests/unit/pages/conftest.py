"""Fake Playwright page for page-object tests.

``FakePage.locator`` returns whatever a test registered for a selector and
otherwise a locator that behaves like an element that is not in the DOM:
``is_visible`` is False, ``count`` is 0 and everything that needs the
element times out.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from petspot_e2e.core.locators import by_test_id, xpath

WAITING_METHODS = (
    "inner_text",
    "get_attribute",
    "evaluate",
    "bounding_box",
    "click",
    "hover",
    "wait_for",
)


def selector(test_id: str) -> str:
    """Selector string the page objects build for a test id."""
    return xpath(by_test_id(test_id))


def missing_locator() -> MagicMock:
    locator = MagicMock(name="missing_locator")
    locator.is_visible.return_value = False
    locator.count.return_value = 0
    locator.all.return_value = []
    for method in WAITING_METHODS:
        getattr(locator, method).side_effect = PlaywrightTimeoutError(
            "Timeout 10000ms exceeded."
        )
    locator.first = locator
    locator.locator.return_value = locator
    return locator


def present_locator(**behaviour: Any) -> MagicMock:
    """Locator for a visible element; keyword args set method return values."""
    locator = MagicMock(name="present_locator")
    locator.is_visible.return_value = True
    locator.count.return_value = 1
    locator.all.return_value = [locator]
    locator.first = locator
    for method, value in behaviour.items():
        getattr(locator, method).return_value = value
    return locator


class FakePage:
    def __init__(self, url: str = "http://localhost:3000/") -> None:
        self.url = url
        self.mouse = MagicMock(name="mouse")
        self.locators: dict[str, MagicMock] = {}

    def add(self, test_id_or_selector: str, locator: MagicMock | None = None) -> MagicMock:
        key = test_id_or_selector
        if not key.startswith("xpath="):
            key = selector(key)
        self.locators[key] = locator if locator is not None else present_locator()
        return self.locators[key]

    def locator(self, sel: str) -> MagicMock:
        return self.locators.get(sel) or missing_locator()


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def make_locator() -> Any:
    """Factory for present locators, e.g. ``make_locator(inner_text="Title")``."""
    return present_locator
