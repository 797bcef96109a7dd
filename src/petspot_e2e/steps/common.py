"""Fixtures and test-data steps shared by web and mobile."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog
from playwright.sync_api import Page
from pytest_bdd import given, parsers

from petspot_e2e.config.settings import Settings, get_settings
from petspot_e2e.drivers.backend_api import BackendApiClient
from petspot_e2e.drivers.mobile import MobileDriver
from petspot_e2e.pages.web.landing_page import LandingPage
from petspot_e2e.pages.web.navigation_page import NavigationPage
from petspot_e2e.pages.web.pet_list_page import PetListPage
from petspot_e2e.screens.bottom_navigation_screen import BottomNavigationScreen
from petspot_e2e.screens.landing_page_screen import LandingPageScreen
from petspot_e2e.screens.pet_details_screen import PetDetailsScreen
from petspot_e2e.steps.hooks import web_page_key

log = structlog.get_logger(__name__)


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def backend_api(settings: Settings) -> Iterator[BackendApiClient]:
    """Test-data client; deletes what the scenario created on teardown."""
    client = BackendApiClient(
        settings.api_base_url,
        admin_token=settings.admin_token,
        timeout=settings.api_request_timeout_seconds,
    )
    yield client
    try:
        failed = client.cleanup()
        if failed:
            log.warning("test_data_left_behind", announcement_ids=failed)
    finally:
        client.close()


@pytest.fixture
def web_page(request: pytest.FixtureRequest, page: Page, settings: Settings) -> Page:
    """pytest-playwright page with the configured timeouts applied."""
    request.node.stash[web_page_key] = page
    page.set_default_timeout(settings.default_timeout_seconds * 1000)
    page.set_default_navigation_timeout(settings.navigation_timeout_seconds * 1000)
    return page


@pytest.fixture
def landing_page(web_page: Page, settings: Settings) -> LandingPage:
    return LandingPage(web_page, settings.default_timeout_seconds)


@pytest.fixture
def navigation_page(web_page: Page, settings: Settings) -> NavigationPage:
    return NavigationPage(web_page, settings.default_timeout_seconds)


@pytest.fixture
def pet_list_page(web_page: Page, settings: Settings) -> PetListPage:
    return PetListPage(web_page, settings.default_timeout_seconds)


@pytest.fixture
def bottom_navigation(mobile_driver: MobileDriver, settings: Settings) -> BottomNavigationScreen:
    return BottomNavigationScreen(mobile_driver, settings.default_timeout_seconds)


@pytest.fixture
def landing_page_screen(mobile_driver: MobileDriver, settings: Settings) -> LandingPageScreen:
    return LandingPageScreen(mobile_driver, settings.default_timeout_seconds)


@pytest.fixture
def pet_details_screen(mobile_driver: MobileDriver, settings: Settings) -> PetDetailsScreen:
    return PetDetailsScreen(mobile_driver, settings.default_timeout_seconds)


# Must run before the app or page is opened; lists load once on start.
@given(parsers.parse("{count:d} pet announcements have been reported"))
def pet_announcements_reported(backend_api: BackendApiClient, count: int) -> None:
    for index in range(1, count + 1):
        backend_api.create_announcement(pet_name=f"E2E Pet {index}")
