"""Scenario lifecycle hooks, loaded as a pytest plugin by every runner.

Before a scenario: log it, resolve its platform and prepare the mobile app.
After a failed scenario: save a screenshot from whichever session it used.
The mobile session itself is a function-scoped fixture, so it is always
closed when the scenario ends.
"""

from __future__ import annotations

import re
from collections.abc import Generator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from petspot_e2e.config.logging import bind_scenario, clear_scenario, configure_logging
from petspot_e2e.config.settings import Settings, get_settings
from petspot_e2e.constants.tags import LOCATION, MOBILE, WEB
from petspot_e2e.core.exceptions import ConfigurationError, PetSpotE2EError
from petspot_e2e.drivers.mobile import MobileDriver
from petspot_e2e.hooks.app_builder import get_app_builder
from petspot_e2e.hooks.platform import detect_platform

log = structlog.get_logger(__name__)

platform_key = pytest.StashKey[str | None]()
tags_key = pytest.StashKey[frozenset[str]]()
# Live sessions of the running test, read by failure screenshots.
mobile_driver_key = pytest.StashKey[MobileDriver]()
web_page_key = pytest.StashKey[Page]()


# =============================================================================
# Options
# =============================================================================


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("petspot", "PetSpot E2E")
    group.addoption(
        "--platform",
        choices=["web", "android", "ios"],
        default=None,
        help="Platform under test; overrides platform tags on scenarios.",
    )
    group.addoption(
        "--skip-app-build",
        action="store_true",
        default=False,
        help="Use the apps already in the apps directory instead of building them.",
    )


def pytest_configure(config: pytest.Config) -> None:
    configure_logging()


def _skip_app_build(config: pytest.Config, settings: Settings) -> bool:
    return bool(config.getoption("--skip-app-build")) or settings.skip_app_build


# =============================================================================
# Scenario hooks
# =============================================================================


def pytest_bdd_before_scenario(
    request: pytest.FixtureRequest, feature: Any, scenario: Any
) -> None:
    tags = frozenset(scenario.tags) | frozenset(feature.tags)
    platform = detect_platform(tags, request.config.getoption("--platform"))
    request.node.stash[tags_key] = tags
    request.node.stash[platform_key] = platform

    bind_scenario(scenario.name, platform)
    log.info("scenario_started", tags=sorted(tags))

    if platform == WEB:
        return
    settings = get_settings()
    if _skip_app_build(request.config, settings):
        log.info("app_build_skipped")
        return
    get_app_builder().ensure_apps_built(platform)


def pytest_bdd_after_scenario(
    request: pytest.FixtureRequest, feature: Any, scenario: Any
) -> None:
    log.info("scenario_finished")
    clear_scenario()


def pytest_bdd_step_error(
    request: pytest.FixtureRequest,
    feature: Any,
    scenario: Any,
    step: Any,
    step_func: Any,
    step_func_args: dict[str, Any],
    exception: Exception,
) -> None:
    log.error(
        "scenario_step_failed",
        step=step.name,
        error_type=type(exception).__name__,
        error=str(exception),
    )


# =============================================================================
# Screenshots on failure
# =============================================================================


def _screenshot_path(settings: Settings, name: str) -> Path:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", name).strip("-").lower() or "scenario"
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return settings.screenshots_dir / f"{slug}_{timestamp}.png"


def _save_screenshot(item: pytest.Item) -> Path | None:
    driver = item.stash.get(mobile_driver_key, None)
    page = item.stash.get(web_page_key, None)
    if driver is None and page is None:
        return None
    settings = get_settings()
    path = _screenshot_path(settings, item.name)
    path.parent.mkdir(parents=True, exist_ok=True)

    if driver is not None:
        path.write_bytes(driver.screenshot())
    else:
        page.screenshot(path=str(path), full_page=True)
    return path


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item, call: pytest.CallInfo[None]
) -> Generator[None, Any, None]:
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return
    try:
        path = _save_screenshot(item)
    except (PetSpotE2EError, PlaywrightError, OSError) as e:
        log.warning("screenshot_failed", test=item.name, error=str(e))
        return
    if path is not None:
        log.info("screenshot_saved", test=item.name, path=str(path))


# =============================================================================
# Mobile session
# =============================================================================


@pytest.fixture
def mobile_driver(request: pytest.FixtureRequest) -> Generator[MobileDriver, None, None]:
    """Appium session for the scenario's platform, closed after the scenario."""
    platform = request.node.stash.get(platform_key, None) or request.config.getoption(
        "--platform"
    )
    if platform not in ("android", "ios"):
        raise ConfigurationError(
            f"Mobile steps need --platform android|ios or a single platform tag "
            f"(@{MOBILE} alone is ambiguous), got {platform!r}"
        )
    tags = request.node.stash.get(tags_key, frozenset())
    driver = MobileDriver.start(platform, get_settings(), grant_location=LOCATION in tags)
    request.node.stash[mobile_driver_key] = driver
    yield driver
    try:
        driver.quit()
    except PetSpotE2EError as e:
        log.warning("mobile_driver_cleanup_failed", platform=platform, error=str(e))
