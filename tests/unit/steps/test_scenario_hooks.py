"""Unit tests for the scenario lifecycle plugin."""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
import structlog
from playwright.sync_api import Error as PlaywrightError

from petspot_e2e.config.settings import Settings
from petspot_e2e.steps import hooks


def _request(platform: str | None = None, skip_app_build: bool = False) -> MagicMock:
    options = {"--platform": platform, "--skip-app-build": skip_app_build}
    request = MagicMock()
    request.config.getoption.side_effect = options.__getitem__
    request.node.stash = {}
    return request


def _scenario(*tags: str) -> SimpleNamespace:
    return SimpleNamespace(name="User taps the Lost Pet tab", tags=set(tags))


@pytest.fixture(autouse=True)
def clean_log_context():
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def app_builder():
    with patch("petspot_e2e.steps.hooks.get_app_builder") as get_builder:
        yield get_builder.return_value


@pytest.fixture
def settings(test_settings: Settings):
    with patch("petspot_e2e.steps.hooks.get_settings", return_value=test_settings):
        yield test_settings


@pytest.mark.unit
class TestBeforeScenario:
    """Tests for platform resolution and app preparation."""

    def test_web_scenario_never_builds(self, app_builder: MagicMock, settings: Settings) -> None:
        request = _request()

        hooks.pytest_bdd_before_scenario(request, SimpleNamespace(tags={"web"}), _scenario())

        assert request.node.stash[hooks.platform_key] == "web"
        app_builder.ensure_apps_built.assert_not_called()

    def test_mobile_scenario_builds_configured_platform(
        self, app_builder: MagicMock, settings: Settings
    ) -> None:
        request = _request(platform="android")
        feature = SimpleNamespace(tags={"mobile", "android", "ios"})

        hooks.pytest_bdd_before_scenario(request, feature, _scenario("location"))

        app_builder.ensure_apps_built.assert_called_once_with("android")
        assert request.node.stash[hooks.tags_key] == frozenset(
            {"mobile", "android", "ios", "location"}
        )

    def test_untargeted_mobile_scenario_builds_both(
        self, app_builder: MagicMock, settings: Settings
    ) -> None:
        hooks.pytest_bdd_before_scenario(
            _request(), SimpleNamespace(tags={"mobile"}), _scenario("android", "ios")
        )

        app_builder.ensure_apps_built.assert_called_once_with(None)

    def test_skip_option(self, app_builder: MagicMock, settings: Settings) -> None:
        hooks.pytest_bdd_before_scenario(
            _request(platform="ios", skip_app_build=True),
            SimpleNamespace(tags=set()),
            _scenario("ios"),
        )

        app_builder.ensure_apps_built.assert_not_called()

    def test_skip_setting(self, app_builder: MagicMock, test_settings: Settings) -> None:
        skipping = test_settings.model_copy(update={"skip_app_build": True})

        with patch("petspot_e2e.steps.hooks.get_settings", return_value=skipping):
            hooks.pytest_bdd_before_scenario(
                _request(platform="ios"), SimpleNamespace(tags=set()), _scenario("ios")
            )

        app_builder.ensure_apps_built.assert_not_called()


@pytest.mark.unit
class TestFailureScreenshots:
    """Tests for screenshot capture on failure."""

    def test_path_is_slug_with_timestamp(self, test_settings: Settings) -> None:
        path = hooks._screenshot_path(
            test_settings, "test_user_clicks_in_navigation_bar[Lost Pet]"
        )

        assert path.parent == test_settings.screenshots_dir
        assert path.name.startswith("test-user-clicks-in-navigation-bar-lost-pet_")
        assert path.suffix == ".png"

    def test_mobile_screenshot_written(self, settings: Settings) -> None:
        driver = MagicMock()
        driver.screenshot.return_value = b"\x89PNG"
        item = SimpleNamespace(
            name="test_tab",
            stash={hooks.mobile_driver_key: driver, hooks.web_page_key: MagicMock()},
        )

        path = hooks._save_screenshot(item)

        assert path is not None
        assert path.read_bytes() == b"\x89PNG"

    def test_web_screenshot_delegated_to_page(self, settings: Settings) -> None:
        page = MagicMock()
        item = SimpleNamespace(name="test_hero", stash={hooks.web_page_key: page})

        path = hooks._save_screenshot(item)

        page.screenshot.assert_called_once_with(path=str(path), full_page=True)

    def test_no_session_no_screenshot(self, settings: Settings) -> None:
        assert hooks._save_screenshot(SimpleNamespace(name="test_x", stash={})) is None

    def test_makereport_swallows_screenshot_errors(self, settings: Settings) -> None:
        page = MagicMock()
        page.screenshot.side_effect = PlaywrightError("Target page has been closed")
        item = SimpleNamespace(name="test_hero", stash={hooks.web_page_key: page})
        outcome = MagicMock()
        outcome.get_result.return_value = SimpleNamespace(when="call", failed=True)

        wrapper = hooks.pytest_runtest_makereport(item, MagicMock())
        next(wrapper)
        with pytest.raises(StopIteration):
            wrapper.send(outcome)

        page.screenshot.assert_called_once()

    def test_makereport_ignores_passed_tests(self, settings: Settings) -> None:
        page = MagicMock()
        item = SimpleNamespace(name="test_hero", stash={hooks.web_page_key: page})
        outcome = MagicMock()
        outcome.get_result.return_value = SimpleNamespace(when="call", failed=False)

        wrapper = hooks.pytest_runtest_makereport(item, MagicMock())
        next(wrapper)
        with pytest.raises(StopIteration):
            wrapper.send(outcome)

        page.screenshot.assert_not_called()
        assert not Path(settings.screenshots_dir).exists()
