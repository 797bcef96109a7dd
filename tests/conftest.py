"""Shared pytest fixtures for PetSpot E2E tests.

This module provides fixtures for:
- Test environment variables and a fresh settings cache per test
- An isolated settings instance pointing at a temporary directory

Usage:
    @pytest.mark.unit
    def test_something(test_settings):
        assert test_settings.web_base_url == "http://localhost:3000"
"""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from petspot_e2e.config.settings import Settings, get_settings

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("PETSPOT_E2E_WEB_BASE_URL", "http://localhost:3000")
    os.environ.setdefault("PETSPOT_E2E_APPIUM_SERVER_URL", "http://127.0.0.1:4723")

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings with every output directory under tmp_path."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        project_root=tmp_path / "project",
        apps_dir=tmp_path / "apps",
        reports_dir=tmp_path / "reports",
        screenshots_dir=tmp_path / "reports" / "screenshots",
    )
