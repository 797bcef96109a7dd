"""Playwright fixtures for the PetSpot web scenarios.

This module provides:
- Browser context configuration (viewport, HTTPS errors)
- Browser launch configuration (headless, slow_mo) from settings

Mobile scenarios do not request ``page`` and never start a browser.

Usage:
    petspot-e2e web --headed
"""

from typing import Any

import pytest

from petspot_e2e.config import get_settings

# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context for the web app."""
    settings = get_settings()
    return {
        **browser_context_args,
        "viewport": {"width": settings.viewport_width, "height": settings.viewport_height},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments.

    ``--headed`` on the command line wins over ``PETSPOT_E2E_HEADLESS``.
    """
    settings = get_settings()
    launch_args = {**browser_type_launch_args, "slow_mo": settings.slow_mo}
    if not settings.headless:
        launch_args["headless"] = False
    return launch_args
