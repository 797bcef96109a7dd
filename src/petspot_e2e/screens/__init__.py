"""Screen objects for the Android and iOS apps."""

from petspot_e2e.screens.base_screen import BaseScreen
from petspot_e2e.screens.bottom_navigation_screen import BottomNavigationScreen
from petspot_e2e.screens.landing_page_screen import LandingPageScreen

__all__ = ["BaseScreen", "BottomNavigationScreen", "LandingPageScreen"]
