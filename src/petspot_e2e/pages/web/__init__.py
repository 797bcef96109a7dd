"""Web page objects."""

from petspot_e2e.pages.web.landing_page import LandingPage
from petspot_e2e.pages.web.navigation_page import NavigationPage

__all__ = ["LandingPage", "NavigationPage"]
