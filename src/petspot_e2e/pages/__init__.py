"""Page objects for the PetSpot web app."""

from petspot_e2e.pages.base_page import VERIFICATION_ERRORS, BasePage, verification
from petspot_e2e.pages.web import LandingPage, NavigationPage

__all__ = [
    "VERIFICATION_ERRORS",
    "BasePage",
    "LandingPage",
    "NavigationPage",
    "verification",
]
