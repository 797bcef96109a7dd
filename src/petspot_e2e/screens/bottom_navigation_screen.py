"""Bottom tab bar of the mobile apps."""

from __future__ import annotations

from typing import Final

from petspot_e2e.core.exceptions import UnknownNavigationItemError
from petspot_e2e.pages.base_page import verification
from petspot_e2e.screens.base_screen import BaseScreen

HOME_TAB: Final[str] = "bottomNav.homeTab"
LOST_PET_TAB: Final[str] = "bottomNav.lostPetTab"
FOUND_PET_TAB: Final[str] = "bottomNav.foundPetTab"
CONTACT_TAB: Final[str] = "bottomNav.contactTab"
ACCOUNT_TAB: Final[str] = "bottomNav.accountTab"

TAB_TAGS: Final[dict[str, str]] = {
    "Home": HOME_TAB,
    "Lost Pet": LOST_PET_TAB,
    "Found Pet": FOUND_PET_TAB,
    "Contact Us": CONTACT_TAB,
    "Account": ACCOUNT_TAB,
}


def _tab_tag(name: str) -> str:
    try:
        return TAB_TAGS[name]
    except KeyError:
        raise UnknownNavigationItemError(name) from None


class BottomNavigationScreen(BaseScreen):
    """Tap tabs and read their selection state."""

    def tap_home_tab(self) -> None:
        self._tap(self._by_tag(HOME_TAB))

    def tap_lost_pet_tab(self) -> None:
        self._tap(self._by_tag(LOST_PET_TAB))

    def tap_found_pet_tab(self) -> None:
        self._tap(self._by_tag(FOUND_PET_TAB))

    def tap_contact_tab(self) -> None:
        self._tap(self._by_tag(CONTACT_TAB))

    def tap_account_tab(self) -> None:
        self._tap(self._by_tag(ACCOUNT_TAB))

    def tap_tab_by_name(self, name: str) -> None:
        """Tap a tab by its label, e.g. "Lost Pet".

        Raises:
            UnknownNavigationItemError: If no tab has that label.
        """
        self._tap(self._by_tag(_tab_tag(name)))

    @verification(default=False)
    def _is_tab_selected(self, tag: str) -> bool:
        tab = self.driver.find(self._by_tag(tag))
        return self.driver.get_attribute(tab, "selected") == "true"

    def is_home_tab_selected(self) -> bool:
        return self._is_tab_selected(HOME_TAB)

    def is_lost_pet_tab_selected(self) -> bool:
        return self._is_tab_selected(LOST_PET_TAB)

    def is_found_pet_tab_selected(self) -> bool:
        return self._is_tab_selected(FOUND_PET_TAB)

    def is_contact_tab_selected(self) -> bool:
        return self._is_tab_selected(CONTACT_TAB)

    def is_account_tab_selected(self) -> bool:
        return self._is_tab_selected(ACCOUNT_TAB)

    def is_tab_selected_by_name(self, name: str) -> bool:
        return self._is_tab_selected(_tab_tag(name))

    def is_navigation_bar_visible(self) -> bool:
        # The bar has no tag of its own; the home tab stands in for it.
        return self._is_displayed(self._by_tag(HOME_TAB))
