"""Landing page (Home tab) of the mobile apps."""

from __future__ import annotations

import structlog

from petspot_e2e.core.exceptions import ElementNotFoundError
from petspot_e2e.drivers.appium_client import ElementRef
from petspot_e2e.helpers.waits import wait_for_condition
from petspot_e2e.pages.base_page import verification
from petspot_e2e.screens.base_screen import BaseScreen

log = structlog.get_logger(__name__)


class LandingPageScreen(BaseScreen):
    """Announcement list with its loading, error and empty states."""

    LIST = "landingPage.list"
    LOADING = "landingPage.loading"
    ERROR = "landingPage.error"
    EMPTY_STATE = "landingPage.emptyState"

    # Cards reuse the pet list item tags on both platforms.
    CARD_PREFIXES = ("landingPage.item.", "animalList.item.")

    def _cards_xpath(self) -> str:
        attribute = "@content-desc" if self.driver.is_android else "@name"
        clauses = " or ".join(
            f"contains({attribute}, '{prefix}')" for prefix in self.CARD_PREFIXES
        )
        return f"//*[{clauses}]"

    def _announcement_cards(self) -> list[ElementRef]:
        return self.driver.find_all(self._cards_xpath())

    # -------------------------------------------------------------------------
    # Waits
    # -------------------------------------------------------------------------

    def wait_for_page_loaded(self, timeout_seconds: float | None = None) -> bool:
        """Wait for the announcement list to be visible."""
        return self._wait_visible(self._by_tag(self.LIST), timeout_seconds)

    def wait_for_loading_indicator(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_tag(self.LOADING), timeout_seconds)

    def wait_for_error_view(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_tag(self.ERROR), timeout_seconds)

    def wait_for_empty_state(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_tag(self.EMPTY_STATE), timeout_seconds)

    def wait_for_content_loaded(self, timeout_seconds: float | None = None) -> bool:
        """Wait until the list or, for an empty backend, the empty state shows."""
        if timeout_seconds is None:
            timeout_seconds = self.timeout_seconds
        try:
            wait_for_condition(
                action=lambda: self.is_announcement_list_displayed()
                or self.is_empty_state_displayed(),
                condition=bool,
                timeout_seconds=timeout_seconds,
                error_message="Landing page did not finish loading",
            )
            return True
        except TimeoutError:
            return False

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def tap_first_announcement_card(self) -> None:
        """Tap the first card.

        Raises:
            ElementNotFoundError: If the list has no cards.
        """
        self.tap_announcement_card_at_index(0)

    def tap_announcement_card_at_index(self, index: int) -> None:
        """Tap the card at a 0-based index.

        Raises:
            ElementNotFoundError: If there is no card at that index.
        """
        cards = self._announcement_cards()
        if index < 0 or index >= len(cards):
            raise ElementNotFoundError(
                self._cards_xpath(),
                f"Card index {index} out of bounds. Total cards: {len(cards)}",
            )
        self.driver.click(cards[index])
        log.info("announcement_card_tapped", index=index)

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def is_announcement_list_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.LIST))

    def is_loading_indicator_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.LOADING))

    def is_error_view_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.ERROR))

    def is_empty_state_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.EMPTY_STATE))

    @verification(default=0)
    def get_announcement_card_count(self) -> int:
        return len(self._announcement_cards())

    def has_any_announcement_cards(self) -> bool:
        return self.get_announcement_card_count() > 0

    def has_exactly_n_cards(self, expected_count: int) -> bool:
        actual = self.get_announcement_card_count()
        if actual != expected_count:
            log.info("announcement_card_count_mismatch", expected=expected_count, actual=actual)
        return actual == expected_count
