"""Lost pets list page and the pet details modal it opens."""

from __future__ import annotations

from urllib.parse import urlparse

import structlog
from playwright.sync_api import Locator

from petspot_e2e.core.locators import by_test_id_family, xpath
from petspot_e2e.pages.base_page import BasePage, verification

log = structlog.get_logger(__name__)

LOST_PETS_PATH = "/lost-pets"


class PetListPage(BasePage):
    """Lost pets list at ``/lost-pets``.

    ``/lost-pets/<id>`` renders the same list with the details modal of
    that pet opened on top of it.
    """

    LIST = "animalList.list"
    ITEM_PREFIX = "animalList.item."
    EMPTY_STATE = "animalList.emptyState"
    REPORT_MISSING_BUTTON = "animalList.reportMissingButton"
    REPORT_FOUND_BUTTON = "animalList.reportFoundButton"

    # Pet details modal
    DETAILS_DIALOG = "xpath=//*[@role='dialog' and @aria-modal='true']"
    DETAILS_TITLE = "xpath=//*[@id='pet-details-title']"
    DETAILS_CLOSE_BUTTON = "petDetails.closeButton.click"

    def _items(self) -> Locator:
        return self.page.locator(xpath(by_test_id_family(self.ITEM_PREFIX)))

    def wait_for_pet_list_visible(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_test_id(self.LIST), timeout_seconds)

    # -------------------------------------------------------------------------
    # List
    # -------------------------------------------------------------------------

    @verification(default=False)
    def is_pet_list_displayed(self) -> bool:
        return self._by_test_id(self.LIST).is_visible()

    @verification(default=False)
    def is_empty_state_displayed(self) -> bool:
        return self._by_test_id(self.EMPTY_STATE).is_visible()

    @verification(default=0)
    def get_pet_count(self) -> int:
        return self._items().count()

    def has_any_pets(self) -> bool:
        return self.get_pet_count() > 0

    @verification(default=False)
    def is_report_missing_button_displayed(self) -> bool:
        return self._by_test_id(self.REPORT_MISSING_BUTTON).is_visible()

    def click_first_pet(self) -> None:
        self._click(self._items().first)

    def click_report_missing_button(self) -> None:
        self._click(self._by_test_id(self.REPORT_MISSING_BUTTON))

    # -------------------------------------------------------------------------
    # Pet details modal
    # -------------------------------------------------------------------------

    def wait_for_pet_details_modal(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self.page.locator(self.DETAILS_DIALOG), timeout_seconds)

    @verification(default=False)
    def is_pet_details_modal_displayed(self) -> bool:
        return self.page.locator(self.DETAILS_DIALOG).is_visible()

    @verification(default="")
    def get_pet_details_title(self) -> str:
        return self.page.locator(self.DETAILS_TITLE).inner_text(timeout=self._timeout_ms())

    @verification(default="")
    def get_selected_pet_id(self) -> str:
        """Pet id from a ``/lost-pets/<id>`` URL, empty on the plain list."""
        path = urlparse(self.page.url).path.rstrip("/")
        prefix = LOST_PETS_PATH + "/"
        return path[len(prefix) :] if path.startswith(prefix) else ""

    def close_pet_details_modal(self) -> None:
        self._click(self._by_test_id(self.DETAILS_CLOSE_BUTTON))
        log.info("pet_details_modal_closed")
