"""Pet details screen opened from an announcement card."""

from __future__ import annotations

from petspot_e2e.pages.base_page import verification
from petspot_e2e.screens.base_screen import BaseScreen


class PetDetailsScreen(BaseScreen):
    """Details of one announcement with its loading and error states."""

    VIEW = "petDetails.view"
    LOADING = "petDetails.loading"
    ERROR = "petDetails.error"
    PHOTO = "petDetails.photo.image"
    PHOTO_PLACEHOLDER = "petDetails.photo.placeholder"
    STATUS_BADGE = "petDetails.status.badge"
    NAME = "petDetails.name.text"
    SPECIES = "petDetails.species.text"
    BREED = "petDetails.breed.text"
    PHONE = "petDetails.phone.tap"
    EMAIL = "petDetails.email.tap"

    def wait_for_details_visible(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_tag(self.VIEW), timeout_seconds)

    def wait_for_loading_indicator(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_tag(self.LOADING), timeout_seconds)

    def is_details_view_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.VIEW))

    def is_loading_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.LOADING))

    def is_error_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.ERROR))

    def is_pet_photo_displayed(self) -> bool:
        """Photo or, for announcements without one, its placeholder."""
        return self._is_displayed(self._by_tag(self.PHOTO)) or self._is_displayed(
            self._by_tag(self.PHOTO_PLACEHOLDER)
        )

    def is_species_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.SPECIES))

    def is_pet_name_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.NAME))

    def is_phone_number_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.PHONE))

    def is_email_address_displayed(self) -> bool:
        return self._is_displayed(self._by_tag(self.EMAIL))

    @verification(default="")
    def get_status_badge_text(self) -> str:
        return self.driver.get_text(self.driver.find(self._by_tag(self.STATUS_BADGE)))

    def has_contact_information(self) -> bool:
        return self.is_phone_number_displayed() or self.is_email_address_displayed()
