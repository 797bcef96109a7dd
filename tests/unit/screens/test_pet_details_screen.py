"""Unit tests for PetDetailsScreen."""

from unittest.mock import MagicMock

import pytest

from petspot_e2e.core.exceptions import ElementNotFoundError
from petspot_e2e.drivers.appium_client import ElementRef
from petspot_e2e.screens.pet_details_screen import PetDetailsScreen


def _only_visible(element: ElementRef, *tags: str):
    """find() side effect matching only the given Android tags."""
    xpaths = {f"//*[@content-desc='{tag}']" for tag in tags}

    def find(xpath: str) -> ElementRef:
        if xpath in xpaths:
            return element
        raise ElementNotFoundError(xpath)

    return find


@pytest.mark.unit
class TestPetDetailsScreenOnEmptyScreen:
    """Given a screen where nothing is rendered."""

    @pytest.mark.parametrize(
        ("method", "default"),
        [
            ("is_details_view_displayed", False),
            ("is_loading_displayed", False),
            ("is_error_displayed", False),
            ("is_pet_photo_displayed", False),
            ("is_pet_name_displayed", False),
            ("is_species_displayed", False),
            ("has_contact_information", False),
            ("get_status_badge_text", ""),
        ],
    )
    def test_checks_return_defaults(
        self, android_driver: MagicMock, method: str, default: object
    ) -> None:
        assert getattr(PetDetailsScreen(android_driver), method)() == default

    def test_wait_for_details_is_false(self, android_driver: MagicMock) -> None:
        assert PetDetailsScreen(android_driver).wait_for_details_visible(timeout_seconds=0.1) is False


@pytest.mark.unit
class TestPetDetailsContent:
    """Tests for a loaded details screen."""

    def test_wait_for_details_on_ios(self, ios_driver: MagicMock, element: ElementRef) -> None:
        ios_driver.wait_until_visible.side_effect = None
        ios_driver.wait_until_visible.return_value = element

        assert PetDetailsScreen(ios_driver).wait_for_details_visible(timeout_seconds=4) is True
        ios_driver.wait_until_visible.assert_called_once_with(
            "//*[@name='petDetails.view']", 4
        )

    @pytest.mark.parametrize("tag", ["petDetails.photo.image", "petDetails.photo.placeholder"])
    def test_photo_or_placeholder_counts_as_photo(
        self, android_driver: MagicMock, element: ElementRef, tag: str
    ) -> None:
        android_driver.find.side_effect = _only_visible(element, tag)
        android_driver.is_displayed.return_value = True

        assert PetDetailsScreen(android_driver).is_pet_photo_displayed() is True

    def test_status_badge_text(self, android_driver: MagicMock, element: ElementRef) -> None:
        android_driver.find.side_effect = _only_visible(element, "petDetails.status.badge")
        android_driver.get_text.return_value = "MISSING"

        assert PetDetailsScreen(android_driver).get_status_badge_text() == "MISSING"
        android_driver.get_text.assert_called_once_with(element)

    def test_email_alone_is_contact_information(
        self, android_driver: MagicMock, element: ElementRef
    ) -> None:
        android_driver.find.side_effect = _only_visible(element, "petDetails.email.tap")
        android_driver.is_displayed.return_value = True
        screen = PetDetailsScreen(android_driver)

        assert screen.is_phone_number_displayed() is False
        assert screen.has_contact_information() is True
