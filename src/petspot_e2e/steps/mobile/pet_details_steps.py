"""Mobile pet details steps."""

from __future__ import annotations

from pytest_bdd import then

from petspot_e2e.screens.pet_details_screen import PetDetailsScreen


@then("the pet details screen should be displayed")
def pet_details_displayed(pet_details_screen: PetDetailsScreen) -> None:
    assert pet_details_screen.wait_for_details_visible(), "Pet details should be visible"
    assert not pet_details_screen.is_error_displayed(), "Pet details should load without error"
    assert pet_details_screen.is_pet_photo_displayed(), "Pet photo or placeholder should show"
    assert pet_details_screen.get_status_badge_text().strip(), "Status badge should have text"
