"""Recent pet cards, the lost pets list and the pet details modal."""

from __future__ import annotations

from pytest_bdd import then, when

from petspot_e2e.pages.web.landing_page import LandingPage
from petspot_e2e.pages.web.pet_list_page import PetListPage


@when("user clicks on the first recent pet card")
def click_first_recent_pet_card(landing_page: LandingPage) -> None:
    landing_page.click_first_recent_pet_card()


@then("the pet details modal should be displayed")
def pet_details_modal_displayed(pet_list_page: PetListPage) -> None:
    assert pet_list_page.wait_for_pet_details_modal(), "Pet details modal should be visible"
    assert pet_list_page.get_pet_details_title().strip(), "Pet details should show a title"
    url = pet_list_page.get_current_url()
    assert pet_list_page.get_selected_pet_id(), f"URL should name the selected pet, was: {url}"


@when("user closes the pet details modal")
def close_pet_details_modal(pet_list_page: PetListPage) -> None:
    pet_list_page.close_pet_details_modal()


@then("the lost pets list should be displayed")
def lost_pets_list_displayed(pet_list_page: PetListPage) -> None:
    assert pet_list_page.wait_for_pet_list_visible(), "Lost pets list should be visible"
    assert not pet_list_page.is_pet_details_modal_displayed(), "Modal should be closed"
