"""Mobile landing page (Home tab) steps."""

from __future__ import annotations

from pytest_bdd import parsers, then, when

from petspot_e2e.screens.landing_page_screen import LandingPageScreen


@then("the landing page should finish loading")
def landing_page_loaded(landing_page_screen: LandingPageScreen) -> None:
    assert landing_page_screen.wait_for_content_loaded(), (
        "Announcement list or empty state should be visible"
    )
    assert not landing_page_screen.is_loading_indicator_displayed(), "Loading should be done"


@then("the landing page should show announcement cards")
def announcement_cards_shown(landing_page_screen: LandingPageScreen) -> None:
    assert landing_page_screen.has_any_announcement_cards(), "Expected announcement cards"


@then(parsers.parse("the landing page should show at most {max_count:d} announcement cards"))
def announcement_cards_at_most(landing_page_screen: LandingPageScreen, max_count: int) -> None:
    actual = landing_page_screen.get_announcement_card_count()
    assert actual <= max_count, f"Expected at most {max_count} cards, found {actual}"


@then("the landing page should show the empty state or announcement cards")
def empty_state_or_cards(landing_page_screen: LandingPageScreen) -> None:
    assert (
        landing_page_screen.has_any_announcement_cards()
        or landing_page_screen.is_empty_state_displayed()
    ), "Expected announcement cards or the empty state"


@then("the landing page should not show an error")
def no_error_view(landing_page_screen: LandingPageScreen) -> None:
    assert not landing_page_screen.is_error_view_displayed(), "Error view should not be shown"


@when("I tap the first announcement card")
def tap_first_card(landing_page_screen: LandingPageScreen) -> None:
    landing_page_screen.tap_first_announcement_card()


@when(parsers.parse("I tap the announcement card at position {position:d}"))
def tap_card_at_position(landing_page_screen: LandingPageScreen, position: int) -> None:
    landing_page_screen.tap_announcement_card_at_index(position - 1)


@then("I should leave the landing page")
def left_landing_page(landing_page_screen: LandingPageScreen) -> None:
    assert not landing_page_screen.is_announcement_list_displayed(), (
        "Announcement list should no longer be in front"
    )
