"""Bottom tab navigation steps for Android and iOS."""

from __future__ import annotations

from pytest_bdd import given, parsers, then, when

from petspot_e2e.screens.bottom_navigation_screen import BottomNavigationScreen
from petspot_e2e.screens.landing_page_screen import LandingPageScreen


@given("the app is launched on the home screen")
def app_launched_on_home(bottom_navigation: BottomNavigationScreen) -> None:
    assert bottom_navigation.is_navigation_bar_visible(), "Bottom navigation should be visible"


@given("I am on the home screen")
def on_home_screen(bottom_navigation: BottomNavigationScreen) -> None:
    if not bottom_navigation.is_home_tab_selected():
        bottom_navigation.tap_home_tab()
    assert bottom_navigation.is_home_tab_selected(), "Home tab should be selected"


@given("I am on any screen in the app")
def on_any_screen(bottom_navigation: BottomNavigationScreen) -> None:
    assert bottom_navigation.is_navigation_bar_visible(), "Bottom navigation should be visible"


@when(parsers.parse('I tap the "{tab_name}" tab'))
def tap_tab(bottom_navigation: BottomNavigationScreen, tab_name: str) -> None:
    bottom_navigation.tap_tab_by_name(tab_name)


@then("I should see the home landing page")
def home_landing_page_shown(
    bottom_navigation: BottomNavigationScreen, landing_page_screen: LandingPageScreen
) -> None:
    assert bottom_navigation.is_home_tab_selected(), "Home tab should be selected"
    assert landing_page_screen.wait_for_page_loaded() or (
        landing_page_screen.is_empty_state_displayed()
        or landing_page_screen.is_error_view_displayed()
    ), "Home landing page should be visible"


@then(parsers.parse('the "{tab_name}" tab should be visually selected'))
def tab_selected(bottom_navigation: BottomNavigationScreen, tab_name: str) -> None:
    assert bottom_navigation.is_tab_selected_by_name(tab_name), f"{tab_name} tab should be selected"


@then(parsers.parse('the "{tab_name}" tab should not be visually selected'))
def tab_not_selected(bottom_navigation: BottomNavigationScreen, tab_name: str) -> None:
    assert not bottom_navigation.is_tab_selected_by_name(
        tab_name
    ), f"{tab_name} tab should not be selected"
