"""Navigation bar steps."""

from __future__ import annotations

from playwright.sync_api import Page
from pytest_bdd import given, parsers, then, when

from petspot_e2e.config.settings import Settings
from petspot_e2e.core.exceptions import UnknownNavigationItemError
from petspot_e2e.pages.web.navigation_page import NAVIGATION_PATHS, NavigationPage


@given("user is on the Home page")
def user_on_home_page(web_page: Page, navigation_page: NavigationPage, settings: Settings) -> None:
    web_page.goto(settings.web_base_url)
    navigation_page.wait_for_navigation_bar_visible()


@given(parsers.parse('user directly accesses "{path}" URL'))
def user_accesses_url(
    web_page: Page, navigation_page: NavigationPage, settings: Settings, path: str
) -> None:
    web_page.goto(f"{settings.web_base_url}{path}")
    navigation_page.wait_for_navigation_bar_visible()


@when(parsers.parse('user clicks "{section}" in the navigation bar'))
def click_navigation_item(navigation_page: NavigationPage, section: str) -> None:
    navigation_page.click_item(section)


@when(parsers.parse('user hovers over "{section}" navigation item'))
def hover_navigation_item(navigation_page: NavigationPage, section: str) -> None:
    navigation_page.hover_over_navigation_item(section)


@then(parsers.parse('user should be on the "{section}" page'))
def user_on_section_page(navigation_page: NavigationPage, settings: Settings, section: str) -> None:
    if section not in NAVIGATION_PATHS:
        raise UnknownNavigationItemError(section)
    expected_path = NAVIGATION_PATHS[section]
    url = navigation_page.get_current_url()
    if expected_path == "/":
        assert url.endswith("/") or url == settings.web_base_url, (
            f"Expected to be on Home page, but URL was: {url}"
        )
    else:
        assert expected_path in url, f"Expected URL to contain {expected_path}, but was: {url}"


# =============================================================================
# Active item
# =============================================================================


@then(parsers.parse('"{section}" navigation item should be highlighted'))
def navigation_item_highlighted(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_active_class(item), f"{section} navigation item should be highlighted"


@then("other navigation items should not be highlighted")
def only_one_item_highlighted(navigation_page: NavigationPage) -> None:
    count = navigation_page.count_active_items()
    assert count == 1, f"Exactly one navigation item should be active, found {count}"
    assert navigation_page.get_active_item_id() is not None


@then("navigation bar should display all navigation items")
def navigation_bar_displays_items(navigation_page: NavigationPage) -> None:
    assert navigation_page.is_navigation_bar_displayed(), "Navigation bar should be visible"
    assert navigation_page.all_navigation_items_have_labels(), "All navigation items should render"


@then("navigation bar should display the PetSpot logo")
def navigation_bar_displays_logo(navigation_page: NavigationPage) -> None:
    assert navigation_page.is_navigation_bar_displayed(), "Navigation bar with logo should be visible"


# =============================================================================
# Visual design
# =============================================================================


@then("navigation bar should display with horizontal layout")
def horizontal_layout(navigation_page: NavigationPage) -> None:
    assert navigation_page.is_navigation_bar_horizontal_layout(), (
        "Navigation bar should have horizontal flexbox layout"
    )


@then("navigation bar logo should be positioned on the left side")
def logo_on_left(navigation_page: NavigationPage) -> None:
    assert navigation_page.is_logo_positioned_left(), "Logo should be on the left side"


@then("navigation items should be positioned on the right side")
def items_on_right(navigation_page: NavigationPage) -> None:
    assert navigation_page.are_navigation_items_positioned_right(), (
        "Navigation items should be on the right side"
    )


@then("all navigation items should display an icon")
def items_have_icons(navigation_page: NavigationPage) -> None:
    assert navigation_page.all_navigation_items_have_icons(), "All items should display an icon"


@then("all navigation items should display a text label")
def items_have_labels(navigation_page: NavigationPage) -> None:
    assert navigation_page.all_navigation_items_have_labels(), "All items should display a label"


@then("icons should appear before labels")
def icons_before_labels(navigation_page: NavigationPage) -> None:
    assert navigation_page.icons_appear_before_labels(), "Icons should appear before labels"


@then(parsers.parse('"{section}" navigation item should have active styling'))
def item_active_styling(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_active_class(item), f"{section} should have active styling"


@then(parsers.parse('"{section}" navigation item should have inactive styling'))
def item_inactive_styling(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert not navigation_page.has_active_class(item), f"{section} should have inactive styling"


@then(parsers.parse('"{section}" navigation item should have blue background color'))
def item_blue_background(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_active_item_blue_background(item), (
        f"{section} should have blue background color (#EFF6FF)"
    )


@then(parsers.parse('"{section}" navigation item should have blue text color'))
def item_blue_text(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_active_item_blue_text(item), (
        f"{section} should have blue text color (#155DFC)"
    )


@then(parsers.parse('"{section}" navigation item should have transparent background'))
def item_transparent_background(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_inactive_item_transparent_background(item), (
        f"{section} should have transparent background"
    )


@then(parsers.parse('"{section}" navigation item should have gray text color'))
def item_gray_text(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_inactive_item_gray_text(item), (
        f"{section} should have gray text color (#4A5565)"
    )


@then(parsers.parse('"{section}" navigation item should show hover feedback'))
def item_hover_feedback(navigation_page: NavigationPage, section: str) -> None:
    item = navigation_page.get_navigation_item(section)
    assert navigation_page.has_hover_feedback(item), f"{section} should show hover feedback"
