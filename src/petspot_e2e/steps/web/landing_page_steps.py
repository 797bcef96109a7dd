"""Landing page steps: hero, feature cards, recent pets and footer."""

from __future__ import annotations

from typing import Final

from playwright.sync_api import Page
from pytest_bdd import given, parsers, then, when

from petspot_e2e.config.settings import Settings
from petspot_e2e.pages.web.landing_page import LandingPage

QUICK_LINK_IDS: Final[dict[str, str]] = {
    "Report Lost Pet": "reportLost",
    "Report Found Pet": "reportFound",
    "Search Database": "search",
}

LEGAL_LINK_IDS: Final[dict[str, str]] = {
    "Privacy Policy": "privacy",
    "Terms of Service": "terms",
    "Cookie Policy": "cookies",
}

# colour name -> accepted spellings inside the inline style
ICON_COLORS: Final[dict[str, tuple[str, ...]]] = {
    "blue": ("59, 130, 246", "#3b82f6"),
    "red": ("239, 68, 68", "#ef4444"),
    "green": ("16, 185, 129", "#10b981"),
    "purple": ("139, 92, 246", "#8b5cf6"),
}


def _link_id(ids: dict[str, str], label: str) -> str:
    if label not in ids:
        raise ValueError(f"Unknown footer link: {label}")
    return ids[label]


# =============================================================================
# Given
# =============================================================================


@given("user navigates to the landing page")
def user_navigates_to_landing_page(
    web_page: Page, landing_page: LandingPage, settings: Settings
) -> None:
    web_page.goto(settings.web_base_url)
    assert landing_page.wait_for_page_load(), "Landing page should load within timeout"


# =============================================================================
# Hero section
# =============================================================================


@then("landing page should display the hero section")
def hero_section_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_hero_section_displayed(), "Hero section should be displayed"


@then("hero section should display the main heading")
def hero_heading_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_hero_heading_displayed(), "Hero heading should be displayed"
    assert landing_page.get_hero_heading_text().strip(), "Hero heading should not be empty"


@then("hero section should display the description text")
def hero_description_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_hero_description_displayed(), "Hero description should be displayed"


@then(parsers.parse("hero section should display {count:d} feature cards"))
def feature_card_count(landing_page: LandingPage, count: int) -> None:
    actual = landing_page.get_feature_card_count()
    assert actual == count, f"Expected {count} feature cards, but found {actual}"


# =============================================================================
# Feature cards
# =============================================================================


@then("feature cards should be displayed in the following order:")
def feature_cards_in_order(landing_page: LandingPage, datatable: list[list[str]]) -> None:
    expected = [row[0] for row in datatable]
    actual = landing_page.get_feature_card_titles()
    assert actual == expected, f"Feature cards should be in order {expected}, got {actual}"


@then(parsers.parse('feature card "{card_id}" should display title "{title}"'))
def feature_card_title(landing_page: LandingPage, card_id: str, title: str) -> None:
    actual = landing_page.get_feature_card_title(card_id)
    assert actual == title, f"Feature card '{card_id}' should display '{title}', got '{actual}'"


@then(parsers.parse('feature card "{card_id}" should display a description'))
def feature_card_description(landing_page: LandingPage, card_id: str) -> None:
    assert landing_page.has_feature_card_description(
        card_id
    ), f"Feature card '{card_id}' should have a description"


@then(parsers.parse('feature card "{card_id}" should have {color} icon color'))
def feature_card_icon_color(landing_page: LandingPage, card_id: str, color: str) -> None:
    if color not in ICON_COLORS:
        raise ValueError(f"Unknown icon color: {color}")
    style = landing_page.get_feature_card_icon_color(card_id)
    assert any(
        spelling in style.lower() for spelling in ICON_COLORS[color]
    ), f"Feature card '{card_id}' should have {color} icon color, but was: {style!r}"


@then("feature cards should not be clickable")
def feature_cards_not_clickable(landing_page: LandingPage) -> None:
    assert not landing_page.are_feature_cards_clickable(), "Feature cards should not be clickable"


# =============================================================================
# Recent pets
# =============================================================================


@then("landing page should display the recent pets section")
def recent_pets_section_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_recent_pets_section_displayed(), "Recent pets section should be displayed"


@then("recent pets section should display the heading")
def recent_pets_heading_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_recent_pets_heading_displayed(), "Recent pets heading should be displayed"


@then("recent pets section should display the View all link")
def view_all_link_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_view_all_link_displayed(), "View all link should be displayed"


@then(parsers.parse("recent pets section should display at most {max_count:d} pet cards"))
def recent_pet_cards_at_most(landing_page: LandingPage, max_count: int) -> None:
    actual = landing_page.get_recent_pet_card_count()
    assert actual <= max_count, f"Should display at most {max_count} pet cards, found {actual}"


@when("user clicks on View all link in recent pets section")
def click_view_all(landing_page: LandingPage) -> None:
    landing_page.click_view_all_link()


@then("user should be navigated to the lost pets page")
def on_lost_pets_page(landing_page: LandingPage) -> None:
    url = landing_page.get_current_url()
    assert "/lost-pets" in url, f"Should be on the lost pets page, but was: {url}"


# =============================================================================
# Footer
# =============================================================================


@then("landing page should display the footer")
def footer_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_footer_displayed(), "Footer should be displayed"


@then("footer should display the branding column")
def footer_branding_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_footer_branding_displayed(), "Footer branding should be displayed"


@then("footer should display the quick links column")
def footer_quick_links_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_footer_quick_links_displayed(), "Footer quick links should be displayed"


@then("footer should display the contact information column")
def footer_contact_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_footer_contact_displayed(), "Footer contact info should be displayed"


@then("footer should display the logo")
def footer_logo_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_footer_logo_displayed(), "Footer logo should be displayed"


@then("footer should display the tagline")
def footer_tagline_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_footer_tagline_displayed(), "Footer tagline should be displayed"


@then(parsers.parse('footer should display "{label}" quick link'))
def footer_quick_link_displayed(landing_page: LandingPage, label: str) -> None:
    link_id = _link_id(QUICK_LINK_IDS, label)
    assert landing_page.is_quick_link_displayed(link_id), f"Footer should display '{label}'"


@when(parsers.parse('user clicks on "{label}" quick link in footer'))
def click_footer_quick_link(landing_page: LandingPage, label: str) -> None:
    landing_page.click_quick_link(_link_id(QUICK_LINK_IDS, label))


@then("user should be navigated to the report missing page")
def on_report_missing_page(landing_page: LandingPage) -> None:
    url = landing_page.get_current_url()
    assert "/report-missing" in url, f"Should be on the report missing page, but was: {url}"


@then(parsers.parse('"{label}" quick link should be a placeholder'))
def quick_link_placeholder(landing_page: LandingPage, label: str) -> None:
    link_id = _link_id(QUICK_LINK_IDS, label)
    assert landing_page.is_quick_link_placeholder(link_id), f"'{label}' should be a placeholder"


@then("footer should display email contact")
def footer_email_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_email_contact_displayed(), "Footer email should be displayed"


@then("footer should display phone contact")
def footer_phone_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_phone_contact_displayed(), "Footer phone should be displayed"


@then("footer should display address contact")
def footer_address_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_address_contact_displayed(), "Footer address should be displayed"


@then("footer should display copyright notice")
def footer_copyright_displayed(landing_page: LandingPage) -> None:
    assert landing_page.is_copyright_displayed(), "Footer copyright should be displayed"


@then(parsers.parse('footer should display "{label}" legal link'))
def footer_legal_link_displayed(landing_page: LandingPage, label: str) -> None:
    link_id = _link_id(LEGAL_LINK_IDS, label)
    assert landing_page.is_legal_link_displayed(link_id), f"Footer should display '{label}'"
