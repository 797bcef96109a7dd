"""Unit tests for LandingPage.

Uses the fake page from conftest: unregistered selectors behave like
elements that are not in the DOM.
"""

from typing import Any

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from petspot_e2e.core.locators import by_test_id, by_test_id_family, xpath
from petspot_e2e.pages.web.landing_page import LandingPage

CARD_PREFIX = "landing.hero.featureCard."

VERIFICATIONS_WITH_DEFAULTS = [
    ("is_hero_section_displayed", (), False),
    ("is_hero_heading_displayed", (), False),
    ("is_hero_description_displayed", (), False),
    ("get_hero_heading_text", (), ""),
    ("get_feature_card_count", (), 0),
    ("get_feature_card_titles", (), []),
    ("get_feature_card_title", ("search",), ""),
    ("has_feature_card_description", ("search",), False),
    ("get_feature_card_icon_color", ("search",), ""),
    ("are_feature_cards_clickable", (), False),
    ("is_recent_pets_section_displayed", (), False),
    ("is_recent_pets_heading_displayed", (), False),
    ("is_view_all_link_displayed", (), False),
    ("get_recent_pet_card_count", (), 0),
    ("is_footer_displayed", (), False),
    ("is_footer_branding_displayed", (), False),
    ("is_footer_logo_displayed", (), False),
    ("is_footer_tagline_displayed", (), False),
    ("is_footer_quick_links_displayed", (), False),
    ("is_quick_link_displayed", ("reportLost",), False),
    ("is_quick_link_placeholder", ("search",), False),
    ("is_footer_contact_displayed", (), False),
    ("is_email_contact_displayed", (), False),
    ("is_phone_contact_displayed", (), False),
    ("is_address_contact_displayed", (), False),
    ("is_copyright_displayed", (), False),
    ("is_legal_link_displayed", ("privacy",), False),
]


@pytest.fixture
def landing(fake_page: Any) -> LandingPage:
    return LandingPage(fake_page)


@pytest.mark.unit
class TestLandingPageOnEmptyDom:
    """Given a page where no landing element exists."""

    @pytest.mark.parametrize(("method", "args", "default"), VERIFICATIONS_WITH_DEFAULTS)
    def test_verification_returns_default(
        self, landing: LandingPage, method: str, args: tuple[str, ...], default: Any
    ) -> None:
        """Then every check returns its default instead of raising."""
        assert getattr(landing, method)(*args) == default

    def test_wait_for_page_load_is_false(self, landing: LandingPage) -> None:
        assert landing.wait_for_page_load(timeout_seconds=0.1) is False

    def test_click_view_all_link_raises(self, landing: LandingPage) -> None:
        """Then actions fail the step."""
        with pytest.raises(PlaywrightTimeoutError):
            landing.click_view_all_link()

    def test_click_first_recent_pet_card_raises(self, landing: LandingPage) -> None:
        with pytest.raises(PlaywrightTimeoutError):
            landing.click_first_recent_pet_card()

    def test_click_quick_link_raises(self, landing: LandingPage) -> None:
        with pytest.raises(PlaywrightTimeoutError):
            landing.click_quick_link("reportLost")

    def test_get_feature_cards_is_empty(self, landing: LandingPage) -> None:
        assert landing.get_feature_cards() == []


@pytest.mark.unit
class TestHeroSection:
    """Tests for hero and feature card checks."""

    def test_wait_for_page_load_uses_given_timeout(
        self, fake_page: Any, landing: LandingPage
    ) -> None:
        hero = fake_page.add("landing.heroSection")

        assert landing.wait_for_page_load(timeout_seconds=4) is True
        hero.wait_for.assert_called_once_with(state="visible", timeout=4000)

    def test_heading_text(self, fake_page: Any, make_locator: Any, landing: LandingPage) -> None:
        fake_page.add("landing.hero.heading", make_locator(inner_text="Reunite with your pet"))

        assert landing.is_hero_heading_displayed() is True
        assert landing.get_hero_heading_text() == "Reunite with your pet"

    def test_feature_card_count_counts_direct_cards(
        self, fake_page: Any, make_locator: Any, landing: LandingPage
    ) -> None:
        fake_page.add(xpath(by_test_id_family(CARD_PREFIX)), make_locator(count=4))

        assert landing.get_feature_card_count() == 4

    def test_titles_in_order_with_unreadable_card(
        self, fake_page: Any, make_locator: Any, landing: LandingPage
    ) -> None:
        """A card whose title cannot be read contributes an empty string."""
        search = make_locator(get_attribute=f"{CARD_PREFIX}search")
        report = make_locator(get_attribute=f"{CARD_PREFIX}reportLost")
        cards = make_locator()
        cards.all.return_value = [search, report]
        fake_page.add(xpath(by_test_id_family(CARD_PREFIX)), cards)
        fake_page.add(f"{CARD_PREFIX}search.title", make_locator(inner_text=" Search Database "))

        assert landing.get_feature_card_titles() == ["Search Database", ""]

    def test_feature_card_title(
        self, fake_page: Any, make_locator: Any, landing: LandingPage
    ) -> None:
        fake_page.add(f"{CARD_PREFIX}reportLost.title", make_locator(inner_text="Report Lost Pet"))

        assert landing.get_feature_card_title("reportLost") == "Report Lost Pet"

    @pytest.mark.parametrize(("text", "expected"), [("Find pets near you", True), ("  ", False)])
    def test_feature_card_description(
        self, fake_page: Any, make_locator: Any, landing: LandingPage, text: str, expected: bool
    ) -> None:
        fake_page.add(f"{CARD_PREFIX}search.description", make_locator(inner_text=text))

        assert landing.has_feature_card_description("search") is expected

    def test_icon_color_returns_raw_style(
        self, fake_page: Any, make_locator: Any, landing: LandingPage
    ) -> None:
        style = "background-color: rgb(59, 130, 246); width: 48px;"
        fake_page.add(f"{CARD_PREFIX}search.icon", make_locator(get_attribute=style))

        assert landing.get_feature_card_icon_color("search") == style

    @pytest.mark.parametrize("style", ["width: 48px; color: red;", "", None])
    def test_icon_color_empty_without_background_color(
        self, fake_page: Any, make_locator: Any, landing: LandingPage, style: str | None
    ) -> None:
        fake_page.add(f"{CARD_PREFIX}search.icon", make_locator(get_attribute=style))

        assert landing.get_feature_card_icon_color("search") == ""

    @pytest.mark.parametrize(("interactive", "expected"), [([False, False], False), ([False, True], True)])
    def test_feature_cards_clickable(
        self,
        fake_page: Any,
        make_locator: Any,
        landing: LandingPage,
        interactive: list[bool],
        expected: bool,
    ) -> None:
        cards = make_locator()
        cards.all.return_value = [make_locator(evaluate=value) for value in interactive]
        fake_page.add(xpath(by_test_id_family(CARD_PREFIX)), cards)

        assert landing.are_feature_cards_clickable() is expected


@pytest.mark.unit
class TestRecentPetsAndFooter:
    """Tests for the recent pets section and the footer."""

    def test_recent_pets_section(self, fake_page: Any, make_locator: Any, landing: LandingPage) -> None:
        fake_page.add("landing.recentPetsSection")
        fake_page.add("landing.recentPets.heading")
        fake_page.add(
            xpath(by_test_id_family("landing.recentPets.petCard.")), make_locator(count=5)
        )

        assert landing.is_recent_pets_section_displayed() is True
        assert landing.is_recent_pets_heading_displayed() is True
        assert landing.is_view_all_link_displayed() is False
        assert landing.get_recent_pet_card_count() == 5

    def test_click_view_all_link(self, fake_page: Any, landing: LandingPage) -> None:
        link = fake_page.add("landing.recentPets.viewAllLink.click")

        landing.click_view_all_link()

        link.click.assert_called_once_with(timeout=10000)

    def test_click_first_recent_pet_card(self, fake_page: Any, landing: LandingPage) -> None:
        cards = fake_page.add(xpath(by_test_id_family("landing.recentPets.petCard.")))

        landing.click_first_recent_pet_card()

        cards.first.click.assert_called_once_with(timeout=10000)

    def test_footer_columns(self, fake_page: Any, make_locator: Any, landing: LandingPage) -> None:
        fake_page.add("landing.footer")
        fake_page.add("landing.footer.logo")
        fake_page.add("landing.footer.contact.email")
        fake_page.add(
            xpath(by_test_id_family("landing.footer.quickLink.")), make_locator(count=3)
        )

        assert landing.is_footer_displayed() is True
        assert landing.is_footer_branding_displayed() is True
        assert landing.is_footer_quick_links_displayed() is True
        assert landing.is_footer_contact_displayed() is True
        assert landing.is_phone_contact_displayed() is False

    def test_tagline_follows_logo(self, fake_page: Any, landing: LandingPage) -> None:
        fake_page.add(xpath(f"{by_test_id('landing.footer.logo')}/following-sibling::p[1]"))

        assert landing.is_footer_tagline_displayed() is True

    @pytest.mark.parametrize(("placeholder", "expected"), [(True, True), (False, False)])
    def test_quick_link_placeholder(
        self,
        fake_page: Any,
        make_locator: Any,
        landing: LandingPage,
        placeholder: bool,
        expected: bool,
    ) -> None:
        fake_page.add("landing.footer.quickLink.search", make_locator(evaluate=placeholder))

        assert landing.is_quick_link_placeholder("search") is expected

    def test_click_quick_link(self, fake_page: Any, landing: LandingPage) -> None:
        link = fake_page.add("landing.footer.quickLink.reportLost")

        landing.click_quick_link("reportLost")

        link.click.assert_called_once()

    def test_legal_links(self, fake_page: Any, landing: LandingPage) -> None:
        fake_page.add("landing.footer.legalLink.privacy")
        fake_page.add("landing.footer.copyright")

        assert landing.is_legal_link_displayed("privacy") is True
        assert landing.is_legal_link_displayed("cookies") is False
        assert landing.is_copyright_displayed() is True
