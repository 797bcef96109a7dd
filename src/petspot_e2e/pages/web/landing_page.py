"""Landing page object: hero, feature cards, recent pets and footer."""

from __future__ import annotations

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from petspot_e2e.core.locators import by_test_id, by_test_id_family, xpath
from petspot_e2e.pages.base_page import BasePage, verification

log = structlog.get_logger(__name__)

_IS_INTERACTIVE_JS = """el => el.tagName === 'A'
    || el.tagName === 'BUTTON'
    || el.querySelector('a, button') !== null
    || getComputedStyle(el).cursor === 'pointer'"""

_IS_PLACEHOLDER_LINK_JS = """el => el.tagName !== 'A'
    || !el.getAttribute('href')
    || el.getAttribute('href') === '#'"""


class LandingPage(BasePage):
    """Landing page at ``/``."""

    # Hero
    HERO_SECTION = "landing.heroSection"
    HERO_HEADING = "landing.hero.heading"
    FEATURE_CARD_PREFIX = "landing.hero.featureCard."

    # Recent pets
    RECENT_PETS_SECTION = "landing.recentPetsSection"
    RECENT_PETS_HEADING = "landing.recentPets.heading"
    VIEW_ALL_LINK = "landing.recentPets.viewAllLink.click"
    PET_CARD_PREFIX = "landing.recentPets.petCard."

    # Footer
    FOOTER = "landing.footer"
    FOOTER_LOGO = "landing.footer.logo"
    QUICK_LINK_PREFIX = "landing.footer.quickLink."
    CONTACT_EMAIL = "landing.footer.contact.email"
    CONTACT_PHONE = "landing.footer.contact.phone"
    CONTACT_ADDRESS = "landing.footer.contact.address"
    COPYRIGHT = "landing.footer.copyright"
    LEGAL_LINK_PREFIX = "landing.footer.legalLink."

    def wait_for_page_load(self, timeout_seconds: float | None = None) -> bool:
        """Wait until the hero section is visible."""
        return self._wait_visible(self._by_test_id(self.HERO_SECTION), timeout_seconds)

    # -------------------------------------------------------------------------
    # Hero section
    # -------------------------------------------------------------------------

    @verification(default=False)
    def is_hero_section_displayed(self) -> bool:
        return self._by_test_id(self.HERO_SECTION).is_visible()

    @verification(default=False)
    def is_hero_heading_displayed(self) -> bool:
        return self._by_test_id(self.HERO_HEADING).is_visible()

    @verification(default="")
    def get_hero_heading_text(self) -> str:
        return self._by_test_id(self.HERO_HEADING).inner_text(timeout=self._timeout_ms())

    @verification(default=False)
    def is_hero_description_displayed(self) -> bool:
        description = self._by_test_id(self.HERO_SECTION).locator("p").first
        return description.is_visible()

    # -------------------------------------------------------------------------
    # Feature cards
    # -------------------------------------------------------------------------

    def _feature_cards(self) -> Locator:
        return self.page.locator(xpath(by_test_id_family(self.FEATURE_CARD_PREFIX)))

    def _feature_card_part(self, card_id: str, part: str) -> Locator:
        return self._by_test_id(f"{self.FEATURE_CARD_PREFIX}{card_id}.{part}")

    def get_feature_cards(self) -> list[Locator]:
        """All feature card locators in DOM order (driver errors propagate)."""
        return self._feature_cards().all()

    @verification(default=0)
    def get_feature_card_count(self) -> int:
        return self._feature_cards().count()

    @verification(default=list)
    def get_feature_card_titles(self) -> list[str]:
        """Titles in display order; an unreadable card contributes ``""``."""
        titles: list[str] = []
        for card in self._feature_cards().all():
            try:
                test_id = card.get_attribute("data-testid", timeout=self._timeout_ms()) or ""
                card_id = test_id.removeprefix(self.FEATURE_CARD_PREFIX)
                title = self._feature_card_part(card_id, "title").inner_text(
                    timeout=self._timeout_ms()
                )
                titles.append(title.strip())
            except PlaywrightError as e:
                log.debug("feature_card_title_unreadable", error=str(e))
                titles.append("")
        return titles

    @verification(default="")
    def get_feature_card_title(self, card_id: str) -> str:
        title = self._feature_card_part(card_id, "title").inner_text(timeout=self._timeout_ms())
        return title.strip()

    @verification(default=False)
    def has_feature_card_description(self, card_id: str) -> bool:
        description = self._feature_card_part(card_id, "description")
        if not description.is_visible():
            return False
        return bool(description.inner_text(timeout=self._timeout_ms()).strip())

    @verification(default="")
    def get_feature_card_icon_color(self, card_id: str) -> str:
        """Raw inline style of the icon container.

        Returns ``""`` unless the style declares ``background-color``; the
        string is not parsed or normalized.
        """
        style = self._feature_card_part(card_id, "icon").get_attribute(
            "style", timeout=self._timeout_ms()
        )
        if not style or "background-color" not in style:
            return ""
        return style

    @verification(default=False)
    def are_feature_cards_clickable(self) -> bool:
        """True if any card is a link/button, contains one, or shows a pointer."""
        return any(bool(card.evaluate(_IS_INTERACTIVE_JS)) for card in self._feature_cards().all())

    # -------------------------------------------------------------------------
    # Recent pets section
    # -------------------------------------------------------------------------

    @verification(default=False)
    def is_recent_pets_section_displayed(self) -> bool:
        return self._by_test_id(self.RECENT_PETS_SECTION).is_visible()

    @verification(default=False)
    def is_recent_pets_heading_displayed(self) -> bool:
        return self._by_test_id(self.RECENT_PETS_HEADING).is_visible()

    @verification(default=False)
    def is_view_all_link_displayed(self) -> bool:
        return self._by_test_id(self.VIEW_ALL_LINK).is_visible()

    def _recent_pet_cards(self) -> Locator:
        return self.page.locator(xpath(by_test_id_family(self.PET_CARD_PREFIX)))

    @verification(default=0)
    def get_recent_pet_card_count(self) -> int:
        return self._recent_pet_cards().count()

    def click_first_recent_pet_card(self) -> None:
        """Open the newest pet; the app routes to its details on the lost pets page."""
        self._click(self._recent_pet_cards().first)
        log.info("recent_pet_card_clicked")

    def click_view_all_link(self) -> None:
        self._click(self._by_test_id(self.VIEW_ALL_LINK))

    # -------------------------------------------------------------------------
    # Footer
    # -------------------------------------------------------------------------

    @verification(default=False)
    def is_footer_displayed(self) -> bool:
        return self._by_test_id(self.FOOTER).is_visible()

    @verification(default=False)
    def is_footer_logo_displayed(self) -> bool:
        return self._by_test_id(self.FOOTER_LOGO).is_visible()

    def is_footer_branding_displayed(self) -> bool:
        """Branding column is represented by its logo."""
        return self.is_footer_logo_displayed()

    @verification(default=False)
    def is_footer_tagline_displayed(self) -> bool:
        tagline = self.page.locator(
            xpath(f"{by_test_id(self.FOOTER_LOGO)}/following-sibling::p[1]")
        )
        return tagline.is_visible()

    @verification(default=False)
    def is_footer_quick_links_displayed(self) -> bool:
        return self.page.locator(xpath(by_test_id_family(self.QUICK_LINK_PREFIX))).count() > 0

    @verification(default=False)
    def is_quick_link_displayed(self, link_id: str) -> bool:
        return self._by_test_id(f"{self.QUICK_LINK_PREFIX}{link_id}").is_visible()

    @verification(default=False)
    def is_quick_link_placeholder(self, link_id: str) -> bool:
        """Placeholders render as plain text or as an ``href="#"`` anchor."""
        link = self._by_test_id(f"{self.QUICK_LINK_PREFIX}{link_id}")
        return bool(link.evaluate(_IS_PLACEHOLDER_LINK_JS, timeout=self._timeout_ms()))

    def click_quick_link(self, link_id: str) -> None:
        self._click(self._by_test_id(f"{self.QUICK_LINK_PREFIX}{link_id}"))

    @verification(default=False)
    def is_email_contact_displayed(self) -> bool:
        return self._by_test_id(self.CONTACT_EMAIL).is_visible()

    @verification(default=False)
    def is_phone_contact_displayed(self) -> bool:
        return self._by_test_id(self.CONTACT_PHONE).is_visible()

    @verification(default=False)
    def is_address_contact_displayed(self) -> bool:
        return self._by_test_id(self.CONTACT_ADDRESS).is_visible()

    def is_footer_contact_displayed(self) -> bool:
        """Contact column is represented by its email entry."""
        return self.is_email_contact_displayed()

    @verification(default=False)
    def is_copyright_displayed(self) -> bool:
        return self._by_test_id(self.COPYRIGHT).is_visible()

    @verification(default=False)
    def is_legal_link_displayed(self, link_id: str) -> bool:
        return self._by_test_id(f"{self.LEGAL_LINK_PREFIX}{link_id}").is_visible()
