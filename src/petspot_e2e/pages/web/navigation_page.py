"""Top navigation bar page object."""

from __future__ import annotations

from typing import Final

import structlog
from playwright.sync_api import Locator

from petspot_e2e.core.exceptions import UnknownNavigationItemError
from petspot_e2e.pages.base_page import BasePage, verification

log = structlog.get_logger(__name__)

# label -> (item id, data-testid)
NAVIGATION_ITEMS: Final[dict[str, tuple[str, str]]] = {
    "Home": ("home", "navigation.home.link"),
    "Lost Pet": ("lostPet", "navigation.lostPet.link"),
    "Found Pet": ("foundPet", "navigation.foundPet.link"),
    "Contact Us": ("contact", "navigation.contact.link"),
    "Account": ("account", "navigation.account.link"),
}

# label -> route
NAVIGATION_PATHS: Final[dict[str, str]] = {
    "Home": "/",
    "Lost Pet": "/lost-pets",
    "Found Pet": "/found-pets",
    "Contact Us": "/contact",
    "Account": "/account",
}

ACTIVE_CLASS_MARKER: Final[str] = "Active"

ACTIVE_BACKGROUND_RGB: Final[str] = "rgb(239, 246, 255)"  # #EFF6FF
ACTIVE_TEXT_RGB: Final[str] = "rgb(21, 93, 252)"  # #155DFC
INACTIVE_TEXT_RGB: Final[str] = "rgb(74, 85, 101)"  # #4A5565
TRANSPARENT_VALUES: Final[frozenset[str]] = frozenset({"transparent", "rgba(0, 0, 0, 0)"})

_ICON_BEFORE_LABEL_JS = """el => {
    const icon = el.querySelector('svg');
    const label = el.querySelector('span');
    if (!icon || !label) return false;
    return (icon.compareDocumentPosition(label) & Node.DOCUMENT_POSITION_FOLLOWING) !== 0;
}"""


def _normalize_color(value: str) -> str:
    # Chrome reports opaque colours as rgb(), some engines as rgba(..., 1).
    value = value.strip().lower()
    if value.startswith("rgba(") and value.endswith(", 1)"):
        return "rgb(" + value[len("rgba(") : -len(", 1)")] + ")"
    return value


class NavigationPage(BasePage):
    """Navigation bar shown on every web page."""

    NAVIGATION_BAR = "navigation.bar"
    LOGO_LINK = "navigation.logo.link"

    def _item_test_id(self, section: str) -> str:
        try:
            return NAVIGATION_ITEMS[section][1]
        except KeyError:
            raise UnknownNavigationItemError(section) from None

    def _link(self, item_id: str) -> Locator:
        return self._by_test_id(f"navigation.{item_id}.link")

    def _all_links(self) -> list[Locator]:
        return [self._by_test_id(test_id) for _, test_id in NAVIGATION_ITEMS.values()]

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click_home(self) -> None:
        self._click(self._link("home"))

    def click_lost_pet(self) -> None:
        self._click(self._link("lostPet"))

    def click_found_pet(self) -> None:
        self._click(self._link("foundPet"))

    def click_contact(self) -> None:
        self._click(self._link("contact"))

    def click_account(self) -> None:
        self._click(self._link("account"))

    def click_logo(self) -> None:
        self._click(self._by_test_id(self.LOGO_LINK))

    def click_item(self, section: str) -> None:
        """Click a navigation item by its visible label.

        Raises:
            UnknownNavigationItemError: If the label is not a navigation item.
        """
        self._click(self.get_navigation_item(section))

    def hover_over_navigation_item(self, section: str) -> None:
        self.get_navigation_item(section).hover(timeout=self._timeout_ms())

    def get_navigation_item(self, section: str) -> Locator:
        return self._by_test_id(self._item_test_id(section))

    # -------------------------------------------------------------------------
    # Bar visibility
    # -------------------------------------------------------------------------

    @verification(default=False)
    def is_navigation_bar_displayed(self) -> bool:
        return self._by_test_id(self.NAVIGATION_BAR).is_visible()

    def wait_for_navigation_bar_visible(self, timeout_seconds: float | None = None) -> bool:
        return self._wait_visible(self._by_test_id(self.NAVIGATION_BAR), timeout_seconds)

    # -------------------------------------------------------------------------
    # Active state
    # -------------------------------------------------------------------------

    @verification(default=False)
    def has_active_class(self, item: Locator) -> bool:
        class_name = item.get_attribute("class", timeout=self._timeout_ms())
        return class_name is not None and ACTIVE_CLASS_MARKER in class_name

    def is_home_link_active(self) -> bool:
        return self.has_active_class(self._link("home"))

    def is_lost_pet_link_active(self) -> bool:
        return self.has_active_class(self._link("lostPet"))

    def is_found_pet_link_active(self) -> bool:
        return self.has_active_class(self._link("foundPet"))

    def is_contact_link_active(self) -> bool:
        return self.has_active_class(self._link("contact"))

    def is_account_link_active(self) -> bool:
        return self.has_active_class(self._link("account"))

    def _active_item_ids(self) -> list[str]:
        return [
            item_id
            for item_id, _ in NAVIGATION_ITEMS.values()
            if self.has_active_class(self._link(item_id))
        ]

    def count_active_items(self) -> int:
        return len(self._active_item_ids())

    def get_active_item_id(self) -> str | None:
        """Id of the single active item.

        None when no item, or more than one item, carries the active marker.
        """
        active = self._active_item_ids()
        if len(active) != 1:
            if active:
                log.debug("multiple_active_navigation_items", items=active)
            return None
        return active[0]

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    @verification(default=False)
    def is_navigation_bar_horizontal_layout(self) -> bool:
        bar = self._by_test_id(self.NAVIGATION_BAR)
        display = self._computed_style(bar, "display")
        direction = self._computed_style(bar, "flex-direction")
        return display == "flex" and direction == "row"

    @verification(default=False)
    def is_logo_positioned_left(self) -> bool:
        logo_box = self._by_test_id(self.LOGO_LINK).bounding_box(timeout=self._timeout_ms())
        home_box = self._link("home").bounding_box(timeout=self._timeout_ms())
        if logo_box is None or home_box is None:
            return False
        return logo_box["x"] < home_box["x"]

    @verification(default=False)
    def are_navigation_items_positioned_right(self) -> bool:
        logo_box = self._by_test_id(self.LOGO_LINK).bounding_box(timeout=self._timeout_ms())
        if logo_box is None:
            return False
        logo_right = logo_box["x"] + logo_box["width"]
        for link in self._all_links():
            box = link.bounding_box(timeout=self._timeout_ms())
            if box is None or box["x"] < logo_right:
                return False
        return True

    # -------------------------------------------------------------------------
    # Icons and labels
    # -------------------------------------------------------------------------

    @verification(default=False)
    def all_navigation_items_have_icons(self) -> bool:
        return all(link.locator("svg").count() > 0 for link in self._all_links())

    @verification(default=False)
    def all_navigation_items_have_labels(self) -> bool:
        for link in self._all_links():
            label = link.locator("span").first
            if not label.inner_text(timeout=self._timeout_ms()).strip():
                return False
        return True

    @verification(default=False)
    def icons_appear_before_labels(self) -> bool:
        return all(bool(link.evaluate(_ICON_BEFORE_LABEL_JS)) for link in self._all_links())

    # -------------------------------------------------------------------------
    # Colours
    # -------------------------------------------------------------------------

    def _color(self, item: Locator, prop: str) -> str:
        return _normalize_color(self._computed_style(item, prop))

    @verification(default=False)
    def has_active_item_blue_background(self, item: Locator) -> bool:
        return self._color(item, "background-color") == ACTIVE_BACKGROUND_RGB

    @verification(default=False)
    def has_active_item_blue_text(self, item: Locator) -> bool:
        return self._color(item, "color") == ACTIVE_TEXT_RGB

    @verification(default=False)
    def has_inactive_item_transparent_background(self, item: Locator) -> bool:
        return self._color(item, "background-color") in TRANSPARENT_VALUES

    @verification(default=False)
    def has_inactive_item_gray_text(self, item: Locator) -> bool:
        return self._color(item, "color") == INACTIVE_TEXT_RGB

    @verification(default=False)
    def has_hover_feedback(self, item: Locator) -> bool:
        """Compare the hovered colours against the item's resting colours."""
        self.page.mouse.move(0, 0)
        resting = (self._color(item, "background-color"), self._color(item, "color"))
        item.hover(timeout=self._timeout_ms())
        hovered = (self._color(item, "background-color"), self._color(item, "color"))
        return hovered != resting
