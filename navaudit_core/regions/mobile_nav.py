"""
Mobile navigation finder

Detects the hamburger trigger, the drawer it opens, and which drawer
implementation is in use (the pattern decides how open/close/is-open work).

Patterns, tried in order:
1. details-summary   - <details>/<summary> disclosure (Dawn-style themes)
2. bootstrap-navbar  - button.navbar-toggler[aria-controls] -> .navbar-collapse
3. data-attribute    - trigger and drawer linked by data-* keys
4. drawer-component  - <navigation-drawer>, .nav-drawer and friends
5. class-heuristic   - common trigger/drawer class names
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from playwright.async_api import Error as PlaywrightError

from ..dom import probes
from .pipeline import first_match
from .scoring import MOBILE_NAV_CONFIDENCE_FLOOR

logger = logging.getLogger(__name__)


class MobileNavPattern(str, Enum):
    DETAILS_SUMMARY = "details-summary"
    BOOTSTRAP_NAVBAR = "bootstrap-navbar"
    DATA_ATTRIBUTE = "data-attribute"
    DRAWER_COMPONENT = "drawer-component"
    CLASS_HEURISTIC = "class-heuristic"


@dataclass
class MobileNavDescriptor:
    """Trigger + drawer pair for one page session"""
    trigger: Any
    drawer: Any
    pattern: MobileNavPattern
    score: int
    reasons: List[str] = field(default_factory=list)

    @property
    def page(self):
        return self.drawer.page


DETAILS_SELECTORS = [
    'details[id*="menu-drawer" i]',
    'details[id*="menu" i]',
    'details[class*="menu-drawer"]',
    'details[class*="mobile-toggle"]',
]

BOOTSTRAP_TRIGGER_SELECTOR = "button.navbar-toggler[aria-controls]"

DATA_TRIGGER_SELECTORS = [
    '[data-targets*="nav"]:not([class*="close"])',
    '[data-targets*="drawer"]:not([class*="close"])',
    '[data-targets*="mobile"]:not([class*="close"])',
    "[data-hamburger-menu-open]",
    '[data-toggle*="menu"]:not([class*="close"])',
]

HAMBURGER_DRAWER_SELECTORS = ["[data-hamburger-menu]", ".hamburger-menu"]

DRAWER_COMPONENT_SELECTORS = [
    "navigation-drawer",
    ".nav-drawer.drawer",
    '.drawer[class*="nav"]',
    '.drawer[class*="menu"]',
]

# (selector, resolve to the enclosing button)
DRAWER_TRIGGER_SELECTORS = [
    ("button .icon-hamburger", True),
    ('button[aria-label*="menu" i]', False),
    ("header button:has(svg)", False),
]

CLASS_TRIGGER_SELECTORS = [
    ".mobile-toggle",
    ".header__icon--menu",
    ".navigation-toggle",
    ".nav-toggle",
    'button[class*="hamburger"]',
    '[class*="mobile-menu-toggle"]',
    '[class*="menu__link"]',
]

CLASS_DRAWER_SELECTORS = [
    ".menu-drawer",
    ".mobile-menu-drawer",
    ".mobile-nav",
    ".shop-menu",
    ".logo-menu__mobile",
    ".nav-drawer",
    ".drawer.drawer--left",
    ".drawer",
    '[id*="mobile-menu"]',
]


def css_string(value: str) -> str:
    """Quote a value for use inside a CSS attribute selector"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


async def details_summary_pattern(page, log: logging.Logger) -> Optional[MobileNavDescriptor]:
    for selector in DETAILS_SELECTORS:
        details = page.locator(selector).first
        if not await probes.exists(details):
            continue

        summary = details.locator(":scope > summary").first
        if not await probes.exists(summary):
            log.debug(f"Found {selector} but no <summary> child")
            continue
        if not await probes.is_rendered(summary):
            log.debug(f"Found {selector} but its <summary> is not rendered")
            continue

        # Standard layout: the drawer is a child of <details>
        drawer = details.locator(":scope > div, :scope > nav").first
        if await probes.exists(drawer):
            score = 10
            reasons = ["Found semantic <details>/<summary> pattern"]

            aria_label = await probes.attr(summary, "aria-label")
            if aria_label and any(w in aria_label.lower() for w in ("menu", "navigation")):
                score += 5
                reasons.append(f'ARIA label: "{aria_label}"')

            aria_controls = await probes.attr(summary, "aria-controls")
            if aria_controls:
                score += 3
                reasons.append(f'Has aria-controls="{aria_controls}"')

            if await summary.locator("svg, img, .icon").count() > 0:
                score += 2
                reasons.append("Has icon in trigger")

            return MobileNavDescriptor(summary, drawer, MobileNavPattern.DETAILS_SUMMARY, score, reasons)

        # External drawer linked by a shared data-menu-item key
        menu_item = await probes.attr(summary, "data-menu-item")
        if menu_item:
            key = css_string(menu_item)
            external = page.locator(
                f"div.sidebar[data-menu-item={key}], nav[data-menu-item={key}]"
            ).first
            if await probes.exists(external):
                log.debug(f'Details pattern with external drawer data-menu-item="{menu_item}"')
                return MobileNavDescriptor(
                    summary,
                    external,
                    MobileNavPattern.DETAILS_SUMMARY,
                    12,
                    [f'<details> with external drawer (data-menu-item="{menu_item}")'],
                )

        log.debug(f"Found {selector} and <summary> but no drawer")
    return None


async def bootstrap_navbar_pattern(page, log: logging.Logger) -> Optional[MobileNavDescriptor]:
    trigger = page.locator(BOOTSTRAP_TRIGGER_SELECTOR).first
    if not await probes.exists(trigger) or not await probes.is_rendered(trigger):
        return None

    controls = await probes.attr(trigger, "aria-controls")
    if not controls:
        return None

    drawer = page.locator(f"div.navbar-collapse[id={css_string(controls)}]").first
    if not await probes.exists(drawer):
        return None

    return MobileNavDescriptor(
        trigger,
        drawer,
        MobileNavPattern.BOOTSTRAP_NAVBAR,
        10,
        [f'Bootstrap navbar: button.navbar-toggler[aria-controls="{controls}"] -> div#{controls}.navbar-collapse'],
    )


async def data_attribute_pattern(page, log: logging.Logger) -> Optional[MobileNavDescriptor]:
    for selector in DATA_TRIGGER_SELECTORS:
        trigger = page.locator(selector).first
        if not await probes.exists(trigger):
            continue

        trigger_classes = (await probes.attr(trigger, "class") or "").lower()
        if "close" in trigger_classes or "dismiss" in trigger_classes:
            continue
        if not await probes.is_rendered(trigger):
            continue

        if await probes.attr(trigger, "data-hamburger-menu-open") is not None:
            for drawer_selector in HAMBURGER_DRAWER_SELECTORS:
                drawer = page.locator(drawer_selector).first
                if await probes.exists(drawer):
                    return MobileNavDescriptor(
                        trigger,
                        drawer,
                        MobileNavPattern.DATA_ATTRIBUTE,
                        10,
                        ["Matched data-hamburger-menu-open/data-hamburger-menu pattern"],
                    )

        target = await probes.attr(trigger, "data-targets") or await probes.attr(trigger, "data-toggle")
        if not target:
            continue

        key = css_string(target)
        for drawer_selector in (
            f"[data-type={key}]",
            f"[data-drawer={key}]",
            f"[data-hamburger-menu={key}]",
            f"[id={key}]",
        ):
            drawer = page.locator(drawer_selector).first
            if not await probes.exists(drawer):
                continue

            score = 8
            reasons = [f'Matched data-targets="{target}"']
            if "hamburger" in target.lower():
                score += 3
                reasons.append('Uses "hamburger" naming')
            drawer_classes = (await probes.attr(drawer, "class") or "").lower()
            if any(word in drawer_classes for word in ("nav", "menu", "drawer")):
                score += 2
                reasons.append("Drawer has nav/menu classes")

            return MobileNavDescriptor(trigger, drawer, MobileNavPattern.DATA_ATTRIBUTE, score, reasons)
    return None


async def drawer_component_pattern(page, log: logging.Logger) -> Optional[MobileNavDescriptor]:
    for selector in DRAWER_COMPONENT_SELECTORS:
        drawer = page.locator(selector).first
        if not await probes.exists(drawer):
            continue

        for trigger_selector, enclosing_button in DRAWER_TRIGGER_SELECTORS:
            trigger = page.locator(trigger_selector).first
            if not await probes.exists(trigger):
                continue
            if enclosing_button:
                trigger = trigger.locator("xpath=ancestor-or-self::button[1]")
            if not await probes.exists(trigger) or not await probes.is_rendered(trigger):
                continue

            score = 7
            reasons = ["Found drawer component"]
            try:
                drawer_tag = await probes.tag_name(drawer)
            except PlaywrightError as e:
                log.debug(f"Drawer {selector} unreadable, skipping: {e}")
                break
            if "-" in drawer_tag:
                score += 4
                reasons.append("Uses custom web component")
            if await probes.attr(drawer, "role") == "dialog":
                score += 3
                reasons.append('Has role="dialog"')

            return MobileNavDescriptor(trigger, drawer, MobileNavPattern.DRAWER_COMPONENT, score, reasons)
    return None


async def class_heuristic_pattern(page, log: logging.Logger) -> Optional[MobileNavDescriptor]:
    for trigger_selector in CLASS_TRIGGER_SELECTORS:
        trigger = page.locator(trigger_selector).first
        if not await probes.exists(trigger) or not await probes.is_rendered(trigger):
            continue

        for drawer_selector in CLASS_DRAWER_SELECTORS:
            drawer = page.locator(drawer_selector).first
            if not await probes.exists(drawer):
                continue

            score = 6
            reasons = ["Matched common class patterns"]

            try:
                trigger_tag = await probes.tag_name(trigger)
                drawer_tag = await probes.tag_name(drawer)
                link_count = await drawer.locator("a").count()
            except PlaywrightError as e:
                log.debug(f"Candidate {trigger_selector} / {drawer_selector} unreadable, skipping: {e}")
                continue

            if trigger_tag in ("button", "summary"):
                score += 2
                reasons.append(f"Trigger is <{trigger_tag}>")

            if drawer_tag == "nav":
                score += 2
                reasons.append("Drawer is <nav>")

            if link_count > 3:
                score += 2
                reasons.append(f"Contains {link_count} links")

            return MobileNavDescriptor(trigger, drawer, MobileNavPattern.CLASS_HEURISTIC, score, reasons)
    return None


MOBILE_NAV_STRATEGIES = [
    details_summary_pattern,
    bootstrap_navbar_pattern,
    data_attribute_pattern,
    drawer_component_pattern,
    class_heuristic_pattern,
]


async def find_mobile_nav(page, log: Optional[logging.Logger] = None) -> Optional[MobileNavDescriptor]:
    """
    Find the mobile navigation trigger and drawer.

    Returns:
        MobileNavDescriptor scoring above the confidence floor, or None
    """
    return await first_match(
        page,
        MOBILE_NAV_STRATEGIES,
        log or logger,
        accept=lambda result: result.score > MOBILE_NAV_CONFIDENCE_FLOOR,
    )
