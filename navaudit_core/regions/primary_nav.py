"""
Primary navigation finder

Strategy order:
1. Known storefront class patterns (Dawn-style inline menu, main/primary nav)
2. Scored pass over every nav-like element
3. aria-label containing "main"/"primary"
4. Any nav-shaped element inside the header
"""

import logging
from typing import List, Optional

from ..dom import probes
from .candidate import RegionCandidate
from .pipeline import first_match, first_rendered, pick_winner
from .scoring import REGION_CONFIDENCE_FLOOR, NavigationSignals, score_navigation

logger = logging.getLogger(__name__)

KNOWN_NAV_SELECTORS = [
    ".header__inline-menu:visible",
    ".main-menu:not(.main-menu-mobile):visible",
    '[class*="primary-nav"]:visible',
    '[class*="main-nav"]:not([class*="mobile"]):visible',
]

NAV_CANDIDATES_SELECTOR = (
    'nav, [role="navigation"], .shop-menu, .main-navigation, .primary-nav, sidemenu, '
    '.thb-full-menu, [class*="header"] [class*="menu"]:not([class*="mobile"]):not([class*="drawer"])'
)

ARIA_NAV_SELECTORS = [
    'nav[aria-label*="main" i]:visible, nav[aria-label*="primary" i]:visible',
]

HEADER_NAV_SELECTORS = [
    'header nav:visible, header [class*="menu"]:not([class*="mobile"]):visible',
]

MIN_NAV_LINKS = 2


async def known_class_navigation(page, log: logging.Logger):
    for selector in KNOWN_NAV_SELECTORS:
        node = page.locator(selector).first
        if not await probes.exists(node) or not await probes.is_rendered(node):
            continue
        try:
            links = await probes.visible_links(node)
        except Exception as e:
            log.debug(f"Navigation fast path {selector} unreadable: {e}")
            continue
        if len(links) >= MIN_NAV_LINKS:
            log.debug(f"Navigation fast path: {selector} ({len(links)} links)")
            return node
    return None


async def _navigation_candidate(node) -> Optional[RegionCandidate]:
    if not await probes.is_rendered(node):
        return None
    links = await probes.visible_links(node)
    # Zero or one link is not a navigation
    if len(links) <= 1:
        return None
    classes = await probes.attr(node, "class") or ""
    aria_label = await probes.attr(node, "aria-label")
    box = await probes.box(node)
    signals = NavigationSignals(
        classes=classes,
        aria_label=aria_label,
        in_header=await probes.is_in_header(node),
        top=box["y"] if box else None,
        links=links,
    )
    score, reasons = score_navigation(signals)
    return RegionCandidate(
        node=node,
        score=score,
        reasons=reasons,
        link_count=signals.link_count,
        classes=classes,
        aria_label=aria_label,
    )


async def score_navigation_candidates(page, log: logging.Logger) -> List[RegionCandidate]:
    candidates: List[RegionCandidate] = []
    for node in await page.locator(NAV_CANDIDATES_SELECTOR).all():
        try:
            candidate = await _navigation_candidate(node)
        except Exception as e:
            log.debug(f"Skipping navigation candidate: {e}")
            continue
        if candidate is None:
            continue
        candidates.append(candidate)
        log.debug(f"Nav #{len(candidates)}: {candidate.describe()}")
        for reason in candidate.reasons:
            log.debug(f"  {reason}")
    return candidates


async def scored_navigation(page, log: logging.Logger):
    winner = pick_winner(await score_navigation_candidates(page, log), REGION_CONFIDENCE_FLOOR)
    return winner.node if winner else None


async def aria_label_navigation(page, log: logging.Logger):
    return await first_rendered(page, ARIA_NAV_SELECTORS)


async def header_navigation(page, log: logging.Logger):
    return await first_rendered(page, HEADER_NAV_SELECTORS)


NAVIGATION_STRATEGIES = [
    known_class_navigation,
    scored_navigation,
    aria_label_navigation,
    header_navigation,
]


async def find_main_navigation(page, log: Optional[logging.Logger] = None):
    """
    Find the primary (desktop) navigation.

    Returns:
        Locator of the navigation, or None
    """
    return await first_match(page, NAVIGATION_STRATEGIES, log or logger)
