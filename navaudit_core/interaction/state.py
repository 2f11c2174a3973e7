"""
Open/closed state of a mobile drawer.

Drawer implementations disagree on how they expose state, so the check is
chosen by the descriptor's pattern.
"""

import logging
import re

from playwright.async_api import Error as PlaywrightError

from ..config import config
from ..dom import probes
from ..dom.probes import DETAILS_OPEN_JS
from ..regions.mobile_nav import MobileNavDescriptor, MobileNavPattern

logger = logging.getLogger(__name__)

# Whole class tokens or -/_ suffixes: "open", "is-open", "menu-drawer--open", "show"
OPEN_CLASS_TOKEN_RE = re.compile(r"(?:^|[-_])(?:open|opened|active|show|expanded)$", re.I)


def has_open_class(classes: str) -> bool:
    return any(OPEN_CLASS_TOKEN_RE.search(token) for token in (classes or "").split())


def is_offscreen(box, viewport_width: int) -> bool:
    """Off-canvas: translated past the left edge or beyond the right edge"""
    return box["x"] < 0 or box["x"] >= viewport_width


async def details_is_open(descriptor: MobileNavDescriptor) -> bool:
    """
    Live drawer visibility first; external drawers can disagree with
    details[open]. The attribute is only consulted when visibility can't be read.
    """
    try:
        return await descriptor.drawer.is_visible()
    except PlaywrightError:
        details = descriptor.trigger.locator("xpath=ancestor::details[1]")
        try:
            return bool(await details.evaluate(DETAILS_OPEN_JS, timeout=config.query_timeout_ms))
        except PlaywrightError:
            return False


async def explicit_state_is_open(descriptor: MobileNavDescriptor) -> bool:
    # Class tokens first: some themes leave aria-hidden stale
    classes = await probes.attr(descriptor.drawer, "class") or ""
    if has_open_class(classes):
        return True

    aria_hidden = await probes.attr(descriptor.drawer, "aria-hidden")
    if aria_hidden == "true":
        return False
    if aria_hidden == "false":
        return True

    expanded = await probes.attr(descriptor.trigger, "aria-expanded")
    if expanded == "true":
        return True
    if expanded == "false":
        return False

    if not await probes.is_visible(descriptor.drawer):
        return False
    box = await probes.box(descriptor.drawer)
    if box and is_offscreen(box, probes.viewport_size(descriptor.page)["width"]):
        return False
    return True


IS_OPEN_STRATEGIES = {
    MobileNavPattern.DETAILS_SUMMARY: details_is_open,
    MobileNavPattern.BOOTSTRAP_NAVBAR: explicit_state_is_open,
    MobileNavPattern.DATA_ATTRIBUTE: explicit_state_is_open,
    MobileNavPattern.DRAWER_COMPONENT: explicit_state_is_open,
    MobileNavPattern.CLASS_HEURISTIC: explicit_state_is_open,
}


async def is_mobile_nav_open(descriptor: MobileNavDescriptor) -> bool:
    try:
        return await IS_OPEN_STRATEGIES[descriptor.pattern](descriptor)
    except Exception as e:
        logger.debug(f"Open-state check failed ({descriptor.pattern.value}): {e}")
        return False
