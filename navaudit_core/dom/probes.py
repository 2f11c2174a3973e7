"""
DOM probes - small, time-bounded reads over Playwright locators

Attribute, text and geometry reads are null-safe (a Playwright error yields
None). Script-based probes let errors propagate so that the caller can
decide whether a detached node means "skip this candidate".
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from playwright.async_api import Error as PlaywrightError

from ..config import config

logger = logging.getLogger(__name__)


TAG_NAME_JS = "(el) => el.tagName.toLowerCase()"

IS_RENDERED_JS = """
(el) => {
    const styles = window.getComputedStyle(el);
    const rect = el.getBoundingClientRect();
    return styles.display !== 'none'
        && styles.visibility !== 'hidden'
        && parseFloat(styles.opacity || '1') > 0
        && rect.width > 0
        && rect.height > 0;
}
"""

# Top-level links only: anything inside a hidden dropdown/submenu is skipped.
VISIBLE_LINKS_JS = """
(root) => {
    const hidden = (styles) =>
        styles.display === 'none' ||
        styles.visibility === 'hidden' ||
        parseFloat(styles.opacity || '1') === 0;
    return Array.from(root.querySelectorAll('a'))
        .filter((link) => {
            const rect = link.getBoundingClientRect();
            if (rect.width <= 0 || rect.height <= 0) return false;
            if (hidden(window.getComputedStyle(link))) return false;
            let parent = link.parentElement;
            while (parent && parent !== root) {
                if (hidden(window.getComputedStyle(parent))) return false;
                parent = parent.parentElement;
            }
            return true;
        })
        .map((link) => ({
            href: link.getAttribute('href') || '',
            text: (link.textContent || '').trim(),
        }));
}
"""

IN_HEADER_JS = """
(el) => !!(el.closest('header') || el.closest('[class*="header"]'))
"""

DETAILS_OPEN_JS = "(el) => !!el.open"

SCROLL_HEIGHT_JS = "() => (document.body ? document.body.scrollHeight : 0)"


@dataclass
class LinkSummary:
    """A visible link inside a region"""
    href: str
    text: str


async def exists(locator) -> bool:
    try:
        return await locator.count() > 0
    except PlaywrightError:
        return False


async def is_visible(locator) -> bool:
    try:
        return await locator.is_visible()
    except PlaywrightError:
        return False


async def is_rendered(locator) -> bool:
    """
    Visible per computed style and geometry.

    Playwright's visibility already requires a non-empty box and no
    visibility:hidden; opacity:0 is checked on top of that.
    """
    try:
        if not await locator.is_visible():
            return False
        return bool(await locator.evaluate(IS_RENDERED_JS, timeout=config.query_timeout_ms))
    except PlaywrightError:
        return False


async def attr(locator, name: str) -> Optional[str]:
    try:
        return await locator.get_attribute(name, timeout=config.query_timeout_ms)
    except PlaywrightError:
        return None


async def text(locator) -> str:
    try:
        return (await locator.text_content(timeout=config.query_timeout_ms)) or ""
    except PlaywrightError:
        return ""


async def box(locator) -> Optional[Dict[str, float]]:
    try:
        return await locator.bounding_box(timeout=config.query_timeout_ms)
    except PlaywrightError:
        return None


async def is_enabled(locator) -> bool:
    try:
        return await locator.is_enabled(timeout=config.query_timeout_ms)
    except PlaywrightError:
        return False


async def tag_name(locator) -> str:
    return await locator.evaluate(TAG_NAME_JS, timeout=config.query_timeout_ms)


async def visible_links(locator) -> List[LinkSummary]:
    rows = await locator.evaluate(VISIBLE_LINKS_JS, timeout=config.query_timeout_ms)
    return [LinkSummary(href=r.get("href", ""), text=r.get("text", "")) for r in rows or []]


async def is_in_header(locator) -> bool:
    return bool(await locator.evaluate(IN_HEADER_JS, timeout=config.query_timeout_ms))


async def scroll_height(page) -> Optional[float]:
    try:
        return await page.evaluate(SCROLL_HEIGHT_JS)
    except PlaywrightError:
        return None


def viewport_size(page) -> Dict[str, int]:
    """Current viewport, falling back to the configured mobile size"""
    size = page.viewport_size
    if not size:
        return config.viewport(mobile=True)
    return size
