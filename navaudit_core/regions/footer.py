"""
Footer finder

Strategy order:
1. Semantic <footer> elements (DOM order), validated by content
2. ARIA role="contentinfo", validated by content
3. Known class patterns, last match on the page, validated by content
4. Scored pass over every footer-ish element
5. Relaxed aria-label match

Returns None when nothing qualifies.
"""

import logging
from typing import List, Optional

from ..dom import probes
from .candidate import RegionCandidate
from .pipeline import first_match, first_rendered, pick_winner
from .scoring import REGION_CONFIDENCE_FLOOR, FooterSignals, looks_like_footer, score_footer

logger = logging.getLogger(__name__)

SEMANTIC_FOOTER_SELECTOR = "footer"
CONTENTINFO_SELECTOR = '[role="contentinfo"]'

KNOWN_FOOTER_SELECTORS = [
    ".site-footer:visible",
    ".page-footer:visible",
    ".footer:visible",
    "[class*='footer']:visible",
]

FOOTER_CANDIDATES_SELECTOR = 'footer, [role="contentinfo"], [class*="footer"], [id*="footer"]'

ARIA_FOOTER_SELECTORS = ['[aria-label*="footer" i]']


async def validate_footer(page, node) -> bool:
    """True if the element reads like a site footer"""
    try:
        body = await probes.text(node)
        box = await probes.box(node)
        top = box["y"] if box else None
        height = await probes.scroll_height(page)
        return looks_like_footer(body, top, height)
    except Exception:
        return False


async def _validated(page, node) -> bool:
    return await probes.is_rendered(node) and await validate_footer(page, node)


async def semantic_footer(page, log: logging.Logger):
    footers = page.locator(SEMANTIC_FOOTER_SELECTOR)
    total = await footers.count()
    for i in range(total):
        node = footers.nth(i)
        if await _validated(page, node):
            log.debug(f"Footer fast path: <footer> #{i}")
            return node
    return None


async def contentinfo_footer(page, log: logging.Logger):
    node = page.locator(CONTENTINFO_SELECTOR).first
    if await probes.exists(node) and await _validated(page, node):
        log.debug("Footer fast path: role=contentinfo")
        return node
    return None


async def known_class_footer(page, log: logging.Logger):
    for selector in KNOWN_FOOTER_SELECTORS:
        node = page.locator(selector).last
        if await probes.exists(node) and await _validated(page, node):
            log.debug(f"Footer fast path: {selector}")
            return node
    return None


async def _footer_candidate(node, scroll_height, viewport_height) -> Optional[RegionCandidate]:
    if not await probes.is_rendered(node):
        return None
    classes = await probes.attr(node, "class") or ""
    box = await probes.box(node)
    signals = FooterSignals(
        tag=await probes.tag_name(node),
        role=await probes.attr(node, "role"),
        text=await probes.text(node),
        classes=classes,
        element_id=await probes.attr(node, "id") or "",
        top=box["y"] if box else None,
        scroll_height=scroll_height,
        viewport_height=viewport_height,
    )
    score, reasons = score_footer(signals)
    return RegionCandidate(
        node=node,
        score=score,
        reasons=reasons,
        classes=classes,
        aria_label=await probes.attr(node, "aria-label"),
    )


async def score_footer_candidates(page, log: logging.Logger) -> List[RegionCandidate]:
    scroll_height = await probes.scroll_height(page)
    viewport_height = probes.viewport_size(page).get("height")
    candidates: List[RegionCandidate] = []
    for node in await page.locator(FOOTER_CANDIDATES_SELECTOR).all():
        try:
            candidate = await _footer_candidate(node, scroll_height, viewport_height)
        except Exception as e:
            log.debug(f"Skipping footer candidate: {e}")
            continue
        if candidate is None:
            continue
        candidates.append(candidate)
        log.debug(f"Footer #{len(candidates)}: {candidate.describe()}")
        for reason in candidate.reasons:
            log.debug(f"  {reason}")
    return candidates


async def scored_footer(page, log: logging.Logger):
    winner = pick_winner(await score_footer_candidates(page, log), REGION_CONFIDENCE_FLOOR)
    return winner.node if winner else None


async def aria_label_footer(page, log: logging.Logger):
    return await first_rendered(page, ARIA_FOOTER_SELECTORS)


FOOTER_STRATEGIES = [
    semantic_footer,
    contentinfo_footer,
    known_class_footer,
    scored_footer,
    aria_label_footer,
]


async def find_footer(page, log: Optional[logging.Logger] = None):
    """
    Find the site footer.

    Args:
        page: Playwright page
        log: Optional logger for per-candidate diagnostics

    Returns:
        Locator of the footer, or None
    """
    return await first_match(page, FOOTER_STRATEGIES, log or logger)
