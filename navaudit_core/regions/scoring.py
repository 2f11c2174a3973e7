"""
Region Scoring - additive scoring rules for footer and navigation candidates

Pure functions over signals gathered from the page, so every rule can be
checked without a browser. Each rule contributes a signed integer and a
reason string ("+30: Semantic <footer> element").
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..dom.probes import LinkSummary

# Confidence floors: the winner must score strictly above these
REGION_CONFIDENCE_FLOOR = 0
MOBILE_NAV_CONFIDENCE_FLOOR = 5

COPYRIGHT_RE = re.compile(r"©|copyright", re.I)
FOOTER_KEYWORDS_RE = re.compile(r"(privacy|terms|contact|about|shipping|returns)", re.I)
POLICY_RE = re.compile(r"(privacy|terms)", re.I)
CONTACT_RE = re.compile(r"(contact|about)", re.I)
SOCIAL_RE = re.compile(r"(facebook|twitter|instagram|linkedin|youtube)", re.I)
FOOTER_WORD_RE = re.compile(r"\bfooter\b", re.I)
SITE_FOOTER_RE = re.compile(r"site-footer|page-footer", re.I)
NOT_FOOTER_RE = re.compile(r"header|nav|main|article", re.I)

NAV_POSITIVE_CLASS_RE = re.compile(r"header.*inline|primary.*nav|main.*nav(?!-mobile)", re.I)
NAV_NEGATIVE_CLASS_RE = re.compile(r"mobile|drawer|utility|footer|announcement", re.I)
NAV_MAIN_MENU_CLASS_RE = re.compile(r"header.*main.*menu", re.I)
NAV_ARIA_MAIN_RE = re.compile(r"main|primary", re.I)

CATEGORY_HREF_RE = re.compile(r"/collections/|/products/|/pages/[^/]+-collection", re.I)
UTILITY_HREF_RE = re.compile(r"/account|/cart|/search|/login|store.locator|help.center|wishlist|faq", re.I)
UTILITY_TEXT_RE = re.compile(
    r"^(account|cart|bag|search|login|sign in|help|wishlist|store locator|faq|browse products|find a store)$",
    re.I,
)


@dataclass
class FooterSignals:
    """Everything the footer rules look at"""
    tag: str
    role: Optional[str] = None
    text: str = ""
    classes: str = ""
    element_id: str = ""
    top: Optional[float] = None
    scroll_height: Optional[float] = None
    viewport_height: Optional[float] = None


@dataclass
class NavigationSignals:
    """Everything the navigation rules look at"""
    classes: str = ""
    aria_label: Optional[str] = None
    in_header: bool = False
    top: Optional[float] = None
    links: List[LinkSummary] = field(default_factory=list)

    @property
    def link_count(self) -> int:
        return len(self.links)


def count_category_links(links: List[LinkSummary]) -> int:
    return sum(1 for link in links if CATEGORY_HREF_RE.search(link.href or ""))


def count_utility_links(links: List[LinkSummary]) -> int:
    count = 0
    for link in links:
        label = (link.text or "").strip().lower()
        # Empty text links (logos, icons) count as utility
        if not label:
            count += 1
        elif UTILITY_HREF_RE.search(link.href or "") or UTILITY_TEXT_RE.match(label):
            count += 1
    return count


def is_near_bottom(top: Optional[float], scroll_height: Optional[float], fraction: float) -> bool:
    if top is None or not scroll_height:
        return False
    return (scroll_height - top) < scroll_height * fraction


def looks_like_footer(text: str, top: Optional[float], scroll_height: Optional[float]) -> bool:
    """Content validator: copyright, or footer keywords in the bottom 30% of the page"""
    if COPYRIGHT_RE.search(text or ""):
        return True
    return bool(FOOTER_KEYWORDS_RE.search(text or "")) and is_near_bottom(top, scroll_height, 0.3)


def score_footer(signals: FooterSignals) -> Tuple[int, List[str]]:
    score = 0
    reasons: List[str] = []

    def add(points: int, why: str) -> None:
        nonlocal score
        score += points
        reasons.append(f"{points:+d}: {why}")

    if signals.tag == "footer":
        add(30, "Semantic <footer> element")
    if signals.role == "contentinfo":
        add(25, "ARIA role='contentinfo'")

    body = signals.text or ""
    if COPYRIGHT_RE.search(body):
        add(20, "Contains copyright")
    if POLICY_RE.search(body):
        add(15, "Contains policy links")
    if CONTACT_RE.search(body):
        add(10, "Contains contact/about")
    if SOCIAL_RE.search(body):
        add(5, "Contains social media")

    if is_near_bottom(signals.top, signals.scroll_height, 0.2):
        add(15, "Located near bottom of page")
    elif is_near_bottom(signals.top, signals.scroll_height, 0.3):
        add(10, "Located in bottom third of page")

    if FOOTER_WORD_RE.search(signals.classes):
        add(10, "Class contains 'footer'")
    if SITE_FOOTER_RE.search(signals.classes):
        add(5, "Class indicates site-level footer")
    if FOOTER_WORD_RE.search(signals.element_id):
        add(8, "ID contains 'footer'")

    if NOT_FOOTER_RE.search(signals.classes):
        add(-30, "Class suggests not footer")
    if NOT_FOOTER_RE.search(signals.element_id):
        add(-30, "ID suggests not footer")

    if signals.top is not None and signals.viewport_height:
        if signals.top < signals.viewport_height * 0.3:
            add(-20, "Located at top of page")

    return score, reasons


def score_navigation(signals: NavigationSignals) -> Tuple[int, List[str]]:
    score = 0
    reasons: List[str] = []

    def add(points: int, why: str) -> None:
        nonlocal score
        score += points
        reasons.append(f"{points:+d}: {why}")

    link_count = signals.link_count
    classes = signals.classes or ""
    utility_count = count_utility_links(signals.links)
    category_count = count_category_links(signals.links)

    if signals.in_header:
        add(20, "Inside <header>")
    else:
        add(-10, "Not in <header> (likely footer)")

    if signals.aria_label and NAV_ARIA_MAIN_RE.search(signals.aria_label):
        add(10, "ARIA label indicates main nav")

    if NAV_POSITIVE_CLASS_RE.search(classes) and not NAV_NEGATIVE_CLASS_RE.search(classes):
        add(10, "Class indicates main navigation")

    # "header__main-menu" is sometimes the utility bar
    if NAV_MAIN_MENU_CLASS_RE.search(classes) and utility_count >= link_count * 0.8:
        add(-15, '"main-menu" class but mostly utility links')

    if signals.top is not None:
        if signals.top < 200:
            add(10, "Visible in top 200px")
        elif signals.top > 1000:
            add(-10, "Located far down page (likely footer)")

    if 5 <= link_count <= 15:
        add(5, f"Optimal link count ({link_count})")

    if NAV_NEGATIVE_CLASS_RE.search(classes):
        add(-15, "Class suggests not main nav")

    if link_count > 50:
        add(-15, f"Too many links ({link_count})")
    if 0 < link_count < 3:
        add(-15, f"Too few links ({link_count})")

    if 7 <= link_count <= 12:
        add(10, f"Ideal link count ({link_count})")

    if category_count >= 3:
        add(10, f"Has {category_count} category links")
    if link_count > 0 and category_count / link_count > 0.5:
        add(10, f"Majority are category links ({round(category_count / link_count * 100)}%)")

    if link_count > 0 and utility_count == link_count:
        add(-20, "All links are utility links")

    return score, reasons
