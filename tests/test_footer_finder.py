"""
Tests for the footer finder against an in-memory page
"""

import logging

import pytest

from mocks.fake_page import FakeElement, FakePage
from navaudit_core.regions.footer import (
    ARIA_FOOTER_SELECTORS,
    CONTENTINFO_SELECTOR,
    FOOTER_CANDIDATES_SELECTOR,
    KNOWN_FOOTER_SELECTORS,
    SEMANTIC_FOOTER_SELECTOR,
    find_footer,
    validate_footer,
)

pytestmark = pytest.mark.asyncio


def _footer(text="© 2024 Example Store", y=1900, **kwargs):
    return FakeElement(tag="footer", text=text, box={"x": 0, "y": y, "width": 1280, "height": 100}, **kwargs)


class TestFastPaths:
    """Semantic, ARIA and class fast paths"""

    async def test_semantic_footer_beats_link_dense_decoy(self):
        page = FakePage(width=1280, height=720)
        footer = _footer(name="real-footer")
        decoy = FakeElement(
            tag="div",
            attrs={"class": "footer-links"},
            text="Privacy Terms Contact About Shipping Returns Facebook Instagram",
            box={"x": 0, "y": 1950, "width": 1280, "height": 40},
            name="decoy",
        )
        page.add(SEMANTIC_FOOTER_SELECTOR, footer)
        page.add(KNOWN_FOOTER_SELECTORS[-1], decoy)
        page.add(FOOTER_CANDIDATES_SELECTOR, footer, decoy)

        result = await find_footer(page)

        assert result is not None
        assert await result.text_content() == footer.text
        assert FOOTER_CANDIDATES_SELECTOR not in page.queried

    async def test_skips_semantic_footer_without_footer_content(self):
        page = FakePage(width=1280, height=720)
        article_footer = _footer(text="Posted by admin", y=300, name="article-footer")
        site_footer = _footer(name="site-footer")
        page.add(SEMANTIC_FOOTER_SELECTOR, article_footer, site_footer)

        result = await find_footer(page)

        assert await result.text_content() == site_footer.text

    async def test_hidden_semantic_footer_falls_through_to_contentinfo(self):
        page = FakePage(width=1280, height=720)
        page.add(SEMANTIC_FOOTER_SELECTOR, _footer(visible=False))
        contentinfo = FakeElement(tag="div", attrs={"role": "contentinfo"}, text="Copyright Example")
        page.add(CONTENTINFO_SELECTOR, contentinfo)

        result = await find_footer(page)

        assert await result.get_attribute("role") == "contentinfo"

    async def test_known_class_uses_last_match(self):
        page = FakePage(width=1280, height=720)
        first = FakeElement(text="© nav promo", name="first")
        last = FakeElement(text="© 2024 Store", name="last")
        page.add(KNOWN_FOOTER_SELECTORS[0], first, last)

        result = await find_footer(page)

        assert await result.text_content() == "© 2024 Store"

    async def test_aria_label_fallback_skips_hidden_match(self):
        page = FakePage(width=1280, height=720)
        hidden = FakeElement(attrs={"aria-label": "Footer promo"}, visible=False, name="hidden")
        shown = FakeElement(attrs={"aria-label": "Footer links"}, name="shown")
        page.add(ARIA_FOOTER_SELECTORS[0], hidden, shown)

        result = await find_footer(page)

        assert await result.get_attribute("aria-label") == "Footer links"


class TestScoredPass:
    """Scored candidates when no fast path applies"""

    async def test_footer_id_near_bottom_wins(self):
        page = FakePage(width=1280, height=720, scroll_height=2000)
        header_strip = FakeElement(
            attrs={"class": "header-footer-links"},
            text="Contact",
            box={"x": 0, "y": 0, "width": 1280, "height": 40},
        )
        bottom = FakeElement(
            attrs={"id": "footer"},
            text="Privacy policy | Terms of service",
            box={"x": 0, "y": 1900, "width": 1280, "height": 100},
            name="bottom",
        )
        page.add(FOOTER_CANDIDATES_SELECTOR, header_strip, bottom)

        result = await find_footer(page)

        assert await result.get_attribute("id") == "footer"

    async def test_detached_candidate_is_skipped(self):
        page = FakePage(width=1280, height=720, scroll_height=2000)
        broken = FakeElement(detached=True)
        good = FakeElement(
            attrs={"id": "footer"},
            text="Privacy",
            box={"x": 0, "y": 1900, "width": 1280, "height": 100},
        )
        page.add(FOOTER_CANDIDATES_SELECTOR, broken, good)

        result = await find_footer(page)

        assert await result.get_attribute("id") == "footer"

    async def test_no_positive_candidate_returns_none(self):
        page = FakePage(width=1280, height=720)
        page.add(
            FOOTER_CANDIDATES_SELECTOR,
            FakeElement(attrs={"class": "main-nav"}, text="Shop", box={"x": 0, "y": 10, "width": 100, "height": 30}),
        )
        assert await find_footer(page) is None


class TestEmptyPage:
    """Absence is None, never an exception"""

    async def test_empty_page(self):
        assert await find_footer(FakePage()) is None

    async def test_injected_logger_receives_diagnostics(self, caplog):
        log = logging.getLogger("footer-test")
        with caplog.at_level(logging.DEBUG, logger="footer-test"):
            page = FakePage(width=1280, height=720)
            page.add(SEMANTIC_FOOTER_SELECTOR, _footer())
            await find_footer(page, log)
        assert any("Footer fast path" in r.message for r in caplog.records)


class TestValidateFooter:
    async def test_keywords_in_bottom_region(self):
        page = FakePage(scroll_height=2000)
        page.add("x", FakeElement(text="Shipping & returns", box={"x": 0, "y": 1800, "width": 10, "height": 10}))
        assert await validate_footer(page, page.locator("x").first)

    async def test_missing_node_is_not_a_footer(self):
        page = FakePage()
        assert not await validate_footer(page, page.locator("missing").first)
