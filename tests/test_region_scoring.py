"""
Tests for region scoring rules (pure functions, no browser)
"""

import pytest

from navaudit_core.dom.probes import LinkSummary
from navaudit_core.regions.mobile_nav import css_string
from navaudit_core.regions.scoring import (
    FooterSignals,
    NavigationSignals,
    count_category_links,
    count_utility_links,
    is_near_bottom,
    looks_like_footer,
    score_footer,
    score_navigation,
)


def _links(*pairs):
    return [LinkSummary(href=href, text=text) for href, text in pairs]


def _collections(n):
    return _links(*[(f"/collections/c{i}", f"Category {i}") for i in range(n)])


class TestFooterScoring:
    """Footer rules"""

    def test_semantic_footer_with_copyright_near_bottom(self):
        signals = FooterSignals(
            tag="footer",
            text="© 2024 Shop. Privacy Policy. Contact us. Instagram",
            top=1900,
            scroll_height=2000,
            viewport_height=667,
        )
        score, reasons = score_footer(signals)
        # 30 + 20 + 15 + 10 + 5 + 15
        assert score == 95
        assert reasons[0] == "+30: Semantic <footer> element"
        assert "+15: Located near bottom of page" in reasons

    def test_copyright_strictly_increases_score(self):
        base = FooterSignals(tag="div", text="Privacy | Terms", top=1500, scroll_height=2000, viewport_height=667)
        with_copyright = FooterSignals(
            tag="div", text="Privacy | Terms © 2024", top=1500, scroll_height=2000, viewport_height=667
        )
        assert score_footer(with_copyright)[0] > score_footer(base)[0]

    def test_copyright_increase_holds_for_negative_candidates(self):
        base = FooterSignals(tag="div", classes="site-header", text="", top=0, viewport_height=667)
        marked = FooterSignals(tag="div", classes="site-header", text="Copyright", top=0, viewport_height=667)
        assert score_footer(marked)[0] > score_footer(base)[0]

    def test_header_classes_and_top_position_penalised(self):
        signals = FooterSignals(tag="div", classes="header-links", text="Contact", top=10, viewport_height=667)
        score, reasons = score_footer(signals)
        assert score == 10 - 30 - 20
        assert "-30: Class suggests not footer" in reasons
        assert "-20: Located at top of page" in reasons

    def test_bottom_third_scores_less_than_bottom_fifth(self):
        near = FooterSignals(tag="div", top=1700, scroll_height=2000)
        third = FooterSignals(tag="div", top=1500, scroll_height=2000)
        assert score_footer(near)[0] == 15
        assert score_footer(third)[0] == 10

    def test_footer_class_and_id(self):
        signals = FooterSignals(tag="div", classes="site-footer footer", element_id="footer")
        score, _ = score_footer(signals)
        assert score == 10 + 5 + 8

    def test_missing_geometry_is_neutral(self):
        score, reasons = score_footer(FooterSignals(tag="div"))
        assert score == 0
        assert reasons == []


class TestFooterValidator:
    """Content validation used by the fast paths"""

    def test_copyright_anywhere(self):
        assert looks_like_footer("All rights reserved © 2024", top=0, scroll_height=2000)

    def test_keywords_need_bottom_position(self):
        assert looks_like_footer("Privacy and shipping", top=1500, scroll_height=2000)
        assert not looks_like_footer("Privacy and shipping", top=100, scroll_height=2000)

    def test_plain_text_rejected(self):
        assert not looks_like_footer("Welcome to the shop", top=1900, scroll_height=2000)

    def test_near_bottom_without_geometry(self):
        assert not is_near_bottom(None, 2000, 0.3)
        assert not is_near_bottom(100, None, 0.3)
        assert not is_near_bottom(100, 0, 0.3)


class TestLinkCounting:
    """Category and utility link classification"""

    def test_category_links(self):
        links = _links(("/collections/shoes", "Shoes"), ("/products/x", "X"), ("/pages/about", "About"))
        assert count_category_links(links) == 2

    def test_utility_links_by_href_text_and_empty_label(self):
        links = _links(
            ("/account", "My Account"),
            ("/x", "Cart"),
            ("/", ""),
            ("/collections/all", "Shop all"),
        )
        assert count_utility_links(links) == 3


class TestNavigationScoring:
    """Navigation rules"""

    def test_header_inline_menu_with_category_links(self):
        signals = NavigationSignals(
            classes="header__inline-menu",
            in_header=True,
            top=40,
            links=_collections(9),
        )
        score, reasons = score_navigation(signals)
        # header 20, class 10, top 10, 5-15 links 5, 7-12 links 10, >=3 category 10, majority 10
        assert score == 75
        assert "+20: Inside <header>" in reasons
        assert "+10: Ideal link count (9)" in reasons

    def test_utility_bar_penalised(self):
        signals = NavigationSignals(
            classes="header__main-menu",
            in_header=True,
            top=10,
            links=_links(("/account", "Account"), ("/cart", "Cart"), ("/search", "Search")),
        )
        score, reasons = score_navigation(signals)
        assert '-15: "main-menu" class but mostly utility links' in reasons
        assert "-20: All links are utility links" in reasons
        assert score < 0

    def test_footer_navigation_scores_below_header_navigation(self):
        header = NavigationSignals(in_header=True, top=50, links=_collections(8))
        footer = NavigationSignals(classes="footer-menu", in_header=False, top=2400, links=_collections(8))
        assert score_navigation(header)[0] > score_navigation(footer)[0]

    def test_too_many_links(self):
        signals = NavigationSignals(in_header=True, top=50, links=_links(*[("/x", "x")] * 60))
        _, reasons = score_navigation(signals)
        assert "-15: Too many links (60)" in reasons

    @pytest.mark.parametrize("classes", ["mobile-nav", "menu-drawer", "utility-nav", "announcement-bar"])
    def test_negative_class_keywords(self, classes):
        _, reasons = score_navigation(NavigationSignals(classes=classes, in_header=True, links=_collections(4)))
        assert "-15: Class suggests not main nav" in reasons


class TestCssString:
    """Attribute values quoted for selectors"""

    def test_quotes_and_backslashes_escaped(self):
        assert css_string('a"b\\c') == '"a\\"b\\\\c"'

    def test_plain_value(self):
        assert css_string("navbarNav") == '"navbarNav"'
