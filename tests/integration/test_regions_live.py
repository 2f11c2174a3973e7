"""
Region detection against real rendered fixture pages
"""

import pytest

from navaudit_core import classify, find_footer, find_main_navigation, find_mobile_nav
from navaudit_core.dom import probes
from navaudit_core.regions import MobileNavPattern

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]


async def test_semantic_footer_wins_over_link_farm(browser_page, fixture_html):
    await browser_page.set_content(fixture_html("footer_page.html"))

    footer = await find_footer(browser_page)

    assert footer is not None
    assert await probes.tag_name(footer) == "footer"
    assert await footer.get_attribute("id") == "site-footer"


async def test_inline_menu_is_primary_navigation(browser_page, fixture_html):
    await browser_page.set_viewport_size({"width": 1280, "height": 720})
    await browser_page.set_content(fixture_html("navigation_page.html"))

    nav = await find_main_navigation(browser_page)

    assert nav is not None
    assert "header__inline-menu" in await nav.get_attribute("class")
    assert len(await probes.visible_links(nav)) == 9


async def test_details_drawer_detected(browser_page, fixture_html):
    await browser_page.set_content(fixture_html("details_drawer_page.html"))

    descriptor = await classify("mobile-nav", browser_page)

    assert descriptor is not None
    assert descriptor.pattern is MobileNavPattern.DETAILS_SUMMARY
    assert await probes.tag_name(descriptor.trigger) == "summary"
    assert await descriptor.drawer.get_attribute("id") == "menu-drawer"


async def test_bootstrap_navbar_detected(browser_page, fixture_html):
    await browser_page.set_content(fixture_html("bootstrap_navbar_page.html"))

    descriptor = await find_mobile_nav(browser_page)

    assert descriptor.pattern is MobileNavPattern.BOOTSTRAP_NAVBAR
    assert descriptor.score == 10


async def test_blank_page_has_no_regions(browser_page):
    await browser_page.set_content("<html><body><p>Hello</p></body></html>")

    assert await find_footer(browser_page) is None
    assert await find_main_navigation(browser_page) is None
    assert await find_mobile_nav(browser_page) is None
