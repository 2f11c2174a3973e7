"""
Drawer interaction against real rendered fixture pages
"""

import pytest

from navaudit_core import (
    CloseOutcome,
    close_mobile_nav_detailed,
    dismiss_with_guards,
    find_mobile_nav,
    is_mobile_nav_open,
    open_mobile_nav,
)
from navaudit_core.interaction import mobile_nav_guard

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]


async def test_details_drawer_round_trip(browser_page, fixture_html):
    await browser_page.set_content(fixture_html("details_drawer_page.html"))
    descriptor = await find_mobile_nav(browser_page)

    assert not await is_mobile_nav_open(descriptor)
    await open_mobile_nav(descriptor)
    assert await is_mobile_nav_open(descriptor)

    assert await close_mobile_nav_detailed(descriptor) is CloseOutcome.CLOSE_CONTROL
    assert not await is_mobile_nav_open(descriptor)
    assert await close_mobile_nav_detailed(descriptor) is CloseOutcome.ALREADY_CLOSED


async def test_bootstrap_closes_by_trigger_toggle(browser_page, fixture_html):
    await browser_page.set_content(fixture_html("bootstrap_navbar_page.html"))
    descriptor = await find_mobile_nav(browser_page)

    await open_mobile_nav(descriptor)
    assert await is_mobile_nav_open(descriptor)

    assert await close_mobile_nav_detailed(descriptor) is CloseOutcome.TRIGGER_TOGGLE
    assert not await is_mobile_nav_open(descriptor)


async def test_guard_reopens_drawer_closed_by_popup_escape(browser_page, fixture_html):
    await browser_page.set_content(fixture_html("details_drawer_page.html"))
    descriptor = await find_mobile_nav(browser_page)
    await open_mobile_nav(descriptor)
    await browser_page.evaluate("() => { document.querySelector('.newsletter').hidden = false; }")

    reopened = await dismiss_with_guards(browser_page, [mobile_nav_guard(descriptor, settle_ms=50)])

    assert reopened == ["mobile navigation drawer"]
    assert await is_mobile_nav_open(descriptor)
    assert not await browser_page.locator(".newsletter").is_visible()
