"""
Tests for drawer open-state predicates
"""

import pytest

from mocks.drawers import data_attribute_page, details_summary_page, drawer_component_page
from mocks.fake_page import FakeElement
from navaudit_core.interaction.state import has_open_class, is_mobile_nav_open, is_offscreen
from navaudit_core.regions.mobile_nav import MobileNavDescriptor, MobileNavPattern, find_mobile_nav


class TestOpenClassTokens:
    """Whole tokens and -/_ suffixes only"""

    @pytest.mark.parametrize("classes", [
        "open",
        "menu-drawer is-open",
        "menu-drawer--open",
        "collapse navbar-collapse show",
        "nav_active",
        "drawer expanded",
    ])
    def test_open_tokens(self, classes):
        assert has_open_class(classes)

    @pytest.mark.parametrize("classes", [
        "",
        "inactive",
        "menu-drawer",
        "opener",
        "showcase",
        "collapse navbar-collapse",
    ])
    def test_closed_tokens(self, classes):
        assert not has_open_class(classes)


class TestOffscreen:
    def test_left_of_viewport(self):
        assert is_offscreen({"x": -375, "y": 0, "width": 375, "height": 600}, 375)

    def test_right_of_viewport_uses_actual_width(self):
        box = {"x": 400, "y": 0, "width": 300, "height": 600}
        assert is_offscreen(box, 390)
        assert not is_offscreen(box, 1024)

    def test_on_screen(self):
        assert not is_offscreen({"x": 0, "y": 0, "width": 375, "height": 600}, 375)


@pytest.mark.asyncio
class TestIsMobileNavOpen:
    """Per-pattern strategies"""

    async def test_details_falls_back_to_open_attribute(self):
        page, summary, drawer = details_summary_page()
        descriptor = await find_mobile_nav(page)
        details = summary.children["xpath=ancestor::details[1]"][0]
        drawer.detached = True

        details.details_open = True
        assert await is_mobile_nav_open(descriptor)
        details.details_open = False
        assert not await is_mobile_nav_open(descriptor)

    async def test_open_class_wins_over_stale_aria_hidden(self):
        page, _, drawer = data_attribute_page()
        descriptor = await find_mobile_nav(page)
        drawer.attrs["class"] = "hamburger-menu is-open"
        drawer.attrs["aria-hidden"] = "true"

        assert await is_mobile_nav_open(descriptor)

    async def test_aria_hidden_false_means_open(self):
        page, _, drawer = data_attribute_page()
        descriptor = await find_mobile_nav(page)
        drawer.attrs["aria-hidden"] = "false"

        assert await is_mobile_nav_open(descriptor)

    async def test_trigger_aria_expanded(self):
        page, trigger, _ = drawer_component_page()
        descriptor = await find_mobile_nav(page)

        trigger.attrs["aria-expanded"] = "true"
        assert await is_mobile_nav_open(descriptor)
        trigger.attrs["aria-expanded"] = "false"
        assert not await is_mobile_nav_open(descriptor)

    async def test_visible_but_translated_offscreen_is_closed(self):
        page, trigger, drawer = drawer_component_page()
        descriptor = await find_mobile_nav(page)
        del trigger.attrs["aria-expanded"]
        drawer.visible = True
        drawer.box = {"x": -375, "y": 0, "width": 375, "height": 667}

        assert not await is_mobile_nav_open(descriptor)

        drawer.box = {"x": 0, "y": 0, "width": 375, "height": 667}
        assert await is_mobile_nav_open(descriptor)

    async def test_errors_mean_closed(self):
        drawer = FakeElement(detached=True)
        trigger = FakeElement(detached=True)
        page, _, _ = drawer_component_page()
        descriptor = MobileNavDescriptor(
            trigger=page.locator("missing-trigger"),
            drawer=page.locator("missing-drawer"),
            pattern=MobileNavPattern.DETAILS_SUMMARY,
            score=10,
        )
        page.add("missing-drawer", drawer)
        page.add("missing-trigger", trigger)

        assert await is_mobile_nav_open(descriptor) is False
