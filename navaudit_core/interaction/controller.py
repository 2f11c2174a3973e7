"""
Mobile navigation controller - open, close and locate the close control.

Drawer animations expose no completion event, so state-changing actions are
followed by fixed settle delays (see Config). Browser faults never escape:
open() logs and carries on, close() reports False.
"""

import logging
from enum import Enum
from typing import Optional

from playwright.async_api import Error as PlaywrightError

from ..config import config
from ..dom import probes
from ..regions.mobile_nav import MobileNavDescriptor, MobileNavPattern, css_string
from .popups import dismiss_popups
from .state import is_mobile_nav_open, is_offscreen

logger = logging.getLogger(__name__)


class CloseOutcome(str, Enum):
    ALREADY_CLOSED = "already-closed"
    CLOSE_CONTROL = "close-control"
    # Trigger re-clicked on a toggle assumption; end state is not verified
    TRIGGER_TOGGLE = "trigger-toggle"
    FAILED = "failed"

    @property
    def succeeded(self) -> bool:
        return self is not CloseOutcome.FAILED

    @property
    def verified(self) -> bool:
        return self in (CloseOutcome.ALREADY_CLOSED, CloseOutcome.CLOSE_CONTROL)


CLOSE_CONTROL_SELECTORS = [
    ".sidemenu___close",
    "button.nav-close",
    'button[aria-label*="close" i]',
    'button[data-type*="close"]',
    "button.drawer-button__close",
    "button.close",
    '[class*="close"][role="button"]',
    'button[class*="close"]',
    'ul[role="menu"] > button:first-of-type',
]

LINKED_CLOSE_SELECTOR = "[data-hamburger-menu-close]"

# Overlays that can sit on top of an open drawer and hide its close control
CLOSE_OVERLAY_SELECTORS = [
    '[role="dialog"]:not([class*="nav"]):not([class*="menu"]):not([class*="drawer"]):not(navigation-drawer)',
    '[aria-modal="true"]:not([class*="nav"]):not([class*="menu"]):not([class*="drawer"]):not(navigation-drawer)',
    '[id*="alia"]',
]


async def _await_drawer_visible(descriptor: MobileNavDescriptor, log: logging.Logger) -> None:
    page = descriptor.page
    try:
        await descriptor.drawer.wait_for(state="visible", timeout=config.drawer_visible_timeout_ms)
        log.debug("Drawer is now visible")
    except PlaywrightError:
        # Animation timing varies by theme; not proof the open failed
        log.debug(f"Drawer not visible after {config.drawer_visible_timeout_ms}ms, waiting anyway")
        await page.wait_for_timeout(config.open_grace_ms)


async def _settle_after_open(descriptor: MobileNavDescriptor, log: logging.Logger) -> None:
    await descriptor.page.wait_for_timeout(config.open_settle_ms)


OPEN_COMPLETION = {
    MobileNavPattern.DETAILS_SUMMARY: _await_drawer_visible,
    MobileNavPattern.BOOTSTRAP_NAVBAR: _settle_after_open,
    MobileNavPattern.DATA_ATTRIBUTE: _settle_after_open,
    MobileNavPattern.DRAWER_COMPONENT: _settle_after_open,
    MobileNavPattern.CLASS_HEURISTIC: _settle_after_open,
}


async def open_mobile_nav(descriptor: MobileNavDescriptor, log: Optional[logging.Logger] = None) -> None:
    """Open the drawer; no-op when it is already open."""
    log = log or logger
    if await is_mobile_nav_open(descriptor):
        log.info("Mobile nav already open, skipping trigger click")
        return

    page = descriptor.page
    await dismiss_popups(page, log)

    log.info(f"Opening mobile nav ({descriptor.pattern.value})")
    try:
        await descriptor.trigger.scroll_into_view_if_needed(timeout=config.click_timeout_ms)
        # Real user click, no force
        await descriptor.trigger.click(timeout=config.click_timeout_ms)
    except PlaywrightError as e:
        log.warning(f"Trigger click failed: {e}")

    try:
        await OPEN_COMPLETION[descriptor.pattern](descriptor, log)
    except PlaywrightError as e:
        log.warning(f"Waiting for mobile nav to open failed: {e}")


async def _usable_close_control(control) -> bool:
    if not await probes.is_visible(control):
        return False
    box = await probes.box(control)
    if not box or box["x"] < 0 or box["y"] < 0 or box["width"] <= 0 or box["height"] <= 0:
        return False
    return await probes.is_enabled(control)


async def _linked_close_control(descriptor: MobileNavDescriptor):
    """Close control rendered outside the drawer, linked to the trigger"""
    page = descriptor.page
    linked = page.locator(LINKED_CLOSE_SELECTOR).first
    if await probes.exists(linked):
        return linked

    controls = await probes.attr(descriptor.trigger, "aria-controls")
    if controls:
        paired = page.locator(f'button[aria-controls={css_string(controls)}][aria-label*="close" i]').first
        if await probes.exists(paired):
            return paired
    return None


async def find_close_control(descriptor: MobileNavDescriptor):
    """
    Locate a usable close control for the open drawer.

    In-drawer controls must be visible, on-screen, non-empty and enabled.
    Falls back to a control linked to the trigger. No side effects.

    Returns:
        Locator, or None
    """
    for selector in CLOSE_CONTROL_SELECTORS:
        try:
            matches = descriptor.drawer.locator(selector)
            total = await matches.count()
        except PlaywrightError:
            continue
        for i in range(total):
            control = matches.nth(i)
            if await _usable_close_control(control):
                return control
    return await _linked_close_control(descriptor)


async def _escape_interfering_overlay(page, log: logging.Logger) -> bool:
    for selector in CLOSE_OVERLAY_SELECTORS:
        overlay = page.locator(selector).first
        if await probes.is_visible(overlay):
            log.info("Popup detected over drawer, dismissing with Escape")
            await page.keyboard.press("Escape")
            await page.wait_for_timeout(config.popup_settle_ms)
            return True
    return False


async def _click_close_control(page, control, log: logging.Logger) -> CloseOutcome:
    box = await probes.box(control)
    if box:
        log.debug(
            f"Close control at x={round(box['x'])}, y={round(box['y'])}, "
            f"w={round(box['width'])}, h={round(box['height'])}"
        )
        if is_offscreen(box, probes.viewport_size(page)["width"]):
            log.debug("Close control off-screen, waiting for drawer transition")
            await page.wait_for_timeout(config.offscreen_settle_ms)
    try:
        await control.click(timeout=config.close_click_timeout_ms)
    except PlaywrightError as e:
        log.warning(f"Close control click failed: {e}")
        return CloseOutcome.FAILED
    await page.wait_for_timeout(config.close_settle_ms)
    return CloseOutcome.CLOSE_CONTROL


async def _toggle_trigger(page, descriptor: MobileNavDescriptor, log: logging.Logger) -> CloseOutcome:
    log.warning("No close control - attempting trigger toggle (end state unverified)")
    try:
        await descriptor.trigger.scroll_into_view_if_needed(timeout=config.close_click_timeout_ms)
        # The open drawer may cover a toggle trigger
        await descriptor.trigger.click(timeout=config.close_click_timeout_ms, force=True)
    except PlaywrightError as e:
        log.warning(f"Trigger toggle failed: {e}")
        return CloseOutcome.FAILED
    await page.wait_for_timeout(config.close_settle_ms)
    return CloseOutcome.TRIGGER_TOGGLE


async def close_mobile_nav_detailed(
    descriptor: MobileNavDescriptor,
    log: Optional[logging.Logger] = None,
) -> CloseOutcome:
    """Close the drawer and report how it was closed."""
    log = log or logger
    if not await is_mobile_nav_open(descriptor):
        log.info("Mobile nav already closed")
        return CloseOutcome.ALREADY_CLOSED

    page = descriptor.page
    try:
        if await _escape_interfering_overlay(page, log):
            if not await is_mobile_nav_open(descriptor):
                log.warning("Escape closed the nav too - re-opening")
                await open_mobile_nav(descriptor, log)
                await page.wait_for_timeout(config.popup_settle_ms)

        control = await find_close_control(descriptor)
        if control is not None:
            return await _click_close_control(page, control, log)
        return await _toggle_trigger(page, descriptor, log)
    except Exception as e:
        log.warning(f"Closing mobile nav failed: {e}")
        return CloseOutcome.FAILED


async def close_mobile_nav(descriptor: MobileNavDescriptor, log: Optional[logging.Logger] = None) -> bool:
    """Close the drawer; True unless the attempt failed outright."""
    outcome = await close_mobile_nav_detailed(descriptor, log)
    return outcome.succeeded
