#!/usr/bin/env python3
"""
Transient overlay dismissal (cookie banners, marketing modals, region prompts).

Every function here is best-effort: failures are logged, never raised.
"""

import logging
from typing import Optional

from playwright.async_api import Error as PlaywrightError

from ..config import config
from ..dom import probes

logger = logging.getLogger(__name__)

POPUP_SELECTORS = [
    '[role="dialog"]:not([class*="nav"]):not([class*="menu"]):not([class*="drawer"])',
    '[aria-modal="true"]:not([class*="nav"]):not([class*="menu"]):not([class*="drawer"])',
    ".klaviyo-form-modal",
    ".bxc",
    '[id*="bx-campaign"]',
    '[class*="popup"]:not([class*="nav"]):not([class*="menu"])',
]

POPUP_CLOSE_SELECTORS = [
    'button[aria-label*="close" i]',
    'button[aria-label*="dismiss" i]',
    ".close",
    '[class*="close"]',
    'button[class*="close"]',
]

REGION_PROMPT_BUTTONS = [
    '[role="dialog"] button:has-text("Continue")',
    '[role="dialog"] button:has-text("Stay")',
    '[class*="geolocation"] button',
    '[class*="country"] button',
    '[class*="region"] button',
]

REGION_OVERLAY_SELECTORS = [
    "country-detector",
    '[id*="country-selector"]',
    '[class*="geolocation"]',
]

# Surface point used for backdrop-dismiss popups
BACKDROP_CLICK_POSITION = {"x": 5, "y": 5}


async def _settle(page, ms: int, log: logging.Logger) -> None:
    try:
        await page.wait_for_timeout(ms)
    except PlaywrightError as e:
        log.debug(f"Settle wait interrupted: {e}")


async def _gone(page, popup) -> bool:
    await page.wait_for_timeout(config.popup_settle_ms)
    return not await probes.is_visible(popup)


async def _dismiss_one(page, popup, log: logging.Logger) -> bool:
    """Escape -> in-popup close button -> click on the popup surface"""
    log.debug("Trying Escape key...")
    try:
        await page.keyboard.press("Escape")
    except PlaywrightError as e:
        log.debug(f"Escape press failed: {e}")
    if await _gone(page, popup):
        log.info("Escape dismissed popup")
        return True

    log.debug("Escape didn't work, looking for close button...")
    for selector in POPUP_CLOSE_SELECTORS:
        button = popup.locator(selector).first
        if not await probes.exists(button) or not await probes.is_visible(button):
            continue
        try:
            await button.click(timeout=config.close_click_timeout_ms)
        except PlaywrightError as e:
            log.debug(f"Close button {selector} not clickable: {e}")
            continue
        if await _gone(page, popup):
            log.info(f"Close button dismissed popup ({selector})")
            return True
        break

    log.debug("Close button didn't work, clicking popup surface...")
    try:
        await popup.click(position=BACKDROP_CLICK_POSITION, timeout=1000)
    except PlaywrightError as e:
        log.debug(f"Surface click failed: {e}")
        return False
    if await _gone(page, popup):
        log.info("Surface click dismissed popup")
        return True
    return False


async def dismiss_popups(page, log: Optional[logging.Logger] = None) -> int:
    """
    Dismiss visible blocking overlays.

    Returns:
        Number of popups that were dismissed
    """
    log = log or logger
    dismissed = 0
    for selector in POPUP_SELECTORS:
        try:
            popups = page.locator(selector)
            total = await popups.count()
            for i in range(total):
                popup = popups.nth(i)
                if not await probes.is_visible(popup):
                    continue
                log.info(f"Found blocking popup ({selector})")
                if await _dismiss_one(page, popup, log):
                    dismissed += 1
                else:
                    log.warning("Could not dismiss popup - may interfere with later checks")
        except PlaywrightError as e:
            log.debug(f"Popup selector {selector} failed: {e}")
    return dismissed


async def dismiss_region_prompts(page, log: Optional[logging.Logger] = None) -> bool:
    """
    Accept a geolocation/country prompt and wait for its overlay to clear.

    Overlays that linger after the click are removed from the DOM.
    """
    log = log or logger
    for selector in REGION_PROMPT_BUTTONS:
        button = page.locator(selector).first
        if not await probes.exists(button) or not await probes.is_visible(button):
            continue
        log.info(f"Found region prompt, clicking: {selector}")
        try:
            await button.click(timeout=config.close_click_timeout_ms, force=True)
        except PlaywrightError as e:
            log.debug(f"Region prompt click failed: {e}")
            continue
        await _settle(page, config.open_grace_ms, log)

        for overlay_selector in REGION_OVERLAY_SELECTORS:
            overlay = page.locator(overlay_selector).first
            if not await probes.exists(overlay):
                continue
            try:
                await overlay.wait_for(state="hidden", timeout=3000)
            except PlaywrightError:
                log.info(f"Overlay still present, removing: {overlay_selector}")
                try:
                    await overlay.evaluate("(el) => el.remove()")
                except PlaywrightError as e:
                    log.debug(f"Overlay removal failed: {e}")
                await _settle(page, config.close_settle_ms, log)
        return True
    return False
