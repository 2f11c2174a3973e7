"""
Helpers for checks that open UI and must leave the page tidy afterwards.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from ..config import config
from ..regions.mobile_nav import MobileNavDescriptor
from .controller import close_mobile_nav, open_mobile_nav
from .popup_guard import GuardedTarget, dismiss_with_guards
from .popups import dismiss_popups
from .state import is_mobile_nav_open

logger = logging.getLogger(__name__)

COLLAPSE_EXPANDED_JS = """
() => {
    let collapsed = 0;
    document.querySelectorAll('[aria-expanded="true"]').forEach((el) => {
        el.setAttribute('aria-expanded', 'false');
        const controlsId = el.getAttribute('aria-controls');
        const controlled = controlsId ? document.getElementById(controlsId) : null;
        if (controlled) {
            controlled.hidden = true;
            controlled.style.removeProperty('display');
            controlled.style.removeProperty('visibility');
        }
        collapsed++;
    });
    return collapsed;
}
"""

HIDE_OVERLAYS_JS = """
() => {
    let hidden = 0;
    const selector = '[role="dialog"], [aria-modal="true"], .modal, [class*="modal"], [class*="overlay"]';
    document.querySelectorAll(selector).forEach((el) => {
        const style = window.getComputedStyle(el);
        const visible = style.display !== 'none'
            && style.visibility !== 'hidden'
            && parseFloat(style.opacity || '1') > 0;
        if (visible) {
            el.style.display = 'none';
            el.style.visibility = 'hidden';
            el.setAttribute('aria-hidden', 'true');
            hidden++;
        }
    });
    return hidden;
}
"""

MOBILE_NAV_GUARD_SETTLE_MS = 600


async def close_all_open_ui(page, log: Optional[logging.Logger] = None) -> None:
    """
    Close everything a check may have left open: popups, expanded
    disclosures and visible modal/overlay layers. Never raises.
    """
    log = log or logger
    log.info("Cleaning up open UI elements...")
    try:
        await dismiss_popups(page, log)
    except Exception as e:
        log.warning(f"Popup dismissal during cleanup failed: {e}")

    for name, script in (("expanded", COLLAPSE_EXPANDED_JS), ("overlays", HIDE_OVERLAYS_JS)):
        try:
            count = await page.evaluate(script)
            log.debug(f"Cleanup {name}: {count}")
        except Exception as e:
            log.warning(f"Cleanup step {name} failed: {e}")

    log.info("UI cleanup complete")


@asynccontextmanager
async def cleanup_after(page, log: Optional[logging.Logger] = None):
    """
    Run a block and always clean the page afterwards.

    Usage:
        async with cleanup_after(page):
            await button.click()
    """
    try:
        yield page
    finally:
        await close_all_open_ui(page, log)


def mobile_nav_guard(
    descriptor: MobileNavDescriptor,
    settle_ms: int = MOBILE_NAV_GUARD_SETTLE_MS,
    log: Optional[logging.Logger] = None,
) -> GuardedTarget:
    async def is_open() -> bool:
        return await is_mobile_nav_open(descriptor)

    async def reopen() -> None:
        await open_mobile_nav(descriptor, log)

    return GuardedTarget(
        name="mobile navigation drawer",
        is_open=is_open,
        reopen=reopen,
        settle_ms=settle_ms,
    )


async def ensure_mobile_nav_ready(
    page,
    descriptor: MobileNavDescriptor,
    label: str,
    desired_state: str = "open",
    log: Optional[logging.Logger] = None,
) -> None:
    """
    Clear popups and put the drawer into the state the next check needs.

    Args:
        desired_state: "open" keeps the drawer open across dismissal,
            "closed" closes it afterwards if still open
    """
    if desired_state not in ("open", "closed"):
        raise ValueError(f"desired_state must be 'open' or 'closed', got {desired_state!r}")
    log = log or logger

    guards = [mobile_nav_guard(descriptor, log=log)] if desired_state == "open" else []
    await dismiss_with_guards(page, guards, label=label, log=log)

    if desired_state == "closed" and await is_mobile_nav_open(descriptor):
        log.info(f"[{label}] Closing mobile nav for closed-state check")
        await close_mobile_nav(descriptor, log)
        await page.wait_for_timeout(config.guard_settle_ms)
