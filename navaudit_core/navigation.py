"""
Page loading with tolerance for client-side redirects.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from playwright.async_api import Error as PlaywrightError

from .config import config
from .exceptions import NavigationError

logger = logging.getLogger(__name__)

INTERRUPTED_NAVIGATION_MESSAGE = "is interrupted by another navigation"

LOAD_STATES = ("load", "domcontentloaded", "networkidle")


@dataclass
class NavigationOutcome:
    response: Any
    fallback_triggered: bool
    final_url: str


async def navigate_with_fallback(
    page,
    url: str,
    wait_until: str = "domcontentloaded",
    timeout: Optional[int] = None,
    label: Optional[str] = None,
) -> NavigationOutcome:
    """
    Load a URL; a goto interrupted by a script redirect waits for the
    redirected page instead of failing.

    Raises:
        NavigationError: the page could not be loaded
    """
    if wait_until not in LOAD_STATES:
        raise ValueError(f"wait_until must be one of {LOAD_STATES}, got {wait_until!r}")
    timeout = timeout if timeout is not None else config.navigation_timeout_ms

    try:
        response = await page.goto(url, wait_until=wait_until, timeout=timeout)
        return NavigationOutcome(response=response, fallback_triggered=False, final_url=page.url)
    except PlaywrightError as e:
        if INTERRUPTED_NAVIGATION_MESSAGE not in str(e):
            raise NavigationError(url, str(e)) from e
        logger.warning(
            f"Navigation interrupted by client-side redirect "
            f"(requested={url}, label={label}, final={page.url})"
        )

    try:
        await page.wait_for_load_state(wait_until, timeout=timeout)
    except PlaywrightError as e:
        raise NavigationError(url, str(e)) from e
    return NavigationOutcome(response=None, fallback_triggered=True, final_url=page.url)
