"""
Region classifier entry point: one call for all three region kinds.
"""

import logging
from enum import Enum
from typing import Optional

from .footer import find_footer
from .mobile_nav import find_mobile_nav
from .primary_nav import find_main_navigation

logger = logging.getLogger(__name__)


class RegionKind(str, Enum):
    NAVIGATION = "navigation"
    FOOTER = "footer"
    MOBILE_NAV = "mobile-nav"


_FINDERS = {
    RegionKind.NAVIGATION: find_main_navigation,
    RegionKind.FOOTER: find_footer,
    RegionKind.MOBILE_NAV: find_mobile_nav,
}


async def classify(kind, page, log: Optional[logging.Logger] = None):
    """
    Locate one region on the page.

    Args:
        kind: RegionKind (or its string value)
        page: Playwright page, loaded and interactive
        log: Optional logger receiving per-candidate scores and reasons

    Returns:
        Locator for navigation/footer, MobileNavDescriptor for mobile-nav,
        or None when nothing cleared the confidence floor
    """
    region = RegionKind(kind)
    result = await _FINDERS[region](page, log or logger)
    (log or logger).info(f"Region {region.value}: {'found' if result is not None else 'not found'}")
    return result
