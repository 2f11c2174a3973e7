"""
navaudit - locate navigation regions on rendered storefront pages and
drive mobile navigation drawers for accessibility checks.
"""

__version__ = "0.1.0"

from .config import Config, config
from .exceptions import ConfigError, NavAuditError, NavigationError
from .interaction import (
    CloseOutcome,
    GuardedTarget,
    cleanup_after,
    close_all_open_ui,
    close_mobile_nav,
    close_mobile_nav_detailed,
    dismiss_popups,
    dismiss_region_prompts,
    dismiss_with_guards,
    ensure_mobile_nav_ready,
    find_close_control,
    is_mobile_nav_open,
    open_mobile_nav,
)
from .navigation import NavigationOutcome, navigate_with_fallback
from .regions import (
    MobileNavDescriptor,
    MobileNavPattern,
    RegionCandidate,
    RegionKind,
    classify,
    find_footer,
    find_main_navigation,
    find_mobile_nav,
)

__all__ = [
    "Config",
    "config",
    "NavAuditError",
    "NavigationError",
    "ConfigError",
    "RegionKind",
    "RegionCandidate",
    "MobileNavDescriptor",
    "MobileNavPattern",
    "classify",
    "find_footer",
    "find_main_navigation",
    "find_mobile_nav",
    "CloseOutcome",
    "GuardedTarget",
    "open_mobile_nav",
    "close_mobile_nav",
    "close_mobile_nav_detailed",
    "is_mobile_nav_open",
    "find_close_control",
    "dismiss_popups",
    "dismiss_region_prompts",
    "dismiss_with_guards",
    "cleanup_after",
    "close_all_open_ui",
    "ensure_mobile_nav_ready",
    "NavigationOutcome",
    "navigate_with_fallback",
]
