"""
Interaction layer - drive the mobile drawer and keep transient overlays
out of the way.
"""

from .cleanup import cleanup_after, close_all_open_ui, ensure_mobile_nav_ready, mobile_nav_guard
from .controller import (
    CloseOutcome,
    close_mobile_nav,
    close_mobile_nav_detailed,
    find_close_control,
    open_mobile_nav,
)
from .popup_guard import GuardedTarget, dismiss_with_guards
from .popups import dismiss_popups, dismiss_region_prompts
from .state import is_mobile_nav_open

__all__ = [
    'CloseOutcome',
    'open_mobile_nav',
    'close_mobile_nav',
    'close_mobile_nav_detailed',
    'is_mobile_nav_open',
    'find_close_control',
    'GuardedTarget',
    'dismiss_popups',
    'dismiss_region_prompts',
    'dismiss_with_guards',
    'cleanup_after',
    'close_all_open_ui',
    'ensure_mobile_nav_ready',
    'mobile_nav_guard',
]
