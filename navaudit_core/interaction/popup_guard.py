"""
Popup dismissal that preserves UI state a check depends on.

Dismissing a popup with Escape can also close an open drawer. Callers pass
guards describing the state to keep; after dismissal each guard is re-checked
and restored if it was lost.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

from ..config import config
from .popups import dismiss_popups

logger = logging.getLogger(__name__)


@dataclass
class GuardedTarget:
    """Piece of UI that must stay open across popup dismissal"""
    name: str
    is_open: Callable[[], Awaitable[bool]]
    reopen: Callable[[], Awaitable[None]]
    settle_ms: Optional[int] = None


async def _restore(page, guard: GuardedTarget, label: str, log: logging.Logger) -> bool:
    if await guard.is_open():
        return False
    log.info(f"[{label}] {guard.name} closed during popup dismissal - reopening")
    await guard.reopen()
    await page.wait_for_timeout(guard.settle_ms if guard.settle_ms is not None else config.guard_settle_ms)
    return True


async def dismiss_with_guards(
    page,
    guards: Optional[List[GuardedTarget]] = None,
    label: str = "general",
    log: Optional[logging.Logger] = None,
) -> List[str]:
    """
    Dismiss popups, then restore every guarded target that was closed.

    Never raises; each guard is handled independently.

    Returns:
        Names of the guards that had to be reopened
    """
    log = log or logger
    try:
        dismissed = await dismiss_popups(page, log)
        if dismissed:
            log.debug(f"[{label}] dismissed {dismissed} popup(s)")
    except Exception as e:
        log.warning(f"[{label}] popup dismissal failed: {e}")

    reopened = []
    for guard in guards or []:
        try:
            if await _restore(page, guard, label, log):
                reopened.append(guard.name)
        except Exception as e:
            log.warning(f"[{label}] guard {guard.name} failed: {e}")
    return reopened
