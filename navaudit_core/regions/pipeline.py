"""
Strategy pipeline helpers shared by the region finders.

A strategy is an async callable ``(page, logger) -> Optional[T]``. Strategies
are tried in order and the first non-None result wins; a strategy that raises
counts as "no match".
"""

import logging
from typing import Any, Awaitable, Callable, List, Optional, Sequence, TypeVar

from playwright.async_api import Error as PlaywrightError

from ..dom import probes
from .candidate import RegionCandidate

T = TypeVar("T")

Strategy = Callable[[Any, logging.Logger], Awaitable[Optional[T]]]


async def first_match(
    page,
    strategies: Sequence[Strategy],
    log: logging.Logger,
    accept: Optional[Callable[[T], bool]] = None,
) -> Optional[T]:
    for strategy in strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        try:
            result = await strategy(page, log)
        except Exception as e:
            log.debug(f"Strategy {name} failed: {e}")
            continue
        if result is None:
            continue
        if accept is not None and not accept(result):
            log.debug(f"Strategy {name} matched below confidence floor")
            continue
        log.debug(f"Strategy {name} matched")
        return result
    return None


def pick_winner(candidates: List[RegionCandidate], floor: int) -> Optional[RegionCandidate]:
    """
    Highest score wins if it clears the floor.

    sorted() is stable, so equal scores keep DOM encounter order.
    """
    ranked = sorted((c for c in candidates if c.score > 0), key=lambda c: c.score, reverse=True)
    if ranked and ranked[0].score > floor:
        return ranked[0]
    return None


async def first_rendered(page, selectors: Sequence[str], last: bool = False):
    """First (or last) rendered match, trying selectors in order"""
    for selector in selectors:
        loc = page.locator(selector)
        try:
            total = await loc.count()
        except PlaywrightError:
            continue
        order = range(total - 1, -1, -1) if last else range(total)
        for i in order:
            node = loc.nth(i)
            if await probes.is_rendered(node):
                return node
    return None
