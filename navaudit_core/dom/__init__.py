"""
DOM module - null-safe, time-bounded reads used by region detection
and drawer interaction.
"""

from navaudit_core.dom.probes import (
    LinkSummary,
    exists,
    is_visible,
    is_rendered,
    is_enabled,
    attr,
    text,
    box,
    tag_name,
    visible_links,
    is_in_header,
    scroll_height,
    viewport_size,
)

__all__ = [
    'LinkSummary',
    'exists',
    'is_visible',
    'is_rendered',
    'is_enabled',
    'attr',
    'text',
    'box',
    'tag_name',
    'visible_links',
    'is_in_header',
    'scroll_height',
    'viewport_size',
]
