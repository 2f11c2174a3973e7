"""
Region detection - locate primary navigation, footer and mobile navigation
in arbitrary storefront markup.
"""

from .candidate import RegionCandidate
from .classifier import RegionKind, classify
from .footer import find_footer, validate_footer
from .mobile_nav import MobileNavDescriptor, MobileNavPattern, find_mobile_nav
from .primary_nav import find_main_navigation
from .scoring import (
    MOBILE_NAV_CONFIDENCE_FLOOR,
    REGION_CONFIDENCE_FLOOR,
    FooterSignals,
    NavigationSignals,
    score_footer,
    score_navigation,
)

__all__ = [
    'RegionCandidate',
    'RegionKind',
    'classify',
    'find_footer',
    'validate_footer',
    'find_main_navigation',
    'find_mobile_nav',
    'MobileNavDescriptor',
    'MobileNavPattern',
    'FooterSignals',
    'NavigationSignals',
    'score_footer',
    'score_navigation',
    'REGION_CONFIDENCE_FLOOR',
    'MOBILE_NAV_CONFIDENCE_FLOOR',
]
