from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class RegionCandidate:
    """An element under consideration during one scored classification pass"""
    node: Any  # Playwright Locator; the live document owns the element
    score: int
    reasons: List[str] = field(default_factory=list)
    link_count: Optional[int] = None
    classes: str = ""
    aria_label: Optional[str] = None

    def describe(self) -> str:
        links = "-" if self.link_count is None else str(self.link_count)
        return (
            f"score={self.score}, links={links}, classes=\"{self.classes}\", "
            f"aria=\"{self.aria_label or '(none)'}\""
        )
