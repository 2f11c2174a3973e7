"""
navaudit exceptions

Region lookups and drawer interactions never raise these: absence and
interaction faults resolve to None/False. They are reserved for the outer
surfaces (page loading, configuration, CLI).
"""


class NavAuditError(Exception):
    """Base exception for navaudit"""
    pass


class NavigationError(NavAuditError):
    """The page could not be loaded"""

    def __init__(self, url: str, message: str):
        super().__init__(f"Failed to load {url}: {message}")
        self.url = url


class ConfigError(NavAuditError):
    """Invalid configuration value"""
    pass
