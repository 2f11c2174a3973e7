#!/usr/bin/env python3
from dataclasses import dataclass
import os
from typing import Dict, Tuple
from dotenv import load_dotenv

from .exceptions import ConfigError

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class Config:
    """Audit configuration, read from NAVAUDIT_* environment variables"""
    headless: bool = _env_bool("NAVAUDIT_HEADLESS", "true")
    debug: bool = _env_bool("NAVAUDIT_DEBUG", "false")
    log_level: str = os.getenv("NAVAUDIT_LOG_LEVEL", "INFO").upper()

    # Viewports
    desktop_width: int = _env_int("NAVAUDIT_DESKTOP_WIDTH", "1280")
    desktop_height: int = _env_int("NAVAUDIT_DESKTOP_HEIGHT", "720")
    mobile_width: int = _env_int("NAVAUDIT_MOBILE_WIDTH", "375")
    mobile_height: int = _env_int("NAVAUDIT_MOBILE_HEIGHT", "667")

    # Bounds on individual browser reads and clicks
    query_timeout_ms: int = _env_int("NAVAUDIT_QUERY_TIMEOUT_MS", "1000")
    click_timeout_ms: int = _env_int("NAVAUDIT_CLICK_TIMEOUT_MS", "5000")
    close_click_timeout_ms: int = _env_int("NAVAUDIT_CLOSE_CLICK_TIMEOUT_MS", "2000")
    navigation_timeout_ms: int = _env_int("NAVAUDIT_NAVIGATION_TIMEOUT_MS", "15000")

    # Settle delays (drawer animations expose no completion event)
    drawer_visible_timeout_ms: int = _env_int("NAVAUDIT_DRAWER_VISIBLE_TIMEOUT_MS", "2000")
    open_grace_ms: int = _env_int("NAVAUDIT_OPEN_GRACE_MS", "1000")
    open_settle_ms: int = _env_int("NAVAUDIT_OPEN_SETTLE_MS", "1000")
    close_settle_ms: int = _env_int("NAVAUDIT_CLOSE_SETTLE_MS", "500")
    offscreen_settle_ms: int = _env_int("NAVAUDIT_OFFSCREEN_SETTLE_MS", "500")
    popup_settle_ms: int = _env_int("NAVAUDIT_POPUP_SETTLE_MS", "300")
    guard_settle_ms: int = _env_int("NAVAUDIT_GUARD_SETTLE_MS", "400")

    @classmethod
    def from_env(cls) -> 'Config':
        """Re-read the environment (field defaults are evaluated at import)"""
        return cls(
            headless=_env_bool("NAVAUDIT_HEADLESS", "true"),
            debug=_env_bool("NAVAUDIT_DEBUG", "false"),
            log_level=os.getenv("NAVAUDIT_LOG_LEVEL", "INFO").upper(),
            desktop_width=_env_int("NAVAUDIT_DESKTOP_WIDTH", "1280"),
            desktop_height=_env_int("NAVAUDIT_DESKTOP_HEIGHT", "720"),
            mobile_width=_env_int("NAVAUDIT_MOBILE_WIDTH", "375"),
            mobile_height=_env_int("NAVAUDIT_MOBILE_HEIGHT", "667"),
            query_timeout_ms=_env_int("NAVAUDIT_QUERY_TIMEOUT_MS", "1000"),
            click_timeout_ms=_env_int("NAVAUDIT_CLICK_TIMEOUT_MS", "5000"),
            close_click_timeout_ms=_env_int("NAVAUDIT_CLOSE_CLICK_TIMEOUT_MS", "2000"),
            navigation_timeout_ms=_env_int("NAVAUDIT_NAVIGATION_TIMEOUT_MS", "15000"),
            drawer_visible_timeout_ms=_env_int("NAVAUDIT_DRAWER_VISIBLE_TIMEOUT_MS", "2000"),
            open_grace_ms=_env_int("NAVAUDIT_OPEN_GRACE_MS", "1000"),
            open_settle_ms=_env_int("NAVAUDIT_OPEN_SETTLE_MS", "1000"),
            close_settle_ms=_env_int("NAVAUDIT_CLOSE_SETTLE_MS", "500"),
            offscreen_settle_ms=_env_int("NAVAUDIT_OFFSCREEN_SETTLE_MS", "500"),
            popup_settle_ms=_env_int("NAVAUDIT_POPUP_SETTLE_MS", "300"),
            guard_settle_ms=_env_int("NAVAUDIT_GUARD_SETTLE_MS", "400"),
        )

    def viewport(self, mobile: bool = False) -> Dict[str, int]:
        if mobile:
            return {"width": self.mobile_width, "height": self.mobile_height}
        return {"width": self.desktop_width, "height": self.desktop_height}

    def as_env_map(self) -> Dict[str, str]:
        """Current values keyed by environment variable name (for run headers)"""
        pairs: Tuple[Tuple[str, object], ...] = (
            ("NAVAUDIT_HEADLESS", self.headless),
            ("NAVAUDIT_DEBUG", self.debug),
            ("NAVAUDIT_LOG_LEVEL", self.log_level),
            ("NAVAUDIT_DESKTOP_WIDTH", self.desktop_width),
            ("NAVAUDIT_DESKTOP_HEIGHT", self.desktop_height),
            ("NAVAUDIT_MOBILE_WIDTH", self.mobile_width),
            ("NAVAUDIT_MOBILE_HEIGHT", self.mobile_height),
            ("NAVAUDIT_QUERY_TIMEOUT_MS", self.query_timeout_ms),
            ("NAVAUDIT_CLICK_TIMEOUT_MS", self.click_timeout_ms),
            ("NAVAUDIT_CLOSE_CLICK_TIMEOUT_MS", self.close_click_timeout_ms),
            ("NAVAUDIT_NAVIGATION_TIMEOUT_MS", self.navigation_timeout_ms),
            ("NAVAUDIT_DRAWER_VISIBLE_TIMEOUT_MS", self.drawer_visible_timeout_ms),
            ("NAVAUDIT_OPEN_GRACE_MS", self.open_grace_ms),
            ("NAVAUDIT_OPEN_SETTLE_MS", self.open_settle_ms),
            ("NAVAUDIT_CLOSE_SETTLE_MS", self.close_settle_ms),
            ("NAVAUDIT_OFFSCREEN_SETTLE_MS", self.offscreen_settle_ms),
            ("NAVAUDIT_POPUP_SETTLE_MS", self.popup_settle_ms),
            ("NAVAUDIT_GUARD_SETTLE_MS", self.guard_settle_ms),
        )
        return {name: str(value) for name, value in pairs}


config = Config()
