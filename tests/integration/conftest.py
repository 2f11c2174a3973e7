"""
Pytest configuration for integration tests (real Chromium)
"""

from pathlib import Path

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from navaudit_core.config import config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_html():
    """Read a fixture page by file name"""
    def load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return load


@pytest.fixture(autouse=True)
def fast_settle(monkeypatch):
    """Shorter settle delays; the fixture pages have no animations"""
    for name in ("open_grace_ms", "open_settle_ms", "close_settle_ms", "offscreen_settle_ms",
                 "popup_settle_ms", "guard_settle_ms"):
        monkeypatch.setattr(config, name, 50)


@pytest.fixture
async def browser_page():
    """Provide a mobile-sized browser page; skip when Chromium is missing"""
    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium not available: {e}")
        context = await browser.new_context(viewport=config.viewport(mobile=True), is_mobile=True, has_touch=True)
        page = await context.new_page()
        yield page
        await browser.close()
