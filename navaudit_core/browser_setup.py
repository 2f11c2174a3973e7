#!/usr/bin/env python3
from contextlib import asynccontextmanager
from typing import Optional

from playwright.async_api import async_playwright

from .config import Config, config as default_config

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


@asynccontextmanager
async def open_page(mobile: bool = False, headless: Optional[bool] = None, cfg: Optional[Config] = None):
    """
    Launch Chromium and yield a page in an isolated context.

    Mobile pages get the mobile viewport with touch and is_mobile enabled,
    so drawer-only markup is rendered.
    """
    cfg = cfg or default_config
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(
            headless=cfg.headless if headless is None else headless,
            args=list(LAUNCH_ARGS),
        )
        context_args = {"viewport": cfg.viewport(mobile=mobile)}
        if mobile:
            context_args.update({"is_mobile": True, "has_touch": True})
        context = await browser.new_context(**context_args)
        try:
            page = await context.new_page()
            yield page
        finally:
            await context.close()
            await browser.close()
