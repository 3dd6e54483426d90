"""Headless Chromium page loader with an explicit browser context (render-B)."""

from __future__ import annotations

import logging

from playwright.async_api import async_playwright

from .browser import (
    EXTRACT_CONTENT_JS,
    RENDER_NON_CONTENT_SELECTORS,
    SANDBOXLESS_ARGS,
    STRIP_NON_CONTENT_JS,
    build_rendered_outcome,
)
from .markup import BROWSER_USER_AGENT
from .models import Failed, Outcome

logger = logging.getLogger(__name__)


class ChromiumLoader:
    """Renders the page in an isolated Chromium context before extracting."""

    name = "render-B"
    renders_scripts = True

    def __init__(
        self,
        *,
        timeout: float = 60.0,
        min_content_length: int = 100,
        headless: bool = True,
        user_agent: str = BROWSER_USER_AGENT,
    ) -> None:
        self._timeout_ms = timeout * 1000
        self._min_content_length = min_content_length
        self._headless = headless
        self._user_agent = user_agent

    async def scrape(self, url: str) -> Outcome:
        logger.debug("chromium render", extra={"url": url, "strategy": self.name})
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self._headless, args=SANDBOXLESS_ARGS)
                try:
                    context = await browser.new_context(
                        user_agent=self._user_agent,
                        java_script_enabled=True,
                    )
                    try:
                        page = await context.new_page()
                        await page.goto(url, wait_until="networkidle", timeout=self._timeout_ms)
                        await page.evaluate(STRIP_NON_CONTENT_JS, RENDER_NON_CONTENT_SELECTORS)
                        extracted = await page.evaluate(EXTRACT_CONTENT_JS)
                        final_url = page.url
                    finally:
                        await context.close()
                finally:
                    logger.debug("closing chromium", extra={"url": url})
                    await browser.close()
        except Exception as exc:
            logger.warning("chromium render failed", extra={"url": url, "strategy": self.name}, exc_info=True)
            return Failed(f"{self.name} failed for {url}: {exc}")

        outcome = build_rendered_outcome(self.name, extracted, final_url, self._min_content_length)
        logger.debug(
            "chromium render complete",
            extra={"url": url, "final_url": final_url, "outcome": type(outcome).__name__},
        )
        return outcome
