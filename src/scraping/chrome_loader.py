"""Headless Chrome page loader (render-A).

Drives a single page straight off the browser, the way Chrome automation
tools usually do. Set ``chrome_channel`` to use an installed Chrome instead of
Playwright's bundled Chromium.
"""

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

_CHROME_ARGS = [
    *SANDBOXLESS_ARGS,
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
]


class ChromeLoader:
    """Renders the page in headless Chrome before extracting content."""

    name = "render-A"
    renders_scripts = True

    def __init__(
        self,
        *,
        timeout: float = 60.0,
        min_content_length: int = 100,
        channel: str = "",
        headless: bool = True,
        user_agent: str = BROWSER_USER_AGENT,
    ) -> None:
        self._timeout_ms = timeout * 1000
        self._min_content_length = min_content_length
        self._channel = channel
        self._headless = headless
        self._user_agent = user_agent

    async def scrape(self, url: str) -> Outcome:
        logger.debug("chrome render", extra={"url": url, "strategy": self.name, "channel": self._channel or "chromium"})
        launch_kwargs: dict = {"headless": self._headless, "args": _CHROME_ARGS}
        if self._channel:
            launch_kwargs["channel"] = self._channel

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(**launch_kwargs)
                try:
                    page = await browser.new_page(
                        viewport={"width": 1280, "height": 800},
                        user_agent=self._user_agent,
                    )
                    await page.goto(url, wait_until="networkidle", timeout=self._timeout_ms)
                    await page.evaluate(STRIP_NON_CONTENT_JS, RENDER_NON_CONTENT_SELECTORS)
                    extracted = await page.evaluate(EXTRACT_CONTENT_JS)
                    final_url = page.url
                finally:
                    logger.debug("closing chrome", extra={"url": url})
                    await browser.close()
        except Exception as exc:
            logger.warning("chrome render failed", extra={"url": url, "strategy": self.name}, exc_info=True)
            return Failed(f"{self.name} failed for {url}: {exc}")

        outcome = build_rendered_outcome(self.name, extracted, final_url, self._min_content_length)
        logger.debug("chrome render complete", extra={"url": url, "final_url": final_url, "outcome": type(outcome).__name__})
        return outcome
