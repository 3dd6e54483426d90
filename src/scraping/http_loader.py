"""Static page loader: single httpx GET with a short timeout (static-A)."""

from __future__ import annotations

import logging

import httpx

from .detection import detect_rendering_required
from .images import resolve_images
from .markup import (
    BROWSER_USER_AGENT,
    NON_CONTENT_SELECTORS,
    parse_html,
    raw_images,
    region_text,
    remove_elements,
)
from .models import Failed, NeedsRendering, Outcome, ScrapedResult, Success

logger = logging.getLogger(__name__)

_CONTENT_REGIONS = ("main", "article", '[role="main"]', "body")


class HttpLoader:
    """Fetches raw HTML and extracts text without executing scripts.

    Cheapest strategy: it detects script-gated placeholders so the caller can
    jump straight to a rendering strategy.
    """

    name = "static-A"
    renders_scripts = False

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        min_content_length: int = 50,
        user_agent: str = BROWSER_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._min_content_length = min_content_length
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        }

    async def scrape(self, url: str) -> Outcome:
        logger.debug("static fetch", extra={"url": url, "strategy": self.name, "timeout": self._timeout})
        try:
            async with httpx.AsyncClient(follow_redirects=True, headers=self._headers) as client:
                resp = await client.get(url, timeout=self._timeout)
                resp.raise_for_status()
        except httpx.TimeoutException:
            logger.warning("static fetch timed out", extra={"url": url, "strategy": self.name})
            return Failed(f"{self.name} failed for {url}: Request timed out after {self._timeout:g}s.")
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("static fetch bad status", extra={"url": url, "strategy": self.name, "status": status})
            return Failed(
                f"{self.name} failed for {url}: Server responded with status "
                f"{status} - {exc.response.reason_phrase}."
            )
        except httpx.RequestError as exc:
            logger.warning("static fetch request error", extra={"url": url, "strategy": self.name}, exc_info=True)
            return Failed(f"{self.name} failed for {url}: No response received from server ({exc}).")

        content_type = resp.headers.get("content-type", "")
        if "text/html" not in content_type.lower():
            return Failed(
                f"{self.name} failed for {url}: Invalid content type: {content_type or 'missing'}. "
                "Expected text/html."
            )

        html = resp.text
        final_url = str(resp.url)
        soup = parse_html(html)

        # <noscript> stays in for the first pass so its text counts toward the
        # preliminary length the detector sees.
        remove_elements(soup, NON_CONTENT_SELECTORS)
        preliminary = region_text(soup, _CONTENT_REGIONS)
        signal: NeedsRendering | None = detect_rendering_required(html, len(preliminary), url=url)
        if signal is not None:
            logger.info("javascript required", extra={"url": url, "strategy": self.name})
            return signal

        remove_elements(soup, ("noscript",))
        text = region_text(soup, _CONTENT_REGIONS)
        if len(text) < self._min_content_length:
            return Failed(f"{self.name} extracted too little text ({len(text)} chars).")

        images = resolve_images(raw_images(soup), final_url, keep_unresolved=False)
        logger.debug(
            "static fetch complete",
            extra={"url": url, "final_url": final_url, "text_length": len(text), "images": len(images)},
        )
        return Success(ScrapedResult(text_content=text, final_url=final_url, images=images))
