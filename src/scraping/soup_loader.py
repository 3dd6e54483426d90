"""Static page loader tuned for article-style pages (static-B)."""

from __future__ import annotations

import logging

import httpx

from .detection import detect_rendering_required
from .images import resolve_images
from .markup import (
    NON_CONTENT_SELECTORS,
    is_html_content_type,
    parse_html,
    placeholder_texts,
    raw_images,
    region_text,
    remove_elements,
)
from .models import Failed, Outcome, ScrapedResult, Success

logger = logging.getLogger(__name__)

# Common CMS content containers, most specific first.
_CONTENT_REGIONS = ("main", "article", ".post-content", ".entry-content", "#content", "body")

_EXTRA_NON_CONTENT = ("noscript", 'link[rel="stylesheet"]', 'meta[http-equiv="refresh"]')


class SoupLoader:
    """Plain GET plus content-region parsing.

    No timeout is set by default: the request waits as long as the server
    keeps the connection open.
    """

    name = "static-B"
    renders_scripts = False

    def __init__(self, *, timeout: float | None = None, min_content_length: int = 100) -> None:
        self._timeout = timeout
        self._min_content_length = min_content_length

    async def scrape(self, url: str) -> Outcome:
        logger.debug("static parse fetch", extra={"url": url, "strategy": self.name})
        try:
            async with httpx.AsyncClient(follow_redirects=True, timeout=self._timeout) as client:
                resp = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("static parse fetch failed", extra={"url": url, "strategy": self.name}, exc_info=True)
            return Failed(f"{self.name} failed for {url}: {str(exc) or type(exc).__name__}")

        if not resp.is_success:
            return Failed(
                f"{self.name} failed for {url}: Failed to fetch URL: "
                f"{resp.status_code} {resp.reason_phrase}"
            )

        content_type = resp.headers.get("content-type")
        if content_type and not is_html_content_type(content_type):
            return Failed(f"{self.name} failed for {url}: Invalid content type: {content_type}.")

        html = resp.text
        final_url = str(resp.url)
        soup = parse_html(html)

        placeholders = placeholder_texts(soup)
        remove_elements(soup, NON_CONTENT_SELECTORS + _EXTRA_NON_CONTENT)
        text = region_text(soup, _CONTENT_REGIONS)

        signal = detect_rendering_required(html, len(text), url=url, placeholder_texts=placeholders)
        if signal is not None:
            logger.info("javascript required", extra={"url": url, "strategy": self.name})
            return signal

        if len(text) < self._min_content_length:
            return Failed(
                f"{self.name} extracted too little text ({len(text)} chars). "
                "Content might be dynamically loaded or not present in initial HTML."
            )

        images = resolve_images(raw_images(soup), final_url, keep_unresolved=False)
        logger.debug(
            "static parse complete",
            extra={"url": url, "final_url": final_url, "text_length": len(text), "images": len(images)},
        )
        return Success(ScrapedResult(text_content=text, final_url=final_url, images=images))
