"""Heuristic detection of pages that only render with JavaScript enabled."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .models import NeedsRendering

logger = logging.getLogger(__name__)

# Pages with at least this much extracted text are treated as real content
# even if they mention one of the phrases below.
RENDERING_TEXT_GATE = 500

JS_REQUIRED_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"you need to enable javascript",
        r"enable javascript to continue",
        r"javascript is required",
        r"javascript is disabled",
        r"requires javascript",
        r"doesn't work unless you turn on javascript",
        r"<noscript.*>javascript is required</noscript>",
        r"please enable javascript",
        r"to use this site, please enable javascript",
        r"this site requires javascript",
    )
)


def matches_js_signature(text: str) -> bool:
    """Return ``True`` if *text* contains any JavaScript-required phrase."""
    return any(pattern.search(text) for pattern in JS_REQUIRED_PATTERNS)


def detect_rendering_required(
    raw_html: str,
    text_length: int,
    *,
    url: str,
    placeholder_texts: Iterable[str] | None = None,
) -> NeedsRendering | None:
    """Decide whether a statically fetched page needs a rendering strategy.

    Fires only when a signature matches and the preliminary text is shorter
    than :data:`RENDERING_TEXT_GATE`. When *placeholder_texts* (the contents
    of ``<noscript>`` elements) are given and one of them matches, the reason
    quotes that placeholder verbatim.
    """
    if text_length >= RENDERING_TEXT_GATE:
        return None

    for placeholder in placeholder_texts or ():
        if placeholder and matches_js_signature(placeholder):
            logger.debug("script placeholder matched", extra={"url": url, "text_length": text_length})
            return NeedsRendering(
                reason=(
                    f'Page requires JavaScript (noscript says: "{placeholder}"). '
                    f"Text length: {text_length}. URL: {url}"
                )
            )

    if matches_js_signature(raw_html):
        logger.debug("javascript signature matched", extra={"url": url, "text_length": text_length})
        return NeedsRendering(
            reason=(
                "Content indicates JavaScript is required and was not rendered. "
                f"Text length: {text_length}. URL: {url}"
            )
        )
    return None
