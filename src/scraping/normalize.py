"""Markup-to-prose text normalization."""

from __future__ import annotations

import re

_SCRIPT_RE = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"</?[^>]+(?:>|$)")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(raw: str | None) -> str:
    """Strip script/style blocks and tags, then collapse whitespace.

    Each removed tag is replaced by a single space so text from adjacent
    elements never runs together. ``None`` or empty input gives ``""``.
    """
    if not raw:
        return ""
    text = _SCRIPT_RE.sub("", raw)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
