"""In-page scripts and post-processing shared by the rendering loaders."""

from __future__ import annotations

from typing import Any

from .images import resolve_images
from .markup import NON_CONTENT_SELECTORS
from .models import Failed, Outcome, ScrapedResult, Success
from .normalize import normalize_text

RENDER_NON_CONTENT_SELECTORS: list[str] = [
    *NON_CONTENT_SELECTORS,
    "noscript",
    "button",
    'form[action*="subscribe"]',
]

# Container args for running Chromium without a user namespace sandbox.
SANDBOXLESS_ARGS = ["--no-sandbox", "--disable-setuid-sandbox", "--disable-gpu"]

STRIP_NON_CONTENT_JS = """
(selectors) => {
  for (const selector of selectors) {
    document.querySelectorAll(selector).forEach((el) => el.remove());
  }
}
"""

EXTRACT_CONTENT_JS = """
() => {
  const region =
    document.querySelector('main') ||
    document.querySelector('article') ||
    document.querySelector('[role="main"]') ||
    document.body;
  const images = [];
  document.querySelectorAll('img').forEach((img) => {
    const src = img.getAttribute('src');
    if (src) {
      images.push({ src, alt: img.getAttribute('alt') || '' });
    }
  });
  return { textContent: region ? region.innerText : '', images };
}
"""


def build_rendered_outcome(
    name: str,
    extracted: dict[str, Any],
    final_url: str,
    min_content_length: int,
) -> Outcome:
    """Turn the in-page extraction payload into an :class:`Outcome`.

    Images that fail to resolve keep their original ``src``.
    """
    text = normalize_text(extracted.get("textContent") or "")
    if len(text) < min_content_length:
        return Failed(f'{name} extracted too little text ({len(text)} chars). Content: "{text[:200]}"')

    pairs = [(img.get("src"), img.get("alt")) for img in extracted.get("images") or []]
    images = resolve_images(pairs, final_url, keep_unresolved=True)
    return Success(ScrapedResult(text_content=text, final_url=final_url, images=images))
