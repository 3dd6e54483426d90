"""BeautifulSoup helpers shared by the static page loaders."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .normalize import normalize_text

# Navigation, chrome and ad-like regions that never hold the page's prose.
NON_CONTENT_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "iframe",
    "embed",
    "object",
    "header",
    "footer",
    "nav",
    "aside",
    ".advertisement",
    ".banner",
    ".popup",
    ".modal",
    "#cookie-banner",
    ".share-buttons",
    ".social-media-links",
    ".sidebar",
)

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def remove_elements(soup: BeautifulSoup, selectors: tuple[str, ...]) -> None:
    """Remove every element matching any of *selectors*, in place."""
    for element in soup.select(", ".join(selectors)):
        element.decompose()


def region_text(soup: BeautifulSoup, selectors: tuple[str, ...]) -> str:
    """Return normalized text of the first region in *selectors* that has any.

    Falls back to the whole document when nothing matches, which covers
    fragments without a ``<body>``.
    """
    for selector in selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = normalize_text(element.get_text(" "))
        if text:
            return text
    return normalize_text(soup.get_text(" "))


def placeholder_texts(soup: BeautifulSoup) -> list[str]:
    """Text of each ``<noscript>`` element, normalized."""
    return [normalize_text(el.get_text(" ")) for el in soup.find_all("noscript")]


def raw_images(soup: BeautifulSoup) -> list[tuple[str | None, str | None]]:
    """``(src, alt)`` of every ``<img>`` in document order."""
    return [(img.get("src"), img.get("alt")) for img in soup.find_all("img")]


def is_html_content_type(content_type: str) -> bool:
    ct = content_type.lower().split(";")[0].strip()
    return ct in HTML_CONTENT_TYPES
