"""Resolve image references to absolute URLs against a page's final URL."""

from __future__ import annotations

import logging
from typing import Iterable
from urllib.parse import urljoin, urlsplit, urlunsplit

from .models import ScrapedImage

logger = logging.getLogger(__name__)

_HIERARCHICAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


class ImageResolutionError(ValueError):
    """Raised when an image reference cannot be turned into a valid URL."""


def resolve_image_url(raw_src: str, base_url: str) -> str:
    """Resolve *raw_src* relative to *base_url* using RFC 3986 joining.

    Absolute references come back unchanged apart from normalization
    (lower-cased scheme and host, ``/`` for an empty http(s) path).
    """
    src = raw_src.strip()
    try:
        joined = urljoin(base_url, src)
        parts = urlsplit(joined)
        # Accessing .port validates it; a non-numeric port raises ValueError.
        parts.port
    except ValueError as exc:
        raise ImageResolutionError(f"cannot resolve {raw_src!r} against {base_url!r}: {exc}") from exc

    scheme = parts.scheme.lower()
    if not scheme:
        raise ImageResolutionError(f"cannot resolve {raw_src!r} against {base_url!r}: no scheme")

    if scheme not in _HIERARCHICAL_SCHEMES:
        # data:, blob: and similar opaque URLs are already absolute.
        return urlunsplit(parts._replace(scheme=scheme))

    if not parts.hostname:
        raise ImageResolutionError(f"cannot resolve {raw_src!r} against {base_url!r}: no host")

    userinfo, sep, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{sep}{hostport.lower()}"
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))


def resolve_images(
    raw_images: Iterable[tuple[str | None, str | None]],
    base_url: str,
    *,
    keep_unresolved: bool,
) -> list[ScrapedImage]:
    """Resolve ``(src, alt)`` pairs, in document order.

    Empty sources are skipped. A source that fails to resolve is dropped, or
    kept verbatim when *keep_unresolved* is set.
    """
    images: list[ScrapedImage] = []
    for src, alt in raw_images:
        if not src:
            continue
        try:
            images.append(ScrapedImage(src=resolve_image_url(src, base_url), alt=alt or ""))
        except ImageResolutionError:
            logger.warning("invalid image url", extra={"src": src, "page": base_url})
            if keep_unresolved:
                images.append(ScrapedImage(src=src, alt=alt or ""))
    return images
