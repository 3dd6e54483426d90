"""Image URL resolution tests."""

import pytest

from src.scraping.images import ImageResolutionError, resolve_image_url, resolve_images
from src.scraping.models import ScrapedImage

BASE = "http://example.com/path/page.html"


def test_parent_segments_pop_path():
    assert resolve_image_url("../images/pic.jpg", BASE) == "http://example.com/images/pic.jpg"


def test_leading_slash_resets_to_root():
    assert resolve_image_url("/image.png", BASE) == "http://example.com/image.png"


def test_sibling_reference():
    assert resolve_image_url("pic.jpg", BASE) == "http://example.com/path/pic.jpg"


def test_protocol_relative():
    assert resolve_image_url("//cdn.example.org/a.png", "https://example.com/") == "https://cdn.example.org/a.png"


def test_absolute_unchanged():
    src = "https://external.com/another.jpg?w=200#x"
    assert resolve_image_url(src, BASE) == src


def test_absolute_normalized():
    assert resolve_image_url("HTTPS://CDN.Example.COM", BASE) == "https://cdn.example.com/"


def test_data_uri_kept():
    src = "data:image/png;base64,iVBORw0KGgo="
    assert resolve_image_url(src, BASE) == src


@pytest.mark.parametrize(
    "src, base",
    [
        ("http://[broken/a.png", BASE),
        ("http://example.com:notaport/a.png", BASE),
        ("pic.jpg", "not-a-url"),
    ],
)
def test_malformed_raises(src, base):
    with pytest.raises(ImageResolutionError):
        resolve_image_url(src, base)


def test_resolve_images_drops_malformed():
    raw = [("/ok.png", "ok"), ("http://[broken", "bad"), ("", "empty"), (None, None)]
    assert resolve_images(raw, BASE, keep_unresolved=False) == [
        ScrapedImage(src="http://example.com/ok.png", alt="ok"),
    ]


def test_resolve_images_keeps_original_when_asked():
    raw = [("/ok.png", None), ("http://[broken", "bad")]
    assert resolve_images(raw, BASE, keep_unresolved=True) == [
        ScrapedImage(src="http://example.com/ok.png", alt=""),
        ScrapedImage(src="http://[broken", alt="bad"),
    ]
