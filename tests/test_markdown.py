"""Markdown formatting of scraped pages."""

from src.api.markdown import format_to_markdown
from src.scraping.models import ScrapedImage, ScrapedResult


def test_text_only():
    result = ScrapedResult(text_content="Just text.", final_url="https://example.com/")
    assert format_to_markdown(result) == "Just text."


def test_images_section_with_default_alt():
    result = ScrapedResult(
        text_content="Body.",
        final_url="https://example.com/",
        images=[
            ScrapedImage(src="https://example.com/a.png", alt="Chart"),
            ScrapedImage(src="https://example.com/b.png"),
        ],
    )

    assert format_to_markdown(result) == (
        "Body.\n\n## Images\n\n"
        "![Chart](https://example.com/a.png)\n"
        "![Scraped Image 2](https://example.com/b.png)\n"
    )
