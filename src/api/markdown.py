"""Markdown rendering of a scraped page."""

from __future__ import annotations

from src.scraping.models import ScrapedResult


def format_to_markdown(result: ScrapedResult) -> str:
    """Page text followed by an ``## Images`` section when images were found."""
    markdown = result.text_content
    if result.images:
        lines = ["", "", "## Images", ""]
        for index, image in enumerate(result.images, start=1):
            alt = image.alt or f"Scraped Image {index}"
            lines.append(f"![{alt}]({image.src})")
        markdown += "\n".join(lines) + "\n"
    return markdown
