"""Fixtures: fake loaders and a fake Playwright driver."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.scraping.models import Outcome, ScrapedImage, ScrapedResult, Success
from src.scraping.registry import ScraperRegistry


class FakeLoader:
    """Page loader returning a canned outcome (or raising a canned error)."""

    def __init__(self, name: str, renders_scripts: bool, outcome: Outcome | Exception) -> None:
        self.name = name
        self.renders_scripts = renders_scripts
        self._outcome = outcome
        self.calls: list[str] = []

    async def scrape(self, url: str) -> Outcome:
        self.calls.append(url)
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


def _ok(final_url: str = "https://example.com/final", text: str | None = None) -> Success:
    return Success(
        ScrapedResult(
            text_content=text or "Readable article text. " * 10,
            final_url=final_url,
            images=[ScrapedImage(src="https://example.com/a.png", alt="A")],
        )
    )


def _make_registry(**outcomes: Outcome | Exception) -> tuple[ScraperRegistry, dict[str, FakeLoader]]:
    """Registry of four fake loaders; keyword names use underscores (static_A)."""
    loaders: dict[str, FakeLoader] = {}
    registry = ScraperRegistry()
    for key, renders in (("static_A", False), ("static_B", False), ("render_A", True), ("render_B", True)):
        name = key.replace("_", "-")
        loader = FakeLoader(name, renders, outcomes[key])
        loaders[name] = loader
        registry.register(loader)
    return registry, loaders


def _make_fake_playwright(
    *,
    page_url: str = "https://example.com/rendered",
    extracted: dict[str, Any] | None = None,
    goto_error: Exception | None = None,
) -> SimpleNamespace:
    """Build an ``async_playwright`` stand-in and expose its page/browser mocks."""
    page = MagicMock()
    page.url = page_url
    page.goto = AsyncMock(side_effect=goto_error)
    page.evaluate = AsyncMock(side_effect=[None, extracted or {"textContent": "", "images": []}])

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(return_value=False)

    return SimpleNamespace(
        factory=MagicMock(return_value=manager),
        playwright=playwright,
        browser=browser,
        context=context,
        page=page,
    )


@pytest.fixture
def article_html() -> str:
    body = "This is the main article text, written long enough to pass every threshold. " * 3
    return f"""
    <html>
      <head><title>Article</title><style>p {{ color: red; }}</style></head>
      <body>
        <nav>Home | About | Contact</nav>
        <main>
          <p>{body}</p>
          <img src="../images/pic.jpg" alt="Relative">
          <img src="https://cdn.example.org/abs.png">
        </main>
        <footer>Copyright</footer>
        <script>console.log("tracking")</script>
      </body>
    </html>
    """


@pytest.fixture
def success():
    """Factory for a ``Success`` outcome with enough text."""
    return _ok


@pytest.fixture
def make_registry():
    """Factory: ``make_registry(static_A=..., static_B=..., render_A=..., render_B=...)``."""
    return _make_registry


@pytest.fixture
def fake_playwright():
    """Factory for a fake ``async_playwright`` driver."""
    return _make_fake_playwright
