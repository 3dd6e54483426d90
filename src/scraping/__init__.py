"""Page scraping with an ordered static-to-rendering strategy registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .chrome_loader import ChromeLoader
from .chromium_loader import ChromiumLoader
from .http_loader import HttpLoader
from .models import ScrapedImage, ScrapedResult, ScrapeOutcome, ScrapeSuccess
from .orchestrator import ScrapeOrchestrator
from .registry import PageLoader, ScraperRegistry
from .soup_loader import SoupLoader

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "ChromeLoader",
    "ChromiumLoader",
    "HttpLoader",
    "PageLoader",
    "ScrapeOrchestrator",
    "ScrapeOutcome",
    "ScrapeSuccess",
    "ScrapedImage",
    "ScrapedResult",
    "ScraperRegistry",
    "SoupLoader",
    "build_default_registry",
]

logger = logging.getLogger(__name__)


def build_default_registry(settings: Settings) -> ScraperRegistry:
    """Build the registry with the four loaders in escalation order."""
    registry = ScraperRegistry()

    registry.register(
        HttpLoader(
            timeout=settings.static_a_timeout_seconds,
            user_agent=settings.user_agent,
        )
    )
    registry.register(SoupLoader(timeout=settings.static_b_timeout_seconds))
    registry.register(
        ChromeLoader(
            timeout=settings.render_timeout_seconds,
            channel=settings.chrome_channel,
            headless=settings.render_headless,
            user_agent=settings.user_agent,
        )
    )
    registry.register(
        ChromiumLoader(
            timeout=settings.render_timeout_seconds,
            headless=settings.render_headless,
            user_agent=settings.user_agent,
        )
    )

    logger.debug("scraper registry built", extra={"strategies": registry.names()})
    return registry
