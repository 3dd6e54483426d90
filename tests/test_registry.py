"""Strategy registry and default wiring."""

import pytest

from src.config import Settings
from src.scraping import (
    ChromeLoader,
    ChromiumLoader,
    HttpLoader,
    ScraperRegistry,
    SoupLoader,
    build_default_registry,
)
from src.scraping.models import STRATEGY_NAMES


def test_default_registry_order_and_split():
    registry = build_default_registry(Settings())

    assert registry.names() == list(STRATEGY_NAMES)
    assert [type(loader) for loader in registry.static_loaders()] == [HttpLoader, SoupLoader]
    assert [type(loader) for loader in registry.render_loaders()] == [ChromeLoader, ChromiumLoader]


def test_settings_flow_into_loaders():
    settings = Settings(static_a_timeout_seconds=3, render_timeout_seconds=5, chrome_channel="chrome")
    registry = build_default_registry(settings)

    assert registry.get("static-A")._timeout == 3
    assert registry.get("static-B")._timeout is None
    assert registry.get("render-A")._timeout_ms == 5000
    assert registry.get("render-A")._channel == "chrome"


def test_duplicate_name_rejected():
    registry = ScraperRegistry()
    registry.register(HttpLoader())
    with pytest.raises(ValueError, match="already registered"):
        registry.register(HttpLoader())


def test_unknown_name():
    assert ScraperRegistry().get("static-A") is None
