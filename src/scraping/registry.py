"""Ordered registry of page loader strategies."""

from __future__ import annotations

from typing import Protocol

from .models import Outcome


class PageLoader(Protocol):
    """Protocol for page loader strategies."""

    name: str
    renders_scripts: bool

    async def scrape(self, url: str) -> Outcome: ...


class ScraperRegistry:
    """Registry mapping strategy names to loader instances.

    Registration order is escalation order: static loaders are tried in the
    order they were registered, then rendering loaders likewise.
    """

    def __init__(self) -> None:
        self._loaders: dict[str, PageLoader] = {}

    def register(self, loader: PageLoader) -> None:
        """Register a loader instance under its ``name``."""
        if loader.name in self._loaders:
            raise ValueError(f"loader already registered: {loader.name}")
        self._loaders[loader.name] = loader

    def get(self, name: str) -> PageLoader | None:
        return self._loaders.get(name)

    def names(self) -> list[str]:
        return list(self._loaders)

    def static_loaders(self) -> list[PageLoader]:
        return [loader for loader in self._loaders.values() if not loader.renders_scripts]

    def render_loaders(self) -> list[PageLoader]:
        return [loader for loader in self._loaders.values() if loader.renders_scripts]
