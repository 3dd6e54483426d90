"""Strategy orchestrator: sequences page loaders and applies escalation rules."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from .models import (
    AttemptRecord,
    ExhaustedFailure,
    Failed,
    NeedsRendering,
    Outcome,
    ScrapeOutcome,
    ScrapeSuccess,
    StrategyFailure,
    Success,
    ValidationFailure,
)
from .registry import PageLoader, ScraperRegistry

logger = logging.getLogger(__name__)

_VALID_PREFIXES = ("http://", "https://")


def fallback_label(strategy: str, tried_renderers: list[str], origin: str) -> str:
    """Describe how a rendering strategy was reached.

    ``render-A (fallback from static-A)`` when it was the first renderer
    tried, ``render-B (fallback from render-A after static-A)`` otherwise.
    """
    if not tried_renderers:
        return f"{strategy} (fallback from {origin})"
    return f"{strategy} (fallback from {tried_renderers[-1]} after {origin})"


class ScrapeOrchestrator:
    """Runs page loaders one at a time until one yields enough content.

    Without an explicit strategy, static loaders are tried first; a
    rendering-required signal skips the remaining static loaders. Rendering
    loaders follow in registry order. With an explicit strategy only that
    loader runs, escalating to the renderers solely on a rendering-required
    signal from a static loader.
    """

    def __init__(self, registry: ScraperRegistry) -> None:
        self._registry = registry

    async def run(self, url: str | None, strategy: str | None = None) -> ScrapeOutcome:
        failure = self._validate(url, strategy)
        if failure is not None:
            logger.warning("scrape request rejected", extra={"url": url, "strategy": strategy, "reason": failure.reason})
            return failure

        assert url is not None
        if strategy:
            return await self._run_explicit(url, strategy)
        return await self._run_auto(url)

    def _validate(self, url: str | None, strategy: str | None) -> ValidationFailure | None:
        if not url:
            return ValidationFailure("URL is required")
        if not url.startswith(_VALID_PREFIXES):
            return ValidationFailure("Invalid URL format. Must start with http:// or https://")
        if strategy and self._registry.get(strategy) is None:
            options = ", ".join(f'"{name}"' for name in self._registry.names())
            return ValidationFailure(
                f"Invalid scraper agent specified: {strategy}. Valid options are {options}."
            )
        return None

    async def _attempt(self, loader: PageLoader, url: str) -> Outcome:
        """Run one loader exactly once, folding unexpected errors into ``Failed``."""
        logger.info("attempting scrape", extra={"url": url, "strategy": loader.name})
        try:
            outcome = await loader.scrape(url)
        except Exception as exc:
            logger.warning("loader raised", extra={"url": url, "strategy": loader.name}, exc_info=True)
            return Failed(f"{loader.name} failed for {url}: {exc}")

        if isinstance(outcome, NeedsRendering) and loader.renders_scripts:
            # Only static loaders may ask for rendering.
            return Failed(outcome.reason)
        if not isinstance(outcome, Success):
            logger.warning(
                "scrape attempt failed",
                extra={"url": url, "strategy": loader.name, "outcome": type(outcome).__name__, "reason": outcome.reason},
            )
        return outcome

    async def _run_auto(self, url: str) -> ScrapeOutcome:
        logger.info("no strategy requested, using fallback chain", extra={"url": url})
        attempts: list[AttemptRecord] = []
        js_origin: str | None = None

        for loader in self._registry.static_loaders():
            outcome = await self._attempt(loader, url)
            if isinstance(outcome, Success):
                return self._succeed(url, outcome, loader.name)
            attempts.append(_record(loader.name, outcome))
            if isinstance(outcome, NeedsRendering):
                js_origin = loader.name
                logger.info("rendering required, skipping remaining static loaders", extra={"url": url, "strategy": loader.name})
                break

        tried: list[str] = []
        for loader in self._registry.render_loaders():
            outcome = await self._attempt(loader, url)
            if isinstance(outcome, Success):
                label = fallback_label(loader.name, tried, js_origin) if js_origin else loader.name
                return self._succeed(url, outcome, label)
            attempts.append(_record(loader.name, outcome))
            tried.append(loader.name)

        logger.error(
            "all scraping strategies failed",
            extra={"url": url, "strategies": [a.strategy for a in attempts]},
        )
        return ExhaustedFailure(attempts=attempts)

    async def _run_explicit(self, url: str, strategy: str) -> ScrapeOutcome:
        loader = self._registry.get(strategy)
        assert loader is not None
        logger.info("explicit strategy requested", extra={"url": url, "strategy": strategy})

        outcome = await self._attempt(loader, url)
        if isinstance(outcome, Success):
            return self._succeed(url, outcome, loader.name)

        if not isinstance(outcome, NeedsRendering):
            return StrategyFailure(strategy=loader.name, reason=outcome.reason)

        logger.info("rendering required, escalating to renderers", extra={"url": url, "strategy": loader.name})
        errors: dict[str, str] = {loader.name: outcome.reason}
        tried: list[str] = []
        for renderer in self._registry.render_loaders():
            rendered = await self._attempt(renderer, url)
            if isinstance(rendered, Success):
                label = fallback_label(renderer.name, tried, loader.name)
                return self._succeed(url, rendered, label, escalation_errors=errors)
            errors[renderer.name] = rendered.reason
            tried.append(renderer.name)

        logger.error("escalation exhausted", extra={"url": url, "strategy": loader.name, "tried": tried})
        escalation_reasons = {name: reason for name, reason in errors.items() if name != loader.name}
        return StrategyFailure(strategy=loader.name, reason=outcome.reason, escalation_reasons=escalation_reasons)

    def _succeed(
        self,
        url: str,
        outcome: Success,
        label: str,
        escalation_errors: dict[str, str] | None = None,
    ) -> ScrapeSuccess:
        result = outcome.result
        logger.info(
            "scrape successful",
            extra={
                "url": url,
                "strategy": label,
                "final_url": result.final_url,
                "text_length": len(result.text_content),
                "images": len(result.images),
            },
        )
        return ScrapeSuccess(result=result, strategy_label=label, escalation_errors=dict(escalation_errors or {}))


def _record(strategy: str, outcome: Outcome) -> AttemptRecord:
    return AttemptRecord(
        strategy=strategy,
        error=getattr(outcome, "reason", ""),
        timestamp=datetime.now(timezone.utc),
    )
