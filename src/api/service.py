"""Service layer that runs scrape requests and shapes responses for the API routes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from urllib.parse import unquote

from src.api.markdown import format_to_markdown
from src.api.schemas import (
    AttemptOut,
    ErrorResponse,
    ScrapedImageOut,
    ScrapeRequest,
    ScrapeResponse,
)
from src.scraping import ScrapeOrchestrator
from src.scraping.models import (
    ExhaustedFailure,
    ScrapeOutcome,
    ScrapeSuccess,
    StrategyFailure,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

PATH_URL_MARKER = "/?sq/"


def resolve_request_url(body_url: str | None, request_url: str) -> str | None:
    """Take the URL from the body, else from a ``/?sq/<encoded url>`` suffix."""
    if body_url:
        return body_url
    _, marker, encoded = request_url.partition(PATH_URL_MARKER)
    if marker and encoded:
        url = unquote(encoded)
        logger.debug("url taken from request path", extra={"url": url})
        return url
    return None


async def run_scrape(
    orchestrator: ScrapeOrchestrator,
    body: ScrapeRequest,
    request_url: str,
) -> tuple[int, ScrapeResponse | ErrorResponse]:
    """Scrape the requested page and return ``(status_code, payload)``."""
    url = resolve_request_url(body.url, request_url)
    logger.info(
        "scrape request received",
        extra={
            "url": url,
            "strategy": body.scraper_agent,
            "crawl_depth": body.crawl_depth or 0,
            "search_depth": body.search_depth or 0,
        },
    )

    outcome = await orchestrator.run(url, body.scraper_agent or None)
    return outcome_to_response(outcome)


def outcome_to_response(outcome: ScrapeOutcome) -> tuple[int, ScrapeResponse | ErrorResponse]:
    now = datetime.now(timezone.utc)

    if isinstance(outcome, ScrapeSuccess):
        result = outcome.result
        return 200, ScrapeResponse(
            scraped_text=format_to_markdown(result),
            text_content=result.text_content,
            strategy=outcome.strategy_label,
            final_url=result.final_url,
            images=[ScrapedImageOut(src=img.src, alt=img.alt) for img in result.images],
            escalation_errors=outcome.escalation_errors,
            timestamp=now,
        )

    if isinstance(outcome, ValidationFailure):
        return 400, ErrorResponse(error=outcome.reason, kind=outcome.kind, timestamp=now)

    if isinstance(outcome, ExhaustedFailure):
        return 500, ErrorResponse(
            error="All scraping strategies failed.",
            kind=outcome.kind,
            attempts=[
                AttemptOut(strategy=a.strategy, error=a.error, timestamp=a.timestamp)
                for a in outcome.attempts
            ],
            timestamp=outcome.attempts[-1].timestamp if outcome.attempts else now,
        )

    if isinstance(outcome, StrategyFailure):
        if outcome.escalation_reasons:
            tried = ", ".join(outcome.escalation_reasons)
            error = (
                f"Scraping with {outcome.strategy} (JavaScript required) and fallbacks "
                f"{tried} all failed."
            )
        else:
            error = f"Scraping with {outcome.strategy} failed: {outcome.reason}"
        return 500, ErrorResponse(
            error=error,
            kind=outcome.kind,
            strategy=outcome.strategy,
            escalation_reasons=outcome.escalation_reasons or None,
            timestamp=now,
        )

    raise TypeError(f"unexpected scrape outcome: {type(outcome).__name__}")
