"""Data models for the scraping package."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Union

StrategyName = Literal["static-A", "static-B", "render-A", "render-B"]

# Canonical escalation order, cheapest first.
STRATEGY_NAMES: tuple[str, ...] = ("static-A", "static-B", "render-A", "render-B")


@dataclass(frozen=True)
class ScrapedImage:
    """An image reference found on a page."""

    src: str
    alt: str = ""


@dataclass
class ScrapedResult:
    """Text and images extracted from a single page by one strategy."""

    text_content: str
    final_url: str
    images: list[ScrapedImage] = field(default_factory=list)


# --- Strategy outcomes ---


@dataclass(frozen=True)
class Success:
    result: ScrapedResult


@dataclass(frozen=True)
class NeedsRendering:
    """The page looks like a script-gated placeholder; try a renderer."""

    reason: str


@dataclass(frozen=True)
class Failed:
    reason: str


Outcome = Union[Success, NeedsRendering, Failed]


# --- Orchestrator results ---


@dataclass(frozen=True)
class AttemptRecord:
    """One failed strategy attempt on the automatic fallback chain."""

    strategy: str
    error: str
    timestamp: datetime


@dataclass
class ScrapeSuccess:
    result: ScrapedResult
    strategy_label: str
    escalation_errors: dict[str, str] = field(default_factory=dict)


@dataclass
class ValidationFailure:
    """Request rejected before any strategy ran."""

    reason: str
    kind: str = field(default="validation", init=False)


@dataclass
class ExhaustedFailure:
    """Every strategy on the automatic chain failed."""

    attempts: list[AttemptRecord] = field(default_factory=list)
    kind: str = field(default="exhausted", init=False)


@dataclass
class StrategyFailure:
    """An explicitly requested strategy failed, with or without escalation."""

    strategy: str
    reason: str
    escalation_reasons: dict[str, str] = field(default_factory=dict)
    kind: str = field(default="strategy-failed", init=False)


ScrapeOutcome = Union[ScrapeSuccess, ValidationFailure, ExhaustedFailure, StrategyFailure]
