"""Request/response Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ScrapeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str | None = None
    scraper_agent: str | None = Field(default=None, alias="scraperAgent")
    # Accepted for compatibility; multi-page crawling is not performed.
    crawl_depth: int | None = Field(default=None, alias="crawlDepth")
    search_depth: int | None = Field(default=None, alias="searchDepth")


class ScrapedImageOut(BaseModel):
    src: str
    alt: str = ""


class ScrapeResponse(BaseModel):
    scraped_text: str
    text_content: str
    strategy: str
    final_url: str
    images: list[ScrapedImageOut] = []
    escalation_errors: dict[str, str] = {}
    timestamp: datetime


class AttemptOut(BaseModel):
    strategy: str
    error: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
    kind: str
    timestamp: datetime
    strategy: str | None = None
    attempts: list[AttemptOut] | None = None
    escalation_reasons: dict[str, str] | None = None
