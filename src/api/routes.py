"""POST /api/scrape endpoint handler."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from src.api.schemas import ScrapeRequest
from src.api.service import run_scrape
from src.scraping import ScrapeOrchestrator

router = APIRouter()


def _get_orchestrator(request: Request) -> ScrapeOrchestrator:
    return request.app.state.orchestrator


@router.post("/api/scrape")
@router.post("/api/scrape/", include_in_schema=False)
async def scrape_page(
    request: Request,
    body: ScrapeRequest | None = Body(default=None),
    orchestrator: ScrapeOrchestrator = Depends(_get_orchestrator),
):
    status_code, payload = await run_scrape(
        orchestrator,
        body or ScrapeRequest(),
        str(request.url),
    )
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", exclude_none=True),
    )
