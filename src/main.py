"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.scraping import ScrapeOrchestrator, build_default_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Logging must be configured before the registry logs anything.
    setup_logging(settings.log_level, settings.log_format)

    registry = build_default_registry(settings)
    app.state.settings = settings
    app.state.orchestrator = ScrapeOrchestrator(registry)

    logger.info(
        "scraper service ready",
        extra={
            "strategies": registry.names(),
            "static_a_timeout": settings.static_a_timeout_seconds,
            "static_b_timeout": settings.static_b_timeout_seconds,
            "render_timeout": settings.render_timeout_seconds,
            "chrome_channel": settings.chrome_channel or "chromium",
        },
    )

    yield

    logger.info("scraper service stopped")


app = FastAPI(title="Scraper Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def run() -> None:
    """Console entrypoint: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run("src.main:app", host=settings.host, port=settings.port, log_config=None)
