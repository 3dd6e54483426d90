"""Pydantic Settings: loads configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

from src.scraping.markup import BROWSER_USER_AGENT


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000

    # Scraping
    user_agent: str = BROWSER_USER_AGENT
    static_a_timeout_seconds: float = 15.0
    # None leaves the second static fetch without a timeout.
    static_b_timeout_seconds: float | None = None
    render_timeout_seconds: float = 60.0
    render_headless: bool = True
    # Empty uses Playwright's bundled Chromium for render-A.
    chrome_channel: str = ""

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
