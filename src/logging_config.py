"""Structured logging for the scraper service.

Every record goes to stdout. In ``json`` mode each line is one JSON object
carrying the ``extra={...}`` fields passed at the call site (``url``,
``strategy``, ``final_url`` and so on); ``text`` mode is meant for local runs.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "scraper-service"

# Client libraries that log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def build_formatter(log_format: str = "json") -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
    return JsonFormatter(
        "{asctime}{levelname}{name}{message}",
        style="{",
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        static_fields={"service": SERVICE_NAME},
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Route root and uvicorn loggers through a single stdout handler."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(log_format))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in _UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers[:] = [handler]
        server_logger.propagate = False

    quiet = max(level, logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
