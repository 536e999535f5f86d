"""Structured logging setup shared by the API, the CLI and the services."""

import logging
import sys

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

from playground.config import get_settings


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Logs go to stderr so command output on stdout stays clean.

    Args:
        log_level: Minimum level name, e.g. "INFO" or "DEBUG".
        json_logs: Render JSON lines instead of the coloured console format.
    """
    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


_settings = get_settings()
configure_logging(_settings.log_level, _settings.log_json)

logger = structlog.get_logger()
