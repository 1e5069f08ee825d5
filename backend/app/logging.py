"""Structured logging for the API process.

Every record (structlog or stdlib, e.g. uvicorn and SQLAlchemy) goes through
one ProcessorFormatter on stdout. LOG_FORMAT=console gives colored key-value
lines for development; LOG_FORMAT=json gives one JSON object per line for log
shippers. Receipt numbering logs carry `lock`, `receipt_number` and
`repair_request_id` keys, which stay searchable in both formats.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

from app.config import settings

# Loggers that are chatty at INFO and rarely useful here
QUIET_LOGGERS = {
    "asyncio": logging.WARNING,
    "redis": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(log_format: str | None = None, log_level: str | None = None) -> logging.Handler:
    """Route structlog and stdlib logging through a single stdout handler.

    Defaults come from settings; the arguments exist for tooling and tests.
    Returns the installed handler.
    """
    log_format = log_format or settings.log_format
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]
    if log_format == "json":
        # Console output renders tracebacks itself
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_format),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    return handler


_configured = False


def setup_logging() -> None:
    """Setup logging once. Safe to call multiple times."""
    global _configured
    if not _configured:
        configure_logging()
        _configured = True
