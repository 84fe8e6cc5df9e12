"""
Structured logging with structlog.

Entry points call configure_logging(). Until then library modules log through
structlog's default printer, filtered at INFO so debug events stay quiet.
"""
from __future__ import annotations

import logging
import sys
from functools import lru_cache

import structlog

from addressbook.core.config import Settings, get_settings

_configured = False
DEFAULT_LEVEL = logging.INFO


def _install_default_filter() -> None:
    """Drop events below DEFAULT_LEVEL while the application has not configured logging."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(DEFAULT_LEVEL))


if not structlog.is_configured():
    _install_default_filter()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib logging and structlog once per process."""
    global _configured
    if _configured:
        return
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if settings.log_format == "json":
        formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
        )
    else:
        formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
        )

    for handler in logging.root.handlers:
        handler.setFormatter(formatter)
    _configured = True


@lru_cache(maxsize=100)
def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance."""
    return structlog.get_logger(name)
