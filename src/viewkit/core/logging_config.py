"""
Structured Logging Configuration
structlog events for the render pipeline, routed through the ``viewkit``
stdlib logger so host applications keep control of the root logger.
"""

import logging
import sys
from typing import Any, List

import structlog
from pythonjsonlogger.json import JsonFormatter

ROOT_LOGGER = "viewkit"

# Marks the handler installed here so reconfiguring replaces it instead of
# stacking a second one.
_HANDLER_ATTR = "_viewkit_handler"


def _processors(json_logs: bool) -> List[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structured logging for viewkit.

    Only the ``viewkit`` logger hierarchy gets a handler; calling this again
    swaps the handler and level rather than adding another.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: One JSON object per line on stdout instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_logs:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_ATTR, True)

    stdlib_logger = logging.getLogger(ROOT_LOGGER)
    for existing in list(stdlib_logger.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            stdlib_logger.removeHandler(existing)
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(log_level)
    stdlib_logger.propagate = False

    structlog.configure(
        processors=_processors(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__, under ``viewkit``)
    """
    return structlog.get_logger(name)


class LogContext:
    """
    Bind key/value context to every log event emitted inside the scope.

    Nested scopes restore the outer values on exit, and each asyncio task
    sees only its own bindings.

    Example:
        with LogContext(template_file="page.html"):
            logger.info("render_started")  # carries template_file
    """

    def __init__(self, **kwargs: Any):
        self.context = kwargs
        self.tokens: Any = None

    def __enter__(self) -> "LogContext":
        self.tokens = structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.reset_contextvars(**self.tokens)
