"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import ViewError, NotFoundError, ValidationError
from .validate import ValidationOutcome, valid, invalid, to_outcome, failure_reason
from .logging_config import configure_logging, get_logger, LogContext
from .hash import template_fingerprint
from .cache import TemplateCache, CacheStats


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ViewError",
    "NotFoundError",
    "ValidationError",
    # Validation
    "ValidationOutcome",
    "valid",
    "invalid",
    "to_outcome",
    "failure_reason",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Hashing
    "template_fingerprint",
    # Caching
    "TemplateCache",
    "CacheStats",
    # DI
    "create_container",
]
