"""
viewkit
Server-side component, layout and template rendering
"""

from functools import lru_cache

from .core import (
    Settings,
    get_settings,
    ViewError,
    NotFoundError,
    ValidationError,
    valid,
    invalid,
    configure_logging,
)
from .registry import (
    BEFORE_RENDER,
    AFTER_RENDER,
    ComponentConfig,
    ExtensionConfig,
    RenderResult,
)
from .rendering import JinjaTemplateEngine, TemplateCompiler, ViewRenderer


@lru_cache
def get_renderer() -> ViewRenderer:
    """
    Get the process-wide renderer.

    Built once from environment settings through the DI container. Every
    caller shares its registries and template cache; construct a
    ``ViewRenderer`` directly for an isolated instance.
    """
    from .core import create_container

    return create_container().get(ViewRenderer)


__all__ = [
    "Settings",
    "get_settings",
    "ViewError",
    "NotFoundError",
    "ValidationError",
    "valid",
    "invalid",
    "configure_logging",
    "BEFORE_RENDER",
    "AFTER_RENDER",
    "ComponentConfig",
    "ExtensionConfig",
    "RenderResult",
    "JinjaTemplateEngine",
    "TemplateCompiler",
    "ViewRenderer",
    "get_renderer",
]
