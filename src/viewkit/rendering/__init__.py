"""Template engine adapter, render orchestrator and dev hot reload."""

from .engine import CompiledTemplate, TemplateCompiler, JinjaTemplate, JinjaTemplateEngine
from .watcher import ComponentWatcher
from .renderer import ViewRenderer

__all__ = [
    "CompiledTemplate",
    "TemplateCompiler",
    "JinjaTemplate",
    "JinjaTemplateEngine",
    "ComponentWatcher",
    "ViewRenderer",
]
