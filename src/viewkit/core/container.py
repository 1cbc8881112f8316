"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from viewkit.core.config import Settings, get_settings
from viewkit.core.logging_config import configure_logging
from viewkit.rendering.engine import JinjaTemplateEngine, TemplateCompiler
from viewkit.rendering.renderer import ViewRenderer


class ViewModule(Module):
    """Renderer dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings (explicit, or loaded from the environment)."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_template_engine(self, settings: Settings) -> TemplateCompiler:
        """Provide the Jinja2 template engine."""
        return JinjaTemplateEngine(settings)

    @singleton
    @provider
    def provide_renderer(self, settings: Settings, engine: TemplateCompiler) -> ViewRenderer:
        """Provide the process-wide renderer with logging configured."""
        configure_logging(settings.log_level, settings.json_logs)
        return ViewRenderer(engine=engine, settings=settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([ViewModule(settings)])
