"""Template compilation engine (Jinja2, async mode).

The orchestrator only depends on the ``TemplateCompiler`` protocol: compile a
source string into an async callable taking a data context.
"""

from typing import Any, Dict, Optional, Protocol

from jinja2 import Environment, Template

from viewkit.core import Settings, get_logger

logger = get_logger(__name__)


class CompiledTemplate(Protocol):
    """A compiled template bound to its source text."""

    async def __call__(self, context: Dict[str, Any]) -> str:
        ...


class TemplateCompiler(Protocol):
    """Compiles template source into an executable renderer."""

    def compile(
        self, source: str, *, filename: Optional[str] = None, **options: Any
    ) -> CompiledTemplate:
        ...


class JinjaTemplate:
    """Async callable wrapper around a compiled Jinja2 template."""

    def __init__(self, template: Template, filename: Optional[str] = None) -> None:
        self.template = template
        self.filename = filename

    async def __call__(self, context: Dict[str, Any]) -> str:
        return await self.template.render_async(context)

    def __repr__(self) -> str:
        return f"JinjaTemplate(filename={self.filename!r})"


class JinjaTemplateEngine:
    """
    Jinja2-backed template compiler.

    Templates always compile for async execution, so coroutine functions in
    the context (``render_component``, ``render_layout``) are awaited
    transparently inside expressions.

    Example:
        engine = JinjaTemplateEngine(settings)
        compiled = engine.compile("Hello {{ name }}")
        await compiled({"name": "Ada"})  # "Hello Ada"
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or Settings()
        self.env = Environment(
            autoescape=settings.autoescape,
            trim_blocks=settings.trim_blocks,
            lstrip_blocks=settings.lstrip_blocks,
            enable_async=True,
        )

    def compile(
        self, source: str, *, filename: Optional[str] = None, **options: Any
    ) -> JinjaTemplate:
        """
        Compile ``source``.

        Args:
            source: Template text
            filename: Origin of the text, used in syntax error diagnostics
            **options: ``Environment.overlay`` keywords (e.g. ``autoescape``)

        Raises:
            jinja2.TemplateSyntaxError: If the source does not parse
        """
        env = self.env
        if options:
            env = env.overlay(**{**options, "enable_async": True})

        code = env.compile(source, name=filename, filename=filename)
        template = env.template_class.from_code(env, code, env.make_globals(None))

        logger.debug("template_compiled", filename=filename, size=len(source))
        return JinjaTemplate(template, filename)


__all__ = ["CompiledTemplate", "TemplateCompiler", "JinjaTemplate", "JinjaTemplateEngine"]
