"""
View Renderer
Orchestrates hooks, registries, template compilation and caching
"""

import asyncio
import time
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from viewkit.core import (
    Settings,
    TemplateCache,
    NotFoundError,
    LogContext,
    get_logger,
    template_fingerprint,
)
from viewkit.monitoring import metrics_collector
from viewkit.registry import (
    AFTER_RENDER,
    BEFORE_RENDER,
    AssetRegistry,
    ComponentConfig,
    ComponentRegistry,
    ExtensionConfig,
    HookFn,
    HookPipeline,
    LayoutFn,
    LayoutRegistry,
    MiddlewareFn,
    MiddlewarePipeline,
    RenderResult,
)
from .engine import CompiledTemplate, JinjaTemplateEngine, TemplateCompiler
from .watcher import ComponentWatcher

logger = get_logger(__name__)


class ViewRenderer:
    """
    Owns every registry, pipeline and the template cache for one process.

    State is shared by all in-flight renders and read at the moment of use:
    registering a component mid-render is visible to that render's later
    lookups, and bundles always reflect the current asset maps.

    Usage:
        renderer = ViewRenderer()
        renderer.register_component("greet", {"render": lambda p: f"Hello, {p['name']}"})
        html = await renderer.render("<div>{{ render_component('greet', {'name': 'Ada'}) }}</div>")
    """

    def __init__(
        self,
        engine: Optional[TemplateCompiler] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.engine = engine or JinjaTemplateEngine(self.settings)

        self.hooks = HookPipeline()
        self.middleware = MiddlewarePipeline()
        self.assets = AssetRegistry()
        self.components = ComponentRegistry(self.middleware, self.assets)
        self.layouts = LayoutRegistry()
        self.template_cache: TemplateCache[CompiledTemplate] = TemplateCache(
            max_size=self.settings.template_cache_size
        )

        # Resolved once; never re-read from the environment afterwards.
        self.hot_reload_enabled = self.settings.is_development
        # Running watchers keyed by their task; finished tasks remove themselves.
        self.watchers: Dict["asyncio.Task[None]", ComponentWatcher] = {}

        logger.info(
            "renderer_initialized",
            environment=self.settings.environment,
            hot_reload=self.hot_reload_enabled,
            cache_size=self.settings.template_cache_size,
        )

    # ------------------------------------------------------------------
    # Components & layouts
    # ------------------------------------------------------------------

    def register_component(
        self, name: str, config: Union[ComponentConfig, Mapping[str, Any]]
    ) -> None:
        self.components.register(name, config)

    def extend_component(
        self,
        base_name: str,
        name: str,
        config: Union[ExtensionConfig, Mapping[str, Any]],
    ) -> None:
        self.components.extend(base_name, name, config)

    async def render_component(self, name: str, props: Optional[Dict[str, Any]] = None) -> Any:
        return await self.components.render(name, props)

    def register_layout(self, name: str, render: LayoutFn) -> None:
        self.layouts.register(name, render)

    async def render_layout(self, name: str, slots: Optional[Dict[str, Any]] = None) -> Any:
        return await self.layouts.render(name, slots)

    # ------------------------------------------------------------------
    # Hooks & middleware
    # ------------------------------------------------------------------

    def add_hook(self, event: str, fn: HookFn) -> None:
        self.hooks.add(event, fn)

    async def run_hooks(self, event: str, value: Any) -> Any:
        return await self.hooks.run(event, value)

    def use(self, target: str, fn: MiddlewareFn) -> None:
        self.middleware.use(target, fn)

    async def apply_middleware(self, target: str, value: Any) -> Any:
        return await self.middleware.run(target, value)

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------

    def add_style(self, name: str, css: str) -> None:
        self.assets.add_style(name, css)

    def add_script(self, name: str, js: str) -> None:
        self.assets.add_script(name, js)

    def get_bundled_styles(self) -> str:
        return self.assets.bundled_styles()

    def get_bundled_scripts(self) -> str:
        return self.assets.bundled_scripts()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    async def render_to_string(
        self, name: str, props: Optional[Dict[str, Any]] = None
    ) -> RenderResult:
        """
        Render a component together with the full current asset bundles.

        Bundles are global: every registered style and script is included,
        not only those of ``name``.

        Raises:
            NotFoundError: If ``name`` is not registered
        """
        component = self.components.get(name)
        if component is None:
            raise NotFoundError(name, "component")

        html = await component(props)
        return RenderResult(
            html=html,
            styles=self.get_bundled_styles(),
            scripts=self.get_bundled_scripts(),
        )

    async def render(
        self,
        template: Any,
        data: Optional[Mapping[str, Any]] = None,
        *,
        cache: bool = False,
        filename: Optional[str] = None,
        **engine_options: Any,
    ) -> Any:
        """
        Render a template string.

        Pipeline: ``before_render`` hooks over ``data`` -> context assembly ->
        compile (or reuse a cached compile when ``cache`` is set) -> execute
        -> ``after_render`` hooks over the output.

        Args:
            template: Template source; non-strings are converted with str()
            data: Context values exposed to the template
            cache: Reuse/store the compiled template keyed by its text
            filename: Template origin for engine diagnostics
            **engine_options: Passed through to the template engine

        Returns:
            The rendered output after ``after_render`` hooks

        Raises:
            Any error from hooks, components, compilation or execution,
            unchanged, after it has been logged.
        """
        start = time.perf_counter()
        stage = BEFORE_RENDER
        template_id: Optional[str] = None

        try:
            data = await self.hooks.run(BEFORE_RENDER, data if data is not None else {})

            stage = "context"
            context = self._build_context(data)

            stage = "compile"
            source = template if isinstance(template, str) else str(template)
            template_id = template_fingerprint(source)
            compiled = self._get_compiled(source, template_id, cache, filename, engine_options)

            stage = "execute"
            result = await compiled(context)

            stage = AFTER_RENDER
            result = await self.hooks.run(AFTER_RENDER, result)

        except Exception as e:
            logger.error(
                "render_failed",
                stage=stage,
                template_id=template_id,
                filename=filename,
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            metrics_collector.record_error(type(e).__name__, stage)
            metrics_collector.record_render("template", "error", time.perf_counter() - start)
            raise

        metrics_collector.record_render("template", "success", time.perf_counter() - start)
        return result

    async def render_file(
        self,
        filename: Union[str, Path],
        data: Optional[Mapping[str, Any]] = None,
        *,
        cache: bool = False,
        **engine_options: Any,
    ) -> Any:
        """
        Read a UTF-8 template file and render it.

        Raises:
            OSError: If the file cannot be read (no retry, no fallback)
        """
        with LogContext(template_file=str(filename)):
            source = await asyncio.to_thread(Path(filename).read_text, encoding="utf-8")
            return await self.render(
                source, data, cache=cache, filename=str(filename), **engine_options
            )

    def _build_context(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            **data,
            "render_component": self.render_component,
            "render_layout": self.render_layout,
            "slots": {},
            "styles": self.get_bundled_styles(),
            "scripts": self.get_bundled_scripts(),
        }

    def _get_compiled(
        self,
        source: str,
        template_id: str,
        cache: bool,
        filename: Optional[str],
        engine_options: Dict[str, Any],
    ) -> CompiledTemplate:
        if cache:
            compiled = self.template_cache.get(source)
            if compiled is not None:
                metrics_collector.record_cache_hit()
                logger.debug("cache_hit", template_id=template_id)
                return compiled
            metrics_collector.record_cache_miss()
            logger.debug("cache_miss", template_id=template_id)

        compiled = self.engine.compile(source, filename=filename, **engine_options)
        metrics_collector.record_compilation()

        if cache:
            self.template_cache.set(source, compiled)
            logger.debug("cached", template_id=template_id, size=len(self.template_cache))

        return compiled

    # ------------------------------------------------------------------
    # Development hot reload
    # ------------------------------------------------------------------

    def watch_components(self, directory: Union[str, Path]) -> Optional["asyncio.Task[None]"]:
        """
        Re-register components from ``directory`` whenever their files change.

        Only active when the renderer was built with ``environment`` set to
        ``development``; otherwise nothing is watched and None is returned.
        Must be called from a running event loop.
        """
        if not self.hot_reload_enabled:
            logger.debug("hot_reload_disabled", directory=str(directory))
            return None

        watcher = ComponentWatcher(
            self, directory, debounce_ms=self.settings.watch_debounce_ms
        )
        task = asyncio.create_task(watcher.run(), name=f"viewkit-watch:{directory}")
        self.watchers[task] = watcher
        task.add_done_callback(self._watch_done)
        return task

    def _watch_done(self, task: "asyncio.Task[None]") -> None:
        watcher = self.watchers.pop(task, None)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "watch_failed",
                directory=str(watcher.directory) if watcher else None,
                error_type=type(error).__name__,
                error=str(error),
                exc_info=error,
            )

    async def stop_watching(self) -> None:
        """Stop every watcher and wait for its task to finish."""
        tasks = list(self.watchers)
        for task, watcher in list(self.watchers.items()):
            watcher.stop()
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self.watchers.clear()


__all__ = ["ViewRenderer"]
