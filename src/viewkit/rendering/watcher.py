"""Development hot reload: re-register components when their files change.

A component module exposes two attributes: ``name`` (str) and ``config``
(a ComponentConfig or mapping accepted by ``register_component``).
"""

import asyncio
import importlib
import importlib.machinery
import importlib.util
import os
import sys
from pathlib import Path
from types import CodeType, ModuleType
from typing import TYPE_CHECKING, Optional, Union

from watchfiles import Change, awatch

from viewkit.core import get_logger

if TYPE_CHECKING:
    from .renderer import ViewRenderer

logger = get_logger(__name__)

MODULE_PREFIX = "viewkit_components"


def module_name_for(path: Path) -> str:
    """Stable import name for a component file."""
    stem = "".join(ch if ch.isalnum() else "_" for ch in path.stem)
    return f"{MODULE_PREFIX}_{stem}"


def evict_module(path: Path) -> list[str]:
    """Drop every loaded module whose source file is ``path``."""
    target = os.path.normcase(str(path.resolve()))
    evicted = []
    for name, module in list(sys.modules.items()):
        module_file = getattr(module, "__file__", None)
        if module_file and os.path.normcase(os.path.abspath(module_file)) == target:
            del sys.modules[name]
            evicted.append(name)
    return evicted


class SourceOnlyLoader(importlib.machinery.SourceFileLoader):
    """Loads a component file from its source, never from cached bytecode."""

    def get_code(self, fullname: str) -> CodeType:
        path = self.get_filename(fullname)
        return self.source_to_code(self.get_data(path), path)


def load_module(path: Path) -> ModuleType:
    """Import ``path`` fresh, discarding any previously loaded copy."""
    path = path.resolve()
    evict_module(path)
    importlib.invalidate_caches()

    name = module_name_for(path)
    spec = importlib.util.spec_from_file_location(
        name, path, loader=SourceOnlyLoader(name, str(path))
    )
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load component module from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module


class ComponentWatcher:
    """
    Watches a directory and re-registers components from changed files.

    Only the renderer decides whether a watcher runs at all (development
    environment); the watcher itself does not look at the environment.
    """

    def __init__(
        self,
        renderer: "ViewRenderer",
        directory: Union[str, Path],
        debounce_ms: int = 300,
    ) -> None:
        self.renderer = renderer
        self.directory = Path(directory)
        self.debounce_ms = debounce_ms
        self._stop = asyncio.Event()

    def reload(self, path: Union[str, Path]) -> Optional[str]:
        """
        Re-import one component file and register what it exports.

        Returns:
            The registered component name, or None if the module does not
            export both ``name`` and ``config``.
        """
        path = Path(path)
        module = load_module(path)

        name = getattr(module, "name", None)
        config = getattr(module, "config", None)
        if not isinstance(name, str) or config is None:
            logger.warning("component_module_skipped", path=str(path))
            return None

        self.renderer.register_component(name, config)
        logger.info("component_reloaded", component=name, path=str(path))
        return name

    async def run(self) -> None:
        """Watch until ``stop()`` is called or the task is cancelled."""
        logger.info("watch_started", directory=str(self.directory))

        async for changes in awatch(
            self.directory, debounce=self.debounce_ms, stop_event=self._stop
        ):
            for change, changed in sorted(changes, key=lambda c: c[1]):
                if change == Change.deleted or not changed.endswith(".py"):
                    continue
                try:
                    self.reload(changed)
                except Exception as e:
                    # Dev-only path with no caller to report to: keep watching.
                    logger.error(
                        "component_reload_failed",
                        path=changed,
                        error=str(e),
                        exc_info=True,
                    )

        logger.info("watch_stopped", directory=str(self.directory))

    def stop(self) -> None:
        self._stop.set()


__all__ = ["ComponentWatcher", "load_module", "evict_module", "module_name_for"]
