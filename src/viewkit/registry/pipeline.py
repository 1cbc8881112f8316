"""Ordered transform pipelines: lifecycle hooks and scoped middleware.

Both thread one value through a named, ordered list of transforms. Hooks are
keyed by a global event name; middleware is keyed by the target it wraps
(usually a component name).
"""

from typing import Any, Dict, List

from viewkit.core import get_logger
from .types import HookFn, MiddlewareFn, Transform, resolve

logger = get_logger(__name__)

BEFORE_RENDER = "before_render"
AFTER_RENDER = "after_render"


class TransformPipeline:
    """Named lists of transforms applied as a left fold."""

    def __init__(self) -> None:
        self._chains: Dict[str, List[Transform]] = {}

    def append(self, name: str, fn: Transform) -> None:
        self._chains.setdefault(name, []).append(fn)

    async def apply(self, name: str, value: Any) -> Any:
        """
        Thread ``value`` through every transform registered under ``name``.

        Each transform receives the previous one's output and may be sync or
        async. Unknown names leave the value unchanged.
        """
        for fn in self._chains.get(name, []):
            value = await resolve(fn(value))
        return value

    def names(self) -> List[str]:
        return list(self._chains)

    def count(self, name: str) -> int:
        return len(self._chains.get(name, []))

    def __contains__(self, name: str) -> bool:
        return name in self._chains


class HookPipeline(TransformPipeline):
    """Lifecycle hooks keyed by event name."""

    def __init__(self) -> None:
        super().__init__()
        self._chains[BEFORE_RENDER] = []
        self._chains[AFTER_RENDER] = []

    def add(self, event: str, fn: HookFn) -> None:
        """Append a hook for ``event``, creating the event if needed."""
        self.append(event, fn)
        logger.debug("hook_added", hook_event=event, position=self.count(event))

    async def run(self, event: str, value: Any) -> Any:
        return await self.apply(event, value)


class MiddlewarePipeline(TransformPipeline):
    """Middleware scoped per target name."""

    def use(self, target: str, fn: MiddlewareFn) -> None:
        """Append middleware for ``target``."""
        self.append(target, fn)
        logger.debug("middleware_added", target=target, position=self.count(target))

    async def run(self, target: str, value: Any) -> Any:
        return await self.apply(target, value)


__all__ = [
    "BEFORE_RENDER",
    "AFTER_RENDER",
    "TransformPipeline",
    "HookPipeline",
    "MiddlewarePipeline",
]
