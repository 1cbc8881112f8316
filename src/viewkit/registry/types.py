"""
Registry Type Definitions
Render, validate and transform signatures plus registration configs
"""

import inspect
from dataclasses import dataclass, field, fields
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]

Props = Dict[str, Any]
Slots = Dict[str, Any]

# Hooks and middleware share one shape: take a value, return the next value.
Transform = Callable[[Any], MaybeAwaitable[Any]]
HookFn = Transform
MiddlewareFn = Transform

RenderFn = Callable[[Props], MaybeAwaitable[Any]]
ExtendRenderFn = Callable[[Any, Props], MaybeAwaitable[Any]]
LayoutFn = Callable[[Slots], MaybeAwaitable[Any]]
ValidateFn = Callable[[Props], Any]

# A registered component: validation + middleware + render behind one call.
WrappedRender = Callable[[Optional[Props]], Awaitable[Any]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


@dataclass
class ComponentConfig:
    """Registration config for a component."""

    render: RenderFn
    validate: Optional[ValidateFn] = None
    styles: Optional[str] = None
    scripts: Optional[str] = None
    middleware: List[MiddlewareFn] = field(default_factory=list)

    @classmethod
    def coerce(cls, config: Union["ComponentConfig", Mapping[str, Any]]) -> "ComponentConfig":
        """Accept either a config instance or a mapping with the same keys."""
        if isinstance(config, cls):
            return config
        return cls(**_known_keys(cls, config))


@dataclass
class ExtensionConfig:
    """Registration config for a component built on top of another one.

    ``render`` receives the base component's output and the props.
    """

    render: ExtendRenderFn
    validate: Optional[ValidateFn] = None
    styles: Optional[str] = None
    scripts: Optional[str] = None
    middleware: List[MiddlewareFn] = field(default_factory=list)

    @classmethod
    def coerce(cls, config: Union["ExtensionConfig", Mapping[str, Any]]) -> "ExtensionConfig":
        if isinstance(config, cls):
            return config
        return cls(**_known_keys(cls, config))


def _known_keys(cls: type, config: Mapping[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    unknown = set(config) - names
    if unknown:
        raise TypeError(f"Unknown {cls.__name__} keys: {', '.join(sorted(unknown))}")
    data = dict(config)
    if data.get("middleware") is None:
        data.pop("middleware", None)
    return data


class RenderResult(BaseModel):
    """Server-rendered component output with the current asset bundles."""

    html: Any
    styles: str = ""
    scripts: str = ""
