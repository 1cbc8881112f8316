"""
Component Registries
Components, layouts, assets, hooks and middleware
"""

from .types import (
    ComponentConfig,
    ExtensionConfig,
    RenderResult,
    HookFn,
    MiddlewareFn,
    RenderFn,
    ExtendRenderFn,
    LayoutFn,
    ValidateFn,
)
from .pipeline import (
    BEFORE_RENDER,
    AFTER_RENDER,
    TransformPipeline,
    HookPipeline,
    MiddlewarePipeline,
)
from .assets import AssetRegistry
from .components import ComponentRegistry
from .layouts import LayoutRegistry

__all__ = [
    "ComponentConfig",
    "ExtensionConfig",
    "RenderResult",
    "HookFn",
    "MiddlewareFn",
    "RenderFn",
    "ExtendRenderFn",
    "LayoutFn",
    "ValidateFn",
    "BEFORE_RENDER",
    "AFTER_RENDER",
    "TransformPipeline",
    "HookPipeline",
    "MiddlewarePipeline",
    "AssetRegistry",
    "ComponentRegistry",
    "LayoutRegistry",
]
