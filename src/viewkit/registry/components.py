"""
Component Registry
Registration, validation/middleware wrapping and extension of components
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from returns.result import Failure

from viewkit.core import get_logger
from viewkit.core.errors import NotFoundError, ValidationError
from viewkit.core.validate import to_outcome
from .assets import AssetRegistry
from .pipeline import MiddlewarePipeline
from .types import (
    ComponentConfig,
    ExtensionConfig,
    Props,
    RenderFn,
    ValidateFn,
    WrappedRender,
    resolve,
)

logger = get_logger(__name__)


class ComponentRegistry:
    """
    Maps component names to wrapped render callables.

    A wrapped render validates props, threads them through the component's
    middleware and calls the raw render function. Nothing is memoized: every
    call re-validates and re-applies middleware.
    """

    def __init__(self, middleware: MiddlewarePipeline, assets: AssetRegistry):
        self.middleware = middleware
        self.assets = assets
        self.components: Dict[str, WrappedRender] = {}

    def register(self, name: str, config: Union[ComponentConfig, Mapping[str, Any]]) -> None:
        """
        Register (or silently replace) a component.

        Args:
            name: Component name
            config: ComponentConfig or mapping with render/validate/styles/
                scripts/middleware
        """
        config = ComponentConfig.coerce(config)

        if config.styles:
            self.assets.add_style(name, config.styles)
        if config.scripts:
            self.assets.add_script(name, config.scripts)

        for fn in config.middleware:
            self.middleware.use(name, fn)

        replaced = name in self.components
        self.components[name] = self._wrap(name, config.render, config.validate)

        logger.info(
            "component_registered",
            component=name,
            replaced=replaced,
            validated=config.validate is not None,
            middleware=self.middleware.count(name),
        )

    def extend(
        self,
        base_name: str,
        name: str,
        config: Union[ExtensionConfig, Mapping[str, Any]],
    ) -> None:
        """
        Register ``name`` as a composition on top of ``base_name``.

        The base's wrapped render is captured now. At render time the base
        runs first (with its own validation and middleware), then
        ``config.render(base_output, props)`` produces the final output.
        The extension's own validation and middleware wrap the whole thing.

        Raises:
            NotFoundError: If the base component is not registered
        """
        base = self.components.get(base_name)
        if base is None:
            raise NotFoundError(base_name, "base component")

        config = ExtensionConfig.coerce(config)
        child_render = config.render

        async def composite(props: Props) -> Any:
            base_output = await base(props)
            return await resolve(child_render(base_output, props))

        self.register(
            name,
            ComponentConfig(
                render=composite,
                validate=config.validate,
                styles=config.styles,
                scripts=config.scripts,
                middleware=list(config.middleware),
            ),
        )
        logger.debug("component_extended", component=name, base=base_name)

    def _wrap(self, name: str, render: RenderFn, validate: Optional[ValidateFn]) -> WrappedRender:
        middleware = self.middleware

        async def wrapped(props: Optional[Props] = None) -> Any:
            if props is None:
                props = {}

            if validate is not None:
                outcome = to_outcome(await resolve(validate(props)))
                if isinstance(outcome, Failure):
                    raise ValidationError(name, outcome.failure())

            processed = await middleware.run(name, props)
            return await resolve(render(processed))

        wrapped.__name__ = f"component_{name}"
        return wrapped

    def get(self, name: str) -> Optional[WrappedRender]:
        return self.components.get(name)

    async def render(self, name: str, props: Optional[Props] = None) -> Any:
        """
        Render a registered component.

        Raises:
            NotFoundError: If ``name`` is not registered
            ValidationError: If the component's validator rejects ``props``
        """
        component = self.components.get(name)
        if component is None:
            raise NotFoundError(name, "component")
        return await component(props)

    def names(self) -> List[str]:
        return list(self.components)

    def __contains__(self, name: str) -> bool:
        return name in self.components

    def __len__(self) -> int:
        return len(self.components)


__all__ = ["ComponentRegistry"]
