"""Layout Registry - named page shells rendered from a slot map."""

from typing import Any, Dict, List, Optional

from viewkit.core import get_logger
from viewkit.core.errors import NotFoundError
from .types import LayoutFn, Slots, resolve

logger = get_logger(__name__)


class LayoutRegistry:
    """
    Maps layout names to render callables.

    Layouts have no validation, middleware or extension: the render function
    is called with the slots as given.
    """

    def __init__(self) -> None:
        self.layouts: Dict[str, LayoutFn] = {}

    def register(self, name: str, render: LayoutFn) -> None:
        """Register (or silently replace) a layout."""
        replaced = name in self.layouts
        self.layouts[name] = render
        logger.info("layout_registered", layout=name, replaced=replaced)

    async def render(self, name: str, slots: Optional[Slots] = None) -> Any:
        """
        Render a registered layout.

        Raises:
            NotFoundError: If ``name`` is not registered
        """
        layout = self.layouts.get(name)
        if layout is None:
            raise NotFoundError(name, "layout")
        return await resolve(layout(slots if slots is not None else {}))

    def names(self) -> List[str]:
        return list(self.layouts)

    def __contains__(self, name: str) -> bool:
        return name in self.layouts

    def __len__(self) -> int:
        return len(self.layouts)


__all__ = ["LayoutRegistry"]
