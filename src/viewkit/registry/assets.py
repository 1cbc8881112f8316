"""Per-component style and script registry with concatenation bundling."""

from typing import Dict

from viewkit.core import get_logger

logger = get_logger(__name__)


class AssetRegistry:
    """
    Holds at most one style text and one script text per component name.

    Bundles are built on every call from the live maps, in insertion order.
    Re-registering a name replaces its text but keeps its original position.
    """

    def __init__(self) -> None:
        self.styles: Dict[str, str] = {}
        self.scripts: Dict[str, str] = {}

    def add_style(self, name: str, css: str) -> None:
        self.styles[name] = css
        logger.debug("style_added", component=name, size=len(css))

    def add_script(self, name: str, js: str) -> None:
        self.scripts[name] = js
        logger.debug("script_added", component=name, size=len(js))

    def bundled_styles(self) -> str:
        """All registered styles joined by newlines."""
        return "\n".join(self.styles.values())

    def bundled_scripts(self) -> str:
        """All registered scripts joined by newlines."""
        return "\n".join(self.scripts.values())


__all__ = ["AssetRegistry"]
