"""Render pipeline error taxonomy.

Template engine errors (syntax, runtime) and filesystem errors are not wrapped
here; they reach the caller unchanged.
"""

from typing import Any


class ViewError(Exception):
    """Base exception for viewkit operations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ViewError, LookupError):
    """A component, base component or layout name is not registered."""

    def __init__(self, name: str, registry: str = "component") -> None:
        self.name = name
        self.registry = registry
        super().__init__(f"{registry.capitalize()} {name} not found")


class ValidationError(ViewError, ValueError):
    """A component validator rejected the props it was given."""

    def __init__(self, component: str, reason: Any) -> None:
        self.component = component
        self.reason = reason
        super().__init__(f"Invalid props for component {component}: {reason}")


__all__ = ["ViewError", "NotFoundError", "ValidationError"]
