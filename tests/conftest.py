"""Pytest configuration and fixtures."""

import os
import pytest
from typing import Any

from viewkit.core import Settings
from viewkit.rendering import JinjaTemplateEngine, ViewRenderer


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['VIEWKIT_LOG_LEVEL'] = 'DEBUG'
    os.environ['VIEWKIT_ENVIRONMENT'] = 'test'  # Hot reload stays off


# ============================================================================
# Engine Fakes
# ============================================================================

class CountingEngine:
    """Real Jinja engine that records every compile call."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.inner = JinjaTemplateEngine(settings or Settings())
        self.compiled: list[str] = []
        self.options: list[dict[str, Any]] = []

    def compile(self, source: str, *, filename: str | None = None, **options: Any):
        self.compiled.append(source)
        self.options.append({"filename": filename, **options})
        return self.inner.compile(source, filename=filename, **options)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings(environment="test")


@pytest.fixture
def engine(settings):
    """Compile-counting template engine."""
    return CountingEngine(settings)


@pytest.fixture
def renderer(settings, engine):
    """Fresh renderer with isolated registries and cache."""
    return ViewRenderer(engine=engine, settings=settings)


@pytest.fixture
def dev_renderer(engine):
    """Renderer built with hot reload enabled."""
    return ViewRenderer(engine=engine, settings=Settings(environment="development"))


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def greet_config():
    """Greeting component that requires a name."""
    return {
        "render": lambda p: "Hello, " + p["name"],
        "validate": lambda p: True if p.get("name") else "name required",
    }


@pytest.fixture
def component_dir(tmp_path):
    """Directory holding hot-reloadable component modules."""
    directory = tmp_path / "components"
    directory.mkdir()
    return directory
