"""Jinja template engine tests."""

import pytest
from jinja2 import TemplateSyntaxError, UndefinedError

from viewkit.core import Settings
from viewkit.rendering import JinjaTemplate, JinjaTemplateEngine


@pytest.fixture
def jinja():
    return JinjaTemplateEngine(Settings(environment="test"))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_compile_and_execute(jinja):
    compiled = jinja.compile("Hello {{ name }}")

    assert isinstance(compiled, JinjaTemplate)
    assert await compiled({"name": "Ada"}) == "Hello Ada"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_coroutines_awaited_in_expressions(jinja):
    async def shout(word):
        return word.upper()

    compiled = jinja.compile("{{ shout('hi') }}!")
    assert await compiled({"shout": shout}) == "HI!"


@pytest.mark.unit
def test_syntax_error_carries_filename(jinja):
    with pytest.raises(TemplateSyntaxError) as exc_info:
        jinja.compile("{% if %}", filename="views/broken.html")
    assert exc_info.value.filename == "views/broken.html"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_execution_error_propagates(jinja):
    compiled = jinja.compile("{{ missing.attr }}")
    with pytest.raises(UndefinedError):
        await compiled({})


@pytest.mark.unit
@pytest.mark.asyncio
async def test_options_override_environment(jinja):
    plain = jinja.compile("{{ html }}")
    escaped = jinja.compile("{{ html }}", autoescape=True)

    assert await plain({"html": "<b>"}) == "<b>"
    assert await escaped({"html": "<b>"}) == "&lt;b&gt;"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_settings_configure_environment():
    engine = JinjaTemplateEngine(Settings(environment="test", autoescape=True))
    compiled = engine.compile("{{ html }}")

    assert await compiled({"html": "<i>"}) == "&lt;i&gt;"
