"""Tests for template engines."""

import pytest
from pydantic import BaseModel

from cqrs_ddd_channels.content import ContentModel
from cqrs_ddd_channels.context import DispatchCommunicationContext
from cqrs_ddd_channels.exceptions import TemplateRenderError
from cqrs_ddd_channels.template.engines.passthrough import PassthroughTemplateEngine
from cqrs_ddd_channels.template.engines.string import StringFormatTemplateEngine

# Check if jinja2 is installed
try:
    import jinja2  # noqa: F401

    from cqrs_ddd_channels.template.engines.jinja import JinjaTemplateEngine

    _JINJA_AVAILABLE = True
except ImportError:
    _JINJA_AVAILABLE = False
    JinjaTemplateEngine = None


class OrderModel(BaseModel):
    name: str
    order_id: str


def _context(model):
    return DispatchCommunicationContext(content_model=ContentModel(model=model))


@pytest.mark.asyncio
async def test_passthrough_engine_leaves_braces_alone():
    engine = PassthroughTemplateEngine()

    assert await engine.render("Hello {name}", _context({"name": "Alice"})) == "Hello {name}"


@pytest.mark.asyncio
async def test_string_engine_with_mapping():
    engine = StringFormatTemplateEngine()

    result = await engine.render(
        "Hello {name}, your order {order_id} is ready!",
        _context({"name": "Alice", "order_id": "123"}),
    )

    assert result == "Hello Alice, your order 123 is ready!"


@pytest.mark.asyncio
async def test_string_engine_with_pydantic_model():
    engine = StringFormatTemplateEngine()

    model = OrderModel(name="Bob", order_id="9")
    result = await engine.render("{name}/{order_id}", _context(model))

    assert result == "Bob/9"


@pytest.mark.asyncio
async def test_string_engine_missing_variable():
    engine = StringFormatTemplateEngine()

    with pytest.raises(TemplateRenderError) as exc_info:
        await engine.render("Hello {name}", _context(None))

    assert isinstance(exc_info.value.__cause__, KeyError)


@pytest.mark.skipif(not _JINJA_AVAILABLE, reason="Jinja2 not installed")
@pytest.mark.asyncio
async def test_jinja_engine_basic():
    engine = JinjaTemplateEngine()

    result = await engine.render(
        "Hello {{ name }}, your order {{ order_id }} is ready!",
        _context({"name": "Alice", "order_id": "123"}),
    )

    assert result == "Hello Alice, your order 123 is ready!"


@pytest.mark.skipif(not _JINJA_AVAILABLE, reason="Jinja2 not installed")
@pytest.mark.asyncio
async def test_jinja_engine_strict_undefined():
    engine = JinjaTemplateEngine()

    with pytest.raises(TemplateRenderError):
        await engine.render("Hello {{ missing }}", _context({}))
