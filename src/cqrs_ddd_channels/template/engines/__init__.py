"""Template rendering engines."""

from __future__ import annotations

from .jinja import JinjaTemplateEngine
from .passthrough import PassthroughTemplateEngine
from .string import StringFormatTemplateEngine

__all__ = ["PassthroughTemplateEngine", "StringFormatTemplateEngine", "JinjaTemplateEngine"]
