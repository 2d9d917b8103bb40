"""Template configuration and rendering components."""

from __future__ import annotations

from .configuration import ContentTemplateConfiguration, FileTemplate, TemplateRegistration
from .engines import JinjaTemplateEngine, PassthroughTemplateEngine, StringFormatTemplateEngine

__all__ = [
    "ContentTemplateConfiguration",
    "FileTemplate",
    "TemplateRegistration",
    "PassthroughTemplateEngine",
    "StringFormatTemplateEngine",
    "JinjaTemplateEngine",
]
