"""Jinja2 template engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ...exceptions import TemplateRenderError
from ...ports.template_engine import ITemplateEngine
from .model import template_variables

if TYPE_CHECKING:
    from ...context import DispatchCommunicationContext

logger = logging.getLogger(__name__)

_JinjaEnvironmentClass: type[Any] | None = None
try:
    from jinja2 import Environment, StrictUndefined, TemplateError

    _JinjaEnvironmentClass = Environment
    _JINJA2_AVAILABLE = True
except ImportError:
    _JINJA2_AVAILABLE = False


class JinjaTemplateEngine(ITemplateEngine):
    """
    Renders templates using the Jinja2 engine.

    Undefined variables fail rendering instead of producing empty text.
    """

    def __init__(self, autoescape: bool = False) -> None:
        if not _JINJA2_AVAILABLE or _JinjaEnvironmentClass is None:
            raise ImportError(
                "Jinja2 is required. Install with: pip install 'cqrs-ddd-channels[jinja2]'"
            )
        self._env = _JinjaEnvironmentClass(
            undefined=StrictUndefined,
            autoescape=autoescape,
            enable_async=True,
        )

    async def render(self, template: str, context: DispatchCommunicationContext) -> str:
        """Render template using Jinja2."""
        try:
            compiled = self._env.from_string(template)
            return str(await compiled.render_async(**template_variables(context)))
        except TemplateError as e:
            logger.error(f"Jinja2 rendering failed: {e}")
            raise TemplateRenderError(template, str(e)) from e
