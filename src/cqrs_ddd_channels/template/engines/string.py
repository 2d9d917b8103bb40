"""Zero-dependency string format engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...exceptions import TemplateRenderError
from ...ports.template_engine import ITemplateEngine
from .model import template_variables

if TYPE_CHECKING:
    from ...context import DispatchCommunicationContext

logger = logging.getLogger(__name__)


class StringFormatTemplateEngine(ITemplateEngine):
    """
    Simple engine using Python's native string formatting.
    No external dependencies.
    """

    async def render(self, template: str, context: DispatchCommunicationContext) -> str:
        """Render template using str.format()."""
        try:
            return template.format(**template_variables(context))
        except KeyError as e:
            logger.error(f"Missing template variable: {e}")
            raise TemplateRenderError(template, f"missing variable {e}") from e
        except (IndexError, ValueError) as e:
            logger.error(f"Template rendering failed: {e}")
            raise TemplateRenderError(template, str(e)) from e
