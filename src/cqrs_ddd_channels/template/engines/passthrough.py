"""Default engine: templates are used verbatim."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...ports.template_engine import ITemplateEngine

if TYPE_CHECKING:
    from ...context import DispatchCommunicationContext


class PassthroughTemplateEngine(ITemplateEngine):
    """Returns the template unchanged. Used when no engine is configured."""

    async def render(self, template: str, context: DispatchCommunicationContext) -> str:
        return template
