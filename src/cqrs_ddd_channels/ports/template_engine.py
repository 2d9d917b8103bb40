"""Template engine port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext


@runtime_checkable
class ITemplateEngine(Protocol):
    """
    Protocol for rendering a resolved template against a dispatch context.

    Implementations: PassthroughTemplateEngine, StringFormatTemplateEngine,
    JinjaTemplateEngine.
    """

    async def render(self, template: str, context: DispatchCommunicationContext) -> str:
        """Render template text with the context's content model."""
        ...
