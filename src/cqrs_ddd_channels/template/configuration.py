"""Template registrations for a single configurable channel field."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..resolution import ConfigurableValue, Resolver, ResolverValue, StaticValue

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileTemplate:
    """A template read from disk each time it is resolved."""

    path: Path
    encoding: str = "utf-8"

    async def resolve(self, context: DispatchCommunicationContext) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding=self.encoding)


@dataclass(frozen=True)
class TemplateRegistration:
    """One template source, optionally bound to a culture."""

    source: ConfigurableValue[str | None] | FileTemplate
    culture: str | None = None


class ContentTemplateConfiguration:
    """
    Ordered template registrations for a channel field (message, subject, body...).

    Registrations matching the context culture are tried before culture-invariant
    ones; within each group registration order wins. The first source yielding
    text is rendered with the context's template engine.
    """

    def __init__(self) -> None:
        self._registrations: list[TemplateRegistration] = []

    @property
    def is_configured(self) -> bool:
        return bool(self._registrations)

    @property
    def registrations(self) -> tuple[TemplateRegistration, ...]:
        return tuple(self._registrations)

    def add_string_template(
        self, template: str, culture: str | None = None
    ) -> ContentTemplateConfiguration:
        """Register a static template string."""
        self._registrations.append(TemplateRegistration(StaticValue(template), culture))
        return self

    def add_file_template(
        self, path: str | Path, culture: str | None = None, encoding: str = "utf-8"
    ) -> ContentTemplateConfiguration:
        """Register a template file. The file is read when the template is resolved."""
        source = FileTemplate(Path(path), encoding)
        self._registrations.append(TemplateRegistration(source, culture))
        return self

    def add_template_resolver(
        self, resolver: Resolver[str | None], culture: str | None = None
    ) -> ContentTemplateConfiguration:
        """Register a function of the dispatch context returning the template (or None)."""
        self._registrations.append(TemplateRegistration(ResolverValue(resolver), culture))
        return self

    def clear(self) -> None:
        self._registrations.clear()

    def _candidates(self, culture: str | None) -> list[TemplateRegistration]:
        specific = [
            r for r in self._registrations if r.culture is not None and r.culture == culture
        ]
        invariant = [r for r in self._registrations if r.culture is None]
        return specific + invariant

    async def resolve_template(self, context: DispatchCommunicationContext) -> str | None:
        """Return the raw template text for ``context``, or None if nothing applies."""
        for registration in self._candidates(context.culture):
            template = await registration.source.resolve(context)
            if template is not None:
                return template
        logger.debug(f"No template resolved for culture {context.culture!r}")
        return None

    async def render(self, context: DispatchCommunicationContext) -> str | None:
        """Resolve and render the template for ``context``."""
        template = await self.resolve_template(context)
        if template is None:
            return None
        return await context.template_engine.render(template, context)
