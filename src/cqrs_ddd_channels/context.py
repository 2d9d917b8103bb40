"""Per-dispatch context handed to channels by the orchestration layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .communication import TransportPriority
from .content import ContentModel
from .identity import IdentityAddress, PlatformIdentityProfile
from .template.engines.passthrough import PassthroughTemplateEngine

if TYPE_CHECKING:
    from .ports.template_engine import ITemplateEngine


@dataclass(frozen=True)
class DispatchCommunicationContext:
    """
    Everything a channel needs for one dispatch attempt.

    Read-only to channels. ``culture`` selects culture-specific templates and
    ``template_engine`` renders every template resolved during generation.
    """

    content_model: ContentModel = field(default_factory=ContentModel)
    platform_identities: tuple[PlatformIdentityProfile, ...] = ()
    transport_priority: TransportPriority = TransportPriority.NORMAL
    culture: str | None = None
    template_engine: ITemplateEngine = field(default_factory=PassthroughTemplateEngine)

    def recipient_addresses(self) -> list[IdentityAddress]:
        """Addresses of every identity, in identity order then address order."""
        return [
            address for identity in self.platform_identities for address in identity.addresses
        ]
