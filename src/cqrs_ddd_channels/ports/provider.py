"""Channel provider port — the boundary to transport adapters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..communication import ChannelType, Communication
from ..delivery import DeliveryReport


@runtime_checkable
class IChannelProvider(Protocol):
    """
    Framework-agnostic port for handing generated communications to a transport.

    Adapters must explicitly declare: class TwilioProvider(IChannelProvider):
    """

    @property
    def id(self) -> str: ...

    def supports(self, channel_type: ChannelType) -> bool:
        """True when this provider can carry communications of ``channel_type``."""
        ...

    async def dispatch(self, communication: Communication) -> list[DeliveryReport]:
        """Send the communication and return one report per recipient."""
        ...
