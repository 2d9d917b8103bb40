"""Channel port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..communication import ChannelType, Communication
from ..identity import IdentityAddress

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext


@runtime_checkable
class IChannel(Protocol):
    """
    A pluggable strategy producing transport-specific communications for one medium.

    Orchestration holds channels through this protocol only.
    Implementations: SmsChannel, EmailChannel, PushNotificationChannel.
    """

    @property
    def id(self) -> str: ...

    @property
    def channel_type(self) -> ChannelType: ...

    @property
    def allowed_channel_provider_ids(self) -> frozenset[str]: ...

    def allows_provider(self, provider_id: str) -> bool:
        """True when the allow-list is empty or names ``provider_id``."""
        ...

    def supports_identity_address(self, address: IdentityAddress) -> bool:
        """True when ``address`` is well-formed for this channel. Never raises."""
        ...

    async def generate_communication(
        self, context: DispatchCommunicationContext
    ) -> Communication:
        """Resolve configuration against ``context`` and build the communication."""
        ...
