"""In-memory provider for test assertions."""

from __future__ import annotations

from collections.abc import Iterable

from cqrs_ddd_channels.communication import ChannelType, Communication
from cqrs_ddd_channels.delivery import DeliveryReport
from cqrs_ddd_channels.exceptions import ProviderDispatchError
from cqrs_ddd_channels.ports.provider import IChannelProvider


class InMemoryChannelProvider(IChannelProvider):
    """
    Test double (Fake) that stores communications in a list for assertions.
    """

    def __init__(
        self,
        provider_id: str = "in-memory",
        channel_types: Iterable[ChannelType] | None = None,
    ) -> None:
        self._id = provider_id
        self._channel_types = frozenset(channel_types or ChannelType)
        self.dispatched: list[Communication] = []

    @property
    def id(self) -> str:
        return self._id

    def supports(self, channel_type: ChannelType) -> bool:
        return channel_type in self._channel_types

    async def dispatch(self, communication: Communication) -> list[DeliveryReport]:
        if not self.supports(communication.channel_type):
            raise ProviderDispatchError(
                self.id, f"{communication.channel_type.value} is not supported"
            )
        self.dispatched.append(communication)
        number = len(self.dispatched)
        return [
            DeliveryReport.sent(
                recipient.value,
                communication.channel_type,
                provider_id=self.id,
                message_id=f"{self.id}-{number}",
            )
            for recipient in communication.to
        ]

    def assert_sent(
        self,
        recipient: str,
        channel_type: ChannelType,
        count: int = 1,
    ) -> None:
        """Helper for test assertions."""
        matches = [
            c
            for c in self.dispatched
            if c.channel_type == channel_type and any(a.value == recipient for a in c.to)
        ]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} communications to {recipient} via {channel_type.value}, "
                f"but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all dispatched communications."""
        self.dispatched.clear()
