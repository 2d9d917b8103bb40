"""Console provider for development debugging."""

from __future__ import annotations

import logging

from cqrs_ddd_channels.communication import (
    ChannelType,
    Communication,
    EmailCommunication,
    PushNotificationCommunication,
    SmsCommunication,
)
from cqrs_ddd_channels.delivery import DeliveryReport
from cqrs_ddd_channels.ports.provider import IChannelProvider

logger = logging.getLogger(__name__)


class ConsoleChannelProvider(IChannelProvider):
    """
    Development adapter that prints communications to the console.
    """

    def __init__(self, output_to_stdout: bool = True, provider_id: str = "console-debug"):
        self.output_to_stdout = output_to_stdout
        self._id = provider_id

    @property
    def id(self) -> str:
        return self._id

    def supports(self, channel_type: ChannelType) -> bool:
        return True

    async def dispatch(self, communication: Communication) -> list[DeliveryReport]:
        recipients = ", ".join(a.value for a in communication.to) or "(No Recipients)"
        output = [
            "═" * 50,
            f"COMMUNICATION VIA {communication.channel_type.value.upper()}",
            f"Priority: {communication.transport_priority.value}",
            f"To:       {recipients}",
        ]

        if isinstance(communication, SmsCommunication):
            output.append(f"From:     {communication.from_address or '(Default)'}")
            output.append(f"Message:  {communication.message}")
        elif isinstance(communication, EmailCommunication):
            output.append(f"From:     {communication.from_address or '(Default)'}")
            output.append(f"Subject:  {communication.subject}")
            if communication.text_body is not None:
                output.append(f"Body:     {communication.text_body}")
            if communication.html_body is not None:
                output.append(f"HTML:     [Available: {len(communication.html_body)} bytes]")
        elif isinstance(communication, PushNotificationCommunication):
            output.append(f"Title:    {communication.title or '(No Title)'}")
            output.append(f"Body:     {communication.body or ''}")

        attachments = getattr(communication, "attachments", ())
        if attachments:
            files = ", ".join([a.name for a in attachments])
            output.append(f"Files:    {files}")

        output.append("═" * 50)

        full_output = "\n".join(output)
        logger.info(full_output)

        if self.output_to_stdout:
            print(full_output)

        return [
            DeliveryReport.sent(recipient.value, communication.channel_type, provider_id=self.id)
            for recipient in communication.to
        ]
