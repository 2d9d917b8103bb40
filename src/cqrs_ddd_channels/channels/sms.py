"""SMS channel: phone number validation and SMS assembly."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..communication import ChannelType, SmsCommunication
from ..template.configuration import ContentTemplateConfiguration
from .base import FromAddress, SenderChannel

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext
    from ..identity import IdentityAddress
    from ..resolution import Resolver

# Optional leading '+', then digits only. Length is not checked: short
# service codes and long international numbers are both accepted.
_PHONE_NUMBER = re.compile(r"\+?[0-9]+")


class SmsChannel(SenderChannel):
    """
    Channel producing ``SmsCommunication`` objects.

    Usage::

        sms = SmsChannel("+15551234567", allowed_channel_provider_ids=["twilio"])
        sms.message.add_string_template("Your code is {code}")
        communication = await sms.generate_communication(context)
    """

    def __init__(
        self,
        from_address: FromAddress = None,
        allowed_channel_provider_ids: Iterable[str] | None = None,
        *,
        channel_id: str = "sms",
        delivery_report_callback_url: str | None = None,
        delivery_report_callback_url_resolver: Resolver[str | None] | None = None,
    ) -> None:
        super().__init__(
            channel_id,
            from_address,
            allowed_channel_provider_ids,
            delivery_report_callback_url,
            delivery_report_callback_url_resolver,
        )
        self.message = ContentTemplateConfiguration()

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.SMS

    def supports_identity_address(self, address: IdentityAddress) -> bool:
        value = getattr(address, "value", None)
        if not isinstance(value, str):
            return False
        return _PHONE_NUMBER.fullmatch(value) is not None

    def _ensure_configured(self) -> None:
        self._require("message", self.message)

    async def _build(self, context: DispatchCommunicationContext) -> SmsCommunication:
        from_address = await self._resolve_from(context)
        message = await self._render_required("message", self.message, context)
        to = self._recipients(context)
        attachments = await self._attachments(context)
        callback_url = await self._resolve_callback_url(context)

        return SmsCommunication(
            from_address=from_address,
            to=to,
            message=message,
            attachments=attachments,
            transport_priority=context.transport_priority,
            delivery_report_callback_url=callback_url,
            delivery_report_callback_url_resolver=self.delivery_report_callback_url_resolver,
        )
