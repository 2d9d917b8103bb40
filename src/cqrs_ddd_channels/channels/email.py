"""Email channel."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Union

from ..communication import ChannelType, EmailCommunication
from ..exceptions import ChannelConfigurationError
from ..identity import IdentityAddress
from ..resolution import Resolver, as_configurable
from ..template.configuration import ContentTemplateConfiguration
from .base import FromAddress, SenderChannel

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext

# Syntax only: one '@', no whitespace, dotted domain.
_EMAIL_ADDRESS = re.compile(r"[^@\s]+@[^@\s.]+(\.[^@\s.]+)+")

AddressList = Union[Sequence[IdentityAddress], Resolver[Sequence[IdentityAddress]], None]


class EmailChannel(SenderChannel):
    """
    Channel producing ``EmailCommunication`` objects.

    Requires a ``subject`` and at least one of ``html_body`` / ``text_body``.
    Resources on the content model become attachments.
    """

    def __init__(
        self,
        from_address: FromAddress = None,
        allowed_channel_provider_ids: Iterable[str] | None = None,
        *,
        channel_id: str = "email",
        cc: AddressList = None,
        bcc: AddressList = None,
        reply_to: AddressList = None,
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
        self.subject = ContentTemplateConfiguration()
        self.html_body = ContentTemplateConfiguration()
        self.text_body = ContentTemplateConfiguration()
        self.cc = cc
        self.bcc = bcc
        self.reply_to = reply_to

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.EMAIL

    def supports_identity_address(self, address: IdentityAddress) -> bool:
        value = getattr(address, "value", None)
        if not isinstance(value, str):
            return False
        return _EMAIL_ADDRESS.fullmatch(value) is not None

    def _ensure_configured(self) -> None:
        self._require("subject", self.subject)
        if not (self.html_body.is_configured or self.text_body.is_configured):
            raise ChannelConfigurationError(self.id, "html_body", "or text_body is required")

    async def _resolve_addresses(
        self, value: AddressList, context: DispatchCommunicationContext
    ) -> tuple[IdentityAddress, ...]:
        configurable = as_configurable(value)
        if configurable is None:
            return ()
        addresses = await configurable.resolve(context)
        return tuple(addresses or ())

    async def _build(self, context: DispatchCommunicationContext) -> EmailCommunication:
        from_address = await self._resolve_from(context)
        subject = await self._render_required("subject", self.subject, context)
        html_body = await self.html_body.render(context)
        text_body = await self.text_body.render(context)
        if html_body is None and text_body is None:
            raise ChannelConfigurationError(
                self.id, "html_body", f"no body template applies to culture {context.culture!r}"
            )

        return EmailCommunication(
            from_address=from_address,
            to=self._recipients(context),
            subject=subject,
            html_body=html_body,
            text_body=text_body,
            cc=await self._resolve_addresses(self.cc, context),
            bcc=await self._resolve_addresses(self.bcc, context),
            reply_to=await self._resolve_addresses(self.reply_to, context),
            attachments=await self._attachments(context),
            transport_priority=context.transport_priority,
            delivery_report_callback_url=await self._resolve_callback_url(context),
            delivery_report_callback_url_resolver=self.delivery_report_callback_url_resolver,
        )
