"""Push notification channel."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Union

from ..communication import ChannelType, PushNotificationCommunication
from ..exceptions import ChannelConfigurationError
from ..identity import IdentityAddressType
from ..resolution import Resolver, as_configurable
from ..template.configuration import ContentTemplateConfiguration
from .base import BaseChannel

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext
    from ..identity import IdentityAddress

_DEVICE_TOKEN = re.compile(r"[A-Za-z0-9_:.\-]{8,}")

ImageUrl = Union[str, Resolver[Union[str, None]], None]


class PushNotificationChannel(BaseChannel):
    """
    Channel producing ``PushNotificationCommunication`` objects.

    Addresses typed as device tokens are always accepted; untyped addresses
    must look like a token. Content model resources are not carried.
    """

    def __init__(
        self,
        allowed_channel_provider_ids: Iterable[str] | None = None,
        *,
        channel_id: str = "push",
        image_url: ImageUrl = None,
    ) -> None:
        super().__init__(channel_id, allowed_channel_provider_ids)
        self.title = ContentTemplateConfiguration()
        self.body = ContentTemplateConfiguration()
        self.image_url = image_url

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.PUSH

    def supports_identity_address(self, address: IdentityAddress) -> bool:
        address_type = getattr(address, "type", None)
        if address_type == IdentityAddressType.DEVICE_TOKEN.value:
            return True
        value = getattr(address, "value", None)
        if address_type is not None or not isinstance(value, str):
            return False
        return _DEVICE_TOKEN.fullmatch(value) is not None

    def _ensure_configured(self) -> None:
        if not (self.title.is_configured or self.body.is_configured):
            raise ChannelConfigurationError(self.id, "title", "or body is required")

    async def _build(self, context: DispatchCommunicationContext) -> PushNotificationCommunication:
        title = await self.title.render(context)
        body = await self.body.render(context)
        image_url = as_configurable(self.image_url)

        return PushNotificationCommunication(
            to=self._recipients(context),
            title=title,
            body=body,
            image_url=await image_url.resolve(context) if image_url is not None else None,
            transport_priority=context.transport_priority,
        )
