"""Shared channel behaviour: guards, recipient flattening and attachment mapping."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Union

from ..communication import Attachment, ChannelType, Communication
from ..content import read_resource
from ..exceptions import ChannelConfigurationError
from ..identity import IdentityAddress
from ..ports.channel import IChannel
from ..resolution import ConfigurableValue, Resolver, ResolverValue, StaticValue, as_configurable

if TYPE_CHECKING:
    from ..context import DispatchCommunicationContext
    from ..template.configuration import ContentTemplateConfiguration

logger = logging.getLogger(__name__)


class BaseChannel(IChannel, ABC):
    """
    Base class for channel implementations.

    A channel is a mutable configuration object: set its templates and
    resolvers once, then share it. Every call to ``generate_communication``
    builds a new, independent communication and keeps no state between calls.

    Subclasses implement ``supports_identity_address``, ``_ensure_configured``
    and ``_build``.
    """

    def __init__(
        self,
        channel_id: str,
        allowed_channel_provider_ids: Iterable[str] | None = None,
    ) -> None:
        self._id = channel_id
        self._allowed_channel_provider_ids = frozenset(allowed_channel_provider_ids or ())

    @property
    def id(self) -> str:
        return self._id

    @property
    @abstractmethod
    def channel_type(self) -> ChannelType: ...

    @property
    def allowed_channel_provider_ids(self) -> frozenset[str]:
        return self._allowed_channel_provider_ids

    def allows_provider(self, provider_id: str) -> bool:
        if not self._allowed_channel_provider_ids:
            return True
        return provider_id in self._allowed_channel_provider_ids

    @abstractmethod
    def supports_identity_address(self, address: IdentityAddress) -> bool: ...

    async def generate_communication(
        self, context: DispatchCommunicationContext
    ) -> Communication:
        # Guards run in a fixed order, before any resolver is invoked.
        if context is None:
            raise ValueError("context is required")
        self._ensure_configured()

        communication = await self._build(context)
        logger.debug(
            f"Generated {self.channel_type.value} communication on channel '{self.id}' "
            f"for {len(communication.to)} recipient(s) "
            f"with {len(getattr(communication, 'attachments', ()))} attachment(s)"
        )
        return communication

    @abstractmethod
    def _ensure_configured(self) -> None:
        """Raise ChannelConfigurationError if required configuration is missing."""

    @abstractmethod
    async def _build(self, context: DispatchCommunicationContext) -> Communication:
        """Resolve configuration against ``context`` and assemble the communication."""

    def _require(self, field: str, configuration: ContentTemplateConfiguration) -> None:
        if not configuration.is_configured:
            raise ChannelConfigurationError(self.id, field)

    async def _render_required(
        self,
        field: str,
        configuration: ContentTemplateConfiguration,
        context: DispatchCommunicationContext,
    ) -> str:
        rendered = await configuration.render(context)
        if rendered is None:
            raise ChannelConfigurationError(
                self.id, field, f"no template applies to culture {context.culture!r}"
            )
        return rendered

    @staticmethod
    def _recipients(context: DispatchCommunicationContext) -> tuple[IdentityAddress, ...]:
        return tuple(context.recipient_addresses())

    @staticmethod
    async def _attachments(context: DispatchCommunicationContext) -> tuple[Attachment, ...]:
        content_model = context.content_model
        if content_model is None:
            return ()
        return tuple(
            [
                Attachment(
                    name=resource.name,
                    content_type=resource.content_type,
                    content=await read_resource(resource),
                )
                for resource in content_model.resources
            ]
        )


FromAddress = Union[IdentityAddress, str, Resolver[Union[IdentityAddress, None]], None]


def _from_configurable(value: FromAddress) -> ConfigurableValue[IdentityAddress | None] | None:
    if isinstance(value, str):
        value = IdentityAddress(value=value)
    elif not (value is None or isinstance(value, IdentityAddress) or callable(value)):
        raise TypeError(
            f"from_address must be an IdentityAddress, a string or a resolver, "
            f"got {type(value).__name__}; pass provider ids as allowed_channel_provider_ids="
        )
    return as_configurable(value)


class SenderChannel(BaseChannel, ABC):
    """
    Base for channels with a sender address and delivery-report callbacks (SMS, email).

    ``from_address`` is an address (or raw string) fixed at configuration time,
    or a function of the dispatch context evaluated on every generation.
    """

    def __init__(
        self,
        channel_id: str,
        from_address: FromAddress = None,
        allowed_channel_provider_ids: Iterable[str] | None = None,
        delivery_report_callback_url: str | None = None,
        delivery_report_callback_url_resolver: Resolver[str | None] | None = None,
    ) -> None:
        super().__init__(channel_id, allowed_channel_provider_ids)
        self._from = _from_configurable(from_address)
        self.delivery_report_callback_url = delivery_report_callback_url
        self.delivery_report_callback_url_resolver = delivery_report_callback_url_resolver

    @property
    def from_address(self) -> IdentityAddress | None:
        """The static sender address, if one is configured."""
        if isinstance(self._from, StaticValue):
            return self._from.value
        return None

    @from_address.setter
    def from_address(self, value: FromAddress) -> None:
        self._from = _from_configurable(value)

    @property
    def from_address_resolver(self) -> Resolver[IdentityAddress | None] | None:
        if isinstance(self._from, ResolverValue):
            return self._from.resolver
        return None

    async def _resolve_from(self, context: DispatchCommunicationContext) -> IdentityAddress | None:
        if self._from is None:
            return None
        return await self._from.resolve(context)

    async def _resolve_callback_url(self, context: DispatchCommunicationContext) -> str | None:
        if self.delivery_report_callback_url is not None:
            return self.delivery_report_callback_url
        if self.delivery_report_callback_url_resolver is not None:
            return await ResolverValue(self.delivery_report_callback_url_resolver).resolve(context)
        return None
