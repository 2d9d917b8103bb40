"""Notification channel contracts for CQRS/DDD — turn a dispatch context into SMS, Email, Push."""

from __future__ import annotations

from .channels import (
    BaseChannel,
    EmailChannel,
    PushNotificationChannel,
    SenderChannel,
    SmsChannel,
)
from .communication import (
    Attachment,
    ChannelType,
    Communication,
    EmailCommunication,
    PushNotificationCommunication,
    SmsCommunication,
    TransportPriority,
)
from .content import ContentModel, Resource, read_resource
from .context import DispatchCommunicationContext
from .delivery import DeliveryReport, DeliveryStatus
from .exceptions import (
    ChannelConfigurationError,
    CommunicationsError,
    ProviderDispatchError,
    TemplateRenderError,
)
from .identity import (
    IdentityAddress,
    IdentityAddressType,
    PlatformIdentityProfile,
    as_identity_address,
)

# Memory adapters for testing
from .memory.console import ConsoleChannelProvider
from .memory.fake import InMemoryChannelProvider
from .ports import IChannel, IChannelProvider, ITemplateEngine
from .resolution import ResolverValue, StaticValue, as_configurable
from .template import (
    ContentTemplateConfiguration,
    JinjaTemplateEngine,
    PassthroughTemplateEngine,
    StringFormatTemplateEngine,
)

__all__ = [
    "Attachment",
    "BaseChannel",
    "ChannelConfigurationError",
    "ChannelType",
    "CommunicationsError",
    "Communication",
    "ContentModel",
    "ContentTemplateConfiguration",
    "DeliveryReport",
    "DeliveryStatus",
    "DispatchCommunicationContext",
    "EmailChannel",
    "EmailCommunication",
    "IChannel",
    "IChannelProvider",
    "ITemplateEngine",
    "IdentityAddress",
    "IdentityAddressType",
    "PlatformIdentityProfile",
    "ProviderDispatchError",
    "PushNotificationChannel",
    "PushNotificationCommunication",
    "Resource",
    "ResolverValue",
    "SenderChannel",
    "SmsChannel",
    "SmsCommunication",
    "StaticValue",
    "TemplateRenderError",
    "TransportPriority",
    "as_configurable",
    "as_identity_address",
    "read_resource",
    "ConsoleChannelProvider",
    "InMemoryChannelProvider",
    "PassthroughTemplateEngine",
    "StringFormatTemplateEngine",
    "JinjaTemplateEngine",
]
