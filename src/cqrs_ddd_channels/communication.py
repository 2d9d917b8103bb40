"""Channel types and the immutable communications channels generate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .identity import IdentityAddress

if TYPE_CHECKING:
    from .resolution import Resolver


class TransportPriority(Enum):
    """Priority hint passed through to the transport layer."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class ChannelType(Enum):
    """Supported channel kinds."""

    SMS = "sms"
    EMAIL = "email"
    PUSH = "push"


@dataclass(frozen=True)
class Attachment:
    """Immutable attachment value object."""

    name: str
    content_type: str
    content: bytes


@dataclass(frozen=True)
class SmsCommunication:
    """Fully resolved SMS, ready for a provider adapter."""

    from_address: IdentityAddress | None
    to: tuple[IdentityAddress, ...]
    message: str
    attachments: tuple[Attachment, ...] = ()
    transport_priority: TransportPriority = TransportPriority.NORMAL
    delivery_report_callback_url: str | None = None
    delivery_report_callback_url_resolver: Resolver[str | None] | None = None

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.SMS


@dataclass(frozen=True)
class EmailCommunication:
    """Fully resolved email, ready for a provider adapter."""

    from_address: IdentityAddress | None
    to: tuple[IdentityAddress, ...]
    subject: str
    html_body: str | None = None
    text_body: str | None = None
    cc: tuple[IdentityAddress, ...] = ()
    bcc: tuple[IdentityAddress, ...] = ()
    reply_to: tuple[IdentityAddress, ...] = ()
    attachments: tuple[Attachment, ...] = ()
    transport_priority: TransportPriority = TransportPriority.NORMAL
    delivery_report_callback_url: str | None = None
    delivery_report_callback_url_resolver: Resolver[str | None] | None = None

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.EMAIL


@dataclass(frozen=True)
class PushNotificationCommunication:
    """Fully resolved push notification, ready for a provider adapter."""

    to: tuple[IdentityAddress, ...]
    title: str | None = None
    body: str | None = None
    image_url: str | None = None
    transport_priority: TransportPriority = TransportPriority.NORMAL

    @property
    def channel_type(self) -> ChannelType:
        return ChannelType.PUSH


Communication = Union[SmsCommunication, EmailCommunication, PushNotificationCommunication]
