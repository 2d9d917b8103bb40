"""Tests for the push notification channel."""

import pytest

from cqrs_ddd_channels.channels.push import PushNotificationChannel
from cqrs_ddd_channels.communication import PushNotificationCommunication, TransportPriority
from cqrs_ddd_channels.content import ContentModel, Resource
from cqrs_ddd_channels.context import DispatchCommunicationContext
from cqrs_ddd_channels.exceptions import ChannelConfigurationError
from cqrs_ddd_channels.identity import IdentityAddress, IdentityAddressType, PlatformIdentityProfile


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        (IdentityAddress(value="fcm:APA91bH-token_value.1"), True),
        (IdentityAddress(value="short"), False),
        (IdentityAddress(value="token with spaces"), False),
        (IdentityAddress(value="x", type=IdentityAddressType.DEVICE_TOKEN.value), True),
        (IdentityAddress(value="abcdefgh1234", type=IdentityAddressType.PHONE.value), False),
    ],
)
def test_supports_identity_address(address, expected):
    assert PushNotificationChannel().supports_identity_address(address) is expected


@pytest.mark.asyncio
async def test_title_or_body_is_required():
    with pytest.raises(ChannelConfigurationError):
        await PushNotificationChannel().generate_communication(DispatchCommunicationContext())


@pytest.mark.asyncio
async def test_generate_push_communication():
    token = IdentityAddress(value="device-token-123")
    context = DispatchCommunicationContext(
        content_model=ContentModel(
            resources=[Resource(name="ignored", content_type="ct", content=b"x")]
        ),
        platform_identities=[PlatformIdentityProfile(addresses=[token])],
        transport_priority=TransportPriority.LOW,
    )
    channel = PushNotificationChannel(
        ["fcm"], image_url=lambda ctx: "https://cdn.example.com/icon.png"
    )
    channel.title.add_string_template("Order shipped")

    result = await channel.generate_communication(context)

    assert isinstance(result, PushNotificationCommunication)
    assert result.to == (token,)
    assert result.title == "Order shipped"
    assert result.body is None
    assert result.image_url == "https://cdn.example.com/icon.png"
    assert result.transport_priority is TransportPriority.LOW
    assert channel.allowed_channel_provider_ids == {"fcm"}


@pytest.mark.asyncio
async def test_generate_guards_against_missing_context():
    channel = PushNotificationChannel()
    channel.title.add_string_template("title")

    with pytest.raises(ValueError):
        await channel.generate_communication(None)
