"""Tests for delivery report types."""

from cqrs_ddd_channels.communication import ChannelType, TransportPriority
from cqrs_ddd_channels.delivery import DeliveryReport, DeliveryStatus


def test_delivery_report_sent():
    report = DeliveryReport.sent(
        recipient="+1234567890",
        channel_type=ChannelType.SMS,
        provider_id="twilio",
        message_id="msg-123",
    )

    assert report.recipient == "+1234567890"
    assert report.channel_type == ChannelType.SMS
    assert report.status == DeliveryStatus.SENT
    assert report.message_id == "msg-123"
    assert report.error is None
    assert report.reported_at is not None


def test_delivery_report_failed():
    report = DeliveryReport.failed(
        recipient="user@example.com",
        channel_type=ChannelType.EMAIL,
        error="SMTP connection timeout",
    )

    assert report.status == DeliveryStatus.FAILED
    assert report.provider_id is None
    assert report.error == "SMTP connection timeout"


def test_enum_values():
    assert ChannelType.SMS.value == "sms"
    assert ChannelType.EMAIL.value == "email"
    assert ChannelType.PUSH.value == "push"
    assert TransportPriority.NORMAL.value == "normal"
