"""Delivery report types produced by channel providers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from .communication import ChannelType


class DeliveryStatus(Enum):
    """Delivery status outcomes."""

    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"


@dataclass(frozen=True)
class DeliveryReport:
    """Immutable record of one recipient's dispatch outcome."""

    recipient: str
    channel_type: ChannelType
    status: DeliveryStatus
    provider_id: str | None = None
    message_id: str | None = None
    error: str | None = None
    reported_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.reported_at is None:
            object.__setattr__(self, "reported_at", datetime.now(timezone.utc))

    @classmethod
    def sent(
        cls,
        recipient: str,
        channel_type: ChannelType,
        provider_id: str | None = None,
        message_id: str | None = None,
    ) -> DeliveryReport:
        """Create a successful delivery report."""
        return cls(
            recipient=recipient,
            channel_type=channel_type,
            status=DeliveryStatus.SENT,
            provider_id=provider_id,
            message_id=message_id,
        )

    @classmethod
    def failed(
        cls,
        recipient: str,
        channel_type: ChannelType,
        provider_id: str | None = None,
        error: str | None = None,
    ) -> DeliveryReport:
        """Create a failed delivery report."""
        return cls(
            recipient=recipient,
            channel_type=channel_type,
            status=DeliveryStatus.FAILED,
            provider_id=provider_id,
            error=error,
        )
