"""Channel implementations."""

from __future__ import annotations

from .base import BaseChannel, SenderChannel
from .email import EmailChannel
from .push import PushNotificationChannel
from .sms import SmsChannel

__all__ = [
    "BaseChannel",
    "SenderChannel",
    "SmsChannel",
    "EmailChannel",
    "PushNotificationChannel",
]
