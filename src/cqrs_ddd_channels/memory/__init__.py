"""Memory adapters for testing and development."""

from __future__ import annotations

from .console import ConsoleChannelProvider
from .fake import InMemoryChannelProvider

__all__ = ["ConsoleChannelProvider", "InMemoryChannelProvider"]
