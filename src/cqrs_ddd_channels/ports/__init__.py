"""Port definitions for channel infrastructure."""

from __future__ import annotations

from .channel import IChannel
from .provider import IChannelProvider
from .template_engine import ITemplateEngine

__all__ = [
    "IChannel",
    "IChannelProvider",
    "ITemplateEngine",
]
