"""Exception hierarchy for channels and communication generation."""

from __future__ import annotations


class CommunicationsError(Exception):
    """Root exception for the channels toolkit."""


class ChannelConfigurationError(CommunicationsError):
    """Raised when a channel is missing configuration required to generate a communication."""

    def __init__(self, channel_id: str, field: str, reason: str | None = None) -> None:
        self.channel_id = channel_id
        self.field = field
        message = (
            f"Channel '{channel_id}' cannot generate a communication: "
            f"'{field}' is not configured"
        )
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class TemplateRenderError(CommunicationsError):
    """Raised when a built-in template engine fails to render a template."""

    def __init__(self, template: str, reason: str) -> None:
        # Keep only a fragment; templates can be large and may embed content.
        self.template = template[:80]
        super().__init__(f"Failed to render template {self.template!r}: {reason}")


class ProviderDispatchError(CommunicationsError):
    """Raised when a channel provider refuses a communication."""

    def __init__(self, provider_id: str, reason: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Provider '{provider_id}' cannot dispatch: {reason}")
