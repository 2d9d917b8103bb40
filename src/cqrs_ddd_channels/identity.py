"""Identity addresses and the platform identities that carry them."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .value_object import ValueObject


class IdentityAddressType(str, Enum):
    """Well-known address types. Channels may use them as a validation hint."""

    PHONE = "phone"
    EMAIL = "email"
    DEVICE_TOKEN = "device-token"


class IdentityAddress(ValueObject):
    """
    An addressable endpoint: phone number, email address, device token.

    The raw ``value`` is never normalized. Whether it is usable is decided by
    each channel's ``supports_identity_address``.
    """

    value: str
    display: str | None = None
    type: str | None = None
    purposes: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.value


class PlatformIdentityProfile(ValueObject):
    """A recipient on the platform (user, contact, device group) and its addresses."""

    id: str | None = None
    type: str | None = None
    addresses: tuple[IdentityAddress, ...] = Field(default_factory=tuple)


def as_identity_address(value: str, display: str | None = None) -> IdentityAddress:
    """Wrap a raw string as an ``IdentityAddress``."""
    return IdentityAddress(value=value, display=display)
