"""Test configuration for cqrs-ddd-channels."""

import io

import pytest

from cqrs_ddd_channels.content import ContentModel, Resource
from cqrs_ddd_channels.context import DispatchCommunicationContext
from cqrs_ddd_channels.identity import IdentityAddress, PlatformIdentityProfile


@pytest.fixture
def identities():
    """Two platform identities holding three addresses in total."""
    return (
        PlatformIdentityProfile(
            id="user-1",
            addresses=[
                IdentityAddress(value="+14155552671"),
                IdentityAddress(value="+442071838750"),
            ],
        ),
        PlatformIdentityProfile(
            id="user-2",
            addresses=[IdentityAddress(value="15551231234")],
        ),
    )


@pytest.fixture
def context(identities):
    """Dispatch context without resources."""
    return DispatchCommunicationContext(
        content_model=ContentModel(model={"code": "1234"}),
        platform_identities=identities,
    )


@pytest.fixture
def context_with_resource(identities):
    """Dispatch context carrying a single stream-backed resource."""
    resource = Resource(name="res", content_type="ct", content=io.BytesIO(b"payload"))
    return DispatchCommunicationContext(
        content_model=ContentModel(resources=[resource]),
        platform_identities=identities,
    )
