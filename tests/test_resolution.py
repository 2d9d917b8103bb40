"""Tests for static-or-resolver values."""

import pytest

from cqrs_ddd_channels.context import DispatchCommunicationContext
from cqrs_ddd_channels.resolution import ResolverValue, StaticValue, as_configurable


def test_as_configurable_picks_variant():
    assert as_configurable(None) is None
    assert as_configurable("fixed") == StaticValue("fixed")

    def resolver(ctx):
        return "x"

    assert as_configurable(resolver) == ResolverValue(resolver)

    existing = StaticValue(1)
    assert as_configurable(existing) is existing


@pytest.mark.asyncio
async def test_static_value_ignores_context():
    assert await StaticValue("fixed").resolve(DispatchCommunicationContext()) == "fixed"


@pytest.mark.asyncio
async def test_resolver_value_is_evaluated_per_call():
    calls = []

    def resolver(ctx):
        calls.append(ctx)
        return len(calls)

    value = ResolverValue(resolver)
    context = DispatchCommunicationContext()

    assert await value.resolve(context) == 1
    assert await value.resolve(context) == 2
    assert calls == [context, context]


@pytest.mark.asyncio
async def test_resolver_value_awaits_coroutines():
    async def resolver(ctx):
        return "async"

    assert await ResolverValue(resolver).resolve(DispatchCommunicationContext()) == "async"
