"""Static-or-resolver configuration values, resolved against a dispatch context."""

from __future__ import annotations

from dataclasses import dataclass
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, TypeVar, Union

if TYPE_CHECKING:
    from .context import DispatchCommunicationContext

T = TypeVar("T")

Resolver = Callable[["DispatchCommunicationContext"], Union[T, Awaitable[T]]]


async def maybe_await(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it as-is."""
    if isawaitable(value):
        return await value
    return value


@dataclass(frozen=True)
class StaticValue(Generic[T]):
    """A value fixed at configuration time."""

    value: T

    async def resolve(self, context: DispatchCommunicationContext) -> T:
        return self.value


@dataclass(frozen=True)
class ResolverValue(Generic[T]):
    """A value computed from the dispatch context at generation time.

    The resolver may be a plain function or a coroutine function. Whatever it
    raises propagates to the caller untouched.
    """

    resolver: Resolver[T]

    async def resolve(self, context: DispatchCommunicationContext) -> T:
        result: T = await maybe_await(self.resolver(context))
        return result


ConfigurableValue = Union[StaticValue[T], ResolverValue[T]]


def as_configurable(value: T | Resolver[T] | None) -> ConfigurableValue[T] | None:
    """Wrap a value or a resolver in the matching variant. ``None`` stays ``None``."""
    if value is None:
        return None
    if isinstance(value, (StaticValue, ResolverValue)):
        return value
    if callable(value):
        return ResolverValue(value)
    return StaticValue(value)
