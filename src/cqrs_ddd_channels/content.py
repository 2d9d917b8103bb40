"""Content model and the resources it carries."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field

from .resolution import maybe_await
from .value_object import ValueObject

logger = logging.getLogger(__name__)


class Resource(ValueObject):
    """
    A named, typed binary payload used as the source of an attachment.

    ``content`` may be raw ``bytes``, a binary file-like object with ``read()``
    (and optionally ``seek()``), or an object whose ``read()`` is a coroutine.
    """

    name: str = Field(min_length=1)
    content_type: str
    content: Any


class ContentModel(ValueObject):
    """Template data plus the resources to attach to the generated communication."""

    model: Any = None
    resources: tuple[Resource, ...] = Field(default_factory=tuple)


async def read_resource(resource: Resource) -> bytes:
    """
    Read the full content of a resource.

    Seekable streams are rewound first so the same resource can back more than
    one generation call. The caller keeps ownership of the stream.
    """
    content = resource.content
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)

    read = getattr(content, "read", None)
    if not callable(read):
        raise TypeError(
            f"Resource '{resource.name}' content must be bytes or a readable stream, "
            f"got {type(content).__name__}"
        )

    seekable = getattr(content, "seekable", None)
    if callable(seekable) and await maybe_await(seekable()):
        await maybe_await(content.seek(0))

    data = await maybe_await(read())
    logger.debug(f"Read {len(data)} bytes from resource '{resource.name}'")
    return bytes(data)
