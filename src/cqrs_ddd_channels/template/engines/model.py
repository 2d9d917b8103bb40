"""Helpers shared by template engines."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ...context import DispatchCommunicationContext


def template_variables(context: DispatchCommunicationContext) -> dict[str, Any]:
    """
    Extract template variables from the context's content model.

    Accepts a mapping, a pydantic model (``model_dump()``) or a plain object
    (``vars()``). No model means no variables.
    """
    model = context.content_model.model
    if model is None:
        return {}
    if isinstance(model, Mapping):
        return dict(model)
    if hasattr(model, "model_dump"):
        return dict(model.model_dump())
    if hasattr(model, "__dict__"):
        return dict(vars(model))
    raise TypeError(f"Unsupported content model type: {type(model).__name__}")
