"""Rendering settings for errchain."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RenderConfig(BaseModel):
    """Separators used when a chain is rendered as text.

    Attributes:
        separator: Placed before a nested chained cause.
        field_separator: Placed between the operation, the kind phrase and an
            opaque cause.
        empty_text: Returned when a chain carries no information at all.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = ":\n\t"
    field_separator: str = ": "
    empty_text: str = Field(default="no error", min_length=1)


DEFAULT_RENDER_CONFIG = RenderConfig()
