"""Core primitives for errchain."""

from errchain.core.config import DEFAULT_RENDER_CONFIG, RenderConfig
from errchain.core.errors import (
    ChainedError,
    Kind,
    Op,
    Severity,
    dominant_kind,
    is_kind,
    new,
    ops,
    render,
    walk,
)
from errchain.core.telemetry import instrument_errchain, log_error, log_level, span

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "ChainedError",
    "Kind",
    "Op",
    "RenderConfig",
    "Severity",
    "dominant_kind",
    "instrument_errchain",
    "is_kind",
    "log_error",
    "log_level",
    "new",
    "ops",
    "render",
    "span",
    "walk",
]
