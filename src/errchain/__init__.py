"""errchain public API."""

from errchain.__about__ import __version__
from errchain.core import (
    DEFAULT_RENDER_CONFIG,
    ChainedError,
    Kind,
    Op,
    RenderConfig,
    Severity,
    dominant_kind,
    instrument_errchain,
    is_kind,
    log_error,
    log_level,
    new,
    ops,
    render,
    span,
    walk,
)

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "ChainedError",
    "Kind",
    "Op",
    "RenderConfig",
    "Severity",
    "__version__",
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
