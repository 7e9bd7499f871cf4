"""Logging and observability helpers for errchain."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Any

try:  # pragma: no cover - optional dependency
    import logfire  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    logfire = None

from errchain.core.errors import ChainedError, Kind, Op, Severity, dominant_kind, new, ops

_logger = logging.getLogger(__name__)

_INSTRUMENTED = False

_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.PANIC: logging.CRITICAL,
    Severity.FATAL: logging.CRITICAL,
}


def span(name: str, **attributes: Any):
    if not _INSTRUMENTED or logfire is None:
        return nullcontext()
    return logfire.span(name, **attributes)


def instrument_errchain() -> None:
    """Enable errchain's Logfire spans after users configure Logfire themselves."""
    if logfire is None:
        raise new(
            Op("telemetry.instrument"),
            Kind.INVALID,
            Severity.ERROR,
            RuntimeError("Logfire is not installed. Install with 'errchain[observability]' to enable tracing."),
        )
    global _INSTRUMENTED
    _INSTRUMENTED = True


def log_level(severity: Severity) -> int:
    return _LOG_LEVELS[severity]


def log_error(err: BaseException, logger: logging.Logger | None = None) -> None:
    """Log an error at the level matching its severity.

    Chained errors carry their operations, kind and severity as ``extra``
    fields on the record. Any other exception is logged at ``ERROR``.
    """
    logger = logger or _logger
    if isinstance(err, ChainedError):
        severity = err.severity
        error_ops = [str(op) for op in ops(err)]
    else:
        severity = Severity.ERROR
        error_ops = []
    kind = dominant_kind(err)
    extra = {
        "error_ops": error_ops,
        "error_kind": kind.value,
        "error_severity": str(severity),
    }
    with span("errchain.log_error", **extra):
        logger.log(log_level(severity), "%s", err, extra=extra)
