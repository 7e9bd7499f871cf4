"""Chained error values for errchain."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from errchain.core.config import DEFAULT_RENDER_CONFIG, RenderConfig


class Op(str):
    """Name of the logical operation that failed, e.g. ``"store.Put"``."""

    __slots__ = ()


class Kind(str, Enum):
    """Closed classification of a failure. ``OTHER`` means unclassified."""

    OTHER = "other"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"

    def __str__(self) -> str:
        return _KIND_PHRASES.get(self, "unknown")


_KIND_PHRASES = {
    Kind.OTHER: "other error",
    Kind.NOT_FOUND: "not found",
    Kind.INVALID: "invalid",
    Kind.CONFLICT: "conflict",
    Kind.UNAUTHORIZED: "unauthorized",
    Kind.INTERNAL: "internal",
}


class Severity(IntEnum):
    """Advisory urgency of an error, in increasing order."""

    INFO = 0
    WARN = 1
    ERROR = 2
    PANIC = 3
    FATAL = 4

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class ChainedError(Exception):
    """A link in an error chain.

    Attributes:
        op: Operation that failed. May be empty.
        kind: Classification of the failure.
        cause: Wrapped error, either another link or an opaque exception.
        severity: Advisory urgency, never used for control flow.

    Build chains with :func:`new`; calling the class directly creates a raw
    link without copying or merging the cause.
    """

    op: Op = Op("")
    kind: Kind = Kind.OTHER
    cause: BaseException | None = None
    severity: Severity = Severity.INFO

    def __post_init__(self) -> None:
        self.__cause__ = self.cause

    def __str__(self) -> str:
        return render(self)

    def is_zero(self) -> bool:
        return not self.op and self.kind is Kind.OTHER and self.cause is None

    def ops(self) -> list[Op]:
        return ops(self)


_UNSET: Any = object()


def new(
    *args: Any,
    op: str = _UNSET,
    kind: Kind = _UNSET,
    severity: Severity = _UNSET,
    cause: BaseException | None = _UNSET,
) -> ChainedError:
    """Build a chained error from typed arguments given in any order.

    Positional arguments are dispatched on their type: ``Kind``, ``Severity``,
    an exception (the cause), a string (the operation) or ``None`` (no
    cause). Keyword arguments set the same fields and win over positionals;
    ``cause=None`` clears a positional cause.

    When the cause is itself a :class:`ChainedError` it is copied, the kind is
    reported once at the outermost link and the severity is raised to the
    highest of the two.

    Raises:
        TypeError: An argument of any other type was passed.
    """
    fields: dict[str, Any] = {}
    for arg in args:
        fields.update(_classify(arg))
    for name, value in (("op", op), ("kind", kind), ("severity", severity), ("cause", cause)):
        if value is not _UNSET:
            fields[name] = _check_keyword(name, value)

    err = ChainedError(
        op=Op(fields.get("op", "")),
        kind=fields.get("kind", Kind.OTHER),
        cause=fields.get("cause"),
        severity=fields.get("severity", Severity.INFO),
    )
    if isinstance(err.cause, ChainedError):
        prev = _copy_chain(err.cause)
        _merge(err, prev)
        err.cause = err.__cause__ = prev
    return err


def _classify(arg: Any) -> dict[str, Any]:
    # Kind is a str subclass, so it must be checked before str.
    if isinstance(arg, Kind):
        return {"kind": arg}
    if isinstance(arg, Severity):
        return {"severity": arg}
    if isinstance(arg, BaseException):
        return {"cause": arg}
    if isinstance(arg, str):
        return {"op": arg}
    if arg is None:
        return {"cause": None}
    raise TypeError(f"bad call to errchain.new: unsupported argument of type {type(arg).__name__}")


def _check_keyword(name: str, value: Any) -> Any:
    if name == "op":
        ok = isinstance(value, str) and not isinstance(value, Kind)
    elif name == "kind":
        ok = isinstance(value, Kind)
    elif name == "severity":
        ok = isinstance(value, Severity)
    else:
        ok = value is None or isinstance(value, BaseException)
    if not ok:
        raise TypeError(f"bad call to errchain.new: unsupported {name}= of type {type(value).__name__}")
    return value


def _copy_chain(err: ChainedError) -> ChainedError:
    links = list(walk(err))
    copy: BaseException | None = links[-1].cause
    for link in reversed(links):
        copy = ChainedError(op=link.op, kind=link.kind, cause=copy, severity=link.severity)
    return copy


def _merge(err: ChainedError, prev: ChainedError) -> None:
    if prev.kind is err.kind and err.kind is not Kind.OTHER:
        err.kind = Kind.OTHER
    elif err.kind is Kind.OTHER:
        err.kind = prev.kind
        prev.kind = Kind.OTHER
    err.severity = max(err.severity, prev.severity)


def _pad(buf: list[str], separator: str) -> None:
    if buf:
        buf.append(separator)


def _describe(exc: BaseException) -> str:
    try:
        text = str(exc)
    except Exception:
        text = ""
    return text if text else type(exc).__name__


def render(err: ChainedError, config: RenderConfig | None = None) -> str:
    """Render a chain as text, one indented line per nested link."""
    config = config or DEFAULT_RENDER_CONFIG
    # Built from the innermost link outward; ``text`` holds the inner rendering.
    text = config.empty_text
    for link in reversed(list(walk(err))):
        buf: list[str] = []
        if link.op:
            buf.append(link.op)
        if link.kind is not Kind.OTHER:
            _pad(buf, config.field_separator)
            buf.append(str(link.kind))
        cause = link.cause
        if isinstance(cause, ChainedError):
            if not cause.is_zero():
                _pad(buf, config.separator)
                buf.append(text)
        elif cause is not None:
            _pad(buf, config.field_separator)
            buf.append(_describe(cause))
        text = "".join(buf) or config.empty_text
    return text


def walk(err: BaseException | None) -> Iterator[ChainedError]:
    """Yield each chained link, outermost first, stopping at opaque causes."""
    while isinstance(err, ChainedError):
        yield err
        err = err.cause


def ops(err: ChainedError) -> list[Op]:
    """Return the operations of a chain from the outermost link inward."""
    return [link.op for link in walk(err)]


def dominant_kind(err: BaseException | None) -> Kind:
    """Return the first classified kind in the chain, or ``Kind.OTHER``."""
    for link in walk(err):
        if link.kind is not Kind.OTHER:
            return link.kind
    return Kind.OTHER


def is_kind(kind: Kind, err: BaseException | None) -> bool:
    return any(link.kind is kind for link in walk(err))
