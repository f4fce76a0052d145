"""Step timing for service operations.

``@traced`` wraps a service method in a root :class:`Span`; inside it,
``with trace_span("link"):`` records a child step. With ``--verbose``
the finished tree lands in ``ServiceResult.meta["telemetry"]`` and is
logged through structlog. Otherwise both helpers reduce to one
``ContextVar.get`` and do nothing.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from cordova_android.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)

_log = structlog.get_logger("cordova_android.telemetry")


@dataclass
class Span:
    """One timed step; ``children`` are the steps it ran."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    """Make *span* current for the duration of the block, then close it."""
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Record a child step of the active ``@traced`` call.

    Yields None when telemetry is off or no traced call is running, so
    callers guard annotations with ``if span:``.
    """
    parent = _current_span.get() if _verbose_enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time *func* and attach the span tree to the ServiceResult it returns."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        ok = False
        try:
            with _activate(root):
                result = func(*args, **kwargs)
            ok = True
        finally:
            _log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 2),
                ok=ok,
                children=len(root.children),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on span collection for the current context (``--verbose``)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    _verbose_enabled.set(False)
