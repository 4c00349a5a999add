"""Handlers – the Handler capability."""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from mp_joinlog.records import Attr, Record


@runtime_checkable
class Handler(Protocol):
    """Consumes log records and reports whether it acts on a given level.

    ``ctx`` is an opaque per-call value (request context, deadline, ...)
    that callers pass through untouched. ``handle`` signals failure by
    raising. Implementations must be safe to call from many threads once
    constructed, and ``with_attrs``/``with_group`` must return a new handler
    rather than modify the receiver.
    """

    def enabled(self, level: int, ctx: Any = None) -> bool: ...
    def handle(self, record: Record, ctx: Any = None) -> None: ...
    def with_attrs(self, attrs: Sequence[Attr]) -> Handler: ...
    def with_group(self, name: str) -> Handler: ...


__all__ = ["Handler"]
