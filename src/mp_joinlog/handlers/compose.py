"""Handlers – fan-out composition of several handlers into one.

:func:`join_handlers` flattens its arguments and picks a representation by
the number of leaves: an empty handler, the single leaf itself, a pair, or a
list. Joined handlers are immutable and never contain another joined handler,
so re-joining them keeps a single level of nesting.
"""
from __future__ import annotations

from typing import Any, Sequence

from mp_joinlog.errors import raise_joined
from mp_joinlog.handlers.protocol import Handler
from mp_joinlog.records import Attr, Record


class _EmptyHandler:
    """Zero children: never enabled, drops everything."""

    __slots__ = ()
    _handlers: tuple[Handler, ...] = ()

    def enabled(self, level: int, ctx: Any = None) -> bool:  # noqa: ARG002
        return False

    def handle(self, record: Record, ctx: Any = None) -> None:  # noqa: ARG002
        return None

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:  # noqa: ARG002
        return self

    def with_group(self, name: str) -> Handler:  # noqa: ARG002
        return self

    def __repr__(self) -> str:
        return "JoinedHandlers()"


class _PairHandler:
    """Exactly two children."""

    __slots__ = ("_handlers",)

    def __init__(self, first: Handler, second: Handler) -> None:
        self._handlers: tuple[Handler, Handler] = (first, second)

    def enabled(self, level: int, ctx: Any = None) -> bool:
        first, second = self._handlers
        return first.enabled(level, ctx) or second.enabled(level, ctx)

    def handle(self, record: Record, ctx: Any = None) -> None:
        first, second = self._handlers
        errors: list[Exception] = []
        if first.enabled(record.level, ctx):
            try:
                first.handle(record.clone(), ctx)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
        if second.enabled(record.level, ctx):
            try:
                second.handle(record, ctx)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
        raise_joined(errors)

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        first, second = self._handlers
        return _PairHandler(first.with_attrs(list(attrs)), second.with_attrs(list(attrs)))

    def with_group(self, name: str) -> Handler:
        first, second = self._handlers
        return _PairHandler(first.with_group(name), second.with_group(name))

    def __repr__(self) -> str:
        return f"JoinedHandlers({self._handlers[0]!r}, {self._handlers[1]!r})"


class _ListHandler:
    """Three or more children, dispatched in order."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: tuple[Handler, ...]) -> None:
        self._handlers = handlers

    def enabled(self, level: int, ctx: Any = None) -> bool:
        return any(h.enabled(level, ctx) for h in self._handlers)

    def handle(self, record: Record, ctx: Any = None) -> None:
        *leading, last = self._handlers
        errors: list[Exception] = []
        for handler in leading:
            if handler.enabled(record.level, ctx):
                try:
                    handler.handle(record.clone(), ctx)
                except Exception as exc:  # noqa: BLE001
                    errors.append(exc)
        if last.enabled(record.level, ctx):
            try:
                last.handle(record, ctx)
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
        raise_joined(errors)

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        return _ListHandler(tuple(h.with_attrs(list(attrs)) for h in self._handlers))

    def with_group(self, name: str) -> Handler:
        return _ListHandler(tuple(h.with_group(name) for h in self._handlers))

    def __repr__(self) -> str:
        return f"JoinedHandlers({', '.join(repr(h) for h in self._handlers)})"


_EMPTY = _EmptyHandler()
_JOINED = (_EmptyHandler, _PairHandler, _ListHandler)


def flatten(*handlers: Handler | None) -> tuple[Handler, ...]:
    """Return the leaf handlers reachable from *handlers*, in order.

    ``None`` entries are skipped. Joined handlers are already flat, so a
    single level of expansion is enough.
    """
    flat: list[Handler] = []
    for handler in handlers:
        if handler is None:
            continue
        if isinstance(handler, _JOINED):
            flat.extend(handler._handlers)
        else:
            flat.append(handler)
    return tuple(flat)


def join_handlers(*handlers: Handler | None) -> Handler:
    """Combine *handlers* into one handler that fans out to all of them.

    Every enabled child receives every record, in argument order. A child
    that raises does not stop dispatch to the others; afterwards a single
    error is re-raised unchanged and several are raised together as a
    :class:`~mp_joinlog.errors.HandlerErrorGroup`.

    With exactly one handler, that handler is returned as-is.
    """
    flat = flatten(*handlers)
    if not flat:
        return _EMPTY
    if len(flat) == 1:
        return flat[0]
    if len(flat) == 2:
        return _PairHandler(flat[0], flat[1])
    return _ListHandler(flat)


__all__ = ["flatten", "join_handlers"]
