"""Handlers – TextHandler and JSONHandler.

Both build a structlog event dict from a :class:`Record` and render it with
a structlog renderer, one line per record::

    time=2026-10-19T08:15:02.114+00:00 level=INFO msg="hello world" user=test
    {"time": "2026-10-19T08:15:02.114+00:00", "level": "INFO", "msg": "hello world", "user": "test"}

Handlers writing to the same stream share one lock, so lines from different
handlers never interleave.
"""
from __future__ import annotations

import sys
import threading
import weakref
from typing import Any, Callable, Sequence, TextIO

import structlog

from mp_joinlog.errors import HandlerError, HandlerWriteError
from mp_joinlog.records import Attr, Level, Record, level_name

Renderer = Callable[[Any, str, dict[str, Any]], str]

_stream_locks: weakref.WeakKeyDictionary[Any, threading.Lock] = weakref.WeakKeyDictionary()
_stream_locks_guard = threading.Lock()


def stream_lock(stream: Any) -> threading.Lock:
    """Return the write lock shared by every handler writing to *stream*.

    Streams that cannot be weakly referenced get a lock of their own.
    """
    with _stream_locks_guard:
        try:
            lock = _stream_locks.get(stream)
            if lock is None:
                lock = _stream_locks[stream] = threading.Lock()
        except TypeError:
            lock = threading.Lock()
        return lock


class _StructlogHandler:
    """Shared machinery; subclasses pick the renderer, key format and group layout."""

    nest_groups: bool = True

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        level: int = Level.INFO,
        add_timestamp: bool = True,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._lock = stream_lock(self._stream)
        self.level = level
        self.add_timestamp = add_timestamp
        # (group path, attr) pairs bound through with_attrs
        self._bound: tuple[tuple[tuple[str, ...], Attr], ...] = ()
        self._groups: tuple[str, ...] = ()
        self._renderer = self._make_renderer()

    def _make_renderer(self) -> Renderer:
        raise NotImplementedError

    def format_key(self, key: str) -> str:
        return key

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    # ------------------------------------------------------------------
    # Handler interface
    # ------------------------------------------------------------------

    def enabled(self, level: int, ctx: Any = None) -> bool:  # noqa: ARG002
        return level >= self.level

    def handle(self, record: Record, ctx: Any = None) -> None:  # noqa: ARG002
        try:
            line = self._renderer(None, level_name(record.level).lower(), self.event_dict(record))
        except (TypeError, ValueError) as exc:
            raise HandlerError(
                f"{type(self).__name__} could not render record",
                detail={"msg": record.message},
                cause=exc,
            ) from exc
        with self._lock:
            try:
                self._stream.write(line + "\n")
                self._stream.flush()
            except OSError as exc:
                raise HandlerWriteError(type(self).__name__, exc) from exc

    def with_attrs(self, attrs: Sequence[Attr]) -> _StructlogHandler:
        if not attrs:
            return self
        clone = self._derive()
        clone._bound = self._bound + tuple((self._groups, a) for a in attrs)
        return clone

    def with_group(self, name: str) -> _StructlogHandler:
        if not name:
            return self
        clone = self._derive()
        clone._groups = self._groups + (name,)
        return clone

    # ------------------------------------------------------------------
    # Event dict construction
    # ------------------------------------------------------------------

    def event_dict(self, record: Record) -> dict[str, Any]:
        """Return the ordered event dict the renderer receives for *record*."""
        event: dict[str, Any] = {}
        if self.add_timestamp:
            event["time"] = record.time.isoformat(timespec="milliseconds")
        event["level"] = level_name(record.level)
        event["msg"] = record.message
        for groups, attr in self._bound:
            self._put(event, groups, attr)
        for attr in record.attrs():
            self._put(event, self._groups, attr)
        return event

    def _put(self, event: dict[str, Any], groups: tuple[str, ...], attr: Attr) -> None:
        if attr.is_empty:
            return
        if attr.is_group and not attr.key:
            for member in attr.value:
                self._put(event, groups, member)
            return
        if self.nest_groups:
            target = event
            for name in groups:
                key = self.format_key(name)
                nested = target.get(key)
                if not isinstance(nested, dict):
                    # a group replaces a plain value under the same key
                    nested = target[key] = {}
                target = nested
            target[self.format_key(attr.key)] = self._nested_value(attr)
            return
        if attr.is_group:
            for member in attr.value:
                self._put(event, groups + (attr.key,), member)
        else:
            event[self.format_key(".".join(groups + (attr.key,)))] = attr.value

    def _nested_value(self, attr: Attr) -> Any:
        if not attr.is_group:
            return attr.value
        nested: dict[str, Any] = {}
        for member in attr.value:
            self._put(nested, (), member)
        return nested

    def _derive(self) -> _StructlogHandler:
        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={level_name(self.level)})"


class TextHandler(_StructlogHandler):
    """logfmt lines; grouped keys are written as ``group.key``.

    logfmt keys cannot hold whitespace or control characters, so those are
    written as ``_`` (``user name`` becomes ``user_name``).
    """

    nest_groups = False

    def _make_renderer(self) -> Renderer:
        return structlog.processors.LogfmtRenderer(bool_as_flag=False)

    def format_key(self, key: str) -> str:
        if all(c > " " for c in key):
            return key
        return "".join(c if c > " " else "_" for c in key)


class JSONHandler(_StructlogHandler):
    """One JSON object per line; groups become nested objects."""

    nest_groups = True

    def _make_renderer(self) -> Renderer:
        return structlog.processors.JSONRenderer(default=str)


__all__ = ["JSONHandler", "TextHandler", "stream_lock"]
