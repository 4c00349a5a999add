"""Handlers – bridges between :mod:`logging` and joinlog handlers.

:class:`JoinLogHandler` plugs a joinlog handler into a stdlib logger::

    handler = join_handlers(TextHandler(sys.stdout), JSONHandler(log_file))
    logging.getLogger().addHandler(JoinLogHandler(handler))

:class:`LoggingHandler` goes the other way: it is a joinlog leaf that
forwards records into an existing stdlib logger.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Sequence

from mp_joinlog.handlers.protocol import Handler
from mp_joinlog.records import Attr, Record

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JoinLogHandler(logging.Handler):
    """:class:`logging.Handler` that dispatches to a joinlog :class:`Handler`.

    Parameters
    ----------
    handler:
        Usually the result of :func:`join_handlers`.
    level:
        Stdlib level filter, applied before the joinlog ``enabled`` check.
    """

    def __init__(self, handler: Handler, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.handler = handler

    def emit(self, record: logging.LogRecord) -> None:
        if not self.handler.enabled(record.levelno):
            return
        try:
            self.handler.handle(self.to_record(record))
        except Exception:  # noqa: BLE001
            # honours logging.raiseExceptions
            self.handleError(record)

    def to_record(self, record: logging.LogRecord) -> Record:
        """Convert a stdlib record, carrying ``extra=`` fields as attrs."""
        attrs = [Attr(k, v) for k, v in vars(record).items() if k not in _RESERVED]
        if record.exc_info:
            attrs.append(Attr("exc_info", self._formatter().formatException(record.exc_info)))
        return Record(
            datetime.fromtimestamp(record.created, timezone.utc),
            record.levelno,
            record.getMessage(),
            attrs,
        )

    def _formatter(self) -> logging.Formatter:
        return self.formatter or logging.Formatter()


class LoggingHandler:
    """Joinlog leaf that re-emits records through a stdlib logger.

    Attrs are passed as ``extra`` fields; grouped keys are dotted
    (``req.user_id``).
    """

    def __init__(self, logger: logging.Logger | str | None = None) -> None:
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger)
        self.logger = logger
        self._bound: tuple[tuple[str, Any], ...] = ()
        self._prefix = ""

    def enabled(self, level: int, ctx: Any = None) -> bool:  # noqa: ARG002
        return self.logger.isEnabledFor(level)

    def handle(self, record: Record, ctx: Any = None) -> None:  # noqa: ARG002
        extra = dict(self._bound)
        extra.update(_flatten(self._prefix, record.attrs()))
        stdlib_record = self.logger.makeRecord(
            self.logger.name,
            record.level,
            "(joinlog)",
            0,
            record.message,
            None,
            None,
            extra={k: v for k, v in extra.items() if k not in _RESERVED},
        )
        stdlib_record.created = record.time.timestamp()
        self.logger.handle(stdlib_record)

    def with_attrs(self, attrs: Sequence[Attr]) -> LoggingHandler:
        clone = self._derive()
        clone._bound = self._bound + tuple(_flatten(self._prefix, attrs).items())
        return clone

    def with_group(self, name: str) -> LoggingHandler:
        if not name:
            return self
        clone = self._derive()
        clone._prefix = f"{self._prefix}{name}."
        return clone

    def _derive(self) -> LoggingHandler:
        clone = LoggingHandler(self.logger)
        clone._bound = self._bound
        clone._prefix = self._prefix
        return clone

    def __repr__(self) -> str:
        return f"LoggingHandler(logger={self.logger.name!r})"


def _flatten(prefix: str, attrs: Sequence[Attr]) -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for attr in attrs:
        if attr.is_group:
            inner = f"{prefix}{attr.key}." if attr.key else prefix
            flat.update(_flatten(inner, attr.value))
        else:
            flat[prefix + attr.key] = attr.value
    return flat


__all__ = ["JoinLogHandler", "LoggingHandler"]
