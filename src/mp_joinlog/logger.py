"""Logger – front-end that builds records and hands them to a handler."""
from __future__ import annotations

import logging
from typing import Any

from mp_joinlog.handlers.protocol import Handler
from mp_joinlog.records import Attr, Level, Record, attrs_from_kwargs, level_name

_log = logging.getLogger(__name__)


class Logger:
    """Structured logger over any :class:`Handler`.

    Positional :class:`Attr` arguments and keyword arguments both become
    record attrs, in call order::

        log = Logger(join_handlers(TextHandler(sys.stdout), JSONHandler(sink)))
        log.info("hello world", user="test")
        log.bind(request_id="123").with_group("req").info("user login", user_id=42)

    Parameters
    ----------
    handler:
        Where records go.
    raise_errors:
        Re-raise handler failures to the caller. When ``False`` (default)
        they are reported once through the stdlib ``mp_joinlog.logger``
        logger and the call returns normally.
    """

    def __init__(self, handler: Handler, *, raise_errors: bool = False) -> None:
        self._handler = handler
        self.raise_errors = raise_errors

    @property
    def handler(self) -> Handler:
        return self._handler

    def enabled(self, level: int, ctx: Any = None) -> bool:
        return self._handler.enabled(level, ctx)

    def log(self, level: int, msg: str, *attrs: Attr, ctx: Any = None, **kwargs: Any) -> None:
        if not self._handler.enabled(level, ctx):
            return
        record = Record.now(level, msg, *attrs, *attrs_from_kwargs(**kwargs))
        try:
            self._handler.handle(record, ctx)
        except Exception:
            if self.raise_errors:
                raise
            _log.warning("joinlog.handle_failed level=%s msg=%r", level_name(level), msg, exc_info=True)

    def debug(self, msg: str, *attrs: Attr, ctx: Any = None, **kwargs: Any) -> None:
        self.log(Level.DEBUG, msg, *attrs, ctx=ctx, **kwargs)

    def info(self, msg: str, *attrs: Attr, ctx: Any = None, **kwargs: Any) -> None:
        self.log(Level.INFO, msg, *attrs, ctx=ctx, **kwargs)

    def warning(self, msg: str, *attrs: Attr, ctx: Any = None, **kwargs: Any) -> None:
        self.log(Level.WARNING, msg, *attrs, ctx=ctx, **kwargs)

    # common alias
    warn = warning

    def error(self, msg: str, *attrs: Attr, ctx: Any = None, **kwargs: Any) -> None:
        self.log(Level.ERROR, msg, *attrs, ctx=ctx, **kwargs)

    def critical(self, msg: str, *attrs: Attr, ctx: Any = None, **kwargs: Any) -> None:
        self.log(Level.CRITICAL, msg, *attrs, ctx=ctx, **kwargs)

    def bind(self, *attrs: Attr, **kwargs: Any) -> Logger:
        """Return a logger whose records all carry the given attrs."""
        bound = [*attrs, *attrs_from_kwargs(**kwargs)]
        if not bound:
            return self
        return Logger(self._handler.with_attrs(bound), raise_errors=self.raise_errors)

    def with_group(self, name: str) -> Logger:
        """Return a logger that nests subsequent attrs under *name*."""
        if not name:
            return self
        return Logger(self._handler.with_group(name), raise_errors=self.raise_errors)


__all__ = ["Logger"]
