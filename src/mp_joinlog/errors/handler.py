"""Handler errors and the multi-error aggregate raised by joined handlers."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from mp_joinlog.errors.base import BaseError


class HandlerError(BaseError):
    """A log handler failed to process a record."""

    default_code = "handler_error"


class HandlerWriteError(HandlerError):
    """Writing a rendered record to its sink failed."""

    default_code = "handler_write_error"

    def __init__(self, sink: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(f"Could not write log record to {sink}", cause=cause, **kwargs)
        self.sink = sink


class HandlerErrorGroup(ExceptionGroup):
    """Ordered collection of errors raised by sibling handlers.

    Usable with ``except*`` like any :class:`ExceptionGroup`; additionally
    supports identity containment (``err in group``) across nested groups.
    """

    @property
    def causes(self) -> tuple[Exception, ...]:
        return tuple(self.exceptions)

    def __contains__(self, error: object) -> bool:
        for exc in self.exceptions:
            if exc is error:
                return True
            if isinstance(exc, HandlerErrorGroup) and error in exc:
                return True
        return False

    def __iter__(self):
        return iter(self.exceptions)

    def __len__(self) -> int:
        return len(self.exceptions)

    def collapse(self) -> Exception:
        """Return the sole cause when only one remains, else ``self``."""
        if len(self.exceptions) == 1:
            return self.exceptions[0]
        return self

    def derive(self, excs: Sequence[Exception]) -> HandlerErrorGroup:
        return HandlerErrorGroup(self.message, excs)


def join_errors(errors: Iterable[Exception | None]) -> Exception | None:
    """Combine *errors* the way joined handlers report them.

    ``None`` entries are ignored. No errors gives ``None``; a single error is
    returned as-is so identity checks against it still hold.
    """
    collected = [err for err in errors if err is not None]
    if not collected:
        return None
    if len(collected) == 1:
        return collected[0]
    return HandlerErrorGroup(f"{len(collected)} log handlers failed", collected)


def raise_joined(errors: Iterable[Exception | None]) -> None:
    """Raise the result of :func:`join_errors`, if there is one."""
    error = join_errors(errors)
    if error is not None:
        raise error


__all__ = [
    "HandlerError",
    "HandlerErrorGroup",
    "HandlerWriteError",
    "join_errors",
    "raise_joined",
]
