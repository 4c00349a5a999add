"""Root error class for mp-joinlog."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the joinlog error hierarchy.

    ``str()`` gives ``"[code] message"`` so a failure reported through a
    plain-text sink still names its kind; :meth:`to_dict` gives the same
    information as fields, ready to be logged as attrs.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context about the failing record or setting.
        cause: Exception raised by the sink, renderer or parser underneath.
    """

    default_code: str = "joinlog_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, **self.detail}
        if self.__cause__ is not None:
            payload["cause"] = f"{type(self.__cause__).__name__}: {self.__cause__}"
        return payload


__all__ = ["BaseError"]
