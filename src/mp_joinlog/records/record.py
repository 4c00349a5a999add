"""Records – Record, one logging event."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Iterator

from mp_joinlog.records.attr import Attr


class Record:
    """A single log event: time, level, message and an ordered attr list.

    Handlers may append attrs to a record they receive, so a record handed to
    more than one handler must be :meth:`clone`\\ d for all but the last.
    """

    __slots__ = ("time", "level", "message", "_attrs")

    def __init__(
        self,
        time: datetime,
        level: int,
        message: str,
        attrs: list[Attr] | None = None,
    ) -> None:
        self.time = time
        self.level = level
        self.message = message
        self._attrs: list[Attr] = list(attrs) if attrs else []

    @classmethod
    def now(cls, level: int, message: str, *attrs: Attr) -> Record:
        return cls(datetime.now(UTC), level, message, list(attrs))

    def add_attrs(self, *attrs: Attr) -> None:
        self._attrs.extend(attrs)

    def attrs(self) -> tuple[Attr, ...]:
        return tuple(self._attrs)

    def __iter__(self) -> Iterator[Attr]:
        return iter(tuple(self._attrs))

    @property
    def num_attrs(self) -> int:
        return len(self._attrs)

    def clone(self) -> Record:
        """Return a copy whose attr storage is independent of this one."""
        return Record(self.time, self.level, self.message, self._attrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (
            self.time == other.time
            and self.level == other.level
            and self.message == other.message
            and self._attrs == other._attrs
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Record(time={self.time.isoformat()}, level={self.level}, "
            f"message={self.message!r}, attrs={self._attrs!r})"
        )


__all__ = ["Record"]
