"""Records – key/value attributes and groups."""
from __future__ import annotations

import dataclasses
from typing import Any


class _Members(tuple):
    """Marks a tuple of attrs as the members of a group."""

    __slots__ = ()


@dataclasses.dataclass(frozen=True)
class Attr:
    """A single structured key/value pair.

    Groups are built with :meth:`group` only; encoders nest their members
    under ``key`` (or inline them when ``key`` is empty). Any other value,
    including a plain tuple, is an ordinary value.
    """

    key: str
    value: Any

    @classmethod
    def group(cls, key: str, *attrs: Attr) -> Attr:
        return cls(key, _Members(attrs))

    @property
    def is_group(self) -> bool:
        return isinstance(self.value, _Members)

    @property
    def is_empty(self) -> bool:
        """An empty group carries nothing and is dropped by encoders."""
        return self.is_group and not self.value


def attrs_from_kwargs(**kwargs: Any) -> list[Attr]:
    return [v if isinstance(v, Attr) else Attr(k, v) for k, v in kwargs.items()]


__all__ = ["Attr", "attrs_from_kwargs"]
