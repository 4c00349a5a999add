"""Records – severity levels."""
from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Severity levels, numerically compatible with :mod:`logging`."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_ALIASES = {"WARN": Level.WARNING, "FATAL": Level.CRITICAL}


def level_name(level: int) -> str:
    """Return the display name of *level*.

    Values between two members are shown relative to the nearest lower one,
    e.g. ``25`` is ``INFO+5`` and ``8`` is ``DEBUG-2``.
    """
    try:
        return Level(level).name
    except ValueError:
        pass
    base = Level.DEBUG
    for member in Level:
        if member <= level:
            base = member
    offset = int(level) - int(base)
    return f"{base.name}{offset:+d}"


def parse_level(value: int | str) -> int:
    """Accept an int, a level name (any case) or a known alias."""
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name.lstrip("-").isdigit():
        return int(name)
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return Level[name]
    except KeyError:
        raise ValueError(f"Unknown log level {value!r}") from None


__all__ = ["Level", "level_name", "parse_level"]
