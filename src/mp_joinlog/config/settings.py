"""Config settings – Settings base class and JoinLogSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_joinlog.config.errors import InvalidSettingValueError
from mp_joinlog.records import parse_level

SINKS: frozenset[str] = frozenset({"text", "json"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class JoinLogSettings(Settings):
    """Which sinks to join and how they behave.

    Read from ``JOINLOG_LEVEL``, ``JOINLOG_SINKS`` (comma separated),
    ``JOINLOG_ADD_TIMESTAMP`` and ``JOINLOG_RAISE_ERRORS``.
    """

    _prefix: ClassVar[str] = "JOINLOG"

    level: str = "INFO"
    sinks: list[str] = dataclasses.field(default_factory=lambda: ["text"])
    add_timestamp: bool = True
    raise_errors: bool = False

    def _validate(self) -> None:
        try:
            parse_level(self.level)
        except ValueError as exc:
            raise InvalidSettingValueError("level", self.level, str(exc)) from exc
        self.sinks = [s.strip().lower() for s in self.sinks]
        unknown = [s for s in self.sinks if s not in SINKS]
        if unknown:
            raise InvalidSettingValueError(
                "sinks", self.sinks, f"unknown sink(s) {', '.join(unknown)}; expected {sorted(SINKS)}"
            )

    @property
    def level_value(self) -> int:
        return parse_level(self.level)


__all__ = ["SINKS", "JoinLogSettings", "Settings"]
