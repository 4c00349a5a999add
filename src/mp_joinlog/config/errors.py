"""Config – errors raised while reading JOINLOG_* settings."""
from __future__ import annotations

from mp_joinlog.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be turned into a handler configuration."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting names a level or sink joinlog does not know."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid {setting_name}={value!r}: {reason}",
            detail={"setting": setting_name, "value": value},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
