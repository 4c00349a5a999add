"""Config – 12-factor settings and handler wiring."""
from mp_joinlog.config.errors import ConfigError, InvalidSettingValueError
from mp_joinlog.config.factory import build_handler, configure_logger
from mp_joinlog.config.loaders import EnvSettingsLoader, SettingsLoader
from mp_joinlog.config.settings import SINKS, JoinLogSettings, Settings

__all__ = [
    "SINKS",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "JoinLogSettings",
    "Settings",
    "SettingsLoader",
    "build_handler",
    "configure_logger",
]
