"""Config – dataclass settings and env loaders."""

from aclock.config.settings import ClockSettings, EnvSettingsLoader, Settings, SettingsLoader
from aclock.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ClockSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
