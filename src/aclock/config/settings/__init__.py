"""Config settings – env-based configuration."""
from aclock.config.settings.base import Settings
from aclock.config.settings.clock import ClockSettings
from aclock.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["ClockSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
