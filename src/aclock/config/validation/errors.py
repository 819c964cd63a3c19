"""Config validation errors raised while building ClockSettings."""
from __future__ import annotations

from aclock.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Clock configuration could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """An ``ACLOCK_*`` value is unparseable or out of range.

    ``setting_name`` is the environment variable name, so the message points
    at what the operator has to change.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
