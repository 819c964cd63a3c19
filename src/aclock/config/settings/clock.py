"""Config settings – ClockSettings."""
from __future__ import annotations

import dataclasses
import math
from datetime import timedelta

from aclock.config.settings.base import Settings
from aclock.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ClockSettings(Settings):
    """Settings for building a :class:`~aclock.kernel.time.TimeOffset`.

    Read from ``ACLOCK_INITIAL_OFFSET_SECONDS`` and ``ACLOCK_LOG_ADJUSTMENTS``
    when loaded with :class:`~aclock.config.settings.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "ACLOCK"

    initial_offset_seconds: float = 0.0
    log_adjustments: bool = True

    def _validate(self) -> None:
        value = self.initial_offset_seconds
        if not math.isfinite(value) or value < 0:
            raise InvalidSettingValueError(
                self.env_key("initial_offset_seconds"), value, "must be a finite, non-negative number"
            )
        try:
            timedelta(seconds=value)
        except OverflowError as exc:
            raise InvalidSettingValueError(
                self.env_key("initial_offset_seconds"), value, "exceeds the timedelta range"
            ) from exc


__all__ = ["ClockSettings"]
