"""
aclock – adjustable process clock.

Import path convention::

    from aclock.kernel.time import AdjustableClock, add_offset, now
    from aclock.kernel.errors import InvalidOffsetError, OffsetOverflowError
    from aclock.config.settings import ClockSettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
