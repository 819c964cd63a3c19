"""Kernel time – process offset, adjustable clock, Clock port."""
from aclock.kernel.time.adjustable import UNIX_EPOCH, AdjustableClock, ClockState, Live, Pinned
from aclock.kernel.time.clock import Clock, SystemClock
from aclock.kernel.time.offset import (
    MAX_TIME,
    TimeOffset,
    add_offset,
    current_offset,
    default_offset,
    now,
    now_with_offset,
    use_offset,
)

__all__ = [
    "MAX_TIME",
    "UNIX_EPOCH",
    "AdjustableClock",
    "Clock",
    "ClockState",
    "Live",
    "Pinned",
    "SystemClock",
    "TimeOffset",
    "add_offset",
    "current_offset",
    "default_offset",
    "now",
    "now_with_offset",
    "use_offset",
]
