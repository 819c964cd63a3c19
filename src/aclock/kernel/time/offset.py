"""Kernel time – process-wide offset applied to every live time read.

The offset only grows. Tests call :func:`add_offset` to jump time forward
without sleeping; everything reading :func:`now` (directly, through
:class:`~aclock.kernel.time.adjustable.AdjustableClock` or through
:class:`~aclock.kernel.time.clock.SystemClock`) observes the jump.

Example::

    from datetime import timedelta
    from aclock.kernel.time import add_offset, now

    before = now()
    add_offset(timedelta(hours=1))
    assert now() - before >= timedelta(hours=1)
"""
from __future__ import annotations

import contextlib
import threading
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from aclock.kernel.errors import BaseError, InvalidOffsetError, OffsetOverflowError
from aclock.observability.logging import get_logger

if TYPE_CHECKING:
    from aclock.config.settings import ClockSettings

MAX_TIME: datetime = datetime.max.replace(tzinfo=UTC)
"""Latest representable instant; use as a "never expires" marker."""

_ZERO = timedelta(0)


def _system_wall() -> datetime:
    return datetime.now(UTC)


def _shift(wall: datetime, offset: timedelta) -> datetime:
    if wall.tzinfo is None:
        wall = wall.replace(tzinfo=UTC)
    try:
        return wall + offset
    except OverflowError:
        return MAX_TIME


class TimeOffset:
    """Thread-safe holder of a monotonically non-decreasing time offset.

    Parameters
    ----------
    initial:
        Starting offset. Must be a non-negative ``timedelta``.
    wall:
        Wall-clock read primitive. Defaults to ``datetime.now(UTC)``; naive
        results are interpreted as UTC.
    log_adjustments:
        Emit ``clock.offset_added`` / ``clock.offset_rejected`` events.
    """

    def __init__(
        self,
        initial: timedelta = _ZERO,
        *,
        wall: Callable[[], datetime] | None = None,
        log_adjustments: bool = True,
    ) -> None:
        if not isinstance(initial, timedelta) or initial < _ZERO:
            raise InvalidOffsetError(initial)
        self._offset = initial
        self._wall = wall or _system_wall
        self._log_adjustments = log_adjustments
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: ClockSettings,
        *,
        wall: Callable[[], datetime] | None = None,
    ) -> TimeOffset:
        """Build an instance from validated :class:`ClockSettings`."""
        return cls(
            timedelta(seconds=settings.initial_offset_seconds),
            wall=wall,
            log_adjustments=settings.log_adjustments,
        )

    def __repr__(self) -> str:
        return f"TimeOffset(offset={self.offset!r})"

    @property
    def offset(self) -> timedelta:
        with self._lock:
            return self._offset

    def add(self, delta: timedelta) -> timedelta:
        """Add *delta* to the offset and return the new total.

        Raises
        ------
        InvalidOffsetError
            *delta* is negative or not a ``timedelta``.
        OffsetOverflowError
            The total would exceed ``timedelta.max``.

        The offset is left unchanged when either error is raised.
        """
        if not isinstance(delta, timedelta) or delta < _ZERO:
            raise self._rejected(InvalidOffsetError(delta))
        overflow: OverflowError | None = None
        with self._lock:
            current = self._offset
            try:
                total = current + delta
            except OverflowError as exc:
                overflow = exc
            else:
                self._offset = total
        # Logging may re-enter now_with_offset through AdjustedTimeStamper.
        if overflow is not None:
            raise self._rejected(
                OffsetOverflowError(current, delta, cause=overflow)
            ) from overflow
        if self._log_adjustments:
            get_logger(__name__).debug(
                "clock.offset_added",
                delta=delta.total_seconds(),
                offset=total.total_seconds(),
            )
        return total

    def now(self) -> datetime:
        """Wall-clock time plus the offset, read fresh on every call."""
        return self.now_with_offset()[0]

    def now_with_offset(self) -> tuple[datetime, timedelta]:
        """Return the adjusted time together with the offset that produced it."""
        with self._lock:
            offset = self._offset
        return _shift(self._wall(), offset), offset

    def _rejected(self, err: BaseError) -> BaseError:
        if self._log_adjustments:
            get_logger(__name__).warning("clock.offset_rejected", **err.to_log_fields())
        return err


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default: TimeOffset = TimeOffset()
_default_lock = threading.Lock()


def default_offset() -> TimeOffset:
    """Return the :class:`TimeOffset` currently installed for the process."""
    with _default_lock:
        return _default


@contextlib.contextmanager
def use_offset(offset: TimeOffset | None = None) -> Iterator[TimeOffset]:
    """Install *offset* (or a fresh one) as the process default for a block.

    The previous default is restored on exit, so offsets added inside the
    block do not leak into other tests.
    """
    global _default
    replacement = offset if offset is not None else TimeOffset()
    with _default_lock:
        previous, _default = _default, replacement
    try:
        yield replacement
    finally:
        with _default_lock:
            _default = previous


def add_offset(delta: timedelta) -> timedelta:
    """Add *delta* to the process offset; see :meth:`TimeOffset.add`."""
    return default_offset().add(delta)


def current_offset() -> timedelta:
    return default_offset().offset


def now() -> datetime:
    """System time plus the process offset."""
    return default_offset().now()


def now_with_offset() -> tuple[datetime, timedelta]:
    return default_offset().now_with_offset()


__all__ = [
    "MAX_TIME",
    "TimeOffset",
    "add_offset",
    "current_offset",
    "default_offset",
    "now",
    "now_with_offset",
    "use_offset",
]
