"""Kernel time – AdjustableClock, a per-instance clock that can be pinned.

A clock is either :class:`Live` (tracking the offset-adjusted process time)
or :class:`Pinned` to a fixed instant::

    clock = AdjustableClock()
    clock.set(datetime(2024, 1, 1, tzinfo=UTC))
    clock.time()   # always 2024-01-01 00:00:00+00:00
    clock.sync()
    clock.time()   # wall time + process offset again

Instances are not synchronised; guard a shared clock with a lock.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime, timedelta

from aclock.kernel.time.offset import TimeOffset, default_offset

UNIX_EPOCH: datetime = datetime(1970, 1, 1, tzinfo=UTC)

_ONE_SECOND = timedelta(seconds=1)


@dataclasses.dataclass(frozen=True, slots=True)
class Live:
    """Track wall time plus the offset."""


@dataclasses.dataclass(frozen=True, slots=True)
class Pinned:
    """Always report ``at``."""

    at: datetime


ClockState = Live | Pinned


class AdjustableClock:
    """Clock that reads live adjusted time unless pinned with :meth:`set`.

    Parameters
    ----------
    source:
        Offset holder used in live mode. When omitted, the process default is
        looked up on every read.
    """

    def __init__(self, source: TimeOffset | None = None) -> None:
        self._source = source
        self._state: ClockState = Live()

    def __repr__(self) -> str:
        return f"AdjustableClock(state={self._state!r})"

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_pinned(self) -> bool:
        return isinstance(self._state, Pinned)

    def set(self, instant: datetime) -> None:
        """Pin the clock to *instant*; naive values are taken as UTC."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._state = Pinned(instant)

    def sync(self) -> None:
        """Return to live tracking."""
        self._state = Live()

    def time(self) -> datetime:
        state = self._state
        if isinstance(state, Pinned):
            return state.at
        source = self._source if self._source is not None else default_offset()
        return source.now()

    def unix(self) -> int:
        """Whole seconds since the Unix epoch, floored at zero."""
        seconds = (self.time() - UNIX_EPOCH) // _ONE_SECOND
        return max(seconds, 0)

    # ------------------------------------------------------------------
    # Clock protocol
    # ------------------------------------------------------------------

    def now(self) -> datetime:
        return self.time()

    def today(self) -> date:
        return self.time().date()

    def timestamp(self) -> float:
        return self.time().timestamp()


__all__ = ["UNIX_EPOCH", "AdjustableClock", "ClockState", "Live", "Pinned"]
