"""Kernel time – Clock port and the offset-aware SystemClock."""
from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, runtime_checkable

from aclock.kernel.time.offset import now as _adjusted_now


@runtime_checkable
class Clock(Protocol):
    """Port implemented by ``SystemClock`` and ``AdjustableClock``.

    Depend on this instead of calling ``datetime.now`` so a pinned
    ``AdjustableClock`` can be swapped in under test.
    """

    def now(self) -> datetime: ...
    def today(self) -> date: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Stateless clock reading wall time shifted by the process offset."""

    def now(self) -> datetime:
        return _adjusted_now()

    def today(self) -> date:
        return self.now().date()

    def timestamp(self) -> float:
        return self.now().timestamp()


__all__ = ["Clock", "SystemClock"]
