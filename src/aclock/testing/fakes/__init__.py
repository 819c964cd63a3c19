"""Testing fakes."""
from aclock.testing.fakes.clock import FAKE_CLOCK_START, FakeClock

__all__ = ["FAKE_CLOCK_START", "FakeClock"]
