"""Testing fixtures – pytest fixtures for clocks and offsets."""
from aclock.testing.fixtures.clock import adjustable_clock, fake_clock, time_offset

__all__ = ["adjustable_clock", "fake_clock", "time_offset"]
