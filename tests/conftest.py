"""Shared fixtures: fresh process offset per test."""
from aclock.testing.fixtures import adjustable_clock, fake_clock, time_offset  # noqa: F401
