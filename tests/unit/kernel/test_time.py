"""Unit tests for the Clock port and SystemClock."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from aclock.kernel.time import AdjustableClock, Clock, SystemClock, TimeOffset, add_offset


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self, time_offset: TimeOffset) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset() == timedelta(0)

    def test_today_returns_date(self, time_offset: TimeOffset) -> None:
        result = SystemClock().today()
        assert type(result) is date

    def test_timestamp_close_to_wall_clock(self, time_offset: TimeOffset) -> None:
        expected = datetime.now(UTC).timestamp()
        assert abs(SystemClock().timestamp() - expected) < 1.0

    def test_follows_process_offset(self, time_offset: TimeOffset) -> None:
        clk = SystemClock()
        add_offset(timedelta(days=2))
        assert clk.now() - datetime.now(UTC) > timedelta(days=1, hours=23)
        assert clk.today() >= (datetime.now(UTC) + timedelta(days=1)).date()


# ---------------------------------------------------------------------------
# Clock port
# ---------------------------------------------------------------------------


class TestClockPort:
    def test_system_clock_satisfies_port(self) -> None:
        assert isinstance(SystemClock(), Clock)

    def test_adjustable_clock_satisfies_port(self) -> None:
        assert isinstance(AdjustableClock(), Clock)

    def test_unrelated_object_does_not(self) -> None:
        assert not isinstance(object(), Clock)


# ---------------------------------------------------------------------------
# Public surface smoke test
# ---------------------------------------------------------------------------


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("aclock.kernel.time")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing from aclock.kernel.time"
