"""Unit tests for the hypothesis strategies."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from hypothesis import given

from aclock.kernel.time import UNIX_EPOCH, TimeOffset
from aclock.testing.generators import instant_strategy, offset_delta_strategy


class TestOffsetDeltaStrategy:
    @given(offset_delta_strategy())
    def test_values_are_accepted_by_add(self, delta: timedelta) -> None:
        assert delta >= timedelta(0)
        assert TimeOffset(log_adjustments=False).add(delta) == delta

    @given(offset_delta_strategy(max_delta=timedelta(seconds=1)))
    def test_respects_max(self, delta: timedelta) -> None:
        assert delta <= timedelta(seconds=1)


class TestInstantStrategy:
    @given(instant_strategy())
    def test_values_are_utc_aware(self, instant: datetime) -> None:
        assert instant.tzinfo is UTC

    @given(instant_strategy(min_value=datetime(1970, 1, 1), max_value=datetime(1970, 1, 2)))
    def test_respects_bounds(self, instant: datetime) -> None:
        assert UNIX_EPOCH <= instant <= UNIX_EPOCH + timedelta(days=1)
