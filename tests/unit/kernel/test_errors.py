"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

from datetime import timedelta

from aclock.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidOffsetError,
    OffsetOverflowError,
    ValidationError,
)


class TestBaseError:
    def test_str_is_message(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_and_custom_code(self) -> None:
        assert BaseError("m").code == "base_error"
        assert BaseError("m", code="custom").code == "custom"

    def test_cause_is_chained(self) -> None:
        cause = OverflowError("too big")
        assert BaseError("m", cause=cause).__cause__ is cause

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestLogFields:
    def test_durations_become_seconds(self) -> None:
        err = BaseError("m", detail={"delta": timedelta(minutes=1, milliseconds=500)})
        assert err.to_log_fields() == {"code": "base_error", "error": "m", "delta": 60.5}

    def test_scalars_kept_and_others_repred(self) -> None:
        err = BaseError("m", detail={"n": 3, "flag": True, "none": None, "obj": [1]})
        fields = err.to_log_fields()
        assert fields["n"] == 3
        assert fields["flag"] is True
        assert fields["none"] is None
        assert fields["obj"] == "[1]"


class TestInvalidOffsetError:
    def test_hierarchy(self) -> None:
        err = InvalidOffsetError(timedelta(seconds=-1))
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)
        assert isinstance(err, BaseError)

    def test_negative_message(self) -> None:
        err = InvalidOffsetError(timedelta(seconds=-1))
        assert "negative" in err.message
        assert err.code == "invalid_offset"
        assert err.delta == timedelta(seconds=-1)
        assert err.to_log_fields()["delta"] == -1.0

    def test_wrong_type_message(self) -> None:
        err = InvalidOffsetError("5s")
        assert err.message == "offset delta must be a timedelta, got str"
        assert err.to_log_fields()["delta"] == "5s"


class TestOffsetOverflowError:
    def test_carries_operands(self) -> None:
        err = OffsetOverflowError(timedelta.max, timedelta(seconds=1))
        assert isinstance(err, DomainError)
        assert not isinstance(err, ValidationError)
        assert err.code == "offset_overflow"
        assert err.current == timedelta.max
        assert err.detail["delta"] == timedelta(seconds=1)
        assert err.to_log_fields()["current"] == timedelta.max.total_seconds()


class TestApplicationError:
    def test_is_not_domain_error(self) -> None:
        err = ApplicationError("m")
        assert err.code == "application_error"
        assert not isinstance(err, DomainError)
