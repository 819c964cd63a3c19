"""Domain errors — rejected offset adjustments."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from aclock.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a time-domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet validation rules."""

    default_code = "validation_error"


class InvalidOffsetError(ValidationError):
    """The offset delta is negative or not a ``timedelta``.

    The global offset only ever moves forward.
    """

    default_code = "invalid_offset"

    def __init__(self, delta: object, **kwargs: Any) -> None:
        if isinstance(delta, timedelta):
            msg = f"offset delta cannot be negative, got {delta!r}"
        else:
            msg = f"offset delta must be a timedelta, got {type(delta).__name__}"
        super().__init__(msg, detail={"delta": delta}, **kwargs)
        self.delta = delta


class OffsetOverflowError(DomainError):
    """Adding the delta would exceed the range of ``timedelta``."""

    default_code = "offset_overflow"

    def __init__(self, current: timedelta, delta: timedelta, **kwargs: Any) -> None:
        super().__init__(
            "offset overflow",
            detail={"current": current, "delta": delta},
            **kwargs,
        )
        self.current = current
        self.delta = delta


__all__ = [
    "DomainError",
    "InvalidOffsetError",
    "OffsetOverflowError",
    "ValidationError",
]
