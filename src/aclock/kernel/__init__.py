"""Kernel – time primitives and the error hierarchy."""

from aclock.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidOffsetError,
    OffsetOverflowError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidOffsetError",
    "OffsetOverflowError",
    "ValidationError",
]
