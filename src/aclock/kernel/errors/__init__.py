"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidOffsetError
    │   └── OffsetOverflowError
    └── ApplicationError     (application.py)
"""

from aclock.kernel.errors.application import ApplicationError
from aclock.kernel.errors.base import BaseError
from aclock.kernel.errors.domain import (
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
