"""Application-layer errors."""

from __future__ import annotations

from aclock.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure outside the time domain itself, e.g. loading configuration."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
