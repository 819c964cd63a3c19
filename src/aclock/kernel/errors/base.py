"""Root error class for the aclock error hierarchy."""

from __future__ import annotations

from datetime import timedelta
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``str(err)`` is the plain message; ``detail`` keeps the raw operands
    (``timedelta`` values included) for callers that want to inspect them.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_log_fields(self) -> dict[str, Any]:
        """Flatten into structlog key-value pairs.

        Durations become float seconds; anything else that is not a plain
        scalar is rendered with ``repr``.
        """
        fields: dict[str, Any] = {"code": self.code, "error": self.message}
        for key, value in self.detail.items():
            if isinstance(value, timedelta):
                fields[key] = value.total_seconds()
            elif value is None or isinstance(value, (bool, int, float, str)):
                fields[key] = value
            else:
                fields[key] = repr(value)
        return fields


__all__ = ["BaseError"]
