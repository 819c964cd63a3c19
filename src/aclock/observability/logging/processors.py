"""Observability – structlog processors and get_logger helper.

``AdjustedTimeStamper`` stamps events with the offset-adjusted time so log
lines written while a test has jumped the clock forward carry the simulated
time rather than the wall time.
``get_logger(name)`` returns a bound structlog logger.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from aclock.kernel.time.offset import TimeOffset


class AdjustedTimeStamper:
    """structlog processor that adds the offset-adjusted timestamp.

    Injects the following fields:

    * ``timestamp`` – ISO-8601 adjusted time (overwrites any existing value)
    * ``clock_offset`` – offset in seconds, only when it is non-zero

    Usage::

        import structlog
        from aclock.observability.logging import AdjustedTimeStamper

        structlog.configure(processors=[AdjustedTimeStamper(), ...])

    Parameters
    ----------
    source:
        Offset holder to read from. When omitted the process default is
        resolved on every event, so ``use_offset`` swaps are honoured.
    key:
        Name of the timestamp field.
    """

    def __init__(self, source: TimeOffset | None = None, *, key: str = "timestamp") -> None:
        self._source = source
        self._key = key

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from aclock.kernel.time.offset import default_offset

        source = self._source if self._source is not None else default_offset()
        adjusted, offset = source.now_with_offset()
        event_dict[self._key] = adjusted.isoformat()
        if offset:
            event_dict["clock_offset"] = offset.total_seconds()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["AdjustedTimeStamper", "get_logger"]
