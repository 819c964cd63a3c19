"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from aclock.observability.logging.processors import AdjustedTimeStamper


class JsonLoggerFactory:
    """Configure structlog for JSON output on top of stdlib logging."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        adjusted_timestamps: bool = True,
        cache_logger_on_first_use: bool = True,
    ) -> None:
        """Install the structlog pipeline and a JSON handler on the root logger.

        With ``adjusted_timestamps`` the ``timestamp`` field follows the
        process offset; otherwise the wall clock is used.
        """
        stamper: Any = (
            AdjustedTimeStamper()
            if adjusted_timestamps
            else structlog.processors.TimeStamper(fmt="iso", utc=True)
        )
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            stamper,
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache_logger_on_first_use,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
