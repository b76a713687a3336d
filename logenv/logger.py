"""Structured logging facade."""

from __future__ import annotations

from typing import Any

from .caller import capture_call_site
from .handler import Sink
from .levels import CRITICAL, DEBUG, ERROR, INFO, WARN
from .records import build_record


class StructuredLogger:
    """Front end that captures the caller and hands records to a sink."""

    def __init__(self, sink: Sink) -> None:
        """Initialize the structured logger with the sink it writes to."""

        self._sink = sink # The sink receiving records

    @property
    def sink(self) -> Sink:
        return self._sink

    def debug(self, message: str, **attributes: Any) -> None:
        """Log a debug message."""

        self._log(DEBUG, message, attributes)

    def info(self, message: str, **attributes: Any) -> None:
        """Log an info message."""

        self._log(INFO, message, attributes)

    def warning(self, message: str, **attributes: Any) -> None:
        """Log a warning message."""

        self._log(WARN, message, attributes)

    def warn(self, message: str, **attributes: Any) -> None:
        self._log(WARN, message, attributes)

    def error(self, message: str, **attributes: Any) -> None:
        """Log an error message."""

        self._log(ERROR, message, attributes)

    def critical(self, message: str, **attributes: Any) -> None:
        """Log a critical message."""

        self._log(CRITICAL, message, attributes)

    def log(self, level: int, message: str, **attributes: Any) -> None:
        """Log a message at an arbitrary numeric level."""

        self._log(level, message, attributes)

    def enabled(self, level: int) -> bool:
        return self._sink.enabled(level)

    def bind(self, **attributes: Any) -> "StructuredLogger":
        """Return a logger whose records carry ``attributes``."""

        return StructuredLogger(self._sink.with_attributes(attributes))

    def group(self, name: str) -> "StructuredLogger":
        """Return a logger whose attributes are nested under ``name``."""

        return StructuredLogger(self._sink.with_group(name))

    def _log(self, level: int, message: str, attributes: dict[str, Any]) -> None:
        """Build a record for the user's call site and hand it to the sink.

        Must be called directly from one of the public logging methods so
        that the caller sits two frames above this one.
        """

        if not self._sink.enabled(level):
            return

        record = build_record(
            level,
            message,
            source=capture_call_site(2),
            attributes=attributes,
        )

        self._sink.handle(record)


__all__ = ["StructuredLogger"]
