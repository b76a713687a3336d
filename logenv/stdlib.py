"""Bridges between the filter and the standard ``logging`` module."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .config import FilterSettings, build_filter_spec
from .filtering import FilterSpec
from .metrics import record_filter_decision
from .records import Record
from .sinks.bound import BoundAttributesMixin


class LoggingSink(BoundAttributesMixin):
    """Inner sink forwarding records to a ``logging.Logger``.

    Levels share the standard library's numbering, so ``WARN`` arrives as
    ``logging.WARNING``. Attributes travel in ``record.attributes`` and the
    caller token in ``record.caller`` on the emitted ``LogRecord``, whose
    file, line and function are those of the original log call.
    """

    def __init__(self, logger: logging.Logger | str) -> None:
        if isinstance(logger, str):
            logger = logging.getLogger(logger)

        self._logger = logger

    def enabled(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def handle(self, record: Record) -> None:
        """Emit ``record`` as a ``LogRecord`` located at the original call site."""

        logger = self._logger
        if not logger.isEnabledFor(record.level):
            return

        source = record.source
        log_record = logger.makeRecord(
            logger.name,
            record.level,
            source.pathname if source else "(unknown file)",
            source.lineno if source else 0,
            record.message,
            (),
            None,
            func=source.function if source else None,
            extra={"attributes": self._attributes(record), "caller": record.caller},
        )
        log_record.created = record.time.timestamp()
        log_record.msecs = (log_record.created - int(log_record.created)) * 1000

        logger.handle(log_record)


class EnvLevelFilter(logging.Filter):
    """Filter ``logging`` records by the level configured for their module.

    The module is the file stem of the call site (``LogRecord.module``), so
    ``LOG_FILTER=warn,models=debug`` lets debug records from ``models.py``
    through while everything else needs warning or above.
    """

    def __init__(self, spec: FilterSpec, name: str = "") -> None:
        super().__init__(name)
        self.spec = spec

    @classmethod
    def from_settings(
        cls,
        settings: FilterSettings | None = None,
        *,
        env: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "EnvLevelFilter":
        return cls(build_filter_spec(settings, env=env, **overrides))

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to reject ``record``."""

        if not super().filter(record):
            return False

        overrides = self.spec.overrides
        module = record.module if record.module in overrides else None
        emitted = record.levelno >= self.spec.level_for_module(module)

        record_filter_decision(record.levelno, emitted, module)

        return emitted


__all__ = ["LoggingSink", "EnvLevelFilter"]
