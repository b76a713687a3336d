"""Stdout sink emitting NDJSON."""

from __future__ import annotations

import json
import sys
import threading
from typing import IO

from ..levels import NOTSET
from ..records import Record
from .bound import BoundAttributesMixin


class StdoutSink(BoundAttributesMixin):
    """Write structured records to a text stream as NDJSON."""

    def __init__(self, stream: IO[str] | None = None, level: int = NOTSET) -> None:
        """Initialize the stdout sink with an optional stream and minimum level."""

        self._stream = stream or sys.stdout # The stream to write to
        self._level = level # The minimum level accepted by the sink
        self._lock = threading.Lock() # The lock for the stream

    def enabled(self, level: int) -> bool:
        """Check whether the sink accepts records at ``level``."""

        return level >= self._level

    def handle(self, record: Record) -> None:
        """Write a record to the stream."""

        payload = self._payload(record)
        payload.setdefault("severity", payload.get("level", "INFO"))

        line = json.dumps(payload, separators=(",", ":"), default=str)

        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()


__all__ = ["StdoutSink"]
