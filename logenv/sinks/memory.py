"""In-memory sink useful for debugging and tests."""

from __future__ import annotations

from typing import Any, Dict, List

from ..levels import NOTSET
from ..records import Record
from .bound import BoundAttributesMixin


class InMemorySink(BoundAttributesMixin):
    def __init__(self, level: int = NOTSET) -> None:
        self.level = level
        self.records: List[Dict[str, Any]] = [] # Shared with derived sinks

    def enabled(self, level: int) -> bool:
        return level >= self.level

    def handle(self, record: Record) -> None:
        self.records.append(self._payload(record))

    @property
    def messages(self) -> List[str]:
        return [str(record["message"]) for record in self.records]


__all__ = ["InMemorySink"]
