"""Structured log record type and attribute helpers."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple

from .levels import level_name

Attributes = Tuple[Tuple[str, Any], ...]

# Payload keys owned by the record; clashing attributes move under "fields".
RESERVED_FIELDS = frozenset({"ts", "level", "message", "caller"})


def _utc_now() -> _dt.datetime:
    return _dt.datetime.now(tz=_dt.timezone.utc)


@dataclass(frozen=True)
class CallSite:
    """Source location of a log call."""

    symbol: str # Qualified symbol, e.g. ``myapp/db/models.save``
    pathname: str
    lineno: int
    function: str


@dataclass(frozen=True)
class Record:
    """A single log event as produced at the call site."""

    level: int
    message: str
    time: _dt.datetime = field(default_factory=_utc_now)
    caller: str | None = None # Qualified symbol of the logging function
    source: CallSite | None = None
    attributes: Attributes = ()

    def to_payload(self, *, include_attributes: bool = True) -> Dict[str, Any]:
        """Return a JSON friendly mapping of the record."""

        payload: Dict[str, Any] = {
            "ts": self.time.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": level_name(self.level),
            "message": self.message,
        }

        if self.caller:
            payload["caller"] = self.caller

        if include_attributes:
            payload.update(shield_reserved(dict(self.attributes)))

        return payload


def build_record(
    level: int,
    message: str,
    *,
    caller: str | None = None,
    source: CallSite | None = None,
    attributes: Mapping[str, Any] | None = None,
    time: _dt.datetime | None = None,
) -> Record:
    """Build a record stamped with the current UTC time.

    ``caller`` defaults to the symbol of ``source`` when one is given.
    """

    if caller is None and source is not None:
        caller = source.symbol

    return Record(
        level=level,
        message=message,
        time=time or _utc_now(),
        caller=caller,
        source=source,
        attributes=tuple((attributes or {}).items()),
    )


def nest_attributes(groups: Iterable[str], attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Nest ``attributes`` under each group name, outermost first."""

    nested: Dict[str, Any] = dict(attributes)

    for name in reversed(tuple(groups)):
        nested = {name: nested}

    return nested


def shield_reserved(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Move top-level attributes named like record fields under ``fields``."""

    clashing = {key: value for key, value in attributes.items() if key in RESERVED_FIELDS}
    if not clashing:
        return dict(attributes)

    kept = {key: value for key, value in attributes.items() if key not in RESERVED_FIELDS}
    return merge_attributes(kept, {"fields": clashing})


def merge_attributes(base: Mapping[str, Any], extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``extra`` into a copy of ``base``."""

    merged: Dict[str, Any] = dict(base)

    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_attributes(current, value)
        else:
            merged[key] = value

    return merged


__all__ = [
    "Attributes",
    "RESERVED_FIELDS",
    "CallSite",
    "Record",
    "build_record",
    "nest_attributes",
    "merge_attributes",
    "shield_reserved",
]
