"""Attribute and group binding shared by the reference sinks."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Tuple, TypeVar

from ..records import Record, merge_attributes, nest_attributes, shield_reserved

_SinkT = TypeVar("_SinkT", bound="BoundAttributesMixin")


class BoundAttributesMixin:
    """Keep pre-bound attributes and open groups for a sink.

    Derived sinks are shallow copies, so anything else the sink holds
    (stream, lock, record list) stays shared with the parent.
    """

    _groups: Tuple[str, ...] = ()
    _bound: Mapping[str, Any] = {}

    def with_attributes(self: _SinkT, attributes: Mapping[str, Any]) -> _SinkT:
        """Return a sink that adds ``attributes`` to every record."""

        if not attributes:
            return self

        derived = copy.copy(self)
        derived._bound = merge_attributes(self._bound, nest_attributes(self._groups, attributes))
        return derived

    def with_group(self: _SinkT, name: str) -> _SinkT:
        """Return a sink that nests subsequent attributes under ``name``."""

        if not name:
            return self

        derived = copy.copy(self)
        derived._groups = self._groups + (name,)
        return derived

    def _attributes(self, record: Record) -> Dict[str, Any]:
        """Return bound attributes merged with the record's own, grouped."""

        if not record.attributes:
            return dict(self._bound)

        return merge_attributes(self._bound, nest_attributes(self._groups, dict(record.attributes)))

    def _payload(self, record: Record) -> Dict[str, Any]:
        """Render ``record`` with bound attributes and groups applied."""

        return merge_attributes(
            record.to_payload(include_attributes=False),
            shield_reserved(self._attributes(record)),
        )


__all__ = ["BoundAttributesMixin"]
