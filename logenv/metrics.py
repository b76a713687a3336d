"""In-process metrics for filter decisions."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict

from .levels import level_name


@dataclass
class FilterMetrics:
    """Counters describing what the filter let through."""

    emitted_total: int = 0 # Records forwarded to the inner sink
    dropped_total: int = 0 # Records below their effective level
    levels: Dict[str, Dict[str, int]] = field(default_factory=dict) # Decisions per level
    override_hits: Dict[str, int] = field(default_factory=dict) # Records resolved through a module override
    unresolved_callers: int = 0 # Records whose module could not be identified

    def as_dict(self) -> dict[str, object]:
        """Return the metrics as a dictionary."""

        return {
            "emitted_total": self.emitted_total,
            "dropped_total": self.dropped_total,
            "levels": {level: bucket.copy() for level, bucket in self.levels.items()},
            "override_hits": dict(self.override_hits),
            "unresolved_callers": self.unresolved_callers,
        }


_LOCK = threading.RLock()
_METRICS = FilterMetrics()


def record_filter_decision(level: int, emitted: bool, module: str | None = None) -> None:
    """Record the outcome of a filter decision.

    ``module`` is given only when a module override decided the outcome.
    """

    with _LOCK:
        if emitted:
            _METRICS.emitted_total += 1
        else:
            _METRICS.dropped_total += 1

        bucket = _METRICS.levels.setdefault(level_name(level), {"emitted": 0, "dropped": 0})
        bucket["emitted" if emitted else "dropped"] += 1

        if module is not None:
            _METRICS.override_hits[module] = _METRICS.override_hits.get(module, 0) + 1


def record_unresolved_caller() -> None:
    """Record a record whose caller module could not be resolved."""

    with _LOCK:
        _METRICS.unresolved_callers += 1


def reset_metrics() -> None:
    """Reset the metrics."""

    with _LOCK:
        _METRICS.emitted_total = 0
        _METRICS.dropped_total = 0
        _METRICS.levels = {}
        _METRICS.override_hits = {}
        _METRICS.unresolved_callers = 0


def get_metrics() -> FilterMetrics:
    """Get a snapshot of the metrics."""

    with _LOCK:
        return FilterMetrics(
            emitted_total=_METRICS.emitted_total,
            dropped_total=_METRICS.dropped_total,
            levels={level: bucket.copy() for level, bucket in _METRICS.levels.items()},
            override_hits=dict(_METRICS.override_hits),
            unresolved_callers=_METRICS.unresolved_callers,
        )


__all__ = [
    "FilterMetrics",
    "record_filter_decision",
    "record_unresolved_caller",
    "reset_metrics",
    "get_metrics",
]
