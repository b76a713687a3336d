"""Sink decorator applying a per-module level filter.

Wrap any sink to filter its input with the ``LOG_FILTER`` environment
variable::

    LOG_FILTER=info                          # info and above everywhere
    LOG_FILTER=info,models=debug             # debug and above from ``models``
    LOG_FILTER=error,models=debug,client=info

Example::

    from logenv import EnvFilterSink, StructuredLogger
    from logenv.sinks import StdoutSink

    logger = StructuredLogger(EnvFilterSink.from_settings(StdoutSink()))
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from .caller import ModuleResolver, default_module_resolver
from .config import FilterSettings, build_filter_spec
from .filtering import FilterSpec
from .levels import INFO
from .metrics import record_filter_decision, record_unresolved_caller
from .records import Record


class Sink(Protocol):
    """A structured log sink."""

    def enabled(self, level: int) -> bool:  # pragma: no cover - protocol
        ...

    def handle(self, record: Record) -> None:  # pragma: no cover - protocol
        ...

    def with_attributes(self, attributes: Mapping[str, Any]) -> "Sink":  # pragma: no cover - protocol
        ...

    def with_group(self, name: str) -> "Sink":  # pragma: no cover - protocol
        ...


class EnvFilterSink:
    """Sink that drops records below the level configured for their module."""

    def __init__(
        self,
        inner: Sink,
        spec: FilterSpec | None = None,
        *,
        module_resolver: ModuleResolver = default_module_resolver,
    ) -> None:
        """Initialize the filter with the wrapped sink and a parsed filter."""

        self._inner = inner # The wrapped sink
        self._spec = spec or FilterSpec(default_level=INFO) # Shared with derived sinks
        self._resolve_module = module_resolver # Maps a record to its module name

    @classmethod
    def from_settings(
        cls,
        inner: Sink,
        settings: FilterSettings | None = None,
        *,
        env: Mapping[str, str] | None = None,
        module_resolver: ModuleResolver = default_module_resolver,
        **overrides: Any,
    ) -> "EnvFilterSink":
        """Build a filter from settings, reading the environment once."""

        spec = build_filter_spec(settings, env=env, **overrides)
        return cls(inner, spec, module_resolver=module_resolver)

    @property
    def inner(self) -> Sink:
        return self._inner

    @property
    def spec(self) -> FilterSpec:
        return self._spec

    def enabled(self, level: int) -> bool:
        """Cheap check usable before a record is built."""

        if not self._spec.overrides:
            return level >= self._spec.default_level

        # A module override may still apply; handle() decides.
        return True

    def handle(self, record: Record) -> None:
        """Forward ``record`` to the inner sink if its level passes the filter."""

        level, module, unresolved = self._resolve(record)

        if unresolved:
            record_unresolved_caller()

        if record.level < level:
            record_filter_decision(record.level, False, module)
            return None

        record_filter_decision(record.level, True, module)
        return self._inner.handle(record)

    def level_for(self, record: Record) -> int:
        """Return the effective level for ``record``."""

        return self._resolve(record)[0]

    def with_attributes(self, attributes: Mapping[str, Any]) -> "EnvFilterSink":
        """Return a filter wrapping the inner sink with ``attributes`` bound."""

        if not attributes:
            return self

        return self._derive(self._inner.with_attributes(attributes))

    def with_group(self, name: str) -> "EnvFilterSink":
        """Return a filter wrapping the inner sink with group ``name`` opened."""

        if not name:
            return self

        return self._derive(self._inner.with_group(name))

    # --------------------- internal helpers ---------------------
    def _derive(self, inner: Sink) -> "EnvFilterSink":
        return EnvFilterSink(inner, self._spec, module_resolver=self._resolve_module)

    def _resolve(self, record: Record) -> tuple[int, str | None, bool]:
        """Return the effective level, the override module that set it and
        whether the caller module could not be identified."""

        overrides = self._spec.overrides

        if not overrides:
            return self._spec.default_level, None, False

        module = self._resolve_module(record)
        if module is None:
            return self._spec.default_level, None, True

        level = overrides.get(module)
        if level is None:
            return self._spec.default_level, None, False

        return level, module, False


__all__ = ["Sink", "EnvFilterSink"]
