"""Public API for the environment driven log filter."""

from __future__ import annotations

from typing import Any, Mapping

from .caller import ModuleResolver, capture_call_site, capture_caller, default_module_resolver, parse_module
from .config import (
    DEFAULT_ENV_VAR,
    FilterSettings,
    build_filter_spec,
    load_filter_settings,
    resolve_filter_text,
)
from .filtering import FilterSpec, parse_filter
from .handler import EnvFilterSink, Sink
from .levels import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARN, WARNING, level_name, parse_level
from .logger import StructuredLogger
from .metrics import get_metrics, reset_metrics
from .records import CallSite, Record, build_record
from .sinks import InMemorySink, StdoutSink
from .stdlib import EnvLevelFilter, LoggingSink

__all__ = [
    "new_handler",
    "get_logger",
    "EnvFilterSink",
    "Sink",
    "StructuredLogger",
    "FilterSpec",
    "parse_filter",
    "FilterSettings",
    "DEFAULT_ENV_VAR",
    "load_filter_settings",
    "resolve_filter_text",
    "build_filter_spec",
    "ModuleResolver",
    "capture_caller",
    "capture_call_site",
    "CallSite",
    "parse_module",
    "default_module_resolver",
    "Record",
    "build_record",
    "InMemorySink",
    "StdoutSink",
    "LoggingSink",
    "EnvLevelFilter",
    "get_metrics",
    "reset_metrics",
    "parse_level",
    "level_name",
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARN",
    "WARNING",
    "ERROR",
    "CRITICAL",
]


def new_handler(
    inner: Sink | None = None,
    settings: FilterSettings | None = None,
    *,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> EnvFilterSink:
    """Wrap ``inner`` (stdout by default) in a filter read from the environment."""

    return EnvFilterSink.from_settings(
        inner if inner is not None else StdoutSink(),
        settings,
        env=env,
        **overrides,
    )


def get_logger(
    inner: Sink | None = None,
    settings: FilterSettings | None = None,
    *,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> StructuredLogger:
    """Return a logger writing through a freshly configured filter."""

    return StructuredLogger(new_handler(inner, settings, env=env, **overrides))
