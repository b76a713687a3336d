"""Configuration utilities for the environment driven log filter."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .filtering import FilterSpec, parse_filter
from .levels import INFO, level_name, parse_level

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR = "LOG_FILTER"


def _level_env(value: str | None, default: int) -> int:
    """Convert a level token to its numeric level."""

    if value is None:
        return default

    parsed = parse_level(value)
    if parsed is None:
        return default

    return parsed


@dataclass(frozen=True)
class FilterSettings:
    """Immutable construction options for the log filter."""

    default_level: int = INFO # Level used when the filter has no bare level term
    env_var_name: str = DEFAULT_ENV_VAR # Environment variable holding the filter
    default_filter: str = "" # Filter used when the environment variable is unset

    def with_overrides(self, **kwargs: Any) -> "FilterSettings":
        return replace(self, **kwargs)


def load_filter_settings(env: Mapping[str, str] | None = None) -> FilterSettings:
    """Build settings from ``LOG_FILTER_*`` variables in ``env`` or ``os.environ``."""

    source = os.environ if env is None else env

    return FilterSettings(
        default_level=_level_env(source.get("LOG_FILTER_DEFAULT_LEVEL"), INFO),
        env_var_name=source.get("LOG_FILTER_ENV_VAR") or DEFAULT_ENV_VAR,
        default_filter=source.get("LOG_FILTER_DEFAULT", ""),
    )


def resolve_filter_text(
    settings: FilterSettings, env: Mapping[str, str] | None = None
) -> str:
    """Return the filter string from the environment or the configured default."""

    source = os.environ if env is None else env

    env_filter = source.get(settings.env_var_name)
    if env_filter:
        return env_filter

    return settings.default_filter


def build_filter_spec(
    settings: FilterSettings | None = None,
    *,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> FilterSpec:
    """Resolve and parse the filter once for a sink or filter under construction."""

    resolved = settings or FilterSettings()
    if overrides:
        resolved = resolved.with_overrides(**overrides)

    spec = parse_filter(resolved.default_level, resolve_filter_text(resolved, env))

    logger.debug(
        "Resolved log filter from %s: default=%s overrides=%d",
        resolved.env_var_name,
        level_name(spec.default_level),
        len(spec.overrides),
    )

    return spec


__all__ = [
    "DEFAULT_ENV_VAR",
    "FilterSettings",
    "load_filter_settings",
    "resolve_filter_text",
    "build_filter_spec",
]
