"""Filter string parsing.

A filter is a comma separated list of terms. A bare level term sets the
default level, a ``module=level`` term sets the level for one module::

    LOG_FILTER=info
    LOG_FILTER=error,models=debug,client=info

Terms later in the list take precedence over earlier ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

from .levels import NOTSET, level_name, parse_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSpec:
    """Immutable result of parsing a filter string."""

    default_level: int
    overrides: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict cannot leak in.
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def level_for_module(self, module: str | None) -> int:
        """Return the effective level for ``module``."""

        if module is None:
            return self.default_level

        return self.overrides.get(module, self.default_level)

    def describe(self) -> str:
        """Render back into filter syntax."""

        terms = [level_name(self.default_level)]
        terms.extend(
            f"{module}={level_name(level)}" for module, level in self.overrides.items()
        )
        return ",".join(terms)


def parse_filter(default_level: int, text: str) -> FilterSpec:
    """Parse ``text`` into a :class:`FilterSpec`.

    ``default_level`` applies when no bare level term is present.
    """

    overrides: Dict[str, int] = {}

    for term in text.split(","):
        module, sep, token = term.partition("=")

        # Unknown level tokens keep the previous value instead of failing.
        if not sep:
            parsed = parse_level(module)
            if parsed is None:
                _log_ignored(term)
            else:
                default_level = parsed
            continue

        parsed = parse_level(token)
        if parsed is None:
            _log_ignored(term)
            overrides[module] = overrides.get(module, NOTSET)
        else:
            overrides[module] = parsed

    return FilterSpec(
        default_level=default_level,
        overrides=MappingProxyType(overrides),
    )


def _log_ignored(term: str) -> None:
    if term:
        logger.debug("Ignoring unparseable log filter term %r", term)


__all__ = ["FilterSpec", "parse_filter"]
