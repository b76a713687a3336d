"""Caller capture and module identification.

The caller token stored on a record is the qualified symbol of the function
that issued the log call, with the module path written using ``/``::

    myapp/db/models.Repository.save

The module name used for filtering is the last path segment up to the first
``.``, here ``models``.
"""

from __future__ import annotations

import sys
from types import FrameType
from typing import Callable, Optional, Tuple

from .records import CallSite, Record

ModuleResolver = Callable[[Record], Optional[str]]


def capture_caller(depth: int = 1) -> str | None:
    """Return the qualified symbol of the frame ``depth`` levels above our caller."""

    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None

    site = _call_site(frame)
    return site.symbol if site else None


def capture_call_site(depth: int = 1) -> CallSite | None:
    """Like :func:`capture_caller`, keeping the file, line and function too."""

    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None

    return _call_site(frame)


def _call_site(frame: FrameType) -> CallSite | None:
    module = frame.f_globals.get("__name__")
    if not module:
        return None

    code = frame.f_code
    return CallSite(
        symbol=f"{module.replace('.', '/')}.{code.co_qualname}",
        pathname=code.co_filename,
        lineno=frame.f_lineno,
        function=code.co_name,
    )


def parse_module(symbol: str) -> Tuple[str, bool]:
    """Split the module name out of a qualified symbol.

    ``tests/unit/logenv/testpackage.log_something`` gives ``testpackage``.
    """

    last = symbol.rsplit("/", 1)[-1]
    module, sep, _ = last.partition(".")
    return module, bool(sep)


def default_module_resolver(record: Record) -> str | None:
    """Resolve the originating module of ``record`` from its caller token."""

    if not record.caller:
        return None

    module, ok = parse_module(record.caller)
    if not ok:
        return None

    return module


__all__ = ["ModuleResolver", "capture_caller", "capture_call_site", "parse_module", "default_module_resolver"]
