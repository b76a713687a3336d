"""Log level vocabulary shared by the filter and the sinks."""

from __future__ import annotations

NOTSET = 0
DEBUG = 10
INFO = 20
WARN = 30
WARNING = WARN
ERROR = 40
CRITICAL = 50

_LEVEL_NUMERIC = {
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARN": WARN,
    "WARNING": WARN,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
}

# Canonical names, highest first so rendering picks the nearest lower level.
_LEVEL_NAMES = (
    (CRITICAL, "CRITICAL"),
    (ERROR, "ERROR"),
    (WARN, "WARN"),
    (INFO, "INFO"),
    (DEBUG, "DEBUG"),
)


def parse_level(text: str) -> int | None:
    """Decode a level token such as ``info``, ``WARN`` or ``error+2``.

    Returns ``None`` when the token does not name a known level.
    """

    name, offset = text, 0

    for index, char in enumerate(text):
        if char in "+-":
            digits = text[index + 1:]
            if not (digits.isascii() and digits.isdigit()):
                return None

            name = text[:index]
            try:
                offset = int(text[index:])
            except ValueError:
                # Longer than the interpreter's integer conversion limit.
                return None
            break

    base = _LEVEL_NUMERIC.get(name.upper())
    if base is None:
        return None

    return base + offset


def level_name(level: int) -> str:
    """Render a level as text that ``parse_level`` decodes back to ``level``."""

    for value, name in _LEVEL_NAMES:
        if level >= value:
            return _with_offset(name, level - value)

    return _with_offset("DEBUG", level - DEBUG)


def _with_offset(name: str, offset: int) -> str:
    if offset == 0:
        return name

    return f"{name}{offset:+d}"


__all__ = [
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARN",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "parse_level",
    "level_name",
]
