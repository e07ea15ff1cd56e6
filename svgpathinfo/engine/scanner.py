"""Number and flag scanners for path argument lists.

Both scanners work on ``(text, pos)`` and return ``(value, consumed)``
without touching any state. Separators are optional wherever a new number
can be told apart from the previous one: ``10-5`` is two numbers, and so
are ``1.5.5`` and ``0150`` in arc flag position.
"""

from __future__ import annotations

import math
import re

from svgpathinfo.errors import MalformedFlagError, MalformedNumberError

_NUMBER_RE = re.compile(
    r"[-+]?"  # optional sign
    r"(?:"
    r"[0-9]+(?:\.[0-9]*)?"  # int or float, trailing dot allowed ('1.')
    r"|"
    r"\.[0-9]+"  # float with leading dot (e.g. '.42')
    r")"
    r"(?:[eE][-+]?[0-9]+)?"  # optional scientific notation
)
_SEPARATOR_RE = re.compile(r"[\s,]*")


def skip_separators(text: str, pos: int) -> int:
    """Return the index of the first non-separator character at or after ``pos``."""
    return _SEPARATOR_RE.match(text, pos).end()


def scan_number(text: str, pos: int) -> tuple[float, int]:
    """Scan the longest numeric literal starting exactly at ``pos``."""
    m = _NUMBER_RE.match(text, pos)
    if not m:
        found = text[pos : pos + 1] or "end of input"
        raise MalformedNumberError(f"Expected a number, found {found!r}", offset=pos)
    value = float(m.group(0))
    if not math.isfinite(value):
        raise MalformedNumberError(f"Number {m.group(0)!r} is out of range", offset=pos)
    return value, m.end() - pos


def scan_flag(text: str, pos: int) -> tuple[bool, int]:
    """Scan a single ``0``/``1`` arc flag, skipping any leading separators."""
    start = skip_separators(text, pos)
    ch = text[start : start + 1]
    if ch not in ("0", "1"):
        found = ch or "end of input"
        raise MalformedFlagError(f"Expected arc flag 0 or 1, found {found!r}", offset=start)
    return ch == "1", start + 1 - pos
