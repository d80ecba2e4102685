"""Lectura de literales de duracion estilo '3h00m', '50m', '1.5h'."""

from __future__ import annotations

import re
from datetime import timedelta

from pasos_tool.errors import InvalidDuration

# Microseconds per unit; longest suffixes first so "ms" wins over "m".
_UNIT_MICROSECONDS = {
    "ns": 0.001,
    "us": 1.0,
    "µs": 1.0,
    "μs": 1.0,
    "ms": 1_000.0,
    "h": 3_600_000_000.0,
    "m": 60_000_000.0,
    "s": 1_000_000.0,
}

_NUMBER = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_UNIT = "|".join(re.escape(u) for u in _UNIT_MICROSECONDS)
_PAIR = re.compile(rf"({_NUMBER})({_UNIT})")
_LITERAL = re.compile(rf"[+-]?(?:{_NUMBER}(?:{_UNIT}))+")

# Largest magnitude of a signed 64-bit nanosecond count, in microseconds.
MAX_DURATION_MICROSECONDS = (2**63 - 1) / 1_000


def parse_duration(text: str) -> timedelta:
    """Parse a duration literal into a timedelta.

    Accepts an optional sign followed by one or more ``<number><unit>``
    pairs without whitespace (``"3h00m"``, ``"-50m"``, ``"1h30m15s"``), or
    the bare literal ``"0"``. Zero and negative values are returned as-is.

    Raises:
        InvalidDuration: If the text does not follow the grammar or the
            value exceeds about 2562047 hours in magnitude.
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not _LITERAL.fullmatch(text):
        raise InvalidDuration(text)

    sign = -1.0 if text.startswith("-") else 1.0
    total = sum(
        float(number) * _UNIT_MICROSECONDS[unit]
        for number, unit in _PAIR.findall(text)
    )
    if not total <= MAX_DURATION_MICROSECONDS:
        raise InvalidDuration(text)
    try:
        return timedelta(microseconds=sign * total)
    except (OverflowError, ValueError):
        raise InvalidDuration(text) from None


def format_duration(value: timedelta) -> str:
    """Render a timedelta as ``"3h0m0s"`` (sign and fractions kept)."""
    seconds = value.total_seconds()
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    secs_text = f"{secs:.6f}".rstrip("0").rstrip(".")
    if hours:
        return f"{sign}{int(hours)}h{int(minutes)}m{secs_text}s"
    if minutes:
        return f"{sign}{int(minutes)}m{secs_text}s"
    return f"{sign}{secs_text}s"
