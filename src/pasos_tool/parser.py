"""Parser de registros 'pasos,duracion' y 'pasos,actividad,duracion'."""

from __future__ import annotations

import re
from datetime import timedelta

from pasos_tool.config import RECORD_DELIMITER
from pasos_tool.duration import parse_duration
from pasos_tool.errors import (
    EmptyField,
    InvalidNumber,
    MalformedRecord,
    OutOfRange,
)
from pasos_tool.model import ParsedActivity

STEPS_ARITY = 2
TRAINING_ARITY = 3

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Steps must fit a signed 64-bit integer.
MIN_STEPS = -(2**63)
MAX_STEPS = 2**63 - 1


def parse_steps_record(data: str) -> ParsedActivity:
    """Parse a steps-only record such as ``"678,0h50m"``.

    Raises:
        RecordError: Subclass naming the first invalid field.
    """
    steps_text, duration_text = _split(data, STEPS_ARITY)
    steps = _parse_steps(steps_text)
    duration = _parse_positive_duration(duration_text)
    return ParsedActivity(steps=steps, duration=duration)


def parse_training_record(data: str) -> ParsedActivity:
    """Parse a full record such as ``"3456,Walking,3h00m"``.

    The label is only checked for being non-empty; whether it names a known
    activity is decided by the calculator.

    Raises:
        RecordError: Subclass naming the first invalid field.
    """
    steps_text, label_text, duration_text = _split(data, TRAINING_ARITY)
    steps = _parse_steps(steps_text)
    label = label_text.strip()
    if not label:
        raise EmptyField("activity", label_text)
    duration = _parse_positive_duration(duration_text)
    return ParsedActivity(steps=steps, duration=duration, label=label)


def _split(data: str, arity: int) -> list[str]:
    parts = data.split(RECORD_DELIMITER)
    if len(parts) != arity:
        raise MalformedRecord(data, parts, arity)
    return parts


def _parse_steps(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise InvalidNumber("steps", text)
    try:
        steps = int(text)
    except ValueError:
        raise InvalidNumber("steps", text) from None
    if not MIN_STEPS <= steps <= MAX_STEPS:
        raise InvalidNumber("steps", text)
    if steps <= 0:
        raise OutOfRange("steps", steps)
    return steps


def _parse_positive_duration(text: str) -> timedelta:
    duration = parse_duration(text)
    if duration <= timedelta(0):
        raise OutOfRange("duration", text)
    return duration
