"""Conversión de registros de pasos en distancia, velocidad y calorías."""

from __future__ import annotations

from pasos_tool.calculator import Calculator
from pasos_tool.config import DEFAULT_CONFIG, CalculatorConfig
from pasos_tool.errors import (
    EmptyField,
    InvalidDuration,
    InvalidNumber,
    MalformedRecord,
    OutOfRange,
    RecordError,
    UnknownActivity,
)
from pasos_tool.model import ActivityKind, ActivityResult, Biometrics, ParsedActivity
from pasos_tool.parser import parse_steps_record, parse_training_record

__all__ = [
    "ActivityKind",
    "ActivityResult",
    "Biometrics",
    "Calculator",
    "CalculatorConfig",
    "DEFAULT_CONFIG",
    "EmptyField",
    "InvalidDuration",
    "InvalidNumber",
    "MalformedRecord",
    "OutOfRange",
    "ParsedActivity",
    "RecordError",
    "UnknownActivity",
    "parse_steps_record",
    "parse_training_record",
]
