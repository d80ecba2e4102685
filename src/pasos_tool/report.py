"""Armado de mensajes y tablas a partir de resultados calculados."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Literal

import pandas as pd

from pasos_tool.calculator import Calculator
from pasos_tool.errors import RecordError
from pasos_tool.model import ActivityResult, Biometrics
from pasos_tool.parser import parse_steps_record, parse_training_record

logger = logging.getLogger(__name__)

Mode = Literal["steps", "training"]

RESULT_COLUMNS = [
    "activity",
    "steps",
    "distance_km",
    "duration_hours",
    "mean_speed_kmh",
    "calories_kcal",
]


def render_day_steps(result: ActivityResult) -> str:
    """Summary for a steps-only record."""
    return (
        f"Steps: {result.steps}.\n"
        f"Distance: {result.distance_km:.2f} km.\n"
        f"Calories burned: {result.calories:.2f} kcal.\n"
    )


def render_training(result: ActivityResult) -> str:
    """Summary for a record with an activity type."""
    lines = [
        f"Activity type: {result.label}",
        f"Duration: {result.duration_hours:.2f} h.",
        f"Distance: {result.distance_km:.2f} km.",
        f"Speed: {result.mean_speed_kmh:.2f} km/h",
        f"Calories burned: {result.calories:.2f}",
    ]
    return "\n".join(lines) + "\n"


def compute(
    data: str, biometrics: Biometrics, mode: Mode, calculator: Calculator
) -> ActivityResult:
    """Parse and compute one record in the given mode."""
    if mode == "steps":
        return calculator.day_steps(parse_steps_record(data), biometrics)
    return calculator.training(parse_training_record(data), biometrics)


def render(result: ActivityResult, mode: Mode) -> str:
    if mode == "steps":
        return render_day_steps(result)
    return render_training(result)


def day_action_info(
    data: str, weight: float, height: float, calculator: Calculator | None = None
) -> str:
    """Summary for a steps-only record, or ``""`` if the record is rejected.

    Rejected records are logged, not raised.
    """
    try:
        result = compute(
            data, Biometrics(weight, height), "steps", calculator or Calculator()
        )
    except RecordError as exc:
        logger.warning("Skipping record %r: %s", data, exc)
        return ""
    return render_day_steps(result)


def training_info(
    data: str, weight: float, height: float, calculator: Calculator | None = None
) -> str:
    """Summary for a record with an activity type.

    Raises:
        RecordError: If the record cannot be parsed or computed.
    """
    result = compute(
        data, Biometrics(weight, height), "training", calculator or Calculator()
    )
    return render_training(result)


def process_records(
    lines: Iterable[str],
    biometrics: Biometrics,
    mode: Mode,
    calculator: Calculator | None = None,
) -> tuple[list[ActivityResult], list[tuple[str, RecordError]]]:
    """Compute every record, skipping and collecting the rejected ones.

    Blank lines are ignored.

    Returns:
        Accepted results in input order, and ``(line, error)`` pairs.
    """
    calc = calculator or Calculator()
    results: list[ActivityResult] = []
    rejected: list[tuple[str, RecordError]] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            results.append(compute(line, biometrics, mode, calc))
        except RecordError as exc:
            logger.warning("Skipping record %r: %s", line, exc)
            rejected.append((line, exc))
    logger.info("Processed %d records, %d rejected", len(results), len(rejected))
    return results, rejected


def results_to_frame(results: Sequence[ActivityResult]) -> pd.DataFrame:
    """Convert results to a DataFrame with values rounded to 2 decimals."""
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    df = pd.DataFrame([r.as_dict() for r in results], columns=RESULT_COLUMNS)
    for col in ["distance_km", "duration_hours", "mean_speed_kmh", "calories_kcal"]:
        df[col] = df[col].round(2)
    return df
