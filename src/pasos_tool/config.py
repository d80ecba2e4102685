"""Configuracion: coeficientes fisiologicos y parametros de logging."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

RECORD_DELIMITER = ","

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class CalculatorConfig:
    """Coefficients used by the physiology calculator."""

    average_step_length_m: float = 0.65
    step_length_height_coefficient: float = 0.45
    meters_per_km: float = 1000.0
    minutes_per_hour: float = 60.0
    walking_calories_coefficient: float = 0.5

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CalculatorConfig:
        """Build a config from a mapping, keeping defaults for missing keys.

        Raises:
            ValueError: On unknown keys or non-positive coefficients.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown calculator settings: {unknown}")

        values = {key: float(value) for key, value in data.items()}
        bad = sorted(key for key, value in values.items() if value <= 0)
        if bad:
            raise ValueError(f"Calculator settings must be positive: {bad}")
        return cls(**values)


DEFAULT_CONFIG = CalculatorConfig()


def load_config(path: Path) -> CalculatorConfig:
    """Load calculator coefficients from a JSON object file."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Calculator config JSON must be an object")
    return CalculatorConfig.from_mapping(raw)
