"""Modelos tipados para registros de actividad y resultados calculados."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from pasos_tool.errors import UnknownActivity


class ActivityKind(Enum):
    """Recognized activity types, keyed by their record label."""

    WALKING = "Walking"
    RUNNING = "Running"

    @classmethod
    def labels(cls) -> list[str]:
        """Return the recognized labels in declaration order."""
        return [kind.value for kind in cls]

    @classmethod
    def from_label(cls, label: str) -> ActivityKind:
        """Resolve a record label.

        Raises:
            UnknownActivity: If the label is not recognized.
        """
        try:
            return cls(label)
        except ValueError:
            raise UnknownActivity(label, cls.labels()) from None


@dataclass(frozen=True)
class ParsedActivity:
    """One validated record: steps, duration and optional activity label."""

    steps: int
    duration: timedelta
    label: str | None = None

    @property
    def hours(self) -> float:
        return self.duration / timedelta(hours=1)

    @property
    def minutes(self) -> float:
        return self.duration / timedelta(minutes=1)


@dataclass(frozen=True)
class Biometrics:
    """User weight (kg) and height (m), supplied by the caller."""

    weight_kg: float
    height_m: float


@dataclass(frozen=True)
class ActivityResult:
    """Computed distance, speed and calories for one record."""

    label: str
    steps: int
    distance_km: float
    duration_hours: float
    mean_speed_kmh: float
    calories: float

    def as_dict(self) -> dict[str, object]:
        return {
            "activity": self.label,
            "steps": self.steps,
            "distance_km": self.distance_km,
            "duration_hours": self.duration_hours,
            "mean_speed_kmh": self.mean_speed_kmh,
            "calories_kcal": self.calories,
        }
