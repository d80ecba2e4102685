"""Calculadora de distancia, velocidad media y calorias por tipo de actividad."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta

from pasos_tool.config import DEFAULT_CONFIG, CalculatorConfig
from pasos_tool.duration import format_duration
from pasos_tool.errors import OutOfRange
from pasos_tool.model import ActivityKind, ActivityResult, Biometrics, ParsedActivity

logger = logging.getLogger(__name__)

CaloriesFormula = Callable[[int, float, float, timedelta], float]


class Calculator:
    """Physiology formulas parameterized by a :class:`CalculatorConfig`."""

    def __init__(self, config: CalculatorConfig = DEFAULT_CONFIG) -> None:
        """Create a calculator.

        Args:
            config: Stride and calorie coefficients.
        """
        self._config = config
        self._formulas: dict[ActivityKind, CaloriesFormula] = {
            ActivityKind.WALKING: self.walking_calories,
            ActivityKind.RUNNING: self.running_calories,
        }

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    def distance(self, steps: int, height: float) -> float:
        """Distance in km using a stride derived from height."""
        stride = height * self._config.step_length_height_coefficient
        return steps * stride / self._config.meters_per_km

    def average_distance(self, steps: int) -> float:
        """Distance in km using the fixed average stride."""
        stride = self._config.average_step_length_m
        return steps * stride / self._config.meters_per_km

    def mean_speed(self, steps: int, height: float, duration: timedelta) -> float:
        """Mean speed in km/h.

        Returns 0.0 instead of raising when steps or duration are not positive.
        """
        if steps <= 0:
            return 0.0
        hours = duration / timedelta(hours=1)
        if hours <= 0:
            return 0.0
        return self.distance(steps, height) / hours

    def running_calories(
        self, steps: int, weight: float, height: float, duration: timedelta
    ) -> float:
        """Calories burned running.

        Raises:
            OutOfRange: Naming the first of steps, weight, height, duration
                that is not strictly positive.
        """
        if steps <= 0:
            raise OutOfRange("steps", steps)
        if weight <= 0:
            raise OutOfRange("weight", weight)
        if height <= 0:
            raise OutOfRange("height", height)
        if duration <= timedelta(0):
            raise OutOfRange("duration", format_duration(duration))

        speed = self.mean_speed(steps, height, duration)
        minutes = duration / timedelta(minutes=1)
        return weight * speed * minutes / self._config.minutes_per_hour

    def walking_calories(
        self, steps: int, weight: float, height: float, duration: timedelta
    ) -> float:
        """Calories burned walking: running calories scaled by a fixed ratio."""
        calories = self.running_calories(steps, weight, height, duration)
        return calories * self._config.walking_calories_coefficient

    def calories(
        self,
        kind: ActivityKind,
        steps: int,
        weight: float,
        height: float,
        duration: timedelta,
    ) -> float:
        return self._formulas[kind](steps, weight, height, duration)

    def training(
        self, parsed: ParsedActivity, biometrics: Biometrics
    ) -> ActivityResult:
        """Compute the result for a record with an explicit activity label.

        Raises:
            UnknownActivity: If the label is not a recognized activity.
            OutOfRange: If a calorie precondition does not hold.
        """
        kind = ActivityKind.from_label(parsed.label or "")
        calories = self.calories(
            kind,
            parsed.steps,
            biometrics.weight_kg,
            biometrics.height_m,
            parsed.duration,
        )
        result = ActivityResult(
            label=kind.value,
            steps=parsed.steps,
            distance_km=self.distance(parsed.steps, biometrics.height_m),
            duration_hours=parsed.hours,
            mean_speed_kmh=self.mean_speed(
                parsed.steps, biometrics.height_m, parsed.duration
            ),
            calories=calories,
        )
        logger.debug(
            "%s: %d steps in %s -> %.2f kcal",
            kind.value,
            parsed.steps,
            format_duration(parsed.duration),
            calories,
        )
        return result

    def day_steps(
        self, parsed: ParsedActivity, biometrics: Biometrics
    ) -> ActivityResult:
        """Compute the result for a steps-only record, counted as walking.

        Distance uses the average stride; calories use the height-based
        walking formula.
        """
        calories = self.walking_calories(
            parsed.steps, biometrics.weight_kg, biometrics.height_m, parsed.duration
        )
        distance = self.average_distance(parsed.steps)
        hours = parsed.hours
        return ActivityResult(
            label=ActivityKind.WALKING.value,
            steps=parsed.steps,
            distance_km=distance,
            duration_hours=hours,
            mean_speed_kmh=distance / hours if hours > 0 else 0.0,
            calories=calories,
        )
