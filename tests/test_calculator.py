from __future__ import annotations

import math
from datetime import timedelta

import pytest

from pasos_tool.calculator import Calculator
from pasos_tool.config import CalculatorConfig
from pasos_tool.errors import OutOfRange, UnknownActivity
from pasos_tool.model import ActivityKind, Biometrics, ParsedActivity
from pasos_tool.parser import parse_steps_record, parse_training_record

HOUR = timedelta(hours=1)


@pytest.fixture
def calc() -> Calculator:
    # Round coefficients: 1000 steps at height 2.0 is exactly 1 km.
    return Calculator(
        CalculatorConfig(
            average_step_length_m=0.8,
            step_length_height_coefficient=0.5,
            walking_calories_coefficient=0.5,
        )
    )


def test_distance_uses_height(calc: Calculator) -> None:
    assert calc.distance(1000, 2.0) == pytest.approx(1.0)


def test_average_distance_uses_fixed_stride(calc: Calculator) -> None:
    assert calc.average_distance(1000) == pytest.approx(0.8)


def test_distance_monotonic_in_steps() -> None:
    calc = Calculator()
    values = [calc.distance(steps, 1.75) for steps in range(0, 5000, 250)]
    assert values == sorted(values)


def test_mean_speed(calc: Calculator) -> None:
    assert calc.mean_speed(1000, 2.0, timedelta(minutes=30)) == pytest.approx(2.0)


@pytest.mark.parametrize(
    ("steps", "duration"),
    [(0, HOUR), (-10, HOUR), (1000, timedelta(0)), (1000, -HOUR)],
)
def test_mean_speed_zero_on_degenerate_input(
    calc: Calculator, steps: int, duration: timedelta
) -> None:
    assert calc.mean_speed(steps, 2.0, duration) == 0.0


def test_running_calories(calc: Calculator) -> None:
    # 1 km/h for 60 minutes at 60 kg
    assert calc.running_calories(1000, 60.0, 2.0, HOUR) == pytest.approx(60.0)


@pytest.mark.parametrize(
    ("steps", "weight", "height", "duration"),
    [
        (678, 75.0, 1.75, timedelta(minutes=50)),
        (3456, 85.0, 1.85, timedelta(hours=3)),
        (1, 0.1, 0.1, timedelta(seconds=1)),
    ],
)
def test_walking_is_scaled_running(
    steps: int, weight: float, height: float, duration: timedelta
) -> None:
    calc = Calculator()
    running = calc.running_calories(steps, weight, height, duration)
    walking = calc.walking_calories(steps, weight, height, duration)
    assert walking == running * calc.config.walking_calories_coefficient


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"steps": 0}, "steps"),
        ({"weight": 0.0}, "weight"),
        ({"weight": -70.0}, "weight"),
        ({"height": 0.0}, "height"),
        ({"duration": timedelta(0)}, "duration"),
        ({"duration": -HOUR}, "duration"),
    ],
)
@pytest.mark.parametrize("kind", list(ActivityKind))
def test_calories_out_of_range_names_parameter(
    calc: Calculator, kwargs: dict[str, object], field: str, kind: ActivityKind
) -> None:
    args: dict[str, object] = {
        "steps": 1000,
        "weight": 60.0,
        "height": 2.0,
        "duration": HOUR,
    }
    args.update(kwargs)
    with pytest.raises(OutOfRange) as exc_info:
        calc.calories(kind, **args)  # type: ignore[arg-type]
    assert exc_info.value.field == field


def test_calories_dispatch(calc: Calculator) -> None:
    assert calc.calories(ActivityKind.RUNNING, 1000, 60.0, 2.0, HOUR) == 60.0
    assert calc.calories(ActivityKind.WALKING, 1000, 60.0, 2.0, HOUR) == 30.0


def test_training_walking(calc: Calculator) -> None:
    parsed = ParsedActivity(steps=1000, duration=HOUR, label="Walking")
    result = calc.training(parsed, Biometrics(weight_kg=60.0, height_m=2.0))
    assert result.label == "Walking"
    assert result.steps == 1000
    assert result.distance_km == pytest.approx(1.0)
    assert result.duration_hours == pytest.approx(1.0)
    assert result.mean_speed_kmh == pytest.approx(1.0)
    assert result.calories == pytest.approx(30.0)


def test_training_running(calc: Calculator) -> None:
    parsed = ParsedActivity(steps=2000, duration=HOUR, label="Running")
    result = calc.training(parsed, Biometrics(weight_kg=60.0, height_m=2.0))
    assert result.label == "Running"
    assert result.calories == pytest.approx(120.0)


def test_training_scenario_walking_record() -> None:
    parsed = parse_training_record("3456,Walking,3h00m")
    result = Calculator().training(parsed, Biometrics(weight_kg=85.0, height_m=185.0))
    assert result.duration_hours == pytest.approx(3.0)
    for value in (result.distance_km, result.mean_speed_kmh, result.calories):
        assert value > 0
        assert math.isfinite(value)


def test_training_unknown_activity() -> None:
    parsed = parse_training_record("3456,Dancing,3h00m")
    with pytest.raises(UnknownActivity) as exc_info:
        Calculator().training(parsed, Biometrics(weight_kg=85.0, height_m=1.85))
    assert exc_info.value.label == "Dancing"
    assert exc_info.value.recognized == ["Walking", "Running"]
    assert "Dancing" in str(exc_info.value)


def test_training_rejects_bad_weight(calc: Calculator) -> None:
    parsed = ParsedActivity(steps=1000, duration=HOUR, label="Running")
    with pytest.raises(OutOfRange) as exc_info:
        calc.training(parsed, Biometrics(weight_kg=0.0, height_m=2.0))
    assert exc_info.value.field == "weight"


def test_day_steps(calc: Calculator) -> None:
    parsed = ParsedActivity(steps=1000, duration=timedelta(minutes=30))
    result = calc.day_steps(parsed, Biometrics(weight_kg=60.0, height_m=2.0))
    assert result.label == "Walking"
    assert result.distance_km == pytest.approx(0.8)
    assert result.mean_speed_kmh == pytest.approx(1.6)
    # height-based speed 2 km/h, 30 minutes, 60 kg, halved for walking
    assert result.calories == pytest.approx(30.0)


def test_day_steps_scenario() -> None:
    parsed = parse_steps_record("678,0h50m")
    result = Calculator().day_steps(parsed, Biometrics(weight_kg=75.0, height_m=175.0))
    assert result.steps == 678
    assert parsed.duration == timedelta(minutes=50)
    assert result.distance_km > 0 and math.isfinite(result.distance_km)
    assert result.calories > 0 and math.isfinite(result.calories)
