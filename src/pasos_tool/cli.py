"""CLI para convertir registros de pasos en resumenes de actividad."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pasos_tool.calculator import Calculator
from pasos_tool.config import DEFAULT_CONFIG, LOG_LEVEL, load_config
from pasos_tool.logger import setup_logger
from pasos_tool.model import Biometrics
from pasos_tool.report import process_records, render, results_to_frame


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Distance, speed and calories from step records."
    )
    parser.add_argument(
        "records",
        nargs="*",
        help="Records like '678,0h50m' or '3456,Walking,3h00m'.",
    )
    parser.add_argument("--weight", type=float, required=True, help="Weight in kg.")
    parser.add_argument("--height", type=float, required=True, help="Height in m.")
    parser.add_argument(
        "--mode",
        choices=["steps", "training"],
        default="training",
        help="'steps' for steps,duration records (default: training).",
    )
    parser.add_argument("--input", help="File with one record per line.")
    parser.add_argument("--csv", help="Write the results table to this CSV file.")
    parser.add_argument("--config", help="JSON file with calculator coefficients.")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code: 0 if every record was accepted, 1 otherwise.
    """
    ns = parse_args(argv)
    logger = setup_logger("pasos_tool", ns.log_level)

    config = load_config(Path(ns.config)) if ns.config else DEFAULT_CONFIG
    calculator = Calculator(config)

    lines = list(ns.records)
    if ns.input:
        lines.extend(Path(ns.input).read_text(encoding="utf-8").splitlines())
    if not lines:
        logger.error("No records given")
        return 1

    biometrics = Biometrics(weight_kg=ns.weight, height_m=ns.height)
    results, rejected = process_records(lines, biometrics, ns.mode, calculator)

    for result in results:
        sys.stdout.write(render(result, ns.mode))

    if ns.csv:
        out_path = Path(ns.csv)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        results_to_frame(results).to_csv(out_path, index=False)
        logger.info("Results written to %s", out_path)

    return 1 if rejected else 0
