"""Reading the CPU performance data set into a feature matrix and a target vector."""

from __future__ import annotations

import os
from typing import Iterable

from tinylinalg.matrix import Matrix
from tinylinalg.vector import Vector

SKIPPED_FIELDS = 2
FEATURE_COUNT = 6


def _parse_line(line: str, line_number: int) -> tuple[list[float], float]:
    fields = line.split(",")
    needed = SKIPPED_FIELDS + FEATURE_COUNT + 1
    if len(fields) < needed:
        raise ValueError(
            f"line {line_number}: expected at least {needed} fields, got {len(fields)}"
        )
    numeric = fields[SKIPPED_FIELDS:needed]
    try:
        values = [float(token) for token in numeric]
    except ValueError as exc:
        raise ValueError(f"line {line_number}: {exc}") from None
    return values[:FEATURE_COUNT], values[FEATURE_COUNT]


def parse_lines(lines: Iterable[str]) -> tuple[Matrix, Vector]:
    """Parse comma-separated records into (features, targets).

    Each record holds a vendor name, a model name, six numeric features and the
    target value; any further fields are ignored. Blank lines are skipped.
    """
    features: list[list[float]] = []
    targets: list[float] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        row, target = _parse_line(line, number)
        features.append(row)
        targets.append(target)
    matrix = Matrix.from_rows(features) if features else Matrix(0, FEATURE_COUNT)
    return matrix, Vector.from_values(targets)


def load_data_from_file(filename: str | os.PathLike[str]) -> tuple[Matrix, Vector]:
    """Read a data file and return (features, targets)."""
    with open(filename, encoding="utf-8") as handle:
        return parse_lines(handle)