"""Splitting a data set for training and testing, and measuring prediction error."""

from __future__ import annotations

import math
import random

from tinylinalg.matrix import Matrix
from tinylinalg.vector import Vector


def _select_rows(rows: list[list[float]], indices: list[int], num_cols: int) -> Matrix:
    if not indices:
        return Matrix(0, num_cols)
    return Matrix.from_rows(rows[i] for i in indices)


def split_train_test(
    a: Matrix,
    b: Vector,
    train_ratio: float = 0.8,
    rng: random.Random | None = None,
) -> tuple[Matrix, Vector, Matrix, Vector]:
    """Shuffle the samples and split them into (train_a, train_b, test_a, test_b).

    The training set holds ``int(len(b) * train_ratio)`` samples.
    """
    if a.num_rows != len(b):
        raise ValueError(
            f"matrix has {a.num_rows} rows but vector has {len(b)} entries"
        )
    if not 0.0 <= train_ratio <= 1.0:
        raise ValueError(f"train ratio must lie in [0, 1], got {train_ratio}")
    if rng is None:
        rng = random.Random()

    total = len(b)
    train_size = int(total * train_ratio)
    indices = list(range(total))
    rng.shuffle(indices)
    train_idx, test_idx = indices[:train_size], indices[train_size:]

    rows = a.rows()
    targets = b.tolist()
    return (
        _select_rows(rows, train_idx, a.num_cols),
        Vector.from_values(targets[i] for i in train_idx),
        _select_rows(rows, test_idx, a.num_cols),
        Vector.from_values(targets[i] for i in test_idx),
    )


def compute_rmse(predicted: Vector, actual: Vector) -> float:
    """Root-mean-square error between two equally long vectors; NaN if both are empty."""
    if len(predicted) != len(actual):
        raise ValueError(
            f"vector sizes differ: {len(predicted)} and {len(actual)}"
        )
    if len(predicted) == 0:
        return math.nan
    total = sum((p - q) ** 2 for p, q in zip(predicted, actual))
    return math.sqrt(total / len(predicted))