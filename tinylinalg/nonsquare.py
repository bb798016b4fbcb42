"""Least-squares and minimum-norm solutions of non-square linear systems."""

from __future__ import annotations

from tinylinalg.matrix import Matrix
from tinylinalg.vector import Vector


class NonSquareSystem:
    """A system ``A x = b`` where ``A`` has more rows than columns or fewer.

    Solved with the Moore-Penrose pseudo-inverse.
    """

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.num_rows == a.num_cols:
            raise ValueError(
                f"matrix must not be square, got {a.num_rows}x{a.num_cols}"
            )
        if a.num_rows != len(b):
            raise ValueError(
                f"right-hand side has size {len(b)}, expected {a.num_rows}"
            )
        self._a = a.copy()
        self._b = b.copy()

    def solve(self) -> Vector:
        """Return the least-squares solution, or the minimum-norm one if under-determined.

        Raises ValueError if the normal-equation matrix cannot be inverted.
        """
        a = self._a
        at = a.transpose()
        if a.num_rows >= a.num_cols:
            pseudo = (at * a).inverse() * at
        else:
            pseudo = at * (a * at).inverse()
        return pseudo * self._b