"""A dense matrix of floats with 1-based indexing."""

from __future__ import annotations

import numbers
from typing import Iterable

from tinylinalg.vector import Vector


class Matrix:
    """A dense rows-by-columns matrix of floats, indexed as ``m[i, j]`` from 1."""

    __slots__ = ("_rows", "_num_rows", "_num_cols")

    def __init__(self, num_rows: int = 0, num_cols: int = 0) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError(
                f"matrix dimensions must be non-negative, got {num_rows}x{num_cols}"
            )
        self._num_rows = num_rows
        self._num_cols = num_cols
        self._rows = [[0.0] * num_cols for _ in range(num_rows)]

    @classmethod
    def _from_data(cls, rows: list[list[float]], num_cols: int) -> Matrix:
        matrix = cls()
        matrix._rows = rows
        matrix._num_rows = len(rows)
        matrix._num_cols = num_cols
        return matrix

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(x) for x in row] for row in rows]
        widths = {len(row) for row in data}
        if len(widths) > 1:
            raise ValueError("all rows must have the same length")
        return cls._from_data(data, widths.pop() if widths else 0)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Return the n-by-n identity matrix."""
        result = cls(n, n)
        for i, row in enumerate(result._rows):
            row[i] = 1.0
        return result

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    def _position(self, key: tuple[int, int]) -> tuple[int, int]:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix index must be a pair (row, column)")
        i, j = key
        if not (isinstance(i, numbers.Integral) and isinstance(j, numbers.Integral)):
            raise TypeError("matrix indices must be integers")
        if not (0 < i <= self._num_rows and 0 < j <= self._num_cols):
            raise IndexError(
                f"matrix index ({i}, {j}) out of range for "
                f"{self._num_rows}x{self._num_cols} matrix"
            )
        return int(i) - 1, int(j) - 1

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._position(key)
        return self._rows[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._position(key)
        self._rows[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._num_rows == other._num_rows
            and self._num_cols == other._num_cols
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def _require_same_shape(self, other: Matrix) -> None:
        if (self._num_rows, self._num_cols) != (other._num_rows, other._num_cols):
            raise ValueError(
                f"matrix shapes differ: {self._num_rows}x{self._num_cols} and "
                f"{other._num_rows}x{other._num_cols}"
            )

    def _require_square(self) -> None:
        if self._num_rows != self._num_cols:
            raise ValueError(
                f"matrix must be square, got {self._num_rows}x{self._num_cols}"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        rows = [[a + b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows)]
        return Matrix._from_data(rows, self._num_cols)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        rows = [[a - b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows)]
        return Matrix._from_data(rows, self._num_cols)

    def __mul__(self, other: Matrix | Vector | float) -> Matrix | Vector:
        if isinstance(other, Matrix):
            if self._num_cols != other._num_rows:
                raise ValueError(
                    f"cannot multiply {self._num_rows}x{self._num_cols} by "
                    f"{other._num_rows}x{other._num_cols}"
                )
            columns = list(zip(*other._rows)) if other._rows else []
            rows = [
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                if columns
                else [0.0] * other._num_cols
                for row in self._rows
            ]
            return Matrix._from_data(rows, other._num_cols)
        if isinstance(other, Vector):
            if self._num_cols != len(other):
                raise ValueError(
                    f"cannot multiply {self._num_rows}x{self._num_cols} matrix "
                    f"by vector of size {len(other)}"
                )
            values = other.tolist()
            return Vector.from_values(
                sum(a * b for a, b in zip(row, values)) for row in self._rows
            )
        if isinstance(other, numbers.Real):
            scalar = float(other)
            rows = [[a * scalar for a in row] for row in self._rows]
            return Matrix._from_data(rows, self._num_cols)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def determinant(self) -> float:
        """Determinant by Gaussian elimination with row swaps on zero pivots."""
        self._require_square()
        a = self.rows()
        n = self._num_rows
        det = 1.0
        for i in range(n):
            if a[i][i] == 0.0:
                swap = next((k for k in range(i + 1, n) if a[k][i] != 0.0), None)
                if swap is None:
                    return 0.0
                a[i], a[swap] = a[swap], a[i]
                det = -det
            pivot_row = a[i]
            for row in a[i + 1:]:
                factor = row[i] / pivot_row[i]
                row[i:] = [x - factor * p for x, p in zip(row[i:], pivot_row[i:])]
            det *= pivot_row[i]
        return det

    def inverse(self) -> Matrix:
        """Inverse by Gauss-Jordan elimination without row exchanges.

        Raises ValueError if the matrix is not square or a zero pivot appears.
        """
        self._require_square()
        n = self._num_rows
        a = self.rows()
        inv = Matrix.identity(n).rows()
        for i in range(n):
            pivot = a[i][i]
            if pivot == 0.0:
                raise ValueError("matrix is singular: zero pivot during inversion")
            a[i] = [x / pivot for x in a[i]]
            inv[i] = [x / pivot for x in inv[i]]
            for k in range(n):
                if k == i:
                    continue
                factor = a[k][i]
                a[k] = [x - factor * p for x, p in zip(a[k], a[i])]
                inv[k] = [x - factor * p for x, p in zip(inv[k], inv[i])]
        return Matrix._from_data(inv, n)

    def transpose(self) -> Matrix:
        rows = [list(col) for col in zip(*self._rows)] if self._rows else []
        if not rows:
            rows = [[] for _ in range(self._num_cols)] if self._num_rows == 0 else []
        return Matrix._from_data(rows, self._num_rows)

    def pseudo_inverse(self) -> Matrix:
        """Moore-Penrose pseudo-inverse (A^T A)^-1 A^T."""
        at = self.transpose()
        return (at * self).inverse() * at

    def copy(self) -> Matrix:
        return Matrix._from_data(self.rows(), self._num_cols)

    def rows(self) -> list[list[float]]:
        """Return the contents as a new list of row lists."""
        return [list(row) for row in self._rows]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._rows!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{x:g}" for x in row) for row in self._rows)