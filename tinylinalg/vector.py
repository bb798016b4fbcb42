"""A dense vector of floats with element-wise arithmetic."""

from __future__ import annotations

import numbers
import operator
from typing import Callable, Iterable, Iterator


class Vector:
    """A fixed-size vector of floats.

    Square brackets index from 0; calling the vector indexes from 1.
    """

    __slots__ = ("_data",)

    def __init__(self, size: int = 0, value: float = 0.0) -> None:
        if size < 0:
            raise ValueError(f"vector size must be non-negative, got {size}")
        self._data = [float(value)] * size

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Vector:
        """Build a vector holding the given values in order."""
        vector = cls()
        vector._data = [float(x) for x in values]
        return vector

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def _check_index(self, index: int, first: int) -> int:
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"vector index must be an integer, got {type(index).__name__}")
        position = int(index) - first
        if not 0 <= position < len(self._data):
            raise IndexError(f"vector index {index} out of range for size {len(self._data)}")
        return position

    def __getitem__(self, index: int) -> float:
        return self._data[self._check_index(index, 0)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._check_index(index, 0)] = float(value)

    def __call__(self, index: int) -> float:
        """Return the element at a 1-based position."""
        return self._data[self._check_index(index, 1)]

    def set_at(self, index: int, value: float) -> None:
        """Set the element at a 1-based position."""
        self._data[self._check_index(index, 1)] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __neg__(self) -> Vector:
        return Vector.from_values(-x for x in self._data)

    def increment(self) -> Vector:
        """Add one to every element in place and return the vector."""
        self._data = [x + 1.0 for x in self._data]
        return self

    def decrement(self) -> Vector:
        """Subtract one from every element in place and return the vector."""
        self._data = [x - 1.0 for x in self._data]
        return self

    def _combine(self, other: object, op: Callable[[float, float], float]) -> Vector:
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(
                    f"vector sizes differ: {len(self)} and {len(other)}"
                )
            return Vector.from_values(op(a, b) for a, b in zip(self._data, other._data))
        if isinstance(other, numbers.Real):
            scalar = float(other)
            return Vector.from_values(op(a, scalar) for a in self._data)
        return NotImplemented

    def __add__(self, other: Vector | float) -> Vector:
        return self._combine(other, operator.add)

    def __radd__(self, other: float) -> Vector:
        return self._combine(other, operator.add)

    def __sub__(self, other: Vector | float) -> Vector:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Vector | float) -> Vector:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: float) -> Vector:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Vector | float) -> Vector:
        return self._combine(other, operator.truediv)

    def copy(self) -> Vector:
        return Vector.from_values(self._data)

    def tolist(self) -> list[float]:
        return list(self._data)

    def __repr__(self) -> str:
        return f"Vector.from_values({self._data!r})"

    def __str__(self) -> str:
        return " ".join(f"{x:g}" for x in self._data)