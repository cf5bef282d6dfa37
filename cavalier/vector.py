"""Fixed-dimension real vectors and the basic operations on them."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Iterator, Union

REAL_THRESHOLD = 1e-8
"""Default tolerance used for fuzzy comparisons of real values."""

Scalar = Union[int, float]


@total_ordering
class Vector:
    """An immutable vector of real components.

    Arithmetic with another vector requires both to have the same dimension.
    Ordering is lexicographic over the components.
    """

    __slots__ = ("_data",)

    def __init__(self, *components: Scalar) -> None:
        if not components:
            raise ValueError("a vector needs at least one component")
        self._data = tuple(float(c) for c in components)

    @classmethod
    def zero(cls, dimension: int) -> "Vector":
        """Vector of the given dimension with every component zero."""
        return cls(*([0.0] * cls._checked_dimension(dimension)))

    @classmethod
    def ones(cls, dimension: int) -> "Vector":
        """Vector of the given dimension with every component one."""
        return cls(*([1.0] * cls._checked_dimension(dimension)))

    @classmethod
    def unit(cls, dimension: int, axis: int) -> "Vector":
        """Unit vector along the given axis."""
        dimension = cls._checked_dimension(dimension)
        if not 0 <= axis < dimension:
            raise IndexError(f"axis {axis} out of range for dimension {dimension}")
        return cls(*(1.0 if i == axis else 0.0 for i in range(dimension)))

    @staticmethod
    def _checked_dimension(dimension: int) -> int:
        if dimension < 1:
            raise ValueError("dimension must be at least 1")
        return dimension

    @property
    def x(self) -> float:
        return self._data[0]

    @property
    def y(self) -> float:
        return self._data[1]

    @property
    def z(self) -> float:
        return self._data[2]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._data)})"

    def __hash__(self) -> int:
        return hash(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data < other._data

    def _same_dimension(self, other: "Vector") -> None:
        if len(self._data) != len(other._data):
            raise ValueError(
                f"dimension mismatch: {len(self._data)} and {len(other._data)}"
            )

    def __pos__(self) -> "Vector":
        return self

    def __neg__(self) -> "Vector":
        return Vector(*(-c for c in self._data))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._same_dimension(other)
        return Vector(*(a + b for a, b in zip(self._data, other._data)))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._same_dimension(other)
        return Vector(*(a - b for a, b in zip(self._data, other._data)))

    def __mul__(self, other: Union["Vector", Scalar]) -> "Vector":
        if isinstance(other, Vector):
            self._same_dimension(other)
            return Vector(*(a * b for a, b in zip(self._data, other._data)))
        if isinstance(other, (int, float)):
            return Vector(*(c * other for c in self._data))
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Vector":
        if isinstance(other, (int, float)):
            return Vector(*(other * c for c in self._data))
        return NotImplemented

    def __truediv__(self, other: Union["Vector", Scalar]) -> "Vector":
        """Divide by a scalar (zero gives the zero vector) or component-wise."""
        if isinstance(other, Vector):
            self._same_dimension(other)
            return Vector(*(a / b for a, b in zip(self._data, other._data)))
        if isinstance(other, (int, float)):
            if other == 0:
                return Vector.zero(len(self._data))
            inverse = 1.0 / other
            return Vector(*(c * inverse for c in self._data))
        return NotImplemented


def fuzzy_zero(v: Vector, epsilon: float = REAL_THRESHOLD) -> bool:
    """True if every component of v is within epsilon of zero."""
    return all(abs(c) < epsilon for c in v)


def fuzzy_equal(v1: Vector, v2: Vector, epsilon: float = REAL_THRESHOLD) -> bool:
    """True if every pair of components differs by less than epsilon."""
    if len(v1) != len(v2):
        raise ValueError(f"dimension mismatch: {len(v1)} and {len(v2)}")
    return all(abs(a - b) < epsilon for a, b in zip(v1, v2))


def dot(v0: Vector, v1: Vector) -> float:
    """Dot product of two vectors of the same dimension."""
    if len(v0) != len(v1):
        raise ValueError(f"dimension mismatch: {len(v0)} and {len(v1)}")
    return sum(a * b for a, b in zip(v0, v1))


def length(v: Vector) -> float:
    """Euclidean length of v."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector) -> Vector:
    """Return v scaled to unit length; a (fuzzy) zero vector raises ValueError."""
    if fuzzy_zero(v):
        raise ValueError("normalize not defined for zero vector")
    return v / length(v)