"""A small mutable two-dimensional vector of floats."""

from __future__ import annotations

import math
from typing import Iterator

_EPSILON = 0.001


def _check_scale(scale: float, operation: str) -> None:
    if -_EPSILON < scale < _EPSILON:
        raise ZeroDivisionError(f"scale too small in {operation}")


class Vector2f:
    """A 2D vector whose components can be read and written by index."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2f index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = float(value)
        elif index == 1:
            self.y = float(value)
        else:
            raise IndexError(f"Vector2f index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector2f({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def __add__(self, other: Vector2f) -> Vector2f:
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        return Vector2f(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2f:
        return Vector2f(-self.x, -self.y)

    def __mul__(self, scale: float) -> Vector2f:
        return Vector2f(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector2f:
        _check_scale(scale, "/")
        return Vector2f(self.x / scale, self.y / scale)

    def __iadd__(self, other: Vector2f) -> Vector2f:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2f) -> Vector2f:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scale: float) -> Vector2f:
        self.x *= scale
        self.y *= scale
        return self

    def __itruediv__(self, scale: float) -> Vector2f:
        _check_scale(scale, "/=")
        self.x /= scale
        self.y /= scale
        return self

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2f:
        """Return a unit vector in the same direction."""
        m = self.magnitude()
        if -_EPSILON < m < _EPSILON:
            raise ZeroDivisionError("Point too close in Vector2f.normalize")
        return Vector2f(self.x / m, self.y / m)

    def dot(self, other: Vector2f) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y