"""Small value types shared by the drawing and gameplay helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other: Number) -> Vec2:
        return Vec2(self.x * other, self.y * other)

    def __truediv__(self, other: Union[Vec2, Number]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vec2:
        """Return the unit vector in the same direction."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero-length or non-finite vector")
        return Vec2(self.x / length, self.y / length)

    def normalize_or_right(self) -> Vec2:
        """Return the unit vector, or the unit x axis when that is impossible."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec2(1.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def distance_squared(self, other: Vec2) -> float:
        return (self - other).length_squared()

    def angle(self) -> float:
        """Angle of the vector from the x axis, in radians."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        return cls(math.cos(angle), math.sin(angle))

    def floor(self) -> Vec2:
        return Vec2(float(math.floor(self.x)), float(math.floor(self.y)))

    def ceil(self) -> Vec2:
        return Vec2(float(math.ceil(self.x)), float(math.ceil(self.y)))

    def min(self, other: Vec2) -> Vec2:
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        return Vec2(max(self.x, other.x), max(self.y, other.y))


Vec2.ZERO = Vec2(0.0, 0.0)  # type: ignore[attr-defined]
Vec2.ONE = Vec2(1.0, 1.0)  # type: ignore[attr-defined]


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour with float channels."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.r, self.g, self.b, self.a)

    def lerp(self, other: Color, t: float) -> Color:
        """Blend linearly from this colour towards ``other``."""
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)


def splat(v: float) -> Vec2:
    """A vector with both components set to ``v``."""
    return Vec2(v, v)