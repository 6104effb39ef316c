"""A uniform-grid spatial hash over circles and axis-aligned boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Tuple, Union

from cozy2d.primitives import Vec2, splat

_NORMAL_TOLERANCE = 1e-5
DEFAULT_GRID_SIZE = 100.0


def _div(a: float, b: float) -> float:
    """Divide following IEEE rules instead of raising on a zero divisor."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    sign = math.copysign(1.0, a) * math.copysign(1.0, b)
    return math.inf if sign > 0 else -math.inf


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _in_unit(t: float) -> bool:
    return 0.0 <= t <= 1.0


@dataclass(frozen=True, slots=True)
class Intersection:
    """Where a segment meets a shape, and the surface normal there."""

    point: Vec2
    normal: Vec2


@dataclass(frozen=True, slots=True)
class AabbShape:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_center(cls, center: Vec2, size: Vec2) -> AabbShape:
        half = size / 2.0
        return cls(center - half, center + half)

    def center(self) -> Vec2:
        return (self.min + self.max) / 2.0

    def size(self) -> Vec2:
        return self.max - self.min

    def bounding_rect(self) -> AabbShape:
        return self

    def intersects_circle(self, circle: CircleShape) -> bool:
        closest = self.min.max(self.max.min(circle.center))
        return circle.center.distance(closest) <= circle.radius

    def intersects_aabb(self, aabb: AabbShape) -> bool:
        return (
            self.min.x <= aabb.max.x
            and self.max.x >= aabb.min.x
            and self.min.y <= aabb.max.y
            and self.max.y >= aabb.min.y
        )

    def intersects_shape(self, shape: Shape) -> bool:
        if isinstance(shape, CircleShape):
            return self.intersects_circle(shape)
        return self.intersects_aabb(shape)

    def line_intersection(self, start: Vec2, end: Vec2) -> Optional[Intersection]:
        """First point where the segment from ``start`` to ``end`` meets the box."""
        direction = end - start

        tmin = _div(self.min.x - start.x, direction.x)
        tmax = _div(self.max.x - start.x, direction.x)
        if tmin > tmax:
            tmin, tmax = tmax, tmin

        tymin = _div(self.min.y - start.y, direction.y)
        tymax = _div(self.max.y - start.y, direction.y)
        if tymin > tymax:
            tymin, tymax = tymax, tymin

        tmin = _fmax(tmin, tymin)
        tmax = _fmin(tmax, tymax)

        if tmin > tmax:
            return None

        if _in_unit(tmin):
            t = tmin
        elif _in_unit(tmax):
            t = tmax
        else:
            return None

        point = start + direction * t

        if abs(point.x - self.min.x) < _NORMAL_TOLERANCE:
            normal = Vec2(-1.0, 0.0)
        elif abs(point.x - self.max.x) < _NORMAL_TOLERANCE:
            normal = Vec2(1.0, 0.0)
        elif abs(point.y - self.min.y) < _NORMAL_TOLERANCE:
            normal = Vec2(0.0, -1.0)
        elif abs(point.y - self.max.y) < _NORMAL_TOLERANCE:
            normal = Vec2(0.0, 1.0)
        else:
            normal = Vec2(0.0, 0.0)

        return Intersection(point, normal)

    def intersects_line(self, start: Vec2, end: Vec2) -> Optional[Intersection]:
        return self.line_intersection(start, end)


@dataclass(frozen=True, slots=True)
class CircleShape:
    """A circle given by its centre and radius."""

    center: Vec2
    radius: float

    def bounding_rect(self) -> AabbShape:
        r = splat(self.radius)
        return AabbShape(self.center - r, self.center + r)

    def intersects_circle(self, circle: CircleShape) -> bool:
        return self.center.distance(circle.center) <= self.radius + circle.radius

    def intersects_aabb(self, aabb: AabbShape) -> bool:
        return aabb.intersects_circle(self)

    def intersects_shape(self, shape: Shape) -> bool:
        if isinstance(shape, CircleShape):
            return self.intersects_circle(shape)
        return self.intersects_aabb(shape)

    def intersects_line(self, start: Vec2, end: Vec2) -> Optional[Intersection]:
        """Nearest point to ``start`` where the segment crosses the circle."""
        line = end - start
        ray_len = line.length()
        if ray_len == 0.0:
            return None
        ray_dir = line / ray_len

        dot = (self.center - start).dot(ray_dir)
        if dot < 0.0 or dot > ray_len:
            return None

        closest = start + ray_dir * dot
        dist_squared = (self.center - closest).length_squared()
        radius_squared = self.radius * self.radius
        if dist_squared > radius_squared:
            return None

        t = math.sqrt(radius_squared - dist_squared)
        first = closest + ray_dir * (0.0 - t)
        second = closest + ray_dir * t
        point = first if (first - start).length() < (second - start).length() else second

        offset = point - self.center
        normal = offset.normalize() if offset.length() > 0.0 else Vec2(0.0, 0.0)
        return Intersection(point, normal)


Shape = Union[AabbShape, CircleShape]


@dataclass(frozen=True, order=True, slots=True)
class UserData:
    """What a caller attaches to a shape stored in the hash."""

    entity_type: int
    entity: Hashable


@dataclass(frozen=True, slots=True)
class SpatialHashData:
    shape: Shape
    userdata: UserData


@dataclass
class SpatialHash:
    """Buckets shapes by the grid cells their bounding boxes cover."""

    grid_size: float = DEFAULT_GRID_SIZE
    inner: Dict[Tuple[int, int], List[SpatialHashData]] = field(default_factory=dict)

    def clear(self) -> None:
        self.inner.clear()

    def _cells(self, rect: AabbShape) -> Iterator[Tuple[int, int]]:
        low = (rect.min / self.grid_size).floor()
        high = (rect.max / self.grid_size).ceil()
        for x in range(int(low.x), int(high.x)):
            for y in range(int(low.y), int(high.y)):
                yield (x, y)

    def add_shape(self, shape: Shape, data: UserData) -> None:
        """Store ``shape``; circles are stored as their bounding boxes."""
        if isinstance(shape, CircleShape):
            shape = shape.bounding_rect()
        entry = SpatialHashData(shape, data)
        for key in self._cells(shape):
            self.inner.setdefault(key, []).append(entry)

    def query(self, shape: Shape) -> Iterator[UserData]:
        """Yield the data of stored shapes that intersect ``shape``.

        A stored shape spanning several cells may be yielded once per cell.
        """
        for key in self._cells(shape.bounding_rect()):
            for item in self.inner.get(key, ()):
                if item.shape.intersects_shape(shape):
                    yield item.userdata

    def raycast(self, start: Vec2, end: Vec2) -> Optional[Tuple[Intersection, UserData]]:
        """Closest hit along the segment from ``start`` to ``end``, if any."""
        delta = end - start
        length = delta.length()
        step = self.grid_size / length if length > 0.0 else math.inf

        closest: Optional[Tuple[Intersection, UserData]] = None
        t = 0.0
        while t <= 1.0:
            point = start + delta * t
            key = (
                math.floor(point.x / self.grid_size),
                math.floor(point.y / self.grid_size),
            )
            for item in self.inner.get(key, ()):
                hit = item.shape.intersects_line(start, end)
                if hit is None:
                    continue
                if closest is None or (
                    hit.point.distance_squared(start)
                    < closest[0].point.distance_squared(start)
                ):
                    closest = (hit, item.userdata)
            t += step

        return closest