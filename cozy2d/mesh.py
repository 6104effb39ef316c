"""Vertex and mesh types plus the geometry helpers that build them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from itertools import pairwise
from typing import Hashable, List, Optional, Sequence, Tuple

from cozy2d.primitives import Color, Vec2

Vec3 = Tuple[float, float, float]
TextureHandle = Hashable

QUAD_INDICES: Tuple[int, ...] = (0, 2, 1, 0, 3, 2)


@dataclass(frozen=True, slots=True)
class SpriteVertex:
    """A single vertex: position in world space, texture coordinates and tint."""

    position: Vec3
    tex_coords: Vec2
    color: Color


@dataclass(slots=True)
class Mesh:
    """Triangles to be drawn with an optional texture at a given z index."""

    vertices: List[SpriteVertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    z_index: int = 0
    texture: Optional[TextureHandle] = None


class BlendMode(Enum):
    NONE = "none"
    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True, slots=True)
class TextureParams:
    """How a mesh is blended and shaded when drawn."""

    shader: Optional[Hashable] = None
    blend_mode: BlendMode = BlendMode.NONE


@dataclass(frozen=True, slots=True)
class IRect:
    """An integer rectangle given by its offset and size, in pixels."""

    offset: Tuple[int, int]
    size: Tuple[int, int]


@dataclass(frozen=True, slots=True)
class DrawTextureParams:
    """Options for drawing a textured sprite."""

    dest_size: Optional[Vec2] = None
    source_rect: Optional[IRect] = None
    scroll_offset: Vec2 = Vec2(0.0, 0.0)
    rotation: float = 0.0
    flip_x: bool = False
    flip_y: bool = False
    pivot: Optional[Vec2] = None
    blend_mode: BlendMode = BlendMode.NONE

    @classmethod
    def blend(cls, blend_mode: BlendMode) -> DrawTextureParams:
        return cls(blend_mode=blend_mode)


@dataclass(frozen=True, slots=True)
class RawDrawParams:
    """Sprite geometry options with the destination size already in world units."""

    dest_size: Optional[Vec2] = None
    source_rect: Optional[IRect] = None
    rotation: float = 0.0
    flip_x: bool = False
    flip_y: bool = False
    pivot: Optional[Vec2] = None


def create_line_strip(
    points: Sequence[Vec2],
    thickness: float,
    index_offset: int = 0,
) -> Tuple[List[Vec2], List[int]]:
    """Build a quad for every segment of the strip through ``points``.

    Returns the vertices and the triangle indices; indices start at
    ``index_offset`` so the result can be appended to an existing mesh.
    """
    points = list(points)
    if len(points) < 2:
        raise ValueError("not enough points to create a line strip")

    half_thickness = thickness / 4.0
    vertices: List[Vec2] = []
    indices: List[int] = []

    for i, (p0, p1) in enumerate(pairwise(points)):
        direction = (p1 - p0).normalize_or_right()
        offset = Vec2(-direction.y, direction.x) * half_thickness
        vertices.extend((p0 - offset, p0 + offset, p1 - offset, p1 + offset))
        base = index_offset + i * 4
        indices.extend((base, base + 1, base + 2, base + 2, base + 1, base + 3))

    return vertices, indices


def rotated_rectangle(
    position: Vec3,
    params: RawDrawParams,
    tex_width: float,
    tex_height: float,
    color: Color,
    scroll_offset: Vec2 = Vec2(0.0, 0.0),
) -> Tuple[SpriteVertex, SpriteVertex, SpriteVertex, SpriteVertex]:
    """The four vertices of a sprite quad centred on ``position``."""
    x, y, z = position

    if params.source_rect is not None:
        rect = params.source_rect
        offset = (rect.offset[0], int(tex_height) - rect.offset[1] - rect.size[1])
        dims = IRect(offset=offset, size=rect.size)
    else:
        dims = IRect(offset=(0, 0), size=(int(tex_width), int(tex_height)))

    sx, sy = float(dims.offset[0]), float(dims.offset[1])
    sw, sh = float(dims.size[0]), float(dims.size[1])

    if params.dest_size is not None:
        w, h = params.dest_size.x, params.dest_size.y
    else:
        w, h = 1.0, 1.0
    if params.flip_x:
        w = -w
    if params.flip_y:
        h = -h

    pivot = params.pivot if params.pivot is not None else Vec2(x + w / 2.0, y + h / 2.0)
    m = pivot - Vec2(w / 2.0, h / 2.0)

    cos = math.cos(params.rotation)
    sin = math.sin(params.rotation)

    corners = (Vec2(x, y), Vec2(x + w, y), Vec2(x + w, y + h), Vec2(x, y + h))
    rotated = [
        Vec2(p.x * cos - p.y * sin, p.x * sin + p.y * cos) + m
        for p in (c - pivot for c in corners)
    ]

    u0, u1 = sx / tex_width, (sx + sw) / tex_width
    v0, v1 = sy / tex_height, (sy + sh) / tex_height
    uvs = (Vec2(u0, v0), Vec2(u1, v0), Vec2(u1, v1), Vec2(u0, v1))

    a, b, c, d = (
        SpriteVertex((p.x, p.y, z), uv + scroll_offset, color)
        for p, uv in zip(rotated, uvs)
    )
    return a, b, c, d