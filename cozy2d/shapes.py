"""Immediate-mode drawing of sprites, rectangles, circles, lines and arcs.

Every function builds a mesh and appends it to the current frame's queue.
"""

from __future__ import annotations

import math
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple

from cozy2d.frame import draw_mesh, draw_mesh_ex, image_size
from cozy2d.mesh import (
    QUAD_INDICES,
    BlendMode,
    DrawTextureParams,
    Mesh,
    RawDrawParams,
    SpriteVertex,
    TextureParams,
    create_line_strip,
    rotated_rectangle,
)
from cozy2d.primitives import Color, Vec2

TextureHandle = Hashable

COMFY_TEXTURE = "_builtin-comfy"
PIXEL_TEXTURE = "1px"

_F32_EPSILON = 1.1920929e-07
_CIRCLE_SEGMENTS = 40
_RING_STEP = 0.1
_ARROW_HEAD_LENGTH = 0.8
_ARROW_SPREAD = 0.15 * math.pi


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _flat_mesh(
    points: Iterable[Vec2],
    indices: List[int],
    color: Color,
    z_index: int,
) -> Mesh:
    z = float(z_index)
    vertices = [SpriteVertex((p.x, p.y, z), Vec2(0.0, 0.0), color) for p in points]
    return Mesh(vertices=vertices, indices=indices, z_index=z_index, texture=None)


def _ring_mesh(
    center: Vec2,
    inner_radius: float,
    outer_radius: float,
    angles: Sequence[float],
    color: Color,
    z_index: int,
) -> Mesh:
    """Quads between consecutive angles of a band from inner to outer radius."""
    z = float(z_index)
    vertices: List[SpriteVertex] = []
    indices: List[int] = []
    previous: Optional[Tuple[Vec2, Vec2]] = None

    for angle in angles:
        cos, sin = math.cos(angle), math.sin(angle)
        inner = Vec2(center.x + inner_radius * cos, center.y + inner_radius * sin)
        outer = Vec2(center.x + outer_radius * cos, center.y + outer_radius * sin)

        if previous is not None:
            prev_inner, prev_outer = previous
            vertices.extend(
                (
                    SpriteVertex((prev_inner.x, prev_inner.y, z), Vec2(0.0, 0.0), color),
                    SpriteVertex((inner.x, inner.y, z), Vec2(1.0, 0.0), color),
                    SpriteVertex((prev_outer.x, prev_outer.y, z), Vec2(0.0, 1.0), color),
                    SpriteVertex((outer.x, outer.y, z), Vec2(1.0, 1.0), color),
                )
            )
            s = len(vertices) - 4
            indices.extend((s, s + 1, s + 2, s + 1, s + 2, s + 3))

        previous = (inner, outer)

    return Mesh(vertices=vertices, indices=indices, z_index=z_index, texture=None)


def draw_quad(
    position: Vec2,
    size: Vec2,
    rotation: float,
    color: Color,
    z_index: int,
    texture: TextureHandle,
    scroll_offset: Vec2 = Vec2(0.0, 0.0),
) -> None:
    """Draw a textured quad of ``size`` world units centred on ``position``."""
    draw_sprite_ex(
        texture,
        position,
        color,
        z_index,
        DrawTextureParams(dest_size=size, scroll_offset=scroll_offset, rotation=rotation),
    )


def draw_comfy(position: Vec2, tint: Color, z_index: int, world_size: Vec2) -> None:
    """Draw the built-in mascot sprite."""
    draw_sprite(COMFY_TEXTURE, position, tint, z_index, world_size)


def draw_sprite(
    texture: TextureHandle,
    position: Vec2,
    tint: Color,
    z_index: int,
    world_size: Vec2,
) -> None:
    """Draw ``texture`` centred on ``position``, scaled to ``world_size``."""
    draw_sprite_ex(
        texture,
        position,
        tint,
        z_index,
        DrawTextureParams(dest_size=world_size, rotation=0.0),
    )


def draw_sprite_ex(
    texture: TextureHandle,
    position: Vec2,
    tint: Color,
    z_index: int,
    params: Optional[DrawTextureParams] = None,
) -> None:
    """Draw ``texture`` with full control over size, source rect, flips and blending."""
    params = params if params is not None else DrawTextureParams()
    raw = RawDrawParams(
        dest_size=params.dest_size,
        source_rect=params.source_rect,
        rotation=params.rotation,
        flip_x=params.flip_x,
        flip_y=params.flip_y,
        pivot=params.pivot,
    )
    width, height = image_size(texture) or (1, 1)

    vertices = rotated_rectangle(
        (position.x, position.y, float(z_index)),
        raw,
        float(width),
        float(height),
        tint,
        params.scroll_offset,
    )
    mesh = Mesh(
        vertices=list(vertices),
        indices=list(QUAD_INDICES),
        z_index=z_index,
        texture=texture,
    )
    draw_mesh_ex(mesh, TextureParams(shader=None, blend_mode=params.blend_mode))


def draw_rectangle_z_tex(
    position: Vec2,
    w: float,
    h: float,
    color: Color,
    z_index: int,
    texture: Optional[TextureHandle] = None,
    texture_params: Optional[TextureParams] = None,
) -> None:
    """Draw a ``w`` by ``h`` rectangle centred on ``position`` with full UVs."""
    x, y = position.x, position.y
    hw, hh = w / 2.0, h / 2.0
    z = float(z_index)

    vertices = [
        SpriteVertex((x - hw, y - hh, z), Vec2(0.0, 0.0), color),
        SpriteVertex((x + hw, y - hh, z), Vec2(1.0, 0.0), color),
        SpriteVertex((x + hw, y + hh, z), Vec2(1.0, 1.0), color),
        SpriteVertex((x - hw, y + hh, z), Vec2(0.0, 1.0), color),
    ]
    mesh = Mesh(vertices=vertices, indices=[0, 1, 2, 0, 2, 3], z_index=z_index, texture=texture)
    draw_mesh_ex(mesh, texture_params if texture_params is not None else TextureParams())


def draw_rect(center: Vec2, size: Vec2, color: Color, z_index: int) -> None:
    """Draw a solid axis-aligned rectangle."""
    draw_quad(center, size, 0.0, color, z_index, PIXEL_TEXTURE, Vec2(0.0, 0.0))


def draw_rect_rot(
    center: Vec2,
    size: Vec2,
    rotation: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a solid rectangle rotated by ``rotation`` radians about its centre."""
    draw_quad(center, size, rotation, color, z_index, PIXEL_TEXTURE, Vec2(0.0, 0.0))


def draw_rect_outline(
    center: Vec2,
    size: Vec2,
    thickness: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw the outline of an axis-aligned rectangle."""
    w, h = size.x, size.y
    x = center.x - w / 2.0
    y = center.y - h / 2.0

    points, indices = create_line_strip(
        [
            Vec2(x, y),
            Vec2(x, y + h),
            Vec2(x + w, y + h),
            Vec2(x + w, y),
            Vec2(x, y),
        ],
        thickness,
    )
    draw_mesh(_flat_mesh(points, indices, color, z_index))


def draw_rect_corners(
    center: Vec2,
    size: Vec2,
    thickness: float,
    corner_size: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw only the four corner brackets of a rectangle."""
    w, h = size.x, size.y
    x = center.x - w / 2.0
    y = center.y - h / 2.0
    c = corner_size

    strips = (
        # bottom left
        [Vec2(x, y + c), Vec2(x, y), Vec2(x + c, y)],
        # top right
        [Vec2(x + w - c, y + h), Vec2(x + w, y + h), Vec2(x + w, y + h - c)],
        # bottom right
        [Vec2(x + w - c, y), Vec2(x + w, y), Vec2(x + w, y + c)],
        # top left
        [Vec2(x + c, y + h), Vec2(x, y + h), Vec2(x, y + h - c)],
    )

    points: List[Vec2] = []
    indices: List[int] = []
    for strip in strips:
        strip_points, strip_indices = create_line_strip(strip, thickness, len(points))
        points.extend(strip_points)
        indices.extend(strip_indices)

    draw_mesh(_flat_mesh(points, indices, color, z_index))


def draw_rect_outline_rot(
    center: Vec2,
    size: Vec2,
    rotation: float,
    thickness: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a rectangle outline rotated by ``rotation`` radians about its centre."""
    t = thickness / 2.0
    w, h = size.x, size.y
    x = center.x - w / 2.0
    y = center.y - h / 2.0
    z = float(z_index)
    pivot = Vec2(x + w / 2.0, y + h / 2.0)

    corners = [
        ((x, y), Vec2(0.0, 1.0)),
        ((x + w, y), Vec2(1.0, 0.0)),
        ((x + w, y + h), Vec2(1.0, 1.0)),
        ((x, y + h), Vec2(0.0, 0.0)),
        # inner rectangle
        ((x + t, y + t), Vec2(0.0, 0.0)),
        ((x + w - t, y + t), Vec2(0.0, 0.0)),
        ((x + w - t, y + h - t), Vec2(0.0, 0.0)),
        ((x + t, y + h - t), Vec2(0.0, 0.0)),
    ]

    cos, sin = math.cos(rotation), math.sin(rotation)
    vertices = []
    for (px, py), uv in corners:
        dx, dy = px - pivot.x, py - pivot.y
        rx = dx * cos - dy * sin + pivot.x
        ry = dx * sin + dy * cos + pivot.y
        vertices.append(SpriteVertex((rx, ry, z), uv, color))

    indices = [0, 1, 4, 1, 4, 5, 1, 5, 6, 1, 2, 6, 3, 7, 2, 2, 7, 6, 0, 4, 3, 3, 4, 7]
    draw_mesh(Mesh(vertices=vertices, indices=indices, z_index=z_index, texture=None))


def draw_circle(center: Vec2, r: float, color: Color, z_index: int) -> None:
    """Draw a filled circle with alpha blending."""
    draw_poly_z(
        center,
        _CIRCLE_SEGMENTS,
        r,
        0.0,
        color,
        z_index,
        TextureParams(blend_mode=BlendMode.ALPHA),
    )


def draw_circle_outline(
    center: Vec2,
    radius: float,
    thickness: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a ring of the given thickness around ``center``."""
    steps = _round(2.0 * math.pi / _RING_STEP)
    angles = [i * _RING_STEP for i in range(steps + 1)]
    mesh = _ring_mesh(
        center,
        radius - thickness / 2.0,
        radius + thickness / 2.0,
        angles,
        color,
        z_index,
    )
    draw_mesh(mesh)


def draw_circle_z(
    center: Vec2,
    r: float,
    color: Color,
    z_index: int,
    texture_params: Optional[TextureParams] = None,
) -> None:
    """Draw a filled circle with explicit texture parameters."""
    draw_poly_z(center, _CIRCLE_SEGMENTS, r, 0.0, color, z_index, texture_params)


def draw_line(
    p1: Vec2,
    p2: Vec2,
    thickness: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a straight line segment."""
    draw_line_tex(p1, p2, thickness, z_index, color, None)


def draw_ray(
    pos: Vec2,
    direction: Vec2,
    thickness: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a segment from ``pos`` to ``pos + direction``."""
    draw_line(pos, pos + direction, thickness, color, z_index)


def draw_line_tex_y_uv_flex(
    p1: Vec2,
    p2: Vec2,
    start_thickness: float,
    end_thickness: float,
    color: Color,
    texture: Optional[TextureHandle],
    uv_offset: float,
    uv_size: float,
    z_index: int,
    texture_params: Optional[TextureParams] = None,
) -> None:
    """Draw a tapered textured line whose V coordinate scrolls with ``uv_offset``."""
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    nx, ny = -(y2 - y1), x2 - x1

    tlen = math.sqrt(nx * nx + ny * ny)
    if tlen < _F32_EPSILON:
        return

    nxn, nyn = nx / tlen, ny / tlen
    tx1, ty1 = nxn * start_thickness * 0.5, nyn * start_thickness * 0.5
    tx2, ty2 = nxn * end_thickness * 0.5, nyn * end_thickness * 0.5
    z = float(z_index)

    start = math.fmod(uv_offset, 1.0)
    end = start + uv_size

    vertices = [
        SpriteVertex((x1 + tx1, y1 + ty1, z), Vec2(0.0, start), color),
        SpriteVertex((x1 - tx1, y1 - ty1, z), Vec2(1.0, start), color),
        SpriteVertex((x2 + tx2, y2 + ty2, z), Vec2(0.0, end), color),
        SpriteVertex((x2 - tx2, y2 - ty2, z), Vec2(1.0, end), color),
    ]
    mesh = Mesh(vertices=vertices, indices=[0, 1, 2, 2, 1, 3], z_index=z_index, texture=texture)
    draw_mesh_ex(mesh, texture_params if texture_params is not None else TextureParams())


def _line_offset(
    x1: float, y1: float, x2: float, y2: float, thickness: float
) -> Optional[Tuple[float, float]]:
    """Half-thickness offset perpendicular to the segment, or None if nothing is drawn."""
    nx, ny = -(y2 - y1), x2 - x1
    length = math.sqrt(nx * nx + ny * ny)
    half = thickness * 0.5
    if half == 0.0:
        if length == 0.0:
            return None
        return 0.0, 0.0
    tlen = length / half
    if tlen < _F32_EPSILON:
        return None
    return nx / tlen, ny / tlen


def draw_line_tex(
    p1: Vec2,
    p2: Vec2,
    thickness: float,
    z_index: int,
    color: Color,
    texture: Optional[TextureHandle] = None,
) -> None:
    """Draw a line segment as a quad, optionally textured."""
    offset = _line_offset(p1.x, p1.y, p2.x, p2.y, thickness)
    if offset is None:
        return
    tx, ty = offset
    z = float(z_index)

    vertices = [
        SpriteVertex((p1.x + tx, p1.y + ty, z), Vec2(0.0, 0.0), color),
        SpriteVertex((p1.x - tx, p1.y - ty, z), Vec2(1.0, 0.0), color),
        SpriteVertex((p2.x + tx, p2.y + ty, z), Vec2(0.0, 1.0), color),
        SpriteVertex((p2.x - tx, p2.y - ty, z), Vec2(1.0, 1.0), color),
    ]
    draw_mesh(
        Mesh(vertices=vertices, indices=[0, 1, 2, 2, 1, 3], z_index=z_index, texture=texture)
    )


def draw_poly_z(
    position: Vec2,
    sides: int,
    radius: float,
    rotation: float,
    color: Color,
    z_index: int,
    texture_params: Optional[TextureParams] = None,
) -> None:
    """Draw a filled regular polygon; ``rotation`` is in degrees."""
    if sides < 1:
        raise ValueError(f"a polygon needs at least one side, got {sides}")

    x, y = position.x, position.y
    z = float(z_index)
    rot = math.radians(rotation)

    vertices = [SpriteVertex((x, y, z), Vec2(0.0, 0.0), color)]
    indices: List[int] = []
    for i in range(sides + 1):
        angle = i / sides * math.pi * 2.0 + rot
        rx, ry = math.cos(angle), math.sin(angle)
        vertices.append(SpriteVertex((x + radius * rx, y + radius * ry, z), Vec2(rx, ry), color))
        if i != sides:
            indices.extend((0, i + 1, i + 2))

    mesh = Mesh(vertices=vertices, indices=indices, z_index=z_index)
    draw_mesh_ex(mesh, texture_params if texture_params is not None else TextureParams())


def draw_arc(
    position: Vec2,
    radius: float,
    start_angle: float,
    end_angle: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a filled circular sector between two angles in radians."""
    x, y = position.x, position.y
    z = float(z_index)
    segments = _CIRCLE_SEGMENTS

    vertices = [SpriteVertex((x, y, z), Vec2(0.0, 0.0), color)]
    indices: List[int] = []
    for i in range(segments + 1):
        angle = start_angle + (i / segments * (end_angle - start_angle))
        rx, ry = math.cos(angle), math.sin(angle)
        vertices.append(SpriteVertex((x + radius * rx, y + radius * ry, z), Vec2(rx, ry), color))
        if i != segments:
            indices.extend((0, i + 1, i + 2))

    draw_mesh_ex(Mesh(vertices=vertices, indices=indices, z_index=z_index), TextureParams())


def draw_arc_outline(
    center: Vec2,
    radius: float,
    thickness: float,
    start_angle: float,
    end_angle: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a band along the arc from ``start_angle`` to ``end_angle``."""
    two_pi = 2.0 * math.pi
    start_angle = math.fmod(start_angle, two_pi)
    end_angle = math.fmod(end_angle, two_pi)
    if end_angle < start_angle:
        end_angle += two_pi

    steps = _round((end_angle - start_angle) / _RING_STEP)
    angles = [start_angle + i * _RING_STEP for i in range(steps + 1)]
    mesh = _ring_mesh(
        center,
        radius - thickness / 2.0,
        radius + thickness / 2.0,
        angles,
        color,
        z_index,
    )
    draw_mesh(mesh)


def draw_arc_wedge(
    center: Vec2,
    radius: float,
    thickness: float,
    start_angle: float,
    end_angle: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw an arc outline closed by two radii."""
    draw_arc_outline(center, radius, thickness, start_angle, end_angle, color, z_index)

    start_point = Vec2.from_angle(start_angle) * radius
    end_point = Vec2.from_angle(end_angle) * radius
    draw_line(center, center + start_point, thickness, color, z_index)
    draw_line(center, center + end_point, thickness, color, z_index)


def draw_wedge(
    center: Vec2,
    radius: float,
    thickness: float,
    start_angle: float,
    end_angle: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a triangle outline from the centre to two points on the circle."""
    start_point = Vec2.from_angle(start_angle) * radius
    end_point = Vec2.from_angle(end_angle) * radius

    draw_line(center, center + start_point, thickness, color, z_index)
    draw_line(center, center + end_point, thickness, color, z_index)
    draw_line(center + start_point, center + end_point, thickness, color, z_index)


def draw_arrow(
    start: Vec2,
    end: Vec2,
    thickness: float,
    color: Color,
    z_index: int,
) -> None:
    """Draw a line from ``start`` to ``end`` with an arrow head at ``end``."""
    direction = end - start
    angle = direction.angle()

    draw_ray(
        end,
        -Vec2.from_angle(angle + _ARROW_SPREAD) * _ARROW_HEAD_LENGTH,
        thickness,
        color,
        z_index,
    )
    draw_ray(
        end,
        -Vec2.from_angle(angle - _ARROW_SPREAD) * _ARROW_HEAD_LENGTH,
        thickness,
        color,
        z_index,
    )
    draw_ray(start, direction, thickness, color, z_index)


def draw_line_tex_y_uv(
    p1: Vec2,
    p2: Vec2,
    thickness: float,
    color: Color,
    texture: Optional[TextureHandle],
    y_uv: Tuple[float, float],
    z_index: int,
    texture_params: Optional[TextureParams] = None,
) -> None:
    """Draw a textured line whose V coordinates span ``y_uv`` (wrapped into 0..1).

    The queued mesh carries z index 0; the vertices use ``z_index`` for depth.
    """
    offset = _line_offset(p1.x, p1.y, p2.x, p2.y, thickness)
    if offset is None:
        return
    tx, ty = offset
    z = float(z_index)

    uv_start = math.fmod(y_uv[0], 1.0)
    uv_end = math.fmod(y_uv[1], 1.0)

    vertices = [
        SpriteVertex((p1.x + tx, p1.y + ty, z), Vec2(0.0, uv_start), color),
        SpriteVertex((p1.x - tx, p1.y - ty, z), Vec2(1.0, uv_start), color),
        SpriteVertex((p2.x + tx, p2.y + ty, z), Vec2(0.0, uv_end), color),
        SpriteVertex((p2.x - tx, p2.y - ty, z), Vec2(1.0, uv_end), color),
    ]
    mesh = Mesh(vertices=vertices, indices=[0, 1, 2, 2, 1, 3], z_index=0, texture=texture)
    draw_mesh_ex(mesh, texture_params if texture_params is not None else TextureParams())