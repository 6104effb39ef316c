import math

import pytest

from cozy2d.mesh import (
    BlendMode,
    DrawTextureParams,
    IRect,
    Mesh,
    RawDrawParams,
    SpriteVertex,
    TextureParams,
    create_line_strip,
    rotated_rectangle,
)
from cozy2d.primitives import WHITE, Vec2


def _xy(vertex):
    return Vec2(vertex.position[0], vertex.position[1])


def _centroid(vertices):
    pts = [_xy(v) for v in vertices]
    return Vec2(sum(p.x for p in pts) / len(pts), sum(p.y for p in pts) / len(pts))


def test_line_strip_needs_two_points():
    with pytest.raises(ValueError):
        create_line_strip([Vec2(0.0, 0.0)], 1.0)


def test_line_strip_counts_and_index_pattern():
    points = [Vec2(0.0, 0.0), Vec2(5.0, 0.0), Vec2(5.0, 5.0), Vec2(0.0, 5.0)]
    vertices, indices = create_line_strip(points, 2.0)
    assert len(vertices) == 4 * (len(points) - 1)
    assert len(indices) == 6 * (len(points) - 1)
    assert indices[:6] == [0, 1, 2, 2, 1, 3]
    assert max(indices) == len(vertices) - 1


def test_line_strip_index_offset():
    points = [Vec2(0.0, 0.0), Vec2(1.0, 1.0)]
    _, plain = create_line_strip(points, 1.0)
    _, shifted = create_line_strip(points, 1.0, index_offset=10)
    assert shifted == [i + 10 for i in plain]


def test_line_strip_vertex_pairs_straddle_points():
    points = [Vec2(1.0, 2.0), Vec2(4.0, 6.0)]
    thickness = 3.0
    vertices, _ = create_line_strip(points, thickness)
    for pair, point in ((vertices[0:2], points[0]), (vertices[2:4], points[1])):
        mid = (pair[0] + pair[1]) / 2.0
        assert mid.x == pytest.approx(point.x)
        assert mid.y == pytest.approx(point.y)
        assert pair[0].distance(pair[1]) == pytest.approx(thickness / 2.0)


def test_line_strip_degenerate_segment_uses_right_direction():
    p = Vec2(2.0, 2.0)
    vertices, _ = create_line_strip([p, p], 4.0)
    # direction falls back to +x, so the offset is along y
    assert vertices[0].x == pytest.approx(p.x)
    assert vertices[1].x == pytest.approx(p.x)
    assert vertices[1].y - vertices[0].y == pytest.approx(2.0)


def test_rotated_rectangle_centred_on_position():
    params = RawDrawParams(dest_size=Vec2(2.0, 6.0))
    verts = rotated_rectangle((3.0, 4.0, 7.0), params, 16.0, 16.0, WHITE)
    centre = _centroid(verts)
    assert centre.x == pytest.approx(3.0)
    assert centre.y == pytest.approx(4.0)
    assert all(v.position[2] == 7.0 for v in verts)
    xs = [v.position[0] for v in verts]
    ys = [v.position[1] for v in verts]
    assert max(xs) - min(xs) == pytest.approx(2.0)
    assert max(ys) - min(ys) == pytest.approx(6.0)
    assert all(v.color == WHITE for v in verts)


def test_rotated_rectangle_default_size_is_unit():
    verts = rotated_rectangle((0.0, 0.0, 0.0), RawDrawParams(), 8.0, 8.0, WHITE)
    assert _xy(verts[0]).distance(_xy(verts[1])) == pytest.approx(1.0)
    assert _xy(verts[1]).distance(_xy(verts[2])) == pytest.approx(1.0)


def test_rotated_rectangle_rotation_keeps_shape():
    params = RawDrawParams(dest_size=Vec2(2.0, 6.0), rotation=math.pi / 3)
    verts = rotated_rectangle((3.0, 4.0, 0.0), params, 16.0, 16.0, WHITE)
    centre = _centroid(verts)
    assert centre.x == pytest.approx(3.0)
    assert centre.y == pytest.approx(4.0)
    assert _xy(verts[0]).distance(_xy(verts[1])) == pytest.approx(2.0)
    assert _xy(verts[1]).distance(_xy(verts[2])) == pytest.approx(6.0)


def test_rotated_rectangle_full_texture_uvs():
    verts = rotated_rectangle((0.0, 0.0, 0.0), RawDrawParams(), 32.0, 32.0, WHITE)
    assert [v.tex_coords for v in verts] == [
        Vec2(0.0, 0.0),
        Vec2(1.0, 0.0),
        Vec2(1.0, 1.0),
        Vec2(0.0, 1.0),
    ]


def test_rotated_rectangle_scroll_offset_shifts_uvs():
    offset = Vec2(0.25, 0.5)
    plain = rotated_rectangle((0.0, 0.0, 0.0), RawDrawParams(), 16.0, 16.0, WHITE)
    scrolled = rotated_rectangle(
        (0.0, 0.0, 0.0), RawDrawParams(), 16.0, 16.0, WHITE, offset
    )
    for a, b in zip(plain, scrolled):
        assert b.tex_coords.x == pytest.approx(a.tex_coords.x + offset.x)
        assert b.tex_coords.y == pytest.approx(a.tex_coords.y + offset.y)
        assert a.position == b.position


def test_rotated_rectangle_source_rect_flips_y_origin():
    rect = IRect(offset=(4, 0), size=(8, 4))
    params = RawDrawParams(source_rect=rect)
    verts = rotated_rectangle((0.0, 0.0, 0.0), params, 16.0, 16.0, WHITE)
    us = sorted({v.tex_coords.x for v in verts})
    vs = sorted({v.tex_coords.y for v in verts})
    assert us == pytest.approx([4 / 16, 12 / 16])
    # the rectangle's top row maps to the top of the texture's flipped space
    assert vs[1] == pytest.approx(1.0)
    assert vs[1] - vs[0] == pytest.approx(4 / 16)


def test_rotated_rectangle_flip_x_mirrors():
    base = RawDrawParams(dest_size=Vec2(2.0, 2.0))
    flipped = RawDrawParams(dest_size=Vec2(2.0, 2.0), flip_x=True)
    a = rotated_rectangle((5.0, 5.0, 0.0), base, 8.0, 8.0, WHITE)
    b = rotated_rectangle((5.0, 5.0, 0.0), flipped, 8.0, 8.0, WHITE)
    assert b[0].position[0] == pytest.approx(a[1].position[0])
    assert b[1].position[0] == pytest.approx(a[0].position[0])
    assert b[0].position[1] == pytest.approx(a[0].position[1])


def test_draw_texture_params_blend():
    params = DrawTextureParams.blend(BlendMode.ADDITIVE)
    assert params.blend_mode is BlendMode.ADDITIVE
    assert params == DrawTextureParams(blend_mode=BlendMode.ADDITIVE)
    assert params.rotation == 0.0
    assert params.dest_size is None


def test_defaults_of_mesh_and_texture_params():
    mesh = Mesh()
    assert mesh.vertices == [] and mesh.indices == []
    assert mesh.z_index == 0 and mesh.texture is None
    assert TextureParams().blend_mode is BlendMode.NONE
    vertex = SpriteVertex((1.0, 2.0, 3.0), Vec2(0.0, 1.0), WHITE)
    assert vertex.position == (1.0, 2.0, 3.0)