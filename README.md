# cozy2d

Small, dependency-free building blocks for 2D games, in plain Python.

## What is inside

- `cozy2d.primitives`: the immutable `Vec2` (arithmetic, `length`,
  `normalize`, `normalize_or_right`, `dot`, `distance`, `angle`,
  `from_angle`, `floor`, `ceil`, `min`, `max`), `Color` with `lerp`, the
  colours `WHITE`, `BLACK` and `RED`, and `splat`.
- `cozy2d.random`: a seedable PCG-style generator shared by the whole module:
  `srand`, `rand`, `gen_range` (integer bounds give an integer, float bounds a
  float), `random`, `random_range`, `random_i32`, `random_usize`, `toss_coin`
  (also `flip_coin` and `coin_toss`), `random_angle`, `random_dir`,
  `random_vec`, `random_offset`, `random_circle`, `random_box`,
  `random_around`, plus `shuffle`, `choose`, `choose_multiple` and the
  `FisherYates` shuffler.
- `cozy2d.timer`: `Stopwatch` and `Timer`. Time is given in seconds (int or
  float) or as a `datetime.timedelta` and kept in whole nanoseconds. A
  non-repeating timer clamps at its duration; a repeating one wraps and
  reports `times_finished` for the last tick. State is read through the
  properties `elapsed`, `duration`, `repeating`, `paused`, `finished`,
  `just_finished`, `times_finished`, `percent` and `percent_left`.
- `cozy2d.tween`: `Tween` (read the current `value`, check `is_finished()`)
  with a pluggable easing function such as `linear`, and `FlashingColor`,
  which flashes towards another colour for a while after `trigger()`.
- `cozy2d.task_timer`: `TaskTimer`, `start_task` and `get_duration` add up the
  wall-clock seconds spent in named tasks. A `TaskGuard` records its time on
  `stop()` or when used as a context manager.
- `cozy2d.spatial_hash`: `AabbShape`, `CircleShape`, `Intersection`,
  `UserData` and a grid-based `SpatialHash` with `add_shape`, `query`,
  `raycast` and `clear`. Circles are stored as their bounding boxes.
- `cozy2d.mesh`: `SpriteVertex`, `Mesh`, `BlendMode`, `TextureParams`,
  `IRect`, `DrawTextureParams`, `RawDrawParams`, and the geometry helpers
  `create_line_strip` and `rotated_rectangle`.
- `cozy2d.frame`: the per-frame `FrameState` (frame counter, fps, clear
  colour, mesh and text queues, known texture sizes) with `get_state`,
  `reset_state`, `inc_frame_num`, `clear_background`, `set_image_size`,
  `image_size`, `draw_mesh` and `draw_mesh_ex`.
- `cozy2d.text`: `draw_text` and `draw_text_ex` queue `DrawText` entries using
  `FontId`, `FontFamily`, `TextAlign` and `TextParams`.
- `cozy2d.shapes`: drawing calls that build meshes and queue them on the
  current frame: sprites (`draw_sprite`, `draw_sprite_ex`, `draw_quad`,
  `draw_comfy`), rectangles (`draw_rect`, `draw_rect_rot`,
  `draw_rect_outline`, `draw_rect_outline_rot`, `draw_rect_corners`,
  `draw_rectangle_z_tex`), circles and polygons (`draw_circle`,
  `draw_circle_z`, `draw_circle_outline`, `draw_poly_z`), lines (`draw_line`,
  `draw_ray`, `draw_arrow`, `draw_line_tex`, `draw_line_tex_y_uv`,
  `draw_line_tex_y_uv_flex`) and arcs (`draw_arc`, `draw_arc_outline`,
  `draw_arc_wedge`, `draw_wedge`).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Timers:

```python
from cozy2d.timer import Timer

timer = Timer.from_seconds(1.0, True)
timer.tick_secs(3.5)
assert timer.times_finished == 3
assert timer.elapsed == 0.5
```

Deterministic random numbers:

```python
from cozy2d.random import srand, random_range

srand(42)
speed = random_range(1.0, 5.0)
```

Timing a task:

```python
from cozy2d.task_timer import get_duration, start_task

with start_task("physics"):
    ...
seconds = get_duration("physics")
```

Spatial queries:

```python
from cozy2d.primitives import Vec2
from cozy2d.spatial_hash import AabbShape, CircleShape, SpatialHash, UserData

grid = SpatialHash()
grid.add_shape(AabbShape.from_center(Vec2(0, 0), Vec2(10, 10)), UserData(1, 7))
hits = list(grid.query(CircleShape(Vec2(3, 3), 2.0)))
```

A stored shape that covers several grid cells may be yielded once per cell.

Queueing draw calls for a frame:

```python
from cozy2d.frame import get_state, reset_state, set_image_size
from cozy2d.primitives import Color, Vec2
from cozy2d.shapes import draw_circle, draw_rect, draw_sprite

reset_state()
set_image_size("player", 16, 16)
draw_rect(Vec2(0, 0), Vec2(2, 1), Color(1, 0, 0, 1), 0)
draw_circle(Vec2(3, 0), 0.5, Color(0, 1, 0, 1), 1)
draw_sprite("player", Vec2(1, 1), Color(1, 1, 1, 1), 2, Vec2(1, 1))
meshes = get_state().mesh_queue
```

Textures are plain hashable handles; a texture whose size was never given to
`set_image_size` is treated as 1 by 1 pixel.

## What it does not do

cozy2d opens no window, loads no images, fonts or sounds, and renders
nothing. The drawing functions only fill the `mesh_queue` and `text_queue`
of the current `FrameState`; reading those queues and putting them on screen
is left to whatever renderer the game uses. There is no game loop either:
timers, tweens and the frame counter advance only when the caller ticks or
updates them.