"""Per-frame state: counters, clear colour and the queues of things to draw."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

from cozy2d.mesh import Mesh, TextureParams
from cozy2d.primitives import BLACK, Color


@dataclass(slots=True)
class MeshDraw:
    """A mesh queued for drawing together with how to texture it."""

    mesh: Mesh
    texture_params: TextureParams = field(default_factory=TextureParams)


@dataclass
class FrameState:
    """Everything collected while building one frame."""

    fps: int = 0
    frame: int = 0
    clear_color: Color = BLACK
    mesh_queue: List[MeshDraw] = field(default_factory=list)
    text_queue: List[Any] = field(default_factory=list)
    image_sizes: Dict[Hashable, Tuple[int, int]] = field(default_factory=dict)


_state = FrameState()


def get_state() -> FrameState:
    return _state


def reset_state() -> FrameState:
    """Replace the frame state with a fresh one and return it."""
    global _state
    _state = FrameState()
    return _state


def get_fps() -> int:
    return _state.fps


def get_frame() -> int:
    return _state.frame


def inc_frame_num() -> None:
    _state.frame += 1


def clear_background(color: Color) -> None:
    _state.clear_color = color


def set_image_size(texture: Hashable, width: int, height: int) -> None:
    """Record the pixel size of a loaded texture."""
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative, got {width}x{height}")
    _state.image_sizes[texture] = (int(width), int(height))


def image_size(texture: Hashable) -> Optional[Tuple[int, int]]:
    """The pixel size of ``texture``, or ``None`` if it is not known."""
    return _state.image_sizes.get(texture)


def draw_mesh(mesh: Mesh) -> None:
    _state.mesh_queue.append(MeshDraw(mesh, TextureParams()))


def draw_mesh_ex(mesh: Mesh, texture_params: TextureParams) -> None:
    _state.mesh_queue.append(MeshDraw(mesh, texture_params))