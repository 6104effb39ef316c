"""Queued text drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cozy2d.frame import get_state
from cozy2d.primitives import WHITE, Color, Vec2


class FontFamily(Enum):
    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


@dataclass(frozen=True, slots=True)
class FontId:
    """A font given by its size and family."""

    size: float
    family: FontFamily


class TextAlign(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    CENTER = "center"


DEFAULT_FONT = FontId(20.0, FontFamily.MONOSPACE)


@dataclass(frozen=True, slots=True)
class TextParams:
    font: FontId = DEFAULT_FONT
    rotation: float = 0.0
    color: Color = WHITE


@dataclass(frozen=True, slots=True)
class DrawText:
    """A piece of text queued for drawing."""

    text: str
    position: Vec2
    font: FontId
    color: Color
    align: TextAlign


def draw_text_ex(
    text: str,
    position: Vec2,
    align: TextAlign,
    params: Optional[TextParams] = None,
) -> None:
    """Queue ``text`` with explicit font and colour."""
    params = params if params is not None else TextParams()
    get_state().text_queue.append(
        DrawText(str(text), position, params.font, params.color, align)
    )


def draw_text(text: str, position: Vec2, color: Color, align: TextAlign) -> None:
    """Queue ``text`` in the default font."""
    get_state().text_queue.append(
        DrawText(str(text), position, TextParams().font, color, align)
    )