"""Value tweening and flashing colour effects."""

from __future__ import annotations

from typing import Callable

from cozy2d.primitives import Color

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Linear easing: progress maps straight onto the eased value, as a float."""
    return float(t)


def _progress(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 1.0
    return min(numerator / denominator, 1.0)


class Tween:
    """Interpolates a value from ``initial_val`` to ``final_val`` over time."""

    def __init__(
        self,
        initial_val: float = 0.0,
        final_val: float = 0.0,
        duration: float = 0.0,
        delay: float = 0.0,
        easing_fn: Easing = linear,
    ) -> None:
        self.initial_val = initial_val
        self.final_val = final_val
        self.duration = duration
        self.delay = delay
        self.easing_fn = easing_fn
        self.elapsed = 0.0
        self._value = initial_val

    @property
    def value(self) -> float:
        return self._value

    def is_finished(self) -> bool:
        return self.elapsed >= self.duration + self.delay

    def update(self, delta_time: float) -> None:
        if self.delay > 0.0:
            self.delay -= delta_time
            return
        self.elapsed += delta_time
        t = self.easing_fn(_progress(self.elapsed, self.duration))
        self._value = self.initial_val + t * (self.final_val - self.initial_val)


class FlashingColor:
    """A colour that flashes towards another colour for a while when triggered."""

    def __init__(
        self,
        color: Color,
        flash_color: Color,
        duration: float,
        interval: float,
        easing_fn: Easing = linear,
    ) -> None:
        self.color = color
        self.flash_color = flash_color
        self.duration = duration
        self.interval = interval
        self.easing_fn = easing_fn
        self.total_remaining = 0.0
        self.interval_remaining = 0.0

    def trigger(self) -> None:
        self.total_remaining = self.duration

    def update(self, delta: float) -> None:
        if self.total_remaining > 0.0:
            self.total_remaining -= delta
            self.interval_remaining -= delta
            if self.interval_remaining <= 0.0:
                self.interval_remaining = self.interval

    def current_color(self) -> Color:
        if self.total_remaining <= 0.0:
            return self.color
        t = self.easing_fn(_progress(self.interval_remaining, self.interval))
        return Color.lerp(self.color, self.flash_color, t)