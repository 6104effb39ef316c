"""Stopwatches and countdown timers advanced by explicit time steps."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Union

Seconds = Union[int, float, timedelta]

_NANOS_PER_SEC = 1_000_000_000


def _to_nanos(value: Seconds) -> int:
    """Convert seconds (or a timedelta) to whole nanoseconds."""
    if isinstance(value, timedelta):
        nanos = (
            (value.days * 86_400 + value.seconds) * _NANOS_PER_SEC
            + value.microseconds * 1_000
        )
    else:
        if not math.isfinite(value):
            raise ValueError(f"duration must be finite, got {value!r}")
        nanos = round(value * _NANOS_PER_SEC)
    if nanos < 0:
        raise ValueError(f"duration must not be negative, got {value!r}")
    return nanos


class Stopwatch:
    """Tracks elapsed time while it is not paused."""

    def __init__(self) -> None:
        self._elapsed_ns = 0
        self._paused = False

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self.elapsed!r}, paused={self._paused!r})"

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the last reset."""
        return self._elapsed_ns / _NANOS_PER_SEC

    @elapsed.setter
    def elapsed(self, value: Seconds) -> None:
        self._elapsed_ns = _to_nanos(value)

    @property
    def elapsed_ns(self) -> int:
        return self._elapsed_ns

    @property
    def paused(self) -> bool:
        return self._paused

    def tick(self, delta: Seconds) -> Stopwatch:
        """Advance by ``delta`` unless paused."""
        step = _to_nanos(delta)
        if not self._paused:
            self._elapsed_ns += step
        return self

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        self._paused = False

    def reset(self) -> None:
        """Clear the elapsed time; the paused state is kept."""
        self._elapsed_ns = 0


class Timer:
    """Counts up to a duration, either once or repeatedly.

    A non-repeating timer clamps at its duration and stays finished until
    reset. A repeating timer wraps around and is finished only on the ticks
    in which the duration was reached.
    """

    def __init__(self, duration: Seconds = 0.0, repeating: bool = False) -> None:
        self._stopwatch = Stopwatch()
        self._duration_ns = _to_nanos(duration)
        self._repeating = repeating
        self._finished = False
        self._times_finished = 0

    @classmethod
    def from_seconds(cls, duration: Seconds, repeating: bool) -> Timer:
        return cls(duration, repeating)

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration!r}, repeating={self._repeating!r}, "
            f"elapsed={self.elapsed!r}, finished={self._finished!r})"
        )

    @property
    def finished(self) -> bool:
        """Whether the timer has reached its duration."""
        return self._finished

    @property
    def just_finished(self) -> bool:
        """Whether the duration was reached during the last tick."""
        return self._times_finished > 0

    @property
    def times_finished(self) -> int:
        """How many times the duration was reached during the last tick."""
        return self._times_finished

    @property
    def elapsed(self) -> float:
        return self._stopwatch.elapsed

    @elapsed.setter
    def elapsed(self, value: Seconds) -> None:
        """Set the elapsed time without touching any other state."""
        self._stopwatch.elapsed = value

    @property
    def duration(self) -> float:
        return self._duration_ns / _NANOS_PER_SEC

    @duration.setter
    def duration(self, value: Seconds) -> None:
        self._duration_ns = _to_nanos(value)

    @property
    def repeating(self) -> bool:
        return self._repeating

    @repeating.setter
    def repeating(self, repeating: bool) -> None:
        if not self._repeating and repeating and self._finished:
            self._stopwatch.reset()
            self._finished = self.just_finished
        self._repeating = repeating

    @property
    def paused(self) -> bool:
        return self._stopwatch.paused

    def pause(self) -> None:
        self._stopwatch.pause()

    def unpause(self) -> None:
        self._stopwatch.unpause()

    def tick(self, delta: Seconds) -> Timer:
        """Advance the timer by ``delta``."""
        if self.paused:
            return self

        if not self._repeating and self._finished:
            self._times_finished = 0
            return self

        self._stopwatch.tick(delta)
        elapsed_ns = self._stopwatch.elapsed_ns
        self._finished = elapsed_ns >= self._duration_ns

        if self._finished:
            if self._repeating:
                if self._duration_ns == 0:
                    raise ValueError("a repeating timer needs a non-zero duration")
                self._times_finished = elapsed_ns // self._duration_ns
                self._stopwatch.elapsed = timedelta(0)
                self._stopwatch._elapsed_ns = (
                    elapsed_ns - self._duration_ns * self._times_finished
                )
            else:
                self._times_finished = 1
                self._stopwatch._elapsed_ns = self._duration_ns
        else:
            self._times_finished = 0

        return self

    def tick_secs(self, delta: float) -> Timer:
        return self.tick(float(delta))

    def reset(self) -> None:
        """Restart from zero; the paused state is kept."""
        self._stopwatch.reset()
        self._finished = False
        self._times_finished = 0

    @property
    def percent(self) -> float:
        """Fraction of the duration that has elapsed, from 0.0 to 1.0."""
        elapsed_ns = self._stopwatch.elapsed_ns
        if self._duration_ns == 0:
            return math.nan if elapsed_ns == 0 else math.inf
        return elapsed_ns / self._duration_ns

    @property
    def percent_left(self) -> float:
        return 1.0 - self.percent