"""Accumulating wall-clock timers for named tasks."""

from __future__ import annotations

import threading
import time
from typing import Callable, Dict, Optional

Clock = Callable[[], float]


class TaskGuard:
    """Measures one run of a task; adds the elapsed time when stopped."""

    def __init__(self, task_name: str, timer: TaskTimer) -> None:
        self._task_name = task_name
        self._timer = timer
        self._start = timer._clock()
        self._stopped = False

    def stop(self) -> None:
        """Record the elapsed time. Further calls have no effect."""
        if self._stopped:
            return
        self._stopped = True
        self._timer._add(self._task_name, self._timer._clock() - self._start)

    def __enter__(self) -> TaskGuard:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


class TaskTimer:
    """Keeps the total time spent in each named task, in seconds."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._timers: Dict[str, float] = {}
        self._lock = threading.Lock()

    def start_task(self, task_name: str) -> TaskGuard:
        return TaskGuard(task_name, self)

    def get_duration(self, task_name: str) -> Optional[float]:
        with self._lock:
            return self._timers.get(task_name)

    def _add(self, task_name: str, elapsed: float) -> None:
        with self._lock:
            self._timers[task_name] = self._timers.get(task_name, 0.0) + elapsed


_GLOBAL_TASK_TIMER = TaskTimer()


def start_task(task_name: str) -> TaskGuard:
    return _GLOBAL_TASK_TIMER.start_task(task_name)


def get_duration(task_name: str) -> Optional[float]:
    return _GLOBAL_TASK_TIMER.get_duration(task_name)