"""Frame timing: per-frame delta and a frames-per-second counter."""

from __future__ import annotations

import time
from collections.abc import Callable


class FrameTimer:
    """Tracks time between frames and counts frames per second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()
        self._last_time = 0.0
        self._accumulator = 0.0
        self._frame_count = 0
        self.delta = 0.0
        self.fps = 0

    def update(self) -> int:
        """Advance one frame, updating ``delta`` and ``fps``; return ``fps``."""
        cur_time = self._clock() - self._start
        self.delta = cur_time - self._last_time
        self._last_time = cur_time

        self._accumulator += self.delta
        self._frame_count += 1

        if self._accumulator >= 1.0:
            self.fps = self._frame_count
            self._frame_count = 0
            self._accumulator = 0.0

        return self.fps