"""Frames-per-second counter averaged over recent frames."""

from __future__ import annotations

import math
import time
from collections import deque
from typing import Callable, Deque, Optional

STORED_FRAMES = 10


def _milliseconds() -> int:
    return int(time.monotonic() * 1000)


class FPSCounter:
    """Averages the last ten frame times; ``clock`` returns milliseconds."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _milliseconds
        self._frame_times: Deque[int] = deque(maxlen=STORED_FRAMES)
        self._last = self._clock()
        self.fps = 0.0

    def tick(self) -> float:
        """Record the end of a frame and return the updated frame rate."""
        now = self._clock()
        self._frame_times.append(now - self._last)
        self._last = now
        average = sum(self._frame_times) / len(self._frame_times)
        self.fps = math.inf if average == 0 else 1000.0 / average
        return self.fps