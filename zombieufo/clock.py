"""Game clock measuring ticks in milliseconds, with pause and frame capping."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable

from .gamedata import Gamedata


class ClockError(RuntimeError):
    """Raised when frame-rate figures are requested in an invalid state."""


def _millisecond_timer() -> Callable[[], int]:
    origin = time.monotonic()
    return lambda: int((time.monotonic() - origin) * 1000)


class Clock:
    """Tracks running time, frames and frame-rate samples."""

    def __init__(
        self, gamedata: Gamedata, now: Callable[[], int] | None = None
    ) -> None:
        self.frame_cap_on = gamedata.get_bool("frameCapOn")
        self.period = gamedata.get_int("period")
        frame_max = gamedata.get_int("frameMax")
        self._samples: deque[int] = deque(
            maxlen=frame_max if frame_max >= 0 else None
        )
        self._now = now if now is not None else _millisecond_timer()
        self.started = False
        self.paused = False
        self.frames = 0
        self._time_at_start = 0
        self._time_at_pause = 0
        self._prev_ticks = 0
        self.start()

    def ticks(self) -> int:
        """Milliseconds since the clock started, frozen while paused."""
        if self.paused:
            return self._time_at_pause
        return self._now() - self._time_at_start

    def seconds(self) -> int:
        return self.ticks() // 1000

    def elapsed_ticks(self) -> int:
        """Ticks since the last frame, or 0 if paused or under the cap."""
        if self.paused:
            return 0
        current = self.ticks()
        elapsed = current - self._prev_ticks
        if self.frame_cap_on and elapsed < self.period:
            return 0
        self._prev_ticks = current
        return elapsed

    def increment_frame(self) -> None:
        if not self.paused:
            self.frames += 1

    def add_fps(self, fps: int) -> None:
        """Record a frame-rate sample, keeping only the most recent ones."""
        self._samples.append(fps)

    def fps(self) -> int:
        """Frames per whole second since the clock started."""
        seconds = self.seconds()
        if seconds > 0:
            return self.frames // seconds
        if self.ticks() > 5000 and self.frames == 0:
            raise ClockError("Can't get fps if you don't increment the frames")
        return 0

    def avg_fps(self) -> int:
        """Average of the recorded frame-rate samples."""
        if self.ticks() > 5000 and self.frames == 0:
            raise ClockError("Can't get fps if you don't increment the frames")
        if not self._samples:
            raise ClockError("No frame-rate samples recorded")
        return sum(self._samples) // len(self._samples)

    def start(self) -> None:
        """Reset and start the clock."""
        self.started = True
        self.paused = False
        self.frames = 0
        self._time_at_start = self._time_at_pause = self._now()
        self._prev_ticks = 0

    def pause(self) -> None:
        if self.started and not self.paused:
            self._time_at_pause = self._now() - self._time_at_start
            self.paused = True

    def unpause(self) -> None:
        if self.started and self.paused:
            self._time_at_start = self._now() - self._time_at_pause
            self.paused = False