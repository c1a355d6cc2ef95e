"""Refresh loop that samples telemetry and repaints the display."""

from __future__ import annotations

from enum import Enum
import logging
import time
from typing import Callable

from pisysinfo.data.samples import MetricSampler
from pisysinfo.display.surface import PixelSurface
from pisysinfo.rendering.composer import compose_frame
from pisysinfo.rendering.frame_data import DisplayFrame

logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    CLEARING = "clearing"
    SAMPLING = "sampling"
    FORMATTING = "formatting"
    COMMITTING = "committing"
    SLEEPING = "sleeping"


class RefreshLoop:
    """Single-threaded clear, sample, format, commit, sleep cycle.

    Reader failures only degrade their own field; they are handled inside
    the readers and never reach this loop. Errors from the display itself
    propagate, since nothing else can write to it.
    """

    def __init__(
        self,
        display: PixelSurface,
        sampler: MetricSampler,
        interval_seconds: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval_seconds}.")
        self._display = display
        self._sampler = sampler
        self._interval_seconds = interval_seconds
        self._sleep = sleep
        self._state = LoopState.IDLE
        self._iterations = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def iterations(self) -> int:
        return self._iterations

    def run_once(self) -> DisplayFrame:
        """Run one iteration and return the frame that was committed."""
        self._state = LoopState.CLEARING
        self._display.clear()

        self._state = LoopState.SAMPLING
        samples = self._sampler.sample()

        self._state = LoopState.FORMATTING
        frame = compose_frame(samples)

        self._state = LoopState.COMMITTING
        for line in frame.lines:
            self._display.draw_text(line.x, line.y, line.text)
        self._display.commit()

        self._iterations += 1
        logger.debug("Frame %d committed: %s", self._iterations, frame.texts)
        return frame

    def run_forever(self, max_iterations: int | None = None) -> None:
        """Repaint every interval until interrupted or max_iterations is hit."""
        completed = 0
        while max_iterations is None or completed < max_iterations:
            self.run_once()
            completed += 1
            self._state = LoopState.SLEEPING
            self._sleep(self._interval_seconds)
        self._state = LoopState.IDLE


__all__ = ["LoopState", "RefreshLoop"]
