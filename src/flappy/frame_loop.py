"""
frame_loop.py: Explicit "next frame" scheduling.

Each frame callback decides whether the loop continues by requesting
the next frame itself. Nothing pending means the loop has halted.
"""

import logging
from typing import Callable, Optional

import pygame

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler:
    """Holds at most one pending frame callback."""

    def __init__(self, fps: int):
        self.fps = fps
        self.frame_count = 0
        self._pending: Optional[FrameCallback] = None
        self._clock: Optional[pygame.time.Clock] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request_frame(self, callback: FrameCallback) -> bool:
        """Schedules callback for the next tick. Returns False if one is already queued."""
        if self._pending is not None:
            return False
        self._pending = callback
        return True

    def cancel(self):
        self._pending = None

    def tick(self) -> bool:
        """Runs the pending callback once. Returns False when the loop is halted."""
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        self.frame_count += 1
        callback()
        return True

    def wait_for_frame(self) -> float:
        """Blocks until the next display frame is due; returns seconds elapsed."""
        if self._clock is None:
            self._clock = pygame.time.Clock()
        return self._clock.tick(self.fps) / 1000.0
