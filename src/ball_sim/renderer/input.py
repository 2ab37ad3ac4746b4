# MIT License (see LICENSE)
"""
Input/lifecycle sources.

The simulation loop asks its input source once per frame whether the
application should terminate. A windowed backend answers with its
"window close requested" flag; headless runs use FrameLimit.
"""
from __future__ import annotations
from typing import Protocol


class InputSource(Protocol):
    """Anything that can tell the loop to stop."""

    def should_close(self) -> bool:
        ...


class FrameLimit:
    """Requests termination after a fixed number of frames."""

    def __init__(self, frames: int):
        if frames < 0:
            raise ValueError(f"frames must be non-negative, got {frames}")
        self.frames = frames
        self.polled = 0

    def should_close(self) -> bool:
        if self.polled >= self.frames:
            return True
        self.polled += 1
        return False
