# MIT License (see LICENSE)
"""
Frame clock.

Clock.tick() returns the time elapsed since the previous tick. With a frame
cap it first waits until at least the cap period has passed, yielding the
processor and sleeping in 1 ms increments, and then returns the *actual*
elapsed time (possibly more than the cap). The simulation is always stepped
with the real dt, so capping the frame rate neither adds nor removes energy.

The wait cannot be cancelled; it always completes before tick() returns.
"""
from __future__ import annotations
import time
from typing import Callable

from .config import SimConfig, fps_to_period

# Sleep increment of the capped wait, in seconds.
WAIT_STEP: float = 1e-3


class Clock:
    """
    Elapsed-time source for the simulation loop.

    Attributes:
        frame_cap: Minimum frame period in seconds, or None for uncapped.

    Args:
        frame_cap: See above.
        timer: Monotonic time source in seconds (time.perf_counter).
        sleeper: Blocking sleep in seconds (time.sleep).
    """

    def __init__(
        self,
        frame_cap: float | None = None,
        timer: Callable[[], float] = time.perf_counter,
        sleeper: Callable[[float], None] = time.sleep,
    ):
        if frame_cap is not None and frame_cap < 0:
            raise ValueError(f"frame_cap must be non-negative, got {frame_cap}")
        self.frame_cap = frame_cap
        self._timer = timer
        self._sleep = sleeper
        self.prev_tick = timer()

    @classmethod
    def from_fps(cls, fps: float, **kwargs) -> "Clock":
        """Clock capped at fps frames per second; fps <= 0 means uncapped."""
        return cls(fps_to_period(fps), **kwargs)

    @classmethod
    def from_config(cls, config: SimConfig, **kwargs) -> "Clock":
        """Clock using the frame cap of a SimConfig."""
        return cls(config.frame_cap, **kwargs)

    def tick(self) -> float:
        """Seconds since the previous tick, honouring the frame cap."""
        if self.frame_cap is not None:
            return self.tick_capped(self.frame_cap)
        return self.tick_uncapped()

    def tick_uncapped(self) -> float:
        now = self._timer()
        dt = now - self.prev_tick
        self.prev_tick = now
        return dt

    def tick_capped(self, cap: float) -> float:
        now = self._timer()
        delta = now - self.prev_tick

        while delta < cap:
            self._sleep(0)  # let the OS reschedule other work
            self._sleep(WAIT_STEP)

            now = self._timer()
            delta = now - self.prev_tick

        self.prev_tick = now
        return delta
