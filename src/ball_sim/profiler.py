# MIT License (see LICENSE)
"""
Lightweight timing of simulation phases.

Scene.step() reports the time spent integrating, detecting contacts,
resolving them, containing bodies and updating sleep state when a Profiler
is attached. Timings use time.perf_counter.

Example:
    profiler = Profiler()
    scene = Scene(profiler=profiler)
    scene.step(1 / 120)
    print(profiler.stats.summary()["contacts"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named phase."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def clear(self) -> None:
        self.samples.clear()

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-phase statistics.

        Returns:
            Dict mapping phase name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'total_ms': summed time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * total / n,
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Context-manager based timer for named phases."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)


def section(profiler: Profiler | None, name: str) -> ContextManager[None]:
    """Time `name` on profiler, or do nothing when no profiler is attached."""
    if profiler is None:
        return nullcontext()
    return profiler.section(name)
