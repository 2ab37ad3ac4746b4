# MIT License (see LICENSE)
"""
Simulation configuration.

SimConfig gathers every tunable the step driver depends on (gravity, wall
damping, sleep thresholds, overlap tolerance, frame cap, arena and solver
mode) so a Scene can be built with a deterministic test configuration
instead of relying on module-level constants.

JSON Schema Overview:
---------------------
{
  "gravity": [float, float],          # Default: [0.0, -980.0]
  "damping": float,                   # Wall restitution, default: 1.0
  "freezing_threshold": float,        # Default: 1e-4
  "wake_budget": int,                 # Default: 10
  "epsilon": float,                   # Default: float64 machine epsilon
  "frame_cap": float | null,          # Seconds per frame, default: 1/120
  "boundary": [l, b, r, t],           # Default: [0, 0, 640, 480]
  "solver": "snapshot" | "sequential"
}
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field, fields, replace
from typing import Any

from .constants import (
    ARENA,
    DEFAULT_DAMPING,
    DEFAULT_GRAVITY,
    EPSILON,
    FPS_CAP,
    FREEZING_THRESHOLD,
    WAKE_BUDGET,
)
from .types import Boundary

SOLVERS = ("snapshot", "sequential")


def fps_to_period(fps: float) -> float | None:
    """Frame period in seconds for a target frame rate; None when fps <= 0."""
    return 1.0 / fps if fps > 0 else None


@dataclass(frozen=True)
class SimConfig:
    """
    Tunable parameters for a simulation run.

    Attributes:
        gravity: Uniform acceleration [gx, gy] in units/s².
        damping: Fraction of velocity kept after a wall bounce (1.0 = elastic).
        freezing_threshold: Speed below which a frame counts as still.
        wake_budget: Still frames before sleep, and the value restored on wake.
        epsilon: Overlap tolerance for contact tests.
        frame_cap: Minimum frame period in seconds, or None for uncapped.
        boundary: Arena rectangle used for containment.
        solver: "snapshot" (two-phase, order independent) or "sequential"
                (in-place, index order).
    """
    gravity: tuple[float, float] = DEFAULT_GRAVITY
    damping: float = DEFAULT_DAMPING
    freezing_threshold: float = FREEZING_THRESHOLD
    wake_budget: int = WAKE_BUDGET
    epsilon: float = EPSILON
    frame_cap: float | None = field(default_factory=lambda: fps_to_period(FPS_CAP))
    boundary: Boundary = field(default_factory=lambda: Boundary(*ARENA))
    solver: str = "snapshot"

    def __post_init__(self) -> None:
        if self.solver not in SOLVERS:
            raise ValueError(f"Unknown solver: {self.solver}")
        if self.wake_budget <= 0:
            raise ValueError(f"wake_budget must be positive, got {self.wake_budget}")
        if self.frame_cap is not None and self.frame_cap < 0:
            raise ValueError(f"frame_cap must be non-negative, got {self.frame_cap}")
        if self.freezing_threshold < 0:
            raise ValueError(f"freezing_threshold must be non-negative, got {self.freezing_threshold}")
        object.__setattr__(self, "gravity", (float(self.gravity[0]), float(self.gravity[1])))

    def copy(self, **changes: Any) -> "SimConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimConfig":
        """
        Build a config from plain JSON-like data.

        Missing keys keep their defaults.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs = dict(data)
        if "gravity" in kwargs:
            kwargs["gravity"] = tuple(kwargs["gravity"])
        if "boundary" in kwargs:
            kwargs["boundary"] = Boundary(*kwargs["boundary"])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        b = self.boundary
        return {
            "gravity": list(self.gravity),
            "damping": self.damping,
            "freezing_threshold": self.freezing_threshold,
            "wake_budget": self.wake_budget,
            "epsilon": self.epsilon,
            "frame_cap": self.frame_cap,
            "boundary": [b.left, b.bottom, b.right, b.top],
            "solver": self.solver,
        }


def load_config(path: str) -> SimConfig:
    """
    Load a SimConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: On unknown keys or invalid values.
    """
    with open(path, "r", encoding="utf-8") as f:
        return SimConfig.from_dict(json.load(f))
