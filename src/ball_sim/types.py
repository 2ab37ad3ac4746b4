# MIT License (see LICENSE)
"""
Core type definitions for the 2D ball simulation.

Defines the fundamental data structures:
- Shape variants (Circle, Plane) used for collision dispatch
- WakeBudget: the Active/Asleep state machine of a body
- Body: the simulated entity with position, velocity, mass, etc.
- Boundary: the axis-aligned arena bodies are contained in

Motion is plain Newtonian mechanics under uniform gravity, integrated with
semi-implicit Euler:
  v += g·dt
  x += v·dt
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .constants import WAKE_BUDGET
from .util import f64, norm, direction


# Opaque RGBA tag, never read by the physics code.
Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)


# =============================================================================
# Shape Definitions
# =============================================================================

@dataclass(frozen=True)
class Circle:
    """
    Circular shape defined by radius.

    Attributes:
        radius: Distance from center to edge in simulation units.
    """
    radius: float


@dataclass(frozen=True)
class Plane:
    """
    Infinite line through the owning body's position.

    Attributes:
        rotation: Angle in radians of the line's normal, measured
                  counterclockwise from +x. A floor has rotation π/2.
    """
    rotation: float

    @property
    def normal(self) -> np.ndarray:
        """Unit normal (cos θ, sin θ)."""
        return direction(self.rotation)


# Union type for shape dispatch
Shape2D = Circle | Plane


# =============================================================================
# Sleep State
# =============================================================================

class SleepState(Enum):
    ACTIVE = "active"
    ASLEEP = "asleep"


@dataclass
class WakeBudget:
    """
    Counts down consecutive still frames before a body falls asleep.

    A frame is "still" when the body's speed is below the freezing
    threshold. Each still frame spends one unit of budget; the body falls
    asleep on the frame that spends the last one. Any frame at or above the
    threshold refills the budget. Waking refills it too.

    Attributes:
        budget: Still frames allowed before sleeping (and the refill value).
        remaining: Budget left in the current run of still frames.
        state: Current SleepState.
    """
    budget: int = WAKE_BUDGET
    remaining: int | None = None
    state: SleepState = SleepState.ACTIVE

    def __post_init__(self) -> None:
        if self.budget <= 0:
            raise ValueError(f"Wake budget must be positive, got {self.budget}")
        if self.remaining is None:
            self.remaining = self.budget

    @property
    def asleep(self) -> bool:
        return self.state is SleepState.ASLEEP

    def update(self, speed: float, threshold: float) -> bool:
        """
        Account for one frame of an active body.

        Returns:
            True if the body fell asleep on this frame.
        """
        if self.asleep:
            return False
        if speed < threshold:
            self.remaining -= 1
            if self.remaining <= 0:
                self.state = SleepState.ASLEEP
                return True
        else:
            self.remaining = self.budget
        return False

    def wake(self) -> None:
        self.state = SleepState.ACTIVE
        self.remaining = self.budget

    def sleep(self) -> None:
        self.state = SleepState.ASLEEP
        self.remaining = 0

    def reset(self, budget: int) -> None:
        """Change the budget size, keeping the current state."""
        if budget <= 0:
            raise ValueError(f"Wake budget must be positive, got {budget}")
        self.budget = budget
        if not self.asleep:
            self.remaining = budget


# =============================================================================
# Body
# =============================================================================

@dataclass(eq=False)
class Body:
    """
    A simulated body: a dynamic ball (Circle) or a static ground line (Plane).

    Attributes:
        shape: Collision geometry (Circle or Plane).
        mass: Mass of a Circle body. Defaults to its radius. Plane bodies
              are static and always have mass 0.
        position: Center [x, y] (or a point on the line for a Plane).
        velocity: Linear velocity [vx, vy] in units/s.
        color: RGBA tag for the rendering sink.
        wake: Active/Asleep state machine.
        id: Unique identifier assigned by Scene.add_body().

    Note:
        Position and velocity are converted to float64 numpy arrays on init.
        A Circle body must have a positive radius and mass.
    """
    shape: Shape2D
    mass: float | None = None
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    color: Color = BLACK
    wake: WakeBudget = field(default_factory=WakeBudget)
    id: int = -1

    def __post_init__(self) -> None:
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)

        if isinstance(self.shape, Circle):
            if self.shape.radius <= 0:
                raise ValueError(f"Circle radius must be positive, got {self.shape.radius}")
            if self.mass is None:
                self.mass = float(self.shape.radius)
            if self.mass <= 0:
                raise ValueError(f"Circle mass must be positive, got {self.mass}")
        elif isinstance(self.shape, Plane):
            self.mass = 0.0
            self.velocity[:] = 0.0
        else:
            raise TypeError(f"Unknown shape type: {type(self.shape)}")

    @property
    def radius(self) -> float:
        if isinstance(self.shape, Circle):
            return self.shape.radius
        raise TypeError(f"{type(self.shape).__name__} has no radius")

    @property
    def is_static(self) -> bool:
        return isinstance(self.shape, Plane)

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m). Returns 0 for static bodies."""
        return 0.0 if self.is_static else 1.0 / self.mass

    @property
    def sleeping(self) -> bool:
        return self.wake.asleep

    @property
    def speed(self) -> float:
        return norm(self.velocity)

    def wake_up(self) -> None:
        """Force the body awake with a full wake budget."""
        self.wake.wake()

    def sleep(self) -> None:
        """Force the body to sleep (zeroes velocity)."""
        if not self.is_static:
            self.wake.sleep()
            self.velocity.fill(0.0)


# =============================================================================
# Arena
# =============================================================================

@dataclass(frozen=True)
class Boundary:
    """
    Axis-aligned rectangular arena, immutable for a run.

    Attributes:
        left, bottom, right, top: Edges in simulation units.
    """
    left: float
    bottom: float
    right: float
    top: float

    def __post_init__(self) -> None:
        if self.right <= self.left or self.top <= self.bottom:
            raise ValueError(
                f"Boundary must have positive area, got "
                f"({self.left}, {self.bottom}, {self.right}, {self.top})"
            )

    @property
    def center(self) -> np.ndarray:
        return np.array(
            [(self.right + self.left) / 2.0, (self.top + self.bottom) / 2.0],
            dtype=np.float64,
        )

    @property
    def half_extents(self) -> np.ndarray:
        return np.array(
            [(self.right - self.left) / 2.0, (self.top - self.bottom) / 2.0],
            dtype=np.float64,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom
