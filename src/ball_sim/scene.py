# MIT License (see LICENSE)
"""
The simulation world and its step driver.

The Scene class acts as the world container and simulation controller.
It manages:
- The population of dynamic balls and the static planes.
- The SimConfig holding every tunable (gravity, damping, thresholds...).
- The per-frame step, which for every active ball:
    1. Integrates gravity and motion (semi-implicit Euler).
    2. Detects and resolves contacts against every other body (O(n²)).
    3. Contains the ball inside the arena.
    4. Updates its sleep state.

Two solvers are available (SimConfig.solver):
    - "snapshot": all contacts of the frame are detected and their responses
      computed against the same post-integration state, then the summed
      corrections are applied. Results do not depend on body order.
    - "sequential": each active ball in index order resolves its contacts
      immediately against the current state of the others.

Structure:
    - User creates a Scene (optionally with a SimConfig).
    - User adds bodies via add_body() / add_plane().
    - User calls scene.step(dt) once per frame.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from .config import SimConfig
from .profiler import Profiler, section
from .types import Body, Plane
from .util import f64
from .collision.contact import Contact, detect_contact
from .collision.response import compute_response, resolve, wake_if_struck
from .collision.boundary import contain

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """
    Ball simulation world.

    Attributes:
        config: Tunable parameters. Treated as immutable during a step.
        profiler: Optional Profiler instance for per-phase timings.
        bodies: Dynamic (Circle) bodies, in id order.
        planes: Static (Plane) bodies.
        time: Simulated time in seconds.
        frame: Number of completed steps.
    """
    config: SimConfig = field(default_factory=SimConfig)
    profiler: Profiler | None = None

    # Internal state
    bodies: list[Body] = field(default_factory=list)
    planes: list[Body] = field(default_factory=list)
    time: float = 0.0
    frame: int = 0

    def __post_init__(self) -> None:
        self._next_id = 0

    def add_body(self, body: Body) -> int:
        """
        Add a body to the simulation.

        Assigns a unique, stable ID and sizes its wake budget from the config.

        Returns:
            The assigned body ID.
        """
        body.id = self._next_id
        self._next_id += 1
        body.wake.reset(self.config.wake_budget)
        if body.is_static:
            self.planes.append(body)
        else:
            self.bodies.append(body)
        return body.id

    def add_plane(self, position: tuple[float, float], rotation: float) -> Body:
        """Add a static ground line through position with normal angle rotation."""
        plane = Body(Plane(rotation), position=position)
        self.add_body(plane)
        return plane

    @property
    def sleeping_count(self) -> int:
        return sum(1 for b in self.bodies if b.sleeping)

    def _integrate(self, body: Body, g: np.ndarray, dt: float) -> None:
        body.velocity += g * dt
        body.position += body.velocity * dt

    def _update_sleep(self, body: Body) -> None:
        if body.wake.update(body.speed, self.config.freezing_threshold):
            body.velocity.fill(0.0)
            logger.debug("body %d fell asleep at frame %d", body.id, self.frame)

    def _contact(self, a: Body, b: Body) -> Contact | None:
        return detect_contact(a, b, self.config.epsilon)

    def _pairs(self):
        """Every pair with at least one active ball, then ball-plane pairs."""
        n = len(self.bodies)
        for i in range(n):
            a = self.bodies[i]
            for j in range(i + 1, n):
                b = self.bodies[j]
                if a.sleeping and b.sleeping:
                    continue
                yield a, b
        for a in self.bodies:
            if a.sleeping:
                continue
            for p in self.planes:
                yield a, p

    def _step_snapshot(self, dt: float) -> None:
        """Two-phase step: read-only detection and response, then apply."""
        cfg = self.config
        prof = self.profiler
        g = f64(cfg.gravity)
        active = [b for b in self.bodies if not b.sleeping]

        with section(prof, "integrate"):
            for b in active:
                self._integrate(b, g, dt)

        with section(prof, "contacts"):
            contacts = []
            for a, b in self._pairs():
                c = self._contact(a, b)
                if c is not None:
                    contacts.append(c)

        with section(prof, "resolve"):
            responses = [
                (c, compute_response(c.a, c.b, c.vector, c.normal)) for c in contacts
            ]

            shift: dict[int, np.ndarray] = {}
            dv: dict[int, np.ndarray] = {}
            touched: dict[int, Body] = {}
            for c, r in responses:
                for body, s, v in ((c.a, r.shift_a, r.velocity_a), (c.b, r.shift_b, r.velocity_b)):
                    if body.is_static:
                        continue
                    if body.id not in touched:
                        touched[body.id] = body
                        shift[body.id] = np.zeros(2, dtype=np.float64)
                        dv[body.id] = np.zeros(2, dtype=np.float64)
                    shift[body.id] += s
                    dv[body.id] += v - body.velocity

            for body_id, body in touched.items():
                body.position += shift[body_id]
                body.velocity += dv[body_id]

            for body in touched.values():
                wake_if_struck(body, cfg.freezing_threshold)

        with section(prof, "contain"):
            moved = {b.id: b for b in active}
            moved.update(touched)
            for b in moved.values():
                contain(b, cfg.boundary, cfg.damping)

        with section(prof, "sleep"):
            for b in active:
                self._update_sleep(b)

    def _step_sequential(self, dt: float) -> None:
        """In-place step: each active ball resolves against the current state."""
        cfg = self.config
        prof = self.profiler
        g = f64(cfg.gravity)

        for body in self.bodies:
            if body.sleeping:
                continue

            with section(prof, "integrate"):
                self._integrate(body, g, dt)

            with section(prof, "resolve"):
                for other in self.bodies:
                    if other.id == body.id:
                        continue
                    c = self._contact(body, other)
                    if c is not None:
                        resolve(body, other, c.vector, cfg.freezing_threshold, normal=c.normal)
                for plane in self.planes:
                    c = self._contact(body, plane)
                    if c is not None:
                        resolve(body, plane, c.vector, cfg.freezing_threshold, normal=c.normal)

            with section(prof, "contain"):
                contain(body, cfg.boundary, cfg.damping)

            with section(prof, "sleep"):
                self._update_sleep(body)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one frame.

        Args:
            dt: Elapsed time in seconds, normally the value of Clock.tick().

        Raises:
            ValueError: If the configured solver is unknown.
        """
        dt = float(dt)

        if self.config.solver == "snapshot":
            self._step_snapshot(dt)
        elif self.config.solver == "sequential":
            self._step_sequential(dt)
        else:
            raise ValueError(f"Unknown solver: {self.config.solver}")

        self.time += dt
        self.frame += 1
