# MIT License (see LICENSE)
"""
Conserved quantities of a ball population.

Elastic ball-ball collisions conserve both quantities exactly; gravity, wall
damping and sleeping (which zeroes velocity) do not. Used by tests and the
benchmark to check the collision response.
"""
from __future__ import annotations
import numpy as np

from .types import Body


def kinetic_energy(bodies: list[Body]) -> float:
    """
    Total kinetic energy T = Σ 0.5·m·v² of the dynamic bodies.
    """
    ke = 0.0
    for b in bodies:
        if b.is_static:
            continue
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """
    Total linear momentum P = Σ m·v of the dynamic bodies.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        if b.is_static:
            continue
        p += b.mass * b.velocity
    return p
