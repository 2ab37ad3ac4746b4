# MIT License (see LICENSE)
"""
Collision response for overlapping bodies.

Resolution has two parts:
- Positional correction: the penetration vector is split in half and the
  bodies are pushed apart by equal and opposite amounts (not mass weighted).
  A static partner does not move, so the dynamic body takes the whole shift.
- Velocity correction: a 1D elastic collision along the contact normal.
  Each velocity is split into normal and tangential components; the
  tangential parts pass through unchanged and the normal parts follow

      v_a' = ((v_a·n)(m_a − m_b) + 2·m_b·(v_b·n)) / (m_a + m_b)
      v_b' = ((v_b·n)(m_b − m_a) + 2·m_a·(v_a·n)) / (m_a + m_b)

  which conserves momentum and kinetic energy along n. Against a static
  partner (infinite mass) the normal component is reflected.

Both parts are computed by compute_response() without touching the bodies,
so a solver can gather every response of a frame before applying any.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from ..constants import FREEZING_THRESHOLD
from ..types import Body
from ..util import norm2, unit, perp

logger = logging.getLogger(__name__)


@dataclass
class Response:
    """
    Corrections for one colliding pair.

    Attributes:
        shift_a: Displacement to add to a.position.
        shift_b: Displacement to add to b.position.
        velocity_a: New velocity of a.
        velocity_b: New velocity of b.
    """
    shift_a: np.ndarray
    shift_b: np.ndarray
    velocity_a: np.ndarray
    velocity_b: np.ndarray


def _normal_velocities(a: Body, b: Body, va: float, vb: float) -> tuple[float, float]:
    """Post-collision normal speeds for the elastic exchange."""
    if a.is_static and b.is_static:
        return va, vb
    if b.is_static:
        return 2.0 * vb - va, vb
    if a.is_static:
        return va, 2.0 * va - vb

    ma, mb = a.mass, b.mass
    total_mass = ma + mb
    va_new = (va * (ma - mb) + 2.0 * mb * vb) / total_mass
    vb_new = (vb * (mb - ma) + 2.0 * ma * va) / total_mass
    return va_new, vb_new


def _contact_axis(a: Body, b: Body) -> np.ndarray:
    """Collision axis of a touching pair, from the shapes rather than the overlap."""
    if b.is_static:
        return b.shape.normal
    if a.is_static:
        return a.shape.normal
    return a.position - b.position


def compute_response(
    a: Body,
    b: Body,
    penetration: np.ndarray,
    normal: np.ndarray | None = None,
) -> Response:
    """
    Compute positional and velocity corrections without mutating the bodies.

    Args:
        a: First body.
        b: Second body.
        penetration: Penetration vector of a against b (points from b
                     toward a, length = overlap depth).
        normal: Collision axis. Derived from the penetration vector when
                omitted, or from the geometry when that vector is zero
                (bodies exactly touching). Only the axis matters, not its sign.

    Returns:
        The Response to apply.
    """
    # Static collision
    half_d = penetration / 2.0
    if a.is_static and b.is_static:
        shift_a = np.zeros(2, dtype=np.float64)
        shift_b = np.zeros(2, dtype=np.float64)
    elif b.is_static:
        shift_a = penetration.copy()
        shift_b = np.zeros(2, dtype=np.float64)
    elif a.is_static:
        shift_a = np.zeros(2, dtype=np.float64)
        shift_b = -penetration
    else:
        shift_a = half_d
        shift_b = -half_d

    # Dynamic collision
    if normal is None:
        normal = penetration if norm2(penetration) > 0.0 else _contact_axis(a, b)
    n = unit(normal)
    t = perp(n)

    dot_tan_a = float(np.dot(a.velocity, t))
    dot_tan_b = float(np.dot(b.velocity, t))

    dot_normal_a = float(np.dot(a.velocity, n))
    dot_normal_b = float(np.dot(b.velocity, n))

    normal_a, normal_b = _normal_velocities(a, b, dot_normal_a, dot_normal_b)

    return Response(
        shift_a=shift_a,
        shift_b=shift_b,
        velocity_a=t * dot_tan_a + n * normal_a,
        velocity_b=t * dot_tan_b + n * normal_b,
    )


def wake_if_struck(body: Body, threshold: float = FREEZING_THRESHOLD) -> bool:
    """
    Wake a sleeping body whose speed now exceeds the threshold.

    Returns:
        True if the body was woken.
    """
    if body.sleeping and body.speed > threshold:
        body.wake_up()
        logger.debug("body %d woken by impact (speed %.4g)", body.id, body.speed)
        return True
    return False


def apply_response(
    a: Body,
    b: Body,
    response: Response,
    threshold: float = FREEZING_THRESHOLD,
) -> None:
    """Write a Response into both bodies, then propagate wake-ups."""
    if not a.is_static:
        a.position += response.shift_a
        a.velocity[:] = response.velocity_a
    if not b.is_static:
        b.position += response.shift_b
        b.velocity[:] = response.velocity_b

    wake_if_struck(a, threshold)
    wake_if_struck(b, threshold)


def resolve(
    a: Body,
    b: Body,
    penetration: np.ndarray,
    threshold: float = FREEZING_THRESHOLD,
    normal: np.ndarray | None = None,
) -> Response:
    """
    Resolve a collision in place: separate the pair and exchange momentum.

    Args:
        a: First body (modified in-place).
        b: Second body (modified in-place).
        penetration: Penetration vector of a against b.
        threshold: Speed above which a struck sleeping body wakes up.
        normal: Optional collision axis (see compute_response).

    Returns:
        The Response that was applied.
    """
    response = compute_response(a, b, penetration, normal)
    apply_response(a, b, response, threshold)
    return response
