# MIT License (see LICENSE)
"""
Arena containment.

Keeps a circular body inside an axis-aligned Boundary. The free region is the
arena shrunk by the body's radius on every side, so the body's surface (not
its center) respects the walls. Each axis is handled independently.
"""
from __future__ import annotations

import numpy as np

from ..constants import DEFAULT_DAMPING
from ..types import Body, Boundary


def contain(body: Body, boundary: Boundary, damping: float = DEFAULT_DAMPING) -> bool:
    """
    Clamp a body into the arena and bounce it off the walls it crossed.

    For each axis where the body's offset from the arena center exceeds the
    free half-extent, the position is clamped onto the wall (keeping the
    side it is on) and the velocity component along that axis is inverted
    and scaled by damping. The velocity is only reflected while it still
    points out of the arena, which makes the call idempotent.

    Args:
        body: Circle body to contain (modified in-place).
        boundary: The arena.
        damping: Fraction of velocity kept after a bounce (1.0 = elastic).

    Returns:
        True if the body touched a wall.
    """
    mid = boundary.center
    half_size = boundary.half_extents - body.radius

    offset = body.position - mid
    hit = False

    for axis in range(2):
        if abs(offset[axis]) > half_size[axis]:
            side = float(np.sign(offset[axis]))
            body.position[axis] = half_size[axis] * side + mid[axis]
            if body.velocity[axis] * side > 0:
                body.velocity[axis] *= -1.0 * damping
            hit = True

    return hit
