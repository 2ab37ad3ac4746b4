# MIT License (see LICENSE)
"""
Random scene population.

Fills a scene with balls of random radius, position and color. Positions are
drawn so that every ball starts fully inside the arena. Balls start at rest
and awake. Randomness comes from a numpy Generator so runs can be reproduced
from a seed.
"""
from __future__ import annotations

import numpy as np

from .scene import Scene
from .types import Body, Circle, Color

DEFAULT_COUNT = 5
DEFAULT_RADIUS_RANGE: tuple[float, float] = (20.0, 70.0)


def random_color(rng: np.random.Generator) -> Color:
    """Random opaque RGB color."""
    r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
    return (r, g, b, 255)


def populate(
    scene: Scene,
    count: int = DEFAULT_COUNT,
    radius_range: tuple[float, float] = DEFAULT_RADIUS_RANGE,
    rng: np.random.Generator | None = None,
) -> list[Body]:
    """
    Add `count` random balls to the scene.

    Args:
        scene: Scene to populate. Its config.boundary bounds the positions.
        count: Number of balls.
        radius_range: (min, max) radius.
        rng: Random generator (np.random.default_rng() when omitted).

    Returns:
        The created bodies, in id order.

    Raises:
        ValueError: If the radius range is empty or a ball cannot fit.
    """
    lo, hi = radius_range
    if lo <= 0 or hi < lo:
        raise ValueError(f"Invalid radius range: {radius_range}")

    arena = scene.config.boundary
    if 2 * hi > min(arena.width, arena.height):
        raise ValueError(f"Radius {hi} does not fit in arena {arena}")

    rng = rng if rng is not None else np.random.default_rng()
    balls = []
    for _ in range(count):
        radius = float(rng.uniform(lo, hi))
        center = (
            float(rng.uniform(arena.left + radius, arena.right - radius)),
            float(rng.uniform(arena.bottom + radius, arena.top - radius)),
        )
        ball = Body(Circle(radius), position=center, color=random_color(rng))
        scene.add_body(ball)
        balls.append(ball)
    return balls
