# MIT License (see LICENSE)
"""
Default tunable values used throughout the simulation.

Units are screen-sized "simulation units" (one unit maps to one pixel under
the default camera), so gravity is expressed in units/s² rather than m/s².
These are only defaults: every one of them can be overridden through
SimConfig (see config.py).
"""
from __future__ import annotations

import numpy as np

# Uniform gravitational acceleration, pointing toward -y (down in world space).
DEFAULT_GRAVITY: tuple[float, float] = (0.0, -980.0)

# Fraction of velocity kept (and negated) after bouncing off an arena wall.
# 1.0 is a perfectly elastic wall.
DEFAULT_DAMPING: float = 1.0

# Speed below which a frame counts towards putting a body to sleep.
FREEZING_THRESHOLD: float = 1e-4

# Consecutive still frames before a body sleeps; also the budget restored
# when a sleeping body is knocked awake.
WAKE_BUDGET: int = 10

# Overlap tolerance for contact tests.
EPSILON: float = float(np.finfo(np.float64).eps)

# Target frame rate for the capped clock. <= 0 disables the cap.
FPS_CAP: float = 120.0

# Default arena (left, bottom, right, top).
ARENA: tuple[float, float, float, float] = (0.0, 0.0, 640.0, 480.0)
