# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Provides low-level 2D vector operations used by the collision code,
including normalization with an explicit fallback, perpendiculars and
array conversion helpers. All functions operate on 2D vectors represented
as numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, fallback: np.ndarray | None = None, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Normalizing a zero-length vector is undefined. When |v| < eps the
    fallback direction is returned instead (the +x axis when none is given),
    so callers never see NaN.
    """
    n = norm(v)
    if n < eps:
        if fallback is None:
            return np.array([1.0, 0.0], dtype=np.float64)
        return f64(fallback)
    return v / n


def perp(v: np.ndarray) -> np.ndarray:
    """Counterclockwise perpendicular: (x, y) -> (-y, x)."""
    return np.array([-v[1], v[0]], dtype=np.float64)


def direction(angle: float) -> np.ndarray:
    """Unit vector (cos θ, sin θ) for an angle in radians."""
    return np.array([np.cos(angle), np.sin(angle)], dtype=np.float64)
