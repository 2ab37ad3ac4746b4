# MIT License (see LICENSE)
"""
Mapping from simulation space to presentation (screen) space.

    project(p) = p * scale_vector + position
    scale(s)   = s * scale

The scale vector is the uniform scale multiplied by two independent sign
flips, one per axis. Screen coordinates usually grow downwards while the
simulation's y axis points up, so the default scene camera is

    Camera((0, 480), 1.0).invert_v()

No physics code reads the camera; it is applied after the frame has been
stepped.
"""
from __future__ import annotations

import numpy as np

from .util import f64


class Camera:
    """
    Translation, per-axis flip and uniform scale.

    Attributes:
        position: Presentation-space offset of the simulation origin.
    """

    def __init__(self, position: np.ndarray | tuple[float, float] = (0.0, 0.0), scale: float = 1.0):
        self.position = f64(position)
        self._scale = float(scale)
        self._flip = np.ones(2, dtype=np.float64)

    @property
    def scale_factor(self) -> float:
        return self._scale

    @property
    def scale_v(self) -> np.ndarray:
        """Per-axis scale: uniform scale times the axis flips."""
        return self._flip * self._scale

    def set_position(self, position: np.ndarray | tuple[float, float]) -> None:
        self.position = f64(position)

    def set_scale(self, scale: float) -> None:
        """Change the uniform scale. Axis flips are kept."""
        self._scale = float(scale)

    def invert_v(self) -> "Camera":
        """Flip the vertical axis. Returns self so calls can be chained."""
        self._flip[1] *= -1.0
        return self

    def invert_h(self) -> "Camera":
        """Flip the horizontal axis. Returns self so calls can be chained."""
        self._flip[0] *= -1.0
        return self

    def project(self, v: np.ndarray | tuple[float, float]) -> np.ndarray:
        """Simulation-space point to presentation space."""
        return f64(v) * self.scale_v + self.position

    def unproject(self, v: np.ndarray | tuple[float, float]) -> np.ndarray:
        """
        Presentation-space point back to simulation space.

        Raises:
            ZeroDivisionError: If the scale is zero.
        """
        if self._scale == 0.0:
            raise ZeroDivisionError("Camera scale is zero")
        return (f64(v) - self.position) / self.scale_v

    def scale(self, v: float) -> float:
        """Simulation-space length to presentation space."""
        return v * self._scale

    def unscale(self, v: float) -> float:
        if self._scale == 0.0:
            raise ZeroDivisionError("Camera scale is zero")
        return v / self._scale
