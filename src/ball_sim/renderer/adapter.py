# MIT License (see LICENSE)
"""
Rendering sinks for simulation output.

The core never draws. It hands a rendering sink presentation-space values
produced by the Camera: a filled circle (center, radius, RGBA color) per
body and free text (for example an FPS counter). A windowed backend only has
to implement the four primitive methods of RendererAdapter.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..types import Color

if TYPE_CHECKING:
    from ..camera import Camera
    from ..scene import Scene


class RendererAdapter(ABC):
    """
    Abstract base class for rendering sinks.

    Usage:
        renderer.begin_frame(scene.time)
        for body in scene.bodies:
            renderer.draw_circle(camera.project(body.position),
                                 camera.scale(body.radius), body.color)
        renderer.draw_text("FPS: 120", 10, 10, 10, (255, 0, 0, 255))
        renderer.end_frame()

    Or use the convenience method render_scene().
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_circle(self, center: np.ndarray, radius: float, color: Color) -> None:
        """
        Draw a filled circle.

        Args:
            center: Presentation-space center.
            radius: Presentation-space radius.
            color: RGBA color.
        """
        ...

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        """Draw a text string at a pixel position with a point size."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_scene(self, scene: "Scene", camera: "Camera") -> None:
        """Draw every ball of the scene through the camera, as one frame."""
        self.begin_frame(scene.time)
        self.draw_bodies(scene, camera)
        self.end_frame()

    def draw_bodies(self, scene: "Scene", camera: "Camera") -> None:
        for body in scene.bodies:
            self.draw_circle(camera.project(body.position), camera.scale(body.radius), body.color)


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and headless runs.

    Output:
        === Frame t=0.0083 ===
        circle @ (120.00, 360.00) r=35.00 rgba=(12, 200, 41, 255)
        text 'FPS: 120' @ (10, 10) size=10
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_circle(self, center: np.ndarray, radius: float, color: Color) -> None:
        self.output.write(
            f"circle @ ({center[0]:.2f}, {center[1]:.2f}) r={radius:.2f} rgba={tuple(color)}\n"
        )

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        self.output.write(f"text {text!r} @ ({x}, {y}) size={size}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_circle(self, center: np.ndarray, radius: float, color: Color) -> None:
        pass

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every draw call per frame.

    Example:
        renderer = BufferedRenderer()
        run(scene, clock, renderer, camera, FrameLimit(100))
        for frame in renderer.frames:
            print(frame["time"], len(frame["circles"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "circles": [],
            "texts": [],
        }

    def draw_circle(self, center: np.ndarray, radius: float, color: Color) -> None:
        if self._current_frame is None:
            return
        self._current_frame["circles"].append({
            "center": [float(center[0]), float(center[1])],
            "radius": float(radius),
            "color": tuple(color),
        })

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        if self._current_frame is None:
            return
        self._current_frame["texts"].append({
            "text": text,
            "position": (x, y),
            "size": size,
            "color": tuple(color),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
