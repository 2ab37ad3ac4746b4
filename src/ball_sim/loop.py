# MIT License (see LICENSE)
"""
The frame loop tying clock, scene, camera, renderer and input together.

Per frame:
    1. Ask the input source whether to stop.
    2. dt = clock.tick()
    3. scene.step(dt)
    4. Draw every ball through the camera, plus an FPS counter.
"""
from __future__ import annotations
import logging

from .camera import Camera
from .clock import Clock
from .renderer.adapter import RendererAdapter
from .renderer.input import InputSource
from .scene import Scene
from .types import Color

logger = logging.getLogger(__name__)

FPS_TEXT_COLOR: Color = (230, 41, 55, 255)


def fps_text(dt: float) -> str:
    """FPS counter label for a frame that took dt seconds."""
    fps = int(1.0 / dt) if dt > 0 else 0
    return f"FPS: {fps}"


def run(
    scene: Scene,
    clock: Clock,
    renderer: RendererAdapter,
    camera: Camera,
    input_source: InputSource,
) -> int:
    """
    Run the simulation until the input source asks to stop.

    Returns:
        Number of frames stepped.
    """
    logger.info(
        "starting loop: %d bodies, %d planes, frame cap %s",
        len(scene.bodies), len(scene.planes), clock.frame_cap,
    )
    frames = 0
    elapsed = 0.0

    while not input_source.should_close():
        dt = clock.tick()
        scene.step(dt)

        renderer.begin_frame(scene.time)
        renderer.draw_bodies(scene, camera)
        renderer.draw_text(fps_text(dt), 10, 10, 10, FPS_TEXT_COLOR)
        renderer.end_frame()

        frames += 1
        elapsed += dt

    mean_fps = frames / elapsed if elapsed > 0 else 0.0
    logger.info(
        "loop stopped after %d frames (%.1f fps mean, %d asleep)",
        frames, mean_fps, scene.sleeping_count,
    )
    return frames
