# MIT License (see LICENSE)
"""
ball_sim - A real-time 2D simulation of bouncing balls.

This package provides the simulation core: circular bodies under uniform
gravity, elastic collisions, containment in a rectangular arena, a sleep
state for bodies at rest, and a frame clock that can be rate-limited.

Main entry points:
    - Scene: The simulation world and its per-frame step.
    - SimConfig: Every tunable the step depends on.
    - Body: A ball (Circle shape) or a static ground line (Plane shape).
    - Clock: Elapsed time per frame, optionally capped.
    - Camera: Simulation space to screen space mapping.

Submodules:
    - collision: Contact detection, response and arena containment.
    - renderer: Rendering sinks and input sources.
    - loop: The frame loop wiring everything together.
    - seeding: Random scene population.

Example:
    from ball_sim import Scene, Body, Circle

    scene = Scene()
    scene.add_body(Body(Circle(20.0), position=(320, 240)))
    scene.step(1 / 120)
"""
from .scene import Scene
from .config import SimConfig, load_config
from .types import Body, Boundary, Circle, Plane, SleepState, WakeBudget
from .clock import Clock
from .camera import Camera

__all__ = [
    # Core simulation
    "Scene",
    "SimConfig",
    "load_config",
    "Body",
    "Boundary",
    "SleepState",
    "WakeBudget",
    # Shapes
    "Circle",
    "Plane",
    # Presentation
    "Clock",
    "Camera",
]
