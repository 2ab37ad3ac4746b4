# MIT License (see LICENSE)
"""
Rendering sinks and input sources.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text output for debugging and headless runs.
    - NullRenderer: No-op renderer for benchmarks.
    - BufferedRenderer: Records draw calls per frame.
    - InputSource / FrameLimit: The "should the application exit" query.

The physics engine has no rendering dependency; these adapters are optional.

Typical usage:
    from ball_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_scene(scene, camera)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)
from .input import InputSource, FrameLimit

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "InputSource",
    "FrameLimit",
]
