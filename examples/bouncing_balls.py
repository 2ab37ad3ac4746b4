# examples/bouncing_balls.py
"""
Headless version of the bouncing balls demo: five random balls in a
640x480 arena, capped at 120 FPS, printed as text for two seconds.
"""
import logging

import numpy as np

from ball_sim import Camera, Clock, Scene
from ball_sim.constants import FPS_CAP
from ball_sim.loop import run
from ball_sim.renderer import DebugRenderer, FrameLimit
from ball_sim.seeding import populate

logging.basicConfig(level=logging.INFO)

scene = Scene()
populate(scene, 5, radius_range=(20.0, 70.0), rng=np.random.default_rng(2024))

camera = Camera((0.0, 480.0), 1.0).invert_v()
clock = Clock.from_config(scene.config)

run(scene, clock, DebugRenderer(), camera, FrameLimit(int(2 * FPS_CAP)))
