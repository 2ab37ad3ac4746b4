import numpy as np
import pytest
from ball_sim.types import Body, Boundary, Circle
from ball_sim.collision import contain

ARENA = Boundary(0.0, 0.0, 640.0, 480.0)


def test_inside_body_untouched():
    ball = Body(Circle(20.0), position=(100.0, 100.0), velocity=(5.0, -5.0))

    assert not contain(ball, ARENA)
    assert ball.position == pytest.approx([100.0, 100.0])
    assert ball.velocity == pytest.approx([5.0, -5.0])


def test_left_wall_clamps_and_bounces():
    ball = Body(Circle(20.0), position=(-5.0, 100.0), velocity=(-30.0, 10.0))

    assert contain(ball, ARENA)
    # Surface, not center, rests on the wall
    assert ball.position == pytest.approx([20.0, 100.0])
    assert ball.velocity == pytest.approx([30.0, 10.0])


def test_corner_hits_both_axes():
    ball = Body(Circle(10.0), position=(700.0, 500.0), velocity=(4.0, 6.0))

    contain(ball, ARENA)
    assert ball.position == pytest.approx([630.0, 470.0])
    assert ball.velocity == pytest.approx([-4.0, -6.0])


def test_damping_scales_bounce():
    ball = Body(Circle(20.0), position=(100.0, 10.0), velocity=(3.0, -40.0))

    contain(ball, ARENA, damping=0.5)
    assert ball.position == pytest.approx([100.0, 20.0])
    assert ball.velocity == pytest.approx([3.0, 20.0])


def test_inward_velocity_is_kept():
    """A ball already heading back in is only clamped."""
    ball = Body(Circle(20.0), position=(650.0, 100.0), velocity=(-5.0, 0.0))

    contain(ball, ARENA)
    assert ball.position == pytest.approx([620.0, 100.0])
    assert ball.velocity == pytest.approx([-5.0, 0.0])


@pytest.mark.parametrize("position, velocity", [
    ((-5.0, 100.0), (-30.0, 10.0)),
    ((633.3, 471.7), (12.5, 7.25)),
    ((0.1, 0.3), (-1.0, -1.0)),
])
def test_containment_is_idempotent(position, velocity):
    ball = Body(Circle(17.3), position=position, velocity=velocity)

    contain(ball, ARENA, damping=0.8)
    pos_once = ball.position.copy()
    vel_once = ball.velocity.copy()

    contain(ball, ARENA, damping=0.8)
    assert np.array_equal(ball.position, pos_once)
    assert np.array_equal(ball.velocity, vel_once)


def test_offset_arena():
    arena = Boundary(-100.0, 50.0, 100.0, 250.0)
    ball = Body(Circle(10.0), position=(150.0, 0.0), velocity=(1.0, -1.0))

    contain(ball, arena)
    assert ball.position == pytest.approx([90.0, 60.0])
    assert ball.velocity == pytest.approx([-1.0, 1.0])


def test_boundary_geometry():
    assert ARENA.center == pytest.approx([320.0, 240.0])
    assert ARENA.half_extents == pytest.approx([320.0, 240.0])


def test_degenerate_boundary_rejected():
    with pytest.raises(ValueError):
        Boundary(10.0, 0.0, 10.0, 100.0)
    with pytest.raises(ValueError):
        Boundary(0.0, 100.0, 50.0, 0.0)
