from types import SimpleNamespace

import numpy as np
import pytest
from ball_sim.types import Body, Circle, Plane
from ball_sim.collision import (
    circle_circle_contact,
    circle_plane_contact,
    detect_contact,
    penetration_vector,
)


def test_separated_circles_have_no_contact():
    a = Body(Circle(10.0), position=(0.0, 0.0))
    b = Body(Circle(10.0), position=(25.0, 0.0))
    assert circle_circle_contact(a, b) is None
    assert penetration_vector(a, b) is None


def test_circle_contact_normal_and_depth():
    a = Body(Circle(10.0), position=(0.0, 0.0))
    b = Body(Circle(10.0), position=(0.0, 15.0))

    c = detect_contact(a, b)
    assert c is not None
    assert c.a is a and c.b is b
    # Normal runs a -> b, depth positive when overlapping
    assert c.normal == pytest.approx([0.0, 1.0])
    assert c.penetration == pytest.approx(5.0)
    # The penetration vector moves a away from b
    assert c.vector == pytest.approx([0.0, -5.0])


def test_penetration_vector_is_antisymmetric():
    a = Body(Circle(6.0), position=(1.0, 2.0))
    b = Body(Circle(9.0), position=(8.0, 5.0))

    ab = penetration_vector(a, b)
    ba = penetration_vector(b, a)
    assert ab == pytest.approx(-ba)


def test_coincident_circles_use_fallback_normal():
    """Two balls spawned on the same spot still get a finite push."""
    a = Body(Circle(10.0), position=(50.0, 50.0))
    b = Body(Circle(5.0), position=(50.0, 50.0))

    c = detect_contact(a, b)
    assert c is not None
    assert np.all(np.isfinite(c.vector))
    assert np.linalg.norm(c.normal) == pytest.approx(1.0)
    assert c.penetration == pytest.approx(15.0)


def test_circle_above_floor_not_touching():
    floor = Body(Plane(np.pi / 2), position=(0.0, 0.0))
    ball = Body(Circle(10.0), position=(3.0, 50.0))
    assert circle_plane_contact(ball, floor) is None


def test_circle_on_floor_contact():
    floor = Body(Plane(np.pi / 2), position=(0.0, 0.0))
    ball = Body(Circle(10.0), position=(3.0, 4.0))

    vec = penetration_vector(ball, floor)
    assert vec is not None
    # Pushed straight up out of the floor by the overlap depth
    assert vec == pytest.approx([0.0, 6.0], abs=1e-9)


def test_tilted_plane_contact():
    # Line through the origin with normal (1, 1)/√2
    plane = Body(Plane(np.pi / 4), position=(0.0, 0.0))
    ball = Body(Circle(2.0), position=(1.0, 1.0))

    c = detect_contact(ball, plane)
    assert c is not None
    dist = np.sqrt(2.0)
    assert c.penetration == pytest.approx(2.0 - dist)
    assert c.vector == pytest.approx(np.array([1.0, 1.0]) / dist * (2.0 - dist))


def test_plane_is_two_sided():
    floor = Body(Plane(np.pi / 2), position=(0.0, 0.0))
    ball = Body(Circle(10.0), position=(0.0, -4.0))

    vec = penetration_vector(ball, floor)
    assert vec == pytest.approx([0.0, -6.0], abs=1e-9)


def test_center_on_plane_uses_plane_normal():
    floor = Body(Plane(np.pi / 2), position=(0.0, 0.0))
    ball = Body(Circle(10.0), position=(5.0, 0.0))

    vec = penetration_vector(ball, floor)
    assert np.all(np.isfinite(vec))
    assert vec == pytest.approx([0.0, 10.0], abs=1e-9)


def test_plane_first_flips_the_vector():
    floor = Body(Plane(np.pi / 2), position=(0.0, 0.0))
    ball = Body(Circle(10.0), position=(0.0, 4.0))

    assert penetration_vector(floor, ball) == pytest.approx(-penetration_vector(ball, floor))


def test_planes_never_touch():
    p = Body(Plane(0.0), position=(0.0, 0.0))
    q = Body(Plane(np.pi / 2), position=(0.0, 0.0))
    assert detect_contact(p, q) is None


def test_unsupported_shape_pair():
    ball = Body(Circle(1.0))
    odd = SimpleNamespace(shape=object(), position=np.zeros(2))
    with pytest.raises(TypeError):
        detect_contact(ball, odd)


def test_epsilon_tolerance():
    a = Body(Circle(10.0), position=(0.0, 0.0))
    b = Body(Circle(10.0), position=(20.5, 0.0))

    assert detect_contact(a, b) is None
    assert detect_contact(a, b, eps=1.0) is not None
