import numpy as np
import pytest
from ball_sim.camera import Camera


def test_screen_camera_flips_y():
    cam = Camera((0.0, 480.0), 1.0).invert_v()

    assert cam.project((100.0, 100.0)) == pytest.approx([100.0, 380.0])
    assert cam.project((0.0, 0.0)) == pytest.approx([0.0, 480.0])
    assert cam.scale(20.0) == pytest.approx(20.0)


def test_scale_and_offset():
    cam = Camera((10.0, -5.0), 2.0)

    assert cam.project((3.0, 4.0)) == pytest.approx([16.0, 3.0])
    assert cam.scale(7.5) == pytest.approx(15.0)


def test_double_inversion_restores():
    cam = Camera((0.0, 0.0), 3.0)
    cam.invert_h().invert_v().invert_v().invert_h()

    assert cam.scale_v == pytest.approx([3.0, 3.0])


def test_inversion_order_independent():
    a = Camera((0.0, 0.0), 1.5).invert_h().invert_v()
    b = Camera((0.0, 0.0), 1.5).invert_v().invert_h()
    assert np.array_equal(a.scale_v, b.scale_v)


def test_set_scale_keeps_flips():
    cam = Camera((0.0, 0.0), 1.0).invert_v()
    cam.set_scale(4.0)

    assert cam.scale_v == pytest.approx([4.0, -4.0])
    assert cam.scale(2.0) == pytest.approx(8.0)


def test_set_position():
    cam = Camera()
    cam.set_position((5.0, 6.0))
    assert cam.project((1.0, 1.0)) == pytest.approx([6.0, 7.0])


@pytest.mark.parametrize("scale", [0.5, 1.0, 2.5, -3.0])
def test_projection_round_trip(scale):
    cam = Camera((17.0, 480.0), scale).invert_v().invert_h()
    p = np.array([123.4, -56.7])

    assert cam.unproject(cam.project(p)) == pytest.approx(p)
    assert cam.unscale(cam.scale(42.0)) == pytest.approx(42.0)


def test_zero_scale_has_no_inverse():
    cam = Camera((0.0, 0.0), 0.0)
    with pytest.raises(ZeroDivisionError):
        cam.unproject((1.0, 1.0))
