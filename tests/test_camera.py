import math

import pytest

from whitted import Camera, InvalidViewConfiguration, Transform, Vector3

from conftest import SQRT2_2, assert_vec


def test_construction():
    c = Camera(160, 120, math.pi / 2)
    assert c.hsize == 160
    assert c.vsize == 120
    assert c.field_of_view == math.pi / 2
    assert c.transform.is_identity()


@pytest.mark.parametrize("hsize, vsize", [(200, 125), (125, 200)])
def test_pixel_size(hsize, vsize):
    assert Camera(hsize, vsize, math.pi / 2).pixel_size == pytest.approx(0.01)


def test_ray_through_center():
    r = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
    assert_vec(r.origin, (0, 0, 0))
    assert_vec(r.direction, (0, 0, -1))


def test_ray_through_corner():
    r = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
    assert_vec(r.origin, (0, 0, 0))
    assert_vec(r.direction, (0.66519, 0.33259, -0.66851))


def test_ray_from_transformed_camera():
    c = Camera(201, 101, math.pi / 2, Transform.rotation_y(math.pi / 4) @ Transform.translation(0, -2, 5))
    r = c.ray_for_pixel(100, 50)
    assert_vec(r.origin, (0, 2, -5))
    assert_vec(r.direction, (SQRT2_2, 0, -SQRT2_2))


def test_looking_at():
    c = Camera.looking_at(11, 11, math.pi / 2, Vector3(0, 0, -5), Vector3(0, 0, 0))
    r = c.ray_for_pixel(5, 5)
    assert_vec(r.origin, (0, 0, -5))
    assert_vec(r.direction, (0, 0, 1))


@pytest.mark.parametrize("hsize, vsize, fov", [
    (0, 10, math.pi / 2),
    (10, -1, math.pi / 2),
    (10.5, 10, math.pi / 2),
    (10, 10, 0),
    (10, 10, math.pi),
])
def test_invalid_configuration(hsize, vsize, fov):
    with pytest.raises(InvalidViewConfiguration):
        Camera(hsize, vsize, fov)
